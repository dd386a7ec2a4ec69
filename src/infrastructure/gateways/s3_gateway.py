"""S3 bucket gateway implementation - Infrastructure layer."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from src.domain.entities.errors import CloudServiceError
from src.domain.gateways.bucket_gateway import IBucketGateway
from src.infrastructure.gateways.aws import Boto3Gateway
from src.shared import get_logger

logger = get_logger(__name__)

ENCRYPTION_NOT_CONFIGURED = "ServerSideEncryptionConfigurationNotFoundError"
POLICY_NOT_CONFIGURED = "NoSuchBucketPolicy"


class S3BucketGateway(Boto3Gateway, IBucketGateway):
    """Reads bucket encryption configuration and bucket policy."""

    service_name = "s3"

    async def get_encryption_algorithms(self, bucket: str) -> Optional[List[str]]:
        response = await self._call(
            "get_bucket_encryption",
            tolerate=(ENCRYPTION_NOT_CONFIGURED,),
            Bucket=bucket,
        )
        if response is None:
            logger.info("s3.bucket_encryption.not_configured", bucket=bucket)
            return None

        rules = response.get("ServerSideEncryptionConfiguration", {}).get("Rules", [])
        algorithms = [
            rule.get("ApplyServerSideEncryptionByDefault", {}).get("SSEAlgorithm", "")
            for rule in rules
        ]
        logger.info("s3.bucket_encryption.rules", bucket=bucket, algorithms=algorithms)
        return algorithms

    async def get_policy(self, bucket: str) -> Optional[Dict[str, Any]]:
        response = await self._call(
            "get_bucket_policy",
            tolerate=(POLICY_NOT_CONFIGURED,),
            Bucket=bucket,
        )
        if response is None:
            return None

        try:
            return json.loads(response.get("Policy") or "{}")
        except json.JSONDecodeError as e:
            raise CloudServiceError(
                service=self.service_name,
                operation="get_bucket_policy",
                message=f"Bucket policy is not valid JSON: {e}",
                details={"bucket": bucket},
            ) from e

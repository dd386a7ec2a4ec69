"""DynamoDB table gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Optional

from src.domain.gateways.table_gateway import ITableGateway
from src.infrastructure.gateways.aws import Boto3Gateway
from src.shared import get_logger

logger = get_logger(__name__)


class DynamoDBTableGateway(Boto3Gateway, ITableGateway):
    """Reads table encryption and backup metadata."""

    service_name = "dynamodb"

    async def get_encryption_status(self, table_name: str) -> Optional[str]:
        response = await self._call("describe_table", TableName=table_name) or {}

        sse = response.get("Table", {}).get("SSEDescription")
        status = sse.get("Status") if sse else None
        logger.info("dynamodb.describe_table.sse", table=table_name, status=status)
        return status

    async def get_continuous_backups_status(self, table_name: str) -> Optional[str]:
        response = (
            await self._call("describe_continuous_backups", TableName=table_name) or {}
        )

        description = response.get("ContinuousBackupsDescription", {})
        status = description.get("ContinuousBackupsStatus")
        logger.info(
            "dynamodb.describe_continuous_backups.status",
            table=table_name,
            status=status,
        )
        return status

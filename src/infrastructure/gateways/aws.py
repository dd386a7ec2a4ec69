"""
Shared plumbing for boto3-backed gateways.

boto3 clients are blocking; every call is pushed to a worker thread so
that probes running on the event loop overlap. SDK errors are translated
into CloudServiceError at this boundary.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Iterable, List, Mapping, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from src.domain.entities.errors import CloudServiceError
from src.infrastructure.gateways.pagination import collect_pages
from src.shared import get_logger

logger = get_logger(__name__)


def create_client(
    service_name: str,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    connect_timeout: float = 10.0,
    read_timeout: float = 60.0,
    max_attempts: Optional[int] = None,
) -> Any:
    """Build a boto3 client; endpoint_url is for local emulators."""

    options: Dict[str, Any] = {
        "connect_timeout": connect_timeout,
        "read_timeout": read_timeout,
    }
    if max_attempts is not None:
        options["retries"] = {"total_max_attempts": max_attempts, "mode": "standard"}

    return boto3.client(
        service_name,
        region_name=region_name or None,
        endpoint_url=endpoint_url or None,
        config=Config(**options),
    )


def error_code(error: BaseException) -> Optional[str]:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code")
    return None


class Boto3Gateway:
    """Base class wrapping a single boto3 client."""

    service_name = "aws"

    def __init__(self, client: Any):
        self._client = client

    async def _call(
        self,
        operation: str,
        *,
        tolerate: Iterable[str] = (),
        **params: Any,
    ) -> Optional[Mapping[str, Any]]:
        """
        Run one SDK operation.

        Returns None when the call fails with one of the ``tolerate`` error
        codes; every other failure raises CloudServiceError.
        """
        method = getattr(self._client, operation)
        try:
            return await asyncio.to_thread(method, **params)
        except (ClientError, BotoCoreError) as e:
            code = error_code(e)
            if code is not None and code in tolerate:
                logger.info(
                    "aws.call.tolerated_error",
                    service=self.service_name,
                    operation=operation,
                    code=code,
                )
                return None
            raise self._translate(operation, e) from e

    async def _collect(
        self,
        operation: str,
        params: Mapping[str, Any],
        result_key: str,
        token_key: str = "NextToken",
    ) -> List[Any]:
        try:
            return await collect_pages(
                getattr(self._client, operation), params, result_key, token_key
            )
        except (ClientError, BotoCoreError) as e:
            raise self._translate(operation, e) from e

    def _translate(self, operation: str, error: Exception) -> CloudServiceError:
        code = error_code(error)
        message = str(error)
        if isinstance(error, ClientError):
            message = error.response.get("Error", {}).get("Message") or message

        logger.error(
            "aws.call.failed",
            service=self.service_name,
            operation=operation,
            code=code,
            error=message,
        )
        return CloudServiceError(
            service=self.service_name,
            operation=operation,
            message=message,
            code=code,
        )

"""Lambda function gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any

from src.domain.entities.fitness import InvocationResult
from src.domain.gateways.function_gateway import IFunctionGateway
from src.infrastructure.gateways.aws import Boto3Gateway
from src.shared import get_logger

logger = get_logger(__name__)


def _read_payload(payload: Any) -> bytes:
    if payload is None:
        return b""
    if hasattr(payload, "read"):
        payload = payload.read()
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return bytes(payload)


class LambdaFunctionGateway(Boto3Gateway, IFunctionGateway):
    """Invokes functions synchronously (RequestResponse)."""

    service_name = "lambda"

    async def invoke(self, function_id: str, payload: bytes) -> InvocationResult:
        logger.info("lambda.invoke.request", function=function_id)

        response = (
            await self._call(
                "invoke",
                FunctionName=function_id,
                InvocationType="RequestResponse",
                Payload=payload,
            )
            or {}
        )

        result = InvocationResult(
            status_code=int(response.get("StatusCode", 0)),
            payload=_read_payload(response.get("Payload")),
            function_error=response.get("FunctionError"),
        )
        logger.info(
            "lambda.invoke.response",
            function=function_id,
            status_code=result.status_code,
            function_error=result.function_error,
        )
        return result

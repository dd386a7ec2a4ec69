"""Catalog of resource probes contributing to the deployment fitness score."""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional

from src.domain.entities.fitness import ProbeResult
from src.domain.entities.stack import StackResource
from src.domain.gateways.bucket_gateway import IBucketGateway
from src.domain.gateways.compliance_gateway import IComplianceGateway
from src.domain.gateways.function_gateway import IFunctionGateway
from src.domain.gateways.table_gateway import ITableGateway
from src.shared import SMOKE_TEST_PAYLOAD, get_logger

logger = get_logger(__name__)

ResourceProbe = Callable[[StackResource], Awaitable[ProbeResult]]

SMOKE_TEST_POINTS = 1
GREETING_POINTS = 1
GREETING_PREFIX = "Hello"

TABLE_ENCRYPTION_POINTS = 5
TABLE_ENCRYPTION_ACTIVE = frozenset({"ENABLED", "ENABLING"})
TABLE_BACKUP_POINTS = 5

# Points per bucket encryption rule, by default algorithm.
BUCKET_ALGORITHM_POINTS: Dict[str, int] = {
    "AES256": 3,
    "aws:kms": 6,
    "aws:kms:dsse": 6,
}
SECURE_TRANSPORT_POINTS = 5

COMPLIANT_RULE_POINTS = 10


def _extract_greeting(payload: bytes) -> Optional[str]:
    """Return the ``message`` of a function response body, if it has one."""
    try:
        document = json.loads(payload) if payload else None
        body: Any = document
        if isinstance(document, dict) and "body" in document:
            body = document["body"]
            if isinstance(body, str):
                body = json.loads(body)
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None
    message = body.get("message")
    return message if isinstance(message, str) else None


def _as_list(value: Any) -> list:
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


def _denies_insecure_transport(statement: Dict[str, Any]) -> bool:
    if statement.get("Effect") != "Deny":
        return False
    condition = statement.get("Condition", {}).get("Bool", {})
    values = _as_list(condition.get("aws:SecureTransport"))
    return any(str(value).lower() == "false" for value in values)


class ProbeCatalog:
    """Resource-typed probes. Each returns a ProbeResult or raises."""

    def __init__(
        self,
        function_gateway: IFunctionGateway,
        table_gateway: ITableGateway,
        bucket_gateway: IBucketGateway,
        compliance_gateway: IComplianceGateway,
        *,
        extended_checks: bool = False,
    ) -> None:
        self._function_gateway = function_gateway
        self._table_gateway = table_gateway
        self._bucket_gateway = bucket_gateway
        self._compliance_gateway = compliance_gateway
        self._extended_checks = extended_checks

        self._probes: Dict[str, ResourceProbe] = {
            "smoke_test": lambda r: self.test_function(r.physical_id),
            "table_encryption": lambda r: self.test_table_encryption(r.physical_id),
            "table_backup": lambda r: self.test_table_backup(r.physical_id),
            "bucket_encryption_at_rest": (
                lambda r: self.test_bucket_encryption_at_rest(r.physical_id)
            ),
            "bucket_encryption_in_transit": (
                lambda r: self.test_bucket_encryption_in_transit(r.physical_id)
            ),
            "compliance": lambda r: self.check_compliance(
                r.resource_type, r.physical_id
            ),
        }

    @property
    def names(self) -> Iterable[str]:
        return self._probes.keys()

    def resolve(self, name: str) -> ResourceProbe:
        return self._probes[name]

    async def test_function(self, function_id: str) -> ProbeResult:
        """
        Smoke test a function with a fixed payload.

        A 2xx invocation earns a point and a greeting message earns another.
        Any other status is a functional failure: the result is marked as not
        passed instead of raising.
        """
        response = await self._function_gateway.invoke(function_id, SMOKE_TEST_PAYLOAD)

        if not response.succeeded:
            logger.warning(
                "probe.smoke_test.failed",
                function=function_id,
                status_code=response.status_code,
            )
            return ProbeResult(score=0, passed=False)

        score = SMOKE_TEST_POINTS
        message = _extract_greeting(response.payload)
        if message is not None and message.startswith(GREETING_PREFIX):
            score += GREETING_POINTS

        logger.info("probe.smoke_test.completed", function=function_id, score=score)
        return ProbeResult(score=score)

    async def test_table_encryption(self, table: str) -> ProbeResult:
        status = await self._table_gateway.get_encryption_status(table)
        if status in TABLE_ENCRYPTION_ACTIVE:
            return ProbeResult(score=TABLE_ENCRYPTION_POINTS)
        return ProbeResult(score=0)

    async def test_table_backup(self, table: str) -> ProbeResult:
        if not self._extended_checks:
            return ProbeResult(score=0, skipped=True)

        status = await self._table_gateway.get_continuous_backups_status(table)
        if status == "ENABLED":
            return ProbeResult(score=TABLE_BACKUP_POINTS)
        return ProbeResult(score=0)

    async def test_bucket_encryption_at_rest(self, bucket: str) -> ProbeResult:
        algorithms = await self._bucket_gateway.get_encryption_algorithms(bucket)
        if algorithms is None:
            return ProbeResult(score=0)

        score = sum(BUCKET_ALGORITHM_POINTS.get(alg, 0) for alg in algorithms)
        return ProbeResult(score=score)

    async def test_bucket_encryption_in_transit(self, bucket: str) -> ProbeResult:
        if not self._extended_checks:
            return ProbeResult(score=0, skipped=True)

        policy = await self._bucket_gateway.get_policy(bucket)
        if not policy:
            return ProbeResult(score=0)

        statements = _as_list(policy.get("Statement"))
        if any(_denies_insecure_transport(s) for s in statements):
            return ProbeResult(score=SECURE_TRANSPORT_POINTS)
        return ProbeResult(score=0)

    async def check_compliance(self, resource_type: str, resource_id: str) -> ProbeResult:
        evaluations = await self._compliance_gateway.list_compliant_evaluations(
            resource_type, resource_id
        )
        logger.info(
            "probe.compliance.completed",
            resource_type=resource_type,
            resource_id=resource_id,
            compliant_rules=len(evaluations),
        )
        return ProbeResult(score=COMPLIANT_RULE_POINTS * len(evaluations))

"""Publishes the fitness outcome to the orchestrator and the metrics sink."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from src.domain.entities.errors import ProbeConfigurationError
from src.domain.entities.fitness import DeploymentStatus
from src.domain.gateways.deployment_gateway import IDeploymentGateway
from src.domain.gateways.metrics_gateway import IMetricsGateway
from src.domain.ports.outcome_reporter import IOutcomeReporter
from src.shared import get_logger

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OutcomeReporter(IOutcomeReporter):
    """Reports the verdict and emits the score. Failures propagate."""

    def __init__(
        self,
        deployment_gateway: IDeploymentGateway,
        metrics_gateway: IMetricsGateway,
        namespace: str,
        metric_name: str,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._deployment_gateway = deployment_gateway
        self._metrics_gateway = metrics_gateway
        self._namespace = namespace
        self._metric_name = metric_name
        self._clock = clock

    async def report_execution_status(
        self,
        deployment_id: Optional[str],
        lifecycle_execution_id: Optional[str],
        status: DeploymentStatus,
    ) -> None:
        if deployment_id is None:
            logger.info("outcome.status.no_deployment", status=status.value)
            return

        logger.info(
            "outcome.status.reporting",
            deployment_id=deployment_id,
            lifecycle_execution_id=lifecycle_execution_id,
            status=status.value,
        )
        await self._deployment_gateway.put_lifecycle_status(
            deployment_id, lifecycle_execution_id or "", status
        )

    async def put_metric(self, value: float) -> None:
        if not self._namespace:
            raise ProbeConfigurationError("Namespace")
        if not self._metric_name:
            raise ProbeConfigurationError("MetricName")

        logger.info(
            "outcome.metric.publishing",
            namespace=self._namespace,
            metric_name=self._metric_name,
            value=value,
        )
        await self._metrics_gateway.put_metric(
            self._namespace, self._metric_name, value, self._clock()
        )

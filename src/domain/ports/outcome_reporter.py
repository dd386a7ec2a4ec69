"""Domain service abstraction for publishing a fitness outcome."""

from __future__ import annotations

from typing import Optional, Protocol

from src.domain.entities.fitness import DeploymentStatus


class IOutcomeReporter(Protocol):
    """Side channels notified once per invocation."""

    async def report_execution_status(
        self,
        deployment_id: Optional[str],
        lifecycle_execution_id: Optional[str],
        status: DeploymentStatus,
    ) -> None:
        """Send the verdict to the deployment orchestrator."""
        ...

    async def put_metric(self, value: float) -> None:
        """Emit the fitness score to the metrics sink."""
        ...

"""Infrastructure implementation of the deployment fitness evaluation."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from time import perf_counter
from typing import Awaitable, Callable, Dict, Iterable, List, Tuple

from src.domain.entities.errors import ProbeConfigurationError
from src.domain.entities.fitness import (
    DeploymentContext,
    FitnessReport,
    ProbeOutcome,
    ProbeResult,
)
from src.domain.entities.stack import ResourceKind, StackResource
from src.domain.gateways.stack_gateway import IStackGateway
from src.domain.ports.fitness_evaluator import IFitnessEvaluator
from src.infrastructure.services.probe_catalog import ProbeCatalog
from src.shared import get_logger

logger = get_logger(__name__)

SELF_TEST_PROBE = "smoke_test"

# Probes run for each resource kind. Kinds missing here get no probes.
PROBE_SETS: Dict[ResourceKind, Tuple[str, ...]] = {
    ResourceKind.BUCKET: (
        "bucket_encryption_at_rest",
        "bucket_encryption_in_transit",
        "compliance",
    ),
    ResourceKind.TABLE: ("table_encryption", "table_backup", "compliance"),
    ResourceKind.FUNCTION: ("smoke_test", "compliance"),
}


@dataclass(frozen=True, slots=True)
class PlannedProbe:
    """A probe bound to the resource it will run against."""

    probe: str
    resource_type: str
    resource_id: str
    run: Callable[[], Awaitable[ProbeResult]]


class FitnessEvaluationService(IFitnessEvaluator):
    """Discover a stack, probe its resources concurrently and score the result."""

    def __init__(
        self,
        stack_gateway: IStackGateway,
        probe_catalog: ProbeCatalog,
        stack_name: str,
        *,
        tolerate_probe_errors: bool = False,
    ) -> None:
        self._stack_gateway = stack_gateway
        self._catalog = probe_catalog
        self._stack_name = stack_name
        self._tolerate_probe_errors = tolerate_probe_errors

    async def evaluate(self, context: DeploymentContext) -> FitnessReport:
        """
        Run the self-test plus every probe applicable to the stack's resources.

        By default any probe error aborts the evaluation once all probes have
        settled. With ``tolerate_probe_errors`` a failing probe contributes
        nothing and marks the report as failed instead.
        """
        if not self._stack_name:
            raise ProbeConfigurationError("StackId")

        start = perf_counter()
        self_test = self._self_test(context)
        # Started ahead of discovery so it overlaps the stack listing.
        self_test_task = asyncio.create_task(self_test.run())

        try:
            resources = await self._stack_gateway.list_stack_resources(self._stack_name)
        except BaseException:
            self_test_task.cancel()
            raise

        planned = self.plan(resources, context.current_function_identity)
        tasks = [self_test_task]
        tasks.extend(asyncio.create_task(probe.run()) for probe in planned)

        logger.info(
            "fitness.probes.started",
            stack=self._stack_name,
            resources=len(resources),
            probes=len(tasks),
        )

        results = await asyncio.gather(*tasks, return_exceptions=True)
        outcomes = self._collect([self_test, *planned], results)

        report = FitnessReport.from_outcomes(outcomes)
        logger.info(
            "fitness.evaluated",
            stack=self._stack_name,
            total_score=report.total_score,
            status=report.status.value,
            probes=len(outcomes),
            duration_ms=(perf_counter() - start) * 1000,
        )
        return report

    def plan(
        self, resources: Iterable[StackResource], current_function_identity: str
    ) -> List[PlannedProbe]:
        """Select the probes for each resource by its kind."""
        planned: List[PlannedProbe] = []

        for resource in resources:
            names = PROBE_SETS.get(resource.kind, ())
            if not names:
                logger.debug(
                    "fitness.resource.unsupported",
                    resource_type=resource.resource_type,
                    resource_id=resource.physical_id,
                )
                continue

            for name in names:
                if (
                    name == SELF_TEST_PROBE
                    and resource.physical_id == current_function_identity
                ):
                    logger.info(
                        "fitness.smoke_test.self_invocation_skipped",
                        function=resource.physical_id,
                    )
                    continue
                planned.append(self._bind(name, resource))

        return planned

    def _self_test(self, context: DeploymentContext) -> PlannedProbe:
        target = context.current_function_version_identity
        return PlannedProbe(
            probe=SELF_TEST_PROBE,
            resource_type=ResourceKind.FUNCTION.value,
            resource_id=target,
            run=lambda: self._catalog.test_function(target),
        )

    def _bind(self, name: str, resource: StackResource) -> PlannedProbe:
        probe = self._catalog.resolve(name)
        return PlannedProbe(
            probe=name,
            resource_type=resource.resource_type,
            resource_id=resource.physical_id,
            run=lambda: probe(resource),
        )

    def _collect(
        self,
        planned: List[PlannedProbe],
        results: List[ProbeResult | BaseException],
    ) -> List[ProbeOutcome]:
        outcomes: List[ProbeOutcome] = []
        first_error: BaseException | None = None

        for probe, result in zip(planned, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.error(
                    "fitness.probe.failed",
                    probe=probe.probe,
                    resource_type=probe.resource_type,
                    resource_id=probe.resource_id,
                    error=str(result),
                )
                if first_error is None:
                    first_error = result
                outcomes.append(
                    ProbeOutcome(
                        probe=probe.probe,
                        resource_type=probe.resource_type,
                        resource_id=probe.resource_id,
                        error=str(result) or type(result).__name__,
                    )
                )
                continue

            logger.debug(
                "fitness.probe.completed",
                probe=probe.probe,
                resource_id=probe.resource_id,
                score=result.score,
                skipped=result.skipped,
                passed=result.passed,
            )
            outcomes.append(
                ProbeOutcome(
                    probe=probe.probe,
                    resource_type=probe.resource_type,
                    resource_id=probe.resource_id,
                    result=result,
                )
            )

        if first_error is not None and not self._tolerate_probe_errors:
            raise first_error
        return outcomes

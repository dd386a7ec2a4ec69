"""Use case for the pre-traffic lifecycle hook."""

from src.application.dtos.fitness_dto import FitnessReportDTO
from src.domain.entities.fitness import DeploymentContext
from src.domain.ports.fitness_evaluator import IFitnessEvaluator
from src.domain.ports.outcome_reporter import IOutcomeReporter
from src.shared import get_logger

logger = get_logger(__name__)


class RunPreTrafficHookUseCase:
    """Evaluate deployment fitness, then report the verdict and the score."""

    def __init__(
        self,
        fitness_evaluator: IFitnessEvaluator,
        outcome_reporter: IOutcomeReporter,
    ) -> None:
        self._fitness_evaluator = fitness_evaluator
        self._outcome_reporter = outcome_reporter

    async def execute(self, context: DeploymentContext) -> FitnessReportDTO:
        try:
            report = await self._fitness_evaluator.evaluate(context)

            logger.info(
                "pre_traffic_hook.evaluated",
                fitness=report.total_score,
                deployment_status=report.status.value,
            )

            await self._outcome_reporter.report_execution_status(
                context.deployment_id,
                context.lifecycle_execution_id,
                report.status,
            )
            await self._outcome_reporter.put_metric(report.total_score)
        except Exception as e:
            logger.error(
                "pre_traffic_hook.failed",
                deployment_id=context.deployment_id,
                error=str(e),
                exc_info=e,
            )
            raise

        return FitnessReportDTO.from_domain(report)

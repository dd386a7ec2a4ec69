"""CodeDeploy lifecycle gateway implementation - Infrastructure layer."""

from __future__ import annotations

from src.domain.entities.fitness import DeploymentStatus
from src.domain.gateways.deployment_gateway import IDeploymentGateway
from src.infrastructure.gateways.aws import Boto3Gateway
from src.shared import get_logger

logger = get_logger(__name__)


class CodeDeployGateway(Boto3Gateway, IDeploymentGateway):
    """Reports lifecycle hook results to CodeDeploy."""

    service_name = "codedeploy"

    async def put_lifecycle_status(
        self,
        deployment_id: str,
        lifecycle_execution_id: str,
        status: DeploymentStatus,
    ) -> None:
        response = await self._call(
            "put_lifecycle_event_hook_execution_status",
            deploymentId=deployment_id,
            lifecycleEventHookExecutionId=lifecycle_execution_id,
            status=status.value,
        )
        logger.info(
            "codedeploy.lifecycle_status.reported",
            deployment_id=deployment_id,
            status=status.value,
            acknowledged_execution_id=(response or {}).get(
                "lifecycleEventHookExecutionId"
            ),
        )

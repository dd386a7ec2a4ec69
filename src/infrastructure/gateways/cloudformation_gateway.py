"""CloudFormation stack gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import List

from src.domain.entities.stack import StackResource
from src.domain.gateways.stack_gateway import IStackGateway
from src.infrastructure.gateways.aws import Boto3Gateway
from src.shared import get_logger

logger = get_logger(__name__)


class CloudFormationStackGateway(Boto3Gateway, IStackGateway):
    """Lists stack resources through the CloudFormation API."""

    service_name = "cloudformation"

    async def list_stack_resources(self, stack_name: str) -> List[StackResource]:
        logger.info("cloudformation.list_stack_resources.request", stack=stack_name)

        summaries = await self._collect(
            "list_stack_resources",
            {"StackName": stack_name},
            "StackResourceSummaries",
        )
        resources = [
            StackResource(
                resource_type=summary.get("ResourceType", ""),
                physical_id=summary.get("PhysicalResourceId", ""),
                logical_id=summary.get("LogicalResourceId", ""),
            )
            for summary in summaries
        ]

        logger.info(
            "cloudformation.list_stack_resources.response",
            stack=stack_name,
            count=len(resources),
        )
        return resources

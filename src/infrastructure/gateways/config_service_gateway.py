"""AWS Config compliance gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List

from src.domain.gateways.compliance_gateway import IComplianceGateway
from src.infrastructure.gateways.aws import Boto3Gateway
from src.shared import get_logger

logger = get_logger(__name__)

COMPLIANT = "COMPLIANT"


class ConfigServiceComplianceGateway(Boto3Gateway, IComplianceGateway):
    """Reads rule evaluation results from AWS Config."""

    service_name = "config"

    async def list_compliant_evaluations(
        self, resource_type: str, resource_id: str
    ) -> List[Dict[str, Any]]:
        logger.info(
            "config.compliance.request",
            resource_type=resource_type,
            resource_id=resource_id,
        )
        return await self._collect(
            "get_compliance_details_by_resource",
            {
                "ComplianceTypes": [COMPLIANT],
                "ResourceType": resource_type,
                "ResourceId": resource_id,
            },
            "EvaluationResults",
        )

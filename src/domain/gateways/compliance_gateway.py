"""
Domain Gateway - Compliance

This module defines the gateway interface for reading compliance-rule
evaluation results.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class IComplianceGateway(ABC):
    """Interface for the compliance evaluation service."""

    @abstractmethod
    async def list_compliant_evaluations(
        self, resource_type: str, resource_id: str
    ) -> List[Dict[str, Any]]:
        """
        List every evaluation result classified as compliant for a resource.

        Args:
            resource_type: Resource type tag (e.g. "AWS::S3::Bucket")
            resource_id: Physical id of the resource

        Returns:
            Evaluation results across all result pages

        Raises:
            CloudServiceError: When the evaluations cannot be listed
        """
        pass

"""
Domain Gateway - Deployment

This module defines the gateway interface for reporting a lifecycle hook
verdict to the deployment orchestrator.
"""

from abc import ABC, abstractmethod

from src.domain.entities.fitness import DeploymentStatus


class IDeploymentGateway(ABC):
    """Interface for the deployment orchestrator."""

    @abstractmethod
    async def put_lifecycle_status(
        self,
        deployment_id: str,
        lifecycle_execution_id: str,
        status: DeploymentStatus,
    ) -> None:
        """
        Report the outcome of a lifecycle hook execution.

        Raises:
            CloudServiceError: When the orchestrator rejects the report
        """
        pass

"""
Domain Gateway - Function

This module defines the gateway interface for invoking deployed functions.
"""

from abc import ABC, abstractmethod

from src.domain.entities.fitness import InvocationResult


class IFunctionGateway(ABC):
    """Interface for synchronous function invocation."""

    @abstractmethod
    async def invoke(self, function_id: str, payload: bytes) -> InvocationResult:
        """
        Invoke a function and wait for its response.

        Args:
            function_id: Function name, ARN or qualified name (name:version)
            payload: Raw JSON payload sent as the invocation event

        Returns:
            Status code and payload returned by the invocation

        Raises:
            CloudServiceError: When the invocation request itself fails
        """
        pass

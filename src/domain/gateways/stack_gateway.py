"""
Domain Gateway - Stack

This module defines the gateway interface for discovering the resources
that belong to a deployed stack.
"""

from abc import ABC, abstractmethod
from typing import List

from src.domain.entities.stack import StackResource


class IStackGateway(ABC):
    """Interface for the stack-resource listing service."""

    @abstractmethod
    async def list_stack_resources(self, stack_name: str) -> List[StackResource]:
        """
        List every top-level resource of a stack.

        Nested stacks are reported as a single resource and are not expanded.

        Args:
            stack_name: Name or id of the stack

        Returns:
            The complete list of resources, across all result pages

        Raises:
            CloudServiceError: When the stack cannot be listed
        """
        pass

"""
Domain Gateway - Table

This module defines the gateway interface for reading table metadata.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ITableGateway(ABC):
    """Interface for table metadata lookups."""

    @abstractmethod
    async def get_encryption_status(self, table_name: str) -> Optional[str]:
        """
        Return the server-side encryption status of a table.

        Returns:
            Status string (e.g. "ENABLED"), or None when the table reports
            no encryption description

        Raises:
            CloudServiceError: When the table cannot be described
        """
        pass

    @abstractmethod
    async def get_continuous_backups_status(self, table_name: str) -> Optional[str]:
        """
        Return the continuous backups status of a table.

        Returns:
            Status string (e.g. "ENABLED"), or None when not reported

        Raises:
            CloudServiceError: When the backup description cannot be read
        """
        pass

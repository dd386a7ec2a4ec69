"""
Domain Gateway - Bucket

This module defines the gateway interface for object-storage bucket
configuration lookups.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class IBucketGateway(ABC):
    """Interface for bucket configuration lookups."""

    @abstractmethod
    async def get_encryption_algorithms(self, bucket: str) -> Optional[List[str]]:
        """
        Return the default encryption algorithm of every encryption rule.

        Returns:
            One algorithm per configured rule, or None when the bucket has no
            encryption configuration at all

        Raises:
            CloudServiceError: For any failure other than a missing configuration
        """
        pass

    @abstractmethod
    async def get_policy(self, bucket: str) -> Optional[Dict[str, Any]]:
        """
        Return the parsed bucket policy document.

        Returns:
            The policy document, or None when the bucket has no policy

        Raises:
            CloudServiceError: For any failure other than a missing policy
        """
        pass

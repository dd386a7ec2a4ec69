"""
Domain Gateway - Metrics

This module defines the gateway interface for the metrics sink.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class IMetricsGateway(ABC):
    """Interface for metric ingestion."""

    @abstractmethod
    async def put_metric(
        self, namespace: str, metric_name: str, value: float, timestamp: datetime
    ) -> None:
        """
        Emit a single data point.

        Raises:
            CloudServiceError: When the data point is rejected
        """
        pass

"""CloudWatch metrics gateway implementation - Infrastructure layer."""

from __future__ import annotations

from datetime import datetime

from src.domain.gateways.metrics_gateway import IMetricsGateway
from src.infrastructure.gateways.aws import Boto3Gateway
from src.shared import get_logger

logger = get_logger(__name__)


class CloudWatchMetricsGateway(Boto3Gateway, IMetricsGateway):
    """Publishes custom metric data points."""

    service_name = "cloudwatch"

    async def put_metric(
        self, namespace: str, metric_name: str, value: float, timestamp: datetime
    ) -> None:
        await self._call(
            "put_metric_data",
            Namespace=namespace,
            MetricData=[
                {
                    "MetricName": metric_name,
                    "Timestamp": timestamp,
                    "Value": value,
                }
            ],
        )
        logger.info(
            "cloudwatch.metric.published",
            namespace=namespace,
            metric_name=metric_name,
            value=value,
        )

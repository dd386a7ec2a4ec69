"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for the remote services the fitness gate talks to. Specific
implementations are provided by the infrastructure layer.
"""

from .bucket_gateway import IBucketGateway
from .compliance_gateway import IComplianceGateway
from .deployment_gateway import IDeploymentGateway
from .function_gateway import IFunctionGateway
from .metrics_gateway import IMetricsGateway
from .stack_gateway import IStackGateway
from .table_gateway import ITableGateway

__all__ = [
    "IBucketGateway",
    "IComplianceGateway",
    "IDeploymentGateway",
    "IFunctionGateway",
    "IMetricsGateway",
    "IStackGateway",
    "ITableGateway",
]

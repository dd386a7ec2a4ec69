"""
Gateways Package - Infrastructure Layer

This package contains boto3-backed implementations of the gateway
interfaces defined in the domain layer, plus the pagination helper
they share.
"""

from .aws import Boto3Gateway, create_client
from .cloudformation_gateway import CloudFormationStackGateway
from .cloudwatch_gateway import CloudWatchMetricsGateway
from .codedeploy_gateway import CodeDeployGateway
from .config_service_gateway import ConfigServiceComplianceGateway
from .dynamodb_gateway import DynamoDBTableGateway
from .lambda_gateway import LambdaFunctionGateway
from .pagination import collect_pages
from .s3_gateway import S3BucketGateway

__all__ = [
    "Boto3Gateway",
    "create_client",
    "collect_pages",
    "CloudFormationStackGateway",
    "CloudWatchMetricsGateway",
    "CodeDeployGateway",
    "ConfigServiceComplianceGateway",
    "DynamoDBTableGateway",
    "LambdaFunctionGateway",
    "S3BucketGateway",
]

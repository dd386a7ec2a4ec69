"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
wiring the boto3 clients, gateways, probe services and the
hook use case together.
"""

from dependency_injector import containers, providers

from src.application.use_cases.pre_traffic_hook_use_case import (
    RunPreTrafficHookUseCase,
)
from src.infrastructure.gateways import (
    CloudFormationStackGateway,
    CloudWatchMetricsGateway,
    CodeDeployGateway,
    ConfigServiceComplianceGateway,
    DynamoDBTableGateway,
    LambdaFunctionGateway,
    S3BucketGateway,
    create_client,
)
from src.infrastructure.services import (
    FitnessEvaluationService,
    OutcomeReporter,
    ProbeCatalog,
)
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _aws_client(
    service_name: str, aws: providers.ConfigurationOption
) -> providers.Singleton:
    return providers.Singleton(
        create_client,
        service_name,
        region_name=aws.region,
        endpoint_url=aws.endpoint_url,
        connect_timeout=aws.connect_timeout,
        read_timeout=aws.read_timeout,
        max_attempts=aws.max_attempts,
    )


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    # Settings
    config = providers.Configuration()

    # Infrastructure - SDK clients
    cloudformation_client = _aws_client("cloudformation", config.aws)
    lambda_client = _aws_client("lambda", config.aws)
    dynamodb_client = _aws_client("dynamodb", config.aws)
    s3_client = _aws_client("s3", config.aws)
    config_service_client = _aws_client("config", config.aws)
    codedeploy_client = _aws_client("codedeploy", config.aws)
    cloudwatch_client = _aws_client("cloudwatch", config.aws)

    # Gateways
    stack_gateway = providers.Singleton(
        CloudFormationStackGateway, client=cloudformation_client
    )
    function_gateway = providers.Singleton(LambdaFunctionGateway, client=lambda_client)
    table_gateway = providers.Singleton(DynamoDBTableGateway, client=dynamodb_client)
    bucket_gateway = providers.Singleton(S3BucketGateway, client=s3_client)
    compliance_gateway = providers.Singleton(
        ConfigServiceComplianceGateway, client=config_service_client
    )
    deployment_gateway = providers.Singleton(CodeDeployGateway, client=codedeploy_client)
    metrics_gateway = providers.Singleton(
        CloudWatchMetricsGateway, client=cloudwatch_client
    )

    # Services
    probe_catalog = providers.Singleton(
        ProbeCatalog,
        function_gateway=function_gateway,
        table_gateway=table_gateway,
        bucket_gateway=bucket_gateway,
        compliance_gateway=compliance_gateway,
        extended_checks=config.probes.extended_checks,
    )

    fitness_evaluation_service = providers.Singleton(
        FitnessEvaluationService,
        stack_gateway=stack_gateway,
        probe_catalog=probe_catalog,
        stack_name=config.hook.stack_id,
        tolerate_probe_errors=config.probes.tolerate_probe_errors,
    )

    outcome_reporter = providers.Singleton(
        OutcomeReporter,
        deployment_gateway=deployment_gateway,
        metrics_gateway=metrics_gateway,
        namespace=config.hook.namespace,
        metric_name=config.hook.metric_name,
    )

    # Application (use cases)
    run_pre_traffic_hook_use_case = providers.Factory(
        RunPreTrafficHookUseCase,
        fitness_evaluator=fitness_evaluation_service,
        outcome_reporter=outcome_reporter,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.debug("container.initialized", stack=settings.hook.stack_id)
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container

"""
Lambda Entry Point - Main Layer

This module serves as the entry point of the pre-traffic hook function.
It initializes logging, settings and the container once per execution
environment and runs the hook use case for each invocation.
"""

import asyncio
from typing import Any, Optional

from src.application.dtos.fitness_dto import LifecycleHookEventDTO
from src.domain.entities.errors import ProbeConfigurationError
from src.domain.entities.fitness import DeploymentContext
from src.main.config import AppSettings, get_settings
from src.main.container import AppContainer, get_container, init_container
from src.shared import (
    CONNECTIVITY_TEST_EVENT,
    bind_invocation_context,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Configure logging with basic settings first
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

# Get structured logger
logger = get_logger(__name__)


def _container() -> AppContainer:
    try:
        return get_container()
    except RuntimeError:
        return init_container(settings)


def build_deployment_context(
    event: LifecycleHookEventDTO, lambda_context: Any, app_settings: AppSettings
) -> DeploymentContext:
    """Combine the hook event, the runtime context and the configured target."""

    current_version = app_settings.hook.current_version
    if not current_version:
        raise ProbeConfigurationError("CurrentVersion")

    return DeploymentContext(
        current_function_identity=getattr(lambda_context, "function_name", ""),
        current_function_version_identity=current_version,
        deployment_id=event.deployment_id,
        lifecycle_execution_id=event.lifecycle_event_hook_execution_id,
    )


def handler(event: Any, context: Any) -> Optional[Any]:
    """Pre-traffic hook handler invoked by the Lambda runtime."""

    logger.info(
        "pre_traffic_hook.entered",
        function=getattr(context, "function_name", None),
        version=getattr(context, "function_version", None),
        hook_event=event,
    )

    if event == CONNECTIVITY_TEST_EVENT:
        return "ok"

    try:
        hook_event = LifecycleHookEventDTO.model_validate(event or {})
        bind_invocation_context(
            deployment_id=hook_event.deployment_id,
            lifecycle_execution_id=hook_event.lifecycle_event_hook_execution_id,
            request_id=getattr(context, "aws_request_id", None),
        )
        deployment_context = build_deployment_context(hook_event, context, settings)
        use_case = _container().run_pre_traffic_hook_use_case()
        report = asyncio.run(use_case.execute(deployment_context))
    except Exception:
        logger.exception("pre_traffic_hook.aborted")
        raise

    logger.info(
        "pre_traffic_hook.completed",
        fitness=report.total_score,
        deployment_status=report.status.value,
    )
    return report.model_dump(mode="json")

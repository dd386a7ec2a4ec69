"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.env import load_secret_file_variables  # noqa: F401


class HookSettings(BaseSettings):
    """Deployment under test, as wired by the deployment template."""

    stack_id: str = Field(
        default="",
        alias="StackId",
        description="Name or id of the stack whose resources are probed",
    )
    current_version: str = Field(
        default="",
        alias="CurrentVersion",
        description="Qualified name of the function version to smoke test",
    )
    namespace: str = Field(
        default="",
        alias="Namespace",
        description="Metrics namespace the fitness score is published under",
    )
    metric_name: str = Field(
        default="",
        alias="MetricName",
        description="Metric name the fitness score is published as",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", populate_by_name=True
    )


class AwsSettings(BaseSettings):
    """AWS SDK client settings."""

    region: Optional[str] = Field(
        default=None,
        description="AWS region; the Lambda runtime sets AWS_REGION",
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION"),
    )
    endpoint_url: Optional[str] = Field(
        default=None, description="Endpoint override, e.g. a local emulator"
    )
    connect_timeout: float = Field(
        default=10.0, description="SDK connect timeout in seconds"
    )
    read_timeout: float = Field(default=60.0, description="SDK read timeout in seconds")
    max_attempts: Optional[int] = Field(
        default=None,
        description="Total attempts per SDK call; unset keeps the SDK default",
    )

    model_config = SettingsConfigDict(
        env_prefix="AWS_", case_sensitive=False, extra="ignore"
    )


class ProbeSettings(BaseSettings):
    """Probe behaviour switches."""

    tolerate_probe_errors: bool = Field(
        default=False,
        description=(
            "Record probe errors as failed outcomes and still report, "
            "instead of aborting the whole run"
        ),
    )
    extended_checks: bool = Field(
        default=False,
        description="Run the table backup and bucket secure-transport checks",
    )

    model_config = SettingsConfigDict(
        env_prefix="PROBES_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.PRODUCTION, description="Application environment"
    )

    hook: HookSettings = Field(default_factory=HookSettings)
    aws: AwsSettings = Field(default_factory=AwsSettings)
    probes: ProbeSettings = Field(default_factory=ProbeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()

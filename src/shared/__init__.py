"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the hook.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, the
  connectivity test event)
- Structured logging setup
- Resolving secret-file environment variables

It must not depend on Infrastructure or Frameworks.
"""

from .consts import (
    CONNECTIVITY_TEST_EVENT,
    SMOKE_TEST_PAYLOAD,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import (
    bind_invocation_context,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

__all__ = [
    "CONNECTIVITY_TEST_EVENT",
    "SMOKE_TEST_PAYLOAD",
    "EnumEnvironment",
    "EnumLogLevel",
    "bind_invocation_context",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]

"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CloudServiceError(DomainError):
    """Raised when a call to a remote cloud control-plane API fails."""

    def __init__(
        self,
        service: str,
        operation: str,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.service = service
        self.operation = operation
        self.code = code
        merged = {"service": service, "operation": operation, "code": code}
        merged.update(details or {})
        super().__init__(f"{service}.{operation} failed: {message}", merged)


class ProbeConfigurationError(DomainError):
    """Raised when the hook is missing configuration it cannot run without."""

    def __init__(self, setting: str, details: Optional[Dict[str, Any]] = None):
        self.setting = setting
        super().__init__(f"Required setting {setting} is not configured", details)

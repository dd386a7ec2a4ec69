"""
Domain Entities Package

This package contains the core domain entities of the fitness gate.
"""

from .errors import CloudServiceError, DomainError, ProbeConfigurationError
from .fitness import (
    DeploymentContext,
    DeploymentStatus,
    FitnessReport,
    InvocationResult,
    ProbeOutcome,
    ProbeResult,
)
from .stack import ResourceKind, StackResource

__all__ = [
    "StackResource",
    "ResourceKind",
    "ProbeResult",
    "ProbeOutcome",
    "FitnessReport",
    "DeploymentStatus",
    "DeploymentContext",
    "InvocationResult",
    "DomainError",
    "CloudServiceError",
    "ProbeConfigurationError",
]

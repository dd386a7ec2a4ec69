"""
Fitness domain entities.

Value objects produced while evaluating a deployment: individual probe
results, their association with the probed resource, and the aggregated
report handed to the orchestrator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DeploymentStatus(str, Enum):
    """Lifecycle hook verdict understood by the deployment orchestrator."""

    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Contribution of one probe invocation to the fitness score."""

    score: float = 0
    skipped: bool = False
    passed: bool = True

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError(f"Probe score must be non-negative, got {self.score}")


@dataclass(frozen=True, slots=True)
class ProbeOutcome:
    """A probe result (or the error it raised) tied to the probed resource."""

    probe: str
    resource_type: str
    resource_id: str
    result: Optional[ProbeResult] = None
    error: Optional[str] = None

    @property
    def score(self) -> float:
        return self.result.score if self.result is not None else 0

    @property
    def passed(self) -> bool:
        return self.error is None and (self.result is None or self.result.passed)


@dataclass(slots=True)
class FitnessReport:
    """Aggregated fitness for a deployment."""

    total_score: float
    status: DeploymentStatus
    outcomes: List[ProbeOutcome] = field(default_factory=list)

    @classmethod
    def from_outcomes(cls, outcomes: List[ProbeOutcome]) -> "FitnessReport":
        total = sum(outcome.score for outcome in outcomes)
        status = (
            DeploymentStatus.SUCCEEDED
            if all(outcome.passed for outcome in outcomes)
            else DeploymentStatus.FAILED
        )
        return cls(total_score=total, status=status, outcomes=list(outcomes))


@dataclass(frozen=True, slots=True)
class DeploymentContext:
    """Identity of the current invocation, read-only for the whole run."""

    current_function_identity: str
    current_function_version_identity: str
    deployment_id: Optional[str] = None
    lifecycle_execution_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class InvocationResult:
    """Raw outcome of a synchronous function invocation."""

    status_code: int
    payload: bytes = b""
    function_error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return 200 <= self.status_code < 300

"""DTOs for the pre-traffic hook event and the fitness report it produces."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.fitness import DeploymentStatus, FitnessReport, ProbeOutcome


class LifecycleHookEventDTO(BaseModel):
    """Lifecycle hook invocation event sent by the deployment orchestrator."""

    deployment_id: Optional[str] = Field(
        default=None, alias="DeploymentId", description="Deployment identifier"
    )
    lifecycle_event_hook_execution_id: Optional[str] = Field(
        default=None,
        alias="LifecycleEventHookExecutionId",
        description="Lifecycle hook execution identifier",
    )

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "DeploymentId": "d-ABCDEF123",
                "LifecycleEventHookExecutionId": "eyJlbmNyeXB0ZWREYXRhIjoi",
            }
        },
    }


class ProbeOutcomeDTO(BaseModel):
    """Serializable representation of one probe run."""

    probe: str = Field(description="Probe name")
    resource_type: str = Field(description="Type of the probed resource")
    resource_id: str = Field(description="Physical id of the probed resource")
    score: float = Field(description="Contribution to the fitness score")
    skipped: bool = Field(default=False, description="Probe has no real check")
    passed: bool = Field(description="Probe did not signal a functional failure")
    error: Optional[str] = Field(default=None, description="Error raised, if any")

    @classmethod
    def from_domain(cls, outcome: ProbeOutcome) -> "ProbeOutcomeDTO":
        return cls(
            probe=outcome.probe,
            resource_type=outcome.resource_type,
            resource_id=outcome.resource_id,
            score=outcome.score,
            skipped=outcome.result.skipped if outcome.result else False,
            passed=outcome.passed,
            error=outcome.error,
        )


class FitnessReportDTO(BaseModel):
    """Result of a pre-traffic hook run."""

    total_score: float = Field(description="Sum of all probe scores")
    status: DeploymentStatus = Field(description="Verdict reported to the orchestrator")
    outcomes: List[ProbeOutcomeDTO] = Field(
        default_factory=list, description="Per-probe results"
    )

    @classmethod
    def from_domain(cls, report: FitnessReport) -> "FitnessReportDTO":
        return cls(
            total_score=report.total_score,
            status=report.status,
            outcomes=[ProbeOutcomeDTO.from_domain(o) for o in report.outcomes],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "total_score": 27,
                "status": "Succeeded",
                "outcomes": [
                    {
                        "probe": "bucket_encryption_at_rest",
                        "resource_type": "AWS::S3::Bucket",
                        "resource_id": "my-stack-bucket-1x2y3z",
                        "score": 6,
                        "skipped": False,
                        "passed": True,
                        "error": None,
                    }
                ],
            }
        }
    }

"""
Stack domain entities.

Resources discovered in a deployed stack and the closed set of resource
kinds the probe catalog knows how to evaluate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResourceKind(str, Enum):
    """Resource kinds with a probe set. Anything else is OTHER."""

    BUCKET = "AWS::S3::Bucket"
    TABLE = "AWS::DynamoDB::Table"
    FUNCTION = "AWS::Lambda::Function"
    OTHER = "other"

    @classmethod
    def from_resource_type(cls, resource_type: str) -> "ResourceKind":
        try:
            kind = cls(resource_type)
        except ValueError:
            return cls.OTHER
        return kind


@dataclass(frozen=True, slots=True)
class StackResource:
    """A top-level resource of a stack, as reported by the stack listing."""

    resource_type: str
    physical_id: str
    logical_id: str

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind.from_resource_type(self.resource_type)

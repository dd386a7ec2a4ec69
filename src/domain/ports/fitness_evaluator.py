"""Domain service abstraction for deployment fitness evaluation."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.fitness import DeploymentContext, FitnessReport


class IFitnessEvaluator(Protocol):
    """Interface for computing the fitness of a deployed stack."""

    async def evaluate(self, context: DeploymentContext) -> FitnessReport:
        """Run every applicable probe and aggregate their results."""
        ...

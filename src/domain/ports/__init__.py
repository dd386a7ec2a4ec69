"""Domain ports package."""

from .fitness_evaluator import IFitnessEvaluator
from .outcome_reporter import IOutcomeReporter

__all__ = ["IFitnessEvaluator", "IOutcomeReporter"]

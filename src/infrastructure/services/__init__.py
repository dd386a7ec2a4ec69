"""Infrastructure services package."""

from .fitness_evaluation_service import FitnessEvaluationService
from .outcome_reporter import OutcomeReporter
from .probe_catalog import ProbeCatalog

__all__ = ["FitnessEvaluationService", "OutcomeReporter", "ProbeCatalog"]

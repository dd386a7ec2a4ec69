"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the hook entry points.
"""

from .fitness_dto import FitnessReportDTO, LifecycleHookEventDTO, ProbeOutcomeDTO

__all__ = ["FitnessReportDTO", "LifecycleHookEventDTO", "ProbeOutcomeDTO"]

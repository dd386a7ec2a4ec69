"""
Use Cases Package - Application Layer

This package contains use cases that orchestrate the fitness
evaluation and the reporting of its outcome.
"""

from .pre_traffic_hook_use_case import RunPreTrafficHookUseCase

__all__ = ["RunPreTrafficHookUseCase"]

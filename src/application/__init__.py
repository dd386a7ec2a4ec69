"""
Application Layer Package

This package contains the application-specific rules of the hook.
It orchestrates the flow of data between the entry points and the
domain ports.
"""

# Re-export submodules
from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]

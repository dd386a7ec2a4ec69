"""
Domain Layer Package

This package contains the core rules of the fitness gate. It defines
entities, gateway contracts and service ports without dependencies on
cloud SDKs or infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, gateways, ports

__all__ = ["entities", "gateways", "ports"]

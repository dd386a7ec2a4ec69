"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with the cloud control-plane APIs and the
probe/aggregation services built on top of them.
"""

from src.infrastructure import gateways, services

__all__ = ["gateways", "services"]

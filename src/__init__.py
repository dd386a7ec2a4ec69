"""
Source Code Root Module

This module serves as the root for the source code of the pre-traffic
fitness hook.

Layer Structure:
- Domain: Core business logic and entities
- Application: Use cases and DTOs
- Infrastructure: External systems and services implementations
- Main: Lambda handler, local CLI, settings and composition root
- Shared: Cross-cutting concerns and shared utilities
"""

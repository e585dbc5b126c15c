"""
Infrastructure layer: repository ports, event publishing and their adapters.

Supports multiple providers via factory pattern:
- memory: Process-local tables for development and tests
- postgres: SQLAlchemy async (PostgreSQL via asyncpg)
- events: none, memory or Redis Streams
"""

from workforce.infrastructure.factory import InfrastructureFactory

__all__ = ["InfrastructureFactory"]

"""Shared plumbing for the relational repositories."""

from workforce.infrastructure.implementations.postgres.database import Database


class PostgresRepository:
    """Holds the shared ``Database``; each call runs in its own session."""

    def __init__(self, database: Database):
        self.database = database

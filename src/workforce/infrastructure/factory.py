"""
Infrastructure factory for provider selection.

Selects repository and event publisher implementations based on configuration:
- memory: Process-local tables for development and tests
- postgres: SQLAlchemy async engine (asyncpg in production)

Event publishers:
- none: Events are not published
- memory: Events are kept in-process (tests, local development)
- redis: Redis Streams

Usage:
    from workforce.infrastructure import InfrastructureFactory
    from workforce.config import get_settings

    # Option 1: From settings
    factory = InfrastructureFactory.from_settings(get_settings())

    # Option 2: Manual configuration
    factory = InfrastructureFactory(provider="memory", event_provider="memory")

    role_repo = factory.get_role_repository()
    publisher = factory.get_event_publisher()
    ...
    await factory.close()

One factory owns the shared state of its provider (the memory tables or the
database engine), so every repository it hands out sees the same data.
"""

from typing import TYPE_CHECKING, Literal

from loguru import logger

from workforce.infrastructure.events import EventPublisher
from workforce.infrastructure.repositories import (
    AttendanceRepository,
    CrewMemberRepository,
    CrewRepository,
    EquipmentRepository,
    PermissionRepository,
    RoleRepository,
    TimeOffRepository,
    TripRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from workforce.config import Settings
    from workforce.infrastructure.implementations.memory import MemoryStore
    from workforce.infrastructure.implementations.postgres import Database

InfrastructureProvider = Literal["memory", "postgres"]
EventProvider = Literal["none", "memory", "redis"]


class InfrastructureFactory:
    """
    Factory for creating infrastructure repository instances.

    Provides dependency injection for storage-agnostic services.
    """

    def __init__(
        self,
        provider: InfrastructureProvider | None = None,
        event_provider: EventProvider | None = None,
        **config,
    ):
        """
        Initialize infrastructure factory.

        Args:
            provider: Repository provider ("memory", "postgres").
                      If None, uses "memory" as default.
            event_provider: Event publisher ("none", "memory", "redis").
                            If None, events are not published.
            **config: Provider-specific configuration options
                      (database_url, database or redis_client overrides, ...)

        Raises:
            ValueError: If a provider is not supported
        """
        provider = provider or "memory"
        event_provider = event_provider or "none"

        if provider not in ("memory", "postgres"):
            raise ValueError(f"Unsupported provider: {provider}")
        if event_provider not in ("none", "memory", "redis"):
            raise ValueError(f"Unsupported event provider: {event_provider}")

        self.provider = provider
        self.event_provider = event_provider
        self.config = config

        self._store: "MemoryStore | None" = None
        self._database: "Database | None" = config.get("database")
        self._publisher: EventPublisher | None = None

        logger.info(
            f"Initialized InfrastructureFactory with provider: {provider}, "
            f"events: {event_provider}"
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "InfrastructureFactory":
        """
        Create factory from Settings object.

        Args:
            settings: Application settings from config.py

        Returns:
            InfrastructureFactory configured from settings
        """
        config = {
            "database_url": settings.database_url,
            "database_echo": settings.database_echo,
            "database_pool_size": settings.database_pool_size,
            "database_max_overflow": settings.database_max_overflow,
            "auto_create_tables": settings.auto_create_tables,
            "topic_prefix": settings.event_topic_prefix,
            "redis_url": settings.redis_url,
            "redis_stream_maxlen": settings.redis_stream_maxlen,
        }

        return cls(
            provider=settings.infrastructure_provider,
            event_provider=settings.event_publisher_provider,
            **config,
        )

    # ------------------------------------------------------------------
    # Provider state
    # ------------------------------------------------------------------

    @property
    def store(self) -> "MemoryStore":
        """Memory tables shared by every memory repository of this factory."""
        if self._store is None:
            from workforce.infrastructure.implementations.memory import MemoryStore

            self._store = MemoryStore()
        return self._store

    @property
    def database(self) -> "Database":
        """Engine and session factory shared by every relational repository."""
        if self._database is None:
            from workforce.infrastructure.implementations.postgres import Database

            self._database = Database(
                url=self.config.get("database_url"),
                echo=self.config.get("database_echo", False),
                pool_size=self.config.get("database_pool_size", 5),
                max_overflow=self.config.get("database_max_overflow", 10),
            )
        return self._database

    async def initialize(self) -> None:
        """Prepare provider resources (creates tables when configured to)."""
        if self.provider == "postgres" and self.config.get("auto_create_tables"):
            await self.database.create_all()

    async def close(self) -> None:
        """Close the event publisher and release database connections."""
        if self._publisher is not None:
            await self._publisher.close()
            self._publisher = None
        if self._database is not None:
            await self._database.dispose()
            self._database = None

    # ------------------------------------------------------------------
    # Repositories
    # ------------------------------------------------------------------

    def get_role_repository(self) -> RoleRepository:
        """
        Get role repository for configured provider.

        Returns:
            RoleRepository implementation
        """
        if self.provider == "postgres":
            from workforce.infrastructure.implementations.postgres import (
                PostgresRoleRepository,
            )

            return PostgresRoleRepository(self.database)

        from workforce.infrastructure.implementations.memory import (
            MemoryRoleRepository,
        )

        return MemoryRoleRepository(self.store)

    def get_permission_repository(self) -> PermissionRepository:
        if self.provider == "postgres":
            from workforce.infrastructure.implementations.postgres import (
                PostgresPermissionRepository,
            )

            return PostgresPermissionRepository(self.database)

        from workforce.infrastructure.implementations.memory import (
            MemoryPermissionRepository,
        )

        return MemoryPermissionRepository(self.store)

    def get_user_repository(self) -> UserRepository:
        if self.provider == "postgres":
            from workforce.infrastructure.implementations.postgres import (
                PostgresUserRepository,
            )

            return PostgresUserRepository(self.database)

        from workforce.infrastructure.implementations.memory import (
            MemoryUserRepository,
        )

        return MemoryUserRepository(self.store)

    def get_crew_repository(self) -> CrewRepository:
        if self.provider == "postgres":
            from workforce.infrastructure.implementations.postgres import (
                PostgresCrewRepository,
            )

            return PostgresCrewRepository(self.database)

        from workforce.infrastructure.implementations.memory import (
            MemoryCrewRepository,
        )

        return MemoryCrewRepository(self.store)

    def get_crew_member_repository(self) -> CrewMemberRepository:
        if self.provider == "postgres":
            from workforce.infrastructure.implementations.postgres import (
                PostgresCrewMemberRepository,
            )

            return PostgresCrewMemberRepository(self.database)

        from workforce.infrastructure.implementations.memory import (
            MemoryCrewMemberRepository,
        )

        return MemoryCrewMemberRepository(self.store)

    def get_equipment_repository(self) -> EquipmentRepository:
        if self.provider == "postgres":
            from workforce.infrastructure.implementations.postgres import (
                PostgresEquipmentRepository,
            )

            return PostgresEquipmentRepository(self.database)

        from workforce.infrastructure.implementations.memory import (
            MemoryEquipmentRepository,
        )

        return MemoryEquipmentRepository(self.store)

    def get_attendance_repository(self) -> AttendanceRepository:
        if self.provider == "postgres":
            from workforce.infrastructure.implementations.postgres import (
                PostgresAttendanceRepository,
            )

            return PostgresAttendanceRepository(self.database)

        from workforce.infrastructure.implementations.memory import (
            MemoryAttendanceRepository,
        )

        return MemoryAttendanceRepository(self.store)

    def get_time_off_repository(self) -> TimeOffRepository:
        if self.provider == "postgres":
            from workforce.infrastructure.implementations.postgres import (
                PostgresTimeOffRepository,
            )

            return PostgresTimeOffRepository(self.database)

        from workforce.infrastructure.implementations.memory import (
            MemoryTimeOffRepository,
        )

        return MemoryTimeOffRepository(self.store)

    def get_trip_repository(self) -> TripRepository:
        if self.provider == "postgres":
            from workforce.infrastructure.implementations.postgres import (
                PostgresTripRepository,
            )

            return PostgresTripRepository(self.database)

        from workforce.infrastructure.implementations.memory import (
            MemoryTripRepository,
        )

        return MemoryTripRepository(self.store)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def get_event_publisher(self) -> EventPublisher | None:
        """
        Get the event publisher for the configured event provider.

        The publisher is created once and shared. Returns None when events
        are disabled; services treat a missing publisher as a no-op.
        """
        if self.event_provider == "none":
            return None
        if self._publisher is not None:
            return self._publisher

        prefix = self.config.get("topic_prefix", "workforce")

        if self.event_provider == "redis":
            from workforce.infrastructure.implementations.redis import (
                RedisEventPublisher,
            )

            self._publisher = RedisEventPublisher(
                redis_url=self.config.get("redis_url", "redis://localhost:6379/0"),
                topic_prefix=prefix,
                max_stream_length=self.config.get("redis_stream_maxlen", 10_000),
                client=self.config.get("redis_client"),
            )
        else:
            from workforce.infrastructure.implementations.memory import (
                MemoryEventPublisher,
            )

            self._publisher = MemoryEventPublisher(topic_prefix=prefix)

        return self._publisher

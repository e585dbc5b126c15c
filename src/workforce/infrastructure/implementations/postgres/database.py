"""
Async SQLAlchemy engine and session management for the relational provider.

One ``Database`` is created per infrastructure factory and shared by all of
its repositories. Sessions commit on success and roll back on any error;
SQLAlchemy failures are translated into the domain storage errors so services
never see driver exceptions.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from workforce.core.logging import logger
from workforce.domain.exceptions import ConstraintViolationError, StoreError
from workforce.infrastructure.implementations.postgres.tables import Base


def create_engine(
    url: str,
    echo: bool = False,
    pool_size: int = 5,
    max_overflow: int = 10,
    pool_recycle: int = 1800,
) -> AsyncEngine:
    """
    Create an async engine for ``url``.

    Pool sizing only applies to server databases; SQLite URLs (used in tests
    and local development) keep the dialect's default pool.
    """
    engine_args: dict = {"echo": echo, "pool_pre_ping": True}
    if url.startswith("postgresql"):
        engine_args.update(
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_recycle=pool_recycle,
        )

    engine = create_async_engine(url, **engine_args)
    logger.info(f"Created async engine for {url.split('@')[-1]}")
    return engine


class Database:
    """Engine plus session factory shared by the relational repositories."""

    def __init__(
        self,
        url: str | None = None,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
        engine: AsyncEngine | None = None,
    ):
        if engine is None:
            if not url:
                raise ValueError("Either url or engine is required")
            engine = create_engine(
                url, echo=echo, pool_size=pool_size, max_overflow=max_overflow
            )
        self.engine = engine
        self.session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Create every workforce table that does not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created / verified")

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        """Release all pooled connections."""
        await self.engine.dispose()
        logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Yield a session scoped to the caller's block.

        Raises:
            ConstraintViolationError: A unique or foreign key constraint failed
            StoreError: Any other SQLAlchemy failure
        """
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            logger.debug(f"Integrity error: {e.orig}")
            raise ConstraintViolationError(str(e.orig)) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error: {e}")
            raise StoreError(str(e)) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

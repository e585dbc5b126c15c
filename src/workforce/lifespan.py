"""
Application lifecycle management.

Builds the infrastructure factory on startup (unless one was injected into
``create_app``) and releases its connections on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from workforce.config import get_settings
from workforce.infrastructure import InfrastructureFactory


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Args:
        app: FastAPI application instance
    """
    logger.info("Starting workforce backend...")
    logger.info(f"Application version: {app.version}")

    factory: InfrastructureFactory | None = getattr(
        app.state, "infrastructure_factory", None
    )
    if factory is None:
        factory = InfrastructureFactory.from_settings(get_settings())
        app.state.infrastructure_factory = factory

    await factory.initialize()

    yield

    logger.info("Shutting down workforce backend...")
    await factory.close()

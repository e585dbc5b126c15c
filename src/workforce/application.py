"""
FastAPI application factory.

Creates and configures the FastAPI application with all middleware,
routers, and exception handlers.
"""

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from workforce import __version__
from workforce.config import get_settings
from workforce.core.logging import logger
from workforce.domain.exceptions import WorkforceError
from workforce.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    workforce_exception_handler,
)
from workforce.infrastructure import InfrastructureFactory
from workforce.lifespan import lifespan
from workforce.middleware import TraceIDMiddleware
from workforce.openapi import configure_openapi
from workforce.routes import register_routes


def create_app(infrastructure_factory: InfrastructureFactory | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        infrastructure_factory: Pre-built factory to serve requests with.
            When omitted, one is built from settings on startup.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    # Configure docs URLs based on settings
    # Must be set BEFORE creating FastAPI instance
    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=__version__,
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
    )
    app.state.infrastructure_factory = infrastructure_factory

    # Register exception handlers (RFC 7807 Problem Details)
    app.add_exception_handler(WorkforceError, workforce_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Add middleware
    app.add_middleware(TraceIDMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=settings.get_cors_allowed_methods(),
        allow_headers=settings.get_cors_allowed_headers(),
    )

    register_routes(app)
    configure_openapi(app)

    logger.info(f"FastAPI application created (v{__version__})")
    logger.debug(f"CORS origins: {settings.get_allowed_origins()}")

    return app

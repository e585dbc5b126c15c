"""
Main FastAPI application entry point.

This module creates the FastAPI application using the application factory
pattern for clean separation of concerns.
"""

from workforce import __version__
from workforce.application import create_app
from workforce.config import get_settings
from workforce.core.logging import intercept_standard_logging, logger

settings = get_settings()

# Configure OpenTelemetry BEFORE anything else (optional, only if enabled and installed)
OTEL_ENABLED = False
if settings.otel_enabled:
    try:
        from workforce.core.telemetry import (
            configure_opentelemetry,
            instrument_fastapi,
            instrument_logging,
        )

        configure_opentelemetry(
            service_name=settings.otel_service_name,
            service_version=__version__,
        )

        # Instrument logging BEFORE the app starts emitting records
        instrument_logging()

        OTEL_ENABLED = True
    except ImportError:
        logger.warning("OpenTelemetry enabled but the telemetry extra is not installed")

# Intercept logs from uvicorn and other libraries
intercept_standard_logging()

# Create FastAPI application using factory
app = create_app()

# Instrument FastAPI with OpenTelemetry (if enabled)
if OTEL_ENABLED:
    instrument_fastapi(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "workforce.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning",
    )

"""
OpenTelemetry configuration for distributed tracing.

Optional: the opentelemetry packages are installed with the ``telemetry``
extra, and ``main.py`` only calls into this module when they are importable
and ``otel_enabled`` is set.

This module configures:
- A tracer provider tagged with the service name and version
- Console span export in debug mode, OTLP export otherwise
- FastAPI request instrumentation
- Trace context injection into standard logging records
"""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from workforce.config import settings

logger = logging.getLogger(__name__)


def configure_opentelemetry(
    service_name: str | None = None,
    service_version: str | None = None,
) -> None:
    """
    Register a global tracer provider with one span exporter.

    Args:
        service_name: Service name (default: ``settings.otel_service_name``)
        service_version: Service version (default: ``settings.project_version``)
    """
    service_name = service_name or settings.otel_service_name
    service_version = service_version or settings.project_version

    resource = Resource.create(
        attributes={
            "service.name": service_name,
            "service.version": service_version,
        }
    )
    tracer_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(tracer_provider)

    if settings.debug:
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        logger.info("Console span exporter configured (debug mode)")
    else:
        otlp_exporter = OTLPSpanExporter(
            endpoint=settings.otel_exporter_otlp_endpoint,
            insecure=True,
        )
        tracer_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
        logger.info(
            f"OTLP span exporter configured: endpoint={settings.otel_exporter_otlp_endpoint}"
        )

    logger.info(
        f"OpenTelemetry configured: service={service_name}, version={service_version}"
    )


def instrument_fastapi(app) -> None:
    """Trace every HTTP request handled by ``app`` except health checks."""
    FastAPIInstrumentor.instrument_app(
        app,
        tracer_provider=trace.get_tracer_provider(),
        excluded_urls="/health",
    )
    logger.info("FastAPI instrumented with OpenTelemetry")


def instrument_logging() -> None:
    """Add trace_id and span_id to standard logging records."""
    LoggingInstrumentor().instrument(set_logging_format=False)


def get_current_trace_id() -> str:
    """Current OpenTelemetry trace id as 32 hex digits, or ``N/A``."""
    span = trace.get_current_span()
    if span and span.get_span_context().is_valid:
        return format(span.get_span_context().trace_id, "032x")
    return "N/A"


__all__ = [
    "configure_opentelemetry",
    "get_current_trace_id",
    "instrument_fastapi",
    "instrument_logging",
]

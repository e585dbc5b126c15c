"""
Loguru configuration for the application.

Every record carries the request trace id (``N/A`` outside a request).
Standard library loggers used by the server stack and SQLAlchemy are
redirected to loguru so all output shares one format.
"""

import logging
import sys
from typing import Any

from loguru import logger

from workforce.config import settings
from workforce.core.trace_context import trace_id_context

STDLIB_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "fastapi")
SQLALCHEMY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def add_trace_id(record: dict[str, Any]) -> bool:
    """Loguru filter: attach the current request's trace_id to the record."""
    trace_id = trace_id_context.get()
    record["extra"]["trace_id"] = trace_id if trace_id else "N/A"
    return True


def configure_logger() -> None:
    """Replace loguru's default sink with one configured from settings."""
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=settings.log_level.upper(),
        format=settings.log_format,
        filter=add_trace_id,
        colorize=True,
        serialize=False,
        backtrace=True,
        diagnose=settings.debug,
        enqueue=settings.logger_enqueue,
    )


configure_logger()


class InterceptHandler(logging.Handler):
    """
    Handler that forwards standard logging records to loguru.

    Usage:
        logging.getLogger("uvicorn").handlers = [InterceptHandler()]
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def intercept_standard_logging() -> None:
    """
    Redirect uvicorn, FastAPI and (when ``log_sql`` is set) SQLAlchemy logs.

    Call once at application start-up.
    """
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO)

    names = list(STDLIB_LOGGERS)
    if settings.log_sql:
        names.extend(SQLALCHEMY_LOGGERS)

    for logger_name in names:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False


__all__ = ["InterceptHandler", "configure_logger", "intercept_standard_logging", "logger"]

"""Unit tests for logging configuration and trace id propagation."""

import logging

from workforce.core.logging import InterceptHandler, add_trace_id, intercept_standard_logging
from workforce.core.trace_context import trace_id_context


def test_add_trace_id_outside_request():
    record = {"extra": {}}

    assert add_trace_id(record) is True
    assert record["extra"]["trace_id"] == "N/A"


def test_add_trace_id_inside_request():
    token = trace_id_context.set("trace-123")
    try:
        record = {"extra": {}}
        add_trace_id(record)
    finally:
        trace_id_context.reset(token)

    assert record["extra"]["trace_id"] == "trace-123"


def test_intercept_standard_logging():
    intercept_standard_logging()

    uvicorn_logger = logging.getLogger("uvicorn")
    assert len(uvicorn_logger.handlers) == 1
    assert isinstance(uvicorn_logger.handlers[0], InterceptHandler)
    assert uvicorn_logger.propagate is False

"""
Middleware to add trace_id to each request.

The trace_id ties together every log line written while serving one HTTP
request. A caller-supplied ``X-Trace-ID`` header is reused so traces can
span services; otherwise a new UUID is generated.
"""

import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from workforce.core.logging import logger
from workforce.core.trace_context import trace_id_context

TRACE_ID_HEADER = "X-Trace-ID"


class TraceIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that binds a trace_id to each request.

    Flow:
    1. Request arrives, trace_id taken from X-Trace-ID or generated
    2. trace_id stored in contextvars for the log filter
    3. Response carries the X-Trace-ID header
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        trace_id = request.headers.get(TRACE_ID_HEADER) or str(uuid.uuid4())
        token = trace_id_context.set(trace_id)

        logger.info(f"Request started: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
            response.headers[TRACE_ID_HEADER] = trace_id
            logger.info(
                f"Request completed: {request.method} {request.url.path} - "
                f"Status: {response.status_code}"
            )
            return response

        except Exception:
            logger.exception(f"Request failed: {request.method} {request.url.path}")
            raise

        finally:
            trace_id_context.reset(token)


__all__ = ["TRACE_ID_HEADER", "TraceIDMiddleware"]

"""Request logging middleware.

Every request gets a correlation ID (taken from X-Correlation-ID or
generated) and, when present, the X-Caller-ID identity. Both are bound
into structlog's context variables, so the ledger, accumulator,
coordinator and publisher log lines emitted while serving the request
carry them without any service knowing about HTTP.

Oracle callbacks carry no caller header; their log lines are tied to the
request that triggered them through ``request_id`` instead.

Usage:
    app = FastAPI()
    app.add_middleware(LoggingMiddleware)
"""

import time
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from sealedvote.infrastructure.observability.correlation import (
    generate_correlation_id,
    set_correlation_id,
)

CORRELATION_HEADER = "X-Correlation-ID"
CALLER_HEADER = "X-Caller-ID"

logger = structlog.get_logger()


class LoggingMiddleware(BaseHTTPMiddleware):
    """Binds request context for logging and times each request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        set_correlation_id(correlation_id)

        structlog.contextvars.clear_contextvars()
        context = {"method": request.method, "path": request.url.path}
        caller = request.headers.get(CALLER_HEADER)
        if caller:
            context["caller"] = caller
        structlog.contextvars.bind_contextvars(**context)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "request_failed",
                duration_ms=_elapsed_ms(start_time),
                error_type=type(exc).__name__,
            )
            raise
        finally:
            structlog.contextvars.clear_contextvars()

        # 4xx responses are domain rejections, already logged by the services
        log_method = logger.warning if response.status_code >= 500 else logger.info
        log_method(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=_elapsed_ms(start_time),
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)

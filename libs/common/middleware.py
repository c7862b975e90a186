"""Request tracing middleware.

Every request gets an id (taken from ``X-Request-ID`` or generated) that is
bound to the logging context for the lifetime of the request and echoed on
the response. Unhandled errors are turned into a JSON 500 here, so the
failure is logged once, with its request id, and the client still receives
the id. Register it before ``CORSMiddleware`` so error responses also pass
through CORS.
"""
import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from libs.common.error_handler import internal_error_response
from libs.common.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    set_request_context,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Polled by load balancers; not worth a log line per hit.
QUIET_PATHS = frozenset({"/health", "/api/health"})


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_context(
            request_id=request.headers.get(REQUEST_ID_HEADER),
            path=request.url.path,
            method=request.method,
        )
        try:
            response = await self._respond(request, call_next)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_request_context()

    async def _respond(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed",
                request.method,
                request.url.path,
                extra={"extra_fields": {"duration_ms": _elapsed_ms(started)}},
            )
            return internal_error_response()

        if request.url.path not in QUIET_PATHS:
            level = "warning" if response.status_code >= 400 else "info"
            getattr(logger, level)(
                "%s %s -> %d",
                request.method,
                request.url.path,
                response.status_code,
                extra={
                    "extra_fields": {
                        "status_code": response.status_code,
                        "duration_ms": _elapsed_ms(started),
                        "query": request.url.query or None,
                    }
                },
            )
        return response


def add_observability_middleware(app: FastAPI) -> None:
    """Configure logging and install request tracing on ``app``."""
    configure_logging()
    app.add_middleware(RequestContextMiddleware)
    logger.info("Request tracing enabled")

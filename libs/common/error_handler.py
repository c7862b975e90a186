"""Exception handlers producing consistent JSON error bodies.

Unexpected exceptions are not registered here: ``RequestContextMiddleware``
converts them with ``internal_error_response`` while the request id is still
bound.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from libs.common.logging import get_logger
from libs.storage.json_store import StorageError

logger = get_logger(__name__)


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Could not save data. Please try again."},
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Register the shared exception handlers on ``app``."""
    app.add_exception_handler(StorageError, storage_error_handler)

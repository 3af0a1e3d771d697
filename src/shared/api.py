"""HTTP error mapping shared by every router."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from shared.exceptions import RemoteError
from shared.utils.logging import get_logger

logger = get_logger(__name__)


async def remote_error_handler(request: Request, exc: RemoteError) -> JSONResponse:
    logger.error("Store unavailable", operation=exc.operation, path=request.url.path, error=exc.reason)
    return JSONResponse(
        status_code=503,
        content={"error": {"operation": exc.operation, "reason": exc.reason}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """ValidationError → 400 and ObjectNotFoundError → 404 via protean; RemoteError → 503."""
    register_exception_handlers(app)
    app.add_exception_handler(RemoteError, remote_error_handler)

"""
Error taxonomy shared by the marketplace services and its HTTP rendering.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MarketplaceError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConflictError(MarketplaceError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(MarketplaceError):
    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(MarketplaceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ValidationFailed(MarketplaceError):
    """Payload rejected by schema validation."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MarketplaceError)
    async def _handle_marketplace_error(request: Request, exc: MarketplaceError) -> JSONResponse:
        logger.warning(
            "%s %s -> %s %s: %s",
            request.method, request.url.path, exc.status_code, type(exc).__name__, exc.message
        )
        content = {"detail": exc.message}
        if isinstance(exc, ValidationFailed) and exc.errors:
            content["errors"] = exc.errors
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(Exception)
    async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

"""Global exception handlers - 404 fallback and 500 catch-all."""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from womm.api.middleware import SECURITY_HEADERS
from womm.schemas.error import ErrorResponse
from womm.utils.timestamps import utc_timestamp

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong"

# A known path hit with an unsupported method is still an unmatched route.
_UNMATCHED_STATUSES = {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def original_url(request: Request) -> str:
    """Path plus query string, as the client sent it."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def _error_body(error: str, message: str) -> dict:
    return ErrorResponse(error=error, message=message, timestamp=utc_timestamp()).model_dump()


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing miss / HTTPException handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in _UNMATCHED_STATUSES:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=_error_body(
                    "Not Found",
                    f"Route {request.method} {original_url(request)} not found",
                ),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(HTTPStatus(exc.status_code).phrase, str(exc.detail)),
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Log the failure; only echo its text outside production."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        settings = request.app.state.settings
        message = GENERIC_ERROR_MESSAGE if settings.is_production else str(exc)
        # Runs outside the middleware stack, so headers are set here.
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Internal Server Error", message),
            headers=SECURITY_HEADERS,
        )

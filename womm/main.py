"""it-works-on-my-machine FastAPI application."""

import logging
import sys
import time

from fastapi import FastAPI

from womm.api.errors import register_error_handlers
from womm.api.health import router as health_router
from womm.api.info import router as info_router
from womm.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from womm.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class UTCISOFormatter(logging.Formatter):
    """Render asctime as UTC ISO-8601 with milliseconds (2024-05-01T12:00:00.123Z)."""

    converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        stamp = time.strftime("%Y-%m-%dT%H:%M:%S", self.converter(record.created))
        return f"{stamp}.{int(record.msecs):03d}Z"


def setup_logging(level: str) -> None:
    """Log to stdout. Called once by the process entry point."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(UTCISOFormatter(LOG_FORMAT))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory. Settings are resolved once and shared by every handler."""
    settings = settings or Settings()

    app = FastAPI(
        title="it-works-on-my-machine",
        description="Service info, health, readiness, version and process metrics",
        version=settings.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        # "/health/" is an unmatched route, not a redirect to "/health".
        redirect_slashes=False,
    )
    app.state.settings = settings

    # Last added runs first: security headers wrap the request logger.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(info_router, tags=["Info"])
    app.include_router(health_router, tags=["Health"])
    register_error_handlers(app)

    return app

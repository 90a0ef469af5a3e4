"""HTTP middleware: security headers and request logging."""

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("womm.request")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


def client_ip(request: Request) -> str:
    """Peer address of the request, or 'unknown' when the transport has none."""
    return request.client.host if request.client else "unknown"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Set fixed security headers on every response."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path and client IP before dispatch."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        logger.info("%s %s - %s", request.method, request.url.path, client_ip(request))
        return await call_next(request)

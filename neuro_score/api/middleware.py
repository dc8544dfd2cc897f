"""Request timing and API-key middleware."""

import hmac
import logging
import time
from typing import Callable, Iterable, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

PUBLIC_PATHS = ("/health", "/health/live", "/docs", "/openapi.json")


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status and duration, and expose the duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - started

        logger.info(
            "%s %s status=%s duration=%.3fs client=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration,
            _client_host(request),
        )
        response.headers["X-Process-Time"] = f"{duration:.3f}"
        return response


def provided_api_key(request: Request) -> Optional[str]:
    """Key from ``Authorization: Bearer`` or, failing that, ``X-API-Key``."""
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[len("Bearer "):]
    return request.headers.get("X-API-Key")


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Reject requests without the configured key, except on public paths."""

    def __init__(self, app, api_key: str, public_paths: Iterable[str] = PUBLIC_PATHS):
        super().__init__(app)
        self.api_key = api_key
        self.public_paths = frozenset(public_paths)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.public_paths:
            return await call_next(request)

        key = provided_api_key(request)
        if not key or not hmac.compare_digest(key.encode(), self.api_key.encode()):
            logger.warning(
                "Unauthorized request: %s %s client=%s",
                request.method,
                request.url.path,
                _client_host(request),
            )
            return JSONResponse(
                status_code=401,
                content={"error": "Unauthorized", "detail": "Invalid or missing API key"},
            )

        return await call_next(request)

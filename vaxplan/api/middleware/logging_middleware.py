"""
Request logging middleware.

Logs method, path, status and duration of every API call and tags each
request with a correlation ID.
"""

import logging
import time
import uuid
from collections.abc import Callable, Iterable
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    HTTP middleware for request/response logging.

    Patient records travel in request bodies, so bodies are never logged.
    Only the path, status and timing are.
    """

    DEFAULT_EXCLUDE_PATHS: tuple[str, ...] = (
        "/health",
        "/favicon.ico",
    )

    def __init__(self, app: ASGIApp, exclude_paths: Iterable[str] | None = None) -> None:
        """
        Initialize logging middleware.

        Args:
            app: ASGI application
            exclude_paths: Path prefixes that skip logging (health checks by default)
        """
        super().__init__(app)
        self._exclude_paths = tuple(exclude_paths) if exclude_paths is not None else self.DEFAULT_EXCLUDE_PATHS

    def _should_log(self, path: str) -> bool:
        return not any(path.startswith(prefix) for prefix in self._exclude_paths)

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        """
        Process request with logging.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response from next handler, with correlation and timing headers
        """
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:8]
        request.state.correlation_id = correlation_id

        if not self._should_log(request.url.path):
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response

        start_time = time.perf_counter()
        logger.info(f"[{correlation_id}] --> {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"[{correlation_id}] <-- {request.method} {request.url.path} ERROR in {duration_ms:.2f}ms: {e}"
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log_level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            log_level,
            f"[{correlation_id}] <-- {request.method} {request.url.path} "
            f"{response.status_code} in {duration_ms:.2f}ms",
        )

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.2f}"
        return response

"""Custom middleware for FastAPI application"""

import time
import uuid
from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from backend.app.core.exceptions import RateLimitException
from backend.app.core.logging import get_logger

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware to add unique request ID to each request"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Generate or extract request ID
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        request.state.request_id = request_id

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id

        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all requests and responses"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = getattr(request.state, "request_id", "unknown")

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client_ip": request.client.host if request.client else "unknown",
            }
        )

        start_time = time.time()

        try:
            response = await call_next(request)

            duration = time.time() - start_time

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round(duration * 1000, 2),
                }
            )

            return response

        except Exception as e:
            duration = time.time() - start_time

            logger.error(
                f"Request failed: {str(e)}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round(duration * 1000, 2),
                },
                exc_info=True
            )

            raise


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Simple in-memory rate limiting middleware"""

    EXEMPT_PATHS = ("/health", "/", "/docs", "/redoc", "/openapi.json")

    def __init__(self, app: ASGIApp, requests_per_minute: int = 60):
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.request_counts: dict[str, list[float]] = {}

    def _prune(self, current_time: float) -> None:
        """Remove requests older than 1 minute and forget idle clients"""
        for client_ip in list(self.request_counts):
            recent = [
                req_time for req_time in self.request_counts[client_ip]
                if current_time - req_time < 60
            ]
            if recent:
                self.request_counts[client_ip] = recent
            else:
                del self.request_counts[client_ip]

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        client_ip = request.client.host if request.client else "unknown"

        if request.url.path in self.EXEMPT_PATHS:
            return await call_next(request)

        current_time = time.time()
        self._prune(current_time)

        if len(self.request_counts.get(client_ip, [])) >= self.requests_per_minute:
            logger.warning(
                f"Rate limit exceeded for client: {client_ip}",
                extra={"client_ip": client_ip}
            )

            # Middleware runs outside the exception handlers, so respond directly
            exc = RateLimitException()
            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "message": exc.message,
                    "details": exc.details,
                    "request_id": getattr(request.state, "request_id", "unknown"),
                },
                headers={"X-RateLimit-Limit": str(self.requests_per_minute)}
            )

        self.request_counts.setdefault(client_ip, []).append(current_time)

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(self.requests_per_minute)
        response.headers["X-RateLimit-Remaining"] = str(
            self.requests_per_minute - len(self.request_counts.get(client_ip, []))
        )

        return response

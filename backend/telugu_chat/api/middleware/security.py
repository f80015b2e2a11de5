from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from telugu_chat.utils.logging import get_logger

if TYPE_CHECKING:
    from fastapi import Request
    from starlette.types import ASGIApp

logger = get_logger(__name__)


class SecurityMiddleware(BaseHTTPMiddleware):
    """Add security headers and log relay traffic."""

    def __init__(self, app: ASGIApp, chat_path: str = "/api/chat"):
        super().__init__(app)
        self._chat_path = chat_path

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        # JSON only; the chat page is served elsewhere
        response.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none';"

        if request.url.scheme == "https":
            response.headers["Strict-Transport-Security"] = "max-age=15552000; includeSubDomains"

        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
        response.headers["Pragma"] = "no-cache"

        if request.url.path.rstrip("/") == self._chat_path:
            client_ip = request.client.host if request.client else "unknown"

            logger.info(
                "Chat relay called",
                extra={
                    "method": request.method,
                    "ip": client_ip,
                    "status_code": response.status_code,
                }
            )

        return response

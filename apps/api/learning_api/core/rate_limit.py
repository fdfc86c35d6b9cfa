from __future__ import annotations

import logging
import time
from collections import defaultdict, deque

from fastapi import HTTPException, Request
from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

BODY_TOO_LARGE = "Request body too large"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding one-minute window per client IP. A limit of 0 turns it off."""

    def __init__(self, app, limit: int = 120, window_seconds: int = 60, path_prefix: str = "/api"):
        super().__init__(app)
        self.limit = limit
        self.window_seconds = window_seconds
        self.path_prefix = path_prefix
        self.requests: dict[str, deque[float]] = defaultdict(deque)
        self._last_sweep = time.time()

    def _sweep(self, now: float) -> None:
        # Forget clients whose newest request has left the window.
        if now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        for ip in [ip for ip, bucket in self.requests.items() if not bucket or now - bucket[-1] > self.window_seconds]:
            del self.requests[ip]

    async def dispatch(self, request: Request, call_next):
        if self.limit <= 0 or not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        ip = request.client.host if request.client else "unknown"
        now = time.time()
        self._sweep(now)
        bucket = self.requests[ip]

        while bucket and now - bucket[0] > self.window_seconds:
            bucket.popleft()

        if len(bucket) >= self.limit:
            logger.warning("Rate limit hit for %s on %s", ip, request.url.path)
            return JSONResponse(
                status_code=429,
                content={"error": "Too many requests. Please retry shortly."},
            )

        bucket.append(now)
        return await call_next(request)


class BodySizeLimitMiddleware:
    """Rejects request bodies over ``max_bytes``.

    A declared Content-Length is checked up front; chunked bodies are counted
    as they are read and fail with 413 once they pass the limit.
    """

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared and declared.isdigit() and int(declared) > self.max_bytes:
            response = JSONResponse(status_code=413, content={"error": BODY_TOO_LARGE})
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    raise HTTPException(status_code=413, detail=BODY_TOO_LARGE)
            return message

        await self.app(scope, limited_receive, send)

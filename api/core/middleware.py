"""
HTTP middleware: request logging, security headers and per-IP rate limiting.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .errors import error_response

logger = logging.getLogger(__name__)

CONTENT_SECURITY_POLICY = "; ".join(
    [
        "default-src 'self'",
        "style-src 'self' 'unsafe-inline' https://fonts.googleapis.com https://cdnjs.cloudflare.com",
        "script-src 'self' 'unsafe-inline'",
        "font-src 'self' https://fonts.gstatic.com https://cdnjs.cloudflare.com",
        "img-src 'self' https://images.unsplash.com data: blob:",
        "connect-src 'self'",
    ]
)

SECURITY_HEADERS = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


def rate_limit_max() -> int:
    return config.env_int("RATE_LIMIT_MAX", 100)


def rate_limit_window_s() -> int:
    return config.env_int("RATE_LIMIT_WINDOW_S", 15 * 60)


@dataclass
class FixedWindowRateLimiter:
    """
    Counts requests per key inside fixed windows of `window_s` seconds.

    Expired windows are dropped at most once per `window_s`, so the map only
    holds clients seen during roughly the last two windows.
    """

    max_requests: int
    window_s: int
    _windows: dict[str, tuple[float, int]] = field(default_factory=dict)
    _last_sweep: float | None = None

    def hit(self, key: str, now: float | None = None) -> tuple[bool, int]:
        """
        Record one request. Returns (allowed, seconds until the window resets).
        """
        now = time.monotonic() if now is None else now
        self._sweep(now)
        started, count = self._windows.get(key, (now, 0))
        if now - started >= self.window_s:
            started, count = now, 0
        count += 1
        self._windows[key] = (started, count)
        retry_after = max(0, int(started + self.window_s - now))
        return count <= self.max_requests, retry_after

    def _sweep(self, now: float) -> None:
        if self._last_sweep is None:
            self._last_sweep = now
            return
        if now - self._last_sweep < self.window_s:
            return
        self._last_sweep = now
        expired = [key for key, (started, _) in self._windows.items() if now - started >= self.window_s]
        for key in expired:
            del self._windows[key]

    def reset(self) -> None:
        self._windows.clear()
        self._last_sweep = None



def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def install(app: FastAPI, *, limiter: FixedWindowRateLimiter | None = None) -> FixedWindowRateLimiter:
    limiter = limiter or FixedWindowRateLimiter(rate_limit_max(), rate_limit_window_s())
    origins = config.cors_origins()

    # Registered innermost first: the request log wraps everything.
    @app.middleware("http")
    async def rate_limit(request: Request, call_next):
        if request.url.path.startswith("/api/"):
            allowed, retry_after = limiter.hit(_client_ip(request))
            if not allowed:
                logger.warning("rate_limited ip=%s path=%s", _client_ip(request), request.url.path)
                return error_response(
                    429,
                    "Too many requests, please try again later.",
                    headers={"Retry-After": str(retry_after)},
                )
        return await call_next(request)

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "request method=%s path=%s status=%s duration_ms=%.1f ip=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            _client_ip(request),
        )
        return response

    return limiter

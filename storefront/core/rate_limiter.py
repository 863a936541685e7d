from __future__ import annotations

import math
import threading
import time
from functools import lru_cache
from typing import Dict, Tuple

from fastapi import Depends, HTTPException, Request

from storefront.config import Settings, get_settings

TOO_MANY_REQUESTS = "Too many requests"


class RateLimiter:
    """Fixed-window request counter keyed by scope and client address."""

    def __init__(self) -> None:
        self._hits: Dict[str, Tuple[int, float]] = {}
        self._lock = threading.Lock()
        self._next_sweep = 0.0

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._hits)

    def check(self, key: str, limit: int, window_seconds: int) -> None:
        now = time.monotonic()
        with self._lock:
            if now >= self._next_sweep:
                self._sweep(now)
                self._next_sweep = now + window_seconds
            count, reset = self._hits.get(key, (0, now + window_seconds))
            if now > reset:
                count = 0
                reset = now + window_seconds
            count += 1
            self._hits[key] = (count, reset)
        if count > limit:
            retry_after = max(1, math.ceil(reset - now))
            raise HTTPException(
                status_code=429,
                detail=TOO_MANY_REQUESTS,
                headers={"Retry-After": str(retry_after)},
            )

    def _sweep(self, now: float) -> None:
        expired = [key for key, (_, reset) in self._hits.items() if now > reset]
        for key in expired:
            del self._hits[key]


@lru_cache(maxsize=1)
def get_rate_limiter() -> RateLimiter:
    return RateLimiter()


def client_ip(request: Request, *, trust_proxy: bool = False) -> str:
    """Address used to key the limiter.

    ``X-Forwarded-For`` is client-controlled, so it is only honoured when the
    app runs behind a proxy that sets it.
    """
    if trust_proxy:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def rate_limit_api(
    request: Request,
    settings: Settings = Depends(get_settings),
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> None:
    limiter.check(
        f"api:{client_ip(request, trust_proxy=settings.trust_proxy)}",
        settings.rate_limit_requests,
        settings.rate_limit_window_seconds,
    )

# app/utils/rate_limit.py
"""
Fixed-window request counter per client IP.
Used by the rate-limit middleware in app/main.py.
Expired windows are swept at most once per window so the table only holds
clients seen recently.
"""

import threading
import time


class FixedWindowRateLimiter:
    def __init__(self, window_ms: int, max_requests: int, clock=time.monotonic):
        self.window = window_ms / 1000
        self.max_requests = max_requests
        self._clock = clock
        self._lock = threading.Lock()
        self._hits = {}   # client -> (window_start, count)
        self._last_sweep = clock()

    def hit(self, client: str):
        """
        Count one request for `client`.
        Returns (allowed, remaining, seconds_until_reset).
        """
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self.window:
                self._sweep(now)
            start, count = self._hits.get(client, (now, 0))
            if now - start >= self.window:
                start, count = now, 0
            count += 1
            self._hits[client] = (start, count)
        reset = max(0, round(start + self.window - now))
        return count <= self.max_requests, max(0, self.max_requests - count), reset

    def _sweep(self, now: float):
        """Drop clients whose window has expired. Caller holds the lock."""
        expired = [c for c, (start, _) in self._hits.items() if now - start >= self.window]
        for c in expired:
            del self._hits[c]
        self._last_sweep = now

    @property
    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._hits)

    def reset(self):
        with self._lock:
            self._hits.clear()

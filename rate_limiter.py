#!/usr/bin/env python3
"""
Per-Handle Rate Limiting
========================
Limits how often one social handle may be checked: a cooldown between
consecutive requests plus a cap on requests within a rolling window.

Usage:
    limiter = HandleRateLimiter()
    if limiter.try_acquire("voltix"):
        check("voltix")
"""

import threading
import time
from typing import Callable, Dict, List, Optional

from settings import require_setting


class HandleRateLimiter:
    """
    Thread-safe cooldown + rolling-window limiter keyed by handle.

    State is held per instance; create one per platform and share it
    between the checkers that query that platform.
    """

    def __init__(self,
                 cooldown_seconds: Optional[float] = None,
                 max_requests: Optional[int] = None,
                 window_seconds: Optional[float] = None,
                 clock: Callable[[], float] = time.monotonic):
        """
        Args:
            cooldown_seconds: Minimum gap between requests for one handle
            max_requests: Requests allowed per handle within the window
            window_seconds: Length of the rolling window
            clock: Time source in seconds (injectable for tests)
        """
        if cooldown_seconds is None:
            cooldown_seconds = require_setting("rate_limit.cooldown_seconds")
        if max_requests is None:
            max_requests = require_setting("rate_limit.max_requests")
        if window_seconds is None:
            window_seconds = require_setting("rate_limit.window_seconds")
        if max_requests <= 0:
            raise ValueError("max_requests must be positive")

        self.cooldown_seconds = float(cooldown_seconds)
        self.max_requests = int(max_requests)
        self.window_seconds = float(window_seconds)
        self._clock = clock
        self._requests: Dict[str, List[float]] = {}
        self._last_check: Dict[str, float] = {}
        self._lock = threading.Lock()

    def _allowed(self, handle: str, now: float) -> bool:
        last = self._last_check.get(handle)
        if last is not None and now - last < self.cooldown_seconds:
            return False

        recent = [t for t in self._requests.get(handle, []) if now - t < self.window_seconds]
        if handle in self._requests:
            self._requests[handle] = recent
        return len(recent) < self.max_requests

    def _record(self, handle: str, now: float):
        self._requests.setdefault(handle, []).append(now)
        self._last_check[handle] = now

    def can_request(self, handle: str) -> bool:
        """True if a request for ``handle`` would be allowed now."""
        with self._lock:
            return self._allowed(handle, self._clock())

    def record(self, handle: str):
        """Record a request for ``handle`` at the current time."""
        with self._lock:
            self._record(handle, self._clock())

    def try_acquire(self, handle: str) -> bool:
        """
        Check and record in one step.

        Returns:
            True if the request is allowed (and now recorded), False if
            rate limited
        """
        with self._lock:
            now = self._clock()
            if not self._allowed(handle, now):
                return False
            self._record(handle, now)
            return True

    def request_count(self, handle: str) -> int:
        """Requests for ``handle`` inside the current window."""
        with self._lock:
            now = self._clock()
            return sum(1 for t in self._requests.get(handle, []) if now - t < self.window_seconds)

    def reset(self, handle: Optional[str] = None):
        """Forget one handle, or everything."""
        with self._lock:
            if handle is None:
                self._requests.clear()
                self._last_check.clear()
            else:
                self._requests.pop(handle, None)
                self._last_check.pop(handle, None)

#!/usr/bin/env python3
"""
Concurrent Checking Infrastructure
==================================
Fan-out / join-all helpers for the per-name availability checks.

Features:
- Every check runs under its own timeout
- A failed or timed-out check yields its default instead of raising, so
  one bad check never cancels its siblings
- Per-handle rate limiting for lookups against real platforms

Usage:
    from namekit.parallel import ParallelConfig, gather_checks

    results = await gather_checks({
        'domains': (domain_checker.check(name), list),
        'social': (social_checker.check(name), list),
    }, ParallelConfig())
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from rate_limiter import HandleRateLimiter
from namekit.settings import get_setting

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class ParallelConfig:
    """Configuration for concurrent checking."""
    check_timeout_seconds: Optional[float] = None   # Per-check timeout

    def __post_init__(self):
        cfg = get_setting("parallel", {}) or {}
        if self.check_timeout_seconds is None:
            self.check_timeout_seconds = cfg.get("check_timeout_seconds")
        if self.check_timeout_seconds is None:
            raise ValueError("parallel.check_timeout_seconds must be set in app.yaml")
        if self.check_timeout_seconds <= 0:
            raise ValueError("parallel.check_timeout_seconds must be positive")


# =============================================================================
# Fan-out
# =============================================================================

async def run_check(label: str, awaitable: Awaitable, default: Callable[[], Any],
                    timeout: float) -> Any:
    """
    Await one check with a timeout.

    Args:
        label: Name used in log messages
        awaitable: The check coroutine
        default: Factory for the fallback value
        timeout: Seconds before the check is abandoned

    Returns:
        The check result, or ``default()`` on timeout or error
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"{label}: timed out after {timeout:.1f}s")
    except Exception as e:
        logger.warning(f"{label}: failed ({type(e).__name__}: {e})")
    return default()


async def gather_checks(checks: Dict[str, Tuple[Awaitable, Callable[[], Any]]],
                        config: Optional[ParallelConfig] = None,
                        context: str = "") -> Dict[str, Any]:
    """
    Run named checks concurrently and wait for all of them.

    Args:
        checks: Check name -> (awaitable, default factory)
        config: Timeout settings
        context: Prefix for log messages (usually the candidate name)

    Returns:
        Check name -> result (or default), in the order given
    """
    config = config or ParallelConfig()
    keys = list(checks)
    results = await asyncio.gather(*(
        run_check(f"{context}:{key}" if context else key,
                  checks[key][0], checks[key][1],
                  config.check_timeout_seconds)
        for key in keys
    ))
    return dict(zip(keys, results))


__all__ = [
    'ParallelConfig',
    'HandleRateLimiter',
    'run_check',
    'gather_checks',
]

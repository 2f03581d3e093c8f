#!/usr/bin/env python3
"""
Social Handle Availability Checker
==================================
Checks whether a business name is free as a social media handle.

Platforms:
- GitHub: unauthenticated GET on the public users API (404 = available)
- Instagram: HEAD on the profile page (404 = available), rate limited per
  handle
- Twitter, Facebook: simulated, no request is made

Network failures and rate-limit rejections are reported as unavailable
results, never raised.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

import aiohttp

from domain_checker import CheckStatus
from rate_limiter import HandleRateLimiter
from similarity_checker import clean_name
from settings import require_setting

logger = logging.getLogger(__name__)

PLATFORMS = ('github', 'instagram', 'twitter', 'facebook')


@dataclass
class SocialResult:
    """Result of a social handle check"""
    platform: str
    handle: str
    status: CheckStatus
    url: str
    simulated: bool = False
    error: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.status == CheckStatus.AVAILABLE

    def to_dict(self) -> dict:
        result = {
            'platform': self.platform,
            'handle': self.handle,
            'available': self.available,
            'status': self.status.value,
            'url': self.url,
            'simulated': self.simulated,
        }
        if self.error:
            result['error'] = self.error
        return result


def make_handle(name: str) -> str:
    """Handle derived from a name: lowercase letters and digits only."""
    return clean_name(name)


class SocialChecker:
    """
    Checks social handle availability.

    Usage:
        checker = SocialChecker()
        results = asyncio.run(checker.check("Voltix"))
        for r in results:
            print(r.platform, r.handle, r.available)
    """

    def __init__(self, rate_limiter: Optional[HandleRateLimiter] = None,
                 rng: Optional[random.Random] = None,
                 timeout_seconds: Optional[float] = None,
                 simulated_probability: Optional[float] = None):
        """
        Args:
            rate_limiter: Limiter gating Instagram lookups (one is created
                          from app.yaml settings if omitted)
            rng: Random source for simulated platforms
            timeout_seconds: Total timeout per HTTP request
            simulated_probability: Chance a simulated handle is available
        """
        self.rate_limiter = rate_limiter or HandleRateLimiter()
        self.rng = rng or random.Random()

        if timeout_seconds is None:
            timeout_seconds = require_setting("social_checker.timeout_seconds")
        self.timeout_seconds = float(timeout_seconds)

        if simulated_probability is None:
            simulated_probability = require_setting("social_checker.simulated_available_probability")
        self.simulated_probability = float(simulated_probability)

        self.urls: Dict[str, str] = require_setting("social_checker.urls")
        self.user_agent = require_setting("social_checker.user_agent")

    def profile_url(self, platform: str, handle: str) -> str:
        return self.urls[platform].format(handle=handle)

    async def _fetch_status(self, session: aiohttp.ClientSession, method: str,
                            url: str, headers: Optional[dict] = None) -> int:
        """Issue one request and return the HTTP status code."""
        async with session.request(method, url, headers=headers,
                                   allow_redirects=False) as response:
            return response.status

    def _result(self, platform: str, handle: str, status: CheckStatus,
                simulated: bool = False, error: str = None) -> SocialResult:
        return SocialResult(
            platform=platform,
            handle=f"@{handle}",
            status=status,
            url=self.profile_url(platform, handle),
            simulated=simulated,
            error=error,
        )

    async def check_github(self, session: aiohttp.ClientSession, handle: str) -> SocialResult:
        url = self.urls['github_api'].format(handle=handle)
        try:
            status = await self._fetch_status(session, 'GET', url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"GitHub check error for {handle}: {e!r}")
            return self._result('github', handle, CheckStatus.ERROR, error=str(e) or type(e).__name__)
        available = status == 404
        return self._result('github', handle,
                            CheckStatus.AVAILABLE if available else CheckStatus.TAKEN)

    async def check_instagram(self, session: aiohttp.ClientSession, handle: str) -> SocialResult:
        if not self.rate_limiter.try_acquire(handle):
            logger.debug(f"Rate limit: skipping Instagram check for {handle}")
            return self._result('instagram', handle, CheckStatus.RATE_LIMITED)

        url = self.urls['instagram_profile'].format(handle=handle)
        try:
            status = await self._fetch_status(session, 'HEAD', url,
                                              headers={'User-Agent': self.user_agent})
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Instagram check error for {handle}: {e!r}")
            return self._result('instagram', handle, CheckStatus.ERROR, error=str(e) or type(e).__name__)
        available = status == 404
        return self._result('instagram', handle,
                            CheckStatus.AVAILABLE if available else CheckStatus.TAKEN)

    async def check_simulated(self, platform: str, handle: str) -> SocialResult:
        available = self.rng.random() > 1.0 - self.simulated_probability
        return self._result(platform, handle,
                            CheckStatus.AVAILABLE if available else CheckStatus.TAKEN,
                            simulated=True)

    async def check(self, name: str) -> List[SocialResult]:
        """
        Check all platforms concurrently.

        Returns:
            Results in PLATFORMS order; empty if the name has no usable handle
        """
        handle = make_handle(name)
        if not handle:
            logger.warning(f"No usable handle in {name!r}")
            return []

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            results = await asyncio.gather(
                self.check_github(session, handle),
                self.check_instagram(session, handle),
                self.check_simulated('twitter', handle),
                self.check_simulated('facebook', handle),
            )
        return list(results)


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Check social handle availability')
    parser.add_argument('names', nargs='+', help='Business names to check')
    args = parser.parse_args()

    checker = SocialChecker()
    for name in args.names:
        print(f"\n{'='*50}")
        print(f"Name: {name}")
        for r in asyncio.run(checker.check(name)):
            status = "AVAILABLE" if r.available else r.status.value
            note = " (simulated)" if r.simulated else ""
            print(f"  {r.platform:<10} {r.handle}: {status}{note}")

#!/usr/bin/env python3
"""
Domain Availability Checker
============================
Simulated domain lookups with registrar search links.

No registrar is contacted: after a short artificial delay each domain is
reported available with a configured probability. Every result carries
search links for the configured registrars, with affiliate ids appended
when they are set.
"""

import asyncio
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from similarity_checker import clean_name
from settings import require_setting

logger = logging.getLogger(__name__)


class CheckStatus(str, Enum):
    """Outcome of an availability check"""
    AVAILABLE = "available"
    TAKEN = "taken"
    RATE_LIMITED = "rate_limited"
    ERROR = "error"


@dataclass
class RegistrarLink:
    """Search link for a domain at one registrar"""
    name: str
    url: str
    price_range: str


@dataclass
class DomainResult:
    """Result of a domain availability check"""
    domain: str
    status: CheckStatus
    registrars: List[RegistrarLink] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.status == CheckStatus.AVAILABLE

    def to_dict(self) -> dict:
        result = {
            'domain': self.domain,
            'available': self.available,
            'status': self.status.value,
            'registrars': [
                {'name': r.name, 'url': r.url, 'price_range': r.price_range}
                for r in self.registrars
            ],
        }
        if self.error:
            result['error'] = self.error
        return result


class DomainChecker:
    """
    Checks (simulates) domain availability for business names.

    Usage:
        checker = DomainChecker(affiliate_ids={'godaddy': 'abc'})
        results = asyncio.run(checker.check("Voltix"))
        for r in results:
            print(r.domain, r.available)
    """

    def __init__(self, affiliate_ids: Optional[Dict[str, str]] = None,
                 rng: Optional[random.Random] = None,
                 delay_seconds: Optional[float] = None,
                 available_probability: Optional[float] = None,
                 suffixes: Optional[List[str]] = None):
        """
        Args:
            affiliate_ids: Registrar affiliate key -> affiliate id
            rng: Random source for the simulated lookups
            delay_seconds: Artificial lookup delay
            available_probability: Chance that a domain is reported available
            suffixes: Default domain suffixes (e.g. ['.com', '.io'])
        """
        self.affiliate_ids = {k: v for k, v in (affiliate_ids or {}).items() if v}
        self.rng = rng or random.Random()

        if delay_seconds is None:
            delay_seconds = require_setting("domain_checker.delay_seconds")
        self.delay_seconds = float(delay_seconds)

        if available_probability is None:
            available_probability = require_setting("domain_checker.available_probability")
        self.available_probability = float(available_probability)

        if suffixes is None:
            suffixes = require_setting("domain_checker.default_suffixes")
        self.suffixes = list(suffixes)

        self.registrars = require_setting("domain_checker.registrars")

    def registrar_links(self, domain: str) -> List[RegistrarLink]:
        """Search links for a domain at every configured registrar."""
        links = []
        for registrar in self.registrars:
            url = f"{registrar['base_url']}{domain}"
            affiliate_id = self.affiliate_ids.get(registrar.get('affiliate'))
            if affiliate_id:
                url += f"&aid={affiliate_id}"
            links.append(RegistrarLink(
                name=registrar['name'],
                url=url,
                price_range=registrar['price_range'],
            ))
        return links

    def _simulate(self, domain: str) -> DomainResult:
        available = self.rng.random() > 1.0 - self.available_probability
        return DomainResult(
            domain=domain,
            status=CheckStatus.AVAILABLE if available else CheckStatus.TAKEN,
            registrars=self.registrar_links(domain),
        )

    async def check(self, name: str, suffixes: Optional[List[str]] = None) -> List[DomainResult]:
        """
        Check every suffix for a name.

        Args:
            name: Business name (cleaned to lowercase alphanumerics)
            suffixes: Domain suffixes including the dot; defaults to the
                      configured list

        Returns:
            One DomainResult per suffix, in suffix order
        """
        if suffixes is None:
            suffixes = self.suffixes
        cleaned = clean_name(name)
        if not cleaned:
            logger.warning(f"No usable domain label in {name!r}")
            return []

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        results = [self._simulate(f"{cleaned}{suffix}") for suffix in suffixes]
        logger.debug(f"Domain check {name}: "
                     f"{sum(r.available for r in results)}/{len(results)} available")
        return results

    async def check_batch(self, names: List[str],
                          suffixes: Optional[List[str]] = None) -> Dict[str, List[DomainResult]]:
        """Check multiple names concurrently."""
        results = await asyncio.gather(*(self.check(n, suffixes) for n in names))
        return dict(zip(names, results))


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Check domain availability (simulated)')
    parser.add_argument('names', nargs='+', help='Business names to check')
    parser.add_argument('--suffixes', nargs='+', help='Domain suffixes, e.g. .com .io')
    args = parser.parse_args()

    checker = DomainChecker()
    batch = asyncio.run(checker.check_batch(args.names, args.suffixes))

    for name, results in batch.items():
        print(f"\n{'='*50}")
        print(f"Name: {name}")
        for r in results:
            status = "AVAILABLE" if r.available else "taken"
            print(f"  {r.domain}: {status}")
            for link in r.registrars:
                print(f"    {link.name} ({link.price_range}): {link.url}")

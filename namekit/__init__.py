#!/usr/bin/env python3
"""
NameKit - Business Name Ideation Toolkit
========================================

Generates candidate business names from keywords, rates their trademark
risk, checks domain and social handle availability and renders a logo
for each one.

Quick Start
-----------
    from namekit import NameKit

    kit = NameKit()

    # Candidate names only
    names = kit.generate("tech software", industry="technology")

    # Fully enriched records (runs the checks concurrently)
    records = kit.run(kit.generate_records("tech software", industry="technology"))

Modules
-------
    namekit.generators - Name generation, logo synthesis
    namekit.checkers   - Trademark, domain, social and similarity checks
    namekit.parallel   - Concurrent check fan-out, rate limiting
    namekit.config     - Affiliate configuration

CLI Usage
---------
    python -m namekit generate tech software -i technology
    python -m namekit check "Voltix" --json
    python -m namekit logo "Acme" -i finance -o logos/
"""

__version__ = "0.1.0"
__author__ = "NameKit"

import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from . import generators
from . import checkers
from . import config
from . import parallel

from .generators import (
    NameGenerator,
    NoKeywordsError,
    LogoGenerator,
    LOGO_MIME_TYPE,
    list_industries,
    get_industry,
    parse_keywords,
)
from .checkers import (
    TrademarkChecker,
    TrademarkResult,
    RiskLevel,
    DomainChecker,
    DomainResult,
    SocialChecker,
    SocialResult,
    CheckStatus,
    HandleRateLimiter,
    normalized_similarity,
)
from .config import Config, get_config, config as shared_config
from .parallel import ParallelConfig, gather_checks
from favorites import FavoritesStore
from settings import require_setting

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Unexpected failure while assembling a batch of name records."""

    def __init__(self, message: str = "Error generating names, please try again"):
        super().__init__(message)


@dataclass
class GeneratedNameRecord:
    """A candidate name with everything the checks found out about it"""
    name: str
    logo: str
    domains: List[DomainResult] = field(default_factory=list)
    trademark: Optional[TrademarkResult] = None
    social: List[SocialResult] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'logo': self.logo,
            'domains': [d.to_dict() for d in self.domains],
            'trademark': self.trademark.to_dict() if self.trademark else None,
            'social': [s.to_dict() for s in self.social],
        }


# =============================================================================
# NameKit Main Class
# =============================================================================

class NameKit:
    """
    Main interface for name generation and checking.

    Attributes
    ----------
    config : Config
        Affiliate configuration
    generator : NameGenerator
        Candidate name generator

    Examples
    --------
    Seeded generation:

        >>> kit = NameKit(rng=random.Random(7))
        >>> names = kit.generate("coffee", industry="food", count=3)

    Enriched records:

        >>> records = kit.run(kit.generate_records("coffee", industry="food"))
        >>> for record in records:
        ...     print(record.name, record.trademark.risk_level.value)
    """

    def __init__(self, config: Optional[Config] = None,
                 rng: Optional[random.Random] = None,
                 rate_limiter: Optional[HandleRateLimiter] = None,
                 parallel_config: Optional[ParallelConfig] = None):
        """
        Parameters
        ----------
        config : Config, optional
            Affiliate ids; read from the environment when omitted
        rng : random.Random, optional
            Random source shared by the generator and simulated checks.
            Seed it to make sampling and simulations reproducible.
        rate_limiter : HandleRateLimiter, optional
            Limiter for Instagram lookups
        parallel_config : ParallelConfig, optional
            Per-check timeout
        """
        self._config = config or shared_config()
        self._rng = rng or random.Random()

        self._generator = NameGenerator(rng=self._rng)
        self._logo = LogoGenerator()
        self._trademark = TrademarkChecker()
        self._domain = DomainChecker(affiliate_ids=self._config.affiliate_ids, rng=self._rng)
        self._social = SocialChecker(rate_limiter=rate_limiter, rng=self._rng)
        self._parallel = parallel_config or ParallelConfig()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def config(self) -> Config:
        return self._config

    @property
    def generator(self) -> NameGenerator:
        return self._generator

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def generate(self, keywords, industry: Optional[str] = None,
                 count: Optional[int] = None) -> List[str]:
        """
        Candidate names from the affix path.

        ``count=None`` returns the full pool; otherwise a random sample.

        Raises
        ------
        NoKeywordsError
            If no keyword survives normalization
        """
        return self._generator.generate(keywords, industry, count)

    def generate_industry_names(self, keywords, industry: Optional[str],
                                count: Optional[int] = None) -> List[str]:
        """Candidate names from the industry pattern path."""
        return self._generator.generate_industry_names(keywords, industry, count)

    def list_industries(self) -> dict:
        return list_industries()

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    def assess(self, name: str) -> TrademarkResult:
        """Trademark risk for one name."""
        return self._trademark.assess(name)

    def logo(self, name: str, industry: Optional[str] = None) -> str:
        """SVG logo for one name."""
        return self._logo.generate(name, industry or require_setting("logo.default_industry"))

    def export_logo(self, name: str, industry: Optional[str], directory):
        """Write ``<name>-logo.svg`` into ``directory``."""
        return self._logo.export(name, industry or require_setting("logo.default_industry"),
                                 directory)

    async def build_record(self, name: str, industry: Optional[str] = None) -> GeneratedNameRecord:
        """
        Run every check for one name concurrently and merge the results.

        Failed or timed-out checks fall back to empty/unchecked results.
        """
        results = await gather_checks({
            'domains': (self._domain.check(name), list),
            'trademark': (self._trademark.check(name), lambda: TrademarkResult.unchecked(name)),
            'social': (self._social.check(name), list),
        }, self._parallel, context=name)

        return GeneratedNameRecord(
            name=name,
            logo=self.logo(name, industry),
            domains=results['domains'],
            trademark=results['trademark'],
            social=results['social'],
        )

    async def build_records(self, names: List[str],
                            industry: Optional[str] = None) -> List[GeneratedNameRecord]:
        """Records for several names, in the order given."""
        try:
            return list(await asyncio.gather(*(self.build_record(n, industry) for n in names)))
        except Exception as e:
            logger.error(f"Error generating names: {type(e).__name__}: {e}")
            raise GenerationError() from e

    async def generate_records(self, keywords, industry: Optional[str] = None,
                               count: Optional[int] = None,
                               patterns: bool = False) -> List[GeneratedNameRecord]:
        """
        Generate candidates and enrich each one.

        Parameters
        ----------
        keywords : str or list
            User keywords
        industry : str, optional
            Industry key
        count : int, optional
            Number of candidates (default from app.yaml)
        patterns : bool
            Use the industry pattern path instead of the affix path

        Raises
        ------
        NoKeywordsError
            Before any check runs, if the keywords are empty
        GenerationError
            If assembling the batch fails; no partial results are returned
        """
        if patterns:
            names = self.generate_industry_names(keywords, industry, count)
        else:
            if count is None:
                count = int(require_setting("name_generator.default_count"))
            names = self.generate(keywords, industry, count)
        return await self.build_records(names, industry)

    def check(self, name: str, industry: Optional[str] = None) -> GeneratedNameRecord:
        """Synchronous single-name check."""
        return self.run(self.build_record(name, industry))

    @staticmethod
    def run(coro):
        """Run a coroutine to completion from synchronous code."""
        return asyncio.run(coro)


__all__ = [
    '__version__',
    'NameKit',
    'GeneratedNameRecord',
    'GenerationError',
    # Generators
    'NameGenerator',
    'NoKeywordsError',
    'LogoGenerator',
    'LOGO_MIME_TYPE',
    'list_industries',
    'get_industry',
    'parse_keywords',
    # Checkers
    'TrademarkChecker',
    'TrademarkResult',
    'RiskLevel',
    'DomainChecker',
    'DomainResult',
    'SocialChecker',
    'SocialResult',
    'CheckStatus',
    'HandleRateLimiter',
    'normalized_similarity',
    # Config
    'Config',
    'get_config',
    'ParallelConfig',
    'FavoritesStore',
]

#!/usr/bin/env python3
"""
Name Checkers
=============
Provides risk and availability checking:
- Trademark: containment/similarity against well-known marks
- Domain: simulated registrar lookups with affiliate links
- Social: GitHub and Instagram lookups, simulated Twitter/Facebook
- Similarity: Levenshtein-based string similarity
"""

from trademark_checker import (
    TrademarkChecker,
    TrademarkResult,
    RiskLevel,
)
from domain_checker import (
    DomainChecker,
    DomainResult,
    RegistrarLink,
    CheckStatus,
)
from social_checker import (
    SocialChecker,
    SocialResult,
    PLATFORMS,
    make_handle,
)
from similarity_checker import (
    clean_name,
    levenshtein_distance,
    normalized_similarity,
)
from rate_limiter import HandleRateLimiter

__all__ = [
    # Trademark
    'TrademarkChecker',
    'TrademarkResult',
    'RiskLevel',
    # Domain
    'DomainChecker',
    'DomainResult',
    'RegistrarLink',
    'CheckStatus',
    # Social
    'SocialChecker',
    'SocialResult',
    'PLATFORMS',
    'make_handle',
    'HandleRateLimiter',
    # Similarity
    'clean_name',
    'levenshtein_distance',
    'normalized_similarity',
]

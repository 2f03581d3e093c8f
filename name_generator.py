#!/usr/bin/env python3
"""
Business Name Generator
=======================
Builds candidate business names from user keywords.

Two generation paths:
- Affix path: keyword capitalizations, generic prefixes/suffixes and the
  selected industry's prefixes, suffixes and modifiers.
- Pattern path: weighted industry naming patterns, compound words from the
  industry's common vocabulary and a few lexical tricks (Flickr, Fiverr,
  Shopify, Twilio, Fastly).

Candidate pools are deduplicated by exact string. Selection from a pool is
random by default; pass a seeded ``random.Random`` to pin the output.
"""

import random
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Union

from settings import load_yaml, require_setting


class NoKeywordsError(ValueError):
    """Raised when keyword input is empty after normalization."""

    def __init__(self, message: str = "no keywords provided"):
        super().__init__(message)


@dataclass(frozen=True)
class NamePattern:
    """A naming pattern and the probability that it fires for a keyword"""
    pattern: str
    examples: tuple = ()
    weight: float = 0.0


@dataclass(frozen=True)
class IndustryPatterns:
    """Pattern-path vocabulary for one industry"""
    patterns: tuple = ()
    common_words: tuple = ()
    prefix_rules: tuple = ()
    suffix_rules: tuple = ()


@dataclass(frozen=True)
class Industry:
    """Static industry profile"""
    key: str
    name: str
    prefixes: tuple = ()
    suffixes: tuple = ()
    modifiers: tuple = ()
    palette: Dict[str, str] = field(default_factory=dict, compare=False, hash=False)
    naming: Optional[IndustryPatterns] = None


# =============================================================================
# Industry tables
# =============================================================================

def _build_industry(key: str, data: dict) -> Industry:
    naming = None
    if data.get('patterns'):
        naming = IndustryPatterns(
            patterns=tuple(
                NamePattern(
                    pattern=p['pattern'],
                    examples=tuple(p.get('examples', [])),
                    weight=float(p['weight']),
                )
                for p in data['patterns']
            ),
            common_words=tuple(data.get('common_words', [])),
            prefix_rules=tuple(data.get('prefix_rules', [])),
            suffix_rules=tuple(data.get('suffix_rules', [])),
        )
    return Industry(
        key=key,
        name=data.get('name', key.title()),
        prefixes=tuple(data.get('prefixes', [])),
        suffixes=tuple(data.get('suffixes', [])),
        modifiers=tuple(data.get('modifiers', [])),
        palette=dict(data.get('palette', {})),
        naming=naming,
    )


@lru_cache(maxsize=1)
def load_industries() -> Dict[str, Industry]:
    """Load industry profiles from industries.yaml."""
    raw = load_yaml('industries.yaml').get('industries')
    if not raw:
        raise ValueError("industries must be set in industries.yaml")
    return {key: _build_industry(key, data) for key, data in raw.items()}


def get_industry(key: Optional[str]) -> Optional[Industry]:
    """Look up an industry; None for empty or unknown keys."""
    if not key:
        return None
    return load_industries().get(key.lower())


def list_industries() -> Dict[str, str]:
    """Industry key -> display name."""
    return {key: ind.name for key, ind in load_industries().items()}


# =============================================================================
# Helpers
# =============================================================================

def capitalize(word: str) -> str:
    """Upper-case the first character; leave the rest untouched."""
    return word[:1].upper() + word[1:]


def parse_keywords(keywords: Union[str, Iterable[str], None]) -> List[str]:
    """
    Normalize keyword input.

    Accepts a whitespace-separated string or a sequence of strings. Tokens
    are lowercased and trimmed; empty tokens and repeats are dropped.
    """
    if keywords is None:
        return []
    if isinstance(keywords, str):
        keywords = [keywords]

    result = []
    for item in keywords:
        for token in str(item).lower().split():
            token = token.strip()
            if token and token not in result:
                result.append(token)
    return result


def _require_keywords(keywords) -> List[str]:
    parsed = parse_keywords(keywords)
    if not parsed:
        raise NoKeywordsError()
    return parsed


def strip_vowels(word: str) -> str:
    return re.sub(r'[aeiou]', '', word)


def double_last_letter(word: str) -> str:
    """Collapse or extend the trailing run of one letter to exactly two."""
    return re.sub(r'(.)\1*\Z', r'\1\1', word, count=1)


def lexical_variants(word: str) -> List[str]:
    return [
        strip_vowels(word),
        double_last_letter(word),
        f"{word}ly",
        f"{word}ify",
        f"{word}io",
    ]


# =============================================================================
# Generator
# =============================================================================

class NameGenerator:
    """
    Generates candidate business names.

    Usage:
        gen = NameGenerator(rng=random.Random(42))
        pool = gen.generate("tech software", industry="technology")
        picks = gen.generate("tech software", industry="technology", count=8)
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.generic_prefixes = list(require_setting("name_generator.generic_prefixes"))
        self.generic_suffixes = list(require_setting("name_generator.generic_suffixes"))
        self.min_length = int(require_setting("name_generator.min_length"))
        self.max_length = int(require_setting("name_generator.max_length"))
        self.ideal_length = int(require_setting("name_generator.ideal_length"))

    # -------------------------------------------------------------------------
    # Affix path
    # -------------------------------------------------------------------------

    def candidates(self, keywords, industry: Optional[str] = None) -> List[str]:
        """Full deduplicated candidate pool for the affix path."""
        words = _require_keywords(keywords)
        profile = get_industry(industry)

        pool = {}
        for word in words:
            pool[capitalize(word)] = None

        for word in words:
            root = capitalize(word)
            for prefix in self.generic_prefixes:
                pool[f"{prefix}{root}"] = None
            for suffix in self.generic_suffixes:
                pool[f"{root}{suffix}"] = None

        if profile is not None:
            for word in words:
                root = capitalize(word)
                for prefix in profile.prefixes:
                    pool[f"{prefix}{root}"] = None
                for suffix in profile.suffixes:
                    pool[f"{root}{suffix}"] = None
                for modifier in profile.modifiers:
                    pool[f"{modifier}{root}"] = None

        return list(pool)

    def generate(self, keywords, industry: Optional[str] = None,
                 count: Optional[int] = None) -> List[str]:
        """
        Generate names with the affix path.

        Args:
            keywords: Whitespace-separated string or sequence of keywords
            industry: Industry key (unknown keys are ignored)
            count: Size of the random sample; None returns the whole pool

        Raises:
            NoKeywordsError: If no keyword survives normalization
        """
        pool = self.candidates(keywords, industry)
        if count is None:
            return pool
        return self.sample(pool, count)

    def sample(self, names: List[str], count: int) -> List[str]:
        """Random selection of up to ``count`` names (shuffle, then slice)."""
        shuffled = list(names)
        self.rng.shuffle(shuffled)
        return shuffled[:max(0, count)]

    # -------------------------------------------------------------------------
    # Pattern path
    # -------------------------------------------------------------------------

    def industry_names(self, keyword: str, industry: Optional[str]) -> List[str]:
        """Pattern-path names for one keyword; empty for industries without patterns."""
        profile = get_industry(industry)
        if profile is None or profile.naming is None:
            return []

        naming = profile.naming
        word = keyword.lower().strip()
        if not word:
            return []
        fmt = {'word': word, 'Word': capitalize(word)}

        names = {}
        for pattern in naming.patterns:
            if self.rng.random() < pattern.weight:
                for rule in naming.prefix_rules:
                    names[rule.format(**fmt)] = None
                for rule in naming.suffix_rules:
                    names[rule.format(**fmt)] = None

        for common in naming.common_words:
            if common != word:
                names[f"{word}{capitalize(common)}"] = None
                names[f"{common}{capitalize(word)}"] = None

        for variant in lexical_variants(word):
            names[variant] = None

        results = []
        for name in names:
            name = capitalize(name)
            if self.min_length <= len(name) <= self.max_length and name not in results:
                results.append(name)
        return results

    def generate_industry_names(self, keywords, industry: Optional[str],
                                count: Optional[int] = None) -> List[str]:
        """
        Generate names with the pattern path.

        Keyword pairs are also combined (``keyword + OtherKeyword``) and skip
        the length filter. The pool is shuffled, then ranked by distance
        from the ideal length, so ties come back in random order.
        """
        words = _require_keywords(keywords)
        if count is None:
            count = int(require_setting("name_generator.pattern_count"))

        pool = {}
        for word in words:
            for name in self.industry_names(word, industry):
                pool[name] = None
            for other in words:
                if other != word:
                    pool[capitalize(f"{word}{capitalize(other)}")] = None

        ranked = self.sample(list(pool), len(pool))
        ranked.sort(key=lambda n: abs(self.ideal_length - len(n)))
        return ranked[:max(0, count)]


def generate_names(keywords, industry: Optional[str] = None,
                   count: Optional[int] = None) -> List[str]:
    """Quick affix-path generation with a fresh generator."""
    return NameGenerator().generate(keywords, industry, count)


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Generate business names')
    parser.add_argument('keywords', nargs='+', help='Keywords')
    parser.add_argument('--industry', '-i', choices=sorted(load_industries()))
    parser.add_argument('-n', '--count', type=int, help='Sample size (default: all)')
    parser.add_argument('--patterns', action='store_true', help='Use the industry pattern path')
    parser.add_argument('--seed', type=int, help='Random seed')
    args = parser.parse_args()

    gen = NameGenerator(rng=random.Random(args.seed))
    if args.patterns:
        names = gen.generate_industry_names(args.keywords, args.industry, args.count)
    else:
        names = gen.generate(args.keywords, args.industry, args.count)
    for name in names:
        print(name)

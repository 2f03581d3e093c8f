#!/usr/bin/env python3
"""
Name and Logo Generators
========================
- NameGenerator: affix path and industry pattern path
- LogoGenerator: deterministic SVG logos
"""

from name_generator import (
    NameGenerator,
    NoKeywordsError,
    Industry,
    IndustryPatterns,
    NamePattern,
    capitalize,
    parse_keywords,
    load_industries,
    get_industry,
    list_industries,
    generate_names,
)
from logo_generator import (
    LogoGenerator,
    LOGO_MIME_TYPE,
    name_hash,
    get_initials,
    get_palette,
    generate_logo,
)

__all__ = [
    'NameGenerator',
    'NoKeywordsError',
    'Industry',
    'IndustryPatterns',
    'NamePattern',
    'capitalize',
    'parse_keywords',
    'load_industries',
    'get_industry',
    'list_industries',
    'generate_names',
    'LogoGenerator',
    'LOGO_MIME_TYPE',
    'name_hash',
    'get_initials',
    'get_palette',
    'generate_logo',
]

#!/usr/bin/env python3
"""
Logo Generator
==============
Renders a small abstract SVG logo for a business name.

The output is a pure function of (name, industry): a 32-bit rolling string
hash picks one of three patterns and drives its geometry, the industry
picks the palette, and the name's initials are drawn on top.

The hash reproduces the wrap-around of a 32-bit accumulator exactly, so
a given name always maps to the same pattern and coordinates.
"""

import re
from pathlib import Path
from typing import Dict, List
from xml.sax.saxutils import escape

from name_generator import load_industries
from settings import require_setting

LOGO_MIME_TYPE = "image/svg+xml"

_INT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - 0x100000000 if value & 0x80000000 else value


def _utf16_units(text: str) -> List[int]:
    data = text.encode('utf-16-le', 'surrogatepass')
    return [int.from_bytes(data[i:i + 2], 'little') for i in range(0, len(data), 2)]


def name_hash(name: str) -> int:
    """
    Rolling multiply-by-31 hash: hash = c + ((hash << 5) - hash).

    The shift operates on the accumulator wrapped to a signed 32-bit
    integer; the subtraction and addition do not wrap.
    """
    value = 0
    for unit in _utf16_units(name):
        value = unit + (_to_int32(_to_int32(value) << 5) - value)
    return value


def _mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(a) % b
    return -r if a < 0 else r


def _num(value) -> str:
    """Format a number for SVG attributes without a trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get_initials(name: str) -> str:
    """First letter of each whitespace-separated word, at most two, upper-cased."""
    return ''.join(word[0] for word in name.split()).upper()[:2]


def get_palette(industry: str) -> Dict[str, str]:
    """Primary/secondary/accent colours; unknown industries use the default palette."""
    industries = load_industries()
    default = require_setting("logo.default_industry")
    profile = industries.get((industry or '').lower()) or industries[default]
    palette = profile.palette or industries[default].palette
    return {
        'primary': palette['primary'],
        'secondary': palette['secondary'],
        'accent': palette['accent'],
    }


# =============================================================================
# Patterns
# =============================================================================

def circle_pattern(h: int) -> str:
    circles = []
    for i in range(5):
        cx = 40 + _mod(h, 120)
        cy = 40 + _mod(h * i, 120)
        r = 20 + _mod(h, 40)
        opacity = 0.1 + (i * 0.2)
        circles.append(
            f'<circle cx="{cx}" cy="{cy}" r="{r}" fill="url(#grad)" '
            f'opacity="{_num(opacity)}"/>'
        )
    return '\n  '.join(circles)


def triangle_pattern(h: int) -> str:
    points = ' '.join([
        f"{50 + _mod(h, 50)},{50 + _mod(h, 30)}",
        f"{150 - _mod(h, 50)},{50 + _mod(h, 30)}",
        f"{100 + _mod(h, 20)},{150 - _mod(h, 30)}",
    ])
    return f'<polygon points="{points}" fill="url(#grad)" opacity="0.8"/>'


def square_pattern(h: int) -> str:
    squares = []
    for i in range(3):
        x = 40 + _mod(h * i, 80)
        y = 40 + _mod(h * i, 80)
        size = 40 + _mod(h, 40)
        rotation = _mod(h, 90)
        opacity = 0.3 + (i * 0.2)
        squares.append(
            f'<rect x="{x}" y="{y}" width="{size}" height="{size}" '
            f'transform="rotate({rotation} {_num(x + size / 2)} {_num(y + size / 2)})" '
            f'fill="url(#grad)" opacity="{_num(opacity)}"/>'
        )
    return '\n  '.join(squares)


PATTERNS = (circle_pattern, triangle_pattern, square_pattern)


def select_pattern(name: str) -> int:
    """Index into PATTERNS for a name."""
    return abs(name_hash(name)) % len(PATTERNS)


# =============================================================================
# Generator
# =============================================================================

class LogoGenerator:
    """
    Builds SVG logos.

    Usage:
        svg = LogoGenerator().generate("Acme", "finance")
        path = LogoGenerator().export("Acme", "finance", Path("."))
    """

    def __init__(self, size: int = None):
        if size is None:
            size = int(require_setting("logo.size"))
        self.size = size

    def generate(self, name: str, industry: str) -> str:
        """Return standalone SVG markup for a name."""
        colors = get_palette(industry)
        h = name_hash(name)
        pattern = PATTERNS[select_pattern(name)](h)
        initials = escape(get_initials(name))
        size = self.size

        return (
            f'<svg width="{size}" height="{size}" viewBox="0 0 200 200" '
            f'xmlns="http://www.w3.org/2000/svg">\n'
            f'  <defs>\n'
            f'    <linearGradient id="grad" x1="0%" y1="0%" x2="100%" y2="100%">\n'
            f'      <stop offset="0%" style="stop-color:{colors["primary"]};stop-opacity:1"/>\n'
            f'      <stop offset="100%" style="stop-color:{colors["secondary"]};stop-opacity:1"/>\n'
            f'    </linearGradient>\n'
            f'  </defs>\n'
            f'  <rect width="200" height="200" fill="white"/>\n'
            f'  {pattern}\n'
            f'  <text x="100" y="115" font-family="Arial, sans-serif" font-size="40" '
            f'font-weight="bold" text-anchor="middle" fill="{colors["accent"]}">'
            f'{initials}</text>\n'
            f'</svg>\n'
        )

    def filename(self, name: str) -> str:
        """File name for a logo; path separators and dots are dropped."""
        safe = re.sub(r"[^A-Za-z0-9 _-]", "", name).strip()
        if not safe:
            raise ValueError(f"no usable file name in {name!r}")
        return f"{safe}-logo.svg"

    def export(self, name: str, industry: str, directory: Path) -> Path:
        """Write the logo to ``<directory>/<name>-logo.svg``."""
        directory = Path(directory)
        path = directory / self.filename(name)
        directory.mkdir(parents=True, exist_ok=True)
        path.write_text(self.generate(name, industry), encoding='utf-8')
        return path


def generate_logo(name: str, industry: str) -> str:
    """Quick logo for a single name."""
    return LogoGenerator().generate(name, industry)


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Render an SVG logo')
    parser.add_argument('name')
    parser.add_argument('--industry', '-i', default=require_setting("logo.default_industry"))
    parser.add_argument('--output', '-o', help='Directory to write <name>-logo.svg into')
    args = parser.parse_args()

    if args.output:
        print(LogoGenerator().export(args.name, args.industry, Path(args.output)))
    else:
        print(LogoGenerator().generate(args.name, args.industry))

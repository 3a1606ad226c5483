# ncs_color_engine/catalog/notation.py
# ──────────────────────────────────────────────────────────────
# NCS notation: "S BBCC-H" codes and the hue circle
# ──────────────────────────────────────────────────────────────
"""
notation.

Does: Format, normalize and parse NCS codes ("S 1050-Y90R"), and convert hue
      tokens to and from angles on the Y=0°, R=90°, B=180°, G=270° circle.
Returns: format_code(), normalize_code(), parse_code(), hue_to_degrees(),
         degrees_to_hue().
Used by: Catalog generation (codes + index keys), snapping, demo CLI.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from ncs_color_engine.catalog.constants import HUE_SEQUENCE, NEUTRAL_HUE, PRIMARY_HUE_ANGLES
from ncs_color_engine.color.conversions import round_half_up

__all__ = [
    "ParsedCode",
    "format_code",
    "normalize_code",
    "parse_code",
    "hue_to_degrees",
    "degrees_to_hue",
]

_DIGITS = frozenset("0123456789")
_SEPARATORS = frozenset({"-", "–"})  # hyphen, en-dash
_HUE_CHARS = frozenset("YRBGNyrbgn0123456789")
_SYSTEM_PREFIX = frozenset("Ss")
_PRIMARIES = frozenset(PRIMARY_HUE_ANGLES)


class ParsedCode(NamedTuple):
    blackness: int
    chromaticness: int
    hue: str


# ──────────────────────────────────────────────────────────────
# 1) Formatting
# ──────────────────────────────────────────────────────────────


def format_code(blackness: int, chromaticness: int, hue: str) -> str:
    """Does: Render the canonical 'S BBCC-H' form (e.g. 'S 0502-Y')."""
    return f"S {blackness:02d}{chromaticness:02d}-{hue}"


def normalize_code(code: str) -> str:
    """Does: Drop every whitespace character and uppercase; used as index key."""
    return "".join(code.split()).upper()


# ──────────────────────────────────────────────────────────────
# 2) Parsing
#    grammar: 'S' ws* D D D D SEP HUECHAR+   (case-insensitive,
#    may start anywhere, e.g. "NCS S 2005-Y20R")
# ──────────────────────────────────────────────────────────────


def _parse_at(text: str, pos: int) -> Optional[ParsedCode]:
    """Try the grammar right after an 'S' found at text[pos - 1]."""
    n = len(text)
    while pos < n and text[pos].isspace():
        pos += 1

    digits = text[pos:pos + 4]
    if len(digits) != 4 or not all(ch in _DIGITS for ch in digits):
        return None
    pos += 4

    if pos >= n or text[pos] not in _SEPARATORS:
        return None
    pos += 1

    end = pos
    while end < n and text[end] in _HUE_CHARS:
        end += 1
    if end == pos:
        return None

    return ParsedCode(int(digits[:2]), int(digits[2:]), text[pos:end].upper())


def parse_code(code: str) -> Optional[ParsedCode]:
    """
    Does: Extract blackness, chromaticness and hue token from a (possibly
          noisy) code such as 'S 1050-Y90R', 's1050–y90r' or 'NCS S 0500-N'.
    Returns: ParsedCode with uppercase hue, or None when nothing matches.
    """
    if not isinstance(code, str):
        return None
    # ASCII-only matching; str.upper() would turn e.g. "ſ" into "S"
    for i, ch in enumerate(code):
        if ch in _SYSTEM_PREFIX:
            parsed = _parse_at(code, i + 1)
            if parsed is not None:
                return parsed
    return None


# ──────────────────────────────────────────────────────────────
# 3) Hue circle
# ──────────────────────────────────────────────────────────────


def hue_to_degrees(hue: str) -> float:
    """
    Does: Map a hue token to its angle; 'X{nn}Z' is nn% of the way from X's
          quadrant start. Neutral or unrecognised tokens map to 0.
    """
    h = hue.strip().upper()
    if h == NEUTRAL_HUE:
        return 0.0
    if h in PRIMARY_HUE_ANGLES:
        return PRIMARY_HUE_ANGLES[h]

    # first "<primary><digits><primary>" run anywhere in the token
    n = len(h)
    for i, ch in enumerate(h):
        if ch not in _PRIMARIES:
            continue
        j = i + 1
        while j < n and h[j] in _DIGITS:
            j += 1
        if j > i + 1 and j < n and h[j] in _PRIMARIES:
            percent = int(h[i + 1:j])
            return (PRIMARY_HUE_ANGLES[ch] + percent / 100 * 90) % 360
    return 0.0


def degrees_to_hue(degrees: float) -> str:
    """Does: Inverse of hue_to_degrees, rounding the blend to a whole percent."""
    d = degrees % 360
    quadrant = int(d // 90)
    start = HUE_SEQUENCE[quadrant]
    percent = round_half_up((d % 90) / 90 * 100)
    if percent == 0:
        return start
    towards = HUE_SEQUENCE[(quadrant + 1) % len(HUE_SEQUENCE)]
    if percent == 100:
        return towards
    return f"{start}{percent}{towards}"

"""
conversions.py
==============

Does: Convert between hex, sRGB, CIE XYZ (D65), CIE Lab, HSL and CMYK.
Used By: Catalog generation, nearest-color matching, colorimeter import,
         scan-result enrichment.
Returns: Plain tuples (RGB ints, XYZ/Lab/HSL floats, CMYK ints) or None for
         malformed hex input.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Optional, Tuple

import webcolors

# Public surface
__all__ = [
    "RGB",
    "XYZ",
    "LAB",
    "HSL",
    "CMYK",
    "D65_WHITE",
    "round_half_up",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_xyz",
    "xyz_to_lab",
    "rgb_to_lab",
    "calculate_lrv",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "rgb_to_cmyk",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]
XYZ = Tuple[float, float, float]
LAB = Tuple[float, float, float]
HSL = Tuple[float, float, float]
CMYK = Tuple[int, int, int, int]

# ── Constants ─────────────────────────────────────────────────────────────────
D65_WHITE: XYZ = (95.047, 100.000, 108.883)

_SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

_LAB_EPSILON = 0.008856
_LAB_KAPPA = 903.3

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def round_half_up(value: float) -> int:
    """Does: Round .5 away from the floor (2.5 → 3), unlike Python's banker's round()."""
    return int(math.floor(value + 0.5))


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


# =============================================================================
# 1) HEX <-> RGB
# =============================================================================

def hex_to_rgb(hex_value: str) -> Optional[RGB]:
    """Does: Parse '#RRGGBB' or 'RRGGBB' (any case); None for any other shape."""
    if not isinstance(hex_value, str):
        return None
    digits = hex_value[1:] if hex_value.startswith("#") else hex_value
    if len(digits) != 6 or not all(ch in _HEX_DIGITS for ch in digits):
        return None
    return tuple(webcolors.hex_to_rgb(f"#{digits}"))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Does: Clamp channels to 0–255, round, and format as uppercase '#RRGGBB'."""
    channels = tuple(round_half_up(_clamp(c, 0, 255)) for c in (r, g, b))
    return webcolors.rgb_to_hex(channels).upper()


# =============================================================================
# 2) RGB -> XYZ -> LAB
# =============================================================================

def _srgb_to_linear(v: float) -> float:
    return ((v + 0.055) / 1.055) ** 2.4 if v > 0.04045 else v / 12.92


def rgb_to_xyz(r: float, g: float, b: float) -> XYZ:
    """Does: sRGB (0–255) to CIE XYZ under D65, scaled so white has Y = 100."""
    lin = [_srgb_to_linear(c / 255) for c in (r, g, b)]
    x, y, z = (sum(m * c for m, c in zip(row, lin)) for row in _SRGB_TO_XYZ)
    return x * 100, y * 100, z * 100


def _f_lab(t: float) -> float:
    return t ** (1 / 3) if t > _LAB_EPSILON else (_LAB_KAPPA * t + 16) / 116


def xyz_to_lab(x: float, y: float, z: float) -> LAB:
    """Does: CIE XYZ (percentage range) to CIE Lab against the D65 white."""
    xr, yr, zr = D65_WHITE
    fx, fy, fz = _f_lab(x / xr), _f_lab(y / yr), _f_lab(z / zr)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


@lru_cache(maxsize=8192)
def rgb_to_lab(r: int, g: int, b: int) -> LAB:
    """Does: sRGB to Lab through XYZ (no direct shortcut)."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def calculate_lrv(r: float, g: float, b: float) -> int:
    """Does: Light Reflectance Value, i.e. the rounded XYZ luminance (0–100)."""
    return round_half_up(rgb_to_xyz(r, g, b)[1])


# =============================================================================
# 3) HSL / CMYK
# =============================================================================

def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    """
    Does: Standard HSL → RGB.
    Args:
        hue: degrees, 0–360.
        saturation: percent, 0–100.
        lightness: percent, 0–100.
    Returns: RGB ints.
    """
    h = hue / 360
    s = saturation / 100
    l = lightness / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Does: RGB → (hue degrees, saturation 0–1, lightness 0–1)."""
    r, g, b = r / 255, g / 255, b / 255
    hi, lo = max(r, g, b), min(r, g, b)
    l = (hi + lo) / 2
    if hi == lo:
        return 0.0, 0.0, l

    d = hi - lo
    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
    if hi == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6 * 360, s, l


def rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    """Does: Naive device-independent RGB → CMYK percentages."""
    r, g, b = r / 255, g / 255, b / 255
    k = min(1 - r, 1 - g, 1 - b)
    if k == 1:
        c = m = y = 0.0
    else:
        c = (1 - r - k) / (1 - k)
        m = (1 - g - k) / (1 - k)
        y = (1 - b - k) / (1 - k)
    return (
        round_half_up(c * 100),
        round_half_up(m * 100),
        round_half_up(y * 100),
        round_half_up(k * 100),
    )

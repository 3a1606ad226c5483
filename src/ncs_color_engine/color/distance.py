"""
distance.py
===========

Does: Perceptual color differences in Lab (ΔE76 and CIEDE2000) and the
      High/Medium/Low confidence bands used when reporting a match.
Used By: Catalog matching, snapping, similar-color ranking, colorimeter import.
Returns: Distances (float) and confidence labels.
"""

from __future__ import annotations

import math
from typing import Literal, Optional

from ncs_color_engine.color.conversions import LAB, hex_to_rgb, rgb_to_lab

__all__ = [
    "Confidence",
    "delta_e76",
    "delta_e2000",
    "hex_delta_e",
    "get_match_confidence",
    "HIGH_CONFIDENCE_MAX",
    "MEDIUM_CONFIDENCE_MAX",
]
__docformat__ = "google"

Confidence = Literal["High", "Medium", "Low"]

_POW25_7 = 25.0 ** 7

# ΔE2000 band edges (inclusive)
HIGH_CONFIDENCE_MAX = 2.0
MEDIUM_CONFIDENCE_MAX = 5.0


def delta_e76(lab1: LAB, lab2: LAB) -> float:
    """Does: CIE76 colour difference (Euclidean distance in Lab)."""
    return math.sqrt(sum((c2 - c1) ** 2 for c1, c2 in zip(lab1, lab2)))


def delta_e2000(lab1: LAB, lab2: LAB) -> float:
    """
    Does: CIEDE2000 colour difference with kL = kC = kH = 1.

    Follows Sharma, Wu & Dalal (2005): the G factor re-scales a* near neutral
    axes, hue differences take the short way around the circle, and RT rotates
    the chroma/hue terms in the blue region.
    """
    l1, a1, b1 = lab1
    l2, a2, b2 = lab2

    # 1) chroma and the a* rotation factor
    c1 = math.sqrt(a1 * a1 + b1 * b1)
    c2 = math.sqrt(a2 * a2 + b2 * b2)
    c_avg7 = ((c1 + c2) / 2) ** 7
    g = 0.5 * (1 - math.sqrt(c_avg7 / (c_avg7 + _POW25_7)))

    a1p = a1 * (1 + g)
    a2p = a2 * (1 + g)
    c1p = math.sqrt(a1p * a1p + b1 * b1)
    c2p = math.sqrt(a2p * a2p + b2 * b2)
    h1p = math.degrees(math.atan2(b1, a1p)) % 360
    h2p = math.degrees(math.atan2(b2, a2p)) % 360

    # 2) differences
    dl = l2 - l1
    dc = c2p - c1p

    chroma_product = c1p * c2p
    dh_raw = h2p - h1p
    if chroma_product == 0:
        dh = 0.0
    elif abs(dh_raw) <= 180:
        dh = dh_raw
    elif dh_raw > 180:
        dh = dh_raw - 360
    else:
        dh = dh_raw + 360
    d_big_h = 2 * math.sqrt(chroma_product) * math.sin(math.radians(dh) / 2)

    # 3) means
    l_avg = (l1 + l2) / 2
    c_avg = (c1p + c2p) / 2
    if chroma_product == 0:
        h_avg = h1p + h2p
    elif abs(h1p - h2p) <= 180:
        h_avg = (h1p + h2p) / 2
    elif h1p + h2p < 360:
        h_avg = (h1p + h2p + 360) / 2
    else:
        h_avg = (h1p + h2p - 360) / 2

    # 4) weighting functions
    t = (
        1
        - 0.17 * math.cos(math.radians(h_avg - 30))
        + 0.24 * math.cos(math.radians(2 * h_avg))
        + 0.32 * math.cos(math.radians(3 * h_avg + 6))
        - 0.20 * math.cos(math.radians(4 * h_avg - 63))
    )
    l_offset2 = (l_avg - 50) ** 2
    sl = 1 + (0.015 * l_offset2) / math.sqrt(20 + l_offset2)
    sc = 1 + 0.045 * c_avg
    sh = 1 + 0.015 * c_avg * t

    c_avg_7 = c_avg ** 7
    rt = -2 * math.sqrt(c_avg_7 / (c_avg_7 + _POW25_7)) * math.sin(
        math.radians(60 * math.exp(-(((h_avg - 275) / 25) ** 2)))
    )

    # 5) combine
    tl = dl / sl
    tc = dc / sc
    th = d_big_h / sh
    return math.sqrt(tl * tl + tc * tc + th * th + rt * tc * th)


def hex_delta_e(hex1: str, hex2: str) -> Optional[float]:
    """Does: CIEDE2000 between two hex colours; None if either is malformed."""
    rgb1 = hex_to_rgb(hex1)
    rgb2 = hex_to_rgb(hex2)
    if rgb1 is None or rgb2 is None:
        return None
    return delta_e2000(rgb_to_lab(*rgb1), rgb_to_lab(*rgb2))


def get_match_confidence(delta_e: float) -> Confidence:
    """Does: Map a ΔE2000 value to High (≤2), Medium (≤5) or Low."""
    if delta_e <= HIGH_CONFIDENCE_MAX:
        return "High"
    if delta_e <= MEDIUM_CONFIDENCE_MAX:
        return "Medium"
    return "Low"

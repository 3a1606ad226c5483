"""
naming.py.

Does: Build cosmetic descriptive names ("Vivid Light Orange", "Medium Grey")
from blackness, chromaticness and hue token. Names never influence matching.
"""

from __future__ import annotations

from ncs_color_engine.catalog.constants import NEUTRAL_HUE

__all__ = ["lightness_word", "saturation_word", "hue_family", "generate_color_name"]

# (upper blackness bound, word); first match wins
_LIGHTNESS_BANDS = (
    (5, "Very Light"),
    (20, "Light"),
    (40, "Medium Light"),
    (60, "Medium"),
    (80, "Dark"),
)

# (lower chromaticness bound, word)
_SATURATION_BANDS = (
    (60, "Vivid"),
    (40, "Strong"),
    (20, ""),
)


def lightness_word(blackness: int) -> str:
    for upper, word in _LIGHTNESS_BANDS:
        if blackness <= upper:
            return word
    return "Very Dark"


def saturation_word(chromaticness: int) -> str:
    for lower, word in _SATURATION_BANDS:
        if chromaticness >= lower:
            return word
    return "Pale"


def _blend_percent(hue: str) -> int:
    digits = ""
    for ch in hue:
        if ch.isdigit():
            digits += ch
        elif digits:
            break
    return int(digits) if digits else 0


def hue_family(hue: str) -> str:
    """Does: Name the hue family from the dominant letter and blend percentage."""
    h = hue.upper()
    pct = _blend_percent(h)

    if h == "Y" or (h.startswith("Y") and "R" in h and pct < 50):
        return "Yellow"
    if "Y" in h and "R" in h and pct >= 50:
        return "Orange"
    if h == "R" or (h.startswith("R") and "B" in h and pct < 30):
        return "Red"
    if h.startswith("R") and "B" in h:
        return "Magenta" if pct < 70 else "Purple"
    if h == "B" or (h.startswith("B") and "G" in h and pct < 50):
        return "Blue"
    if h.startswith("B") and "G" in h:
        return "Teal"
    if h == "G" or (h.startswith("G") and "Y" in h and pct < 50):
        return "Green"
    if h.startswith("G") and "Y" in h:
        return "Lime"
    return "Color"


def generate_color_name(blackness: int, chromaticness: int, hue: str) -> str:
    """Does: Join saturation, lightness and hue-family words; neutrals get grey scale names."""
    lightness = lightness_word(blackness)

    if hue == NEUTRAL_HUE or chromaticness == 0:
        if blackness == 0:
            return "White"
        if blackness >= 95:
            return "Black"
        return f"{lightness} Grey"

    parts = (saturation_word(chromaticness), lightness, hue_family(hue))
    return " ".join(p for p in parts if p)

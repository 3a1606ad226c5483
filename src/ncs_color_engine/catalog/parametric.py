"""
parametric.py
=============

Does: Approximate an NCS triple (blackness, chromaticness, hue angle) as sRGB
      by mapping it onto HSL. This is the engine's own internally consistent
      model, not the licensed NCS colour-appearance transform.
Used By: Catalog generation and snapping of off-catalog codes.
Returns: RGB ints.
"""

from __future__ import annotations

from ncs_color_engine.color.conversions import RGB, hsl_to_rgb, round_half_up

__all__ = ["ncs_hue_to_hsl_hue", "ncs_to_rgb"]
__docformat__ = "google"


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def ncs_hue_to_hsl_hue(hue_degrees: float) -> float:
    """
    Does: Map the NCS circle (Y 0°, R 90°, B 180°, G 270°) onto the HSL hue
          circle (red 0°, yellow 60°, green 120°, blue 240°).

    The two circles run in opposite directions, so each NCS quadrant gets its
    own linear segment: Y→R is 60→0, R→B is 360→240, B→G is 240→120 and
    G→Y is 120→60.
    """
    d = hue_degrees % 360
    if d <= 90:
        return 60 - (d / 90) * 60
    if d <= 180:
        return 360 - ((d - 90) / 90) * 120
    if d <= 270:
        return 240 - ((d - 180) / 90) * 120
    return 120 - ((d - 270) / 90) * 60


def ncs_to_rgb(
    blackness: float,
    chromaticness: float,
    hue_degrees: float,
    is_neutral: bool = False,
) -> RGB:
    """
    Does: Convert NCS parameters to an approximate sRGB colour.

    Args:
        blackness: 0–100.
        chromaticness: 0–100.
        hue_degrees: NCS hue angle (see ``hue_to_degrees``).
        is_neutral: True for the 'N' hue; forces a grey.

    Returns: RGB ints. Neutral or zero-chroma input gives a pure grey of
        ``255 * (1 - blackness / 100)``.
    """
    if is_neutral or chromaticness == 0:
        gray = round_half_up(255 * (1 - blackness / 100))
        return gray, gray, gray

    whiteness = 100 - blackness - chromaticness
    lightness = _clamp_percent((whiteness + 50 - blackness) / 2)
    saturation = _clamp_percent(chromaticness * 1.5)
    return hsl_to_rgb(ncs_hue_to_hsl_hue(hue_degrees), saturation, lightness)

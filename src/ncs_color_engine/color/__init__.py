"""
color.
=====

Does: Aggregate the colour-space converter and the perceptual distance engine.
Used By: Catalog generation, matching, colorimeter import.
Returns: Pure functions only; no state beyond a small Lab memo.
"""

from .conversions import (
    CMYK,
    HSL,
    LAB,
    RGB,
    XYZ,
    calculate_lrv,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz,
    round_half_up,
    xyz_to_lab,
)
from .distance import (
    Confidence,
    delta_e76,
    delta_e2000,
    get_match_confidence,
    hex_delta_e,
)

__all__ = [
    # types
    "RGB",
    "XYZ",
    "LAB",
    "HSL",
    "CMYK",
    "Confidence",
    # conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_xyz",
    "xyz_to_lab",
    "rgb_to_lab",
    "calculate_lrv",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "rgb_to_cmyk",
    "round_half_up",
    # distance
    "delta_e76",
    "delta_e2000",
    "hex_delta_e",
    "get_match_confidence",
]

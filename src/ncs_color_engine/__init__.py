"""
ncs_color_engine
================

Does: Root package for the NCS colour engine (conversions, CIEDE2000 distance,
      generated catalog, matching/snapping, colorimeter import).
Returns: Re-exports the everyday API; subpackages hold the rest.
Used by: Scan pipelines, similar-colour features, import tools.
"""

from ncs_color_engine.catalog import CatalogEntry, get_catalog
from ncs_color_engine.color import (
    calculate_lrv,
    delta_e76,
    delta_e2000,
    get_match_confidence,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_lab,
)
from ncs_color_engine.matching import (
    MatchResult,
    SnapResult,
    find_nearest,
    find_similar,
    get_by_code,
    snap_to_standard,
)

__all__: list[str] = [
    "CatalogEntry",
    "MatchResult",
    "SnapResult",
    "get_catalog",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_xyz",
    "xyz_to_lab",
    "rgb_to_lab",
    "calculate_lrv",
    "delta_e76",
    "delta_e2000",
    "get_match_confidence",
    "get_by_code",
    "find_nearest",
    "find_similar",
    "snap_to_standard",
]
__docformat__ = "google"

"""
catalog.
=======

Does: Aggregate the catalog grids, NCS notation helpers, the inverse parametric
      model, descriptive naming, and the one-per-process generated catalog.
Used By: Matching, colorimeter import, demo CLI.
Returns: Constants, pure helpers, and get_catalog().
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    ALL_HUES,
    BLACKNESS_VALUES,
    CHROMATIC_HUES,
    CHROMATICNESS_VALUES,
    NEUTRAL_HUE,
)

# ── Generator ────────────────────────────────────────────────────────────────
from .generator import (
    Catalog,
    CatalogEntry,
    build_catalog,
    generate_entries,
    get_catalog,
    is_valid_combination,
    make_entry,
)
from .naming import generate_color_name

# ── Notation & model ─────────────────────────────────────────────────────────
from .notation import (
    ParsedCode,
    degrees_to_hue,
    format_code,
    hue_to_degrees,
    normalize_code,
    parse_code,
)
from .parametric import ncs_hue_to_hsl_hue, ncs_to_rgb

__all__ = [
    # constants
    "NEUTRAL_HUE",
    "BLACKNESS_VALUES",
    "CHROMATICNESS_VALUES",
    "CHROMATIC_HUES",
    "ALL_HUES",
    # notation
    "ParsedCode",
    "format_code",
    "normalize_code",
    "parse_code",
    "hue_to_degrees",
    "degrees_to_hue",
    # model & naming
    "ncs_hue_to_hsl_hue",
    "ncs_to_rgb",
    "generate_color_name",
    # generator
    "CatalogEntry",
    "Catalog",
    "is_valid_combination",
    "make_entry",
    "generate_entries",
    "build_catalog",
    "get_catalog",
]

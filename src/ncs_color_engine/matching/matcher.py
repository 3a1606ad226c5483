"""
matcher.py
==========

Does: Look up catalog entries by code, rank the catalog by CIEDE2000 distance
      from a hex/RGB/Lab colour, and snap (possibly malformed) codes onto the
      nearest valid entry.
Used By: Scan-result enrichment, similar-colour search, colorimeter import,
         demo CLI.
Returns: CatalogEntry, MatchResult lists (ascending distance), SnapResult or None.

Notes:
- Every query is a bounded linear scan of the catalog; malformed input gives
  None / [] rather than an exception.
"""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from ncs_color_engine.catalog.constants import NEUTRAL_HUE
from ncs_color_engine.catalog.generator import Catalog, CatalogEntry, get_catalog
from ncs_color_engine.catalog.notation import hue_to_degrees, parse_code
from ncs_color_engine.catalog.parametric import ncs_to_rgb
from ncs_color_engine.color.conversions import LAB, RGB, hex_to_rgb, rgb_to_lab, round_half_up
from ncs_color_engine.color.distance import delta_e2000
from ncs_color_engine.utils.log import debug

__all__ = [
    "DEFAULT_SIMILAR_MAX_DELTA_E",
    "MatchResult",
    "SnapResult",
    "get_by_code",
    "find_nearest",
    "find_nearest_by_lab",
    "find_nearest_by_rgb",
    "find_similar",
    "snap_to_standard",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

DEFAULT_SIMILAR_MAX_DELTA_E = 10.0


class MatchResult(NamedTuple):
    entry: CatalogEntry
    distance: float


class SnapResult(NamedTuple):
    original: str
    snapped: CatalogEntry
    distance: float


def _resolve(catalog: Optional[Catalog]) -> Catalog:
    # an empty Catalog is falsy, so compare against None explicitly
    return get_catalog() if catalog is None else catalog


# =============================================================================
# 1) EXACT LOOKUP
# =============================================================================

def get_by_code(code: str, catalog: Optional[Catalog] = None) -> Optional[CatalogEntry]:
    """Does: O(1) lookup; whitespace and case in `code` are ignored."""
    if not isinstance(code, str):
        return None
    return _resolve(catalog).get(code)


# =============================================================================
# 2) NEAREST / SIMILAR
# =============================================================================

def _ranked(lab: LAB, catalog: Catalog) -> List[MatchResult]:
    scored = [MatchResult(entry, delta_e2000(lab, entry.lab)) for entry in catalog]
    scored.sort(key=lambda m: m.distance)  # stable: ties keep catalog order
    return scored


def find_nearest_by_lab(
    lab: LAB,
    k: int = 1,
    catalog: Optional[Catalog] = None,
) -> List[MatchResult]:
    """Does: Return the k closest entries to a Lab colour, closest first."""
    if k < 1:
        return []
    return _ranked(lab, _resolve(catalog))[:k]


def find_nearest_by_rgb(
    rgb: RGB,
    k: int = 1,
    catalog: Optional[Catalog] = None,
) -> List[MatchResult]:
    """Does: Same as find_nearest_by_lab for an sRGB triple (float channels round half-up)."""
    r, g, b = (round_half_up(c) for c in rgb)
    return find_nearest_by_lab(rgb_to_lab(r, g, b), k, catalog)


def find_nearest(
    hex_value: str,
    k: int = 1,
    catalog: Optional[Catalog] = None,
) -> List[MatchResult]:
    """Does: Return the k closest entries to a hex colour; [] if hex is malformed."""
    rgb = hex_to_rgb(hex_value)
    if rgb is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("[NEAREST] malformed hex %r", hex_value)
        return []
    return find_nearest_by_rgb(rgb, k, catalog)


def find_similar(
    hex_value: str,
    max_delta_e: Optional[float] = None,
    catalog: Optional[Catalog] = None,
) -> List[MatchResult]:
    """
    Does: Return every entry within `max_delta_e` (CIEDE2000) of a hex colour,
          closest first (default threshold ΔE 10).
    """
    rgb = hex_to_rgb(hex_value)
    if rgb is None:
        return []
    if max_delta_e is None:
        max_delta_e = DEFAULT_SIMILAR_MAX_DELTA_E
    ranked = _ranked(rgb_to_lab(*rgb), _resolve(catalog))
    return [m for m in ranked if m.distance <= max_delta_e]


# =============================================================================
# 3) SNAPPING
# =============================================================================

def snap_to_standard(code: str, catalog: Optional[Catalog] = None) -> Optional[SnapResult]:
    """
    Does: Resolve a code to a catalog entry.
          - exact (normalized) hit → distance 0
          - otherwise parse it, synthesize its colour with the parametric model
            and return the nearest entry with its CIEDE2000 distance.
    Returns: SnapResult, or None when the code cannot be parsed.
    """
    catalog = _resolve(catalog)

    exact = get_by_code(code, catalog)
    if exact is not None:
        return SnapResult(code, exact, 0.0)

    parsed = parse_code(code)
    if parsed is None:
        debug(f"unparseable code {code!r}", topic="snap")
        return None

    rgb = ncs_to_rgb(
        parsed.blackness,
        parsed.chromaticness,
        hue_to_degrees(parsed.hue),
        parsed.hue == NEUTRAL_HUE,
    )
    nearest = find_nearest_by_rgb(rgb, 1, catalog)
    if not nearest:
        logger.warning("Snapping %r found no catalog entries", code)
        return None

    best = nearest[0]
    debug(f"{code!r} → {best.entry.code} (ΔE2000 {best.distance:.3f})", topic="snap")
    return SnapResult(code, best.entry, best.distance)

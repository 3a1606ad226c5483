"""
enrichment.py.
===============

Does: Correct colour matches reported by an external vision model against the
      catalog: snap their NCS codes, fall back to the nearest entry for their
      hex, and overwrite the catalog-derived fields.
Returns: New dicts (inputs are never mutated).
Used By: Image-analysis pipelines that receive raw codes/hex values.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, TypedDict

from ncs_color_engine.catalog.generator import Catalog, CatalogEntry
from ncs_color_engine.color.distance import get_match_confidence
from ncs_color_engine.matching.matcher import find_nearest, snap_to_standard

logger = logging.getLogger(__name__)

__all__ = ["ColorMatch", "catalog_fields", "enrich_color_match", "snap_color_matches"]


class ColorMatch(TypedDict, total=False):
    """Colour record as produced by the vision model (string-typed fields)."""

    system: str  # "NCS" | "RAL"
    code: str
    name: str
    hex: str
    confidence: str
    lrv: str
    rgb: str
    cmyk: str
    blackness: str
    chromaticness: str
    hue: str
    location: str
    materialGuess: str
    finishGuess: str
    laymanDescription: str


def catalog_fields(entry: CatalogEntry) -> dict[str, str]:
    """Does: Render an entry's derived values in the scan-record string format."""
    r, g, b = entry.rgb
    return {
        "hex": entry.hex,
        "lrv": str(entry.lrv),
        "rgb": f"{r}, {g}, {b}",
        "blackness": f"{entry.blackness:02d}",
        "chromaticness": f"{entry.chromaticness:02d}",
        "hue": entry.hue,
    }


def _replace(color: Mapping[str, Any], entry: CatalogEntry, distance: float) -> dict[str, Any]:
    out = dict(color)
    out.update(catalog_fields(entry))
    out["code"] = entry.code
    out["name"] = entry.name or color.get("name", "")
    out["confidence"] = get_match_confidence(distance)
    return out


def enrich_color_match(
    color: Mapping[str, Any],
    catalog: Optional[Catalog] = None,
) -> dict[str, Any]:
    """
    Does: Enrich one colour record.
          - non-NCS systems: unchanged copy
          - exact catalog code: fill hex/lrv/rgb/blackness/chromaticness/hue,
            keep code, name and confidence
          - off-catalog code: replace with the snapped entry, recompute confidence
          - unparseable code: replace with the entry nearest to the record's hex
    Returns: A new dict; a copy of the input when nothing matched.
    """
    if color.get("system") != "NCS":
        return dict(color)

    snapped = snap_to_standard(color.get("code", ""), catalog)
    if snapped is not None and snapped.distance > 0:
        logger.debug("Snapped %r → %s (ΔE %.2f)", snapped.original, snapped.snapped.code, snapped.distance)
        return _replace(color, snapped.snapped, snapped.distance)

    if snapped is not None:
        out = dict(color)
        out.update(catalog_fields(snapped.snapped))
        return out

    nearest = find_nearest(color.get("hex", ""), 1, catalog)
    if nearest:
        match = nearest[0]
        logger.debug("Code %r unusable; nearest to hex is %s", color.get("code"), match.entry.code)
        return _replace(color, match.entry, match.distance)

    logger.debug("No catalog match for %r", color.get("code"))
    return dict(color)


def snap_color_matches(
    colors: Iterable[Mapping[str, Any]],
    catalog: Optional[Catalog] = None,
) -> List[dict[str, Any]]:
    """Does: Apply enrich_color_match to every record, preserving order."""
    return [enrich_color_match(color, catalog) for color in colors]

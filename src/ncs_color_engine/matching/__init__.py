"""
matching.
========

Does: Expose catalog lookup, nearest/similar ranking, code snapping, scan-result
      enrichment and search helpers.
Used By: Image-analysis pipelines, similar-colour features, colorimeter import.
Returns: Functions over the process catalog (or an explicit Catalog).
"""

from .enrichment import (
    ColorMatch,
    catalog_fields,
    enrich_color_match,
    snap_color_matches,
)
from .matcher import (
    MatchResult,
    SnapResult,
    find_nearest,
    find_nearest_by_lab,
    find_nearest_by_rgb,
    find_similar,
    get_by_code,
    snap_to_standard,
)
from .search import SearchHit, rank_similar_hexes, search_by_name

__all__ = [
    # matcher
    "MatchResult",
    "SnapResult",
    "get_by_code",
    "find_nearest",
    "find_nearest_by_lab",
    "find_nearest_by_rgb",
    "find_similar",
    "snap_to_standard",
    # enrichment
    "ColorMatch",
    "catalog_fields",
    "enrich_color_match",
    "snap_color_matches",
    # search
    "SearchHit",
    "rank_similar_hexes",
    "search_by_name",
]

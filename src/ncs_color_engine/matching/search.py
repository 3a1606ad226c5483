"""
search.py

Does: Rank arbitrary hex colours (e.g. a user's earlier results) by perceptual
      similarity to a target, and fuzzy-search catalog entries by name or code.
Returns: (hex, distance) pairs and (entry, score) pairs, best first.
Used by: "Find similar colours" and catalog browsing.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple

from rapidfuzz import fuzz, process

from ncs_color_engine.catalog.generator import Catalog, CatalogEntry, get_catalog
from ncs_color_engine.color.conversions import hex_to_rgb, rgb_to_lab
from ncs_color_engine.color.distance import delta_e2000
from ncs_color_engine.utils.settings import get_settings

__all__ = [
    "SearchHit",
    "rank_similar_hexes",
    "search_by_name",
]

__docformat__ = "google"

log = logging.getLogger(__name__)


class SearchHit(NamedTuple):
    entry: CatalogEntry
    score: float


def rank_similar_hexes(
    target_hex: str,
    candidates: Iterable[str],
    max_delta_e: Optional[float] = None,
) -> List[Tuple[str, float]]:
    """
    Does: Score every candidate hex by CIEDE2000 from `target_hex`, keep those
          within `max_delta_e` (settings default), closest first. Malformed
          candidates are skipped; a malformed target yields [].
    """
    rgb = hex_to_rgb(target_hex)
    if rgb is None:
        return []
    if max_delta_e is None:
        max_delta_e = get_settings()["similar_max_delta_e"]
    target_lab = rgb_to_lab(*rgb)

    ranked: List[Tuple[str, float]] = []
    for candidate in candidates:
        cand_rgb = hex_to_rgb(candidate)
        if cand_rgb is None:
            log.debug("Skipping malformed candidate %r", candidate)
            continue
        d = delta_e2000(target_lab, rgb_to_lab(*cand_rgb))
        if d <= max_delta_e:
            ranked.append((candidate, d))
    ranked.sort(key=lambda pair: pair[1])
    return ranked


def _search_key(entry: CatalogEntry) -> str:
    return f"{entry.name} {entry.code}".lower()


def search_by_name(
    query: str,
    limit: Optional[int] = None,
    score_cutoff: Optional[float] = None,
    catalog: Optional[Catalog] = None,
) -> List[SearchHit]:
    """
    Does: Fuzzy-match `query` against "<name> <code>" of every entry using
          rapidfuzz WRatio. Ties keep catalog order.
    Returns: Up to `limit` hits with score >= `score_cutoff`.
    """
    q = (query or "").strip().lower()
    if not q:
        return []
    settings = get_settings()
    if limit is None:
        limit = settings["name_search_limit"]
    if score_cutoff is None:
        score_cutoff = settings["name_search_cutoff"]
    if limit < 1:
        return []

    entries = (get_catalog() if catalog is None else catalog).entries
    choices = [_search_key(e) for e in entries]
    matches = process.extract(
        q,
        choices,
        scorer=fuzz.WRatio,
        limit=None,
        score_cutoff=score_cutoff,
    )
    # (choice, score, index); rank by score, then catalog position
    matches.sort(key=lambda m: (-m[1], m[2]))
    return [SearchHit(entries[idx], float(score)) for _, score, idx in matches[:limit]]

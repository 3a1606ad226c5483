"""
generator.py
============

Does: Synthesize the standard colour catalog from the blackness/chromaticness
      grids and the 40 hue tokens, and keep one immutable copy per process.
Used By: Matcher/snapper, colorimeter import, demo CLI.
Returns: CatalogEntry records, a Catalog (ordered entries + exact code index),
         and the lazily built process-wide catalog via get_catalog().
"""

from __future__ import annotations

import logging
import threading
import time
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, NamedTuple, Optional, Tuple

from ncs_color_engine.catalog.constants import (
    BLACKNESS_VALUES,
    CHROMATIC_HUES,
    CHROMATICNESS_VALUES,
    DARK_CHROMA_LIMITS,
    MAX_TOTAL,
    NEUTRAL_HUE,
)
from ncs_color_engine.catalog.naming import generate_color_name
from ncs_color_engine.catalog.notation import format_code, hue_to_degrees, normalize_code
from ncs_color_engine.catalog.parametric import ncs_to_rgb
from ncs_color_engine.color.conversions import (
    LAB,
    RGB,
    calculate_lrv,
    rgb_to_hex,
    rgb_to_lab,
)
from ncs_color_engine.utils.log import debug

__all__ = [
    "CatalogEntry",
    "Catalog",
    "is_valid_combination",
    "make_entry",
    "generate_entries",
    "build_catalog",
    "get_catalog",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# ── Types ─────────────────────────────────────────────────────────────────────
class CatalogEntry(NamedTuple):
    code: str
    name: str
    hex: str
    rgb: RGB
    lab: LAB
    lrv: int
    blackness: int
    chromaticness: int
    hue: str


class Catalog:
    """
    Ordered, read-only sequence of entries plus an exact-match index keyed by
    normalized code. Both are produced in the constructor, so the index
    always describes exactly these entries.
    """

    __slots__ = ("_entries", "_index")

    def __init__(self, entries: Iterable[CatalogEntry]):
        ordered = tuple(entries)
        index: dict[str, CatalogEntry] = {}
        for entry in ordered:
            index.setdefault(normalize_code(entry.code), entry)
        self._entries: Tuple[CatalogEntry, ...] = ordered
        self._index: Mapping[str, CatalogEntry] = MappingProxyType(index)

    @property
    def entries(self) -> Tuple[CatalogEntry, ...]:
        return self._entries

    @property
    def index(self) -> Mapping[str, CatalogEntry]:
        return self._index

    def get(self, code: str) -> Optional[CatalogEntry]:
        """Does: Exact lookup by any spacing/case variant of a code."""
        return self._index.get(normalize_code(code))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __getitem__(self, i: int) -> CatalogEntry:
        return self._entries[i]

    def __repr__(self) -> str:
        return f"Catalog({len(self._entries)} entries)"


# =============================================================================
# 1) VALIDITY RULES
# =============================================================================

def is_valid_combination(blackness: int, chromaticness: int) -> bool:
    """Does: Tell whether a chromatic (non-zero chroma) grid cell belongs to the catalog."""
    if chromaticness == 0 or blackness + chromaticness > MAX_TOTAL:
        return False
    for min_blackness, max_chroma in DARK_CHROMA_LIMITS:
        if blackness >= min_blackness and chromaticness > max_chroma:
            return False
    return True


# =============================================================================
# 2) ENTRY SYNTHESIS
# =============================================================================

def make_entry(blackness: int, chromaticness: int, hue: str) -> CatalogEntry:
    """Does: Derive every representation of one grid cell (computed once)."""
    is_neutral = hue == NEUTRAL_HUE
    rgb = ncs_to_rgb(blackness, chromaticness, hue_to_degrees(hue), is_neutral)
    return CatalogEntry(
        code=format_code(blackness, chromaticness, hue),
        name=generate_color_name(blackness, chromaticness, hue),
        hex=rgb_to_hex(*rgb),
        rgb=rgb,
        lab=rgb_to_lab(*rgb),
        lrv=calculate_lrv(*rgb),
        blackness=blackness,
        chromaticness=chromaticness,
        hue=hue,
    )


def generate_entries() -> Iterator[CatalogEntry]:
    """Does: Yield neutral rows first, then hue × blackness × chromaticness rows."""
    for blackness in BLACKNESS_VALUES:
        yield make_entry(blackness, 0, NEUTRAL_HUE)

    for hue in CHROMATIC_HUES:
        for blackness in BLACKNESS_VALUES:
            for chromaticness in CHROMATICNESS_VALUES:
                if is_valid_combination(blackness, chromaticness):
                    yield make_entry(blackness, chromaticness, hue)


def build_catalog() -> Catalog:
    """Does: Run the generator once and wrap the result with its index."""
    started = time.perf_counter()
    catalog = Catalog(generate_entries())
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.debug("Generated catalog with %d entries in %.1f ms", len(catalog), elapsed_ms)
    debug(f"generated {len(catalog)} entries in {elapsed_ms:.1f} ms", topic="catalog")
    return catalog


# =============================================================================
# 3) PROCESS-WIDE CATALOG
# =============================================================================

_CATALOG: Optional[Catalog] = None
_CATALOG_LOCK = threading.Lock()


def get_catalog() -> Catalog:
    """Does: Return the process catalog, building it on first use (at most once)."""
    global _CATALOG
    catalog = _CATALOG
    if catalog is None:
        with _CATALOG_LOCK:
            if _CATALOG is None:
                _CATALOG = build_catalog()
            catalog = _CATALOG
    return catalog

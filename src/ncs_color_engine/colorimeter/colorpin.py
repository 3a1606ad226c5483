"""
colorpin.py
===========

Does: Parse ColorPin II colorimeter CSV exports (metadata, Lab/RGB/hex per
      illuminant × observer, optional 400–700 nm spectral reflectance), attach
      LRV and the nearest catalog entry, and flatten entries for storage.
Used By: Manual colour-entry / device import paths.
Returns: ColorPinEntry dicts, simplified export records, validation messages.

Notes:
- The export repeats the 'b' header (Lab b* and RGB blue); the second
  occurrence of any header is keyed '<name>-rgb', later ones '<name>-<n>'.
- Rows that fail to parse are logged and skipped.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Dict, List, Literal, Optional, Sequence, Tuple, TypedDict

from ncs_color_engine.color.conversions import (
    LAB,
    RGB,
    calculate_lrv,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_lab,
    round_half_up,
)
from ncs_color_engine.matching.matcher import find_nearest_by_rgb
from ncs_color_engine.utils.log import debug

__all__ = [
    "Illuminant",
    "ObserverAngle",
    "ILLUMINANTS",
    "OBSERVER_ANGLES",
    "WAVELENGTHS",
    "ColorMeasurement",
    "SpectralData",
    "NearestReference",
    "ColorPinEntry",
    "SimplifiedColor",
    "ColorPinImportError",
    "parse_colorpin_csv",
    "get_primary_measurement",
    "create_entry_from_rgb",
    "export_to_simplified_format",
    "validate_colorpin_csv",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
Illuminant = Literal["A", "C", "D50", "D65", "F2", "F7"]
ObserverAngle = Literal["2deg", "10deg"]

ILLUMINANTS: Tuple[Illuminant, ...] = ("A", "C", "D50", "D65", "F2", "F7")
OBSERVER_ANGLES: Tuple[ObserverAngle, ...] = ("2deg", "10deg")
WAVELENGTHS: Tuple[int, ...] = tuple(range(400, 701, 10))

# Preferred measurement order for display/export
_PRIMARY_PRIORITY: Tuple[Tuple[Illuminant, ObserverAngle], ...] = (
    ("D65", "2deg"),
    ("D50", "2deg"),
    ("D65", "10deg"),
    ("D50", "10deg"),
    ("A", "2deg"),
    ("C", "2deg"),
    ("F7", "2deg"),
    ("F2", "2deg"),
)

_LAB_HEADER_MARKERS = ("d65-2deg-l", "d50-2deg-l", "a-2deg-l")


class ColorMeasurement(TypedDict):
    lab: LAB
    rgb: RGB
    hex: str


class SpectralData(TypedDict):
    wavelengths: List[int]
    reflectance: List[float]


class NearestReference(TypedDict):
    code: str
    name: str
    hex: str
    distance: float


class ColorPinEntry(TypedDict, total=False):
    date_time: Optional[str]
    name: str
    code: Optional[str]
    brand: Optional[str]
    collection: Optional[str]
    serial: Optional[str]
    gloss: Optional[str]
    full_attrs: Optional[str]
    notes: Optional[str]
    measurements: Dict[str, Dict[str, ColorMeasurement]]
    spectral: SpectralData
    lrv: int
    nearest_ncs: NearestReference


class SimplifiedColor(TypedDict):
    name: str
    code: Optional[str]
    brand: Optional[str]
    collection: Optional[str]
    lab: LAB
    rgb: RGB
    hex: str
    lrv: int
    nearest_ncs: Optional[Dict[str, object]]


class ColorPinImportError(ValueError):
    """Raise when a ColorPin export is structurally unusable."""


# =============================================================================
# 1) CSV PLUMBING
# =============================================================================

def _read_rows(csv_content: str) -> List[List[str]]:
    reader = csv.reader(io.StringIO(csv_content.strip()), skipinitialspace=True)
    return [[cell.strip() for cell in row] for row in reader]


def _header_index(headers: Sequence[str]) -> Dict[str, int]:
    """Map lowercase header → column, disambiguating repeats ('-rgb', then '-2', '-3', …)."""
    index: Dict[str, int] = {}
    seen: Dict[str, int] = {}
    for i, header in enumerate(headers):
        key = header.lower().strip()
        count = seen.get(key, 0)
        if count == 0:
            index[key] = i
        else:
            suffix = "-rgb" if count == 1 else f"-{count}"
            index[f"{key}{suffix}"] = i
        seen[key] = count + 1
    return index


class _Row:
    """Header-keyed accessor over one CSV row."""

    def __init__(self, cells: Sequence[str], index: Dict[str, int]):
        self._cells = cells
        self._index = index

    def text(self, key: str) -> str:
        i = self._index.get(key.lower())
        if i is None or i >= len(self._cells):
            return ""
        return self._cells[i]

    def optional(self, key: str) -> Optional[str]:
        return self.text(key) or None

    def number(self, key: str) -> Optional[float]:
        raw = self.text(key)
        if not raw:
            return None
        try:
            return float(raw)
        except ValueError:
            return None


# =============================================================================
# 2) ROW PARSING
# =============================================================================

def _channel(value: Optional[float]) -> int:
    return round_half_up(value) if value is not None else 0


def _parse_measurement(row: _Row, illuminant: str, observer: str) -> Optional[ColorMeasurement]:
    prefix = f"{illuminant}-{observer}"
    l = row.number(f"{prefix}-l")
    lab_a = row.number(f"{prefix}-a")
    lab_b = row.number(f"{prefix}-b")
    if l is None or lab_a is None or lab_b is None:
        return None

    hex_value = row.text(f"{prefix}-hex")
    column_rgb: RGB = (
        _channel(row.number(f"{prefix}-r")),
        _channel(row.number(f"{prefix}-g")),
        _channel(row.number(f"{prefix}-b-rgb")),
    )
    rgb = column_rgb
    # the hex column is the most reliable, except for the all-zero placeholder
    if hex_value and hex_value.upper() != "#000000":
        rgb = hex_to_rgb(hex_value) or column_rgb

    return ColorMeasurement(lab=(l, lab_a, lab_b), rgb=rgb, hex=hex_value)


def _nearest_reference(measurement: ColorMeasurement) -> Optional[NearestReference]:
    # rgb already prefers a usable hex column, so it also covers placeholder hexes
    nearest = find_nearest_by_rgb(measurement["rgb"], 1)
    if not nearest:
        return None
    match = nearest[0]
    return NearestReference(
        code=match.entry.code,
        name=match.entry.name,
        hex=match.entry.hex,
        distance=match.distance,
    )


def _parse_row(cells: Sequence[str], index: Dict[str, int]) -> ColorPinEntry:
    row = _Row(cells, index)
    entry = ColorPinEntry(
        date_time=row.optional("date-time"),
        name=row.text("name") or "Unnamed Color",
        code=row.optional("code"),
        brand=row.optional("brand"),
        collection=row.optional("collection"),
        serial=row.optional("serial"),
        gloss=row.optional("gloss"),
        full_attrs=row.optional("full_attrs"),
        notes=row.optional("notes"),
        measurements={},
    )

    for illuminant in ILLUMINANTS:
        for observer in OBSERVER_ANGLES:
            measurement = _parse_measurement(row, illuminant, observer)
            if measurement is not None:
                entry["measurements"].setdefault(illuminant, {})[observer] = measurement

    wavelengths: List[int] = []
    reflectance: List[float] = []
    for wl in WAVELENGTHS:
        value = row.number(f"spectrum-{wl}nm")
        if value is not None:
            wavelengths.append(wl)
            reflectance.append(value)
    if wavelengths:
        entry["spectral"] = SpectralData(wavelengths=wavelengths, reflectance=reflectance)

    d65 = entry["measurements"].get("D65", {}).get("2deg")
    if d65 is not None:
        entry["lrv"] = calculate_lrv(*d65["rgb"])
        nearest = _nearest_reference(d65)
        if nearest is not None:
            entry["nearest_ncs"] = nearest

    return entry


# =============================================================================
# 3) PUBLIC API
# =============================================================================

def parse_colorpin_csv(csv_content: str) -> List[ColorPinEntry]:
    """
    Does: Parse a full ColorPin II export.
    Returns: One entry per non-blank data row.
    Raises: ColorPinImportError if there is no header + data row.
    """
    rows = _read_rows(csv_content)
    if len(rows) < 2:
        raise ColorPinImportError("CSV file must have at least a header row and one data row")

    index = _header_index(rows[0])
    entries: List[ColorPinEntry] = []
    for line_no, cells in enumerate(rows[1:], start=2):
        if all(not cell for cell in cells):
            continue
        try:
            entries.append(_parse_row(cells, index))
        except (ValueError, TypeError, KeyError) as e:
            logger.warning("Error parsing row %d: %s", line_no, e)

    debug(f"parsed {len(entries)} ColorPin entries", topic="import")
    return entries


def get_primary_measurement(entry: ColorPinEntry) -> Optional[ColorMeasurement]:
    """Does: Pick the preferred measurement (D65/2° first) or None."""
    measurements = entry.get("measurements", {})
    for illuminant, observer in _PRIMARY_PRIORITY:
        measurement = measurements.get(illuminant, {}).get(observer)
        if measurement is not None:
            return measurement
    return None


def create_entry_from_rgb(
    name: str,
    rgb: RGB,
    *,
    code: Optional[str] = None,
    brand: Optional[str] = None,
    collection: Optional[str] = None,
    notes: Optional[str] = None,
) -> ColorPinEntry:
    """Does: Build an entry for a manually typed colour, measured as D65/2°."""
    r, g, b = (round_half_up(c) for c in rgb)
    measurement = ColorMeasurement(lab=rgb_to_lab(r, g, b), rgb=(r, g, b), hex=rgb_to_hex(r, g, b))
    entry = ColorPinEntry(
        name=name,
        code=code,
        brand=brand,
        collection=collection,
        notes=notes,
        measurements={"D65": {"2deg": measurement}},
        lrv=calculate_lrv(r, g, b),
    )
    nearest = _nearest_reference(measurement)
    if nearest is not None:
        entry["nearest_ncs"] = nearest
    return entry


def _export_measurement(entry: ColorPinEntry) -> Optional[ColorMeasurement]:
    measurements = entry.get("measurements", {})
    for illuminant in ("D65", "D50"):
        found = measurements.get(illuminant, {}).get("2deg")
        if found is not None:
            return found
    first = next(iter(measurements.values()), {})
    return first.get("2deg") or first.get("10deg")


def export_to_simplified_format(entries: Sequence[ColorPinEntry]) -> List[SimplifiedColor]:
    """
    Does: Flatten entries to one measurement each (D65/2°, D50/2°, else the
          first available) for storage.
    Raises: ColorPinImportError if an entry has no measurement at all.
    """
    out: List[SimplifiedColor] = []
    for entry in entries:
        measurement = _export_measurement(entry)
        if measurement is None:
            raise ColorPinImportError(f"No valid measurement found for entry: {entry.get('name')}")

        lrv = entry.get("lrv")
        if lrv is None:
            lrv = calculate_lrv(*measurement["rgb"])
        nearest = entry.get("nearest_ncs")
        out.append(
            SimplifiedColor(
                name=entry.get("name", "Unnamed Color"),
                code=entry.get("code"),
                brand=entry.get("brand"),
                collection=entry.get("collection"),
                lab=measurement["lab"],
                rgb=measurement["rgb"],
                hex=measurement["hex"],
                lrv=lrv,
                nearest_ncs=(
                    {"code": nearest["code"], "name": nearest["name"], "distance": nearest["distance"]}
                    if nearest
                    else None
                ),
            )
        )
    return out


def validate_colorpin_csv(csv_content: str) -> List[str]:
    """Does: Return human-readable structure problems (empty list when usable)."""
    try:
        rows = _read_rows(csv_content)
    except csv.Error as e:
        return [f"CSV parsing error: {e}"]

    if not rows:
        return ["CSV file is empty"]

    errors: List[str] = []
    headers = {h.lower().strip() for h in rows[0]}
    if not any(marker in headers for marker in _LAB_HEADER_MARKERS):
        errors.append(
            "CSV must contain at least one set of LAB measurement columns "
            "(e.g., D65-2deg-L, D65-2deg-a, D65-2deg-b)"
        )
    if len(rows) < 2:
        errors.append("CSV must contain at least one data row")
    return errors

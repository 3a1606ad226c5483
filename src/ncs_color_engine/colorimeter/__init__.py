"""
colorimeter.
===========

Does: Import colour measurements from colorimeter exports (ColorPin II CSV)
      and attach the nearest catalog entry.
Used By: Manual colour-entry and device import paths.
"""

from .colorpin import (
    ColorMeasurement,
    ColorPinEntry,
    ColorPinImportError,
    NearestReference,
    SimplifiedColor,
    SpectralData,
    create_entry_from_rgb,
    export_to_simplified_format,
    get_primary_measurement,
    parse_colorpin_csv,
    validate_colorpin_csv,
)

__all__ = [
    "ColorMeasurement",
    "ColorPinEntry",
    "ColorPinImportError",
    "NearestReference",
    "SimplifiedColor",
    "SpectralData",
    "parse_colorpin_csv",
    "get_primary_measurement",
    "create_entry_from_rgb",
    "export_to_simplified_format",
    "validate_colorpin_csv",
]

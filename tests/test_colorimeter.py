# tests/test_colorimeter.py
"""ColorPin II CSV import, manual entries, simplified export, validation."""

from __future__ import annotations

from importlib import import_module

import pytest

colorpin = import_module("ncs_color_engine.colorimeter.colorpin")

HEADER = (
    "Date-Time,Name,Code,Brand,Collection,"
    "D65-2deg-L,D65-2deg-a,D65-2deg-b,D65-2deg-R,D65-2deg-G,D65-2deg-B,D65-2deg-HEX,"
    "D50-10deg-L,D50-10deg-a,D50-10deg-b,"
    "spectrum-400nm,spectrum-410nm"
)


def _csv(*rows: str) -> str:
    return "\n".join((HEADER, *rows)) + "\n"


# ---------- header handling ----------
def test_header_index_disambiguates_repeats():
    idx = colorpin._header_index(["L", "a", "b", "R", "G", "B", "b"])
    assert idx["b"] == 2
    assert idx["b-rgb"] == 5
    assert idx["b-2"] == 6
    assert idx["r"] == 3


# ---------- parse_colorpin_csv ----------
def test_parse_basic_row():
    (entry,) = colorpin.parse_colorpin_csv(
        _csv("2024-01-01 10:00,Wall,,Jotun,Lady,100,0,0,255,255,255,#FFFFFF,99,0.1,0.2,0.91,0.92")
    )
    assert entry["name"] == "Wall"
    assert entry["code"] is None
    assert entry["brand"] == "Jotun"
    assert entry["date_time"] == "2024-01-01 10:00"

    d65 = entry["measurements"]["D65"]["2deg"]
    assert d65["lab"] == (100.0, 0.0, 0.0)
    assert d65["rgb"] == (255, 255, 255)
    assert d65["hex"] == "#FFFFFF"
    assert entry["measurements"]["D50"]["10deg"]["lab"] == (99.0, 0.1, 0.2)

    assert entry["spectral"] == {"wavelengths": [400, 410], "reflectance": [0.91, 0.92]}
    assert entry["lrv"] == 100
    assert entry["nearest_ncs"]["code"] == "S 0000-N"
    assert entry["nearest_ncs"]["distance"] == pytest.approx(0.0, abs=1e-9)


def test_placeholder_hex_uses_rgb_columns():
    (entry,) = colorpin.parse_colorpin_csv(
        _csv("2024-01-01,Sample,,,,40,10,10,120,80,70,#000000,,,,,")
    )
    d65 = entry["measurements"]["D65"]["2deg"]
    assert d65["rgb"] == (120, 80, 70)
    assert "nearest_ncs" in entry
    assert "spectral" not in entry
    assert "D50" not in entry["measurements"]


def test_quoted_fields_blank_rows_and_default_name():
    (first, second) = colorpin.parse_colorpin_csv(
        _csv(
            '2024-01-01,"Blue, deep",S 4050-R90B,,,30,5,-40,40,60,140,#283C8C,,,,,',
            "",
            ",,,,,50,0,0,119,119,119,#777777,,,,,",
        )
    )
    assert first["name"] == "Blue, deep"
    assert first["code"] == "S 4050-R90B"
    assert second["name"] == "Unnamed Color"


def test_row_without_lab_has_no_measurements():
    (entry,) = colorpin.parse_colorpin_csv(_csv("2024-01-01,Odd,,,,,,,,,,,,,,,"))
    assert entry["measurements"] == {}
    assert "lrv" not in entry
    assert "nearest_ncs" not in entry


def test_header_only_raises():
    with pytest.raises(colorpin.ColorPinImportError):
        colorpin.parse_colorpin_csv(HEADER)
    with pytest.raises(ValueError):
        colorpin.parse_colorpin_csv("")


# ---------- primary measurement ----------
def test_get_primary_measurement_priority():
    m65 = {"lab": (1.0, 0.0, 0.0), "rgb": (1, 1, 1), "hex": "#010101"}
    m50 = {"lab": (2.0, 0.0, 0.0), "rgb": (2, 2, 2), "hex": "#020202"}
    assert colorpin.get_primary_measurement(
        {"measurements": {"D50": {"2deg": m50}, "D65": {"2deg": m65}}}
    ) is m65
    assert colorpin.get_primary_measurement({"measurements": {"D50": {"10deg": m50}}}) is m50
    assert colorpin.get_primary_measurement({"measurements": {}}) is None


# ---------- manual entries ----------
def test_create_entry_from_rgb():
    entry = colorpin.create_entry_from_rgb("Manual", (255, 255, 255), brand="Acme")
    m = entry["measurements"]["D65"]["2deg"]
    assert m["hex"] == "#FFFFFF"
    assert m["rgb"] == (255, 255, 255)
    assert entry["lrv"] == 100
    assert entry["brand"] == "Acme"
    assert entry["code"] is None
    assert entry["nearest_ncs"]["code"] == "S 0000-N"


# ---------- export ----------
def test_export_to_simplified_format():
    entries = colorpin.parse_colorpin_csv(
        _csv("2024-01-01,Wall,,Jotun,,100,0,0,255,255,255,#FFFFFF,,,,,")
    )
    (out,) = colorpin.export_to_simplified_format(entries)
    assert out["name"] == "Wall"
    assert out["brand"] == "Jotun"
    assert out["hex"] == "#FFFFFF"
    assert out["lab"] == (100.0, 0.0, 0.0)
    assert out["lrv"] == 100
    assert out["nearest_ncs"]["code"] == "S 0000-N"
    assert set(out["nearest_ncs"]) == {"code", "name", "distance"}


def test_export_falls_back_to_other_observer():
    m = {"lab": (50.0, 0.0, 0.0), "rgb": (119, 119, 119), "hex": "#777777"}
    (out,) = colorpin.export_to_simplified_format([{"name": "X", "measurements": {"A": {"10deg": m}}}])
    assert out["hex"] == "#777777"
    assert out["lrv"] == 18
    assert out["nearest_ncs"] is None


def test_export_without_measurement_raises():
    with pytest.raises(colorpin.ColorPinImportError, match="No valid measurement"):
        colorpin.export_to_simplified_format([{"name": "Empty", "measurements": {}}])


# ---------- validation ----------
def test_validate_colorpin_csv():
    assert colorpin.validate_colorpin_csv(_csv("2024,Wall,,,,1,2,3,4,5,6,#040506,,,,,")) == []
    assert colorpin.validate_colorpin_csv("") == ["CSV file is empty"]
    assert colorpin.validate_colorpin_csv(HEADER) == ["CSV must contain at least one data row"]

    errors = colorpin.validate_colorpin_csv("Name,Hex\nWall,#FFFFFF\n")
    assert len(errors) == 1
    assert errors[0].startswith("CSV must contain at least one set of LAB measurement columns")

# tests/test_catalog_generator.py
"""Catalog generation: coverage rules, determinism, index, once-per-process build."""

from __future__ import annotations

import threading
import time
from importlib import import_module

import pytest

gen = import_module("ncs_color_engine.catalog.generator")
constants = import_module("ncs_color_engine.catalog.constants")
conversions = import_module("ncs_color_engine.color.conversions")


@pytest.fixture(scope="module")
def catalog():
    return gen.get_catalog()


# ---------- size & coverage ----------
def test_catalog_size_is_neutrals_plus_valid_grid(catalog):
    valid_cells = sum(
        1
        for b in constants.BLACKNESS_VALUES
        for c in constants.CHROMATICNESS_VALUES
        if gen.is_valid_combination(b, c)
    )
    assert valid_cells == 114
    assert len(constants.CHROMATIC_HUES) == 40
    assert len(catalog) == len(constants.BLACKNESS_VALUES) + 40 * valid_cells == 4573


def test_neutral_rows_come_first(catalog):
    neutrals = catalog.entries[: len(constants.BLACKNESS_VALUES)]
    assert [e.hue for e in neutrals] == ["N"] * 13
    assert [e.blackness for e in neutrals] == list(constants.BLACKNESS_VALUES)
    assert all(e.chromaticness == 0 for e in neutrals)
    assert catalog[13].code == "S 0002-Y"


def test_codes_are_unique_and_indexed(catalog):
    assert len(catalog.index) == len(catalog)
    assert len({e.code for e in catalog}) == len(catalog)


def test_every_entry_respects_bounds(catalog):
    for e in catalog:
        assert e.blackness + e.chromaticness <= 100
        if e.hue != "N":
            assert gen.is_valid_combination(e.blackness, e.chromaticness)
        assert 0 <= e.lrv <= 100


@pytest.mark.parametrize(
    "b,c,ok",
    [
        (0, 0, False),
        (50, 50, True),
        (50, 60, False),
        (70, 30, True),
        (70, 40, False),
        (80, 20, True),
        (80, 30, False),
        (85, 15, True),
        (85, 20, False),
        (90, 10, True),
        (90, 15, False),
    ],
)
def test_is_valid_combination(b, c, ok):
    assert gen.is_valid_combination(b, c) is ok


# ---------- entry contents ----------
def test_white_entry(catalog):
    white = catalog[0]
    assert white.code == "S 0000-N"
    assert white.name == "White"
    assert white.hex == "#FFFFFF"
    assert white.rgb == (255, 255, 255)
    assert white.lrv == 100
    assert white.lab == pytest.approx((100.0, 0.0, 0.0), abs=1e-3)


def test_mid_grey_entry(catalog):
    grey = catalog.get("S 5000-N")
    assert grey.hex == "#808080"
    assert grey.name == "Medium Grey"


def test_derived_fields_are_consistent(catalog):
    for e in catalog.entries[::97]:
        assert conversions.hex_to_rgb(e.hex) == e.rgb
        assert e.lab == conversions.rgb_to_lab(*e.rgb)
        assert e.lrv == conversions.calculate_lrv(*e.rgb)


def test_strong_light_orange(catalog):
    e = catalog.get("S 1050-Y90R")
    assert (e.blackness, e.chromaticness, e.hue) == (10, 50, "Y90R")
    assert e.name == "Strong Light Orange"


def test_very_dark_chromatic_entries_collapse_to_black(catalog):
    dark = [e for e in catalog if e.hue != "N" and e.blackness >= 80]
    assert dark and all(e.hex == "#000000" for e in dark)


# ---------- Catalog container ----------
def test_catalog_lookup_ignores_spacing_and_case(catalog):
    assert catalog.get("s 1050 - y90r") is catalog.get("S 1050-Y90R")
    assert catalog.get("S 9999-Y") is None


def test_catalog_index_is_read_only(catalog):
    with pytest.raises(TypeError):
        catalog.index["X"] = catalog[0]


def test_empty_catalog():
    empty = gen.Catalog([])
    assert len(empty) == 0
    assert list(empty) == []
    assert empty.get("S 0000-N") is None
    assert repr(empty) == "Catalog(0 entries)"


def test_build_is_deterministic(catalog):
    assert gen.build_catalog().entries == catalog.entries


# ---------- process-wide instance ----------
def test_get_catalog_returns_same_instance(catalog):
    assert gen.get_catalog() is catalog


def test_get_catalog_builds_once_under_concurrency(monkeypatch):
    calls = {"n": 0}
    small = gen.Catalog([gen.make_entry(0, 0, "N")])

    def slow_build():
        calls["n"] += 1
        time.sleep(0.05)
        return small

    monkeypatch.setattr(gen, "_CATALOG", None)
    monkeypatch.setattr(gen, "build_catalog", slow_build)

    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(gen.get_catalog())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert calls["n"] == 1
    assert len(results) == 8
    assert all(r is small for r in results)

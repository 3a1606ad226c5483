# tests/test_color_distance.py
"""CIEDE2000 against published reference pairs, CIE76, confidence bands."""

from __future__ import annotations

from importlib import import_module

import pytest

dist = import_module("ncs_color_engine.color.distance")


# Sharma, Wu & Dalal (2005) test data
SHARMA_PAIRS = [
    ((50.0, 2.6772, -79.7751), (50.0, 0.0, -82.7485), 2.0425),
    ((50.0, 3.1571, -77.2803), (50.0, 0.0, -82.7485), 2.8615),
    ((50.0, 2.8361, -74.0200), (50.0, 0.0, -82.7485), 3.4412),
    ((50.0, 0.0, 0.0), (50.0, -1.0, 2.0), 2.3669),
    ((50.0, 2.5, 0.0), (73.0, 25.0, -18.0), 27.1492),
    ((50.0, 2.5, 0.0), (61.0, -5.0, 29.0), 22.8977),
    ((50.0, 2.5, 0.0), (56.0, -27.0, -3.0), 31.9030),
    ((50.0, 2.5, 0.0), (58.0, 24.0, 15.0), 19.4535),
]



# ---------- CIEDE2000 ----------
@pytest.mark.parametrize("lab1,lab2,expected", SHARMA_PAIRS)
def test_delta_e2000_reference_pairs(lab1, lab2, expected):
    assert dist.delta_e2000(lab1, lab2) == pytest.approx(expected, abs=5e-4)


@pytest.mark.parametrize("lab1,lab2,_expected", SHARMA_PAIRS)
def test_delta_e2000_is_symmetric(lab1, lab2, _expected):
    assert dist.delta_e2000(lab1, lab2) == pytest.approx(dist.delta_e2000(lab2, lab1), abs=1e-9)


@pytest.mark.parametrize("lab", [(0.0, 0.0, 0.0), (100.0, 0.0, 0.0), (53.24, 80.09, 67.20)])
def test_delta_e2000_identity_is_zero(lab):
    assert dist.delta_e2000(lab, lab) == pytest.approx(0.0, abs=1e-12)


def test_delta_e2000_is_non_negative_for_far_colours():
    assert dist.delta_e2000((0.0, 0.0, 0.0), (100.0, 0.0, 0.0)) > 0


def test_delta_e76_is_euclidean():
    assert dist.delta_e76((0.0, 0.0, 0.0), (3.0, 4.0, 0.0)) == pytest.approx(5.0)


# ---------- hex helper ----------
def test_hex_delta_e_ignores_case_and_rejects_garbage():
    assert dist.hex_delta_e("#FFFFFF", "#ffffff") == pytest.approx(0.0, abs=1e-12)
    assert dist.hex_delta_e("#FFFFFF", "#000000") > 50
    assert dist.hex_delta_e("#FFFFFF", "nope") is None


# ---------- confidence bands ----------
@pytest.mark.parametrize(
    "delta,label",
    [(0.0, "High"), (2.0, "High"), (2.01, "Medium"), (5.0, "Medium"), (5.01, "Low"), (40.0, "Low")],
)
def test_get_match_confidence_band_edges(delta, label):
    assert dist.get_match_confidence(delta) == label


def test_confidence_band_constants():
    assert dist.HIGH_CONFIDENCE_MAX == 2.0
    assert dist.MEDIUM_CONFIDENCE_MAX == 5.0


def test_get_match_confidence_ignores_data_dir(tmp_path, monkeypatch):
    load_config = import_module("ncs_color_engine.utils.load_config")
    monkeypatch.setenv(load_config.DATA_DIR_ENV, str(tmp_path))
    load_config.clear_config_cache()
    try:
        # no settings file at all
        assert dist.get_match_confidence(1.0) == "High"
        (tmp_path / "engine_settings.json5").write_text("{similar_max_delta_e: 0.5}", encoding="utf-8")
        load_config.clear_config_cache()
        assert dist.get_match_confidence(2.0) == "High"
        assert dist.get_match_confidence(5.0) == "Medium"
    finally:
        monkeypatch.delenv(load_config.DATA_DIR_ENV)
        load_config.clear_config_cache()

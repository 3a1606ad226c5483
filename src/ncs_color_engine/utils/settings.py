"""
settings.py
===========

Does: Load and validate engine tunables (similarity radius, name-search limits)
      from <data>/engine_settings.json5.
Returns: EngineSettings mapping via get_settings() (cached per process,
         dropped by load_config.clear_config_cache()).
Used by: matching.search (rank_similar_hexes radius, name search defaults).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypedDict

from .load_config import load_config

__all__ = ["EngineSettings", "SETTINGS_FILE", "get_settings", "validate_settings"]
__docformat__ = "google"

log = logging.getLogger(__name__)

SETTINGS_FILE = "engine_settings"


class EngineSettings(TypedDict):
    similar_max_delta_e: float
    name_search_limit: int
    name_search_cutoff: float


_DEFAULTS: EngineSettings = {
    "similar_max_delta_e": 10.0,
    "name_search_limit": 10,
    "name_search_cutoff": 60.0,
}


def validate_settings(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Does: Merge raw values over defaults and coerce numeric types.
    Returns: A complete settings dict.
    Raises: ValueError on unknown keys, non-numbers or negative values.
    """
    unknown = set(raw) - set(_DEFAULTS)
    if unknown:
        raise ValueError(f"unknown settings: {sorted(unknown)}")

    merged: dict[str, Any] = dict(_DEFAULTS)
    merged.update(raw)
    out: dict[str, Any] = {}
    for key, default in _DEFAULTS.items():
        value = merged[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{key} must be a number, got {value!r}")
        out[key] = int(value) if isinstance(default, int) else float(value)
        if out[key] < 0:
            raise ValueError(f"{key} must be >= 0, got {value!r}")
    return out


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Does: Load the validated engine settings once per process."""
    data = load_config(SETTINGS_FILE, validator=validate_settings)
    log.debug("Engine settings loaded: %s", data)
    return EngineSettings(**data)  # type: ignore[typeddict-item]

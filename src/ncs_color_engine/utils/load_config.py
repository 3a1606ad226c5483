# src/ncs_color_engine/utils/load_config.py

"""Load commented JSON5 config objects from the package <data/> directory.

Files are looked up as <data>/<name>.json5 (the suffix may be given
explicitly). Parsed objects are cached per (path, mtime), so an edited file
is re-read on the next call. A validator, when given, runs on a copy of the
cached object and its result is never cached.

Used by the engine settings loader.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

import json5

DATA_DIR_ENV = "NCS_ENGINE_DATA_DIR"
CONFIG_SUFFIX = ".json5"

__all__ = [
    "DATA_DIR_ENV",
    "CONFIG_SUFFIX",
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON5 parsing or validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when a config file does not hold a JSON object."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Drop cached config objects and the settings built from them."""
    from .settings import get_settings

    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    get_settings.cache_clear()
    log.debug("Config cache cleared.")


# ── Data directory ───────────────────────────────────────────────────────────
def resolve_data_dir(start: Path | None = None) -> Path:
    """
    Does: Return $NCS_ENGINE_DATA_DIR when set, else the first 'data'
          directory found walking up from this package.
    Raises: DataDirNotFound when the walk finds nothing.
    """
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(os.path.expanduser(override)).resolve()

    start = (start or Path(__file__)).resolve()
    tried = [(p / "data") for p in (start, *start.parents)]
    for cand in tried:
        if cand.is_dir():
            return cand.resolve()
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def _config_path(file: str | os.PathLike[str], data_dir: Path) -> Path:
    name = os.fspath(file)
    if not Path(name).suffix:
        name += CONFIG_SUFFIX
    path = (data_dir / name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(f"Refusing to read outside data dir: {path} (base={data_dir})") from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_object(path: Path, encoding: str) -> dict[str, Any]:
    try:
        with path.open("r", encoding=encoding) as f:
            data = json5.load(f)
    except ValueError as e:  # json5 reports syntax errors as ValueError
        raise ConfigParseError(f"Invalid JSON5 in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected an object, got {type(data).__name__}")
    return data


# ── Loader ───────────────────────────────────────────────────────────────────
def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """
    Does: Read <data>/<file>.json5 (comments and trailing commas allowed),
          reuse the cached object while the file's mtime is unchanged, then
          apply `validator`.
    Returns: A fresh dict the caller may keep or mutate.
    Raises: ConfigFileNotFound, ConfigParseError (bad syntax or validator
            failure), ConfigTypeError (top level is not an object).
    """
    data_dir = (base_dir or resolve_data_dir()).resolve()
    path = _config_path(file, data_dir)
    try:
        key = (path, path.stat().st_mtime)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    with _CACHE_LOCK:
        data = _CONFIG_CACHE.get(key)
        if data is None:
            data = _read_object(path, encoding)
            _CONFIG_CACHE[key] = data
            log.debug("Config cache MISS → STORED: %s", path.name)
        else:
            log.debug("Config cache HIT: %s", path.name)

    result = dict(data)
    if validator is not None:
        try:
            result = validator(result)
        except (ValueError, TypeError) as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
    return result

# ncs_color_engine/utils/__init__.py
"""

Does: Provide config loading, engine settings and lightweight debug logging for the engine.
Returns: Public API via load_config/clear_config_cache, get_settings and debug/reload_topics.
Used by: Matcher, search, colorimeter import, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_dir,
)
from .log import (
    debug,
    is_topic_enabled,
    reload_topics,
)
from .settings import EngineSettings, get_settings

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Settings
    "EngineSettings",
    "get_settings",
    # Logging helpers
    "debug",
    "is_topic_enabled",
    "reload_topics",
]

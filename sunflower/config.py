"""Settings for the Sunflower app.

Settings are read from a JSON file. Anything missing, corrupt or of the wrong
type falls back to the built-in default so the animation always starts.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_CAPTION,
    DEFAULT_FRAME_INTERVAL_MS,
    DEFAULT_GREETING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
)
from .errors import ConfigError

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SunflowerConfig:
    """User-facing settings."""

    # None means "paint the default artwork"
    asset_dir: Optional[str] = None
    caption: str = DEFAULT_CAPTION
    greeting: str = DEFAULT_GREETING
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT
    frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS
    log_level: str = DEFAULT_LOG_LEVEL


def default_config_path() -> str:
    """Return the path of the config file in the working directory."""

    return os.path.join(os.getcwd(), CONFIG_FILENAME)


def load_config(path: Optional[str] = None) -> SunflowerConfig:
    """Load settings from `path`.

    With no explicit path a missing file simply means defaults. An explicit
    path that cannot be read raises `ConfigError`.
    """

    explicit = path is not None
    target = path if explicit else default_config_path()

    if not os.path.exists(target):
        if explicit:
            raise ConfigError(f"config file not found: {target}")
        return SunflowerConfig()

    try:
        with open(target, "r", encoding="utf-8") as f:
            loaded = json.load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {target}: {exc}") from exc
    except ValueError:
        # Corrupt JSON: keep going with defaults.
        logger.warning("Ignoring corrupt config file %s", target)
        return SunflowerConfig()

    if not isinstance(loaded, dict):
        logger.warning("Ignoring config file %s (expected a JSON object)", target)
        return SunflowerConfig()

    return config_from_dict(loaded)


def config_from_dict(data: Dict[str, Any]) -> SunflowerConfig:
    """Build a config from a plain dict, dropping invalid values."""

    values: Dict[str, Any] = {}
    known = {f.name for f in fields(SunflowerConfig)}
    for key, value in data.items():
        if key not in known:
            logger.debug("Ignoring unknown config key %r", key)
            continue
        if _is_valid(key, value):
            values[key] = value.upper() if key == "log_level" else value
        else:
            logger.warning("Invalid value for %r in config: %r (using default)", key, value)
    return SunflowerConfig(**values)


def apply_overrides(config: SunflowerConfig, **overrides: Any) -> SunflowerConfig:
    """Return a copy of `config` with every non-None override applied."""

    values = {k: v for k, v in overrides.items() if v is not None}
    for key, value in values.items():
        if not _is_valid(key, value):
            raise ConfigError(f"invalid value for {key}: {value!r}")
        if key == "log_level":
            values[key] = value.upper()
    return replace(config, **values)


def _is_valid(key: str, value: Any) -> bool:
    if key == "asset_dir":
        return value is None or isinstance(value, str)
    if key in ("caption", "greeting"):
        return isinstance(value, str)
    if key in ("window_width", "window_height", "frame_interval_ms"):
        # bool is an int subclass; reject it explicitly.
        return isinstance(value, int) and not isinstance(value, bool) and value > 0
    if key == "log_level":
        return isinstance(value, str) and value.upper() in _LOG_LEVELS
    return False

# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any

from artspace.constants import (
    DEFAULT_HOTKEYS,
    DEFAULT_IMAGE_DISPLAY_SIZE,
    DEFAULT_LOCALE,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_WINDOW_SIZE,
    ORIENTATIONS,
    SUPPORTED_LOCALES,
)
from artspace.utils.file_utils import read_json_file, write_json_file

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: dict[str, Any] = {
    "locale": DEFAULT_LOCALE,
    "window": {**DEFAULT_WINDOW_SIZE, "orientation": "portrait"},
    "image": {"display_size": DEFAULT_IMAGE_DISPLAY_SIZE},
    "hotkeys": deepcopy(DEFAULT_HOTKEYS),
    "logging": {"log_to_file": True},
}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _require_int(value: Any, name: str, low: int, high: int) -> None:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or not (low <= value <= high):
        raise ConfigError(f"{name} must be an int in range {low}..{high}")


def _require_section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be an object")
    return section


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the viewer reads at startup."""
    if config.get("locale") not in SUPPORTED_LOCALES:
        raise ConfigError(f"locale must be one of {', '.join(SUPPORTED_LOCALES)}")

    window = _require_section(config, "window")
    _require_int(window.get("width"), "window.width", 200, 4000)
    _require_int(window.get("height"), "window.height", 200, 4000)
    if window.get("orientation") not in ORIENTATIONS:
        raise ConfigError("window.orientation must be 'portrait' or 'landscape'")

    _require_int(_require_section(config, "image").get("display_size"), "image.display_size", 64, 2000)

    hotkeys = _require_section(config, "hotkeys")
    for name in DEFAULT_HOTKEYS:
        if not isinstance(hotkeys.get(name, ""), str):
            raise ConfigError(f"hotkeys.{name} must be a string")

    if not isinstance(_require_section(config, "logging").get("log_to_file"), bool):
        raise ConfigError("logging.log_to_file must be true or false")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    if not config_path.exists():
        logger.info("No settings file at %s, using defaults", config_path)
        return get_default_config()

    loaded = read_json_file(config_path)
    merged = _deep_merge(get_default_config(), loaded)
    validate_config(merged)
    logger.info("Loaded settings from %s", config_path)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, config)
    return config_path

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .core.exceptions import ConfigError
from .core.state import DEFAULT_ZOOM, ZOOM_MAX, ZOOM_MIN
from .io.csv_io import DEFAULT_EXPORT_FILENAME

logger = logging.getLogger(__name__)

CONFIG_ENV = "STATS_BROWSER_CONFIG"


@dataclass(frozen=True)
class AppSettings:
    ui_title: str = "Standard Deviation Calculator"
    subtitle: str = "Enter numbers, visualize data, and calculate statistics"
    default_zoom: int = DEFAULT_ZOOM
    zoom_step: int = 10
    export_filename: str = DEFAULT_EXPORT_FILENAME


def load_settings(path: str | Path | None = None) -> AppSettings:
    """
    Load app settings from an optional JSON file.

    Selection Order:
        1) path argument if provided
        2) env var STATS_BROWSER_CONFIG
        3) built-in defaults

    Unknown keys are ignored (logged at warning level).

    Raises:
        ConfigError: unreadable file, wrong value types, or a default zoom outside [10, 200]
    """
    if path is None:
        path = os.getenv(CONFIG_ENV)
    if not path:
        return AppSettings()

    path = Path(path)
    logger.info("Loading settings", extra={"config_path": str(path)})
    try:
        with path.open() as f:
            raw: Dict[str, Any] = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read settings file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file {path} must contain a JSON object")

    return settings_from_dict(raw)


def settings_from_dict(raw: Dict[str, Any]) -> AppSettings:
    known = {f.name: f for f in fields(AppSettings)}
    unknown = sorted(set(raw) - set(known))
    if unknown:
        logger.warning("Ignoring unknown settings keys: %s", ", ".join(unknown))

    values: Dict[str, Any] = {}
    for name, f in known.items():
        if name not in raw:
            continue
        value = raw[name]
        expected = int if f.type == "int" else str
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(f"Setting '{name}' must be of type {expected.__name__}, got {value!r}")
        values[name] = value

    settings = AppSettings(**values)

    if not ZOOM_MIN <= settings.default_zoom <= ZOOM_MAX:
        raise ConfigError(
            f"default_zoom must be between {ZOOM_MIN} and {ZOOM_MAX}, got {settings.default_zoom}"
        )
    if settings.zoom_step <= 0:
        raise ConfigError(f"zoom_step must be positive, got {settings.zoom_step}")

    return settings

"""Persistent application settings helpers.

Only user preferences live here (the selected palette name, extra asset
directories). Palette contents are registered in-process and never written.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def settings_dir() -> Path:
    """Directory holding settings.json, honouring PALETTEKIT_CONFIG_DIR."""
    override = os.environ.get("PALETTEKIT_CONFIG_DIR")
    if override:
        return Path(override)
    return Path.home() / ".config" / "palettekit"


def settings_path() -> Path:
    return settings_dir() / "settings.json"


def load_settings() -> dict:
    """Load settings from disk.

    Returns an empty dict if settings file does not exist or contains invalid JSON.
    """
    path = settings_path()
    if not path.exists():
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}

    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Persist settings to disk atomically."""
    path = settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(".tmp")
    tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
    tmp_path.replace(path)


def get_setting(key: str, default: Any = None) -> Any:
    """Read a setting value with a fallback default."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> None:
    """Set and persist a single setting key."""
    settings = load_settings()
    settings[key] = value
    save_settings(settings)

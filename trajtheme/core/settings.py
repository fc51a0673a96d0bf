"""Persisted color scheme choice and user-defined schemes.

Everything lives in one JSON file. A hand-edited file may hold values of
the wrong shape; readers here return ``None``/``{}`` for those and log a
warning rather than raising.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from trajtheme.logging import get_logger

logger = get_logger(__name__)

SETTINGS_DIR = Path.home() / ".config" / "trajtheme"
SETTINGS_PATH = SETTINGS_DIR / "settings.json"

SCHEME_KEY = "color_scheme"
USER_SCHEMES_KEY = "custom_color_schemes"


def load_settings() -> dict:
    """Read the settings file; a missing, unreadable or non-object file yields ``{}``."""
    if not SETTINGS_PATH.exists():
        return {}

    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning(f"Ignoring unreadable settings file {SETTINGS_PATH}: {exc}")
        return {}

    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Write through a temp file so a crash never leaves a half-written file."""
    SETTINGS_DIR.mkdir(parents=True, exist_ok=True)
    tmp_path = SETTINGS_PATH.with_suffix(".tmp")
    tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
    tmp_path.replace(SETTINGS_PATH)


def get_setting(key: str, default: Any = None) -> Any:
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> None:
    data = load_settings()
    data[key] = value
    save_settings(data)


def get_scheme_id() -> Optional[str]:
    """Stored scheme id, or None when unset or not a string."""
    stored = get_setting(SCHEME_KEY)
    if stored is None or isinstance(stored, str):
        return stored
    logger.warning(f"Ignoring '{SCHEME_KEY}': expected a string, got {type(stored).__name__}")
    return None


def set_scheme_id(scheme_id: str) -> None:
    set_setting(SCHEME_KEY, scheme_id)


def get_user_schemes() -> dict[str, Any]:
    """Stored user schemes keyed by id; entries are not validated here."""
    stored = get_setting(USER_SCHEMES_KEY, {})
    if not isinstance(stored, dict):
        logger.warning(f"Ignoring '{USER_SCHEMES_KEY}': expected a mapping")
        return {}
    return stored


"""Persistent JSON config helpers.

Holds display preferences (theme name, colour opt-out). Reading is
defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "fancyls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Return the configured theme name, or ``None`` when unset or not a string."""
    value = load_config().get("theme")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def load_no_color() -> bool:
    """Return persisted colour opt-out; non-boolean values count as ``False``."""
    value = load_config().get("no_color")
    return value if isinstance(value, bool) else False


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_theme_name",
    "load_no_color",
]

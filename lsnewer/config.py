"""Persistent JSON config helpers.

Stores listing preferences: hidden-entry visibility, colour, and
per-directory headers. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lsnewer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_SHOW_HIDDEN = True
DEFAULT_COLOR = True
DEFAULT_DIRECTORY_HEADERS = True


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


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def _load_bool(key: str, default: bool) -> bool:
    """Only explicit booleans are honoured; anything else yields ``default``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def load_show_hidden() -> bool:
    """Return whether dot-entries are listed."""
    return _load_bool("show_hidden", DEFAULT_SHOW_HIDDEN)


def load_color() -> bool:
    """Return whether colour output is allowed on a TTY."""
    return _load_bool("color", DEFAULT_COLOR)


def load_directory_headers() -> bool:
    """Return whether each visited directory is announced before its entries."""
    return _load_bool("directory_headers", DEFAULT_DIRECTORY_HEADERS)


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_show_hidden",
    "load_color",
    "load_directory_headers",
]

"""Persistent JSON config helpers.

Stores the menu theme, whether the browser offers directory selection, and
the last directory a selection was made in. All access is defensive:
malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .files import safe_is_dir

logger = logging.getLogger(__name__)

APP_NAME = "consoletools"
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


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored so a read-only config
    directory never breaks an interactive session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not save config to %s: %s", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    """Load persisted menu theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_allow_directory_selection() -> bool:
    """Return whether the browser should offer the select-directory token.

    Only explicit boolean values are accepted; anything else means ``False``.
    """
    value = load_config().get("allow_directory_selection")
    return value if isinstance(value, bool) else False


def save_allow_directory_selection(enabled: bool) -> None:
    config = load_config()
    config["allow_directory_selection"] = bool(enabled)
    save_config(config)


def load_last_directory() -> Path | None:
    """Return the remembered browsing directory if it still exists."""
    value = load_config().get("last_directory")
    if not isinstance(value, str) or not value:
        return None
    path = Path(value)
    return path if safe_is_dir(path) else None


def save_last_directory(directory: Path) -> None:
    config = load_config()
    config["last_directory"] = str(directory)
    save_config(config)

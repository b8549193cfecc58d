"""Persistent JSON config helpers.

Stores front-end preferences: hidden-file visibility, default sort, diff
highlight style, and history depth. All access is tolerant: malformed or
missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .pane.history import MAX_HISTORY
from .pane.sorting import SortDirection, SortKey

APP_NAME = "dualpane"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_DIFF_STYLE = "monokai"


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

    Filesystem errors are ignored so an unwritable config never breaks browsing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility; only explicit booleans count."""
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_sort_preference() -> tuple[SortKey, SortDirection]:
    """Load the default pane sort, falling back to name ascending on bad values."""
    config = load_config()
    try:
        key = SortKey(config.get("sort_key"))
    except ValueError:
        key = SortKey.NAME
    try:
        direction = SortDirection(config.get("sort_direction"))
    except ValueError:
        direction = SortDirection.ASCENDING
    return key, direction


def save_sort_preference(key: SortKey, direction: SortDirection) -> None:
    config = load_config()
    config["sort_key"] = key.value
    config["sort_direction"] = direction.value
    save_config(config)


def load_diff_style() -> str:
    """Load the Pygments style used for diff reports."""
    value = load_config().get("diff_style")
    if not isinstance(value, str):
        return DEFAULT_DIFF_STYLE
    stripped = value.strip()
    return stripped if stripped else DEFAULT_DIFF_STYLE


def save_diff_style(style: str) -> None:
    stripped = str(style).strip()
    if not stripped:
        return
    config = load_config()
    config["diff_style"] = stripped
    save_config(config)


def load_history_limit() -> int:
    """Load navigation history depth; the setting can only lower ``MAX_HISTORY``."""
    value = load_config().get("history_limit")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return MAX_HISTORY
    return min(value, MAX_HISTORY)

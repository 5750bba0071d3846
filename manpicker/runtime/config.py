"""Persistent JSON config helpers.

Stores the preferred pane layout, man section, and UI theme.
Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..layout import DEFAULT_LAYOUT, normalize_layout_name

APP_NAME = "manpicker"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_SECTION = "1"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_layout() -> str:
    """Return persisted layout name, defaulting to the vertical split."""
    value = load_config().get("layout")
    if not isinstance(value, str):
        return DEFAULT_LAYOUT
    return normalize_layout_name(value)


def save_layout(layout: str) -> None:
    config = load_config()
    config["layout"] = normalize_layout_name(layout)
    save_config(config)


def load_section() -> str:
    """Return persisted man section; only short alphanumeric names are accepted."""
    value = load_config().get("section")
    if isinstance(value, bool):
        return DEFAULT_SECTION
    if isinstance(value, int) and value > 0:
        return str(value)
    if isinstance(value, str):
        candidate = value.strip()
        if candidate and len(candidate) <= 8 and candidate.isalnum():
            return candidate
    return DEFAULT_SECTION


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    return value if isinstance(value, str) and value.strip() else None

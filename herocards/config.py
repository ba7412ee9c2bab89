"""Persistent JSON config helpers.

Stores the data directory, preferred card width, and theme name.
Malformed or missing config loads as unset values.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .records.cards import MIN_RECORD_CARD_WIDTH

APP_NAME = "herocards"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so a read-only config
    directory never breaks a lookup session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_data_dir() -> Path | None:
    """Load the configured data directory, ``None`` when unset/invalid."""
    value = load_config().get("data_dir")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def save_data_dir(data_dir: Path) -> None:
    config = load_config()
    config["data_dir"] = str(data_dir)
    save_config(config)


def load_card_width() -> int | None:
    """Load the preferred card width.

    Booleans, non-integers and widths below the card minimum are ignored.
    """
    value = load_config().get("card_width")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < MIN_RECORD_CARD_WIDTH:
        logger.warning("ignoring invalid card_width %r", value)
        return None
    return value


def save_card_width(width: int) -> None:
    if width < MIN_RECORD_CARD_WIDTH:
        return
    config = load_config()
    config["card_width"] = int(width)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)

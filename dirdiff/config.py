"""Persistent JSON config helpers.

Stores default comparison options. All access is defensive: malformed or
missing config falls back to built-in defaults. Comparisons never read this
file on their own; callers opt in via ``load_compare_options``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "dirdiff"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class CompareOptions:
    """Knobs shared by the comparison entry points."""

    follow_symlinks: bool = False


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
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def load_compare_options() -> CompareOptions:
    """Build ``CompareOptions`` from config.

    Only explicit boolean values are accepted; anything else keeps the default.
    """
    value = load_config().get("follow_symlinks")
    return CompareOptions(follow_symlinks=value if isinstance(value, bool) else False)


def save_follow_symlinks(follow_symlinks: bool) -> None:
    """Persist the default symlink-following preference."""
    config = load_config()
    config["follow_symlinks"] = bool(follow_symlinks)
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "CompareOptions",
    "load_config",
    "save_config",
    "load_compare_options",
    "save_follow_symlinks",
]

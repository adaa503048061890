"""Configuration for hanreader.

Settings come from the first config.json found at the project root or the
working directory, with built-in values for anything missing:

    {
      "defaults": {"data_dir": "data", "max_word_length": 5, ...},
      "available_formats": ["cedict", "jedict"]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

FALLBACK_DEFAULTS = {
    "dictionary_format": "cedict",
    "data_dir": "data",
    "dictionary_file": "cedict_ts.u8",
    "tier_file": "hsk-vocab.json",
    "vocab_file": "vocab.json",
    "max_word_length": 5,
    "save_sentences": False,
    "highlight_prefix": "hsk",
    "force": False,
    "quiet": False,
    "verbose": False,
}

FALLBACK_FORMATS = ["cedict", "jedict"]

CONFIG_NAME = "config.json"

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Locate config.json: project root first, then cwd and its parent."""
    project_root = Path(__file__).resolve().parents[2]
    for directory in (project_root, Path.cwd(), Path.cwd().parent):
        candidate = directory / CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def _read(path: Path) -> dict[str, Any] | None:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return None
    return data


def load() -> dict[str, Any]:
    """Get the configuration, reading it on first use."""
    global _config
    if _config is None:
        path = _find_config()
        data = _read(path) if path else None
        _config = data if data is not None else {
            "defaults": dict(FALLBACK_DEFAULTS),
            "available_formats": list(FALLBACK_FORMATS),
        }
    return _config


def reset() -> None:
    """Forget the loaded configuration; the next load() reads it again."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    return load().get("defaults", {}).get(key, fallback)


def get_available_formats() -> list[str]:
    return load().get("available_formats", FALLBACK_FORMATS)


def _setting(key: str) -> Any:
    return get_default(key, FALLBACK_DEFAULTS[key])


# Convenience accessors
def default_dictionary_format() -> str:
    return _setting("dictionary_format")


def default_data_dir() -> str:
    return _setting("data_dir")


def default_dictionary_file() -> str:
    return _setting("dictionary_file")


def default_tier_file() -> str:
    return _setting("tier_file")


def default_vocab_file() -> str:
    return _setting("vocab_file")


def default_max_word_length() -> int:
    return _setting("max_word_length")


def default_save_sentences() -> bool:
    return _setting("save_sentences")


def default_highlight_prefix() -> str:
    return _setting("highlight_prefix")

"""Tiered vocabulary list ingestor.

Format (JSON object, tier id -> words):
    {
      "1": ["我", "你", "好"],
      "2": ["語學", "已經"]
    }

Tier ids are small positive integers; lower tiers are more basic and win
when a word is listed twice.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping
import json
import logging

from .base import SourceUnreadableError, read_source

logger = logging.getLogger(__name__)

TierTable = Mapping[int, tuple[str, ...]]

EMPTY_TIERS: TierTable = MappingProxyType({})


def build_tier_table(data: Mapping[Any, Iterable[str]]) -> TierTable:
    """Build a read-only tier table.

    Keys are coerced to int; words keep their listed order with duplicates
    inside one tier removed. Invalid keys and values are skipped.

    Args:
        data: Mapping of tier id (int or numeric string) to words.

    Returns:
        Immutable mapping of tier id to word tuple.
    """
    table: dict[int, tuple[str, ...]] = {}
    for key, words in data.items():
        try:
            tier = int(key)
        except (TypeError, ValueError):
            logger.warning("Skipping tier with non-numeric id: %r", key)
            continue

        if isinstance(words, (str, bytes)) or not isinstance(words, Iterable):
            logger.warning("Skipping tier %d: expected a list of words", tier)
            continue

        ordered: list[str] = list(table.get(tier, ()))
        seen = set(ordered)
        for word in words:
            if not isinstance(word, str) or not word or word in seen:
                continue
            seen.add(word)
            ordered.append(word)
        table[tier] = tuple(ordered)

    return MappingProxyType(table)


def parse_tier_json(text: str, source: str = "<memory>") -> TierTable:
    """Parse tier table JSON text.

    Raises:
        SourceUnreadableError: If the text is not a JSON object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SourceUnreadableError(f"Invalid tier JSON in {source}: {e}") from e

    if not isinstance(data, dict):
        raise SourceUnreadableError(f"Tier table in {source} must be a JSON object")

    return build_tier_table(data)


def load_tier_table(filepath: Path | str) -> TierTable:
    """Load a tier table from a JSON file.

    Raises:
        SourceUnreadableError: If the file cannot be read, decoded or parsed.
    """
    text = read_source(filepath)
    table = parse_tier_json(text, str(filepath))
    logger.info(
        "Loaded %d tiers (%d words) from %s",
        len(table), sum(len(w) for w in table.values()), filepath,
    )
    return table

"""Tiered vocabulary highlighting.

Wraps every occurrence of a tier's words in inline markup:

    <span class="hsk-highlight hsk-level-1">我們</span>

Lower tiers win: a word already wrapped (or sitting inside a wrapped span)
is never wrapped again, so each surface occurrence carries exactly one
level. Words match as literal substrings; there is no word boundary
detection for unsegmented scripts.
"""

from collections import Counter
from typing import Iterable, Mapping, Optional
import logging
import re

from .ingest.tiers import TierTable

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "hsk"


def _class_attr(prefix: str, level: str) -> str:
    return f'class="{prefix}-highlight {prefix}-level-{level}"'


def wrap(word: str, tier: int, prefix: str = DEFAULT_PREFIX) -> str:
    """Wrap a word in highlight markup for a tier."""
    return f"<span {_class_attr(prefix, str(tier))}>{word}</span>"


def _span_pattern(prefix: str, content: str) -> re.Pattern:
    p = re.escape(prefix)
    return re.compile(
        rf'<span class="{p}-highlight {p}-level-(?P<level>\d+)">(?P<content>{content})</span>'
    )


def clear_markup(text: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Remove highlight markup, keeping the wrapped text.

    Innermost spans are unwrapped first; the pass repeats until nothing
    changes so nested wrappers are fully removed.
    """
    pattern = _span_pattern(prefix, r"[^<>]*")
    previous = None
    while text != previous:
        previous = text
        text = pattern.sub(r"\g<content>", text)
    return text


def marked_words(text: str, prefix: str = DEFAULT_PREFIX) -> set[str]:
    """Get the contents of existing highlight spans."""
    return {m.group("content") for m in _span_pattern(prefix, r".+?").finditer(text)}


def count_markup(text: str, prefix: str = DEFAULT_PREFIX) -> dict[int, int]:
    """Count highlight spans per tier."""
    counts = Counter(
        int(m.group("level")) for m in _span_pattern(prefix, r".+?").finditer(text)
    )
    return dict(sorted(counts.items()))


def _wrap_outside_markup(
    text: str,
    word: str,
    tier: int,
    prefix: str,
    marked: set[str],
) -> str:
    p = re.escape(prefix)
    protected = re.compile(
        rf'(<span class="{p}-highlight {p}-level-\d+">.+?</span>)'
    )
    word_pattern = re.compile(re.escape(word))

    def replace(match: re.Match) -> str:
        marked.add(match.group(0))
        return wrap(match.group(0), tier, prefix)

    parts = protected.split(text)
    # Even indices are plain text, odd indices existing spans
    for i in range(0, len(parts), 2):
        parts[i] = word_pattern.sub(replace, parts[i])
    return "".join(parts)


def apply_tier(
    text: str,
    tier_table: Mapping[int, Iterable[str]],
    target_tier: Optional[int] = None,
    prefix: str = DEFAULT_PREFIX,
) -> str:
    """Highlight tier words in text.

    Without a target tier all existing markup is cleared and every tier is
    applied in ascending order. With a target tier existing markup is kept
    and only that tier is applied.

    Args:
        text: Full document text.
        tier_table: Tier id to words.
        target_tier: Single tier to apply, or None for all.
        prefix: Class prefix of the markup.

    Returns:
        New text with markup inserted.
    """
    if target_tier is None:
        text = clear_markup(text, prefix)
        marked: set[str] = set()
        tiers = sorted(tier_table)
    else:
        marked = marked_words(text, prefix)
        tiers = [target_tier] if target_tier in tier_table else []

    for tier in tiers:
        for word in tier_table[tier]:
            if not word or word in marked or word not in text:
                continue
            text = _wrap_outside_markup(text, word, tier, prefix, marked)

    return text


class TieredHighlighter:
    """Highlighter bound to one tier table and markup prefix."""

    def __init__(self, tier_table: TierTable, prefix: str = DEFAULT_PREFIX):
        self.tier_table = tier_table
        self.prefix = prefix

    @property
    def tiers(self) -> list[int]:
        return sorted(self.tier_table)

    def apply(self, text: str, target_tier: Optional[int] = None) -> str:
        if target_tier is not None and target_tier not in self.tier_table:
            logger.warning("Unknown tier %d; text left unchanged", target_tier)
        return apply_tier(text, self.tier_table, target_tier, self.prefix)

    def clear(self, text: str) -> str:
        return clear_markup(text, self.prefix)

    def count(self, text: str) -> dict[int, int]:
        return count_markup(text, self.prefix)

"""Reader session: the tables one document view works against.

A session owns an immutable dictionary table and tier table and exposes the
hover, highlight and clear operations on top of them. Sessions are rebuilt
on reload rather than updated.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Optional, Sequence
import logging

from . import config as cfg
from .builder.dictionary import DictionaryTable, load_table
from .highlight import DEFAULT_PREFIX, TieredHighlighter
from .ingest import create_ingestor
from .ingest.base import DownloadableIngestor
from .ingest.tiers import EMPTY_TIERS, TierTable, load_tier_table
from .normalizer import is_han_char, is_kana
from .phonetics import convert_multi_syllable, transcribe
from .schema import DictionaryEntry, MatchResult
from .segment import DEFAULT_MAX_WORD_LENGTH, forward_match
from .vocab import extract_sentence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoverResult:
    """Everything shown for the word under the cursor."""

    match: MatchResult
    entries: tuple[DictionaryEntry, ...]
    tooltip: str
    sentence: str = ""


def format_reading(reading: str) -> str:
    """Render a raw reading for display.

    Pinyin shows as "zhōng wén [ㄓㄨㄥ ㄨㄣˊ]"; kana as "あゆ (ayu)".
    """
    if not reading:
        return ""
    if is_kana(reading):
        romaji = transcribe(reading, backend="romaji")
        return f"{reading} ({romaji})"
    converted = convert_multi_syllable(reading)
    return f"{converted.accented} [{converted.zhuyin}]"


def describe(entries: Sequence[DictionaryEntry]) -> str:
    """Tooltip text: one block per entry, reading line then definitions."""
    blocks = []
    for entry in entries:
        readings = [format_reading(entry.reading)]
        if entry.alt_reading:
            readings.append(format_reading(entry.alt_reading))
        heading = " / ".join(r for r in readings if r)
        blocks.append(f"{heading}\n{'; '.join(entry.definitions)}")
    return "\n\n".join(blocks)


@dataclass(frozen=True)
class ReaderSession:
    """Dictionary and tier tables plus lookup settings."""

    dictionary: DictionaryTable
    tiers: TierTable = field(default_factory=lambda: EMPTY_TIERS)
    max_word_length: int = DEFAULT_MAX_WORD_LENGTH
    is_target_char: Callable[[str], bool] = is_han_char
    highlight_prefix: str = DEFAULT_PREFIX

    def __post_init__(self):
        if not isinstance(self.tiers, MappingProxyType):
            object.__setattr__(self, "tiers", MappingProxyType(dict(self.tiers)))

    @property
    def highlighter(self) -> TieredHighlighter:
        return TieredHighlighter(self.tiers, self.highlight_prefix)

    def match(self, text: str, offset: int) -> Optional[MatchResult]:
        """Find the word starting at offset, if offset is on a target character."""
        if offset < 0 or offset >= len(text) or not self.is_target_char(text[offset]):
            return None
        return forward_match(text, offset, self.dictionary, self.max_word_length)

    def lookup(self, word: str) -> tuple[DictionaryEntry, ...]:
        return self.dictionary.lookup(word)

    def describe(self, entries: Sequence[DictionaryEntry]) -> str:
        return describe(entries)

    def hover(self, text: str, offset: int, with_sentence: bool = False) -> Optional[HoverResult]:
        """Resolve the word under the cursor.

        Args:
            text: Text of the hovered line or block.
            offset: Character offset of the cursor.
            with_sentence: Also extract the surrounding sentence.

        Returns:
            HoverResult, or None when nothing matches.
        """
        match = self.match(text, offset)
        if match is None:
            return None

        entries = self.lookup(match.word)
        if not entries:
            return None

        sentence = extract_sentence(text, offset, match.word) if with_sentence else ""
        return HoverResult(
            match=match,
            entries=entries,
            tooltip=describe(entries),
            sentence=sentence,
        )

    def highlight(self, text: str, tier: Optional[int] = None) -> str:
        return self.highlighter.apply(text, tier)

    def clear(self, text: str) -> str:
        return self.highlighter.clear(text)

    @classmethod
    def from_paths(
        cls,
        dictionary_path: Path | str,
        tier_path: Optional[Path | str] = None,
        dictionary_format: str = "cedict",
        **kwargs,
    ) -> "ReaderSession":
        """Load tables from disk.

        Raises:
            SourceUnreadableError: If either source cannot be read.
        """
        dictionary = load_table(dictionary_path, dictionary_format)
        tiers = load_tier_table(tier_path) if tier_path else EMPTY_TIERS
        logger.info("Session ready: %r, %d tiers", dictionary, len(tiers))
        return cls(dictionary=dictionary, tiers=tiers, **kwargs)

    @classmethod
    def from_config(
        cls,
        data_dir: Optional[Path | str] = None,
        download: bool = False,
    ) -> "ReaderSession":
        """Load tables from the configured data directory.

        The tier file is optional; the dictionary file is not. With
        download set, a missing dictionary is fetched once first.
        """
        data_dir = Path(data_dir or cfg.default_data_dir())
        dictionary_path = data_dir / cfg.default_dictionary_file()
        dictionary_format = cfg.default_dictionary_format()
        if download and not dictionary_path.exists():
            ingestor = create_ingestor(dictionary_format, dictionary_path)
            if isinstance(ingestor, DownloadableIngestor):
                ingestor.download()

        tier_path = data_dir / cfg.default_tier_file()
        return cls.from_paths(
            dictionary_path=dictionary_path,
            tier_path=tier_path if tier_path.exists() else None,
            dictionary_format=dictionary_format,
            max_word_length=cfg.default_max_word_length(),
            highlight_prefix=cfg.default_highlight_prefix(),
        )

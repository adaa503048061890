"""Dictionary table builder.

Collects parsed entries into a read-only headword table.

Index structure:
    傳統 → (DictionaryEntry(傳統 传统 [chuan2 tong3]),)
    传统 → (same entry, reachable through the simplified form)
    行   → (DictionaryEntry([xing2]), DictionaryEntry([hang2]), ...)
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Optional
import logging

from ..schema import DictionaryEntry
from ..ingest import create_ingestor
from ..ingest.base import Ingestor, IngestResult, LineFormat
from ..ingest.cedict import CEDICT_FORMAT

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    total_lines: int = 0
    total_entries: int = 0
    skipped_lines: int = 0
    total_headwords: int = 0
    sources: list[str] = field(default_factory=list)


class DictionaryTable:
    """Read-only mapping of headword to entries in file order."""

    def __init__(self, index: Optional[dict[str, tuple[DictionaryEntry, ...]]] = None):
        self._index = MappingProxyType(dict(index or {}))

    def lookup(self, word: str) -> tuple[DictionaryEntry, ...]:
        """Get all entries for a headword (empty tuple if unknown)."""
        return self._index.get(word, ())

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def headwords(self) -> list[str]:
        """Get list of indexed headwords."""
        return list(self._index.keys())

    def __repr__(self) -> str:
        return f"DictionaryTable({len(self)} headwords)"


class DictionaryBuilder:
    """Builds a DictionaryTable from ingested entries."""

    def __init__(self, line_format: LineFormat = CEDICT_FORMAT):
        """Initialize builder.

        Args:
            line_format: Grammar used by add_text().
        """
        self.line_format = line_format
        self.stats = BuildStats()

        # Internal storage: headword -> entries in insertion order
        self._index: dict[str, list[DictionaryEntry]] = {}

    def add_entry(self, entry: DictionaryEntry) -> None:
        """Index a single entry under each of its headwords."""
        for key in entry.headwords:
            self._index.setdefault(key, []).append(entry)
        self.stats.total_entries += 1

    def add_entries(self, entries: Iterable[DictionaryEntry]) -> None:
        for entry in entries:
            self.add_entry(entry)

    def add_result(self, result: IngestResult) -> None:
        """Add entries from an IngestResult.

        Args:
            result: IngestResult from an ingestor.
        """
        self.add_entries(result.entries)
        self.stats.total_lines += result.total_raw
        self.stats.skipped_lines += result.total_skipped
        self.stats.sources.append(result.source_path)

    def add_text(self, text: str, source_path: str = "<memory>") -> None:
        """Parse and add raw dictionary text."""
        ingestor = Ingestor(line_format=self.line_format)
        self.add_result(ingestor.ingest_text(text, source_path))

    def get_entry_count(self) -> int:
        return self.stats.total_entries

    def build(self) -> DictionaryTable:
        """Freeze collected entries into a table.

        Returns:
            DictionaryTable. Further additions do not affect it.
        """
        table = DictionaryTable(
            {key: tuple(entries) for key, entries in self._index.items()}
        )
        self.stats.total_headwords = len(table)
        logger.debug(
            "Built dictionary: %d entries, %d headwords, %d lines skipped",
            self.stats.total_entries, self.stats.total_headwords,
            self.stats.skipped_lines,
        )
        return table


def build_table(text: str, line_format: LineFormat = CEDICT_FORMAT) -> DictionaryTable:
    """Parse dictionary text into a table.

    Args:
        text: Whole dictionary file contents.
        line_format: Line grammar.

    Returns:
        DictionaryTable (empty if no line parses).
    """
    builder = DictionaryBuilder(line_format)
    builder.add_text(text)
    return builder.build()


def load_table(filepath: Path | str, format_name: str = "cedict") -> DictionaryTable:
    """Load a dictionary file into a table.

    Raises:
        SourceUnreadableError: If the file cannot be read or decoded.
    """
    ingestor = create_ingestor(format_name, filepath)
    builder = DictionaryBuilder(ingestor.line_format)
    builder.add_result(ingestor.ingest(filepath))
    return builder.build()

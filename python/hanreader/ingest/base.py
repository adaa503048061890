"""Base ingestor interface for dictionary sources.

All ingestors share one line-oriented parser driven by a LineFormat: a single
regular expression with four named groups (headword, block1, block2,
definitions). Subclasses only pick the format and, where one exists, a
download URL.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional
import logging
import re
import urllib.request

from ..schema import DictionaryEntry

logger = logging.getLogger(__name__)


class SourceUnreadableError(ValueError):
    """A dictionary or tier source could not be read or decoded."""


@dataclass(frozen=True)
class LineFormat:
    """Grammar of one dictionary line.

    The pattern must define the named groups ``headword``, ``block1``,
    ``block2`` and ``definitions``. When ``block1_is_headword`` is set,
    block1 is a second written form and block2 the reading (CEDICT);
    otherwise block1 and block2 are two reading blocks (JEDICT).
    """

    name: str
    pattern: re.Pattern
    block1_is_headword: bool = True
    comment_char: str = "#"

    def parse_line(self, line: str) -> Optional[DictionaryEntry]:
        return parse_line(line, self)


def split_definitions(blob: str) -> tuple[str, ...]:
    """Split "/def1/def2/" into ("def1", "def2").

    Only the empty leading and trailing fragments produced by the
    delimiter are dropped.
    """
    parts = blob.split("/")
    if parts and parts[0] == "":
        parts = parts[1:]
    if parts and parts[-1] == "":
        parts = parts[:-1]
    return tuple(parts)


def parse_line(line: str, line_format: LineFormat) -> Optional[DictionaryEntry]:
    """Parse one dictionary line.

    Args:
        line: Raw line (trailing newline allowed).
        line_format: Grammar to match against.

    Returns:
        DictionaryEntry, or None for comments, blank and malformed lines.
    """
    line = line.rstrip("\r\n")
    if not line.strip() or line.startswith(line_format.comment_char):
        return None

    match = line_format.pattern.match(line)
    if match is None:
        return None

    headword = match.group("headword")
    block1 = match.group("block1").strip()
    block2 = match.group("block2").strip()
    definitions = split_definitions(match.group("definitions"))

    if line_format.block1_is_headword:
        return DictionaryEntry(
            headword=headword,
            alt_headword=block1,
            reading=block2,
            definitions=definitions,
        )
    return DictionaryEntry(
        headword=headword,
        alt_headword=headword,
        reading=block1,
        definitions=definitions,
        alt_reading=block2,
    )


def decode_source(data: bytes, source: str = "<bytes>") -> str:
    """Decode raw dictionary bytes as strict UTF-8.

    Raises:
        SourceUnreadableError: If the bytes are not valid UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceUnreadableError(f"Cannot decode {source} as UTF-8: {e}") from e


def read_source(filepath: Path | str) -> str:
    """Read and decode a source file.

    Raises:
        SourceUnreadableError: If the file is missing, unreadable or not UTF-8.
    """
    filepath = Path(filepath)
    try:
        data = filepath.read_bytes()
    except OSError as e:
        raise SourceUnreadableError(f"Cannot read {filepath}: {e}") from e
    return decode_source(data, str(filepath))


@dataclass
class IngestResult:
    """Result of ingesting a dictionary source."""

    entries: list[DictionaryEntry]
    source_path: str
    dict_name: str
    format_name: str
    total_raw: int = 0          # Non-blank, non-comment lines
    total_valid: int = 0        # Lines that parsed into entries
    total_skipped: int = 0      # Malformed lines dropped
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_skipped} skipped)"
        )


class Ingestor:
    """Base class for line-format dictionary ingestors.

    Subclasses set:
        - line_format: LineFormat for the dictionary
        - file_extensions: list of supported extensions

    The ingest() method handles decoding and entry collection.
    """

    file_extensions: list[str] = []
    line_format: Optional[LineFormat] = None

    def __init__(self, line_format: Optional[LineFormat] = None):
        """Initialize ingestor.

        Args:
            line_format: Override for the class-level line format.
        """
        if line_format is not None:
            self.line_format = line_format
        if self.line_format is None:
            raise ValueError(f"{type(self).__name__} has no line format")

    def parse(self, lines: Iterable[str]) -> Iterator[tuple[Optional[DictionaryEntry], int]]:
        """Parse lines and yield (entry, line_number) tuples.

        Comment and blank lines are not yielded. Malformed lines are yielded
        with entry None so callers can count them.
        """
        comment_char = self.line_format.comment_char
        for line_num, line in enumerate(lines, start=1):
            if not line.strip() or line.startswith(comment_char):
                continue
            yield self.line_format.parse_line(line), line_num

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        return filepath.stem

    def ingest_text(self, text: str, source_path: str = "<memory>") -> IngestResult:
        """Ingest dictionary entries from already-decoded text."""
        entries: list[DictionaryEntry] = []
        total_raw = 0
        skipped = 0

        for entry, line_num in self.parse(text.split("\n")):
            total_raw += 1
            if entry is None:
                skipped += 1
                logger.debug("Skipping malformed line %d in %s", line_num, source_path)
                continue
            entries.append(entry)

        return IngestResult(
            entries=entries,
            source_path=source_path,
            dict_name=Path(source_path).stem,
            format_name=self.line_format.name,
            total_raw=total_raw,
            total_valid=len(entries),
            total_skipped=skipped,
        )

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest dictionary from file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with entries and statistics.

        Raises:
            SourceUnreadableError: If the file cannot be read or decoded.
        """
        filepath = Path(filepath)
        text = read_source(filepath)
        result = self.ingest_text(text, str(filepath.resolve()))
        result.dict_name = self.get_dict_name(filepath)
        logger.info("Ingested %r", result)
        return result


class DownloadableIngestor(Ingestor):
    """Ingestor that can download its source file once."""

    download_url: str = ""

    def __init__(
        self,
        cache_dir: Path | str,
        line_format: Optional[LineFormat] = None,
        filename: Optional[str] = None,
    ):
        super().__init__(line_format)
        self.cache_dir = Path(cache_dir)
        self.filename = filename

    def get_cached_path(self) -> Path:
        """Get path where downloaded file should be cached."""
        if self.filename:
            return self.cache_dir / self.filename
        if not self.download_url:
            raise ValueError(f"No download URL for format: {self.line_format.name}")
        return self.cache_dir / self.download_url.split("/")[-1]

    def download(self, force: bool = False) -> Path:
        """Download source file if not cached.

        A single best-effort fetch: failures are logged and the path is
        returned anyway, so the following ingest reports the missing file.

        Args:
            force: Force re-download even if cached.

        Returns:
            Path to cached file.
        """
        cached_path = self.get_cached_path()

        if cached_path.exists() and not force:
            logger.debug("Using cached: %s", cached_path)
            return cached_path

        if not self.download_url:
            raise ValueError(f"No download URL for format: {self.line_format.name}")

        self.cache_dir.mkdir(parents=True, exist_ok=True)

        logger.info("Downloading from: %s", self.download_url)
        try:
            urllib.request.urlretrieve(self.download_url, cached_path)
        except OSError as e:
            logger.error("Failed to download %s: %s", self.download_url, e)
            return cached_path
        logger.info("Saved to: %s", cached_path)

        return cached_path

    def download_and_ingest(self, force: bool = False) -> IngestResult:
        """Download and ingest in one step."""
        filepath = self.download(force=force)
        return self.ingest(filepath)

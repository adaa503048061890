"""Dictionary ingestion module.

Provides pluggable ingestors for line-oriented dictionary formats:
- CC-CEDICT (traditional, simplified, [pinyin], /definitions/)
- JEDICT (kanji, \\on readings\\, [kun readings], /definitions/)
- Tiered vocabulary lists (JSON)

Usage:
    from hanreader.ingest import cedict, jedict, tiers

    result = cedict.ingest("path/to/cedict_ts.u8")
    result = jedict.ingest("path/to/jedict.u8")
    table = tiers.load_tier_table("path/to/hsk-vocab.json")
"""

from pathlib import Path

from .base import (
    DownloadableIngestor,
    Ingestor,
    IngestResult,
    LineFormat,
    SourceUnreadableError,
    parse_line,
)
from . import cedict
from . import jedict
from . import tiers

# Register available ingestors
INGESTORS: dict[str, type[Ingestor]] = {
    "cedict": cedict.CedictIngestor,
    "jedict": jedict.JedictIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by name."""
    if name not in INGESTORS:
        raise ValueError(f"Unknown ingestor: {name}. Available: {list(INGESTORS.keys())}")
    return INGESTORS[name]


def register_ingestor(name: str, ingestor_cls: type[Ingestor]) -> None:
    """Register a custom ingestor."""
    INGESTORS[name] = ingestor_cls


def create_ingestor(name: str, filepath: Path | str) -> Ingestor:
    """Instantiate the named ingestor for a dictionary file location.

    Downloadable ingestors cache into the file's directory under the file's
    own name.
    """
    ingestor_cls = get_ingestor(name)
    if issubclass(ingestor_cls, DownloadableIngestor):
        filepath = Path(filepath)
        return ingestor_cls(cache_dir=filepath.parent, filename=filepath.name)
    return ingestor_cls()


__all__ = [
    "DownloadableIngestor",
    "Ingestor",
    "IngestResult",
    "LineFormat",
    "SourceUnreadableError",
    "parse_line",
    "cedict",
    "jedict",
    "tiers",
    "get_ingestor",
    "register_ingestor",
    "create_ingestor",
    "INGESTORS",
]

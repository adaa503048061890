r"""JEDICT (kanji dictionary) ingestor.

Format:
    # comment lines
    鮎 \デン ネン\ [あゆ なまず] /freshwater trout/smelt/
    ^kanji ^on readings  ^kun readings  ^definitions

No public download exists for this format; files are supplied locally.
"""

from pathlib import Path
import re

from .base import Ingestor, LineFormat

JEDICT_FORMAT = LineFormat(
    name="jedict",
    pattern=re.compile(
        r"^(?P<headword>[^\s\\\[/]+)\s+\\(?P<block1>[^\\]*)\\\s+"
        r"\[(?P<block2>[^\]]*)\]\s+(?P<definitions>/.*/)\s*$"
    ),
    block1_is_headword=False,
)


class JedictIngestor(Ingestor):
    """Ingestor for JEDICT-style kanji dictionaries."""

    file_extensions = [".u8", ".txt"]
    line_format = JEDICT_FORMAT

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name."""
        return f"jedict_{filepath.stem}"


def ingest(filepath: Path | str):
    """Convenience function to ingest a JEDICT file.

    Args:
        filepath: Path to dictionary file.

    Returns:
        IngestResult with entries.
    """
    return JedictIngestor().ingest(filepath)

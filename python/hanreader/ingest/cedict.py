"""CC-CEDICT dictionary ingestor.

Format:
    # comment lines
    傳統 传统 [chuan2 tong3] /tradition/traditional/
    ^trad ^simp  ^numbered pinyin  ^slash-delimited definitions

Downloads the u8 file used by the reader plugin on first run.
"""

from pathlib import Path
import re

from .base import DownloadableIngestor, LineFormat

CEDICT_URL = "https://raw.githubusercontent.com/natipt/obsidian-zhongwen-reader/main/cedict_ts.u8"

CEDICT_FORMAT = LineFormat(
    name="cedict",
    pattern=re.compile(
        r"^(?P<headword>\S+)\s+(?P<block1>\S+)\s+"
        r"\[(?P<block2>[^\]]*)\]\s+(?P<definitions>/.*/)\s*$"
    ),
    block1_is_headword=True,
)


class CedictIngestor(DownloadableIngestor):
    """Ingestor for CC-CEDICT .u8 files."""

    file_extensions = [".u8", ".txt"]
    line_format = CEDICT_FORMAT
    download_url = CEDICT_URL

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name."""
        return f"cedict_{filepath.stem}"


def ingest(filepath: Path | str):
    """Convenience function to ingest a CEDICT file.

    Args:
        filepath: Path to .u8 file.

    Returns:
        IngestResult with entries.
    """
    ingestor = CedictIngestor(cache_dir=Path(filepath).parent)
    return ingestor.ingest(filepath)


def download_and_ingest(cache_dir: Path | str, force: bool = False):
    """Download (once) and ingest CC-CEDICT.

    Args:
        cache_dir: Directory to cache the downloaded file.
        force: Force re-download.

    Returns:
        IngestResult with entries.
    """
    ingestor = CedictIngestor(cache_dir=cache_dir)
    return ingestor.download_and_ingest(force=force)

"""hanreader CLI - Hover dictionary toolkit.

Usage:
    python -m hanreader.main lookup "我們學習中文" --offset 2
    python -m hanreader.main convert "zhong1 wen2"
    python -m hanreader.main convert "あゆ" --scheme romaji
    python -m hanreader.main highlight note.md --tier 1
    python -m hanreader.main clear note.md
    python -m hanreader.main save "我們學習中文。" --offset 2 --sentence
    python -m hanreader.main export --format csv -o vocab.csv
    python -m hanreader.main download
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config as cfg
from .ingest import create_ingestor
from .ingest.base import DownloadableIngestor, SourceUnreadableError
from .phonetics import convert_multi_syllable, list_transcribers, transcribe
from .session import ReaderSession
from .vocab import VocabStore, export_csv, export_flashcards


def _build_parser(defaults: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="hanreader - Hover dictionary toolkit"
    )
    parser.add_argument(
        "--data-dir",
        "-d",
        type=Path,
        default=Path(defaults.get("data_dir", "data")),
        help=f"Directory holding dictionary, tier and vocab files (default: {defaults.get('data_dir', 'data')})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=defaults.get("verbose", False),
        help="Show debug logging",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        default=defaults.get("quiet", False),
        help="Only show errors",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    lookup = commands.add_parser("lookup", help="Look up the word at an offset")
    lookup.add_argument("text", type=str)
    lookup.add_argument("--offset", type=int, default=0)

    convert = commands.add_parser("convert", help="Render a numbered-pinyin reading")
    convert.add_argument("reading", type=str)
    convert.add_argument(
        "--scheme",
        choices=list_transcribers(),
        help="Convert with one scheme only (default: pinyin with zhuyin)",
    )

    highlight = commands.add_parser("highlight", help="Highlight tier words in a file")
    highlight.add_argument("file", type=Path)
    highlight.add_argument("--tier", type=int, help="Only this tier (keeps existing markup)")

    clear = commands.add_parser("clear", help="Remove tier highlights from a file")
    clear.add_argument("file", type=Path)

    save = commands.add_parser("save", help="Save the word at an offset to the vocab list")
    save.add_argument("text", type=str)
    save.add_argument("--offset", type=int, default=0)
    save.add_argument(
        "--sentence",
        action="store_true",
        default=defaults.get("save_sentences", False),
        help="Also store the surrounding sentence",
    )

    export = commands.add_parser("export", help="Export the vocab list")
    export.add_argument("--format", choices=["flashcards", "csv"], default="flashcards")
    export.add_argument("--output", "-o", type=Path, help="Output file (default: stdout)")

    download = commands.add_parser("download", help="Download the dictionary if missing")
    download.add_argument(
        "--force",
        "-f",
        action="store_true",
        default=defaults.get("force", False),
        help="Force re-download of the dictionary",
    )

    return parser


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _cmd_lookup(session: ReaderSession, args) -> int:
    hover = session.hover(args.text, args.offset)
    if hover is None:
        print("No match.")
        return 0
    print(f"{hover.match.word} [{args.offset}:{hover.match.end_offset}]")
    print(hover.tooltip)
    return 0


def _cmd_highlight(session: ReaderSession, args) -> int:
    text = args.file.read_text(encoding="utf-8")
    marked = session.highlight(text, args.tier)
    args.file.write_text(marked, encoding="utf-8")
    counts = session.highlighter.count(marked)
    print(f"Highlighted {sum(counts.values()):,} words in {args.file}")
    for tier, count in counts.items():
        print(f"    level {tier}: {count:,}")
    return 0


def _cmd_clear(session: ReaderSession, args) -> int:
    text = args.file.read_text(encoding="utf-8")
    args.file.write_text(session.clear(text), encoding="utf-8")
    print(f"Cleared highlights in {args.file}")
    return 0


def _cmd_save(session: ReaderSession, args, store: VocabStore) -> int:
    hover = session.hover(args.text, args.offset, with_sentence=args.sentence)
    if hover is None:
        print("No word at that offset.")
        return 1

    result = store.upsert(hover.match.word, hover.entries, hover.sentence or None)
    word = hover.match.word
    if result.created:
        print(f"Added {word} to vocab list!")
    elif result.sentence_added:
        print(f"Added new sentence to {word}.")
    else:
        print(f"{word} is already in your vocab list.")
    return 0


def _cmd_export(args, store: VocabStore) -> int:
    entries = store.load()
    if not entries:
        print("No vocab list found.")
        return 1

    content = export_csv(entries) if args.format == "csv" else export_flashcards(entries)
    if args.output:
        args.output.write_text(content, encoding="utf-8")
        print(f"Exported {len(entries):,} words to {args.output}")
    else:
        print(content)
    return 0


def _cmd_download(args) -> int:
    dictionary_path = args.data_dir / cfg.default_dictionary_file()
    ingestor = create_ingestor(cfg.default_dictionary_format(), dictionary_path)
    if not isinstance(ingestor, DownloadableIngestor):
        print(f"No download available for format: {ingestor.line_format.name}")
        return 1
    path = ingestor.download(force=args.force)
    if not path.exists():
        print("Failed to download dictionary.")
        return 1
    print(f"Dictionary ready: {path}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    # Load defaults from config.json
    defaults = cfg.load().get("defaults", cfg.FALLBACK_DEFAULTS)
    args = _build_parser(defaults).parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    if args.command == "convert":
        if args.scheme:
            print(transcribe(args.reading, backend=args.scheme))
            return 0
        result = convert_multi_syllable(args.reading)
        print(f"{result.accented} [{result.zhuyin}]")
        return 0

    if args.command == "download":
        return _cmd_download(args)

    store = VocabStore(args.data_dir / cfg.default_vocab_file())
    if args.command == "export":
        return _cmd_export(args, store)

    try:
        session = ReaderSession.from_config(args.data_dir)
    except SourceUnreadableError as e:
        print(f"ERROR - {e}")
        return 1

    if args.command == "lookup":
        return _cmd_lookup(session, args)
    if args.command == "highlight":
        return _cmd_highlight(session, args)
    if args.command == "clear":
        return _cmd_clear(session, args)
    if args.command == "save":
        return _cmd_save(session, args, store)
    return 1


if __name__ == "__main__":
    sys.exit(main())

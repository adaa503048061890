"""Vocabulary list persistence.

The list lives in one JSON array file and is always read, modified and
written back whole:

    [
      {
        "headword": "語",
        "alt_headword": "語",
        "reading": "ゴ",
        "definitions": ["language", "word"],
        "added_at": "2026-10-19T08:00:00+00:00",
        "example_sentences": ["これは語です。"]
      }
    ]

Callers must not run two upserts for the same headword concurrently.
"""

from pathlib import Path
from typing import Iterable, Optional, Sequence
import json
import logging
import re

from .schema import DictionaryEntry, UpsertResult, VocabEntry

logger = logging.getLogger(__name__)

SENTENCE_TERMINALS = re.compile(r"[。！？!?]")

FLASHCARD_HEADER = "#flashcards\n#ChineseVocab\n\n"


class VocabStore:
    """JSON-file backed list of saved words."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> list[VocabEntry]:
        """Load the saved list.

        Missing or blank files are an empty list. Corrupt files are also
        treated as empty, with a warning, so a save never fails on them.
        """
        if not self.path.exists():
            return []

        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read vocab list %s, starting empty: %s", self.path, e)
            return []

        if not content.strip():
            return []

        try:
            data = json.loads(content)
            if not isinstance(data, list):
                raise ValueError("expected a JSON array")
            return [VocabEntry.from_dict(item) for item in data]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Corrupt vocab list %s, starting empty: %s", self.path, e)
            return []

    def save(self, entries: Iterable[VocabEntry]) -> None:
        """Write the whole list back."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([e.to_dict() for e in entries], f, indent=2, ensure_ascii=False)

    def find(self, headword: str) -> Optional[VocabEntry]:
        for entry in self.load():
            if entry.matches(headword):
                return entry
        return None

    def upsert(
        self,
        word: str,
        candidate_entries: Sequence[DictionaryEntry],
        example_sentence: Optional[str] = None,
    ) -> UpsertResult:
        """Save a word, or attach a new example sentence to it.

        Args:
            word: Headword to save, in either written form.
            candidate_entries: Dictionary entries for the word, file order.
            example_sentence: Sentence the word was seen in.

        Returns:
            UpsertResult. Both flags False means nothing changed.
        """
        sentence = _clean_sentence(example_sentence, word)
        entries = self.load()

        for existing in entries:
            if not existing.matches(word):
                continue
            if sentence and existing.add_sentence(sentence):
                self.save(entries)
                logger.info("Added new sentence to %s", word)
                return UpsertResult(sentence_added=True)
            logger.info("%s is already in the vocab list", word)
            return UpsertResult()

        new_entry = VocabEntry.from_entries(list(candidate_entries), sentence or None)
        entries.append(new_entry)
        self.save(entries)
        logger.info("Added %s to vocab list", word)
        return UpsertResult(created=True)


def _clean_sentence(sentence: Optional[str], word: str) -> str:
    if not sentence:
        return ""
    sentence = sentence.strip()
    return "" if sentence == word else sentence


def extract_sentence(text: str, offset: int, word: str) -> str:
    """Get the sentence around offset that contains word.

    The sentence runs from just after the previous terminal punctuation to
    the next one inclusive. If that span is empty or misses the word, the
    first line containing the word is used instead, or the whole text when no
    line has it. A line that is only the word yields "".

    Args:
        text: Surrounding text.
        offset: Cursor offset of the word.
        word: Matched word.

    Returns:
        Sentence, or "" when none is worth saving.
    """
    offset = max(0, min(offset, len(text)))

    start = offset
    while start > 0 and not SENTENCE_TERMINALS.match(text[start - 1]):
        start -= 1

    end = offset
    while end < len(text) and not SENTENCE_TERMINALS.match(text[end]):
        end += 1
    if end < len(text):
        end += 1

    sentence = text[start:end].strip()
    if sentence and word in sentence:
        return sentence

    line = next((ln for ln in text.split("\n") if word in ln), text).strip()
    return "" if line == word else line


def entries_in_text(entries: Iterable[VocabEntry], text: str) -> list[VocabEntry]:
    """Get saved entries whose headword occurs in text."""
    return [e for e in entries if e.headword and e.headword in text]


def export_flashcards(entries: Iterable[VocabEntry]) -> str:
    """Render entries as a spaced-repetition flashcard note."""
    cards = [f"{e.headword}::{'; '.join(e.definitions)}" for e in entries]
    return FLASHCARD_HEADER + "\n\n".join(cards)


def export_csv(entries: Iterable[VocabEntry]) -> str:
    """Render entries as semicolon-separated rows for Anki import."""
    rows = []
    for e in entries:
        definitions = "; ".join(e.definitions).replace('"', '""')
        rows.append(f'{e.headword};"{definitions}"')
    return "\n".join(rows)

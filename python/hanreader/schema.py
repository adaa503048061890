"""Entry schema and data structures for hanreader.

Core concept:
    - A dictionary line parses into one immutable DictionaryEntry
    - Homographs share a headword, so lookups always return a sequence
    - Saved vocabulary keeps one VocabEntry per headword

Example:
    傳統 传统 [chuan2 tong3] /tradition/traditional/
    → DictionaryEntry(headword="傳統", alt_headword="传统",
                      reading="chuan2 tong3",
                      definitions=("tradition", "traditional"))
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


@dataclass(frozen=True)
class DictionaryEntry:
    """One parsed dictionary line."""

    headword: str               # Indexed written form (traditional / kanji)
    alt_headword: str           # Second written form, may equal headword
    reading: str                # Space-separated syllables, e.g. "ma3"
    definitions: tuple[str, ...] = ()
    alt_reading: str = ""       # Second reading block (JEDICT kun reading)

    @property
    def headwords(self) -> tuple[str, ...]:
        """Distinct keys this entry is indexed under."""
        if self.alt_headword and self.alt_headword != self.headword:
            return (self.headword, self.alt_headword)
        return (self.headword,)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "headword": self.headword,
            "alt_headword": self.alt_headword,
            "reading": self.reading,
            "alt_reading": self.alt_reading,
            "definitions": list(self.definitions),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DictionaryEntry":
        """Create from dictionary."""
        return cls(
            headword=data["headword"],
            alt_headword=data.get("alt_headword", data["headword"]),
            reading=data.get("reading", ""),
            definitions=tuple(data.get("definitions", [])),
            alt_reading=data.get("alt_reading", ""),
        )


@dataclass(frozen=True)
class MatchResult:
    """Word found under a cursor position."""

    word: str
    end_offset: int


@dataclass(frozen=True)
class UpsertResult:
    """Outcome of saving a word to the vocabulary list."""

    created: bool = False
    sentence_added: bool = False

    @property
    def duplicate(self) -> bool:
        """True when the save changed nothing."""
        return not (self.created or self.sentence_added)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class VocabEntry:
    """A saved vocabulary word with merged definitions."""

    headword: str
    alt_headword: str
    reading: str
    definitions: list[str] = field(default_factory=list)
    added_at: str = field(default_factory=_utc_now)
    example_sentences: Optional[list[str]] = None

    @classmethod
    def from_entries(
        cls,
        entries: list[DictionaryEntry],
        example_sentence: Optional[str] = None,
    ) -> "VocabEntry":
        """Build a new record from dictionary candidates.

        The first candidate is the representative entry for the written forms
        and reading. Definitions from all candidates are merged in first-seen
        order.

        Args:
            entries: Dictionary entries for the word, in file order.
            example_sentence: Optional sentence the word was seen in.

        Returns:
            New VocabEntry.
        """
        if not entries:
            raise ValueError("Cannot create a vocab entry without dictionary entries")

        definitions: list[str] = []
        seen: set[str] = set()
        for entry in entries:
            for definition in entry.definitions:
                if definition not in seen:
                    seen.add(definition)
                    definitions.append(definition)

        rep = entries[0]
        return cls(
            headword=rep.headword,
            alt_headword=rep.alt_headword,
            reading=rep.reading,
            definitions=definitions,
            example_sentences=[example_sentence] if example_sentence else None,
        )

    def matches(self, word: str) -> bool:
        """True if word is either written form of this entry."""
        return bool(word) and word in (self.headword, self.alt_headword)

    def add_sentence(self, sentence: str) -> bool:
        """Append an example sentence if it is new.

        Returns:
            True if the sentence was added.
        """
        if not sentence:
            return False
        if self.example_sentences is None:
            self.example_sentences = []
        if sentence in self.example_sentences:
            return False
        self.example_sentences.append(sentence)
        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "headword": self.headword,
            "alt_headword": self.alt_headword,
            "reading": self.reading,
            "definitions": list(self.definitions),
            "added_at": self.added_at,
        }
        if self.example_sentences is not None:
            data["example_sentences"] = list(self.example_sentences)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VocabEntry":
        """Create from dictionary."""
        sentences = data.get("example_sentences")
        return cls(
            headword=data["headword"],
            alt_headword=data.get("alt_headword", data["headword"]),
            reading=data.get("reading", ""),
            definitions=list(data.get("definitions", [])),
            added_at=data.get("added_at", ""),
            example_sentences=list(sentences) if sentences is not None else None,
        )

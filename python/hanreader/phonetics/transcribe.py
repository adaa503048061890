"""Reading schemes behind one transcriber interface.

A reading is a whitespace-separated run of syllables taken straight from a
dictionary line. Each scheme converts it syllable by syllable, so the
syllable count of the output always matches the input.

Schemes:
    - pinyin: numbered pinyin to tone-marked pinyin (ma3 → mǎ)
    - zhuyin: numbered pinyin to bopomofo (ma3 → ㄇㄚˇ)
    - romaji: kana to Hepburn romaji (あゆ → ayu)

Usage:
    from hanreader.phonetics import transcribe, convert_multi_syllable

    transcribe("zhong1 wen2")                    # "zhōng wén"
    transcribe("あゆ なまず", backend="romaji")   # "ayu namazu"

    result = convert_multi_syllable("zhong1 wen2")
    result.accented, result.zhuyin               # tooltip display forms
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Optional
import logging
import re

from .kana import to_romaji
from .pinyin import to_accented
from .zhuyin import to_zhuyin

logger = logging.getLogger(__name__)

# Any single whitespace character separates syllables; output uses a space
SYLLABLE_SEPARATOR = re.compile(r"\s")


@dataclass(frozen=True)
class Transliteration:
    """Display forms of one reading."""

    accented: str
    zhuyin: str


def split_syllables(reading: str) -> list[str]:
    """Split on each whitespace character, keeping empty syllables."""
    return SYLLABLE_SEPARATOR.split(reading)


def map_syllables(reading: str, convert: Callable[[str], str]) -> str:
    """Convert each syllable and rejoin them with single spaces."""
    return " ".join(convert(s) for s in split_syllables(reading))


class Transcriber(ABC):
    """Converts readings of one scheme, a syllable at a time."""

    name: str = "base"

    @abstractmethod
    def transcribe_syllable(self, syllable: str) -> str:
        """Convert one syllable (possibly empty)."""

    def transcribe(self, reading: str) -> str:
        """Convert a whole reading; empty syllables stay empty."""
        return map_syllables(reading, self.transcribe_syllable)

    def batch_transcribe(
        self,
        readings: Iterable[str],
        skip_errors: bool = True,
    ) -> dict[str, Optional[str]]:
        """Convert several readings.

        Args:
            readings: Readings to convert.
            skip_errors: Map failing readings to None instead of raising.

        Returns:
            Dict of reading to converted reading.
        """
        results: dict[str, Optional[str]] = {}
        for reading in readings:
            try:
                results[reading] = self.transcribe(reading)
            except Exception as e:
                if not skip_errors:
                    raise
                logger.warning("%s cannot convert %r: %s", self.name, reading, e)
                results[reading] = None
        return results


class PinyinTranscriber(Transcriber):
    """Numbered pinyin to tone-marked pinyin."""

    name = "pinyin"

    def transcribe_syllable(self, syllable: str) -> str:
        return to_accented(syllable)


class ZhuyinTranscriber(Transcriber):
    """Numbered pinyin to zhuyin (bopomofo)."""

    name = "zhuyin"

    def transcribe_syllable(self, syllable: str) -> str:
        return to_zhuyin(syllable)


class RomajiTranscriber(Transcriber):
    """Kana readings to Hepburn romaji."""

    name = "romaji"

    def transcribe_syllable(self, syllable: str) -> str:
        return to_romaji(syllable)


BUILTIN_TRANSCRIBERS: tuple[type[Transcriber], ...] = (
    PinyinTranscriber,
    ZhuyinTranscriber,
    RomajiTranscriber,
)

_TRANSCRIBERS: dict[str, type[Transcriber]] = {}
_DEFAULT_TRANSCRIBER: str = PinyinTranscriber.name

# Transcribers are stateless; one shared instance per scheme
_INSTANCES: dict[str, Transcriber] = {}


def _init_registry():
    """Reset the registry to the built-in schemes."""
    global _TRANSCRIBERS
    _TRANSCRIBERS = {cls.name: cls for cls in BUILTIN_TRANSCRIBERS}


_init_registry()


def _require_scheme(name: str) -> None:
    if name not in _TRANSCRIBERS:
        raise ValueError(
            f"Unknown transcriber: {name}. Schemes: {', '.join(_TRANSCRIBERS)}"
        )


def get_transcriber(name: str) -> Transcriber:
    """Get the shared transcriber for a scheme.

    Raises:
        ValueError: If no scheme is registered under name.
    """
    _require_scheme(name)
    transcriber = _INSTANCES.get(name)
    if transcriber is None:
        transcriber = _INSTANCES[name] = _TRANSCRIBERS[name]()
    return transcriber


def register_transcriber(name: str, cls: type[Transcriber]) -> None:
    """Add or replace a scheme."""
    _TRANSCRIBERS[name] = cls
    _INSTANCES.pop(name, None)


def list_transcribers() -> list[str]:
    return list(_TRANSCRIBERS)


def get_default_transcriber() -> str:
    return _DEFAULT_TRANSCRIBER


def set_default_transcriber(name: str) -> None:
    """Pick the scheme used when no backend is named."""
    global _DEFAULT_TRANSCRIBER
    _require_scheme(name)
    _DEFAULT_TRANSCRIBER = name


def convert_multi_syllable(transcription: str) -> Transliteration:
    """Render a numbered-pinyin reading in both display forms.

    Args:
        transcription: e.g. "zhong1 wen2".

    Returns:
        Transliteration(accented="zhōng wén", zhuyin="ㄓㄨㄥ ㄨㄣˊ").
    """
    return Transliteration(
        accented=map_syllables(transcription, to_accented),
        zhuyin=map_syllables(transcription, to_zhuyin),
    )


def transcribe(reading: str, backend: Optional[str] = None) -> str:
    """Convert a reading with the named scheme, or the default one."""
    return get_transcriber(backend or _DEFAULT_TRANSCRIBER).transcribe(reading)


def batch_transcribe(
    readings: Iterable[str],
    backend: Optional[str] = None,
    skip_errors: bool = True,
) -> dict[str, Optional[str]]:
    """Convert several readings with one scheme.

    See Transcriber.batch_transcribe.
    """
    transcriber = get_transcriber(backend or _DEFAULT_TRANSCRIBER)
    return transcriber.batch_transcribe(readings, skip_errors=skip_errors)

"""Text normalization for hanreader.

Handles romanized reading cleanup and script membership checks.
Supports CEDICT-style pinyin ("lu:4", "Zhong1") and CJK/kana ranges.
"""

import re
from typing import Optional

# ASCII spellings of the umlauted u used by dictionary files
UMLAUT_MAP: dict[str, str] = {
    "u:": "ü", "U:": "Ü",
    "v": "ü", "V": "Ü",
}

# CJK ideograph blocks (unified, extension A, compatibility)
HAN_RANGES: list[tuple[int, int]] = [
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0xF900, 0xFAFF),
    (0x20000, 0x2A6DF),
]

HIRAGANA_RANGE = (0x3041, 0x309F)
KATAKANA_RANGE = (0x30A0, 0x30FF)

TONE_PATTERN = re.compile(r"^(.*?)([1-5])$")


def normalize_umlaut(syllable: str, include_v: bool = False) -> str:
    """Replace the u: digraph (and optionally v) with ü.

    Args:
        syllable: Romanized syllable.
        include_v: Also treat "v" as ü (input-method spelling).

    Returns:
        Syllable with single-character ü.
    """
    result = syllable.replace("u:", UMLAUT_MAP["u:"]).replace("U:", UMLAUT_MAP["U:"])
    if include_v:
        result = result.replace("v", UMLAUT_MAP["v"]).replace("V", UMLAUT_MAP["V"])
    return result


def split_tone(syllable: str) -> tuple[str, Optional[int]]:
    """Split a trailing tone digit off a syllable.

    Args:
        syllable: e.g. "ma3", "de5", "de".

    Returns:
        Tuple of (core, tone). Tone is None when no digit is present.
    """
    match = TONE_PATTERN.match(syllable)
    if match is None:
        return syllable, None
    return match.group(1), int(match.group(2))


def _in_ranges(char: str, ranges: list[tuple[int, int]]) -> bool:
    if len(char) != 1:
        return False
    code = ord(char)
    return any(lo <= code <= hi for lo, hi in ranges)


def is_han_char(char: str) -> bool:
    """Check if a character is a CJK ideograph (hanzi / kanji)."""
    return _in_ranges(char, HAN_RANGES)


def is_kana_char(char: str) -> bool:
    """Check if a character is hiragana or katakana."""
    return _in_ranges(char, [HIRAGANA_RANGE, KATAKANA_RANGE])


def is_kana(text: str) -> bool:
    """Check if a reading is written in kana (spaces allowed)."""
    chars = [c for c in text if not c.isspace()]
    return bool(chars) and all(is_kana_char(c) or c == "ー" for c in chars)

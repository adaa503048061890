"""Kana (hiragana / katakana) to Hepburn romaji.

Uses the same longest-pattern-first table technique as the zhuyin
converter, so yōon digraphs (きゃ → kya) are consumed before single kana.

    あゆ   → ayu
    デン   → den
    きょう → kyou
    がっこう → gakkou
"""

import re

from .zhuyin import apply_table, build_replacement_table

HIRAGANA_ROMAJI: list[tuple[str, str]] = [
    ("あ", "a"), ("い", "i"), ("う", "u"), ("え", "e"), ("お", "o"),
    ("か", "ka"), ("き", "ki"), ("く", "ku"), ("け", "ke"), ("こ", "ko"),
    ("さ", "sa"), ("し", "shi"), ("す", "su"), ("せ", "se"), ("そ", "so"),
    ("た", "ta"), ("ち", "chi"), ("つ", "tsu"), ("て", "te"), ("と", "to"),
    ("な", "na"), ("に", "ni"), ("ぬ", "nu"), ("ね", "ne"), ("の", "no"),
    ("は", "ha"), ("ひ", "hi"), ("ふ", "fu"), ("へ", "he"), ("ほ", "ho"),
    ("ま", "ma"), ("み", "mi"), ("む", "mu"), ("め", "me"), ("も", "mo"),
    ("や", "ya"), ("ゆ", "yu"), ("よ", "yo"),
    ("ら", "ra"), ("り", "ri"), ("る", "ru"), ("れ", "re"), ("ろ", "ro"),
    ("わ", "wa"), ("を", "wo"), ("ん", "n"),
    ("が", "ga"), ("ぎ", "gi"), ("ぐ", "gu"), ("げ", "ge"), ("ご", "go"),
    ("ざ", "za"), ("じ", "ji"), ("ず", "zu"), ("ぜ", "ze"), ("ぞ", "zo"),
    ("だ", "da"), ("ぢ", "ji"), ("づ", "zu"), ("で", "de"), ("ど", "do"),
    ("ば", "ba"), ("び", "bi"), ("ぶ", "bu"), ("べ", "be"), ("ぼ", "bo"),
    ("ぱ", "pa"), ("ぴ", "pi"), ("ぷ", "pu"), ("ぺ", "pe"), ("ぽ", "po"),
    ("ぁ", "a"), ("ぃ", "i"), ("ぅ", "u"), ("ぇ", "e"), ("ぉ", "o"),
    ("ゔ", "vu"),
]

# i-row kana that combine with small ya/yu/yo, and the consonant they keep
YOON_BASES: list[tuple[str, str]] = [
    ("き", "ky"), ("ぎ", "gy"), ("し", "sh"), ("じ", "j"), ("ち", "ch"),
    ("ぢ", "j"), ("に", "ny"), ("ひ", "hy"), ("び", "by"), ("ぴ", "py"),
    ("み", "my"), ("り", "ry"),
]

SMALL_Y: list[tuple[str, str]] = [("ゃ", "a"), ("ゅ", "u"), ("ょ", "o")]

KATAKANA_OFFSET = 0x60

SOKUON = "っ"
SOKUON_PATTERN = re.compile(SOKUON + r"(ch|[bcdfghjkmnprstvwyz])")


def _to_katakana(text: str) -> str:
    return "".join(
        chr(ord(c) + KATAKANA_OFFSET) if "ぁ" <= c <= "ゖ" else c for c in text
    )


def _hiragana_pairs() -> list[tuple[str, str]]:
    pairs = [
        (base + small, consonant + vowel)
        for base, consonant in YOON_BASES
        for small, vowel in SMALL_Y
    ]
    pairs.extend(HIRAGANA_ROMAJI)
    return pairs


def _all_pairs() -> list[tuple[str, str]]:
    hiragana = _hiragana_pairs()
    katakana = [(_to_katakana(kana), romaji) for kana, romaji in hiragana]
    return hiragana + katakana + [("ッ", SOKUON), ("ー", "-")]


ROMAJI_TABLE = build_replacement_table(_all_pairs())


def _double_consonant(match: re.Match) -> str:
    following = match.group(1)
    return ("t" if following == "ch" else following[0]) + following


def to_romaji(kana: str) -> str:
    """Convert a kana reading to romaji.

    Args:
        kana: Hiragana or katakana text, e.g. "あゆ", "デン".

    Returns:
        Romaji. Characters outside the table pass through.
    """
    romaji = apply_table(kana, ROMAJI_TABLE)
    romaji = SOKUON_PATTERN.sub(_double_consonant, romaji)
    return romaji.replace(SOKUON, "")

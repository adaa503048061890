"""Numbered pinyin to zhuyin (bopomofo).

Replacement is table driven: every (pattern, glyphs) pair is applied as a
global substring replacement, longest pattern first, so whole-syllable
spellings and compound finals are consumed before initials and single
vowels.

    zhong1 → ㄓㄨㄥ
    zhi1   → ㄓ
    yuan2  → ㄩㄢˊ
    lu:4   → ㄌㄩˋ
    r5     → ㄦ      (erhua suffix)
"""

from typing import Iterable

from ..normalizer import normalize_umlaut, split_tone

# Bare "r" is the erhua suffix, written without a tone glyph
ERHUA = "ㄦ"

TONE_GLYPHS: list[tuple[str, str]] = [
    ("1", ""), ("2", "ˊ"), ("3", "ˇ"), ("4", "ˋ"), ("5", "˙"),
]

# y/w spellings of medial-only syllables
SEMIVOWEL_SYLLABLES: list[tuple[str, str]] = [
    ("yuan", "ㄩㄢ"), ("yong", "ㄩㄥ"), ("ying", "ㄧㄥ"), ("yang", "ㄧㄤ"),
    ("yue", "ㄩㄝ"), ("yun", "ㄩㄣ"), ("you", "ㄧㄡ"), ("yin", "ㄧㄣ"),
    ("yao", "ㄧㄠ"), ("yan", "ㄧㄢ"),
    ("ye", "ㄧㄝ"), ("ya", "ㄧㄚ"), ("yo", "ㄧㄛ"), ("yi", "ㄧ"), ("yu", "ㄩ"),
    ("wang", "ㄨㄤ"), ("weng", "ㄨㄥ"),
    ("wai", "ㄨㄞ"), ("wan", "ㄨㄢ"), ("wei", "ㄨㄟ"), ("wen", "ㄨㄣ"),
    ("wa", "ㄨㄚ"), ("wo", "ㄨㄛ"), ("wu", "ㄨ"),
]

# Initial followed by the syllabic vowel, written with the initial alone
APICAL_SYLLABLES: list[tuple[str, str]] = [
    ("zhi", "ㄓ"), ("chi", "ㄔ"), ("shi", "ㄕ"), ("ri", "ㄖ"),
    ("zi", "ㄗ"), ("ci", "ㄘ"), ("si", "ㄙ"),
]

# j/q/x write ü as u
PALATAL_U: list[tuple[str, str]] = [
    ("juan", "ㄐㄩㄢ"), ("quan", "ㄑㄩㄢ"), ("xuan", "ㄒㄩㄢ"),
    ("jue", "ㄐㄩㄝ"), ("que", "ㄑㄩㄝ"), ("xue", "ㄒㄩㄝ"),
    ("jun", "ㄐㄩㄣ"), ("qun", "ㄑㄩㄣ"), ("xun", "ㄒㄩㄣ"),
    ("ju", "ㄐㄩ"), ("qu", "ㄑㄩ"), ("xu", "ㄒㄩ"),
]

FINALS: list[tuple[str, str]] = [
    ("iang", "ㄧㄤ"), ("iong", "ㄩㄥ"), ("uang", "ㄨㄤ"), ("ueng", "ㄨㄥ"),
    ("iao", "ㄧㄠ"), ("ian", "ㄧㄢ"), ("ing", "ㄧㄥ"), ("uai", "ㄨㄞ"),
    ("uan", "ㄨㄢ"), ("üan", "ㄩㄢ"), ("ang", "ㄤ"), ("eng", "ㄥ"), ("ong", "ㄨㄥ"),
    ("ai", "ㄞ"), ("ei", "ㄟ"), ("ao", "ㄠ"), ("ou", "ㄡ"), ("an", "ㄢ"),
    ("en", "ㄣ"), ("er", "ㄦ"), ("ia", "ㄧㄚ"), ("ie", "ㄧㄝ"), ("iu", "ㄧㄡ"),
    ("in", "ㄧㄣ"), ("ua", "ㄨㄚ"), ("uo", "ㄨㄛ"), ("ui", "ㄨㄟ"), ("un", "ㄨㄣ"),
    ("üe", "ㄩㄝ"), ("ün", "ㄩㄣ"),
    ("a", "ㄚ"), ("o", "ㄛ"), ("e", "ㄜ"), ("ê", "ㄝ"),
    ("i", "ㄧ"), ("u", "ㄨ"), ("ü", "ㄩ"),
]

INITIALS: list[tuple[str, str]] = [
    ("zh", "ㄓ"), ("ch", "ㄔ"), ("sh", "ㄕ"),
    ("b", "ㄅ"), ("p", "ㄆ"), ("m", "ㄇ"), ("f", "ㄈ"),
    ("d", "ㄉ"), ("t", "ㄊ"), ("n", "ㄋ"), ("l", "ㄌ"),
    ("g", "ㄍ"), ("k", "ㄎ"), ("h", "ㄏ"),
    ("j", "ㄐ"), ("q", "ㄑ"), ("x", "ㄒ"),
    ("r", "ㄖ"), ("z", "ㄗ"), ("c", "ㄘ"), ("s", "ㄙ"),
]


def build_replacement_table(pairs: Iterable[tuple[str, str]]) -> tuple[tuple[str, str], ...]:
    """Deduplicate by pattern and order longest pattern first.

    The first registration of a pattern wins; equal-length patterns keep
    their registration order.
    """
    seen: set[str] = set()
    unique: list[tuple[str, str]] = []
    for pattern, replacement in pairs:
        if pattern in seen:
            continue
        seen.add(pattern)
        unique.append((pattern, replacement))
    return tuple(sorted(unique, key=lambda pair: len(pair[0]), reverse=True))


ZHUYIN_TABLE = build_replacement_table(
    SEMIVOWEL_SYLLABLES + APICAL_SYLLABLES + PALATAL_U + FINALS + INITIALS + TONE_GLYPHS
)


def apply_table(text: str, table: Iterable[tuple[str, str]]) -> str:
    for pattern, replacement in table:
        if pattern in text:
            text = text.replace(pattern, replacement)
    return text


def to_zhuyin(syllable: str) -> str:
    """Convert one numbered-pinyin syllable to zhuyin.

    Args:
        syllable: e.g. "zhong1", "Lu:4".

    Returns:
        Zhuyin with tone glyph. Unknown characters pass through.
    """
    syllable = normalize_umlaut(syllable.lower(), include_v=True)
    if split_tone(syllable)[0] == "r":
        return ERHUA
    return apply_table(syllable, ZHUYIN_TABLE)

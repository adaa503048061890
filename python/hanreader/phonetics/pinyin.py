"""Numbered pinyin to tone-marked pinyin.

    ma3    → mǎ
    zhong1 → zhōng
    lu:4   → lǜ
    de5    → de
"""

from ..normalizer import normalize_umlaut, split_tone

# Tone 1-4 diacritic variants, tone 5 (neutral) is the bare vowel
TONE_MARKS: dict[str, tuple[str, str, str, str, str]] = {
    "a": ("ā", "á", "ǎ", "à", "a"),
    "o": ("ō", "ó", "ǒ", "ò", "o"),
    "e": ("ē", "é", "ě", "è", "e"),
    "i": ("ī", "í", "ǐ", "ì", "i"),
    "u": ("ū", "ú", "ǔ", "ù", "u"),
    "ü": ("ǖ", "ǘ", "ǚ", "ǜ", "ü"),
    "A": ("Ā", "Á", "Ǎ", "À", "A"),
    "O": ("Ō", "Ó", "Ǒ", "Ò", "O"),
    "E": ("Ē", "É", "Ě", "È", "E"),
    "I": ("Ī", "Í", "Ǐ", "Ì", "I"),
    "U": ("Ū", "Ú", "Ǔ", "Ù", "U"),
    "Ü": ("Ǖ", "Ǘ", "Ǚ", "Ǜ", "Ü"),
}

# a and o outrank e, which outranks i and u
VOWEL_PRIORITY = ("a", "o", "e", "i", "u", "ü")

NEUTRAL_TONE = 5


def to_accented(syllable: str) -> str:
    """Convert one numbered-pinyin syllable to tone-marked pinyin.

    The tone digit is stripped; the first vowel of VOWEL_PRIORITY present in
    the syllable (either case) gets the mark on its last occurrence.

    Args:
        syllable: e.g. "ma3", "Zhong1", "nu:3".

    Returns:
        Accented syllable. Syllables without a known vowel are returned
        without their digit.
    """
    core, tone = split_tone(syllable)
    core = normalize_umlaut(core)
    if tone is None:
        tone = NEUTRAL_TONE

    for vowel in VOWEL_PRIORITY:
        index = max(core.rfind(vowel), core.rfind(vowel.upper()))
        if index < 0:
            continue
        found = core[index]
        return core[:index] + TONE_MARKS[found][tone - 1] + core[index + 1:]

    return core

"""Forward longest-match segmentation.

Finds the dictionary word that starts at a cursor offset. Matching only
runs left to right from the hovered character: a cursor in the middle of a
word finds the longest word starting at that character, never the word
that contains it.
"""

from typing import Container, Optional

from .schema import MatchResult

DEFAULT_MAX_WORD_LENGTH = 5


def forward_match(
    text: str,
    offset: int,
    table: Container[str],
    max_word_length: int = DEFAULT_MAX_WORD_LENGTH,
) -> Optional[MatchResult]:
    """Find the longest known word starting at offset.

    Script membership of text[offset] is the caller's concern.

    Args:
        text: Text under the cursor.
        offset: Index of the hovered character.
        table: Anything supporting ``word in table`` (a DictionaryTable).
        max_word_length: Longest candidate to try.

    Returns:
        MatchResult, or None if no prefix is a known word.
    """
    if offset < 0 or offset >= len(text) or max_word_length < 1:
        return None

    window = text[offset:offset + max_word_length]
    for length in range(len(window), 0, -1):
        candidate = window[:length]
        if candidate in table:
            return MatchResult(word=candidate, end_offset=offset + length)

    return None

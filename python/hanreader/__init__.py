"""hanreader - Hover dictionary toolkit for Chinese and Japanese text.

A toolkit for looking up the word under a cursor, rendering its readings,
highlighting graded vocabulary and collecting words into a study list.

Core concepts:
    - A dictionary file parses into an immutable headword table
    - The word under the cursor is the longest known word starting there
    - Numbered pinyin renders as tone-marked pinyin and zhuyin
    - Vocabulary tiers (e.g. HSK levels) highlight known words in a note

Example:
    "我們學習中文" with the cursor on 學 → "學習" (xue2 xi2)
    Rendered as: "xué xí [ㄒㄩㄝˊ ㄒㄧˊ]"

Usage:
    from hanreader.session import ReaderSession

    session = ReaderSession.from_paths(
        dictionary_path="data/cedict_ts.u8",
        tier_path="data/hsk-vocab.json",
    )

    hover = session.hover("我們學習中文", 2)
    print(hover.match.word, hover.tooltip)

    # Highlight HSK words
    marked = session.highlight(text)
    plain = session.clear(marked)

    # Save the hovered word
    from hanreader.vocab import VocabStore
    store = VocabStore("data/vocab.json")
    store.upsert(hover.match.word, hover.entries, hover.sentence)
"""

__version__ = "0.1.0"

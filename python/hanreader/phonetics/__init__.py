"""Phonetics module for hanreader.

Provides reading conversions and a pluggable transcriber registry.

Usage:
    from hanreader.phonetics import to_accented, to_zhuyin, to_romaji

    to_accented("ma3")     # "mǎ"
    to_zhuyin("zhong1")    # "ㄓㄨㄥ"
    to_romaji("あゆ")      # "ayu"

    # Whole readings
    from hanreader.phonetics import convert_multi_syllable
    result = convert_multi_syllable("zhong1 wen2")
"""

from .kana import to_romaji
from .pinyin import to_accented
from .zhuyin import to_zhuyin
from .transcribe import (
    Transcriber,
    Transliteration,
    convert_multi_syllable,
    transcribe,
    batch_transcribe,
    get_transcriber,
    register_transcriber,
    list_transcribers,
    get_default_transcriber,
    set_default_transcriber,
)

__all__ = [
    "to_accented",
    "to_zhuyin",
    "to_romaji",
    "Transcriber",
    "Transliteration",
    "convert_multi_syllable",
    "transcribe",
    "batch_transcribe",
    "get_transcriber",
    "register_transcriber",
    "list_transcribers",
    "get_default_transcriber",
    "set_default_transcriber",
]

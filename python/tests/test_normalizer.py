"""Tests for the normalizer module."""

import pytest

from hanreader.normalizer import (
    is_han_char,
    is_kana,
    is_kana_char,
    normalize_umlaut,
    split_tone,
)


class TestNormalizeUmlaut:
    """Tests for u: digraph normalization."""

    def test_digraph(self):
        assert normalize_umlaut("lu:") == "lü"
        assert normalize_umlaut("Lu:4") == "Lü4"

    def test_uppercase_digraph(self):
        assert normalize_umlaut("LU:") == "LÜ"

    def test_v_ignored_by_default(self):
        assert normalize_umlaut("lv4") == "lv4"

    def test_v_included(self):
        assert normalize_umlaut("lv4", include_v=True) == "lü4"
        assert normalize_umlaut("NV3", include_v=True) == "NÜ3"

    def test_unchanged(self):
        assert normalize_umlaut("zhong1") == "zhong1"


class TestSplitTone:
    """Tests for tone digit splitting."""

    @pytest.mark.parametrize("syllable,expected", [
        ("ma3", ("ma", 3)),
        ("de5", ("de", 5)),
        ("zhong1", ("zhong", 1)),
        ("lu:4", ("lu:", 4)),
    ])
    def test_with_tone(self, syllable, expected):
        assert split_tone(syllable) == expected

    def test_without_tone(self):
        assert split_tone("de") == ("de", None)

    def test_out_of_range_digit(self):
        """Test that digits outside 1-5 are not tones."""
        assert split_tone("ma0") == ("ma0", None)
        assert split_tone("ma6") == ("ma6", None)

    def test_empty(self):
        assert split_tone("") == ("", None)


class TestScriptMembership:
    """Tests for script membership predicates."""

    def test_han(self):
        assert is_han_char("語")
        assert is_han_char("学")
        assert not is_han_char("a")
        assert not is_han_char("。")
        assert not is_han_char("か")

    def test_han_requires_single_char(self):
        assert not is_han_char("語學")
        assert not is_han_char("")

    def test_kana_char(self):
        assert is_kana_char("か")
        assert is_kana_char("カ")
        assert not is_kana_char("語")

    def test_kana_reading(self):
        """Test kana readings with spaces and long vowel marks."""
        assert is_kana("あゆ なまず")
        assert is_kana("ラーメン")
        assert not is_kana("xue2 xi2")
        assert not is_kana("")
        assert not is_kana("   ")

"""Tests for tiered highlighting."""

import logging

import pytest

from hanreader.highlight import (
    TieredHighlighter,
    apply_tier,
    clear_markup,
    count_markup,
    marked_words,
    wrap,
)
from hanreader.ingest.tiers import EMPTY_TIERS, build_tier_table


@pytest.fixture
def tiers(sample_tiers):
    return build_tier_table(sample_tiers)


class TestWrap:
    """Tests for markup generation."""

    def test_wrap(self):
        assert wrap("我們", 1) == '<span class="hsk-highlight hsk-level-1">我們</span>'

    def test_custom_prefix(self):
        assert wrap("語", 3, "jlpt") == '<span class="jlpt-highlight jlpt-level-3">語</span>'


class TestClearMarkup:
    """Tests for clear_markup."""

    def test_clear(self):
        text = f"{wrap('我們', 1)}在{wrap('學習', 1)}"
        assert clear_markup(text) == "我們在學習"

    def test_nested(self):
        """Test that nested wrappers are removed to a fixed point."""
        text = wrap(wrap(wrap("語", 3), 2), 1)
        assert clear_markup(text) == "語"

    def test_idempotent(self):
        text = f"前{wrap(wrap('語', 2), 1)}後"
        once = clear_markup(text)
        assert clear_markup(once) == once

    def test_other_prefix_untouched(self):
        """Test that markup with a different prefix is kept."""
        text = wrap("語", 1, "jlpt")
        assert clear_markup(text) == text
        assert clear_markup(text, "jlpt") == "語"

    def test_plain_text(self):
        assert clear_markup("我們學習中文") == "我們學習中文"


class TestApplyTier:
    """Tests for apply_tier."""

    def test_longer_word_not_rewrapped(self):
        """Test that a lower-tier word shields the words inside it."""
        table = build_tier_table({"1": ["語學"], "2": ["語"]})
        result = apply_tier("語學", table)
        assert result == wrap("語學", 1)

    def test_all_occurrences(self):
        table = build_tier_table({"1": ["我"]})
        result = apply_tier("我和我", table)
        assert result == f"{wrap('我', 1)}和{wrap('我', 1)}"

    def test_round_trip(self, tiers):
        """Test that clearing recovers the original text exactly."""
        text = "我們學習中文。語學很有意思，我學語。"
        assert clear_markup(apply_tier(text, tiers)) == text

    def test_one_wrap_per_occurrence(self, tiers):
        """Test that no surface occurrence is wrapped twice."""
        text = "我們學習中文。語學很有意思，我學語。"
        result = apply_tier(text, tiers)
        assert "</span></span>" not in result
        assert '"><span' not in result

    def test_lower_tier_wins(self):
        """Test that a word listed in two tiers gets the lower one."""
        table = build_tier_table({"2": ["我"], "1": ["我"]})
        assert apply_tier("我", table) == wrap("我", 1)

    def test_reapply_replaces_markup(self, tiers):
        """Test that a full pass clears old markup first."""
        text = "我們學習中文"
        once = apply_tier(text, tiers)
        assert apply_tier(once, tiers) == once

    def test_target_tier_keeps_markup(self):
        """Test that a targeted pass adds to existing markup."""
        table = build_tier_table({"1": ["我"], "2": ["學"]})
        text = f"{wrap('我', 1)}學習"
        result = apply_tier(text, table, target_tier=2)
        assert result == f"{wrap('我', 1)}{wrap('學', 2)}習"

    def test_target_tier_skips_marked(self):
        """Test that words already marked are not wrapped by a targeted pass."""
        table = build_tier_table({"1": ["我"], "2": ["我"]})
        text = wrap("我", 1)
        assert apply_tier(text, table, target_tier=2) == text

    def test_unknown_target_tier(self, tiers):
        text = "我們學習中文"
        assert apply_tier(text, tiers, target_tier=9) == text

    def test_empty_table(self):
        text = f"{wrap('我', 1)}們"
        assert apply_tier(text, EMPTY_TIERS) == "我們"

    def test_prefix_text_not_matched(self):
        """Test that tier words never match inside markup attributes."""
        table = build_tier_table({"1": ["我"], "2": ["hsk", "level"]})
        result = apply_tier("我", table)
        assert result == wrap("我", 1)


class TestMarkupAccounting:
    """Tests for marked_words and count_markup."""

    def test_marked_words(self):
        text = f"{wrap('我', 1)}和{wrap('語學', 2)}"
        assert marked_words(text) == {"我", "語學"}

    def test_count(self, tiers):
        result = apply_tier("我們學習中文。語學。語", tiers)
        assert count_markup(result) == {1: 3, 2: 1, 3: 1}

    def test_count_empty(self):
        assert count_markup("我們") == {}


class TestTieredHighlighter:
    """Tests for TieredHighlighter."""

    def test_tiers_sorted(self):
        highlighter = TieredHighlighter(build_tier_table({"3": ["語"], "1": ["我"]}))
        assert highlighter.tiers == [1, 3]

    def test_apply_and_clear(self, tiers):
        highlighter = TieredHighlighter(tiers)
        text = "我們學習中文"
        marked = highlighter.apply(text)
        assert marked != text
        assert highlighter.clear(marked) == text

    def test_unknown_tier_warns(self, tiers, caplog):
        highlighter = TieredHighlighter(tiers)
        with caplog.at_level(logging.WARNING, logger="hanreader.highlight"):
            assert highlighter.apply("我們", 9) == "我們"
        assert "Unknown tier 9" in caplog.text

    def test_custom_prefix(self, tiers):
        highlighter = TieredHighlighter(tiers, prefix="jlpt")
        marked = highlighter.apply("語")
        assert marked == wrap("語", 3, "jlpt")
        assert highlighter.count(marked) == {3: 1}

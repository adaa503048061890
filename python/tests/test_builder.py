"""Tests for the builder module."""

import pytest

from hanreader.builder.dictionary import (
    DictionaryBuilder,
    DictionaryTable,
    build_table,
    load_table,
)
from hanreader.ingest.base import IngestResult, SourceUnreadableError
from hanreader.ingest.jedict import JEDICT_FORMAT
from hanreader.schema import DictionaryEntry


def create_test_entry(headword: str, alt: str = "", reading: str = "", *definitions: str) -> DictionaryEntry:
    """Helper to create a test entry."""
    return DictionaryEntry(
        headword=headword,
        alt_headword=alt or headword,
        reading=reading,
        definitions=tuple(definitions),
    )


class TestDictionaryBuilder:
    """Tests for DictionaryBuilder."""

    def test_add_entries(self):
        """Test adding entries to builder."""
        builder = DictionaryBuilder()
        builder.add_entries([
            create_test_entry("我", "", "wo3", "I"),
            create_test_entry("你", "", "ni3", "you"),
        ])
        table = builder.build()

        assert builder.get_entry_count() == 2
        assert len(table) == 2
        assert table.lookup("我")[0].reading == "wo3"

    def test_alt_headword_indexed(self):
        """Test that both written forms reach the same entry."""
        builder = DictionaryBuilder()
        entry = create_test_entry("學習", "学习", "xue2 xi2", "to learn")
        builder.add_entry(entry)
        table = builder.build()

        assert table.lookup("學習") == (entry,)
        assert table.lookup("学习") == (entry,)
        assert builder.stats.total_headwords == 2

    def test_same_forms_indexed_once(self):
        """Test that an entry whose forms match is not listed twice."""
        builder = DictionaryBuilder()
        builder.add_entry(create_test_entry("我", "我", "wo3", "I"))
        table = builder.build()
        assert len(table.lookup("我")) == 1

    def test_add_result(self):
        """Test adding an IngestResult updates stats."""
        builder = DictionaryBuilder()
        result = IngestResult(
            entries=[create_test_entry("我", "", "wo3", "I")],
            source_path="/test/cedict_ts.u8",
            dict_name="cedict_ts",
            format_name="cedict",
            total_raw=3,
            total_valid=1,
            total_skipped=2,
        )
        builder.add_result(result)

        assert builder.stats.total_lines == 3
        assert builder.stats.skipped_lines == 2
        assert builder.stats.sources == ["/test/cedict_ts.u8"]

    def test_build_is_snapshot(self):
        """Test that later additions do not leak into a built table."""
        builder = DictionaryBuilder()
        builder.add_entry(create_test_entry("我"))
        table = builder.build()
        builder.add_entry(create_test_entry("你"))

        assert "你" not in table
        assert "你" in builder.build()


class TestDictionaryTable:
    """Tests for DictionaryTable."""

    def test_empty(self):
        table = DictionaryTable()
        assert len(table) == 0
        assert table.lookup("我") == ()
        assert "我" not in table

    def test_headwords(self):
        table = DictionaryTable({"我": (create_test_entry("我"),)})
        assert table.headwords() == ["我"]
        assert list(table) == ["我"]

    def test_repr(self):
        table = DictionaryTable({"我": (create_test_entry("我"),)})
        assert repr(table) == "DictionaryTable(1 headwords)"


class TestBuildTable:
    """Tests for building tables from dictionary text."""

    def test_homographs_in_file_order(self, sample_cedict_content):
        """Test that lookup returns every entry for a headword, file order."""
        table = build_table(sample_cedict_content)
        entries = table.lookup("行")

        assert [e.reading for e in entries] == ["xing2", "hang2"]

    def test_lookup_matches_parsed_headwords(self, sample_cedict_content):
        """Test that every parsed headword is found."""
        table = build_table(sample_cedict_content)
        for headword in ["中文", "學習", "學", "我們", "我", "語", "語學"]:
            entries = table.lookup(headword)
            assert entries
            assert all(headword in e.headwords for e in entries)

    def test_malformed_lines_skipped(self, sample_cedict_content):
        table = build_table(sample_cedict_content)
        assert "this" not in table

    def test_no_valid_lines(self):
        """Test that a file with no parsable line gives an empty table."""
        table = build_table("# only a comment\nnot an entry\n")
        assert len(table) == 0

    def test_jedict_format(self, sample_jedict_content):
        table = build_table(sample_jedict_content, JEDICT_FORMAT)
        assert table.lookup("鮎")[0].alt_reading == "あゆ なまず"


class TestLoadTable:
    """Tests for loading tables from disk."""

    def test_load_cedict(self, cedict_file):
        table = load_table(cedict_file)
        assert table.lookup("学习")[0].headword == "學習"

    def test_load_jedict(self, tmp_path, sample_jedict_content):
        path = tmp_path / "kanji.u8"
        path.write_text(sample_jedict_content, encoding="utf-8")

        table = load_table(path, "jedict")
        assert table.lookup("語")[0].reading == "ゴ"

    def test_load_missing(self, tmp_path):
        """Test that a missing source produces no table."""
        with pytest.raises(SourceUnreadableError):
            load_table(tmp_path / "missing.u8")

    def test_load_unknown_format(self, cedict_file):
        with pytest.raises(ValueError):
            load_table(cedict_file, "unknown")

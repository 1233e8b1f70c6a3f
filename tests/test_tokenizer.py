"""Tests for frontmatter tokenization"""

import pytest
from pydantic import ValidationError

from notemeta.lib.frontmatter import tokenize
from notemeta.lib.frontmatter.tokenizer import trim
from notemeta.models import RawField


def pairs(fields):
    return [(f.key, f.values) for f in fields]


class TestTokenize:
    def test_single_line_fields(self):
        fields = tokenize("title: Weekly Sync\ntags: work, meeting\n")

        assert pairs(fields) == [
            ("title", ["Weekly Sync"]),
            ("tags", ["work, meeting"]),
        ]

    def test_list_items(self):
        text = "attendees:\n  - Alice\n  - Bob\nproject: Apollo"
        fields = tokenize(text)

        assert pairs(fields) == [
            ("attendees", ["Alice", "Bob"]),
            ("project", ["Apollo"]),
        ]

    def test_inline_value_and_list_items_combine(self):
        fields = tokenize("tags: a\n- b\n- c")

        assert pairs(fields) == [("tags", ["a", "b", "c"])]

    def test_stops_at_unparseable_line(self):
        text = "title: A\ntags: x\nnot a field\nprojects: p"
        fields = tokenize(text)

        # title was flushed when tags opened; pending tags and the rest are lost
        assert pairs(fields) == [("title", ["A"])]

    def test_unparseable_first_line(self):
        assert tokenize("just prose\ntitle: A") == []

    def test_blank_lines_are_skipped(self):
        fields = tokenize("\ntitle: A\n\n   \ntags: x\n")

        assert pairs(fields) == [("title", ["A"]), ("tags", ["x"])]

    def test_key_without_values_is_dropped(self):
        fields = tokenize("title:\ntags: x")

        assert pairs(fields) == [("tags", ["x"])]

    def test_list_item_before_any_key_is_discarded(self):
        fields = tokenize("- orphan\ntitle: A")

        assert pairs(fields) == [("title", ["A"])]

    def test_repeated_keys_are_kept(self):
        fields = tokenize("title: A\ntitle: B")

        assert pairs(fields) == [("title", ["A"]), ("title", ["B"])]

    def test_value_keeps_inner_colons(self):
        fields = tokenize("title: Re: Budget")

        assert fields[0].values == ["Re: Budget"]

    def test_value_trimmed_of_dashes_and_colons(self):
        fields = tokenize("title: -- Foo --")

        assert fields[0].values == ["Foo"]

    def test_key_case_is_preserved(self):
        fields = tokenize("Title: A")

        assert fields[0].key == "Title"

    def test_text_before_dash_is_ignored(self):
        fields = tokenize("tags: a\nfoo - bar")

        assert fields[0].values == ["a", "bar"]

    def test_crlf_line_endings(self):
        fields = tokenize("title: A\r\ntags: b\r\n")

        assert pairs(fields) == [("title", ["A"]), ("tags", ["b"])]

    def test_empty_text(self):
        assert tokenize("") == []

    def test_stable_on_own_output(self):
        text = "title: Weekly Sync\ntags:\n- work, meeting\n- misc\ndate: March 3 2020"
        fields = tokenize(text)

        rendered = "\n".join(
            f"{f.key}:\n" + "\n".join(f"- {v}" for v in f.values) for f in fields
        )

        assert tokenize(rendered) == fields
        assert tokenize(text) == fields


class TestTrim:
    def test_trim(self):
        assert trim("  -: value :-  ") == "value"
        assert trim("---") == ""
        assert trim("a-b") == "a-b"


class TestRawField:
    def test_empty_values_rejected(self):
        with pytest.raises(ValidationError):
            RawField(key="title", values=[])

    def test_empty_key_rejected(self):
        with pytest.raises(ValidationError):
            RawField(key="", values=["x"])

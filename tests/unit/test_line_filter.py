"""
Unit tests for the line filter.

Tests line splitting, case-sensitive and case-insensitive search, and the
ordering and boundary behavior of the filter.
"""

import pytest

from minigrep.tools.line_filter import (
    filter_lines,
    search,
    search_case_insensitive,
    split_lines,
)


POEM = """\
I'm nobody! Who are you?
Are you nobody, too?
Then there's a pair of us - don't tell!
They'd banish us, you know.

How dreary to be somebody!
How public, like a frog
To tell your name the livelong day
To an admiring bog!
"""


class TestSplitLines:
    """Test cases for split_lines."""

    def test_split_simple(self):
        """Test splitting on newlines."""
        assert split_lines("a\nb\nc") == ["a", "b", "c"]

    def test_trailing_newline(self):
        """Test that a final terminator does not produce an empty line."""
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_blank_lines_kept(self):
        """Test that interior and repeated blank lines are preserved."""
        assert split_lines("a\n\nb\n\n") == ["a", "", "b", ""]

    def test_crlf(self):
        """Test that CRLF terminators are stripped."""
        assert split_lines("a\r\nb\r\n") == ["a", "b"]

    def test_carriage_return_on_unterminated_last_line_kept(self):
        """Test that a final "\\r" without a following newline is kept."""
        assert split_lines("foo\nbar\n\r\nbaz\r") == ["foo", "bar", "", "baz\r"]
        assert split_lines("baz\r") == ["baz\r"]

    def test_lone_carriage_return_not_terminator(self):
        """Test that a carriage return inside a line is kept."""
        assert split_lines("a\rb\nc") == ["a\rb", "c"]

    def test_other_boundaries_not_terminators(self):
        """Test that form feeds and Unicode separators do not split lines."""
        assert split_lines("a\x0cb c") == ["a\x0cb c"]

    def test_empty_contents(self):
        """Test that empty contents produce no lines."""
        assert split_lines("") == []

    def test_single_newline(self):
        """Test that a lone terminator produces one empty line."""
        assert split_lines("\n") == [""]


class TestSearch:
    """Test cases for case-sensitive search."""

    def test_case_sensitive(self):
        """Test that capitalized variants do not match."""
        query = "duct"
        contents = "Rust:\nsafe, fast, productive.\nPick three.\nDuct tape."

        assert search(query, contents) == ["safe, fast, productive."]

    def test_multiple_matches_in_order(self):
        """Test that matches keep their file order."""
        assert search("body", POEM) == [
            "I'm nobody! Who are you?",
            "Are you nobody, too?",
            "How dreary to be somebody!",
        ]

    def test_no_matches(self):
        """Test that a missing query yields an empty result."""
        assert search("monomorphization", POEM) == []

    def test_duplicates_kept(self):
        """Test that identical matching lines are not deduplicated."""
        assert search("x", "x\ny\nx") == ["x", "x"]

    def test_empty_contents(self):
        """Test that empty contents produce no matches."""
        assert search("frog", "") == []
        assert search("", "") == []

    def test_empty_query_matches_every_line(self):
        """Test that an empty query matches every line, blank ones included."""
        assert search("", "a\n\nb\n") == ["a", "", "b"]

    def test_included_and_excluded(self):
        """Test that exactly the lines containing the query are returned."""
        query = "us"
        result = search(query, POEM)
        lines = split_lines(POEM)

        assert result == [line for line in lines if query in line]
        assert all(query in line for line in result)

    def test_idempotent(self):
        """Test that repeated searches give identical results."""
        assert search("to", POEM) == search("to", POEM)

    def test_query_spanning_lines_not_matched(self):
        """Test that a match must be within a single line."""
        assert search("you?\nAre", POEM) == []


class TestSearchCaseInsensitive:
    """Test cases for case-insensitive search."""

    def test_case_insensitive(self):
        """Test matching regardless of case."""
        query = "rUsT"
        contents = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me."

        assert search_case_insensitive(query, contents) == ["Rust:", "Trust me."]

    def test_original_line_returned(self):
        """Test that lines are returned without lowercasing."""
        assert search_case_insensitive("TO", POEM) == [
            "Are you nobody, too?",
            "How dreary to be somebody!",
            "To tell your name the livelong day",
            "To an admiring bog!",
        ]

    def test_superset_of_case_sensitive(self):
        """Test that case-insensitive results include every case-sensitive match."""
        sensitive = search("to", POEM)
        insensitive = search_case_insensitive("to", POEM)

        assert len(insensitive) > len(sensitive)
        assert set(sensitive) <= set(insensitive)

    def test_empty_query_matches_every_line(self):
        """Test that an empty query matches every line."""
        assert search_case_insensitive("", "A\nb") == ["A", "b"]

    def test_inputs_not_mutated(self):
        """Test that the query and contents are left untouched."""
        query = "RUST"
        contents = "Rust\nTRUST"
        search_case_insensitive(query, contents)

        assert query == "RUST"
        assert contents == "Rust\nTRUST"


class TestFilterLines:
    """Test cases for filter_lines dispatch."""

    @pytest.mark.parametrize("case_sensitive, expected", [
        (True, ["Duct tape."]),
        (False, ["safe, fast, productive.", "Duct tape."]),
    ])
    def test_dispatch(self, case_sensitive, expected):
        """Test that the variant follows the case_sensitive flag."""
        contents = "Rust:\nsafe, fast, productive.\nPick three.\nDuct tape."

        assert filter_lines("Duct", contents, case_sensitive=case_sensitive) == expected

    def test_default_is_case_sensitive(self):
        """Test the default variant."""
        assert filter_lines("rust", "Rust\nrust") == ["rust"]

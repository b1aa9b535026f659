"""Unit tests for envlines.lib.lines line operations."""

from __future__ import annotations

import json

from envlines.lib.lines import encode_lines, filter_lines, is_comment, split_lines


class TestSplitLines:
    """Tests for splitting file text into lines."""

    def test_splits_on_newline(self):
        """Each newline starts a new line."""
        assert split_lines("A=1\n#comment\nB=2") == ["A=1", "#comment", "B=2"]

    def test_empty_text_has_no_lines(self):
        """Zero-length text yields an empty sequence."""
        assert split_lines("") == []

    def test_trailing_newline_keeps_empty_segment(self):
        """A trailing newline leaves an empty final line."""
        assert split_lines("A=1\n") == ["A=1", ""]

    def test_carriage_return_is_preserved(self):
        """Windows line endings keep the \\r on each line."""
        assert split_lines("A=1\r\nB=2\r\n") == ["A=1\r", "B=2\r", ""]

    def test_lone_newline(self):
        """A file holding only a newline has two empty lines."""
        assert split_lines("\n") == ["", ""]


class TestIsComment:
    """Tests for the comment predicate."""

    def test_hash_first_is_comment(self):
        """A line starting with # is a comment."""
        assert is_comment("#comment")

    def test_bare_hash_is_comment(self):
        """A line that is only # is a comment."""
        assert is_comment("#")

    def test_leading_space_is_not_comment(self):
        """Whitespace before # makes the line ordinary."""
        assert not is_comment(" #not a comment")

    def test_inline_hash_is_not_comment(self):
        """A # after content does not make a comment."""
        assert not is_comment("A=1 # trailing")

    def test_empty_line_is_not_comment(self):
        """The empty line has no first character."""
        assert not is_comment("")


class TestFilterLines:
    """Tests for dropping comment lines."""

    def test_drops_comments_keeps_order(self):
        """Non-comment lines survive in their original order."""
        assert filter_lines(["B=2", "#x", "A=1", "#y", "C=3"]) == ["B=2", "A=1", "C=3"]

    def test_all_comments(self):
        """Only comments leaves nothing."""
        assert filter_lines(["#only comments", "#another"]) == []

    def test_empty_lines_retained(self):
        """Blank lines are not comments and are kept."""
        assert filter_lines(["A=1", "", "B=2"]) == ["A=1", "", "B=2"]

    def test_lines_not_trimmed(self):
        """Retained lines are passed through verbatim."""
        lines = ["  A = 1  ", "B=2\r", "\t#tab"]
        assert filter_lines(lines) == lines

    def test_accepts_iterables(self):
        """Any iterable of strings works."""
        assert filter_lines(iter(["#a", "b"])) == ["b"]


class TestEncodeLines:
    """Tests for JSON encoding of retained lines."""

    def test_compact_array(self):
        """Output has no spaces between elements."""
        assert encode_lines(["A=1", "B=2"]) == '["A=1","B=2"]'

    def test_empty_array(self):
        """No lines encode as []."""
        assert encode_lines([]) == "[]"

    def test_escapes_quotes_and_backslashes(self):
        """Quotes, backslashes and control characters use JSON escapes."""
        out = encode_lines(['A="x"', "B=c:\\dir", "C=1\r"])
        assert out == '["A=\\"x\\"","B=c:\\\\dir","C=1\\r"]'
        assert json.loads(out) == ['A="x"', "B=c:\\dir", "C=1\r"]

    def test_non_ascii_escaped(self):
        """Non-ASCII characters become \\u escapes and decode back."""
        out = encode_lines(["NAME=café", "CITY=日本"])
        assert out == '["NAME=caf\\u00e9","CITY=\\u65e5\\u672c"]'
        assert out.isascii()
        assert json.loads(out) == ["NAME=café", "CITY=日本"]

    def test_single_line(self):
        """Encoded output never spans lines."""
        assert "\n" not in encode_lines(["A=1", "", "B=2\r"])

"""
Tests for the SourceCursor.

Verifies:
1.  Whitespace runs swallow comments, line breaks and continuations.
2.  Statement tails stop at `;` and consume at most one line break.
3.  Token mismatches raise UnsupportedConstruct with the current line.
4.  Position helpers (`offset_of`, `line_number`, `token_line`, `lines`).
"""

import pytest

from rewrite_py.builder.cursor import SourceCursor
from rewrite_py.errors import UnsupportedConstruct
from rewrite_py.tree.space import Comment, Space


def test_whitespace_collects_comments():
  cursor = SourceCursor("  # note\n  x")
  space = cursor.whitespace()
  assert space == Space("  ", (Comment(" note", "\n  "),))
  assert cursor.peek("x")


def test_whitespace_follows_continuations():
  cursor = SourceCursor(" \\\n  x")
  space = cursor.whitespace()
  assert space.render() == " \\\n  "
  assert not space.has_line_break()
  assert cursor.peek("x")


def test_space_before_consumes_token():
  cursor = SourceCursor("  =  1")
  assert cursor.space_before("=") == Space("  ")
  assert cursor.pos == 3


def test_skip_mismatch():
  cursor = SourceCursor("a\nb")
  cursor.skip("a")
  cursor.whitespace()
  with pytest.raises(UnsupportedConstruct) as excinfo:
    cursor.skip("c")
  assert excinfo.value.line == 2
  assert "expected 'c'" in str(excinfo.value)


@pytest.mark.parametrize(
  "source, expected, rest",
  [
    ("  # c\nnext", "  # c\n", "next"),
    (" ; y", " ", "; y"),
    ("\n\n", "\n", "\n"),
    ("\r\nz", "\r\n", "z"),
    ("", "", ""),
  ],
)
def test_trailing(source, expected, rest):
  cursor = SourceCursor(source)
  assert cursor.trailing().render() == expected
  assert cursor.source[cursor.pos :] == rest


def test_lines():
  cursor = SourceCursor("    # a\n\nrest")
  assert cursor.lines(2).render() == "    # a\n\n"
  assert cursor.peek("rest")


def test_lines_past_end():
  cursor = SourceCursor("only")
  assert cursor.lines(3).render() == "only"
  assert cursor.at_end


def test_offset_of():
  cursor = SourceCursor("ab\ncd\r\nef")
  assert cursor.offset_of(1, 0) == 0
  assert cursor.offset_of(2, 1) == 4
  assert cursor.offset_of(3, 0) == 7
  assert cursor.offset_of(9, 0) == len(cursor.source)


def test_line_number_and_take():
  cursor = SourceCursor("a\nbc\n")
  assert cursor.line_number() == 1
  assert cursor.take(3) == "a\nb"
  assert cursor.line_number() == 2
  assert cursor.take(10) == "c\n"
  assert cursor.at_end


def test_token_line_looks_past_whitespace():
  cursor = SourceCursor("x = 1\n\n  # note\n  y\n")
  cursor.take(5)
  assert cursor.line_number() == 1
  assert cursor.token_line() == 4
  assert cursor.pos == 5

"""
Source Cursor.

The builder walks the concrete tree and the original text in lockstep. The
cursor owns the text position: every token the builder recognises is
consumed with `skip`, and every run between tokens is consumed as a `Space`.
Nothing is ever consumed twice, and `at_end` proves nothing was left over.
"""

import re
from typing import List

from rewrite_py.errors import UnsupportedConstruct
from rewrite_py.tree.space import Space

_HORIZONTAL = " \t\f"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class SourceCursor:
  """
  A read position over source text.

  Attributes:
      source (str): The full source text.
      pos (int): Offset of the next unconsumed character.
  """

  def __init__(self, source: str) -> None:
    self.source = source
    self.pos = 0
    self._line_starts: List[int] = []

  @property
  def at_end(self) -> bool:
    return self.pos >= len(self.source)

  def peek(self, token: str) -> bool:
    return self.source.startswith(token, self.pos)

  def skip(self, token: str) -> None:
    """
    Consumes `token`, which must appear at the current position.

    Args:
        token: The exact expected text.

    Raises:
        UnsupportedConstruct: If the source does not continue with `token`.
    """
    if not self.source.startswith(token, self.pos):
      found = self.source[self.pos : self.pos + max(len(token), 10)]
      raise UnsupportedConstruct(token, f"expected {token!r} but found {found!r}", self.token_line())
    self.pos += len(token)

  def _continuation_length(self) -> int:
    if self.source.startswith("\\", self.pos):
      match = _LINE_BREAK.match(self.source, self.pos + 1)
      if match:
        return 1 + len(match.group(0))
    return 0

  def whitespace(self) -> Space:
    """
    Consumes all whitespace, line breaks, continuations and comments.

    Only call this when a token is known to follow, otherwise line breaks
    belonging to the enclosing statement would be swallowed.

    Returns:
        Space: The consumed run.
    """
    start = self.pos
    source = self.source
    while self.pos < len(source):
      char = source[self.pos]
      if char in _HORIZONTAL or char in "\r\n":
        self.pos += 1
      elif char == "#":
        while self.pos < len(source) and source[self.pos] not in "\r\n":
          self.pos += 1
      else:
        continuation = self._continuation_length()
        if not continuation:
          break
        self.pos += continuation
    return Space.build(source[start : self.pos])

  def space_before(self, token: str) -> Space:
    """Consumes whitespace and then `token`, returning the whitespace."""
    space = self.whitespace()
    self.skip(token)
    return space

  def trailing(self) -> Space:
    """
    Consumes the remainder of a statement's line.

    That is horizontal whitespace, continuations, an optional comment and at
    most one line break. Stops early at `;`.

    Returns:
        Space: The consumed run.
    """
    start = self.pos
    source = self.source
    while self.pos < len(source):
      if source[self.pos] in _HORIZONTAL:
        self.pos += 1
        continue
      continuation = self._continuation_length()
      if not continuation:
        break
      self.pos += continuation
    if self.peek("#"):
      while self.pos < len(source) and source[self.pos] not in "\r\n":
        self.pos += 1
    match = _LINE_BREAK.match(source, self.pos)
    if match:
      self.pos = match.end()
    return Space.build(source[start : self.pos])

  def lines(self, count: int) -> Space:
    """
    Consumes `count` whole lines (each up to and including its line break).

    Args:
        count: Number of lines.

    Returns:
        Space: The consumed lines.
    """
    start = self.pos
    for _ in range(count):
      match = _LINE_BREAK.search(self.source, self.pos)
      self.pos = match.end() if match else len(self.source)
    return Space.build(self.source[start : self.pos])

  def take(self, length: int) -> str:
    """Consumes and returns the next `length` characters verbatim."""
    text = self.source[self.pos : self.pos + length]
    self.pos += len(text)
    return text

  def offset_of(self, line: int, column: int) -> int:
    """
    Converts a 1-based line and 0-based column to a source offset.

    Args:
        line: Line number as reported by libcst positions.
        column: Column as reported by libcst positions.

    Returns:
        int: Offset into `source`.
    """
    if not self._line_starts:
      self._line_starts = [0] + [m.end() for m in _LINE_BREAK.finditer(self.source)]
    if line - 1 >= len(self._line_starts):
      return len(self.source)
    return min(self._line_starts[line - 1] + column, len(self.source))

  def line_number(self) -> int:
    """1-based line of the current position."""
    return len(_LINE_BREAK.findall(self.source, 0, self.pos)) + 1

  def token_line(self) -> int:
    """1-based line of the next token, looking past whitespace and comments without consuming them."""
    mark = self.pos
    self.whitespace()
    line = self.line_number()
    self.pos = mark
    return line

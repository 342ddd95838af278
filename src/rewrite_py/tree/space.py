"""
Whitespace and Comment Model.

A `Space` holds everything that sits between two tokens: runs of spaces, tabs,
line breaks, backslash continuations and `#` comments. It is stored as a
leading whitespace run followed by `(comment, suffix)` pairs, where each
suffix is the whitespace after that comment.

`Space.build` and `Space.render` are exact inverses, so any inter-token text
captured by the builder can be reprinted byte-for-byte.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, List, Tuple

_CONTINUATION = re.compile(r"\\(\r\n|\r|\n)")


def _has_line_break(text: str) -> bool:
  stripped = _CONTINUATION.sub("", text)
  return "\n" in stripped or "\r" in stripped


@dataclass(frozen=True)
class Comment:
  """
  A single `#` comment.

  Attributes:
      text: Comment body without the leading '#'.
      suffix: Whitespace following the comment, up to the next comment or the
          end of the enclosing space.
  """

  text: str
  suffix: str = ""

  def render(self) -> str:
    return f"#{self.text}{self.suffix}"


@dataclass(frozen=True)
class Space:
  """Immutable whitespace-plus-comments value attached to a tree position."""

  whitespace: str = ""
  comments: Tuple[Comment, ...] = ()

  EMPTY: ClassVar["Space"]

  @classmethod
  def build(cls, text: str) -> "Space":
    """
    Splits raw inter-token text into whitespace and comments.

    Args:
        text: Source text consisting only of whitespace, continuations and comments.

    Returns:
        Space: The structured representation of `text`.
    """
    if not text:
      return cls.EMPTY

    first = text.find("#")
    if first == -1:
      return cls(text)

    comments: List[Comment] = []
    start = first
    while start != -1:
      end = start + 1
      while end < len(text) and text[end] not in "\r\n":
        end += 1
      following = text.find("#", end)
      suffix = text[end:] if following == -1 else text[end:following]
      comments.append(Comment(text[start + 1 : end], suffix))
      start = following

    return cls(text[:first], tuple(comments))

  def render(self) -> str:
    return self.whitespace + "".join(c.render() for c in self.comments)

  @property
  def is_empty(self) -> bool:
    return not self.whitespace and not self.comments

  def has_line_break(self) -> bool:
    """
    Reports whether this space spans more than one logical line.

    Backslash continuations do not count. Any comment does, since a comment
    always runs to the end of its line.

    Returns:
        bool: True if a real line break or a comment is present.
    """
    if self.comments:
      return True
    return _has_line_break(self.whitespace)

  def merge(self, other: "Space") -> "Space":
    """
    Concatenates two adjacent spaces.

    Args:
        other: The space that directly follows this one in the source.

    Returns:
        Space: A space rendering as `self.render() + other.render()`.
    """
    if other.is_empty:
      return self
    if self.is_empty:
      return other
    return Space.build(self.render() + other.render())

  def __str__(self) -> str:
    return self.render()


Space.EMPTY = Space()

"""
Padded slots and containers.

A padded slot pairs a child with the space on one side of it, which is how the
tree keeps whitespace around separators and closing delimiters.
"""

from dataclasses import dataclass, replace
from typing import Generic, List, Tuple, TypeVar

from rewrite_py.tree.markers import Markers
from rewrite_py.tree.space import Space

T = TypeVar("T")


@dataclass(frozen=True)
class RightPadded(Generic[T]):
  """A child followed by the space that trails it (e.g. the space before a comma)."""

  element: T
  after: Space = Space.EMPTY

  def with_element(self, element: T) -> "RightPadded[T]":
    return replace(self, element=element)

  def with_after(self, after: Space) -> "RightPadded[T]":
    return replace(self, after=after)


@dataclass(frozen=True)
class LeftPadded(Generic[T]):
  """A child preceded by the space ahead of its introducing token (e.g. before `=`)."""

  before: Space
  element: T

  def with_element(self, element: T) -> "LeftPadded[T]":
    return replace(self, element=element)


@dataclass(frozen=True)
class Container(Generic[T]):
  """
  A delimited, separated sequence of padded children.

  `before` is the space ahead of the opening delimiter. Each slot's `after`
  holds the space before the following separator or the closing delimiter.
  """

  before: Space = Space.EMPTY
  padded: Tuple[RightPadded[T], ...] = ()
  markers: Markers = Markers.EMPTY

  @property
  def elements(self) -> List[T]:
    return [slot.element for slot in self.padded]

  def with_padded(self, padded: Tuple[RightPadded[T], ...]) -> "Container[T]":
    return replace(self, padded=tuple(padded))

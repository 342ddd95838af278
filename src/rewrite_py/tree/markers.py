"""
Typed node metadata.

Markers carry information that a node's fixed shape cannot hold: which
statements form one source statement, which calls are desugared operators or
literals, and padding text that has no slot of its own. Markers are plain
immutable data; all behaviour lives in the builder and printer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, List, Optional, Tuple, Type, TypeVar
from uuid import UUID

from rewrite_py.tree.space import Space

M = TypeVar("M", bound="Marker")


class Marker:
  """Base class for all markers."""

  @property
  def key(self) -> Hashable:
    """Markers sharing a key replace each other on `Markers.add`."""
    return type(self)


@dataclass(frozen=True)
class GroupedStatement(Marker):
  """Membership of a statement in a run that prints as one source statement."""

  group_id: UUID


@dataclass(frozen=True)
class MagicMethodDesugar(Marker):
  """The tagged call is an operator stored as `lhs.__op__(rhs)`."""


@dataclass(frozen=True)
class BuiltinDesugar(Marker):
  """The tagged call is a set/tuple/slice literal stored as `__builtins__.<kind>(...)`."""


@dataclass(frozen=True)
class OmitParentheses(Marker):
  """Delimiters of the tagged node or container are absent in the source."""


@dataclass(frozen=True)
class TrailingComma(Marker):
  """A trailing comma after the last element; `before` is the space ahead of it."""

  before: Space = Space.EMPTY


@dataclass(frozen=True)
class StringFlags(Marker):
  """Flags describing how a string literal was spelled."""

  formatted: bool = False
  concatenated: bool = False


class PaddingLocation(Enum):
  """Positions of padding text that no node slot can hold."""

  BEFORE_COMPOUND_BLOCK_COLON = "before_compound_block_colon"
  IMPORT_PARENS_PREFIX = "import_parens_prefix"
  IMPORT_PARENS_SUFFIX = "import_parens_suffix"
  WITHIN_OPERATOR_NAME = "within_operator_name"
  EMPTY_INITIALIZER = "empty_initializer"

  @property
  def default(self) -> Optional[Space]:
    return _PADDING_DEFAULTS[self]


_PADDING_DEFAULTS = {
  PaddingLocation.BEFORE_COMPOUND_BLOCK_COLON: None,
  PaddingLocation.IMPORT_PARENS_PREFIX: Space(" "),
  PaddingLocation.IMPORT_PARENS_SUFFIX: Space("\n"),
  PaddingLocation.WITHIN_OPERATOR_NAME: Space(" "),
  PaddingLocation.EMPTY_INITIALIZER: None,
}


@dataclass(frozen=True)
class ExtraPadding(Marker):
  """Recorded padding for one `PaddingLocation`."""

  location: PaddingLocation
  space: Space

  @property
  def key(self) -> Hashable:
    return (ExtraPadding, self.location)


@dataclass(frozen=True)
class Markers:
  """Immutable, ordered collection of markers attached to one node."""

  entries: Tuple[Marker, ...] = ()

  def find_first(self, kind: Type[M]) -> Optional[M]:
    for marker in self.entries:
      if isinstance(marker, kind):
        return marker
    return None

  def find_all(self, kind: Type[M]) -> List[M]:
    return [m for m in self.entries if isinstance(m, kind)]

  def has(self, kind: Type[Marker]) -> bool:
    return self.find_first(kind) is not None

  def add(self, marker: Marker) -> "Markers":
    """
    Returns a collection containing `marker`, replacing any marker with the same key.

    Args:
        marker: The marker to attach.

    Returns:
        Markers: The new collection.
    """
    kept = tuple(m for m in self.entries if m.key != marker.key)
    return Markers(kept + (marker,))

  def remove(self, kind: Type[Marker]) -> "Markers":
    return Markers(tuple(m for m in self.entries if not isinstance(m, kind)))

  def __iter__(self) -> Any:
    return iter(self.entries)

  def __len__(self) -> int:
    return len(self.entries)


Markers.EMPTY = Markers()


def padding_of(markers: Markers, location: PaddingLocation) -> Optional[Space]:
  """
  Looks up recorded padding for `location`.

  Args:
      markers: Markers of the node.
      location: The padding position.

  Returns:
      Optional[Space]: The recorded space, or None if nothing was recorded.
  """
  for marker in markers.find_all(ExtraPadding):
    if marker.location is location:
      return marker.space
  return None


def padding_or_default(markers: Markers, location: PaddingLocation) -> Optional[Space]:
  recorded = padding_of(markers, location)
  return recorded if recorded is not None else location.default


def set_padding(
  markers: Markers,
  location: PaddingLocation,
  space: Space,
  keep_default: bool = False,
) -> Markers:
  """
  Records padding for `location`.

  A value equal to the location's default is not stored unless
  `keep_default` is set, in which case its presence itself carries meaning.

  Args:
      markers: Markers of the node.
      location: The padding position.
      space: The padding to record.
      keep_default: Store the value even when it equals the default.

  Returns:
      Markers: The updated collection.
  """
  default = location.default if location.default is not None else Space.EMPTY
  if space == default and not keep_default:
    return Markers(tuple(m for m in markers.entries if m.key != (ExtraPadding, location)))
  return markers.add(ExtraPadding(location, space))

"""
Node base classes.

Every node is a frozen dataclass carrying a leading `prefix` space, its
`markers` and a stable `id`. Nodes never change after construction; the
`with_*` helpers return a copy that keeps the same id.

Two families exist side by side in one tree: generic nodes (`J`) shared with
other languages, and Python-specific nodes (`Py`). The printer dispatches on
the family.
"""

from dataclasses import field, replace
from typing import Any, TypeVar, Union
from uuid import uuid4

from rewrite_py.tree.markers import Marker, Markers
from rewrite_py.tree.space import Space

N = TypeVar("N", bound="Tree")


def node_id() -> Any:
  """Field definition for node ids: generated, not compared, not shown."""
  return field(default_factory=uuid4, compare=False, repr=False)


class Tree:
  """Base class for all nodes."""

  prefix: Space
  markers: Markers

  def with_prefix(self: N, prefix: Space) -> N:
    return replace(self, prefix=prefix)

  def with_markers(self: N, markers: Markers) -> N:
    return replace(self, markers=markers)

  def add_marker(self: N, marker: Marker) -> N:
    return replace(self, markers=self.markers.add(marker))


class J(Tree):
  """Generic node family."""


class Py(Tree):
  """Python-specific node family."""


Expression = Union[J, Py]
Statement = Union[J, Py]

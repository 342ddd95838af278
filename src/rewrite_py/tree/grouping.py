"""
Statement Grouping.

Some source statements are represented by several sibling statements, e.g.
`from m import a, b` is two `Import` nodes. Such siblings share a
`GroupedStatement` marker, and the group is recomputed from the markers
whenever it is needed rather than stored anywhere.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from uuid import UUID

from rewrite_py.tree.base import Statement
from rewrite_py.tree.markers import GroupedStatement


@dataclass(frozen=True)
class StatementGroup:
  """
  A maximal run of adjacent statements printing as one source statement.

  Attributes:
      group_id: The shared `GroupedStatement.group_id`.
      start: Index of the first member in the enclosing statement list.
      members: The member statements, in order.
  """

  group_id: UUID
  start: int
  members: Tuple[Statement, ...]

  @property
  def end(self) -> int:
    """Index of the last member in the enclosing statement list."""
    return self.start + len(self.members) - 1

  def __contains__(self, index: int) -> bool:
    return self.start <= index <= self.end

  def position_of(self, statement: Statement) -> Optional[int]:
    """
    Locates a statement inside the group by node identity.

    Args:
        statement: A statement node.

    Returns:
        Optional[int]: Its 0-based position within `members`, or None.
    """
    for i, member in enumerate(self.members):
      if member.id == statement.id:
        return i
    return None


def group_id_of(statement: Statement) -> Optional[UUID]:
  marker = statement.markers.find_first(GroupedStatement)
  return marker.group_id if marker is not None else None


def find_statement_group(statements: Sequence[Statement], index: int) -> Optional[StatementGroup]:
  """
  Computes the group containing `statements[index]`.

  The result depends only on the markers of the statement run, so calling
  this from any member index yields an equal group.

  Args:
      statements: Sibling statements of one block or module.
      index: Position of the statement of interest.

  Returns:
      Optional[StatementGroup]: The group, or None for an ungrouped statement.
  """
  group_id = group_id_of(statements[index])
  if group_id is None:
    return None

  start = index
  while start > 0 and group_id_of(statements[start - 1]) == group_id:
    start -= 1
  end = index
  while end + 1 < len(statements) and group_id_of(statements[end + 1]) == group_id:
    end += 1

  return StatementGroup(group_id, start, tuple(statements[start : end + 1]))

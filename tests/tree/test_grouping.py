"""
Tests for statement grouping.

Verifies that a group is found from any member index with identical
boundaries, and that ungrouped statements have no group.
"""

from uuid import uuid4

import pytest

from rewrite_py.tree.generic import Identifier
from rewrite_py.tree.grouping import find_statement_group
from rewrite_py.tree.markers import GroupedStatement
from rewrite_py.tree.python import ExpressionStatement, Pass


def grouped(name, group_id):
  return ExpressionStatement(Identifier(name)).add_marker(GroupedStatement(group_id))


@pytest.fixture
def statements():
  first, second = uuid4(), uuid4()
  return [
    Pass(),
    grouped("a", first),
    grouped("b", first),
    grouped("c", first),
    grouped("d", second),
    grouped("e", second),
    Pass(),
  ]


def test_ungrouped_statement(statements):
  assert find_statement_group(statements, 0) is None
  assert find_statement_group(statements, 6) is None


@pytest.mark.parametrize("index", [1, 2, 3])
def test_group_is_identical_from_any_member(statements, index):
  group = find_statement_group(statements, index)
  assert group.start == 1
  assert group.end == 3
  assert [m.expression.name for m in group.members] == ["a", "b", "c"]
  assert group == find_statement_group(statements, 1)


def test_adjacent_groups_stay_apart(statements):
  group = find_statement_group(statements, 5)
  assert (group.start, group.end) == (4, 5)
  assert 3 not in group
  assert 4 in group


def test_position_of(statements):
  group = find_statement_group(statements, 2)
  assert group.position_of(statements[3]) == 2
  assert group.position_of(statements[0]) is None

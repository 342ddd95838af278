"""
Tests for operator tables.
"""

import pytest

from rewrite_py.errors import UnsupportedConstruct
from rewrite_py.tree.operators import (
  MAGIC_METHODS,
  magic_method_for_operator,
  operator_for_magic_method,
  reverses_operands,
  supports_negation,
)


@pytest.mark.parametrize("name,spelling", sorted(MAGIC_METHODS.items()))
def test_tables_are_inverse(name, spelling):
  assert magic_method_for_operator(spelling) == name
  assert operator_for_magic_method(name) == spelling


def test_membership_is_special():
  assert reverses_operands("__contains__")
  assert supports_negation("__contains__")
  assert not reverses_operands("__add__")
  assert not supports_negation("__eq__")


def test_unknown_operator():
  assert operator_for_magic_method("__iadd__") is None
  with pytest.raises(UnsupportedConstruct, match="<>"):
    magic_method_for_operator("<>")

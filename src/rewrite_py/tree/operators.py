"""
Operator tables.

Arithmetic, bitwise and comparison operators are stored as calls to their
magic methods (`a + b` is `a.__add__(b)`), so this module is the single
source of truth for the method name <-> spelling correspondence used by the
builder (desugaring) and the printer (resugaring).
"""

from enum import Enum
from typing import Dict, Optional

from rewrite_py.errors import UnsupportedConstruct


class BinaryOperator(Enum):
  """Binary operators kept as generic `Binary` nodes."""

  AND = "and"
  OR = "or"
  IS = "is"
  IS_NOT = "is not"


class UnaryOperator(Enum):
  NOT = "not"
  NEGATIVE = "-"
  POSITIVE = "+"
  COMPLEMENT = "~"


class AssignmentOperator(Enum):
  ADD = "+="
  SUBTRACT = "-="
  MULTIPLY = "*="
  DIVIDE = "/="
  FLOOR_DIVIDE = "//="
  MODULO = "%="
  POWER = "**="
  MATRIX_MULTIPLY = "@="
  LEFT_SHIFT = "<<="
  RIGHT_SHIFT = ">>="
  BIT_AND = "&="
  BIT_OR = "|="
  BIT_XOR = "^="


# magic method name -> operator spelling
MAGIC_METHODS: Dict[str, str] = {
  "__eq__": "==",
  "__ne__": "!=",
  "__lt__": "<",
  "__le__": "<=",
  "__gt__": ">",
  "__ge__": ">=",
  "__add__": "+",
  "__sub__": "-",
  "__mul__": "*",
  "__truediv__": "/",
  "__floordiv__": "//",
  "__mod__": "%",
  "__pow__": "**",
  "__matmul__": "@",
  "__lshift__": "<<",
  "__rshift__": ">>",
  "__and__": "&",
  "__or__": "|",
  "__xor__": "^",
  "__contains__": "in",
}

_OPERATORS: Dict[str, str] = {spelling: name for name, spelling in MAGIC_METHODS.items()}

# `a in b` is `b.__contains__(a)`
_REVERSED = frozenset({"__contains__"})

# Only membership has a negated spelling (`not in`)
_NEGATABLE = frozenset({"__contains__"})


def operator_for_magic_method(name: str) -> Optional[str]:
  return MAGIC_METHODS.get(name)


def magic_method_for_operator(spelling: str) -> str:
  """
  Resolves the magic method implementing an operator.

  Args:
      spelling: Operator text, e.g. "+" or "in".

  Returns:
      str: The magic method name, e.g. "__add__".

  Raises:
      UnsupportedConstruct: If the operator has no magic method mapping.
  """
  try:
    return _OPERATORS[spelling]
  except KeyError:
    raise UnsupportedConstruct(spelling, "operator has no magic method mapping") from None


def reverses_operands(name: str) -> bool:
  return name in _REVERSED


def supports_negation(name: str) -> bool:
  return name in _NEGATABLE

"""
Python-specific Node Kinds.

Constructs that have no reasonable generic shape: the module itself,
dictionaries, comprehensions, type hints, star arguments, match patterns and
the small statements (`pass`, `del`, `global`, `assert`, ...).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from uuid import UUID

from rewrite_py.tree.base import Expression, Py, Statement, node_id
from rewrite_py.tree.generic import Identifier
from rewrite_py.tree.markers import Markers
from rewrite_py.tree.padding import Container, LeftPadded, RightPadded
from rewrite_py.tree.space import Space


@dataclass(frozen=True)
class CompilationUnit(Py):
  """A parsed module; `eof` is everything after the last statement."""

  statements: Tuple[RightPadded[Statement], ...]
  eof: Space = Space.EMPTY
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class ExpressionStatement(Py):
  """An expression used as a statement; the expression keeps the leading space."""

  expression: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Pass(Py):
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class KeyValue(Py):
  """`key: value` inside a dict display; `key.after` is the space before the colon."""

  key: RightPadded[Expression]
  value: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class DictLiteral(Py):
  """
  A dict display.

  An empty `{}` has no elements; space between its braces is recorded as
  `EMPTY_INITIALIZER` padding.
  """

  elements: Container[Expression]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


class StarKind(Enum):
  LIST = "*"
  DICT = "**"


@dataclass(frozen=True)
class StarExpression(Py):
  """`*value` or `**value` in calls, displays and assignment targets."""

  kind: StarKind
  expression: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


class TypeHintKind(Enum):
  VARIABLE_TYPE = ":"
  RETURN_TYPE = "->"


@dataclass(frozen=True)
class TypeHint(Py):
  """The prefix is the space before `:` or `->`."""

  kind: TypeHintKind
  expression: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class TypeHintedExpression(Py):
  expression: Expression
  type_hint: TypeHint
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


class SpecialParameterKind(Enum):
  ARGS = "*"
  KWARGS = "**"
  POSITIONAL_ONLY = "/"


@dataclass(frozen=True)
class SpecialParameter(Py):
  kind: SpecialParameterKind
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


class ComprehensionKind(Enum):
  LIST = "list"
  SET = "set"
  DICT = "dict"
  GENERATOR = "generator"

  @property
  def open(self) -> str:
    return _COMPREHENSION_DELIMITERS[self][0]

  @property
  def close(self) -> str:
    return _COMPREHENSION_DELIMITERS[self][1]


_COMPREHENSION_DELIMITERS = {
  ComprehensionKind.LIST: "[]",
  ComprehensionKind.SET: "{}",
  ComprehensionKind.DICT: "{}",
  ComprehensionKind.GENERATOR: "()",
}


@dataclass(frozen=True)
class ComprehensionCondition(Py):
  """`if <expression>`; prefix is the space before `if`."""

  expression: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class ComprehensionClause(Py):
  """`for <iterator_variable> in <iterated_list> <conditions>`."""

  iterator_variable: Expression
  iterated_list: LeftPadded[Expression]
  conditions: Tuple[ComprehensionCondition, ...] = ()
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Comprehension(Py):
  """
  A comprehension; `suffix` is the space before the closing delimiter.

  A generator passed as the sole call argument is marked `OmitParentheses`.
  """

  kind: ComprehensionKind
  result: Expression
  clauses: Tuple[ComprehensionClause, ...]
  suffix: Space = Space.EMPTY
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Await(Py):
  expression: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Yield(Py):
  """`yield [value]` or `yield from value`; `from_prefix` is the space before `from`."""

  value: Optional[Expression] = None
  from_prefix: Optional[Space] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()

  @property
  def is_from(self) -> bool:
    return self.from_prefix is not None


@dataclass(frozen=True)
class Assert(Py):
  condition: Expression
  message: Optional[LeftPadded[Expression]] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Del(Py):
  targets: Tuple[RightPadded[Expression], ...]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


class ScopeKind(Enum):
  GLOBAL = "global"
  NONLOCAL = "nonlocal"


@dataclass(frozen=True)
class VariableScope(Py):
  kind: ScopeKind
  names: Tuple[RightPadded[Identifier], ...]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class ExceptionType(Py):
  """The caught type of an `except` clause; `except*` sets `is_group` and the prefix precedes `*`."""

  expression: Expression
  is_group: bool = False
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class ErrorFrom(Py):
  """`error from cause` in a `raise` statement."""

  error: Expression
  cause: LeftPadded[Expression]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class NamedExpression(Py):
  """Assignment expression `target := value`."""

  target: Expression
  value: LeftPadded[Expression]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


class PatternKind(Enum):
  AS = "as"
  CAPTURE = "capture"
  CLASS = "class"
  DOUBLE_STAR = "double_star"
  GROUP = "group"
  KEY_VALUE = "key_value"
  KEYWORD = "keyword"
  LITERAL = "literal"
  MAPPING = "mapping"
  OR = "or"
  SEQUENCE = "sequence"
  STAR = "star"
  VALUE = "value"
  WILDCARD = "wildcard"


@dataclass(frozen=True)
class Pattern(Py):
  """
  A `case` pattern.

  Each kind prints its children with a fixed opening text, separator and
  closing text (see `PATTERN_SYNTAX` in the printer).
  """

  kind: PatternKind
  children: Container[Expression]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class MatchCase(Py):
  """A case's pattern plus optional guard; `guard.before` is the space before `if`."""

  pattern: Pattern
  guard: Optional[LeftPadded[Expression]] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()

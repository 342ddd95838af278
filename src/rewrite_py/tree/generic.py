"""
Generic Node Kinds.

Statement and expression shapes that are not specific to Python. Python
constructs without a shape of their own are expressed with these nodes plus
markers (operators as `MethodInvocation`, `elif` as a nested `If` inside an
`Else`, `with` as a `Try` with resources, `match` as a `Switch`).

Space conventions:
- `prefix` is the space before the node's first token.
- `Block.prefix` is the space before the `:` that opens the block.
- A `RightPadded.after` is the space before the token that follows the child.
- A `LeftPadded.before` is the space before the token that introduces the child.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union
from uuid import UUID

from rewrite_py.tree.base import Expression, J, Statement, node_id
from rewrite_py.tree.markers import Markers
from rewrite_py.tree.operators import AssignmentOperator, BinaryOperator, UnaryOperator
from rewrite_py.tree.padding import Container, LeftPadded, RightPadded
from rewrite_py.tree.space import Space


class LiteralKind(Enum):
  NUMBER = "number"
  STRING = "string"
  BOOLEAN = "boolean"
  NONE = "none"
  ELLIPSIS = "ellipsis"


@dataclass(frozen=True)
class Identifier(J):
  name: str
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Literal(J):
  """A literal; `value_source` is its exact source spelling."""

  value_source: str
  kind: LiteralKind
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Empty(J):
  """Zero-width placeholder (empty argument list, trailing comma, missing slice bound)."""

  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Block(J):
  """
  A compound statement's body.

  Attributes:
      statements: The body statements; each slot's `after` holds the rest of
          that statement's line (trailing comment and line break).
      end: Whole lines owned by the block after its last statement.
  """

  statements: Tuple[RightPadded[Statement], ...]
  end: Space = Space.EMPTY
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Else(J):
  """`else` clause; a body that is an `If` prints as `elif`."""

  body: Union[Block, "If"]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class If(J):
  condition: Expression
  then_part: Block
  else_part: Optional[Else] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class WhileLoop(J):
  condition: Expression
  body: Block
  else_part: Optional[Else] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class NamedVariable(J):
  """A declared name with an optional type hint and initializer."""

  name: Expression
  type_hint: Optional[J] = None
  initializer: Optional[LeftPadded[Expression]] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class VariableDeclarations(J):
  """
  One or more named variables, used for parameters and loop targets.

  `type_expression` holds a `SpecialParameter` for `*args` / `**kwargs`.
  """

  variables: Tuple[RightPadded[NamedVariable], ...]
  type_expression: Optional[Expression] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class ForEachControl(J):
  variable: VariableDeclarations
  iterable: LeftPadded[Expression]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class ForEachLoop(J):
  control: ForEachControl
  body: Block
  else_part: Optional[Else] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Return(J):
  expression: Optional[Expression] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Break(J):
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Continue(J):
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Throw(J):
  """`raise`; a `raise x from y` stores an `ErrorFrom` as the exception."""

  exception: Optional[Expression] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Assignment(J):
  """`variable = value`; also keyword arguments and `with ... as` resources."""

  variable: Expression
  value: LeftPadded[Expression]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class AssignmentOperation(J):
  variable: Expression
  operator: LeftPadded[AssignmentOperator]
  value: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Binary(J):
  left: Expression
  operator: LeftPadded[BinaryOperator]
  right: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Unary(J):
  operator: UnaryOperator
  expression: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Ternary(J):
  """`true_part if condition else false_part`."""

  true_part: Expression
  condition: LeftPadded[Expression]
  false_part: LeftPadded[Expression]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Parentheses(J):
  tree: RightPadded[Expression]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class FieldAccess(J):
  """`target.name`; `name.before` is the space before the dot."""

  target: Expression
  name: LeftPadded[Identifier]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class MethodInvocation(J):
  """
  A call.

  Also the carrier of desugared operators (`MagicMethodDesugar`) and of
  set/tuple/slice literals (`BuiltinDesugar`).
  """

  name: Identifier
  arguments: Container[Expression]
  select: Optional[RightPadded[Expression]] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class NewArray(J):
  """A list display, or the element list of a builtin set/tuple."""

  initializer: Container[Expression]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class ArrayDimension(J):
  """`[index]`; the prefix is the space before `[`."""

  index: RightPadded[Expression]
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class ArrayAccess(J):
  indexed: Expression
  dimension: ArrayDimension
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Lambda(J):
  """`lambda <parameters>: body`; the parameter container has no delimiters."""

  parameters: Container[J]
  body: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Modifier(J):
  """A keyword such as `async`, `def` or `class`."""

  keyword: str
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Annotation(J):
  """A decorator: `@expression`."""

  expression: Expression
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class MethodDeclaration(J):
  """
  A function definition.

  `modifiers` always ends with the `def` keyword; decorator slots carry the
  rest of the decorator's line in `after`.
  """

  modifiers: Tuple[Modifier, ...]
  name: Identifier
  parameters: Container[J]
  body: Block
  decorators: Tuple[RightPadded[Annotation], ...] = ()
  return_type: Optional[J] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class ClassDeclaration(J):
  """
  A class definition.

  `bases` is marked `OmitParentheses` when the source has no parentheses; an
  empty `()` holds a single `Empty` whose slot keeps the interior space.
  """

  kind: Modifier
  name: Identifier
  bases: Container[Expression]
  body: Block
  decorators: Tuple[RightPadded[Annotation], ...] = ()
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Catch(J):
  """`except` clause; `parameter` is None for a bare `except:`."""

  body: Block
  parameter: Optional[VariableDeclarations] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class TryResource(J):
  """A `with` item; `declaration` must be an `Assignment` (alias = expression)."""

  declaration: J
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Try(J):
  """
  `try` or `with`, told apart by a non-empty `resources` container.

  A trailing `Block` in the body is the `else:` clause of a `try`.
  """

  body: Block
  catches: Tuple[Catch, ...] = ()
  resources: Optional[Container[TryResource]] = None
  finally_part: Optional[LeftPadded[Block]] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Case(J):
  pattern: Expression
  body: Block
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Switch(J):
  """`match` statement; `cases` is a block of `Case` statements."""

  selector: Expression
  cases: Block
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()


@dataclass(frozen=True)
class Import(J):
  """
  One imported name.

  `qualid.target` is the module (`from` form) or the imported name (plain
  form, where `qualid.name` is an empty identifier). Multi-name imports are
  one `Import` per name sharing a `GroupedStatement` marker.
  """

  qualid: FieldAccess
  alias: Optional[LeftPadded[Identifier]] = None
  prefix: Space = Space.EMPTY
  markers: Markers = Markers.EMPTY
  id: UUID = node_id()

  @property
  def is_from(self) -> bool:
    return self.qualid.name.element.name != ""

"""
Generic Node Printer.

Prints the generic node family and resugars the Python constructs that the
builder stored in generic shapes:

1.  **Operators**: calls tagged `MagicMethodDesugar` print as `lhs <op> rhs`.
2.  **Builtin Literals**: calls tagged `BuiltinDesugar` print as set, tuple
    or slice syntax.
3.  **Compound Statements**: `Else` around an `If` prints as `elif`, a `Try`
    with resources prints as `with`, and a `Switch` prints as `match`.
4.  **Imports**: a group of `Import` statements prints as one statement.
"""

from typing import List, Sequence, Tuple

from rewrite_py.errors import MalformedDesugar, StructuralPrecondition
from rewrite_py.printer.base import PrintContext, TreePrinter
from rewrite_py.printer.output import PrintOutput
from rewrite_py.tree.base import J
from rewrite_py.tree.generic import (
  Annotation,
  ArrayAccess,
  ArrayDimension,
  Assignment,
  AssignmentOperation,
  Binary,
  Block,
  Break,
  Case,
  Catch,
  ClassDeclaration,
  Continue,
  Else,
  Empty,
  FieldAccess,
  ForEachControl,
  ForEachLoop,
  Identifier,
  If,
  Import,
  Lambda,
  Literal,
  MethodDeclaration,
  MethodInvocation,
  Modifier,
  NamedVariable,
  NewArray,
  Parentheses,
  Return,
  Switch,
  Ternary,
  Throw,
  Try,
  TryResource,
  Unary,
  VariableDeclarations,
  WhileLoop,
)
from rewrite_py.tree.markers import (
  BuiltinDesugar,
  MagicMethodDesugar,
  OmitParentheses,
  PaddingLocation,
  TrailingComma,
  padding_of,
  padding_or_default,
)
from rewrite_py.tree.operators import BinaryOperator, operator_for_magic_method, reverses_operands, supports_negation
from rewrite_py.tree.padding import RightPadded
from rewrite_py.tree.space import Space

BUILTINS = "__builtins__"
DEFAULT_CASE = "default"


def is_simple_name(node: J) -> bool:
  """True for an identifier or a dotted chain of identifiers."""
  if isinstance(node, Identifier):
    return True
  return isinstance(node, FieldAccess) and is_simple_name(node.target)


def import_needs_parentheses(members: Sequence[Import], afters: Sequence[Space]) -> bool:
  """
  Decides whether a `from` import group prints its names in parentheses.

  Parentheses are required when any captured space spans lines, and kept
  whenever the source had them.

  Args:
      members: The grouped `Import` statements.
      afters: The space before each member's comma (all but the last member).

  Returns:
      bool: True if the names must be parenthesized.
  """
  spaces: List[Space] = list(afters)
  for member in members:
    if padding_of(member.markers, PaddingLocation.IMPORT_PARENS_PREFIX) is not None:
      return True
    spaces.append(member.qualid.name.element.prefix)
    if member.alias is not None:
      spaces.extend((member.alias.before, member.alias.element.prefix))
    trailing = member.markers.find_first(TrailingComma)
    if trailing is not None:
      spaces.append(trailing.before)
  return any(space.has_line_break() for space in spaces)


class GenericPrinter(TreePrinter):
  """
  Printer for the generic node family.
  """

  family = J

  # --- Atoms ---

  def visit_Identifier(self, node: Identifier, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append(node.name)

  def visit_Literal(self, node: Literal, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append(node.value_source)

  def visit_Empty(self, node: Empty, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)

  def visit_Modifier(self, node: Modifier, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append(node.keyword)

  # --- Blocks and control flow ---

  def _block(self, node: Block, out: PrintOutput, statements: Sequence[RightPadded]) -> None:
    self.space(out, node.prefix)
    self.space(out, padding_or_default(node.markers, PaddingLocation.BEFORE_COMPOUND_BLOCK_COLON))
    out.append(":")
    self.statements(out, statements)
    self.space(out, node.end)

  def visit_Block(self, node: Block, out: PrintOutput, ctx: PrintContext) -> None:
    self._block(node, out, node.statements)

  def visit_Else(self, node: Else, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("el" if isinstance(node.body, If) else "else")
    self.visit(node.body, out)

  def visit_If(self, node: If, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("if")
    self.visit(node.condition, out)
    self.visit(node.then_part, out)
    self.visit(node.else_part, out)

  def visit_WhileLoop(self, node: WhileLoop, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("while")
    self.visit(node.condition, out)
    self.visit(node.body, out)
    self.visit(node.else_part, out)

  def visit_ForEachLoop(self, node: ForEachLoop, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("for")
    self.visit(node.control, out)
    self.visit(node.body, out)
    self.visit(node.else_part, out)

  def visit_ForEachControl(self, node: ForEachControl, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.variable, out)
    self.space(out, node.iterable.before)
    out.append("in")
    self.visit(node.iterable.element, out)

  def visit_Return(self, node: Return, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("return")
    self.visit(node.expression, out)

  def visit_Break(self, node: Break, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("break")

  def visit_Continue(self, node: Continue, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("continue")

  def visit_Throw(self, node: Throw, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("raise")
    self.visit(node.exception, out)

  # --- Variables and assignment ---

  def visit_VariableDeclarations(self, node: VariableDeclarations, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.type_expression, out)
    self.padded(out, node.variables, ",")

  def visit_NamedVariable(self, node: NamedVariable, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.name, out)
    self.visit(node.type_hint, out)
    if node.initializer is not None:
      self.space(out, node.initializer.before)
      out.append("=")
      self.visit(node.initializer.element, out)

  def visit_Assignment(self, node: Assignment, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.variable, out)
    self.space(out, node.value.before)
    out.append("=")
    self.visit(node.value.element, out)

  def visit_AssignmentOperation(self, node: AssignmentOperation, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.variable, out)
    self.space(out, node.operator.before)
    out.append(node.operator.element.value)
    self.visit(node.value, out)

  # --- Operators ---

  def visit_Binary(self, node: Binary, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.left, out)
    self.space(out, node.operator.before)
    if node.operator.element is BinaryOperator.IS_NOT:
      out.append("is")
      self.space(out, padding_or_default(node.markers, PaddingLocation.WITHIN_OPERATOR_NAME))
      out.append("not")
    else:
      out.append(node.operator.element.value)
    self.visit(node.right, out)

  def visit_Unary(self, node: Unary, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    if node.markers.has(MagicMethodDesugar):
      expression = node.expression
      if isinstance(expression, Parentheses):
        expression = expression.tree.element
      if not isinstance(expression, MethodInvocation) or not expression.markers.has(MagicMethodDesugar):
        raise MalformedDesugar("Negated operator must wrap a desugared operator call")
      self._magic_method(expression, out, negate=True)
      return
    out.append(node.operator.value)
    self.visit(node.expression, out)

  def visit_Ternary(self, node: Ternary, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.true_part, out)
    self.space(out, node.condition.before)
    out.append("if")
    self.visit(node.condition.element, out)
    self.space(out, node.false_part.before)
    out.append("else")
    self.visit(node.false_part.element, out)

  def visit_Parentheses(self, node: Parentheses, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("(")
    self.visit(node.tree.element, out)
    self.space(out, node.tree.after)
    out.append(")")

  # --- Access and calls ---

  def visit_FieldAccess(self, node: FieldAccess, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.target, out)
    self.space(out, node.name.before)
    out.append(".")
    self.visit(node.name.element, out)

  def visit_ArrayAccess(self, node: ArrayAccess, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.indexed, out)
    self.visit(node.dimension, out)

  def visit_ArrayDimension(self, node: ArrayDimension, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("[")
    self.visit(node.index.element, out)
    self.space(out, node.index.after)
    out.append("]")

  def visit_NewArray(self, node: NewArray, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.container(out, node.initializer, "[", ",", "]")

  def visit_MethodInvocation(self, node: MethodInvocation, out: PrintOutput, ctx: PrintContext) -> None:
    if node.markers.has(MagicMethodDesugar):
      self._magic_method(node, out)
      return
    if node.markers.has(BuiltinDesugar):
      self._builtin(node, out)
      return

    self.space(out, node.prefix)
    if node.select is not None:
      self.visit(node.select.element, out)
      self.space(out, node.select.after)
      out.append(".")
    self.visit(node.name, out)
    self.container(out, node.arguments, "(", ",", ")")

  def _magic_method(self, node: MethodInvocation, out: PrintOutput, negate: bool = False) -> None:
    """
    Prints a desugared operator call in operator syntax.

    Args:
        node: A call tagged `MagicMethodDesugar`.
        out: The output buffer.
        negate: Print the negated spelling (`not in`).

    Raises:
        MalformedDesugar: If the call does not have the promised shape.
    """
    name = node.name.name
    if node.select is None:
      raise MalformedDesugar(f"Desugared call '{name}' has no receiver")

    if name == "__call__" and not negate:
      self.space(out, node.prefix)
      self.visit(node.select.element, out)
      self.space(out, node.select.after)
      self.container(out, node.arguments, "(", ",", ")")
      return

    operator = operator_for_magic_method(name)
    if operator is None:
      raise MalformedDesugar(f"'{name}' is not a known operator method")
    if len(node.arguments.padded) != 1:
      raise MalformedDesugar(f"Operator method '{name}' takes exactly one argument, got {len(node.arguments.padded)}")
    if negate and not supports_negation(name):
      raise MalformedDesugar(f"Operator method '{name}' has no negated form")

    receiver = node.select.element
    argument = node.arguments.padded[0].element
    self.space(out, node.prefix)
    if reverses_operands(name):
      self.visit(argument.with_prefix(Space.EMPTY), out)
    else:
      self.visit(receiver, out)
    self.space(out, node.select.after)
    if negate:
      out.append("not")
      self.space(out, padding_or_default(node.markers, PaddingLocation.WITHIN_OPERATOR_NAME))
    out.append(operator)
    if reverses_operands(name):
      self.visit(receiver.with_prefix(argument.prefix), out)
    else:
      self.visit(argument, out)

  def _builtin(self, node: MethodInvocation, out: PrintOutput) -> None:
    """
    Prints a `__builtins__.set/tuple/slice(...)` call as literal syntax.

    A tuple holding exactly one element and no placeholder gets a forced
    trailing comma.

    Raises:
        MalformedDesugar: If the receiver, name or argument shape is wrong.
    """
    select = node.select
    if select is None or not isinstance(select.element, Identifier) or select.element.name != BUILTINS:
      raise MalformedDesugar("Builtin desugar must be called on __builtins__")

    kind = node.name.name
    self.space(out, node.prefix)
    if kind == "slice":
      self.padded(out, node.arguments.padded, ":")
      return
    if kind not in ("set", "tuple"):
      raise MalformedDesugar(f"Unknown builtin desugar '{kind}'")

    arguments = node.arguments.elements
    if len(arguments) != 1 or not isinstance(arguments[0], NewArray):
      raise MalformedDesugar(f"Builtin '{kind}' takes exactly one element list")
    slots = arguments[0].initializer.padded
    placeholders = sum(1 for slot in slots if isinstance(slot.element, Empty))
    if placeholders > 1:
      raise MalformedDesugar(f"Builtin '{kind}' has {placeholders} placeholder elements")

    delimiters: Tuple[str, str] = ("{", "}") if kind == "set" else ("(", ")")
    if kind == "tuple" and node.markers.has(OmitParentheses):
      delimiters = ("", "")
    out.append(delimiters[0])
    self.padded(out, slots, ",")
    if kind == "tuple" and len(slots) == 1 and placeholders == 0:
      out.append(",")
    out.append(delimiters[1])

  # --- Declarations ---

  def visit_Lambda(self, node: Lambda, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("lambda")
    self.container(out, node.parameters, "", ",", "")
    out.append(":")
    self.visit(node.body, out)

  def visit_Annotation(self, node: Annotation, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("@")
    self.visit(node.expression, out)

  def visit_MethodDeclaration(self, node: MethodDeclaration, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.padded(out, node.decorators, "")
    for modifier in node.modifiers:
      self.visit(modifier, out)
    self.visit(node.name, out)
    self.container(out, node.parameters, "(", ",", ")")
    self.visit(node.return_type, out)
    self.visit(node.body, out)

  def visit_ClassDeclaration(self, node: ClassDeclaration, out: PrintOutput, ctx: PrintContext) -> None:
    for base in node.bases.elements:
      if not isinstance(base, Empty) and not is_simple_name(base):
        raise StructuralPrecondition(f"Class base must be a simple name, got {type(base).__name__}")
    self.space(out, node.prefix)
    self.padded(out, node.decorators, "")
    self.visit(node.kind, out)
    self.visit(node.name, out)
    if not node.bases.markers.has(OmitParentheses):
      self.container(out, node.bases, "(", ",", ")")
    self.visit(node.body, out)

  # --- Try, with and except ---

  def visit_Try(self, node: Try, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    if node.resources is not None and node.resources.padded:
      out.append("with")
      self.space(out, node.resources.before)
      for i, slot in enumerate(node.resources.padded):
        if i:
          out.append(",")
        self._resource(slot.element, out)
        self.space(out, slot.after)
      self.visit(node.body, out)
      return

    out.append("try")
    statements = node.body.statements
    else_slot = None
    if statements and isinstance(statements[-1].element, Block):
      else_slot = statements[-1]
      statements = statements[:-1]
    self._block(node.body, out, statements)
    for catch in node.catches:
      self.visit(catch, out)
    if else_slot is not None:
      self.space(out, else_slot.after)
      out.append("else")
      self.visit(else_slot.element, out)
    if node.finally_part is not None:
      self.space(out, node.finally_part.before)
      out.append("finally")
      self.visit(node.finally_part.element, out)

  def _resource(self, resource: J, out: PrintOutput) -> None:
    if not isinstance(resource, TryResource) or not isinstance(resource.declaration, Assignment):
      raise StructuralPrecondition("A with-statement resource must be an assignment")
    assignment = resource.declaration
    self.space(out, resource.prefix)
    self.space(out, assignment.prefix)
    self.visit(assignment.value.element, out)
    if not isinstance(assignment.variable, Empty):
      self.space(out, assignment.value.before)
      out.append("as")
      self.visit(assignment.variable, out)

  def visit_TryResource(self, node: TryResource, out: PrintOutput, ctx: PrintContext) -> None:
    self._resource(node, out)

  def visit_Catch(self, node: Catch, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("except")
    parameter = node.parameter
    if parameter is not None:
      self.space(out, parameter.prefix)
      self.visit(parameter.type_expression, out)
      for slot in parameter.variables:
        variable = slot.element
        self.space(out, variable.prefix)
        out.append("as")
        self.visit(variable.name, out)
        self.space(out, slot.after)
    self.visit(node.body, out)

  # --- Match ---

  def visit_Switch(self, node: Switch, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("match")
    self.visit(node.selector, out)
    self.visit(node.cases, out)

  def visit_Case(self, node: Case, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    pattern = node.pattern
    if not isinstance(pattern, Identifier) or pattern.name != DEFAULT_CASE:
      out.append("case")
    self.visit(pattern, out)
    self.visit(node.body, out)

  # --- Imports ---

  def visit_Import(self, node: Import, out: PrintOutput, ctx: PrintContext) -> None:
    """
    Prints an import statement group, or a lone import.

    Called by the statement list for the last member of a group; the whole
    group is rendered here with the header taken from the first member.
    """
    group = ctx.group
    if group is not None and group.position_of(node) is not None:
      members = list(group.members)
      afters = [ctx.siblings[i].after for i in range(group.start, group.end)] if ctx.siblings else []
    else:
      members = [node]
      afters = []
    if len(afters) != len(members) - 1:
      afters = [Space.EMPTY] * (len(members) - 1)

    first = members[0]
    self.space(out, first.prefix)
    is_from = first.is_from
    if is_from:
      out.append("from")
      self.visit(first.qualid.target, out)
      self.space(out, first.qualid.name.before)
    out.append("import")

    parenthesized = is_from and import_needs_parentheses(members, afters)
    if parenthesized:
      self.space(out, padding_or_default(first.markers, PaddingLocation.IMPORT_PARENS_PREFIX))
      out.append("(")

    for i, member in enumerate(members):
      if i:
        out.append(",")
      self.visit(member.qualid.name.element if is_from else member.qualid.target, out)
      if member.alias is not None:
        self.space(out, member.alias.before)
        out.append("as")
        self.visit(member.alias.element, out)
      if i < len(afters):
        self.space(out, afters[i])

    trailing = members[-1].markers.find_first(TrailingComma)
    if trailing is not None:
      self.space(out, trailing.before)
      out.append(",")
    if parenthesized:
      self.space(out, padding_or_default(members[-1].markers, PaddingLocation.IMPORT_PARENS_SUFFIX))
      out.append(")")

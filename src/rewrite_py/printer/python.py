"""
Python Node Printer.

Prints the Python-specific node family; generic children are handed to the
generic printer and come back here for any Python node nested inside them.
"""

from typing import Dict, Tuple

from rewrite_py.printer.base import PrintContext, TreePrinter
from rewrite_py.printer.output import PrintOutput
from rewrite_py.tree.base import Py
from rewrite_py.tree.markers import OmitParentheses, PaddingLocation, padding_or_default
from rewrite_py.tree.python import (
  Assert,
  Await,
  CompilationUnit,
  Comprehension,
  ComprehensionClause,
  ComprehensionCondition,
  Del,
  DictLiteral,
  ErrorFrom,
  ExceptionType,
  ExpressionStatement,
  KeyValue,
  MatchCase,
  NamedExpression,
  Pass,
  Pattern,
  PatternKind,
  SpecialParameter,
  StarExpression,
  TypeHint,
  TypeHintedExpression,
  VariableScope,
  Yield,
)

# kind -> (opening text, separator, closing text)
PATTERN_SYNTAX: Dict[PatternKind, Tuple[str, str, str]] = {
  PatternKind.AS: ("", "as", ""),
  PatternKind.CAPTURE: ("", "", ""),
  PatternKind.DOUBLE_STAR: ("**", "", ""),
  PatternKind.GROUP: ("(", ",", ")"),
  PatternKind.KEY_VALUE: ("", ":", ""),
  PatternKind.KEYWORD: ("", "=", ""),
  PatternKind.LITERAL: ("", "", ""),
  PatternKind.MAPPING: ("{", ",", "}"),
  PatternKind.OR: ("", "|", ""),
  PatternKind.SEQUENCE: ("[", ",", "]"),
  PatternKind.STAR: ("*", "", ""),
  PatternKind.VALUE: ("", "", ""),
  PatternKind.WILDCARD: ("_", "", ""),
}


class PythonPrinter(TreePrinter):
  """
  Printer for the Python node family.
  """

  family = Py

  def visit_CompilationUnit(self, node: CompilationUnit, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.statements(out, node.statements)
    self.space(out, node.eof)

  def visit_ExpressionStatement(self, node: ExpressionStatement, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.expression, out)

  def visit_Pass(self, node: Pass, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("pass")

  def visit_KeyValue(self, node: KeyValue, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.key.element, out)
    self.space(out, node.key.after)
    out.append(":")
    self.visit(node.value, out)

  def visit_DictLiteral(self, node: DictLiteral, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    if not node.elements.padded:
      self.space(out, node.elements.before)
      out.append("{")
      self.space(out, padding_or_default(node.markers, PaddingLocation.EMPTY_INITIALIZER))
      out.append("}")
      return
    self.container(out, node.elements, "{", ",", "}")

  def visit_StarExpression(self, node: StarExpression, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append(node.kind.value)
    self.visit(node.expression, out)

  def visit_TypeHint(self, node: TypeHint, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append(node.kind.value)
    self.visit(node.expression, out)

  def visit_TypeHintedExpression(self, node: TypeHintedExpression, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.expression, out)
    self.visit(node.type_hint, out)

  def visit_SpecialParameter(self, node: SpecialParameter, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append(node.kind.value)

  # --- Comprehensions ---

  def visit_Comprehension(self, node: Comprehension, out: PrintOutput, ctx: PrintContext) -> None:
    delimited = not node.markers.has(OmitParentheses)
    self.space(out, node.prefix)
    if delimited:
      out.append(node.kind.open)
    self.visit(node.result, out)
    for clause in node.clauses:
      self.visit(clause, out)
    self.space(out, node.suffix)
    if delimited:
      out.append(node.kind.close)

  def visit_ComprehensionClause(self, node: ComprehensionClause, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("for")
    self.visit(node.iterator_variable, out)
    self.space(out, node.iterated_list.before)
    out.append("in")
    self.visit(node.iterated_list.element, out)
    for condition in node.conditions:
      self.visit(condition, out)

  def visit_ComprehensionCondition(self, node: ComprehensionCondition, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("if")
    self.visit(node.expression, out)

  # --- Expressions ---

  def visit_Await(self, node: Await, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("await")
    self.visit(node.expression, out)

  def visit_Yield(self, node: Yield, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("yield")
    if node.is_from:
      self.space(out, node.from_prefix)
      out.append("from")
    self.visit(node.value, out)

  def visit_NamedExpression(self, node: NamedExpression, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.target, out)
    self.space(out, node.value.before)
    out.append(":=")
    self.visit(node.value.element, out)

  def visit_ExceptionType(self, node: ExceptionType, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    if node.is_group:
      out.append("*")
    self.visit(node.expression, out)

  def visit_ErrorFrom(self, node: ErrorFrom, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.error, out)
    self.space(out, node.cause.before)
    out.append("from")
    self.visit(node.cause.element, out)

  # --- Small statements ---

  def visit_Assert(self, node: Assert, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("assert")
    self.visit(node.condition, out)
    if node.message is not None:
      self.space(out, node.message.before)
      out.append(",")
      self.visit(node.message.element, out)

  def visit_Del(self, node: Del, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append("del")
    self.padded(out, node.targets, ",")

  def visit_VariableScope(self, node: VariableScope, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    out.append(node.kind.value)
    self.padded(out, node.names, ",")

  # --- Patterns ---

  def visit_MatchCase(self, node: MatchCase, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    self.visit(node.pattern, out)
    if node.guard is not None:
      self.space(out, node.guard.before)
      out.append("if")
      self.visit(node.guard.element, out)

  def visit_Pattern(self, node: Pattern, out: PrintOutput, ctx: PrintContext) -> None:
    self.space(out, node.prefix)
    slots = node.children.padded
    if node.kind is PatternKind.CLASS:
      # `Cls(args)`: the first child is the class, the rest its arguments
      self.visit(slots[0].element, out)
      self.space(out, slots[0].after)
      out.append("(")
      self.padded(out, slots[1:], ",")
      out.append(")")
      return
    open_token, separator, close_token = PATTERN_SYNTAX[node.kind]
    self.container(out, node.children, open_token, separator, close_token)

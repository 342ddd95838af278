"""
Statement Building Mixin.

Maps libcst statements onto tree statements. Handles statement lists (with
per-statement recovery from unsupported constructs), simple statement lines
with `;` separators, and the compound statements: `if`, `while`, `for`,
`def`, `class`, `try`, `with` and `match`.

A compound statement's `Block` starts at its colon: `Block.prefix` is the
space before `:`, and `Block.end` holds the footer lines that libcst assigns
to the block after its last statement.
"""

from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple, Union

import libcst as cst
from libcst.metadata import CodeRange

from rewrite_py.builder.base import BaseBuilderMixin, lift, present
from rewrite_py.errors import UnsupportedConstruct
from rewrite_py.result import Diagnostic
from rewrite_py.tree.base import Expression, Statement, Tree
from rewrite_py.tree.generic import (
  Annotation,
  Assignment,
  AssignmentOperation,
  Block,
  Break,
  Case,
  Catch,
  ClassDeclaration,
  Continue,
  Else,
  Empty,
  ForEachControl,
  ForEachLoop,
  If,
  MethodDeclaration,
  Modifier,
  NamedVariable,
  Return,
  Switch,
  Throw,
  Try,
  TryResource,
  VariableDeclarations,
  WhileLoop,
)
from rewrite_py.tree.markers import Markers, OmitParentheses
from rewrite_py.tree.operators import AssignmentOperator
from rewrite_py.tree.padding import Container, LeftPadded, RightPadded
from rewrite_py.tree.python import (
  Assert,
  Del,
  ErrorFrom,
  ExceptionType,
  ExpressionStatement,
  MatchCase,
  Pass,
  ScopeKind,
  SpecialParameter,
  SpecialParameterKind,
  TypeHint,
  TypeHintedExpression,
  TypeHintKind,
  VariableScope,
)
from rewrite_py.tree.space import Space
from rewrite_py.utils.console import log_warning

AUGMENTED_OPERATORS: Dict[str, AssignmentOperator] = {
  "AddAssign": AssignmentOperator.ADD,
  "SubtractAssign": AssignmentOperator.SUBTRACT,
  "MultiplyAssign": AssignmentOperator.MULTIPLY,
  "DivideAssign": AssignmentOperator.DIVIDE,
  "FloorDivideAssign": AssignmentOperator.FLOOR_DIVIDE,
  "ModuloAssign": AssignmentOperator.MODULO,
  "PowerAssign": AssignmentOperator.POWER,
  "MatrixMultiplyAssign": AssignmentOperator.MATRIX_MULTIPLY,
  "LeftShiftAssign": AssignmentOperator.LEFT_SHIFT,
  "RightShiftAssign": AssignmentOperator.RIGHT_SHIFT,
  "BitAndAssign": AssignmentOperator.BIT_AND,
  "BitOrAssign": AssignmentOperator.BIT_OR,
  "BitXorAssign": AssignmentOperator.BIT_XOR,
}

Slots = List[RightPadded[Statement]]


class IfClause(NamedTuple):
  """
  One clause of a flat `if`/`elif`/`else` chain.

  Attributes:
      prefix: Space before the clause keyword.
      condition: The test, or None for the final `else`.
      block: The clause body.
  """

  prefix: Space
  condition: Optional[Expression]
  block: Block


def nest_if_chain(clauses: Sequence[IfClause], index: int = 0) -> If:
  """
  Re-nests a flat clause chain from `index` onward into `If`/`Else` nodes.

  `elif` becomes an `Else` whose body is an `If` without a prefix of its own;
  the `Else` keeps the space before `elif`.

  Args:
      clauses: The `if` clause, then any `elif` clauses, then an optional `else`.
      index: Position of the clause that becomes the returned `If`.

  Returns:
      If: The conditional for `clauses[index]` with everything after it nested.
  """
  clause = clauses[index]
  else_part = None
  if index + 1 < len(clauses):
    following = clauses[index + 1]
    if following.condition is None:
      else_part = Else(following.block, prefix=following.prefix)
    else:
      nested = nest_if_chain(clauses, index + 1)
      else_part = Else(nested.with_prefix(Space.EMPTY), prefix=following.prefix)
  return If(clause.condition, clause.block, else_part, prefix=clause.prefix)


def is_simple_name(node: cst.BaseExpression) -> bool:
  """True for a bare name or a dotted chain of names, without parentheses."""
  if getattr(node, "lpar", ()):
    return False
  if isinstance(node, cst.Name):
    return True
  return isinstance(node, cst.Attribute) and is_simple_name(node.value)


class StatementBuilderMixin(BaseBuilderMixin):
  """
  Mixin building tree statements from libcst statements.

  Relies on the host for expressions, patterns, imports and source positions.
  """

  # Interface requirements from host class (LstBuilder)
  diagnostics: List[Diagnostic]

  def _positions(self) -> Dict[cst.CSTNode, CodeRange]:
    """
    Abstract method: Resolves libcst positions for the parsed module.
    Must be implemented by the host builder.

    Returns:
        Mapping from libcst node to its code range.
    """
    raise NotImplementedError

  # --- Statement lists ---

  def _statement_list(self, statements: Sequence[cst.BaseStatement]) -> Tuple[Slots, Space]:
    """
    Builds a sequence of statements, skipping those that cannot be mapped.

    A skipped statement's text is dropped; the whole lines ahead of it are
    carried forward and merged into the next statement's prefix.

    Args:
        statements: Body of a module or indented block.

    Returns:
        Tuple[Slots, Space]: The built slots and any carried space left over
        after the last statement.

    Raises:
        UnsupportedConstruct: Only when the configuration is strict.
    """
    slots: Slots = []
    pending = Space.EMPTY
    for statement in statements:
      mark = self._cursor.pos
      try:
        built = self._statement(statement)
      except UnsupportedConstruct as error:
        if self.config.strict:
          raise
        self._cursor.pos = mark
        pending = pending.merge(self._skip_statement(statement, error))
        continue

      if not pending.is_empty:
        first = built[0].element
        built[0] = built[0].with_element(first.with_prefix(pending.merge(first.prefix)))
        pending = Space.EMPTY
      slots.extend(built)
    return slots, pending

  def _skip_statement(self, statement: cst.BaseStatement, error: UnsupportedConstruct) -> Space:
    prefix = self._ws().render()
    cut = max(prefix.rfind("\n"), prefix.rfind("\r")) + 1

    code_range = self._skip_past(statement)
    cursor = self._cursor
    if cursor.pos > 0 and cursor.source[cursor.pos - 1] not in "\r\n":
      cursor.trailing()
      while cursor.peek(";"):
        cursor.skip(";")
        cursor.trailing()

    self._report(self._diagnostic(code_range, error))
    return Space.build(prefix[:cut])

  def _skip_past(self, node: cst.CSTNode) -> CodeRange:
    code_range = self._positions()[node]
    cursor = self._cursor
    cursor.pos = max(cursor.pos, cursor.offset_of(code_range.end.line, code_range.end.column))
    return code_range

  def _diagnostic(self, code_range: CodeRange, error: UnsupportedConstruct) -> Diagnostic:
    return Diagnostic(
      line=code_range.start.line,
      column=code_range.start.column,
      kind=error.construct,
      message=str(error),
    )

  def _report(self, diagnostic: Diagnostic) -> None:
    self.diagnostics.append(diagnostic)
    if self.config.log_skipped:
      log_warning(f"Skipped statement at line {diagnostic.line}: {diagnostic.message}")

  def _statement(self, node: cst.BaseStatement) -> Slots:
    if isinstance(node, cst.SimpleStatementLine):
      return self._small_statements(node.body)

    handlers = {
      cst.If: self._if,
      cst.While: self._while,
      cst.For: self._for,
      cst.FunctionDef: self._function,
      cst.ClassDef: self._class,
      cst.Try: self._try,
      cst.TryStar: self._try,
      cst.With: self._with,
      cst.Match: self._match,
    }
    handler = handlers.get(type(node))
    if handler is None:
      raise UnsupportedConstruct(type(node).__name__, "statement kind is not supported", self._cursor.token_line())
    return [RightPadded(handler(node))]

  def _small_statements(self, body: Sequence[cst.BaseSmallStatement]) -> Slots:
    """
    Builds the `;`-separated statements of one line.

    Each statement's last slot ends with the space before its `;`, or with
    the rest of the line for the final statement. A trailing `;` yields an
    `Empty` statement carrying the rest of the line.

    An unsupported statement is dropped together with its `;` and its
    siblings are kept. When none of them can be mapped the first error
    propagates, so the enclosing list skips the line as a whole.
    """
    slots: Slots = []
    skipped: List[Diagnostic] = []
    failure: Optional[UnsupportedConstruct] = None
    carried: Optional[Space] = None
    start = self._cursor.pos
    for i, small in enumerate(body):
      last = i == len(body) - 1
      mark = self._cursor.pos
      try:
        built = self._small_statement(small)
      except UnsupportedConstruct as error:
        if self.config.strict or len(body) == 1:
          raise
        self._cursor.pos = mark
        failure = failure or error
        prefix = self._ws()
        skipped.append(self._diagnostic(self._skip_past(small), error))
        rest = self._cursor.trailing()
        if present(small.semicolon):
          self._cursor.skip(";")
          rest = self._cursor.trailing() if last else Space.EMPTY
        if not slots:
          # the next kept statement starts the line
          if carried is None:
            carried = prefix
        elif last:
          previous = slots[-1]
          slots[-1] = previous.with_after(previous.after.merge(rest))
        continue

      if carried is not None:
        first = built[0].element
        built[0] = built[0].with_element(first.with_prefix(carried))
        carried = None
      built[-1] = built[-1].with_after(self._cursor.trailing())
      slots.extend(built)
      if present(small.semicolon):
        self._cursor.skip(";")
        if last:
          slots.append(RightPadded(Empty(), self._cursor.trailing()))

    if failure is not None and not slots:
      self._cursor.pos = start
      raise failure
    for diagnostic in skipped:
      self._report(diagnostic)
    return slots

  def _small_statement(self, node: cst.BaseSmallStatement) -> Slots:
    if isinstance(node, (cst.Import, cst.ImportFrom)):
      return self._imports(node)

    handlers = {
      cst.Expr: self._expression_statement,
      cst.Assign: self._assign,
      cst.AnnAssign: self._annotated_assign,
      cst.AugAssign: self._augmented_assign,
      cst.Return: self._return,
      cst.Raise: self._raise,
      cst.Pass: self._pass,
      cst.Break: self._break,
      cst.Continue: self._continue,
      cst.Assert: self._assert,
      cst.Del: self._del,
      cst.Global: self._scope,
      cst.Nonlocal: self._scope,
    }
    handler = handlers.get(type(node))
    if handler is None:
      raise UnsupportedConstruct(type(node).__name__, "statement kind is not supported", self._cursor.token_line())
    return [RightPadded(handler(node))]

  # --- Small statements ---

  def _expression_statement(self, node: cst.Expr) -> ExpressionStatement:
    return ExpressionStatement(self._expression(node.value))

  def _assign(self, node: cst.Assign) -> Assignment:
    targets = []
    for target in node.targets:
      variable = self._expression(target.target)
      targets.append((variable, self._space_before("=")))
    value = self._expression(node.value)

    # a = b = 1 nests to the right
    for variable, before in reversed(targets):
      prefix, variable = lift(variable)
      value = Assignment(variable, LeftPadded(before, value), prefix=prefix)
    return value

  def _annotated_assign(self, node: cst.AnnAssign) -> Tree:
    prefix, target = lift(self._expression(node.target))
    colon = self._space_before(":")
    hint = TypeHint(TypeHintKind.VARIABLE_TYPE, self._expression(node.annotation.annotation), prefix=colon)
    hinted = TypeHintedExpression(target, hint)
    if node.value is None:
      return hinted.with_prefix(prefix)
    before = self._space_before("=")
    return Assignment(hinted, LeftPadded(before, self._expression(node.value)), prefix=prefix)

  def _augmented_assign(self, node: cst.AugAssign) -> AssignmentOperation:
    operator = AUGMENTED_OPERATORS.get(type(node.operator).__name__)
    if operator is None:
      raise UnsupportedConstruct(type(node.operator).__name__, "unrecognized operator", self._cursor.token_line())
    prefix, target = lift(self._expression(node.target))
    before = self._space_before(operator.value)
    value = self._expression(node.value)
    return AssignmentOperation(target, LeftPadded(before, operator), value, prefix=prefix)

  def _return(self, node: cst.Return) -> Return:
    prefix = self._space_before("return")
    value = self._expression(node.value) if node.value is not None else None
    return Return(value, prefix=prefix)

  def _raise(self, node: cst.Raise) -> Throw:
    prefix = self._space_before("raise")
    if node.exc is None:
      return Throw(prefix=prefix)
    exception = self._expression(node.exc)
    if node.cause is not None:
      error_prefix, exception = lift(exception)
      before = self._space_before("from")
      cause = LeftPadded(before, self._expression(node.cause.item))
      exception = ErrorFrom(exception, cause, prefix=error_prefix)
    return Throw(exception, prefix=prefix)

  def _pass(self, node: cst.Pass) -> Pass:
    return Pass(prefix=self._space_before("pass"))

  def _break(self, node: cst.Break) -> Break:
    return Break(prefix=self._space_before("break"))

  def _continue(self, node: cst.Continue) -> Continue:
    return Continue(prefix=self._space_before("continue"))

  def _assert(self, node: cst.Assert) -> Assert:
    prefix = self._space_before("assert")
    condition = self._expression(node.test)
    message = None
    if node.msg is not None:
      message = LeftPadded(self._space_before(","), self._expression(node.msg))
    return Assert(condition, message, prefix=prefix)

  def _del(self, node: cst.Del) -> Del:
    prefix = self._space_before("del")
    target = node.target
    if isinstance(target, cst.Tuple) and not target.lpar:
      slots = self._padded_list(target.elements, self._element, closed=False)
    else:
      slots = [RightPadded(self._expression(target))]
    return Del(tuple(slots), prefix=prefix)

  def _scope(self, node: Union[cst.Global, cst.Nonlocal]) -> VariableScope:
    kind = ScopeKind.GLOBAL if isinstance(node, cst.Global) else ScopeKind.NONLOCAL
    prefix = self._space_before(kind.value)
    slots = self._padded_list(node.names, lambda item: self._identifier(item.name), closed=False)
    return VariableScope(kind, tuple(slots), prefix=prefix)

  # --- Blocks ---

  def _block(self, suite: cst.BaseSuite) -> Block:
    prefix = self._space_before(":")
    if isinstance(suite, cst.SimpleStatementSuite):
      return Block(tuple(self._small_statements(suite.body)), prefix=prefix)

    slots, pending = self._statement_list(suite.body)
    end = pending.merge(self._cursor.lines(len(suite.footer)))
    return Block(tuple(slots), end, prefix=prefix)

  def _else(self, node: Optional[cst.Else]) -> Optional[Else]:
    if node is None:
      return None
    prefix = self._space_before("else")
    return Else(self._block(node.body), prefix=prefix)

  # --- Compound statements ---

  def _if(self, node: cst.If) -> If:
    clauses: List[IfClause] = []
    prefix = self._space_before("if")
    current: Optional[cst.If] = node
    while current is not None:
      condition = self._expression(current.test)
      clauses.append(IfClause(prefix, condition, self._block(current.body)))
      orelse = current.orelse
      current = None
      if isinstance(orelse, cst.If):
        prefix = self._space_before("elif")
        current = orelse
      elif isinstance(orelse, cst.Else):
        prefix = self._space_before("else")
        clauses.append(IfClause(prefix, None, self._block(orelse.body)))
    return nest_if_chain(clauses)

  def _while(self, node: cst.While) -> WhileLoop:
    prefix = self._space_before("while")
    condition = self._expression(node.test)
    body = self._block(node.body)
    return WhileLoop(condition, body, self._else(node.orelse), prefix=prefix)

  def _for(self, node: cst.For) -> ForEachLoop:
    if node.asynchronous is not None:
      raise UnsupportedConstruct("async for", line=self._cursor.token_line())
    prefix = self._space_before("for")
    variables = self._loop_target(node.target)
    iterable = LeftPadded(self._space_before("in"), self._expression(node.iter))
    control = ForEachControl(variables, iterable)
    body = self._block(node.body)
    return ForEachLoop(control, body, self._else(node.orelse), prefix=prefix)

  def _loop_target(self, target: cst.BaseAssignTargetExpression) -> VariableDeclarations:
    """
    Builds a loop target as named variables.

    `for a, b in ...` yields one variable per name; any other target (a
    parenthesized or starred tuple, an attribute, a subscript) is a single
    variable holding that expression.
    """

    def variable(expression: Expression) -> NamedVariable:
      prefix, name = lift(expression)
      return NamedVariable(name, prefix=prefix)

    unpacked = (
      isinstance(target, cst.Tuple)
      and not target.lpar
      and not present(target.elements[-1].comma)
      and not any(isinstance(e, cst.StarredElement) for e in target.elements)
    )
    if unpacked:
      slots = self._padded_list(target.elements, lambda e: variable(self._expression(e.value)), closed=False)
    else:
      slots = [RightPadded(variable(self._expression(target)))]

    prefix, first = lift(slots[0].element)
    slots[0] = slots[0].with_element(first)
    return VariableDeclarations(tuple(slots), prefix=prefix)

  def _decorators(self, decorators: Sequence[cst.Decorator]) -> List[RightPadded[Annotation]]:
    built = []
    for decorator in decorators:
      prefix = self._space_before("@")
      annotation = Annotation(self._expression(decorator.decorator), prefix=prefix)
      built.append(RightPadded(annotation, self._cursor.trailing()))
    return built

  def _function(self, node: cst.FunctionDef) -> MethodDeclaration:
    decorators = self._decorators(node.decorators)
    modifiers = []
    if node.asynchronous is not None:
      modifiers.append(Modifier("async", prefix=self._space_before("async")))
    modifiers.append(Modifier("def", prefix=self._space_before("def")))
    name = self._identifier(node.name)
    if getattr(node, "type_parameters", None) is not None:
      raise UnsupportedConstruct("type parameters", line=self._cursor.token_line())

    before = self._space_before("(")
    slots = self._parameters(node.params)
    self._cursor.skip(")")
    parameters = Container(before, tuple(slots))

    return_type = None
    if node.returns is not None:
      arrow = self._space_before("->")
      return_type = TypeHint(TypeHintKind.RETURN_TYPE, self._expression(node.returns.annotation), prefix=arrow)
    body = self._block(node.body)

    if decorators:
      prefix, first = lift(decorators[0].element)
      decorators[0] = decorators[0].with_element(first)
    else:
      prefix, first = lift(modifiers[0])
      modifiers[0] = first
    return MethodDeclaration(
      tuple(modifiers),
      name,
      parameters,
      body,
      decorators=tuple(decorators),
      return_type=return_type,
      prefix=prefix,
    )

  def _parameters(self, params: cst.Parameters) -> List[RightPadded[Tree]]:
    """
    Builds a parameter list in source order.

    Ordinary parameters become single-variable declarations; `*args` and
    `**kwargs` carry a `SpecialParameter` as their type expression; a bare
    `*` or `/` is a `SpecialParameter` on its own.

    Args:
        params: The libcst parameters of a function or lambda.

    Returns:
        List[RightPadded]: One slot per parameter, or a single `Empty` slot
        holding the space before the closing delimiter.
    """
    items: List[cst.CSTNode] = list(params.posonly_params)
    if params.posonly_ind is not None and present(params.posonly_ind):
      items.append(params.posonly_ind)
    items.extend(params.params)
    if present(params.star_arg):
      items.append(params.star_arg)
    items.extend(params.kwonly_params)
    if params.star_kwarg is not None:
      items.append(params.star_kwarg)
    return self._padded_list(items, self._parameter)

  def _parameter(self, node: cst.CSTNode) -> Tree:
    if isinstance(node, cst.ParamSlash):
      return SpecialParameter(SpecialParameterKind.POSITIONAL_ONLY, prefix=self._space_before("/"))
    if isinstance(node, cst.ParamStar):
      return SpecialParameter(SpecialParameterKind.ARGS, prefix=self._space_before("*"))

    special = None
    star = node.star if isinstance(node.star, str) else ""
    if star:
      kind = SpecialParameterKind.ARGS if star == "*" else SpecialParameterKind.KWARGS
      special = SpecialParameter(kind, prefix=self._space_before(star))

    name = self._identifier(node.name)
    type_hint = None
    if node.annotation is not None:
      colon = self._space_before(":")
      type_hint = TypeHint(TypeHintKind.VARIABLE_TYPE, self._expression(node.annotation.annotation), prefix=colon)
    initializer = None
    if node.default is not None:
      initializer = LeftPadded(self._space_before("="), self._expression(node.default))

    if special is not None:
      prefix, special = lift(special)
    else:
      prefix, name = lift(name)
    variable = NamedVariable(name, type_hint, initializer)
    return VariableDeclarations((RightPadded(variable),), special, prefix=prefix)

  def _class(self, node: cst.ClassDef) -> ClassDeclaration:
    for base in node.bases:
      if base.keyword is not None or base.star or not is_simple_name(base.value):
        raise UnsupportedConstruct("class base", "only plain and dotted names are supported", self._cursor.token_line())
    if node.keywords:
      raise UnsupportedConstruct("class keyword", line=self._cursor.token_line())
    if getattr(node, "type_parameters", None) is not None:
      raise UnsupportedConstruct("type parameters", line=self._cursor.token_line())

    decorators = self._decorators(node.decorators)
    kind = Modifier("class", prefix=self._space_before("class"))
    name = self._identifier(node.name)

    if present(node.lpar):
      before = self._space_before("(")
      slots = self._padded_list(node.bases, lambda arg: self._expression(arg.value))
      self._cursor.skip(")")
      bases = Container(before, tuple(slots))
    else:
      bases = Container(markers=Markers.EMPTY.add(OmitParentheses()))
    body = self._block(node.body)

    if decorators:
      prefix, first = lift(decorators[0].element)
      decorators[0] = decorators[0].with_element(first)
    else:
      prefix, kind = lift(kind)
    return ClassDeclaration(kind, name, bases, body, tuple(decorators), prefix=prefix)

  def _try(self, node: Union[cst.Try, cst.TryStar]) -> Try:
    prefix = self._space_before("try")
    body = self._block(node.body)
    is_group = isinstance(node, cst.TryStar)
    catches = tuple(self._catch(handler, is_group) for handler in node.handlers)

    if node.orelse is not None:
      before = self._space_before("else")
      else_block = self._block(node.orelse.body)
      # the else clause rides along as a trailing Block in the body
      body = Block(body.statements + (RightPadded(else_block, before),), body.end, prefix=body.prefix)

    finally_part = None
    if node.finalbody is not None:
      before = self._space_before("finally")
      finally_part = LeftPadded(before, self._block(node.finalbody.body))
    return Try(body, catches, finally_part=finally_part, prefix=prefix)

  def _catch(self, handler: Union[cst.ExceptHandler, cst.ExceptStarHandler], is_group: bool) -> Catch:
    prefix = self._space_before("except")
    parameter = None
    if handler.type is not None:
      type_prefix = self._space_before("*") if is_group else Space.EMPTY
      exception = ExceptionType(self._expression(handler.type), is_group, prefix=type_prefix)
      variables: Tuple[RightPadded[NamedVariable], ...] = ()
      if handler.name is not None:
        before = self._space_before("as")
        alias = self._expression(handler.name.name)
        variables = (RightPadded(NamedVariable(alias, prefix=before)),)
      parameter = VariableDeclarations(variables, exception)
    return Catch(self._block(handler.body), parameter, prefix=prefix)

  def _with(self, node: cst.With) -> Try:
    if node.asynchronous is not None:
      raise UnsupportedConstruct("async with", line=self._cursor.token_line())
    if present(node.lpar):
      raise UnsupportedConstruct("parenthesized with items", line=self._cursor.token_line())

    prefix = self._space_before("with")
    slots = self._padded_list(node.items, self._with_item, closed=False)
    body = self._block(node.body)
    return Try(body, resources=Container(Space.EMPTY, tuple(slots)), prefix=prefix)

  def _with_item(self, item: cst.WithItem) -> TryResource:
    value = self._expression(item.item)
    variable: Expression = Empty()
    before = Space.EMPTY
    if item.asname is not None:
      before = self._space_before("as")
      variable = self._expression(item.asname.name)
    return TryResource(Assignment(variable, LeftPadded(before, value)))

  def _match(self, node: cst.Match) -> Switch:
    prefix = self._space_before("match")
    selector = self._expression(node.subject)
    colon = self._space_before(":")
    cases = []
    for case in node.cases:
      case_prefix = self._space_before("case")
      pattern = self._pattern(case.pattern)
      guard = None
      if case.guard is not None:
        guard = LeftPadded(self._space_before("if"), self._expression(case.guard))
      match_case = MatchCase(pattern, guard)
      cases.append(RightPadded(Case(match_case, self._block(case.body), prefix=case_prefix)))
    end = self._cursor.lines(len(node.footer))
    return Switch(selector, Block(tuple(cases), end, prefix=colon), prefix=prefix)

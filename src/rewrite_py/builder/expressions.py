"""
Expression Building Mixin.

Maps libcst expressions onto tree expressions while consuming their source
text through the cursor. Python-only shapes are desugared here:

1.  **Operators**: `a + b` becomes `a.__add__(b)` and `a in b` becomes
    `b.__contains__(a)`, both tagged `MagicMethodDesugar`. `not in` wraps the
    membership call in a tagged `not`.
2.  **Builtin Literals**: sets, tuples and slices become
    `__builtins__.set/tuple/slice(...)` tagged `BuiltinDesugar`; a tuple
    without parentheses is additionally tagged `OmitParentheses`.
3.  **Calls on Expressions**: calling anything other than a name or an
    attribute becomes `callee.__call__(...)`.
"""

from typing import Dict, List, Union

import libcst as cst

from rewrite_py.builder.base import BaseBuilderMixin, lift, present
from rewrite_py.errors import UnsupportedConstruct
from rewrite_py.tree.base import Expression
from rewrite_py.tree.generic import (
  Assignment,
  ArrayAccess,
  ArrayDimension,
  Binary,
  Empty,
  FieldAccess,
  Identifier,
  Lambda,
  Literal,
  LiteralKind,
  MethodInvocation,
  NewArray,
  Parentheses,
  Ternary,
  Unary,
)
from rewrite_py.tree.markers import (
  BuiltinDesugar,
  MagicMethodDesugar,
  Markers,
  OmitParentheses,
  PaddingLocation,
  StringFlags,
  set_padding,
)
from rewrite_py.tree.operators import (
  BinaryOperator,
  UnaryOperator,
  magic_method_for_operator,
  reverses_operands,
)
from rewrite_py.tree.padding import Container, LeftPadded, RightPadded
from rewrite_py.tree.python import (
  Await,
  Comprehension,
  ComprehensionClause,
  ComprehensionCondition,
  ComprehensionKind,
  DictLiteral,
  KeyValue,
  NamedExpression,
  StarExpression,
  StarKind,
  Yield,
)
from rewrite_py.tree.space import Space

BINARY_SPELLINGS: Dict[str, str] = {
  "Add": "+",
  "Subtract": "-",
  "Multiply": "*",
  "Divide": "/",
  "FloorDivide": "//",
  "Modulo": "%",
  "Power": "**",
  "MatrixMultiply": "@",
  "LeftShift": "<<",
  "RightShift": ">>",
  "BitAnd": "&",
  "BitOr": "|",
  "BitXor": "^",
}

COMPARISON_SPELLINGS: Dict[str, str] = {
  "Equal": "==",
  "NotEqual": "!=",
  "LessThan": "<",
  "LessThanEqual": "<=",
  "GreaterThan": ">",
  "GreaterThanEqual": ">=",
  "In": "in",
}

UNARY_OPERATORS: Dict[str, UnaryOperator] = {
  "Not": UnaryOperator.NOT,
  "Minus": UnaryOperator.NEGATIVE,
  "Plus": UnaryOperator.POSITIVE,
  "BitInvert": UnaryOperator.COMPLEMENT,
}

_KEYWORD_LITERALS = {
  "True": LiteralKind.BOOLEAN,
  "False": LiteralKind.BOOLEAN,
  "None": LiteralKind.NONE,
}

BUILTINS = "__builtins__"


def spelling_of(table: Dict[str, str], operator: cst.CSTNode) -> str:
  """
  Looks up an operator token by its libcst class.

  Raises:
      UnsupportedConstruct: For operator classes missing from `table`.
  """
  name = type(operator).__name__
  if name not in table:
    raise UnsupportedConstruct(name, "unrecognized operator")
  return table[name]


def builtin_call(
  name: str,
  arguments: Container[Expression],
  prefix: Space = Space.EMPTY,
  markers: Markers = Markers.EMPTY,
) -> MethodInvocation:
  """Creates `__builtins__.<name>(...)` tagged as a builtin desugar."""
  return MethodInvocation(
    name=Identifier(name),
    arguments=arguments,
    select=RightPadded(Identifier(BUILTINS)),
    prefix=prefix,
    markers=markers.add(BuiltinDesugar()),
  )


def collection_call(
  name: str,
  slots: List[RightPadded[Expression]],
  prefix: Space = Space.EMPTY,
  markers: Markers = Markers.EMPTY,
) -> MethodInvocation:
  """Creates a set/tuple desugar whose single argument is the element list."""
  elements = NewArray(Container(Space.EMPTY, tuple(slots)))
  return builtin_call(name, Container(Space.EMPTY, (RightPadded(elements),)), prefix, markers)


def magic_call(left: Expression, before: Space, right: Expression, name: str) -> MethodInvocation:
  """
  Desugars `left <op> right` into a magic method call.

  `select.after` always keeps the space before the operator and the
  argument's prefix the space after it, whichever operand is the receiver.

  Args:
      left: The left operand as it appears in the source.
      before: Space between the left operand and the operator.
      right: The right operand as it appears in the source.
      name: The magic method name.

  Returns:
      MethodInvocation: The tagged call.
  """
  prefix, left = lift(left)
  if reverses_operands(name):
    right_prefix, right = lift(right)
    receiver, argument = right, left.with_prefix(right_prefix)
  else:
    receiver, argument = left, right
  return MethodInvocation(
    name=Identifier(name),
    arguments=Container(Space.EMPTY, (RightPadded(argument),)),
    select=RightPadded(receiver, before),
    prefix=prefix,
    markers=Markers.EMPTY.add(MagicMethodDesugar()),
  )


class ExpressionBuilderMixin(BaseBuilderMixin):
  """
  Mixin building tree expressions from libcst expressions.
  """

  def _expression(self, node: cst.BaseExpression) -> Expression:
    lpar = getattr(node, "lpar", ())
    # tuples and generators own their innermost pair of parentheses
    owned = 1 if lpar and isinstance(node, (cst.Tuple, cst.GeneratorExp)) else 0
    prefixes = [self._space_before("(") for _ in range(len(lpar) - owned)]

    expression = self._dispatch_expression(node)

    for prefix in reversed(prefixes):
      after = self._space_before(")")
      expression = Parentheses(RightPadded(expression, after), prefix=prefix)
    return expression

  def _dispatch_expression(self, node: cst.BaseExpression) -> Expression:
    handlers = {
      cst.Name: self._name,
      cst.Attribute: self._attribute,
      cst.Integer: self._number,
      cst.Float: self._number,
      cst.Imaginary: self._number,
      cst.SimpleString: self._simple_string,
      cst.FormattedString: self._formatted_string,
      cst.ConcatenatedString: self._concatenated_string,
      cst.Ellipsis: self._ellipsis,
      cst.Call: self._call,
      cst.Subscript: self._subscript,
      cst.Tuple: self._tuple,
      cst.List: self._list,
      cst.Set: self._set,
      cst.Dict: self._dict,
      cst.BinaryOperation: self._binary_operation,
      cst.BooleanOperation: self._boolean_operation,
      cst.Comparison: self._comparison,
      cst.UnaryOperation: self._unary_operation,
      cst.IfExp: self._ternary,
      cst.Lambda: self._lambda,
      cst.Await: self._await,
      cst.Yield: self._yield,
      cst.NamedExpr: self._named_expression,
      cst.ListComp: self._comprehension,
      cst.SetComp: self._comprehension,
      cst.DictComp: self._comprehension,
      cst.GeneratorExp: self._comprehension,
      cst.StarredElement: self._element,
    }
    handler = handlers.get(type(node))
    if handler is None:
      raise UnsupportedConstruct(type(node).__name__, "expression kind is not supported", self._cursor.token_line())
    return handler(node)

  # --- Atoms ---

  def _name(self, node: cst.Name) -> Expression:
    identifier = self._identifier(node)
    kind = _KEYWORD_LITERALS.get(node.value)
    if kind is not None:
      return Literal(node.value, kind, prefix=identifier.prefix)
    return identifier

  def _number(self, node: Union[cst.Integer, cst.Float, cst.Imaginary]) -> Literal:
    prefix = self._ws()
    self._cursor.skip(node.value)
    return Literal(node.value, LiteralKind.NUMBER, prefix=prefix)

  def _simple_string(self, node: cst.SimpleString) -> Literal:
    prefix = self._ws()
    self._cursor.skip(node.value)
    return Literal(node.value, LiteralKind.STRING, prefix=prefix)

  def _formatted_string_text(self, node: cst.FormattedString) -> str:
    text = cst.Module(body=[]).code_for_node(node.with_changes(lpar=(), rpar=()))
    self._cursor.skip(text)
    return text

  def _formatted_string(self, node: cst.FormattedString) -> Literal:
    prefix = self._ws()
    text = self._formatted_string_text(node)
    markers = Markers.EMPTY.add(StringFlags(formatted=True))
    return Literal(text, LiteralKind.STRING, prefix=prefix, markers=markers)

  def _concatenated_string(self, node: cst.ConcatenatedString) -> Literal:
    prefix = self._ws()
    start = self._cursor.pos
    formatted = False
    part: cst.BaseExpression = node
    while True:
      left = part.left if isinstance(part, cst.ConcatenatedString) else part
      if isinstance(left, cst.FormattedString):
        formatted = True
        self._formatted_string_text(left)
      else:
        self._cursor.skip(left.value)
      if not isinstance(part, cst.ConcatenatedString):
        break
      between = self._ws()
      if between.comments:
        raise UnsupportedConstruct("ConcatenatedString", "comment between string parts", self._cursor.token_line())
      part = part.right

    text = self._cursor.source[start : self._cursor.pos]
    markers = Markers.EMPTY.add(StringFlags(formatted=formatted, concatenated=True))
    return Literal(text, LiteralKind.STRING, prefix=prefix, markers=markers)

  def _ellipsis(self, node: cst.Ellipsis) -> Literal:
    return Literal("...", LiteralKind.ELLIPSIS, prefix=self._space_before("..."))

  def _attribute(self, node: cst.Attribute) -> FieldAccess:
    prefix, target = lift(self._expression(node.value))
    before = self._space_before(".")
    name = self._identifier(node.attr)
    return FieldAccess(target, LeftPadded(before, name), prefix=prefix)

  # --- Calls and subscripts ---

  def _call(self, node: cst.Call) -> MethodInvocation:
    func = node.func
    markers = Markers.EMPTY
    select = None
    if isinstance(func, cst.Name) and not func.lpar:
      name = self._identifier(func)
      prefix, name = lift(name)
    elif isinstance(func, cst.Attribute) and not func.lpar:
      prefix, target = lift(self._expression(func.value))
      select = RightPadded(target, self._space_before("."))
      name = self._identifier(func.attr)
    else:
      prefix, callee = lift(self._expression(func))
      select = RightPadded(callee)
      name = Identifier("__call__")
      markers = markers.add(MagicMethodDesugar())

    before = self._space_before("(")
    slots = self._padded_list(node.args, self._argument)
    self._cursor.skip(")")
    return MethodInvocation(name, Container(before, tuple(slots)), select, prefix=prefix, markers=markers)

  def _argument(self, arg: cst.Arg) -> Expression:
    if arg.star:
      prefix = self._space_before(arg.star)
      kind = StarKind.LIST if arg.star == "*" else StarKind.DICT
      return StarExpression(kind, self._expression(arg.value), prefix=prefix)
    if arg.keyword is not None:
      prefix, keyword = lift(self._identifier(arg.keyword))
      before = self._space_before("=")
      return Assignment(keyword, LeftPadded(before, self._expression(arg.value)), prefix=prefix)
    return self._expression(arg.value)

  def _subscript(self, node: cst.Subscript) -> ArrayAccess:
    prefix, indexed = lift(self._expression(node.value))
    dimension_prefix = self._space_before("[")
    elements = node.slice
    if len(elements) == 1 and not present(elements[0].comma):
      index = self._slice_element(elements[0].slice)
    else:
      slots = self._padded_list(elements, lambda e: self._slice_element(e.slice), closed=False)
      index_prefix, first = lift(slots[0].element)
      slots[0] = slots[0].with_element(first)
      index = collection_call("tuple", slots, index_prefix, Markers.EMPTY.add(OmitParentheses()))
    after = self._ws()
    self._cursor.skip("]")
    return ArrayAccess(indexed, ArrayDimension(RightPadded(index, after), prefix=dimension_prefix), prefix=prefix)

  def _slice_element(self, node: cst.BaseSlice) -> Expression:
    if isinstance(node, cst.Index):
      if node.star:
        prefix = self._space_before("*")
        return StarExpression(StarKind.LIST, self._expression(node.value), prefix=prefix)
      return self._expression(node.value)
    return self._slice(node)

  def _slice(self, node: cst.Slice) -> MethodInvocation:
    def bound(value):
      return self._expression(value) if value is not None else Empty()

    slots = [RightPadded(bound(node.lower), self._space_before(":"))]
    upper = bound(node.upper)
    if present(node.second_colon):
      slots.append(RightPadded(upper, self._space_before(":")))
      slots.append(RightPadded(bound(node.step)))
    else:
      slots.append(RightPadded(upper))

    prefix, first = lift(slots[0].element)
    slots[0] = slots[0].with_element(first)
    return builtin_call("slice", Container(Space.EMPTY, tuple(slots)), prefix)

  # --- Displays ---

  def _element(self, node: cst.BaseElement) -> Expression:
    if isinstance(node, cst.StarredElement):
      prefix = self._space_before("*")
      return StarExpression(StarKind.LIST, self._expression(node.value), prefix=prefix)
    return self._expression(node.value)

  def _tuple(self, node: cst.Tuple) -> MethodInvocation:
    if node.lpar:
      prefix = self._space_before("(")
      slots = self._padded_list(node.elements, self._element)
      self._cursor.skip(")")
      return collection_call("tuple", slots, prefix)

    slots = self._padded_list(node.elements, self._element, closed=False)
    prefix, first = lift(slots[0].element)
    slots[0] = slots[0].with_element(first)
    return collection_call("tuple", slots, prefix, Markers.EMPTY.add(OmitParentheses()))

  def _list(self, node: cst.List) -> NewArray:
    prefix = self._space_before("[")
    slots = self._padded_list(node.elements, self._element)
    self._cursor.skip("]")
    return NewArray(Container(Space.EMPTY, tuple(slots)), prefix=prefix)

  def _set(self, node: cst.Set) -> MethodInvocation:
    prefix = self._space_before("{")
    slots = self._padded_list(node.elements, self._element)
    self._cursor.skip("}")
    return collection_call("set", slots, prefix)

  def _dict(self, node: cst.Dict) -> DictLiteral:
    prefix = self._space_before("{")
    if not node.elements:
      interior = self._ws()
      self._cursor.skip("}")
      markers = set_padding(Markers.EMPTY, PaddingLocation.EMPTY_INITIALIZER, interior)
      return DictLiteral(Container(), prefix=prefix, markers=markers)

    slots = self._padded_list(node.elements, self._dict_element)
    self._cursor.skip("}")
    return DictLiteral(Container(Space.EMPTY, tuple(slots)), prefix=prefix)

  def _dict_element(self, node: cst.BaseDictElement) -> Expression:
    if isinstance(node, cst.StarredDictElement):
      prefix = self._space_before("**")
      return StarExpression(StarKind.DICT, self._expression(node.value), prefix=prefix)
    prefix, key = lift(self._expression(node.key))
    before = self._space_before(":")
    return KeyValue(RightPadded(key, before), self._expression(node.value), prefix=prefix)

  # --- Operators ---

  def _binary_operation(self, node: cst.BinaryOperation) -> MethodInvocation:
    left = self._expression(node.left)
    spelling = spelling_of(BINARY_SPELLINGS, node.operator)
    before = self._space_before(spelling)
    right = self._expression(node.right)
    return magic_call(left, before, right, magic_method_for_operator(spelling))

  def _boolean_operation(self, node: cst.BooleanOperation) -> Binary:
    prefix, left = lift(self._expression(node.left))
    operator = BinaryOperator.AND if isinstance(node.operator, cst.And) else BinaryOperator.OR
    before = self._space_before(operator.value)
    right = self._expression(node.right)
    return Binary(left, LeftPadded(before, operator), right, prefix=prefix)

  def _comparison(self, node: cst.Comparison) -> Expression:
    result = self._expression(node.left)
    # chained comparisons nest to the left
    for target in node.comparisons:
      result = self._comparison_step(result, target)
    return result

  def _comparison_step(self, left: Expression, target: cst.ComparisonTarget) -> Expression:
    operator = target.operator
    if isinstance(operator, (cst.Is, cst.IsNot)):
      prefix, left = lift(left)
      before = self._space_before("is")
      markers = Markers.EMPTY
      kind = BinaryOperator.IS
      if isinstance(operator, cst.IsNot):
        kind = BinaryOperator.IS_NOT
        markers = set_padding(markers, PaddingLocation.WITHIN_OPERATOR_NAME, self._space_before("not"))
      right = self._expression(target.comparator)
      return Binary(left, LeftPadded(before, kind), right, prefix=prefix, markers=markers)

    if isinstance(operator, cst.NotIn):
      before = self._space_before("not")
      within = self._space_before("in")
      right = self._expression(target.comparator)
      call = magic_call(left, before, right, "__contains__")
      call = call.with_markers(set_padding(call.markers, PaddingLocation.WITHIN_OPERATOR_NAME, within))
      return Unary(UnaryOperator.NOT, call, markers=Markers.EMPTY.add(MagicMethodDesugar()))

    spelling = spelling_of(COMPARISON_SPELLINGS, operator)
    before = self._space_before(spelling)
    right = self._expression(target.comparator)
    return magic_call(left, before, right, magic_method_for_operator(spelling))

  def _unary_operation(self, node: cst.UnaryOperation) -> Unary:
    operator = UNARY_OPERATORS.get(type(node.operator).__name__)
    if operator is None:
      raise UnsupportedConstruct(type(node.operator).__name__, "unrecognized operator", self._cursor.token_line())
    prefix = self._space_before(operator.value)
    return Unary(operator, self._expression(node.expression), prefix=prefix)

  def _ternary(self, node: cst.IfExp) -> Ternary:
    prefix, true_part = lift(self._expression(node.body))
    condition = LeftPadded(self._space_before("if"), self._expression(node.test))
    false_part = LeftPadded(self._space_before("else"), self._expression(node.orelse))
    return Ternary(true_part, condition, false_part, prefix=prefix)

  def _named_expression(self, node: cst.NamedExpr) -> NamedExpression:
    prefix, target = lift(self._expression(node.target))
    before = self._space_before(":=")
    return NamedExpression(target, LeftPadded(before, self._expression(node.value)), prefix=prefix)

  # --- Functions and generators ---

  def _lambda(self, node: cst.Lambda) -> Lambda:
    prefix = self._space_before("lambda")
    slots = self._parameters(node.params)
    self._cursor.skip(":")
    parameters = Container(Space.EMPTY, tuple(slots), Markers.EMPTY.add(OmitParentheses()))
    return Lambda(parameters, self._expression(node.body), prefix=prefix)

  def _await(self, node: cst.Await) -> Await:
    prefix = self._space_before("await")
    return Await(self._expression(node.expression), prefix=prefix)

  def _yield(self, node: cst.Yield) -> Yield:
    prefix = self._space_before("yield")
    if isinstance(node.value, cst.From):
      from_prefix = self._space_before("from")
      return Yield(self._expression(node.value.item), from_prefix, prefix=prefix)
    value = self._expression(node.value) if node.value is not None else None
    return Yield(value, prefix=prefix)

  def _comprehension(self, node: cst.BaseComp) -> Comprehension:
    kinds = {
      cst.ListComp: ComprehensionKind.LIST,
      cst.SetComp: ComprehensionKind.SET,
      cst.DictComp: ComprehensionKind.DICT,
      cst.GeneratorExp: ComprehensionKind.GENERATOR,
    }
    kind = kinds[type(node)]
    delimited = kind is not ComprehensionKind.GENERATOR or bool(node.lpar)
    prefix = self._space_before(kind.open) if delimited else Space.EMPTY

    if isinstance(node, cst.DictComp):
      key_prefix, key = lift(self._expression(node.key))
      before = self._space_before(":")
      result: Expression = KeyValue(RightPadded(key, before), self._expression(node.value), prefix=key_prefix)
    else:
      result = self._expression(node.elt)

    markers = Markers.EMPTY
    if not delimited:
      prefix, result = lift(result)
      markers = markers.add(OmitParentheses())

    clauses = []
    for_in = node.for_in
    while for_in is not None:
      clauses.append(self._comprehension_clause(for_in))
      for_in = for_in.inner_for_in

    suffix = Space.EMPTY
    if delimited:
      suffix = self._ws()
      self._cursor.skip(kind.close)
    return Comprehension(kind, result, tuple(clauses), suffix, prefix=prefix, markers=markers)

  def _comprehension_clause(self, node: cst.CompFor) -> ComprehensionClause:
    if node.asynchronous is not None:
      raise UnsupportedConstruct("async comprehension", line=self._cursor.token_line())
    prefix = self._space_before("for")
    variable = self._expression(node.target)
    iterated = LeftPadded(self._space_before("in"), self._expression(node.iter))
    conditions = []
    for condition in node.ifs:
      if_prefix = self._space_before("if")
      conditions.append(ComprehensionCondition(self._expression(condition.test), prefix=if_prefix))
    return ComprehensionClause(variable, iterated, tuple(conditions), prefix=prefix)

"""
Tests for expression building and desugaring.

Verifies:
1.  Calls: positional/keyword arguments, method selects, empty argument lists
    and calls on arbitrary expressions.
2.  Operators become tagged magic method calls; membership swaps operands.
3.  Sets, tuples and slices become tagged `__builtins__` calls.
4.  Unsupported nested expressions fail the whole statement.
"""

import pytest

from rewrite_py.builder import LstBuilder
from rewrite_py.config import RuntimeConfig
from rewrite_py.errors import UnsupportedConstruct
from rewrite_py.tree import (
  Assignment,
  Binary,
  BinaryOperator,
  BuiltinDesugar,
  Comprehension,
  ComprehensionKind,
  DictLiteral,
  Empty,
  Identifier,
  Literal,
  LiteralKind,
  MagicMethodDesugar,
  MethodInvocation,
  NewArray,
  OmitParentheses,
  Parentheses,
  Space,
  StarExpression,
  StarKind,
  StringFlags,
  Unary,
  UnaryOperator,
)
from rewrite_py.tree.markers import PaddingLocation, padding_of


@pytest.fixture
def expression(build):
  """Builds a single expression statement and returns its expression."""

  def _expression(source: str):
    unit = build(source)
    return unit.statements[0].element.expression

  return _expression


def test_call_arguments(expression):
  call = expression("print(1, 2, a=1, b=2)")
  assert isinstance(call, MethodInvocation)
  assert call.name.name == "print"
  assert call.select is None

  arguments = call.arguments.elements
  assert len(arguments) == 4
  assert [type(a) for a in arguments] == [Literal, Literal, Assignment, Assignment]
  assert arguments[2].variable.name == "a"
  assert arguments[3].value.element.value_source == "2"


def test_keyword_argument_spacing(expression):
  keyword = expression("f(a =1)").arguments.elements[0]
  assert keyword.value.before == Space(" ")
  assert keyword.value.element.prefix == Space.EMPTY


def test_method_call_on_name(expression):
  call = expression("int.bit_length(42)")
  assert call.name.name == "bit_length"
  assert call.select.element == Identifier("int")
  assert call.arguments.elements[0].value_source == "42"


def test_method_call_on_call(expression):
  call = expression("list().copy()")
  assert call.name.name == "copy"
  receiver = call.select.element
  assert isinstance(receiver, MethodInvocation)
  assert receiver.name.name == "list"


def test_empty_arguments_keep_space(expression):
  (slot,) = expression("f(  )").arguments.padded
  assert isinstance(slot.element, Empty)
  assert slot.after == Space("  ")


def test_call_on_expression_uses_call_method(expression):
  call = expression("(f)(x)")
  assert call.name.name == "__call__"
  assert call.markers.has(MagicMethodDesugar)
  assert isinstance(call.select.element, Parentheses)


def test_star_arguments(expression):
  star, double_star = expression("f(*args, **kw)").arguments.elements
  assert isinstance(star, StarExpression) and star.kind is StarKind.LIST
  assert double_star.kind is StarKind.DICT


def test_binary_operator(expression):
  call = expression("a  +b")
  assert call.name.name == "__add__"
  assert call.markers.has(MagicMethodDesugar)
  assert call.select.element.name == "a"
  assert call.select.after == Space("  ")
  assert call.arguments.elements[0] == Identifier("b")


def test_membership_reverses_operands(expression):
  call = expression("a in b")
  assert call.name.name == "__contains__"
  assert call.select.element == Identifier("b")
  assert call.select.after == Space(" ")
  assert call.arguments.elements[0] == Identifier("a", prefix=Space(" "))


def test_not_in_wraps_membership(expression):
  negated = expression("a not  in b")
  assert isinstance(negated, Unary)
  assert negated.operator is UnaryOperator.NOT
  assert negated.markers.has(MagicMethodDesugar)
  call = negated.expression
  assert call.name.name == "__contains__"
  assert padding_of(call.markers, PaddingLocation.WITHIN_OPERATOR_NAME) == Space("  ")


def test_is_not_is_binary(expression):
  binary = expression("x is not y")
  assert isinstance(binary, Binary)
  assert binary.operator.element is BinaryOperator.IS_NOT
  # the default single space is not recorded
  assert padding_of(binary.markers, PaddingLocation.WITHIN_OPERATOR_NAME) is None


def test_boolean_and_unary(expression):
  binary = expression("a and not b")
  assert binary.operator.element is BinaryOperator.AND
  assert binary.right.operator is UnaryOperator.NOT
  assert expression("-x").operator is UnaryOperator.NEGATIVE


@pytest.mark.parametrize(
  "operator, name",
  [
    ("-", "__sub__"),
    ("*", "__mul__"),
    ("/", "__truediv__"),
    ("//", "__floordiv__"),
    ("%", "__mod__"),
    ("**", "__pow__"),
    ("@", "__matmul__"),
    ("<<", "__lshift__"),
    (">>", "__rshift__"),
    ("&", "__and__"),
    ("|", "__or__"),
    ("^", "__xor__"),
    ("==", "__eq__"),
    ("!=", "__ne__"),
    ("<", "__lt__"),
    ("<=", "__le__"),
    (">", "__gt__"),
    (">=", "__ge__"),
  ],
)
def test_operator_magic_methods(expression, operator, name):
  call = expression(f"a {operator} b")
  assert call.name.name == name
  assert call.select.element.name == "a"


def test_chained_comparison_nests_left(expression):
  call = expression("a < b < c")
  assert call.name.name == "__lt__"
  assert call.arguments.elements[0].name == "c"
  assert call.select.element.name.name == "__lt__"


def test_bare_tuple(build):
  value = build("x = 1, 2\n").statements[0].element.value.element
  assert value.markers.has(BuiltinDesugar)
  assert value.markers.has(OmitParentheses)
  assert value.select.element.name == "__builtins__"
  assert value.name.name == "tuple"
  (elements,) = value.arguments.elements
  assert isinstance(elements, NewArray)
  assert [e.value_source for e in elements.initializer.elements] == ["1", "2"]


def test_parenthesized_singleton_tuple(expression):
  value = expression("(1,)")
  assert not value.markers.has(OmitParentheses)
  (elements,) = value.arguments.elements
  assert isinstance(elements.initializer.elements[-1], Empty)


def test_set_literal(expression):
  value = expression("{1, 2}")
  assert value.name.name == "set"
  assert value.markers.has(BuiltinDesugar)


def test_empty_dict(expression):
  value = expression("{ }")
  assert isinstance(value, DictLiteral)
  assert value.elements.padded == ()
  assert padding_of(value.markers, PaddingLocation.EMPTY_INITIALIZER) == Space(" ")


def test_slice(expression):
  access = expression("a[1::2]")
  index = access.dimension.index.element
  assert index.name.name == "slice"
  assert index.markers.has(BuiltinDesugar)
  lower, upper, step = index.arguments.elements
  assert lower.value_source == "1"
  assert isinstance(upper, Empty)
  assert step.value_source == "2"


def test_multi_dimensional_subscript(expression):
  index = expression("a[1:2, 3]").dimension.index.element
  assert index.name.name == "tuple"
  assert index.markers.has(OmitParentheses)
  (elements,) = index.arguments.elements
  assert elements.initializer.elements[0].name.name == "slice"


def test_strings(expression):
  literal = expression("'a' f\"{b}\"")
  assert literal.kind is LiteralKind.STRING
  assert literal.value_source == "'a' f\"{b}\""
  flags = literal.markers.find_first(StringFlags)
  assert flags.concatenated and flags.formatted


def test_generator_argument_omits_parentheses(expression):
  generator = expression("sum(x for x in y)").arguments.elements[0]
  assert isinstance(generator, Comprehension)
  assert generator.kind is ComprehensionKind.GENERATOR
  assert generator.markers.has(OmitParentheses)


def test_comment_inside_concatenation_is_unsupported():
  source = 'x = ("a"  # first\n     "b")\ny = 1\n'
  with pytest.raises(UnsupportedConstruct):
    LstBuilder(source, RuntimeConfig(strict=True)).build()

  builder = LstBuilder(source, RuntimeConfig(log_skipped=False))
  unit = builder.build()
  assert len(unit.statements) == 1
  assert unit.statements[0].element.variable.name == "y"
  assert builder.diagnostics[0].kind == "ConcatenatedString"

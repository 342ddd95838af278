"""
Tests for statement building.

Verifies:
1.  If/elif/else chains re-nest into `If`/`Else` with each level's own prefix.
2.  Compound statement shapes: loops, functions, classes, try and with.
3.  Small statements and `;`-joined lines.
"""

import pytest

from rewrite_py.builder import IfClause, nest_if_chain
from rewrite_py.tree import (
  Assignment,
  AssignmentOperation,
  AssignmentOperator,
  Block,
  ClassDeclaration,
  Else,
  Empty,
  ErrorFrom,
  ExpressionStatement,
  FieldAccess,
  ForEachLoop,
  Identifier,
  If,
  Literal,
  MethodDeclaration,
  OmitParentheses,
  Pass,
  Space,
  SpecialParameter,
  SpecialParameterKind,
  Throw,
  Try,
  TryResource,
  TypeHint,
  TypeHintedExpression,
  TypeHintKind,
  VariableDeclarations,
  WhileLoop,
)


def first(unit):
  return unit.statements[0].element


def test_if_elif_else_nests(build):
  unit = build("if True:\n    pass\nelif False:\n    pass\nelse:\n    pass\n")
  assert len(unit.statements) == 1

  outer = first(unit)
  assert isinstance(outer, If)
  assert outer.condition.value_source == "True"

  elif_part = outer.else_part
  assert isinstance(elif_part, Else)
  assert isinstance(elif_part.body, If)
  assert elif_part.body.prefix == Space.EMPTY
  assert elif_part.prefix == Space.EMPTY

  inner = elif_part.body
  assert inner.condition.value_source == "False"
  assert isinstance(inner.else_part, Else)
  assert isinstance(inner.else_part.body, Block)


def test_if_block_spaces(build):
  unit = build("if x :  # check\n    pass\n")
  block = first(unit).then_part
  assert block.prefix == Space(" ")
  statement = block.statements[0]
  assert isinstance(statement.element, Pass)
  assert statement.element.prefix.comments[0].text == " check"
  assert statement.after.render() == "\n"


def block_of(text):
  return Block((), prefix=Space(text))


def test_nest_if_chain_from_any_index():
  clauses = [
    IfClause(Space.EMPTY, Identifier("a"), block_of("")),
    IfClause(Space("\n"), Identifier("b"), block_of(" ")),
    IfClause(Space("\n"), Identifier("c"), block_of("  ")),
    IfClause(Space("\n"), None, block_of("   ")),
  ]

  second = nest_if_chain(clauses, 1)
  assert second.condition.name == "b"
  assert second.prefix == Space("\n")
  assert second.else_part.body.condition.name == "c"
  assert second.else_part.body.else_part.body == block_of("   ")

  last_if = nest_if_chain(clauses, 2)
  assert last_if.else_part == Else(block_of("   "), prefix=Space("\n"))

  top = nest_if_chain(clauses)
  assert top.else_part.body == second.with_prefix(Space.EMPTY)


def test_if_without_else():
  clause = IfClause(Space.EMPTY, Identifier("a"), block_of(""))
  assert nest_if_chain([clause]).else_part is None


def test_while_else(build):
  loop = first(build("while x:\n    break\nelse:\n    pass\n"))
  assert isinstance(loop, WhileLoop)
  assert isinstance(loop.else_part.body, Block)


def test_for_unpacking_target(build):
  loop = first(build("for a, b in pairs:\n    pass\n"))
  assert isinstance(loop, ForEachLoop)
  variables = loop.control.variable
  assert isinstance(variables, VariableDeclarations)
  assert [slot.element.name.name for slot in variables.variables] == ["a", "b"]
  assert variables.prefix == Space(" ")
  assert variables.variables[1].element.prefix == Space(" ")
  assert loop.control.iterable.element.name == "pairs"


def test_for_single_target_uses_same_shape(build):
  loop = first(build("for item in items:\n    pass\n"))
  variables = loop.control.variable
  assert isinstance(variables, VariableDeclarations)
  assert len(variables.variables) == 1
  assert variables.variables[0].element.name.name == "item"


def test_function_declaration(build):
  source = "@cache\nasync def f(a, b: int = 1, *args, c, **kw) -> int:\n    return a\n"
  function = first(build(source))
  assert isinstance(function, MethodDeclaration)
  assert [m.keyword for m in function.modifiers] == ["async", "def"]
  assert function.name.name == "f"
  assert function.decorators[0].element.expression.name == "cache"
  assert function.decorators[0].after.render() == "\n"

  parameters = function.parameters.elements
  assert len(parameters) == 5
  b = parameters[1].variables[0].element
  assert b.type_hint.kind is TypeHintKind.VARIABLE_TYPE
  assert b.initializer.element.value_source == "1"
  assert parameters[2].type_expression == SpecialParameter(SpecialParameterKind.ARGS)
  assert parameters[4].type_expression.kind is SpecialParameterKind.KWARGS

  assert isinstance(function.return_type, TypeHint)
  assert function.return_type.kind is TypeHintKind.RETURN_TYPE


def test_function_without_parameters(build):
  function = first(build("def f( ):\n    pass\n"))
  (slot,) = function.parameters.padded
  assert isinstance(slot.element, Empty)
  assert slot.after == Space(" ")


def test_bare_star_and_slash(build):
  function = first(build("def f(a, /, b, *, c):\n    pass\n"))
  kinds = [p.kind for p in function.parameters.elements if isinstance(p, SpecialParameter)]
  assert kinds == [SpecialParameterKind.POSITIONAL_ONLY, SpecialParameterKind.ARGS]


@pytest.mark.parametrize(
  "source, count, omitted",
  [
    ("class A:\n    pass\n", 0, True),
    ("class A( ):\n    pass\n", 1, False),
    ("class A(B, c.D):\n    pass\n", 2, False),
  ],
)
def test_class_base_shapes(build, source, count, omitted):
  declaration = first(build(source))
  assert isinstance(declaration, ClassDeclaration)
  assert declaration.bases.markers.has(OmitParentheses) is omitted
  assert len(declaration.bases.padded) == count


def test_empty_class_parentheses_keep_space(build):
  declaration = first(build("class A( ):\n    pass\n"))
  (slot,) = declaration.bases.padded
  assert isinstance(slot.element, Empty)
  assert slot.after == Space(" ")


def test_dotted_class_base(build):
  declaration = first(build("class A(B, c.D):\n    pass\n"))
  base = declaration.bases.elements[1]
  assert isinstance(base, FieldAccess)
  assert base.name.element.name == "D"


def test_try_else_finally(build):
  source = "try:\n    pass\nexcept ValueError as e:\n    pass\nelse:\n    pass\nfinally:\n    pass\n"
  statement = first(build(source))
  assert isinstance(statement, Try)
  assert statement.resources is None

  (catch,) = statement.catches
  assert catch.parameter.type_expression.expression.name == "ValueError"
  assert catch.parameter.variables[0].element.name.name == "e"

  assert isinstance(statement.body.statements[0].element, Pass)
  assert isinstance(statement.body.statements[-1].element, Block)
  assert statement.finally_part is not None


def test_bare_except(build):
  statement = first(build("try:\n    pass\nexcept:\n    pass\n"))
  assert statement.catches[0].parameter is None
  assert len(statement.body.statements) == 1


def test_with_resources(build):
  statement = first(build("with open(p) as f, lock:\n    pass\n"))
  assert isinstance(statement, Try)
  first_resource, second_resource = statement.resources.elements
  assert isinstance(first_resource, TryResource)
  assert isinstance(first_resource.declaration, Assignment)
  assert first_resource.declaration.variable.name == "f"
  assert first_resource.declaration.value.element.name.name == "open"
  assert isinstance(second_resource.declaration.variable, Empty)


def test_semicolon_line(build):
  unit = build("print(1); print(2)\n")
  assert len(unit.statements) == 2
  assert unit.statements[0].after == Space.EMPTY
  assert unit.statements[1].after == Space("\n")
  assert all(isinstance(slot.element, ExpressionStatement) for slot in unit.statements)


def test_trailing_semicolon_adds_empty_statement(build):
  unit = build("x = 1; \n")
  assert len(unit.statements) == 2
  assert isinstance(unit.statements[1].element, Empty)
  assert unit.statements[1].after.render() == " \n"


def test_chained_assignment_nests_right(build):
  assignment = first(build("a = b = 1\n"))
  assert isinstance(assignment, Assignment)
  assert assignment.variable.name == "a"
  inner = assignment.value.element
  assert isinstance(inner, Assignment)
  assert inner.variable.name == "b"
  assert isinstance(inner.value.element, Literal)


def test_annotated_assignment(build):
  unit = build("x: int = 1\ny: str\n")
  assignment = first(unit)
  assert isinstance(assignment.variable, TypeHintedExpression)
  assert assignment.variable.type_hint.expression.name == "int"
  assert isinstance(unit.statements[1].element, TypeHintedExpression)


def test_augmented_assignment(build):
  statement = first(build("total //= 2\n"))
  assert isinstance(statement, AssignmentOperation)
  assert statement.operator.element is AssignmentOperator.FLOOR_DIVIDE
  assert statement.operator.before == Space(" ")


def test_raise_from(build):
  statement = first(build("raise ValueError('x') from err\n"))
  assert isinstance(statement, Throw)
  assert isinstance(statement.exception, ErrorFrom)
  assert statement.exception.cause.element.name == "err"

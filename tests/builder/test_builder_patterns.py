"""
Tests for match statement and pattern building.
"""

import pytest

from rewrite_py.tree import Case, Identifier, MatchCase, Pattern, PatternKind, Space, Switch


@pytest.fixture
def cases(build):
  def _cases(*patterns):
    body = "".join(f"    case {p}:\n        pass\n" for p in patterns)
    switch = build(f"match command:\n{body}").statements[0].element
    assert isinstance(switch, Switch)
    return [slot.element for slot in switch.cases.statements]

  return _cases


def pattern_of(case):
  assert isinstance(case, Case)
  assert isinstance(case.pattern, MatchCase)
  return case.pattern.pattern


@pytest.mark.parametrize(
  "text, kind",
  [
    ("_", PatternKind.WILDCARD),
    ("x", PatternKind.CAPTURE),
    ("1", PatternKind.LITERAL),
    ("None", PatternKind.LITERAL),
    ("Color.RED", PatternKind.VALUE),
    ("[1, *rest]", PatternKind.SEQUENCE),
    ("(1, 2)", PatternKind.GROUP),
    ('{"k": v, **kw}', PatternKind.MAPPING),
    ("Point(x=0)", PatternKind.CLASS),
    ("1 | 2", PatternKind.OR),
    ("[x] as whole", PatternKind.AS),
  ],
)
def test_pattern_kinds(cases, text, kind):
  (case,) = cases(text)
  pattern = pattern_of(case)
  assert isinstance(pattern, Pattern)
  assert pattern.kind is kind
  assert pattern.prefix == Space(" ")


def test_sequence_children(cases):
  (case,) = cases("[1, *rest]")
  first, star = pattern_of(case).children.elements
  assert first.kind is PatternKind.LITERAL
  assert star.kind is PatternKind.STAR
  assert star.children.elements[0] == Identifier("rest")


def test_mapping_children(cases):
  (case,) = cases('{"k": v, **kw}')
  entry, rest = pattern_of(case).children.elements
  assert entry.kind is PatternKind.KEY_VALUE
  assert entry.children.elements[1].kind is PatternKind.CAPTURE
  assert rest.kind is PatternKind.DOUBLE_STAR


def test_class_children(cases):
  (case,) = cases("Point(0, y=1)")
  pattern = pattern_of(case)
  cls, positional, keyword = pattern.children.elements
  assert cls == Identifier("Point")
  assert positional.kind is PatternKind.LITERAL
  assert keyword.kind is PatternKind.KEYWORD


def test_parenthesized_value_stays_an_expression(cases):
  (case,) = cases("(1)")
  pattern = pattern_of(case)
  assert pattern.kind is PatternKind.LITERAL


def test_guard(build):
  source = "match p:\n    case [x, y] if x > y:\n        pass\n"
  switch = build(source).statements[0].element
  match_case = switch.cases.statements[0].element.pattern
  assert match_case.guard.before == Space(" ")
  assert match_case.guard.element.name.name == "__gt__"

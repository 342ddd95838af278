"""
Pattern Building Mixin.

Maps `case` patterns onto `Pattern` nodes. Each pattern kind keeps its
children in a `Container` whose slots hold the space before the kind's
separator (`,`, `|`, `:`, `=` or `as`), so the printer only needs a fixed
opening/separator/closing triple per kind.
"""

from typing import List, Sequence, Union

import libcst as cst

from rewrite_py.builder.base import BaseBuilderMixin, lift, present
from rewrite_py.errors import UnsupportedConstruct
from rewrite_py.tree.base import Tree
from rewrite_py.tree.generic import Identifier
from rewrite_py.tree.padding import Container, RightPadded
from rewrite_py.tree.python import Pattern, PatternKind
from rewrite_py.tree.space import Space


def leading_pattern(kind: PatternKind, slots: List[RightPadded[Tree]]) -> Pattern:
  """Creates a pattern that starts with its first child, taking over that child's prefix."""
  prefix, first = lift(slots[0].element)
  slots[0] = slots[0].with_element(first)
  return Pattern(kind, Container(Space.EMPTY, tuple(slots)), prefix=prefix)


class PatternBuilderMixin(BaseBuilderMixin):
  """
  Mixin building match patterns.
  """

  def _pattern(self, node: cst.MatchPattern) -> Pattern:
    # Value patterns delegate their parentheses to the wrapped expression.
    lpar = () if isinstance(node, (cst.MatchValue, cst.MatchSingleton)) else getattr(node, "lpar", ())
    owned = 1 if lpar and isinstance(node, cst.MatchTuple) else 0
    prefixes = [self._space_before("(") for _ in range(len(lpar) - owned)]

    pattern = self._dispatch_pattern(node)

    for prefix in reversed(prefixes):
      after = self._space_before(")")
      pattern = Pattern(PatternKind.GROUP, Container(Space.EMPTY, (RightPadded(pattern, after),)), prefix=prefix)
    return pattern

  def _dispatch_pattern(self, node: cst.MatchPattern) -> Pattern:
    handlers = {
      cst.MatchValue: self._match_value,
      cst.MatchSingleton: self._match_value,
      cst.MatchAs: self._match_as,
      cst.MatchOr: self._match_or,
      cst.MatchList: self._match_list,
      cst.MatchTuple: self._match_tuple,
      cst.MatchMapping: self._match_mapping,
      cst.MatchClass: self._match_class,
    }
    handler = handlers.get(type(node))
    if handler is None:
      raise UnsupportedConstruct(type(node).__name__, "pattern kind is not supported", self._cursor.token_line())
    return handler(node)

  def _match_value(self, node: Union[cst.MatchValue, cst.MatchSingleton]) -> Pattern:
    value = node.value
    kind = PatternKind.VALUE if isinstance(value, (cst.Name, cst.Attribute)) else PatternKind.LITERAL
    if isinstance(node, cst.MatchSingleton):
      kind = PatternKind.LITERAL
    return leading_pattern(kind, [RightPadded(self._expression(value))])

  def _match_as(self, node: cst.MatchAs) -> Pattern:
    if node.pattern is None and node.name is None:
      return Pattern(PatternKind.WILDCARD, Container(), prefix=self._space_before("_"))
    if node.pattern is None:
      return leading_pattern(PatternKind.CAPTURE, [RightPadded(self._identifier(node.name))])

    pattern = self._pattern(node.pattern)
    before = self._space_before("as")
    name = self._identifier(node.name)
    return leading_pattern(PatternKind.AS, [RightPadded(pattern, before), RightPadded(name)])

  def _match_or(self, node: cst.MatchOr) -> Pattern:
    slots = []
    for element in node.patterns:
      pattern = self._pattern(element.pattern)
      after = self._space_before("|") if present(element.separator) else Space.EMPTY
      slots.append(RightPadded(pattern, after))
    return leading_pattern(PatternKind.OR, slots)

  def _sequence_element(self, node: Union[cst.MatchSequenceElement, cst.MatchStar]) -> Pattern:
    if isinstance(node, cst.MatchStar):
      prefix = self._space_before("*")
      if node.name is None:
        name = Identifier("_", prefix=self._space_before("_"))
      else:
        name = self._identifier(node.name)
      return Pattern(PatternKind.STAR, Container(Space.EMPTY, (RightPadded(name),)), prefix=prefix)
    return self._pattern(node.value)

  def _delimited(self, kind: PatternKind, open_token: str, close_token: str, items: Sequence, build, **kwargs) -> Pattern:
    prefix = self._space_before(open_token)
    slots = self._padded_list(items, build, **kwargs)
    self._cursor.skip(close_token)
    return Pattern(kind, Container(Space.EMPTY, tuple(slots)), prefix=prefix)

  def _match_list(self, node: cst.MatchList) -> Pattern:
    if node.lbracket is None:
      raise UnsupportedConstruct("MatchList", "sequence pattern without brackets", self._cursor.token_line())
    return self._delimited(PatternKind.SEQUENCE, "[", "]", node.patterns, self._sequence_element)

  def _match_tuple(self, node: cst.MatchTuple) -> Pattern:
    if not node.lpar:
      raise UnsupportedConstruct("MatchTuple", "tuple pattern without parentheses", self._cursor.token_line())
    return self._delimited(PatternKind.GROUP, "(", ")", node.patterns, self._sequence_element)

  def _match_mapping(self, node: cst.MatchMapping) -> Pattern:
    items = list(node.elements)
    if node.rest is not None:
      items.append(node.rest)

    def comma_of(item):
      return node.trailing_comma if isinstance(item, cst.Name) else item.comma

    return self._delimited(PatternKind.MAPPING, "{", "}", items, self._mapping_entry, comma_of=comma_of)

  def _mapping_entry(self, node: Union[cst.MatchMappingElement, cst.Name]) -> Pattern:
    if isinstance(node, cst.Name):
      prefix = self._space_before("**")
      rest = self._identifier(node)
      return Pattern(PatternKind.DOUBLE_STAR, Container(Space.EMPTY, (RightPadded(rest),)), prefix=prefix)

    key = self._expression(node.key)
    before = self._space_before(":")
    pattern = self._pattern(node.pattern)
    return leading_pattern(PatternKind.KEY_VALUE, [RightPadded(key, before), RightPadded(pattern)])

  def _match_class(self, node: cst.MatchClass) -> Pattern:
    cls = self._expression(node.cls)
    slots = [RightPadded(cls, self._space_before("("))]
    arguments = list(node.patterns) + list(node.kwds)
    slots.extend(self._padded_list(arguments, self._class_argument))
    self._cursor.skip(")")
    return leading_pattern(PatternKind.CLASS, slots)

  def _class_argument(self, node: Union[cst.MatchSequenceElement, cst.MatchKeywordElement]) -> Pattern:
    if isinstance(node, cst.MatchSequenceElement):
      return self._pattern(node.value)
    key = self._identifier(node.key)
    before = self._space_before("=")
    pattern = self._pattern(node.pattern)
    return leading_pattern(PatternKind.KEYWORD, [RightPadded(key, before), RightPadded(pattern)])

"""
Builder Base Utilities.

Defines the mixin with the helpers shared by the statement, expression,
pattern and import builders: cursor access, prefix lifting and the padded
list walker used for every comma-separated sequence.
"""

from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

import libcst as cst

from rewrite_py.builder.cursor import SourceCursor
from rewrite_py.config import RuntimeConfig
from rewrite_py.tree.base import Expression, Statement, Tree
from rewrite_py.tree.generic import Empty, Identifier
from rewrite_py.tree.padding import RightPadded
from rewrite_py.tree.python import Pattern
from rewrite_py.tree.space import Space


def present(value: Any) -> bool:
  """True if a libcst optional field holds a real value (not None / MaybeSentinel)."""
  return value is not None and not isinstance(value, cst.MaybeSentinel)


def lift(node: Tree) -> Tuple[Space, Tree]:
  """
  Detaches a node's prefix so a parent can own it.

  Used when a parent's first token is really its first child's, e.g. the
  left operand of a binary expression.

  Args:
      node: The first child.

  Returns:
      Tuple[Space, Tree]: The prefix and the child without it.
  """
  return node.prefix, node.with_prefix(Space.EMPTY)


class BaseBuilderMixin:
  """
  Common state and helpers for the builder mixins.
  """

  # Interface requirements from host class (LstBuilder)
  _cursor: SourceCursor
  config: RuntimeConfig

  def _expression(self, node: cst.BaseExpression) -> Expression:
    """
    Abstract method: Builds any expression, including its parentheses.
    Must be implemented by the expression mixin.

    Args:
        node: The libcst expression.

    Returns:
        The tree expression.
    """
    raise NotImplementedError

  def _element(self, node: cst.BaseElement) -> Expression:
    """
    Abstract method: Builds a display element (plain or starred).
    Must be implemented by the expression mixin.
    """
    raise NotImplementedError

  def _parameters(self, params: cst.Parameters) -> List[RightPadded[Tree]]:
    """
    Abstract method: Builds the parameters of a function or lambda.
    Must be implemented by the statement mixin.
    """
    raise NotImplementedError

  def _pattern(self, node: cst.MatchPattern) -> Pattern:
    """
    Abstract method: Builds a `case` pattern. Must be implemented by the
    pattern mixin.
    """
    raise NotImplementedError

  def _imports(self, node: Union[cst.Import, cst.ImportFrom]) -> List[RightPadded[Statement]]:
    """
    Abstract method: Builds an import statement as one slot per imported
    name. Must be implemented by the import mixin.
    """
    raise NotImplementedError

  def _ws(self) -> Space:
    return self._cursor.whitespace()

  def _space_before(self, token: str) -> Space:
    return self._cursor.space_before(token)

  def _identifier(self, name: cst.Name) -> Identifier:
    prefix = self._ws()
    self._cursor.skip(name.value)
    return Identifier(name.value, prefix=prefix)

  def _padded_list(
    self,
    items: Sequence[Any],
    build: Callable[[Any], Tree],
    closed: bool = True,
    comma_of: Optional[Callable[[Any], Any]] = None,
  ) -> List[RightPadded[Tree]]:
    """
    Builds a comma-separated sequence into padded slots.

    Each slot's `after` holds the space before the following comma. When the
    sequence is `closed` by a delimiter, the last slot also takes the space
    before that delimiter (the caller consumes the delimiter itself). A
    trailing comma, or an empty delimited sequence, yields an `Empty`
    placeholder slot so its surrounding space is kept.

    Args:
        items: libcst children in source order.
        build: Builds one child.
        closed: Whether a closing delimiter follows the sequence.
        comma_of: Extracts an item's comma; defaults to `item.comma`.

    Returns:
        List[RightPadded]: The slots.
    """
    comma_of = comma_of or (lambda item: item.comma)
    slots: List[RightPadded[Tree]] = []
    trailing_comma = not items

    for i, item in enumerate(items):
      element = build(item)
      has_comma = present(comma_of(item))
      if has_comma:
        after = self._space_before(",")
      elif closed:
        after = self._ws()
      else:
        after = Space.EMPTY
      slots.append(RightPadded(element, after))
      trailing_comma = has_comma and i == len(items) - 1

    if trailing_comma:
      slots.append(RightPadded(Empty(), self._ws() if closed else Space.EMPTY))
    return slots

"""
Import Building Mixin.

Every imported name becomes its own `Import` statement. The statements
produced for one source statement share a `GroupedStatement` marker so the
printer can render them as a single `import`/`from` line again.

Shapes:
- `import a.b as c` is `Import(qualid=FieldAccess(a.b, ""), alias=c)`.
- `from .m import x as y` is `Import(qualid=FieldAccess(.m, x), alias=y)`,
  with relative dots folded into the leftmost module name.
"""

from dataclasses import replace
from typing import List, Optional, Union
from uuid import uuid4

import libcst as cst

from rewrite_py.builder.base import BaseBuilderMixin, present
from rewrite_py.errors import UnsupportedConstruct
from rewrite_py.tree.base import Expression, Statement
from rewrite_py.tree.generic import FieldAccess, Identifier, Import
from rewrite_py.tree.markers import GroupedStatement, PaddingLocation, TrailingComma, set_padding
from rewrite_py.tree.padding import LeftPadded, RightPadded
from rewrite_py.tree.space import Space

PLAIN_IMPORT_NAME = ""


def fold_relative_dots(module: Expression, dots: str) -> Expression:
  """
  Prepends relative-import dots to the leftmost name of a module path.

  Args:
      module: A name or dotted `FieldAccess` chain.
      dots: The leading dots, e.g. "..".

  Returns:
      Expression: The same path whose leftmost identifier starts with `dots`.
  """
  if isinstance(module, FieldAccess):
    return replace(module, target=fold_relative_dots(module.target, dots))
  return replace(module, name=dots + module.name)


class ImportBuilderMixin(BaseBuilderMixin):
  """
  Mixin building grouped `Import` statements.
  """

  def _imports(self, node: Union[cst.Import, cst.ImportFrom]) -> List[RightPadded[Statement]]:
    if isinstance(node, cst.ImportFrom):
      slots = self._import_from(node)
    else:
      slots = self._import_plain(node)

    if len(slots) > 1:
      group = GroupedStatement(uuid4())
      slots = [slot.with_element(slot.element.add_marker(group)) for slot in slots]
    return slots

  def _alias(self, asname: Optional[cst.AsName]) -> Optional[LeftPadded[Identifier]]:
    if asname is None:
      return None
    before = self._space_before("as")
    return LeftPadded(before, self._expression(asname.name))

  def _import_plain(self, node: cst.Import) -> List[RightPadded[Statement]]:
    prefix = self._space_before("import")
    slots: List[RightPadded[Statement]] = []
    for i, name in enumerate(node.names):
      target = self._expression(name.name)
      qualid = FieldAccess(target, LeftPadded(Space.EMPTY, Identifier(PLAIN_IMPORT_NAME)))
      statement = Import(qualid, self._alias(name.asname), prefix=prefix if i == 0 else Space.EMPTY)
      after = self._space_before(",") if present(name.comma) else Space.EMPTY
      slots.append(RightPadded(statement, after))
    return slots

  def _from_module(self, node: cst.ImportFrom) -> Expression:
    dots = ""
    dots_prefix = Space.EMPTY
    for i, _ in enumerate(node.relative):
      space = self._ws()
      if i == 0:
        dots_prefix = space
      elif not space.is_empty:
        raise UnsupportedConstruct("relative import", "space between dots", self._cursor.token_line())
      self._cursor.skip(".")
      dots += "."

    if node.module is None:
      return Identifier(dots, prefix=dots_prefix)
    module = self._expression(node.module)
    if not dots:
      return module
    if not module.prefix.is_empty:
      raise UnsupportedConstruct("relative import", "space between dots and module", self._cursor.token_line())
    return fold_relative_dots(module, dots).with_prefix(dots_prefix)

  def _import_from(self, node: cst.ImportFrom) -> List[RightPadded[Statement]]:
    prefix = self._space_before("from")
    module = self._from_module(node)
    before_import = self._space_before("import")

    if isinstance(node.names, cst.ImportStar):
      star = Identifier("*", prefix=self._space_before("*"))
      return [RightPadded(Import(FieldAccess(module, LeftPadded(before_import, star)), prefix=prefix))]

    parenthesized = present(node.lpar)
    parens_prefix = self._space_before("(") if parenthesized else Space.EMPTY

    members = []
    trailing_comma = None
    for i, name in enumerate(node.names):
      identifier = self._expression(name.name)
      qualid = FieldAccess(module, LeftPadded(before_import, identifier))
      statement = Import(qualid, self._alias(name.asname), prefix=prefix if i == 0 else Space.EMPTY)
      after = self._space_before(",") if present(name.comma) else Space.EMPTY
      if i == len(node.names) - 1 and present(name.comma):
        trailing_comma = TrailingComma(after)
        after = Space.EMPTY
      members.append([statement, after])

    if parenthesized:
      parens_suffix = self._space_before(")")
      for member in members:
        markers = set_padding(member[0].markers, PaddingLocation.IMPORT_PARENS_PREFIX, parens_prefix, keep_default=True)
        markers = set_padding(markers, PaddingLocation.IMPORT_PARENS_SUFFIX, parens_suffix, keep_default=True)
        member[0] = member[0].with_markers(markers)
    if trailing_comma is not None:
      members[-1][0] = members[-1][0].add_marker(trailing_comma)

    return [RightPadded(statement, after) for statement, after in members]

"""
Printer Base.

Defines the dispatch shared by the generic and the Python printer. Each
printer handles one node family (`visit_<ClassName>` methods) and hands any
other node to its delegate, so generic and Python nodes can nest freely.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Type

from rewrite_py.errors import StructuralPrecondition
from rewrite_py.printer.output import PrintOutput
from rewrite_py.tree.base import Statement, Tree
from rewrite_py.tree.grouping import StatementGroup, find_statement_group
from rewrite_py.tree.padding import Container, RightPadded
from rewrite_py.tree.space import Space


@dataclass(frozen=True)
class PrintContext:
  """
  Immutable traversal context for statement printing.

  Attributes:
      group: The statement group being printed, if any.
      index: Index of the printed statement within `siblings`.
      siblings: The enclosing statement slots.
  """

  group: Optional[StatementGroup] = None
  index: int = 0
  siblings: Tuple[RightPadded[Statement], ...] = ()


ROOT = PrintContext()


class TreePrinter:
  """
  Visitor printing one node family.

  Attributes:
      family: The node base class handled by this printer.
      delegate: The printer receiving nodes of any other family.
  """

  family: Type[Tree] = Tree

  def __init__(self) -> None:
    self.delegate: Optional["TreePrinter"] = None

  def visit(self, node: Optional[Tree], out: PrintOutput, ctx: PrintContext = ROOT) -> None:
    if node is None:
      return
    if isinstance(node, self.family):
      self._dispatch(node, out, ctx)
    elif self.delegate is not None and isinstance(node, self.delegate.family):
      self.delegate._dispatch(node, out, ctx)
    else:
      raise StructuralPrecondition(f"No printer for node kind '{type(node).__name__}'")

  def _dispatch(self, node: Tree, out: PrintOutput, ctx: PrintContext) -> None:
    method = getattr(self, f"visit_{type(node).__name__}", None)
    if method is None:
      raise StructuralPrecondition(f"No printer for node kind '{type(node).__name__}'")
    method(node, out, ctx)

  # --- Helpers ---

  @staticmethod
  def space(out: PrintOutput, space: Optional[Space]) -> None:
    if space is not None:
      out.append(space.render())

  def padded(self, out: PrintOutput, slots: Sequence[RightPadded[Tree]], separator: str) -> None:
    """Prints slots as element plus trailing space, joined by `separator`."""
    for i, slot in enumerate(slots):
      if i:
        out.append(separator)
      self.visit(slot.element, out)
      self.space(out, slot.after)

  def container(self, out: PrintOutput, container: Container, open_token: str, separator: str, close_token: str) -> None:
    self.space(out, container.before)
    out.append(open_token)
    self.padded(out, container.padded, separator)
    out.append(close_token)

  def statements(self, out: PrintOutput, slots: Sequence[RightPadded[Statement]]) -> None:
    """
    Prints a statement list.

    `;` is emitted ahead of a statement only when the previous one did not
    end its line. A statement group is printed once, by its last member,
    after which the last member's trailing space follows.

    Args:
        out: The output buffer.
        slots: Statements of a module or block.
    """
    siblings = tuple(slots)
    statements = [slot.element for slot in siblings]
    group: Optional[StatementGroup] = None
    for index, slot in enumerate(siblings):
      if group is None or index not in group:
        group = find_statement_group(statements, index)

      starts = group is None or index == group.start
      if starts and index > 0 and not out.is_empty and not out.ends_with_line_break:
        out.append(";")
      if group is not None and index != group.end:
        continue

      self.visit(slot.element, out, PrintContext(group, index, siblings))
      self.space(out, slot.after)

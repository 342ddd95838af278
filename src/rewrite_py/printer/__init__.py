"""
Printer: lossless tree to source text.
"""

from rewrite_py.printer.base import PrintContext, TreePrinter
from rewrite_py.printer.generic import GenericPrinter
from rewrite_py.printer.output import PrintOutput
from rewrite_py.printer.python import PATTERN_SYNTAX, PythonPrinter
from rewrite_py.tree.base import Tree


def create_printer() -> TreePrinter:
  """Creates the Python printer linked with its generic counterpart."""
  python = PythonPrinter()
  generic = GenericPrinter()
  python.delegate = generic
  generic.delegate = python
  return python


def print_tree(node: Tree) -> str:
  """
  Prints any node back to source text.

  Args:
      node: A compilation unit or any node inside one.

  Returns:
      str: The printed text.

  Raises:
      MalformedDesugar: If a desugar marker disagrees with its node's shape.
      StructuralPrecondition: If a node violates a shape rule.
  """
  out = PrintOutput()
  create_printer().visit(node, out)
  return out.getvalue()


__all__ = [
  "GenericPrinter",
  "PATTERN_SYNTAX",
  "PrintContext",
  "PrintOutput",
  "PythonPrinter",
  "TreePrinter",
  "create_printer",
  "print_tree",
]

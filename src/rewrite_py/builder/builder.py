"""
Lossless Tree Builder.

Parses source with libcst and maps the concrete tree onto the lossless tree,
walking the original text in lockstep so every character ends up in exactly
one node or space.
"""

from typing import Dict, List, Optional

import libcst as cst
from libcst.metadata import CodeRange, MetadataWrapper, PositionProvider

from rewrite_py.builder.cursor import SourceCursor
from rewrite_py.builder.expressions import ExpressionBuilderMixin
from rewrite_py.builder.imports import ImportBuilderMixin
from rewrite_py.builder.patterns import PatternBuilderMixin
from rewrite_py.builder.statements import StatementBuilderMixin
from rewrite_py.config import RuntimeConfig
from rewrite_py.errors import UnsupportedConstruct
from rewrite_py.result import Diagnostic
from rewrite_py.tree.python import CompilationUnit


class LstBuilder(
  StatementBuilderMixin,
  ImportBuilderMixin,
  PatternBuilderMixin,
  ExpressionBuilderMixin,
):
  """
  Builds a `CompilationUnit` from Python source text.

  Attributes:
      source (str): The source being mapped.
      config (RuntimeConfig): Recovery and logging settings.
      diagnostics (List[Diagnostic]): One entry per skipped statement.
  """

  def __init__(self, source: str, config: Optional[RuntimeConfig] = None) -> None:
    self.source = source
    self.config = config or RuntimeConfig()
    self.diagnostics: List[Diagnostic] = []
    self._cursor = SourceCursor(source)
    self._cst_module: Optional[cst.Module] = None
    self._code_ranges: Optional[Dict[cst.CSTNode, CodeRange]] = None

  def _positions(self) -> Dict[cst.CSTNode, CodeRange]:
    if self._code_ranges is None:
      wrapper = MetadataWrapper(self._cst_module, unsafe_skip_copy=True)
      self._code_ranges = wrapper.resolve(PositionProvider)
    return self._code_ranges

  def build(self) -> CompilationUnit:
    """
    Parses the source and maps it.

    Returns:
        CompilationUnit: The lossless tree.

    Raises:
        libcst.ParserSyntaxError: If the source is not valid Python.
        UnsupportedConstruct: In strict mode, or if text remains unaccounted for.
    """
    self._cst_module = cst.parse_module(self.source)
    slots, pending = self._statement_list(self._cst_module.body)
    eof = pending.merge(self._ws())
    if not self._cursor.at_end:
      raise UnsupportedConstruct("Module", "source text left over after the last statement", self._cursor.line_number())
    return CompilationUnit(tuple(slots), eof)

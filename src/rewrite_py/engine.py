"""
Parse and Print Entry Points.

1.  **parse**: source text -> `ParseResult` holding the lossless tree and a
    diagnostic per skipped statement.
2.  **print_tree**: any node -> source text.
3.  **round_trip**: parse then print; for supported input the result equals
    the source.
"""

from typing import Optional

from rewrite_py.builder import LstBuilder
from rewrite_py.config import RuntimeConfig
from rewrite_py.printer import print_tree
from rewrite_py.result import ParseResult
from rewrite_py.utils.console import log_info


def parse(source: str, config: Optional[RuntimeConfig] = None) -> ParseResult:
  """
  Builds the lossless tree for a module.

  Args:
      source (str): Python source code.
      config (Optional[RuntimeConfig]): Recovery settings. When omitted they are
          loaded from the nearest pyproject.toml.

  Returns:
      ParseResult: The tree and any diagnostics.

  Raises:
      libcst.ParserSyntaxError: If the input code is invalid Python.
      UnsupportedConstruct: If a construct cannot be mapped in strict mode.
  """
  builder = LstBuilder(source, config or RuntimeConfig.load())
  tree = builder.build()
  if builder.diagnostics:
    log_info(f"Built tree with {len(builder.diagnostics)} skipped statement(s)")
  return ParseResult(tree=tree, diagnostics=builder.diagnostics, success=not builder.diagnostics)


def round_trip(source: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Parses and reprints a module.

  Args:
      source (str): Python source code.
      config (Optional[RuntimeConfig]): Recovery settings.

  Returns:
      str: The printed text. Skipped statements are missing from it.
  """
  return print_tree(parse(source, config).tree)


__all__ = ["parse", "print_tree", "round_trip"]

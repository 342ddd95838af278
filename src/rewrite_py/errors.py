"""
Error taxonomy for building and printing lossless syntax trees.

All errors derive from `RewriteError` (a `ValueError`), so callers that only
care about "this input could not be handled" can catch a single type:

1.  **UnsupportedConstruct**: The builder met a syntactic category, operator or
    token it has no mapping for. At statement level the statement is skipped
    with a diagnostic; inside an expression the error propagates.
2.  **MalformedDesugar**: The printer found a desugar marker whose node does not
    have the shape the marker promises (argument count, operator name, receiver).
3.  **StructuralPrecondition**: A node violates a documented shape rule, such as
    a with-resource that is not an assignment.
"""

from typing import Optional


class RewriteError(ValueError):
  """Base class for all tree building and printing failures."""


class UnsupportedConstruct(RewriteError):
  """
  Raised when the builder cannot map a construct of the concrete tree.

  Attributes:
      construct (str): Name of the concrete node kind or token.
      line (Optional[int]): 1-based source line, when known.
  """

  def __init__(self, construct: str, message: str = "", line: Optional[int] = None) -> None:
    self.construct = construct
    self.line = line
    detail = f": {message}" if message else ""
    where = f" (line {line})" if line is not None else ""
    super().__init__(f"Unsupported construct '{construct}'{where}{detail}")


class MalformedDesugar(RewriteError):
  """Raised at print time when a desugar tag disagrees with its node shape."""


class StructuralPrecondition(RewriteError):
  """Raised when a node does not satisfy a documented shape precondition."""

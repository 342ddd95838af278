"""
Data structures representing the output of a parse.

`ParseResult` bundles the built tree with one `Diagnostic` per statement the
builder had to skip.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class Diagnostic(BaseModel):
  """
  A statement skipped by the builder.
  """

  line: int = Field(..., description="1-based line of the skipped statement.")
  column: int = Field(0, description="0-based column of the skipped statement.")
  kind: str = Field(..., description="The concrete node kind or token that could not be mapped.")
  message: str = Field("", description="Human readable explanation.")


class ParseResult(BaseModel):
  """
  Container for the results of building a lossless tree.
  """

  model_config = ConfigDict(arbitrary_types_allowed=True)

  tree: Any = Field(default=None, description="The built CompilationUnit.")
  diagnostics: List[Diagnostic] = Field(default_factory=list, description="Statements skipped while building.")
  success: bool = Field(
    default=True,
    description="True if every statement was mapped.",
  )

  @property
  def has_diagnostics(self) -> bool:
    """
    Check if any statement was skipped.

    Returns:
        True if one or more diagnostics are present.
    """
    return len(self.diagnostics) > 0

"""
Print output buffer.
"""

from typing import List


class PrintOutput:
  """
  Append-only text buffer; the only mutable state of a print run.
  """

  def __init__(self) -> None:
    self._parts: List[str] = []
    self._last = ""

  def append(self, text: str) -> "PrintOutput":
    if text:
      self._parts.append(text)
      self._last = text[-1]
    return self

  @property
  def is_empty(self) -> bool:
    return not self._last

  @property
  def ends_with_line_break(self) -> bool:
    return self._last in ("\n", "\r")

  def getvalue(self) -> str:
    return "".join(self._parts)

  def __str__(self) -> str:
    return self.getvalue()

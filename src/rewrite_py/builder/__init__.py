"""
Builder: libcst concrete tree to lossless tree.
"""

from rewrite_py.builder.builder import LstBuilder
from rewrite_py.builder.cursor import SourceCursor
from rewrite_py.builder.statements import IfClause, nest_if_chain

__all__ = ["LstBuilder", "SourceCursor", "IfClause", "nest_if_chain"]

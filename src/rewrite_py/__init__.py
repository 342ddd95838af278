"""
rewrite-py Package.

A lossless syntax tree for Python source. Source text is parsed with libcst
and mapped onto a tree that keeps every space and comment, so printing an
unedited tree reproduces the input byte for byte. Operators and set, tuple
and slice literals are stored as tagged method calls and printed back in
their native spelling.

Usage
-----

.. code-block:: python

    import rewrite_py as rp

    result = rp.parse("x = a + b  # sum\\n")
    assert rp.print_tree(result.tree) == "x = a + b  # sum\\n"

    if not result.success:
        for diagnostic in result.diagnostics:
            print(diagnostic.line, diagnostic.message)
"""

from rewrite_py.config import RuntimeConfig
from rewrite_py.engine import parse, print_tree, round_trip
from rewrite_py.errors import MalformedDesugar, RewriteError, StructuralPrecondition, UnsupportedConstruct
from rewrite_py.result import Diagnostic, ParseResult

__version__ = "0.0.1"

__all__ = [
  "Diagnostic",
  "MalformedDesugar",
  "ParseResult",
  "RewriteError",
  "RuntimeConfig",
  "StructuralPrecondition",
  "UnsupportedConstruct",
  "__version__",
  "parse",
  "print_tree",
  "round_trip",
]

"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so tests that swap the console do not leak.
- Parse helpers shared by the builder and printer tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'rewrite_py' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from rewrite_py.builder import LstBuilder  # noqa: E402
from rewrite_py.config import RuntimeConfig  # noqa: E402
from rewrite_py.printer import print_tree  # noqa: E402
from rewrite_py.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures console and log output is reset to stdout after every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def build():
  """
  Returns a helper that builds a CompilationUnit from source.

  Unsupported statements raise, so a test never passes on a silently
  skipped statement.
  """

  def _build(source: str):
    return LstBuilder(source, RuntimeConfig(strict=True)).build()

  return _build


@pytest.fixture
def roundtrip(build):
  """Returns a helper that builds and reprints source."""

  def _roundtrip(source: str) -> str:
    return print_tree(build(source))

  return _roundtrip

"""
Tests for unsupported statement recovery.

Verifies:
1.  An unsupported statement is dropped with a diagnostic and the rest of the
    module is still mapped.
2.  Whole lines ahead of a skipped statement move to the next statement.
3.  Strict mode raises instead.
4.  A warning is logged for each skipped statement.
5.  On a `;` line only the unsupported statement is dropped.
6.  Error messages name the line of the skipped statement.
"""

import logging

import pytest

from rewrite_py.builder import LstBuilder
from rewrite_py.config import RuntimeConfig
from rewrite_py.errors import UnsupportedConstruct
from rewrite_py.printer import print_tree

METACLASS = "x = 1\nclass A(metaclass=M):\n    pass\ny = 2\n"


def test_skip_records_diagnostic():
  builder = LstBuilder(METACLASS, RuntimeConfig(log_skipped=False))
  unit = builder.build()

  assert [slot.element.variable.name for slot in unit.statements] == ["x", "y"]
  assert print_tree(unit) == "x = 1\ny = 2\n"

  (diagnostic,) = builder.diagnostics
  assert diagnostic.line == 2
  assert diagnostic.column == 0
  assert diagnostic.kind == "class keyword"


def test_comment_lines_move_to_next_statement():
  source = "x = 1\n# about y\nclass A(metaclass=M):\n    pass\ny = 2\n"
  unit = LstBuilder(source, RuntimeConfig(log_skipped=False)).build()
  assert print_tree(unit) == "x = 1\n# about y\ny = 2\n"


def test_skip_inside_block():
  source = "async def f():\n    x = 1\n    async for a in b:\n        pass\n    return x\n"
  builder = LstBuilder(source, RuntimeConfig(log_skipped=False))
  unit = builder.build()
  assert print_tree(unit) == "async def f():\n    x = 1\n    return x\n"
  assert builder.diagnostics[0].kind == "async for"
  assert builder.diagnostics[0].line == 3


def test_skip_at_end_of_block_keeps_dedent():
  source = "async def f():\n    if a:\n        x = 1\n        async with b:\n            pass\n    return x\n"
  unit = LstBuilder(source, RuntimeConfig(log_skipped=False)).build()
  assert print_tree(unit) == "async def f():\n    if a:\n        x = 1\n    return x\n"


def test_strict_mode_raises():
  with pytest.raises(UnsupportedConstruct) as excinfo:
    LstBuilder(METACLASS, RuntimeConfig(strict=True)).build()
  assert excinfo.value.construct == "class keyword"


def test_skip_is_logged(caplog):
  with caplog.at_level(logging.WARNING, logger="rewrite_py"):
    LstBuilder(METACLASS).build()
  assert "Skipped statement at line 2" in caplog.text


def test_logging_can_be_disabled(caplog):
  with caplog.at_level(logging.WARNING, logger="rewrite_py"):
    LstBuilder(METACLASS, RuntimeConfig(log_skipped=False)).build()
  assert "Skipped statement" not in caplog.text


# --- Statements sharing a line ---

ASYNC_LIST = "[i async for i in y]"


def test_skip_keeps_line_siblings():
  source = f"a = 1; b = {ASYNC_LIST}; c = 2\nd = 3\n"
  builder = LstBuilder(source, RuntimeConfig(log_skipped=False))
  unit = builder.build()

  assert print_tree(unit) == "a = 1; c = 2\nd = 3\n"
  (diagnostic,) = builder.diagnostics
  assert diagnostic.kind == "async comprehension"
  assert diagnostic.line == 1
  assert diagnostic.column == 7


def test_skip_first_on_line_hands_over_indentation():
  source = f"def f():\n    b = {ASYNC_LIST}; a = 1\n    return a\n"
  unit = LstBuilder(source, RuntimeConfig(log_skipped=False)).build()
  assert print_tree(unit) == "def f():\n    a = 1\n    return a\n"


def test_skip_last_on_line_keeps_comment():
  source = f"a = 1; b = {ASYNC_LIST}  # note\nc = 2\n"
  unit = LstBuilder(source, RuntimeConfig(log_skipped=False)).build()
  assert print_tree(unit) == "a = 1  # note\nc = 2\n"


def test_skip_last_before_trailing_semicolon():
  source = f"x = 0\nif x:\n    a = 1; b = {ASYNC_LIST};\n    c = 2\n"
  unit = LstBuilder(source, RuntimeConfig(log_skipped=False)).build()
  assert print_tree(unit) == "x = 0\nif x:\n    a = 1\n    c = 2\n"


def test_whole_line_skipped_once():
  source = f"b = {ASYNC_LIST}; d = {ASYNC_LIST}\nc = 2\n"
  builder = LstBuilder(source, RuntimeConfig(log_skipped=False))
  assert print_tree(builder.build()) == "c = 2\n"
  (diagnostic,) = builder.diagnostics
  assert diagnostic.kind == "async comprehension"
  assert diagnostic.line == 1


def test_line_sibling_strict_mode_raises():
  with pytest.raises(UnsupportedConstruct):
    LstBuilder(f"a = 1; b = {ASYNC_LIST}\n", RuntimeConfig(strict=True)).build()


def test_skip_message_names_statement_line():
  source = "x = 1\nasync def f():\n\n    # loop\n    async for a in b:\n        pass\n    return a\n"
  builder = LstBuilder(source, RuntimeConfig(log_skipped=False))
  builder.build()
  (diagnostic,) = builder.diagnostics
  assert diagnostic.line == 5
  assert "(line 5)" in diagnostic.message

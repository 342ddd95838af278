"""
Tests for the console proxy and package logging.

Verifies:
1. The proxy forwards to a real Rich console.
2. Swapping the console also re-points log output.
3. The logging wrappers reach standard `logging` handlers.
"""

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from rewrite_py.utils.console import (
  LOGGER_NAME,
  console,
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  logger,
  reset_console,
  set_console,
)


def recording_console() -> Console:
  return Console(record=True, file=io.StringIO(), width=120)


def test_console_singleton_proxy():
  assert callable(console.print)
  assert isinstance(get_console(), Console)
  # attributes not defined on the proxy fall through to the backend
  assert isinstance(console.width, int)


def test_log_output_follows_console_swap():
  capture = recording_console()
  set_console(capture)

  log_warning("Skipped statement at line 3")
  log_success("Printed module")

  output = capture.export_text()
  assert "Skipped statement at line 3" in output
  assert "Printed module" in output


def test_single_rich_handler():
  set_console(recording_console())
  set_console(recording_console())
  handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
  assert len(handlers) == 1
  assert handlers[0].console is get_console()


def test_reset_creates_fresh_console():
  temp = recording_console()
  set_console(temp)
  assert get_console() is temp

  reset_console()
  assert get_console() is not temp


def test_wrappers_reach_logging(caplog):
  set_console(recording_console())
  with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
    log_info("InfoText")
    log_error("ErrorText")

  levels = {record.getMessage(): record.levelname for record in caplog.records}
  assert levels == {"InfoText": "INFO", "ErrorText": "ERROR"}


def test_print_forwards_to_backend():
  capture = recording_console()
  set_console(capture)
  console.print("direct")
  assert "direct" in console.export_text()

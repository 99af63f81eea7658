"""
Tests for the Logging Utility and Console Injection.
"""

from rich.console import Console

from lodash_switcheroo.utils.console import (
  console,
  get_console,
  log_error,
  log_info,
  log_warning,
  reset_console,
  set_console,
  set_quiet,
)


def test_console_proxy_forwards():
  assert callable(console.print)
  assert isinstance(get_console(), Console)
  assert isinstance(console.width, int)


def test_custom_console_injection():
  capture = Console(record=True, width=200)
  set_console(capture)

  log_info("Captured Log")
  log_warning("Unsupported lodash function: every [x]")

  output = capture.export_text()
  assert "Captured Log" in output
  assert "every [x]" in output


def test_reset_creates_fresh_backend():
  temp = Console()
  set_console(temp)
  assert get_console() is temp

  reset_console()
  assert get_console() is not temp


def test_quiet_suppresses_info(capsys):
  set_quiet(True)
  log_info("InfoText")
  log_error("ErrorText")

  out = capsys.readouterr().out
  assert "InfoText" not in out
  assert "ErrorText" in out

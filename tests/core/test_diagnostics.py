"""
Tests for advisory diagnostics formatting and sinks.
"""

from rich.console import Console

from lodash_switcheroo.core.diagnostics import RewriteWarning, format_unsupported, log_sink
from lodash_switcheroo.enums import ImportShape, WarningKind
from lodash_switcheroo.utils.console import set_console


def test_singular_and_plural_messages():
  assert format_unsupported(["every"]) == "Unsupported lodash function: every"
  assert format_unsupported(["every", "some"]) == "Unsupported lodash functions: every, some"


def test_message_uses_library_name():
  warning = RewriteWarning(kind=WarningKind.UNSUPPORTED, shape=ImportShape.SINGLE, names=["x"], library="underscore")
  assert warning.message == "Unsupported underscore function: x"


def test_malformed_message_quotes_statement():
  warning = RewriteWarning(kind=WarningKind.MALFORMED, shape=ImportShape.NAMED, statement="import { a b } from 'lodash'")
  assert warning.message == "Skipping malformed lodash import: import { a b } from 'lodash'"


def test_log_sink_writes_to_console():
  capture = Console(record=True, width=200)
  set_console(capture)

  log_sink(RewriteWarning(kind=WarningKind.UNSUPPORTED, shape=ImportShape.NAMED, names=["every"], file_id="a.js"))

  output = capture.export_text()
  assert "a.js: Unsupported lodash function: every" in output

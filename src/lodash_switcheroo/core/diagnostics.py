"""
Advisory Diagnostics.

Warnings raised while rewriting are advisory: they never change the outcome
of a rewrite. They are delivered to an injectable sink so that the rewriter
stays free of I/O; the default sink routes them to the package logger.
"""

from typing import Callable, List

from pydantic import BaseModel, Field

from lodash_switcheroo.enums import ImportShape, WarningKind
from lodash_switcheroo.utils.console import log_warning


def format_unsupported(names: List[str], library: str = "lodash") -> str:
  """
  Renders the advisory text for unsupported symbols.

  Args:
      names: The unsupported symbol names.
      library: The source library name used in the message.

  Returns:
      str: e.g. ``Unsupported lodash functions: every, some``.
  """
  suffix = "s" if len(names) > 1 else ""
  return f"Unsupported {library} function{suffix}: {', '.join(names)}"


class RewriteWarning(BaseModel):
  """
  A single advisory diagnostic produced by the rewriter.
  """

  kind: WarningKind = Field(description="Why the statement was (partially) kept.")
  shape: ImportShape = Field(description="The import form that triggered the warning.")
  names: List[str] = Field(default_factory=list, description="Symbols the warning refers to.")
  statement: str = Field(default="", description="The matched import statement text.")
  file_id: str = Field(default="", description="Identifier of the file being rewritten.")
  library: str = Field(default="lodash", description="The source library name.")

  @property
  def message(self) -> str:
    """Human readable advisory text."""
    if self.kind == WarningKind.MALFORMED:
      return f"Skipping malformed {self.library} import: {self.statement}"
    return format_unsupported(self.names, self.library)


DiagnosticsSink = Callable[[RewriteWarning], None]


def log_sink(warning: RewriteWarning) -> None:
  """Default sink: logs the warning, prefixed with the file id when known."""
  if warning.file_id:
    log_warning(f"{warning.file_id}: {warning.message}")
  else:
    log_warning(warning.message)


class WarningCollector:
  """
  Sink that accumulates warnings in memory.

  Useful in tests and batch reports where diagnostics are inspected after
  the rewrite instead of being printed.
  """

  def __init__(self) -> None:
    self.warnings: List[RewriteWarning] = []

  def __call__(self, warning: RewriteWarning) -> None:
    self.warnings.append(warning)

  @property
  def messages(self) -> List[str]:
    return [w.message for w in self.warnings]

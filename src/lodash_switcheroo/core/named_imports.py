"""
Named-Import Parser and Renderer.

Converts the tokens found between the braces of ``import { ... } from 'lodash'``
into structured :class:`NamedImport` pairs, and renders them back into the same
textual notation.

Example:
    >>> parse_named_import("isEqual as lodashIsEqual")
    NamedImport(actual_name='isEqual', custom_name='lodashIsEqual')
    >>> render_named_import(parse_named_import("isEqual"))
    'isEqual'
"""

import re
from typing import Iterable, List

from pydantic import BaseModel, ConfigDict

RENAME_SEPARATOR = " as "

_IDENTIFIER = re.compile(r"^\w+$", re.ASCII)


class NamedImportError(ValueError):
  """Raised when a named-import token cannot be parsed."""


class NamedImport(BaseModel):
  """
  A single entry of a named-import list.

  Attributes:
      actual_name: The symbol exported by the source library.
      custom_name: The locally bound identifier (equals ``actual_name``
          when no rename clause is present).
  """

  model_config = ConfigDict(frozen=True)

  actual_name: str
  custom_name: str

  @property
  def is_renamed(self) -> bool:
    """True if the token carries an ``as <alias>`` clause."""
    return self.actual_name != self.custom_name


def split_named_imports(raw: str) -> List[str]:
  """
  Splits the raw text between braces into trimmed, non-empty tokens.

  Args:
      raw: Comma-separated token list, e.g. ``" every,\\n isEqual as eq "``.

  Returns:
      List[str]: Tokens in source order (``['every', 'isEqual as eq']``).
  """
  return [token.strip() for token in raw.split(",") if token.strip()]


def parse_named_import(token: str) -> NamedImport:
  """
  Parses a named-import token into a :class:`NamedImport`.

  Args:
      token: A single token such as ``"isEqual"`` or ``"isEqual as eq"``.

  Returns:
      NamedImport: The parsed pair.

  Raises:
      NamedImportError: If the symbol name is empty, either side is not an
          identifier, or the token carries more than one rename clause.
  """
  parts = token.split(RENAME_SEPARATOR)
  if len(parts) > 2:
    raise NamedImportError(f"Invalid named import: '{token}'")
  actual_name = parts[0].strip()
  custom_name = parts[1].strip() if len(parts) > 1 else ""

  if not actual_name:
    raise NamedImportError(f"Invalid named import: '{token}'")

  custom_name = custom_name or actual_name

  for name in (actual_name, custom_name):
    if not _IDENTIFIER.match(name):
      raise NamedImportError(f"Invalid named import: '{token}'")

  return NamedImport(actual_name=actual_name, custom_name=custom_name)


def render_named_import(item: NamedImport) -> str:
  """
  Renders a :class:`NamedImport` back into import-list notation.

  Args:
      item: The pair to render.

  Returns:
      str: ``actual`` or ``actual as custom``.
  """
  if not item.is_renamed:
    return item.actual_name
  return f"{item.actual_name}{RENAME_SEPARATOR}{item.custom_name}"


def render_named_imports(items: Iterable[NamedImport]) -> str:
  """Joins rendered tokens with ``', '``, preserving order."""
  return ", ".join(render_named_import(item) for item in items)

"""
Data structures representing the output of a file rewrite.

This module defines the `TransformResult` Pydantic model, which encapsulates
the rewritten code, the (always absent) source map and the advisory warnings
emitted while rewriting.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from lodash_switcheroo.core.diagnostics import RewriteWarning


class TransformResult(BaseModel):
  """
  Container for the result of rewriting one file.

  A rewriter returns ``None`` instead of a result when the file never
  mentions the source library.
  """

  code: str = Field(default="", description="The rewritten source code.")
  map: None = Field(default=None, description="Source maps are not synthesized.")
  warnings: List[RewriteWarning] = Field(default_factory=list, description="Advisory diagnostics.")
  file_id: str = Field(default="", description="Identifier of the rewritten file.")
  original: Optional[str] = Field(default=None, exclude=True, repr=False)

  @property
  def changed(self) -> bool:
    """
    Check if the rewrite altered the source text.

    Returns:
        True if ``code`` differs from the input.
    """
    return self.original is None or self.code != self.original

  def to_plugin_output(self) -> Dict[str, Any]:
    """Shape expected by bundler plugin hosts: ``{"code": ..., "map": None}``."""
    return {"code": self.code, "map": None}

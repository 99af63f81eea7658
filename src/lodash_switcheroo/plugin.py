"""
Bundler Plugin Surface.

Exposes the rewriter through the shape build tools expect from a transform
plugin: an object with a ``name`` and a ``transform(code, id)`` hook returning
``None`` (skip) or ``{"code": ..., "map": None}``.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from lodash_switcheroo.config import RuntimeConfig
from lodash_switcheroo.core.diagnostics import DiagnosticsSink
from lodash_switcheroo.core.rewriter import LodashRewriter
from lodash_switcheroo.snapshots import load_supported_functions

PLUGIN_NAME = "vite:es-toolkit"


class EsToolkitPlugin:
  """
  Per-file transform hook wrapping a shared `LodashRewriter`.

  Attributes:
      name (str): Plugin identifier reported to the host.
      rewriter (LodashRewriter): The underlying rewriter.
  """

  name = PLUGIN_NAME

  def __init__(self, rewriter: LodashRewriter) -> None:
    self.rewriter = rewriter

  def transform(self, src: str, id: str = "") -> Optional[Dict[str, Any]]:
    """
    Host hook invoked once per module.

    Args:
        src: Module source.
        id: Module identifier (path), only used for diagnostics.

    Returns:
        Optional[Dict]: None if the module does not reference lodash.
    """
    result = self.rewriter.transform(src, id)
    if result is None:
      return None
    return result.to_plugin_output()


def es_toolkit_plugin(
  supported: Optional[Iterable[str]] = None,
  config: Optional[RuntimeConfig] = None,
  sink: Optional[DiagnosticsSink] = None,
  snapshot_path: Optional[Path] = None,
) -> EsToolkitPlugin:
  """
  Builds the plugin, loading the supported-symbol set once.

  Args:
      supported: Explicit supported names. Takes precedence over snapshots.
      config: Runtime configuration.
      sink: Diagnostics sink for advisory warnings.
      snapshot_path: Snapshot JSON to load when ``supported`` is not given.
          Falls back to ``config.supported_functions_path``, then the bundled one.

  Returns:
      EsToolkitPlugin: Ready to register with a host.
  """
  config = config or RuntimeConfig()
  if supported is None:
    supported = load_supported_functions(snapshot_path or config.supported_functions_path)
  return EsToolkitPlugin(LodashRewriter(supported, config=config, sink=sink))

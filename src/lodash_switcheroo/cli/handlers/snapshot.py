"""
Snapshot Command Handler.

Regenerates the supported-symbol snapshot from the index file of an installed
``es-toolkit`` package, e.g. ``node_modules/es-toolkit/dist/compat/index.d.ts``.
"""

from pathlib import Path
from typing import Optional

from lodash_switcheroo.snapshots import SnapshotError, bundled_snapshot_path, capture_snapshot
from lodash_switcheroo.utils.console import log_error, log_success


def handle_snapshot(
  index_path: Path,
  out_path: Optional[Path] = None,
  version: Optional[str] = None,
  library: str = "es-toolkit/compat",
) -> int:
  """
  Captures the export list of the replacement library.

  Args:
      index_path: ES module or declaration index to scan.
      out_path: Destination JSON. Defaults to the bundled snapshot.
      version: Package version to record.
      library: Module specifier to record.

  Returns:
      int: Exit code.
  """
  if not index_path.is_file():
    log_error(f"Index file not found: {index_path}")
    return 1

  target = out_path or bundled_snapshot_path()
  try:
    snapshot = capture_snapshot(index_path, target, library=library, version=version)
  except (OSError, UnicodeDecodeError, SnapshotError) as e:
    log_error(f"Failed to capture snapshot: {e}")
    return 1

  log_success(f"Captured {len(snapshot.exports)} exports of {library} -> [path]{target}[/path]")
  return 0

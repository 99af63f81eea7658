"""
Export Snapshots of the Replacement Library.

The rewriter needs the public surface of ``es-toolkit/compat`` to decide which
lodash symbols can be redirected. Rather than requiring a JavaScript runtime,
the surface is stored as a JSON snapshot:

.. code-block:: json

    {"library": "es-toolkit/compat", "version": "1.39.0", "exports": ["add", "after"]}

A bundled snapshot ships with the package. `capture_snapshot` regenerates it
from the index file of an installed ``es-toolkit`` package.
"""

import json
import re
from importlib.resources import files
from pathlib import Path
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, Field, ValidationError

BUNDLED_SNAPSHOT = "es_toolkit_compat.json"

# export { a, b as c } from './x.js';   export type { T } from './t';
_EXPORT_LIST_RE = re.compile(r"export\s+(type\s+)?\{([^}]*)\}", re.ASCII)
# export function a(   export declare function a(   export const a =
_EXPORT_DECL_RE = re.compile(
  r"^\s*export\s+(?:declare\s+)?(?:async\s+)?(?:function\*?|const|let|var|class)\s+(\w+)",
  re.MULTILINE | re.ASCII,
)


class SnapshotError(ValueError):
  """Raised when a snapshot file is missing or does not validate."""


class ExportSnapshot(BaseModel):
  """
  Serializable record of a library's exported names.
  """

  library: str = Field(description="Module specifier the exports belong to.")
  version: Optional[str] = Field(None, description="Version of the package the snapshot was taken from.")
  exports: List[str] = Field(default_factory=list, description="Exported symbol names.")


def bundled_snapshot_path() -> Path:
  """
  Locates the snapshot JSON shipped with the package.

  Returns:
      Path: Absolute path to the bundled snapshot.
  """
  return Path(str(files("lodash_switcheroo.snapshots") / BUNDLED_SNAPSHOT))


def read_snapshot(path: Optional[Path] = None) -> ExportSnapshot:
  """
  Reads and validates a snapshot file.

  Args:
      path: Snapshot JSON path. Defaults to the bundled snapshot.

  Returns:
      ExportSnapshot: The validated snapshot.

  Raises:
      SnapshotError: If the file cannot be read or has an invalid structure.
  """
  target = path or bundled_snapshot_path()
  try:
    with open(target, "rt", encoding="utf-8") as f:
      content = json.load(f)
  except (OSError, json.JSONDecodeError) as e:
    raise SnapshotError(f"Cannot read snapshot {target}: {e}") from e

  try:
    return ExportSnapshot.model_validate(content)
  except ValidationError as e:
    raise SnapshotError(f"Invalid snapshot {target}: {e}") from e


def load_supported_functions(path: Optional[Path] = None) -> FrozenSet[str]:
  """
  Returns the supported symbol names recorded in a snapshot.

  Args:
      path: Snapshot JSON path. Defaults to the bundled snapshot.

  Returns:
      FrozenSet[str]: Exported names of the replacement library.
  """
  return frozenset(read_snapshot(path).exports)


def extract_exports(text: str) -> List[str]:
  """
  Extracts exported value names from an ES module or declaration file.

  Type-only exports and the ``default`` export are skipped.

  Args:
      text: Content of e.g. ``node_modules/es-toolkit/dist/compat/index.d.ts``.

  Returns:
      List[str]: Sorted, de-duplicated export names.
  """
  names = set()

  for match in _EXPORT_LIST_RE.finditer(text):
    if match.group(1):
      continue
    for token in match.group(2).split(","):
      token = token.strip()
      if not token or token.startswith("type "):
        continue
      exported = token.split(" as ")[-1].strip()
      if exported and exported != "default":
        names.add(exported)

  for match in _EXPORT_DECL_RE.finditer(text):
    names.add(match.group(1))

  return sorted(names)


def capture_snapshot(
  index_path: Path,
  out_path: Path,
  library: str = "es-toolkit/compat",
  version: Optional[str] = None,
) -> ExportSnapshot:
  """
  Builds a snapshot from an installed package's index file and saves it.

  Args:
      index_path: The ES module or ``.d.ts`` index to scan.
      out_path: Destination JSON file.
      library: Module specifier recorded in the snapshot.
      version: Package version recorded in the snapshot.

  Returns:
      ExportSnapshot: The snapshot that was written.

  Raises:
      SnapshotError: If the index file has no exports.
  """
  text = index_path.read_text(encoding="utf-8")
  exports = extract_exports(text)
  if not exports:
    raise SnapshotError(f"No exports found in {index_path}")

  snapshot = ExportSnapshot(library=library, version=version, exports=exports)
  out_path.parent.mkdir(parents=True, exist_ok=True)
  with open(out_path, "wt", encoding="utf-8") as f:
    json.dump(snapshot.model_dump(), f, indent=2)
    f.write("\n")
  return snapshot

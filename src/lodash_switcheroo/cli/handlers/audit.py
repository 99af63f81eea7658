"""
Audit Command Handler.

Scans source files for lodash imports and reports which referenced functions
have no counterpart in the replacement library. Nothing is written.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Set

from rich.table import Table

from lodash_switcheroo.cli.handlers.convert import collect_source_files
from lodash_switcheroo.config import RuntimeConfig
from lodash_switcheroo.core.diagnostics import WarningCollector
from lodash_switcheroo.core.rewriter import LodashRewriter
from lodash_switcheroo.enums import WarningKind
from lodash_switcheroo.snapshots import SnapshotError, load_supported_functions
from lodash_switcheroo.utils.console import console, log_error, log_info, log_success


def handle_audit(
  path: Path,
  json_mode: bool = False,
  source_library: Optional[str] = None,
  supported_path: Optional[Path] = None,
) -> int:
  """
  Reports unsupported lodash functions per file.

  Args:
      path: Input source file or directory.
      json_mode: If True, print JSON to stdout instead of a table.
      source_library: Override for the source module specifier.
      supported_path: Snapshot JSON override.

  Returns:
      int: Exit code (0 if every referenced function is supported, 1 otherwise).
  """
  if not path.exists():
    log_error(f"Path not found: {path}")
    return 1

  config = RuntimeConfig.load(
    source_library=source_library,
    supported_functions_path=supported_path,
    search_path=path if path.is_dir() else path.parent,
  )
  try:
    supported = load_supported_functions(config.supported_functions_path)
  except SnapshotError as e:
    log_error(str(e))
    return 1

  files = [path] if path.is_file() else collect_source_files(path, config)
  if not json_mode:
    log_info(f"Auditing {len(files)} files for {config.source_library} imports...")

  # Relative file name -> unsupported names, first-seen order
  findings: Dict[str, List[str]] = {}
  malformed: Dict[str, int] = {}

  # Warnings are read from the results; the collector only keeps them off the log.
  rewriter = LodashRewriter(supported, config=config.model_copy(update={"strict_mode": False}), sink=WarningCollector())

  for f in files:
    try:
      result = rewriter.transform(f.read_text(encoding="utf-8"), str(f))
    except (OSError, UnicodeDecodeError) as e:
      log_error(f"Failed to read {f}: {e}")
      continue

    if result is None:
      continue

    name = f.name if f == path else str(f.relative_to(path))
    seen: Set[str] = set()
    for warning in result.warnings:
      if warning.kind == WarningKind.MALFORMED:
        malformed[name] = malformed.get(name, 0) + 1
        continue
      for fn in warning.names:
        if fn not in seen:
          seen.add(fn)
          findings.setdefault(name, []).append(fn)

  if json_mode:
    output_list = [
      {"file": name, "unsupported": findings.get(name, []), "malformed_imports": malformed.get(name, 0)}
      for name in sorted(set(findings) | set(malformed))
    ]
    print(json.dumps(output_list, indent=2))
    return 1 if findings else 0

  if not findings:
    log_success(f"All {config.source_library} functions used in {path.name} are supported.")
    return 0

  table = Table(title=f"❌ Unsupported {config.source_library} Functions")
  table.add_column("File", style="cyan")
  table.add_column("Functions", style="red")

  for name in sorted(findings):
    table.add_row(name, ", ".join(findings[name]))

  console.print(table)

  distinct = {fn for fns in findings.values() for fn in fns}
  console.print(f"[bold]Audit Summary for {path.name}[/bold]")
  console.print(f"Files Scanned:         {len(files)}")
  console.print(f"Files Affected:        [red]{len(findings)}[/red]")
  console.print(f"Distinct Unsupported:  [red]{len(distinct)}[/red]")
  if malformed:
    console.print(f"Malformed Imports:     [yellow]{sum(malformed.values())}[/yellow]")

  return 1

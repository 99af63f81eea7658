"""
Convert Command Handler.

This module implements the logic for the `lodash-switcheroo convert` command.
It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Loading the supported-symbol snapshot.
3. Rewriting a single file or every matching file of a directory tree.
4. Output writing (stdout, mirrored output tree, or in place) and a summary.
"""

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from rich.table import Table

from lodash_switcheroo.config import RuntimeConfig
from lodash_switcheroo.core.rewriter import LodashRewriter
from lodash_switcheroo.snapshots import SnapshotError, load_supported_functions
from lodash_switcheroo.utils.console import (
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
)


class FileOutcome(BaseModel):
  """
  Result of processing one file in a batch.
  """

  changed: bool = False
  warnings: List[str] = Field(default_factory=list)
  error: Optional[str] = None

  @property
  def success(self) -> bool:
    return self.error is None


def collect_source_files(root: Path, config: RuntimeConfig) -> List[Path]:
  """
  Lists rewrite candidates below a directory, honouring extensions and excludes.

  Args:
      root: Directory to walk.
      config: Supplies the extension and exclusion lists.

  Returns:
      List[Path]: Sorted candidate files.
  """
  return sorted(p for p in root.rglob("*") if p.is_file() and config.matches_file(p.relative_to(root)))


def handle_convert(
  input_path: Path,
  output_path: Optional[Path] = None,
  in_place: bool = False,
  check: bool = False,
  strict: Optional[bool] = None,
  source_library: Optional[str] = None,
  target_library: Optional[str] = None,
  supported_path: Optional[Path] = None,
) -> int:
  """
  Handles the 'convert' command execution.

  Args:
      input_path: Path to the source file or directory to rewrite.
      output_path: Destination file (or directory for directory input).
      in_place: Overwrite input files instead of writing elsewhere.
      check: Write nothing; exit 1 if any file would change.
      strict: If True, a malformed named import fails the file.
      source_library: Override for the source module specifier.
      target_library: Override for the replacement module specifier.
      supported_path: Snapshot JSON override.

  Returns:
      int: Exit code (0 for success, 1 for failure or pending changes in check mode).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  config = RuntimeConfig.load(
    source_library=source_library,
    target_library=target_library,
    strict_mode=strict,
    supported_functions_path=supported_path,
    search_path=input_path if input_path.is_dir() else input_path.parent,
  )

  try:
    supported = load_supported_functions(config.supported_functions_path)
  except SnapshotError as e:
    log_error(str(e))
    return 1

  rewriter = LodashRewriter(supported, config=config)
  results: Dict[str, FileOutcome] = {}

  echo = False
  if input_path.is_file():
    echo = not (check or in_place or output_path)
    dest = None if check else (input_path if in_place else output_path)
    results[input_path.name] = _convert_single_file(rewriter, input_path, dest, echo=echo)

  else:
    if not (output_path or in_place or check):
      log_error("Directory conversion requires --out, --in-place or --check.")
      return 1

    files = collect_source_files(input_path, config)
    if not files:
      log_warning(f"No source files found in {input_path}")
      return 0

    log_info(f"Processing {len(files)} files from [path]{input_path}[/path]...")

    for src_file in files:
      rel_path = src_file.relative_to(input_path)
      if check:
        dest = None
      elif in_place:
        dest = src_file
      else:
        dest = output_path / rel_path
      results[str(rel_path)] = _convert_single_file(rewriter, src_file, dest, echo=False)

  if not echo:
    _print_batch_summary(results, check)

  if any(not r.success for r in results.values()):
    return 1
  if check and any(r.changed for r in results.values()):
    return 1
  return 0


def _convert_single_file(
  rewriter: LodashRewriter,
  input_path: Path,
  output_path: Optional[Path],
  echo: bool,
) -> FileOutcome:
  """
  Rewrites one file.

  Args:
      rewriter: Configured rewriter.
      input_path: Source file path.
      output_path: Destination file path, or None to skip writing.
      echo: Print the resulting code to stdout.

  Returns:
      FileOutcome: Whether the file changed, its warnings or failure.
  """
  try:
    code = input_path.read_text(encoding="utf-8")
    result = rewriter.transform(code, str(input_path))
  except (OSError, UnicodeDecodeError, ValueError) as e:
    log_error(f"Failed to convert {input_path}: {e}")
    return FileOutcome(error=str(e))

  new_code = code if result is None else result.code
  outcome = FileOutcome(
    changed=result is not None and result.changed,
    warnings=[w.message for w in result.warnings] if result else [],
  )

  if echo:
    print(new_code, end="")
    return outcome

  if output_path is None:
    return outcome

  # In-place runs leave untouched files alone.
  if output_path == input_path and not outcome.changed:
    return outcome

  try:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(new_code, encoding="utf-8")
  except OSError as e:
    log_error(f"Failed to write {output_path}: {e}")
    return outcome.model_copy(update={"error": str(e)})

  if outcome.changed:
    log_success(f"Rewrote: [path]{input_path}[/path] -> [path]{output_path}[/path]")
  return outcome


def _print_batch_summary(results: Dict[str, FileOutcome], check: bool = False) -> None:
  """
  Renders a summary table of the batch to the console.

  Args:
      results: Mapping of file names to outcomes.
      check: Whether the run only reported pending changes.
  """
  total = len(results)
  changed = sum(1 for r in results.values() if r.changed and r.success)
  failures = sum(1 for r in results.values() if not r.success)
  with_warnings = sum(1 for r in results.values() if r.warnings)

  verb = "would be rewritten" if check else "rewritten"

  if failures == 0 and with_warnings == 0:
    log_success(f"Batch Complete: {changed}/{total} files {verb}.")
    return

  table = Table(title="Rewrite Report")
  table.add_column("File", style="cyan")
  table.add_column("Status", justify="center")
  table.add_column("Issues", style="yellow")

  for filename, res in results.items():
    if res.success and not res.warnings:
      continue
    status = "❌ Failed" if not res.success else "⚠️ Warnings"
    issues = res.error if res.error else "; ".join(res.warnings)
    table.add_row(filename, status, issues)

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {changed}/{total} files {verb}, {with_warnings} with warnings, {failures} failed.")

"""
Main Entry Point for lodash-switcheroo CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `lodash_switcheroo.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from lodash_switcheroo import __version__
from lodash_switcheroo.cli import commands
from lodash_switcheroo.utils.console import log_error, set_quiet


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="lodash-switcheroo: redirect lodash imports to es-toolkit/compat")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("--quiet", action="store_true", help="Only log errors")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CONVERT ---
  cmd_conv = subparsers.add_parser("convert", help="Rewrite lodash imports in a file or directory")
  cmd_conv.add_argument("path", type=Path, help="Input source file or directory")
  cmd_conv.add_argument("--out", type=Path, help="Output destination (file or dir)")
  cmd_conv.add_argument("--in-place", action="store_true", help="Overwrite the input files")
  cmd_conv.add_argument(
    "--check",
    action="store_true",
    help="Write nothing; exit with 1 if any file would be rewritten",
  )
  cmd_conv.add_argument(
    "--strict",
    action="store_true",
    default=None,
    help="Fail a file on malformed named imports instead of skipping them (Overrides config)",
  )
  cmd_conv.add_argument("--source-lib", default=None, help="Source module specifier (default: lodash)")
  cmd_conv.add_argument("--target-lib", default=None, help="Replacement module specifier (default: es-toolkit/compat)")
  cmd_conv.add_argument("--supported", type=Path, default=None, help="Snapshot JSON of supported functions")

  # --- Command: AUDIT ---
  cmd_audit = subparsers.add_parser("audit", help="List lodash functions without an es-toolkit counterpart")
  cmd_audit.add_argument("path", type=Path, help="Input source file or directory")
  cmd_audit.add_argument("--json", action="store_true", help="Print findings as JSON")
  cmd_audit.add_argument("--source-lib", default=None, help="Source module specifier (default: lodash)")
  cmd_audit.add_argument("--supported", type=Path, default=None, help="Snapshot JSON of supported functions")

  # --- Command: SNAPSHOT ---
  cmd_snap = subparsers.add_parser("snapshot", help="Capture the export list of an installed es-toolkit")
  cmd_snap.add_argument("index", type=Path, help="Path to es-toolkit's compat index (.d.ts or .mjs)")
  cmd_snap.add_argument("--out", type=Path, default=None, help="Output JSON (default: bundled snapshot)")
  cmd_snap.add_argument("--version-tag", dest="version_tag", default=None, help="Package version to record")

  args = parser.parse_args(argv)
  set_quiet(args.quiet)

  if args.command == "convert":
    if args.in_place and args.out:
      log_error("--in-place and --out are mutually exclusive.")
      return 1
    try:
      return commands.handle_convert(
        args.path,
        args.out,
        in_place=args.in_place,
        check=args.check,
        strict=args.strict,
        source_library=args.source_lib,
        target_library=args.target_lib,
        supported_path=args.supported,
      )
    except ValueError as e:
      log_error(f"Invalid configuration: {e}")
      return 1

  elif args.command == "audit":
    try:
      return commands.handle_audit(
        args.path,
        json_mode=args.json,
        source_library=args.source_lib,
        supported_path=args.supported,
      )
    except ValueError as e:
      log_error(f"Invalid configuration: {e}")
      return 1

  elif args.command == "snapshot":
    return commands.handle_snapshot(args.index, args.out, version=args.version_tag)

  return 0


if __name__ == "__main__":
  sys.exit(main())

"""
Runtime Configuration Store.

Settings are read from the ``[tool.lodash_switcheroo]`` table of the nearest
``pyproject.toml`` and overridden by explicit (CLI) arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

DEFAULT_EXTENSIONS = [".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx", ".mts", ".cts", ".vue", ".svelte"]
DEFAULT_EXCLUDE_DIRS = ["node_modules", "dist", "build", ".git"]


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the rewriter and the CLI.
  """

  source_library: str = Field("lodash", description="Module specifier whose imports are rewritten.")
  target_library: str = Field("es-toolkit/compat", description="Module specifier imports are redirected to.")
  strict_mode: bool = Field(False, description="If True, malformed import tokens raise instead of being skipped.")
  supported_functions_path: Optional[Path] = Field(
    None, description="Snapshot JSON listing the replacement library exports (defaults to the bundled one)."
  )
  extensions: List[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
  exclude_dirs: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))

  @field_validator("source_library", "target_library")
  @classmethod
  def validate_library(cls, v: str) -> str:
    """
    Rejects empty module specifiers.

    Raises:
        ValueError: If the name is blank or contains quotes.
    """
    v_clean = v.strip()
    if not v_clean:
      raise ValueError("Library name must not be empty.")
    if "'" in v_clean or '"' in v_clean:
      raise ValueError(f"Library name must not contain quotes: {v_clean}")
    return v_clean

  @field_validator("extensions")
  @classmethod
  def normalize_extensions(cls, v: List[str]) -> List[str]:
    """Lowercases extensions and ensures the leading dot."""
    cleaned = []
    for ext in v:
      ext = ext.strip().lower()
      if not ext:
        continue
      cleaned.append(ext if ext.startswith(".") else f".{ext}")
    return cleaned

  def matches_file(self, path: Path) -> bool:
    """
    Checks if a file is a rewrite candidate.

    Args:
        path: File path to test.

    Returns:
        bool: True if the suffix is configured and no excluded dir is on the path.
    """
    if path.suffix.lower() not in self.extensions:
      return False
    return not any(part in self.exclude_dirs for part in path.parts)

  @classmethod
  def load(
    cls,
    source_library: Optional[str] = None,
    target_library: Optional[str] = None,
    strict_mode: Optional[bool] = None,
    supported_functions_path: Optional[Path] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        source_library: Override for the source module specifier.
        target_library: Override for the replacement module specifier.
        strict_mode: Override for strict mode.
        supported_functions_path: Override for the snapshot JSON path.
        search_path: Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    values: Dict[str, Any] = {}
    for key in ("source_library", "target_library", "strict_mode", "extensions", "exclude_dirs"):
      if key in toml_config:
        values[key] = toml_config[key]

    if "supported_functions_path" in toml_config:
      raw = Path(toml_config["supported_functions_path"])
      values["supported_functions_path"] = (toml_dir / raw).resolve() if toml_dir else raw.resolve()

    if source_library:
      values["source_library"] = source_library
    if target_library:
      values["target_library"] = target_library
    if strict_mode is not None:
      values["strict_mode"] = strict_mode
    if supported_functions_path:
      values["supported_functions_path"] = supported_functions_path

    return cls(**values)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the start directory and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      tool_section = data.get("tool", {})
      if "lodash_switcheroo" in tool_section:
        return tool_section["lodash_switcheroo"], parent

  return {}, None

"""
Tests for RuntimeConfig validation and pyproject.toml loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from lodash_switcheroo.config import RuntimeConfig


def test_defaults():
  config = RuntimeConfig()
  assert config.source_library == "lodash"
  assert config.target_library == "es-toolkit/compat"
  assert config.strict_mode is False
  assert config.supported_functions_path is None
  assert ".tsx" in config.extensions


def test_library_validation():
  with pytest.raises(ValidationError):
    RuntimeConfig(source_library="   ")
  with pytest.raises(ValidationError):
    RuntimeConfig(target_library="es-toolkit'")
  assert RuntimeConfig(source_library=" lodash ").source_library == "lodash"


def test_extensions_are_normalized():
  config = RuntimeConfig(extensions=["JS", ".Vue", ""])
  assert config.extensions == [".js", ".vue"]


def test_matches_file():
  config = RuntimeConfig()
  assert config.matches_file(Path("src/app.ts"))
  assert not config.matches_file(Path("src/app.py"))
  assert not config.matches_file(Path("node_modules/lodash/index.js"))


def test_load_reads_pyproject_from_parent(tmp_path):
  (tmp_path / "pyproject.toml").write_text(
    "[tool.lodash_switcheroo]\n"
    'target_library = "es-toolkit"\n'
    "strict_mode = true\n"
    'supported_functions_path = "snap/exports.json"\n'
    'extensions = ["js"]\n'
  )
  nested = tmp_path / "web" / "src"
  nested.mkdir(parents=True)

  config = RuntimeConfig.load(search_path=nested)

  assert config.target_library == "es-toolkit"
  assert config.strict_mode is True
  assert config.supported_functions_path == (tmp_path / "snap" / "exports.json").resolve()
  assert config.extensions == [".js"]


def test_cli_overrides_win(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[tool.lodash_switcheroo]\ntarget_library = "es-toolkit"\nstrict_mode = true\n')

  config = RuntimeConfig.load(target_library="radashi", strict_mode=False, search_path=tmp_path)

  assert config.target_library == "radashi"
  assert config.strict_mode is False


def test_pyproject_without_section_is_ignored(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[project]\nname = "web"\n')
  assert RuntimeConfig.load(search_path=tmp_path) == RuntimeConfig()

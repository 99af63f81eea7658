"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so captured log output does not leak between tests.
- A small supported-function set mirroring the examples used across the suite.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'lodash_switcheroo' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from lodash_switcheroo.core.diagnostics import WarningCollector  # noqa: E402
from lodash_switcheroo.utils.console import reset_console  # noqa: E402

SUPPORTED = frozenset({"isEqual", "debounce", "chunk", "cloneDeep", "map", "isNil"})


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures console and log level are reset around every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def supported():
  """Supported names: `every` and `unknownFn` are deliberately missing."""
  return SUPPORTED


@pytest.fixture
def collector():
  """In-memory diagnostics sink."""
  return WarningCollector()

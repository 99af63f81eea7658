"""
Tests for export snapshots of the replacement library.
"""

import json

import pytest

from lodash_switcheroo.snapshots import (
  SnapshotError,
  bundled_snapshot_path,
  capture_snapshot,
  extract_exports,
  load_supported_functions,
  read_snapshot,
)

INDEX_DTS = """
export { castArray } from './array/castArray.js';
export { chunk, compact as compactArray } from './array/index.js';
export type { DebounceOptions } from './function/debounce.js';
export { type ThrottleOptions, throttle } from './function/throttle.js';
export { toolkit as default } from './toolkit.js';
export declare function isEqual(a: unknown, b: unknown): boolean;
export const VERSION: string;
"""


def test_bundled_snapshot_loads():
  assert bundled_snapshot_path().name == "es_toolkit_compat.json"
  names = load_supported_functions()
  assert "isEqual" in names
  assert "debounce" in names
  assert isinstance(names, frozenset)


def test_extract_exports():
  assert extract_exports(INDEX_DTS) == [
    "VERSION",
    "castArray",
    "chunk",
    "compactArray",
    "isEqual",
    "throttle",
  ]


def test_read_snapshot_rejects_bad_json(tmp_path):
  bad = tmp_path / "bad.json"
  bad.write_text("{not json")
  with pytest.raises(SnapshotError):
    read_snapshot(bad)


def test_read_snapshot_rejects_bad_structure(tmp_path):
  bad = tmp_path / "bad.json"
  bad.write_text(json.dumps({"exports": ["a"]}))
  with pytest.raises(SnapshotError):
    read_snapshot(bad)


def test_missing_snapshot(tmp_path):
  with pytest.raises(SnapshotError):
    load_supported_functions(tmp_path / "missing.json")


def test_capture_snapshot_round_trip(tmp_path):
  index = tmp_path / "index.d.ts"
  index.write_text(INDEX_DTS)
  out = tmp_path / "out" / "snap.json"

  snapshot = capture_snapshot(index, out, version="1.0.0")

  assert snapshot.version == "1.0.0"
  assert load_supported_functions(out) == frozenset(snapshot.exports)


def test_capture_snapshot_requires_exports(tmp_path):
  index = tmp_path / "index.js"
  index.write_text("const a = 1;\n")
  with pytest.raises(SnapshotError):
    capture_snapshot(index, tmp_path / "snap.json")

"""
Tests for the CLI 'snapshot' command.
"""

import json

from lodash_switcheroo.cli.__main__ import main


def test_snapshot_writes_json(tmp_path):
  index = tmp_path / "index.d.ts"
  index.write_text("export { chunk } from './chunk.js';\nexport { isEqual } from './isEqual.js';\n")
  out = tmp_path / "snap.json"

  assert main(["snapshot", str(index), "--out", str(out), "--version-tag", "1.2.3"]) == 0

  data = json.loads(out.read_text())
  assert data == {"library": "es-toolkit/compat", "version": "1.2.3", "exports": ["chunk", "isEqual"]}


def test_snapshot_missing_index(tmp_path):
  assert main(["snapshot", str(tmp_path / "missing.d.ts"), "--out", str(tmp_path / "s.json")]) == 1


def test_snapshot_without_exports(tmp_path):
  index = tmp_path / "index.js"
  index.write_text("module.exports = {};\n")
  assert main(["snapshot", str(index), "--out", str(tmp_path / "s.json")]) == 1

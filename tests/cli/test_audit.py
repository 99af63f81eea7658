"""
Tests for the CLI 'audit' command.
"""

import json

import pytest

from lodash_switcheroo.cli.__main__ import main


@pytest.fixture
def project(tmp_path):
  root = tmp_path / "web"
  root.mkdir()
  (root / "a.js").write_text("import { map, every } from 'lodash';\nimport some from 'lodash/some';\n")
  (root / "b.ts").write_text("import _ from 'lodash';\n_.every(x);\n_.map(x);\n")
  (root / "c.js").write_text("import { map } from 'lodash';\n")
  (root / "d.js").write_text("import { is Equal } from 'lodash';\n")
  snap = tmp_path / "supported.json"
  snap.write_text(json.dumps({"library": "es-toolkit/compat", "exports": ["map", "isEqual"]}))
  return root, snap


def test_audit_json(project, capsys):
  root, snap = project

  code = main(["audit", str(root), "--json", "--supported", str(snap)])

  assert code == 1
  report = json.loads(capsys.readouterr().out)
  assert report == [
    {"file": "a.js", "unsupported": ["every", "some"], "malformed_imports": 0},
    {"file": "b.ts", "unsupported": ["every"], "malformed_imports": 0},
    {"file": "d.js", "unsupported": [], "malformed_imports": 1},
  ]


def test_audit_does_not_write(project):
  root, snap = project
  before = (root / "a.js").read_text()

  main(["audit", str(root), "--supported", str(snap)])

  assert (root / "a.js").read_text() == before


def test_audit_table(project, capsys):
  root, snap = project

  assert main(["audit", str(root), "--supported", str(snap)]) == 1
  out = capsys.readouterr().out
  assert "a.js" in out
  assert "every" in out


def test_audit_clean_file(project, capsys):
  root, snap = project

  assert main(["audit", str(root / "c.js"), "--supported", str(snap)]) == 0
  assert "are supported" in capsys.readouterr().out


def test_audit_missing_path(tmp_path):
  assert main(["audit", str(tmp_path / "missing")]) == 1

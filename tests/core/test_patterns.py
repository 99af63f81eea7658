"""
Tests for the Import Pattern Matcher.

Verifies the three shapes, quoting, the optional `.js` suffix and the
member-usage scan.
"""

from lodash_switcheroo.core.patterns import ImportPatterns, find_member_usages


def test_namespace_shape_captures_binding():
  patterns = ImportPatterns()
  src = "import _ from 'lodash';\nimport lo from \"lodash\";"
  assert [m.group(1) for m in patterns.namespace.finditer(src)] == ["_", "lo"]


def test_namespace_shape_ignores_subpaths():
  patterns = ImportPatterns()
  assert patterns.namespace.search("import isEqual from 'lodash/isEqual'") is None
  assert patterns.namespace.search("import x from 'lodash-es'") is None


def test_named_shape_captures_raw_list():
  patterns = ImportPatterns()
  src = "import {\n  every,\n  isEqual as eq\n} from 'lodash'"
  match = patterns.named.search(src)
  assert match is not None
  assert "every" in match.group(1)
  assert "isEqual as eq" in match.group(1)


def test_single_shape_with_and_without_extension():
  patterns = ImportPatterns()
  plain = patterns.single.search("import eq from 'lodash/isEqual'")
  with_ext = patterns.single.search("import eq from 'lodash/isEqual.js'")

  assert plain.group(1, 2) == ("eq", "isEqual")
  assert with_ext.group(1, 2) == ("eq", "isEqual")


def test_library_name_is_escaped():
  patterns = ImportPatterns("lodash.fp")
  assert patterns.namespace.search("import fp from 'lodash.fp'") is not None
  assert patterns.namespace.search("import fp from 'lodashXfp'") is None


def test_mentions_library():
  patterns = ImportPatterns()
  assert patterns.mentions_library("// uses lodash somewhere")
  assert not patterns.mentions_library("import x from 'underscore'")


def test_find_member_usages_dedupes_in_order():
  src = "_.map(a); _.isEqual(a, b); _.map(c); foo_.bar()"
  assert find_member_usages(src, "_") == ["map", "isEqual"]


def test_find_member_usages_none():
  assert find_member_usages("const a = 1;", "_") == []

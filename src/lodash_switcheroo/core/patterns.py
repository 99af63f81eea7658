"""
Import Pattern Matcher.

Textual recognisers for the three static import forms that reference the
source library. Matching is regex based and not scope aware: import statements
inside string literals or comments are detected like real ones.

Shapes:
    1. Namespace default: ``import _ from 'lodash'``
    2. Named list: ``import { isEqual, every as all } from 'lodash'``
    3. Single function default: ``import isEqual from 'lodash/isEqual.js'``
"""

import re
from typing import List

_FLAGS = re.MULTILINE | re.ASCII


class ImportPatterns:
  """
  Compiled regular expressions for a given source library.

  Attributes:
      library (str): The source library module name (e.g. 'lodash').
      namespace (re.Pattern): Captures the bound name of a default import.
      named (re.Pattern): Captures the raw token list between braces.
      single (re.Pattern): Captures the bound name and the subpath symbol.
  """

  def __init__(self, library: str = "lodash") -> None:
    """
    Compiles the patterns.

    Args:
        library: The module specifier to match (escaped before compiling).
    """
    self.library = library
    lib = re.escape(library)
    self.namespace: re.Pattern[str] = re.compile(rf"""import\s+(\w+)\s+from\s+['"]{lib}['"]""", _FLAGS)
    self.named: re.Pattern[str] = re.compile(rf"""import\s+\{{\s*([\w\s,]+?)\s*\}}\s+from\s+['"]{lib}['"]""", _FLAGS)
    self.single: re.Pattern[str] = re.compile(rf"""import\s+(\w+)\s+from\s+['"]{lib}/(\w+)(\.js)?['"]""", _FLAGS)

  def mentions_library(self, text: str) -> bool:
    """
    Cheap containment pre-check gating the rewrite pipeline.

    Args:
        text: The source file content.

    Returns:
        bool: True if the library name occurs anywhere in the text.
    """
    return self.library in text


def find_member_usages(text: str, name: str) -> List[str]:
  """
  Finds the members accessed through a namespace binding.

  For ``name='_'`` this collects ``isEqual`` from ``_.isEqual(a, b)``.
  Duplicates are removed, keeping the order of first appearance.

  Args:
      text: The text to scan.
      name: The locally bound namespace identifier.

  Returns:
      List[str]: Member names in order of first use.
  """
  usage_re = re.compile(rf"\b{re.escape(name)}\.(\w+)", re.ASCII)
  seen: List[str] = []
  for match in usage_re.finditer(text):
    member = match.group(1)
    if member not in seen:
      seen.append(member)
  return seen

"""
Enumerations for lodash-switcheroo.

This module defines the enumerations shared by the rewriter, the diagnostics
channel and the CLI reports.
"""

from enum import Enum


class ImportShape(str, Enum):
  """
  The three static import forms recognised by the rewriter.
  """

  NAMESPACE = "namespace"  # import _ from 'lodash'
  NAMED = "named"  # import { a, b as c } from 'lodash'
  SINGLE = "single"  # import isEqual from 'lodash/isEqual'


class WarningKind(str, Enum):
  """
  Categorization of advisory diagnostics emitted during a rewrite.
  """

  UNSUPPORTED = "unsupported"
  MALFORMED = "malformed"

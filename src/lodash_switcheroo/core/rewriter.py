"""
Rewrite Orchestrator.

Redirects lodash imports to ``es-toolkit/compat`` when every referenced symbol
is supported there. The rewrite is three independent text passes, applied in
order to the cumulative result:

1.  **Namespace**: ``import _ from 'lodash'`` becomes
    ``import * as _ from 'es-toolkit/compat'`` if every ``_.<fn>`` used in the
    file is supported. Otherwise the line is kept (all or nothing).
2.  **Named list**: ``import { isEqual, every } from 'lodash'`` is split into a
    replacement import for the supported names followed by a lodash import for
    the rest.
3.  **Single function**: ``import eq from 'lodash/isEqual'`` becomes
    ``import { isEqual as eq } from 'es-toolkit/compat'``.

Unsupported symbols produce advisory warnings through the diagnostics sink.
"""

import re
import threading
from typing import Iterable, List, Optional, Union

from lodash_switcheroo.config import RuntimeConfig
from lodash_switcheroo.core.diagnostics import DiagnosticsSink, RewriteWarning, log_sink
from lodash_switcheroo.core.named_imports import (
  NamedImport,
  NamedImportError,
  parse_named_import,
  render_named_imports,
  split_named_imports,
)
from lodash_switcheroo.core.patterns import ImportPatterns, find_member_usages
from lodash_switcheroo.core.support import SupportClassifier
from lodash_switcheroo.core.transform_result import TransformResult
from lodash_switcheroo.enums import ImportShape, WarningKind


class LodashRewriter:
  """
  Stateless per-file transform from lodash imports to the replacement library.

  Instances hold only read-only state (the classifier, compiled patterns and
  configuration) and can be shared between threads.

  Attributes:
      classifier (SupportClassifier): Decides which symbols can be redirected.
      config (RuntimeConfig): Library names and the malformed-token policy.
      patterns (ImportPatterns): Compiled matchers for the source library.
  """

  def __init__(
    self,
    supported: Union[SupportClassifier, Iterable[str]],
    config: Optional[RuntimeConfig] = None,
    sink: Optional[DiagnosticsSink] = None,
  ) -> None:
    """
    Initializes the rewriter.

    Args:
        supported: Exported names of the replacement library, or a ready classifier.
        config: Runtime configuration. Defaults to lodash -> es-toolkit/compat.
        sink: Receives advisory warnings. Defaults to logging them.
    """
    self.config = config or RuntimeConfig()
    self.classifier = supported if isinstance(supported, SupportClassifier) else SupportClassifier(supported)
    self.patterns = ImportPatterns(self.config.source_library)
    self._sink = sink or log_sink
    self._local = threading.local()

  @property
  def source_library(self) -> str:
    return self.config.source_library

  @property
  def target_library(self) -> str:
    return self.config.target_library

  def transform(self, src: str, file_id: str = "") -> Optional[TransformResult]:
    """
    Rewrites the lodash imports of one file.

    Args:
        src: The file content.
        file_id: Identifier of the file, only used in diagnostics.

    Returns:
        Optional[TransformResult]: None when the file never mentions the
        source library, otherwise the rewritten code with a null map.

    Raises:
        NamedImportError: In strict mode, if a named-import token is malformed.
    """
    if not self.patterns.mentions_library(src):
      return None

    self._local.warnings = []
    self._local.file_id = file_id
    try:
      code = self.rewrite_namespace_imports(src)
      code = self.rewrite_named_imports(code)
      code = self.rewrite_single_imports(code)
      warnings = list(self._local.warnings)
    finally:
      self._local.warnings = None

    return TransformResult(code=code, warnings=warnings, file_id=file_id, original=src)

  # --- Pass 1: import _ from 'lodash' ---

  def rewrite_namespace_imports(self, text: str) -> str:
    """
    Replaces namespace default imports whose members are all supported.

    Member usages are scanned in ``text`` as it stands before this pass.
    """

    def replace(match: re.Match[str]) -> str:
      name = match.group(1)
      used = find_member_usages(text, name)

      # Unused binding; bundlers drop it anyway.
      if not used:
        return match.group(0)

      _, unsupported = self.classifier.partition(used)
      if unsupported:
        self._warn(WarningKind.UNSUPPORTED, ImportShape.NAMESPACE, unsupported, match.group(0))
        return match.group(0)

      return f"import * as {name} from '{self.target_library}'"

    return self.patterns.namespace.sub(replace, text)

  # --- Pass 2: import { a, b as c } from 'lodash' ---

  def rewrite_named_imports(self, text: str) -> str:
    """Redirects supported names of named-list imports, splitting mixed lists."""

    def replace(match: re.Match[str]) -> str:
      statement = match.group(0)
      try:
        items = [parse_named_import(token) for token in split_named_imports(match.group(1))]
      except NamedImportError:
        if self.config.strict_mode:
          raise
        self._warn(WarningKind.MALFORMED, ImportShape.NAMED, [], statement)
        return statement

      supported: List[NamedImport] = []
      unsupported: List[NamedImport] = []
      for item in items:
        if self.classifier.is_supported(item.actual_name):
          supported.append(item)
        else:
          unsupported.append(item)

      if not unsupported:
        return self._named_statement(supported, self.target_library)

      self._warn(
        WarningKind.UNSUPPORTED,
        ImportShape.NAMED,
        [item.actual_name for item in unsupported],
        statement,
      )

      if not supported:
        return statement

      return (
        f"{self._named_statement(supported, self.target_library)};"
        f"{self._named_statement(unsupported, self.source_library)}"
      )

    return self.patterns.named.sub(replace, text)

  # --- Pass 3: import fn from 'lodash/fn' ---

  def rewrite_single_imports(self, text: str) -> str:
    """Turns per-function default imports into named replacement imports."""

    def replace(match: re.Match[str]) -> str:
      custom_name, actual_name = match.group(1), match.group(2)

      if self.classifier.is_unsupported(actual_name):
        self._warn(WarningKind.UNSUPPORTED, ImportShape.SINGLE, [actual_name], match.group(0))
        return match.group(0)

      item = NamedImport(actual_name=actual_name, custom_name=custom_name)
      return self._named_statement([item], self.target_library)

    return self.patterns.single.sub(replace, text)

  def _named_statement(self, items: List[NamedImport], library: str) -> str:
    return f"import {{ {render_named_imports(items)} }} from '{library}'"

  def _warn(self, kind: WarningKind, shape: ImportShape, names: List[str], statement: str) -> None:
    warning = RewriteWarning(
      kind=kind,
      shape=shape,
      names=names,
      statement=statement,
      file_id=getattr(self._local, "file_id", "") or "",
      library=self.source_library,
    )
    collected = getattr(self._local, "warnings", None)
    if collected is not None:
      collected.append(warning)
    self._sink(warning)

"""
lodash-switcheroo Package.

A source-to-source rewriter that redirects ``lodash`` imports in JavaScript and
TypeScript files to the drop-in compatible ``es-toolkit/compat`` library,
keeping imports of functions the replacement does not provide.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import lodash_switcheroo as lsw
    code = "import { isEqual } from 'lodash';"
    print(lsw.rewrite(code))
    # import { isEqual } from 'es-toolkit/compat';

Bundler-style Plugin
^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from lodash_switcheroo import es_toolkit_plugin

    plugin = es_toolkit_plugin()
    out = plugin.transform("import _ from 'lodash'; _.isEqual(a, b);", "src/app.js")
    if out is not None:
        print(out["code"])
"""

from typing import Iterable, Optional

from lodash_switcheroo.config import RuntimeConfig
from lodash_switcheroo.core.rewriter import LodashRewriter
from lodash_switcheroo.core.transform_result import TransformResult
from lodash_switcheroo.plugin import EsToolkitPlugin, es_toolkit_plugin
from lodash_switcheroo.snapshots import load_supported_functions

__version__ = "0.1.0"


def rewrite(
  code: str,
  supported: Optional[Iterable[str]] = None,
  strict: bool = False,
  file_id: str = "",
) -> str:
  """
  Rewrites the lodash imports of a source string.

  This is a convenience wrapper around `LodashRewriter`. Files that do not
  mention lodash are returned unchanged.

  Args:
      code (str): The JavaScript/TypeScript source.
      supported (Iterable[str], optional): Exported names of the replacement
          library. Defaults to the bundled es-toolkit/compat snapshot.
      strict (bool): If True, malformed named imports raise instead of being skipped.
      file_id (str): File identifier attached to warnings.

  Returns:
      str: The rewritten source.

  Raises:
      NamedImportError: In strict mode, for a malformed named-import token.
  """
  names = load_supported_functions() if supported is None else supported
  rewriter = LodashRewriter(names, config=RuntimeConfig(strict_mode=strict))
  result = rewriter.transform(code, file_id)
  return code if result is None else result.code


__all__ = [
  "EsToolkitPlugin",
  "LodashRewriter",
  "RuntimeConfig",
  "TransformResult",
  "es_toolkit_plugin",
  "rewrite",
  "__version__",
]

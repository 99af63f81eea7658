"""
Entry point for module execution (``python -m lodash_switcheroo``).

This module delegates execution to the CLI handler in ``lodash_switcheroo.cli.__main__``.
"""

import sys
from lodash_switcheroo.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())

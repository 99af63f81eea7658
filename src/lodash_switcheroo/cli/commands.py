"""
CLI Command Handlers Facade.

Re-exports the handlers from `lodash_switcheroo.cli.handlers` so the dispatcher
and tests have a single patch target.
"""

from lodash_switcheroo.cli.handlers.audit import handle_audit
from lodash_switcheroo.cli.handlers.convert import handle_convert
from lodash_switcheroo.cli.handlers.snapshot import handle_snapshot

__all__ = [
  "handle_audit",
  "handle_convert",
  "handle_snapshot",
]

"""
CLI Command Handlers Facade.

Re-exports handlers from `locale_bootstrap.cli.handlers` so the dispatcher
(and tests patching it) have a single lookup point.
"""

from locale_bootstrap.cli.handlers.locales import handle_locales, handle_resolve
from locale_bootstrap.cli.handlers.register import handle_register, _register_single_file

__all__ = [
  "_register_single_file",
  "handle_locales",
  "handle_register",
  "handle_resolve",
]

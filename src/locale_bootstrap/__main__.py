"""
Entry point for module execution (``python -m locale_bootstrap``).

This module delegates execution to the CLI handler in ``locale_bootstrap.cli.__main__``.
"""

import sys
from locale_bootstrap.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())

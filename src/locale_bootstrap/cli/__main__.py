"""
Main Entry Point for locale-bootstrap CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `locale_bootstrap.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from locale_bootstrap.cli import commands
from locale_bootstrap.utils.console import set_verbose
from locale_bootstrap import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="locale-bootstrap: Register locale data before app bootstrap")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics of the pass")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: REGISTER ---
  cmd_reg = subparsers.add_parser("register", help="Insert locale registration into a file or directory")
  cmd_reg.add_argument("path", type=Path, help="Input source file or directory")
  cmd_reg.add_argument("--locale", default=None, help="Locale id to register (default: from toml)")
  cmd_reg.add_argument(
    "--entry-module",
    default=None,
    help="Root component as 'path#ClassName' (default: from toml)",
  )
  cmd_reg.add_argument("--locales-dir", type=Path, default=None, help="Directory of locale-data modules")
  cmd_reg.add_argument("--out", type=Path, default=None, help="Output destination (default: rewrite in place)")
  cmd_reg.add_argument(
    "--check",
    action="store_true",
    help="Report files that would change without writing them (exit 1 if any)",
  )

  # --- Command: LOCALES ---
  cmd_list = subparsers.add_parser("locales", help="List available locale data")
  cmd_list.add_argument("--locales-dir", type=Path, default=None, help="Directory of locale-data modules")

  # --- Command: RESOLVE ---
  cmd_res = subparsers.add_parser("resolve", help="Show which locale a locale id resolves to")
  cmd_res.add_argument("locale", help="Requested locale id (e.g. en_us)")
  cmd_res.add_argument("--locales-dir", type=Path, default=None, help="Directory of locale-data modules")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "register":
    return commands.handle_register(
      args.path, args.out, args.locale, args.entry_module, args.locales_dir, args.check
    )

  elif args.command == "locales":
    return commands.handle_locales(args.locales_dir)

  elif args.command == "resolve":
    return commands.handle_resolve(args.locale, args.locales_dir)

  return 0


if __name__ == "__main__":
  sys.exit(main())

"""
Locale Inspection Handlers.

Implements `locale-bootstrap locales` (list the available locale set) and
`locale-bootstrap resolve` (show what a requested locale id resolves to).
"""

from pathlib import Path
from typing import Optional

from rich.markup import escape
from rich.table import Table

from locale_bootstrap.config import RuntimeConfig
from locale_bootstrap.core.locales import UnknownLocaleError, locale_module_name, resolve_locale
from locale_bootstrap.utils.console import console, log_error, log_warning


def _load_config(locales_dir: Optional[Path]) -> Optional[RuntimeConfig]:
  try:
    return RuntimeConfig.load(locales_dir=locales_dir)
  except ValueError as e:
    log_error(escape(str(e)))
    return None


def handle_locales(locales_dir: Optional[Path]) -> int:
  """
  Prints the available locale ids and their data modules.

  Args:
      locales_dir: Override for the locale-data directory.

  Returns:
      int: Exit code (1 if no locale data was found).
  """
  config = _load_config(locales_dir)
  if config is None:
    return 1

  locales = config.locale_source().list_locales()
  origin = str(config.locales_dir) if config.locales_dir else config.locales_package
  if not locales:
    log_warning(f"No locale data found in {escape(origin)}")
    return 1

  table = Table(title=f"Available Locales ({escape(origin)})")
  table.add_column("Locale")
  table.add_column("Data Module", style="cyan")

  for loc in locales:
    table.add_row(f"[locale]{escape(loc)}[/locale]", escape(f"{config.locales_package}.{locale_module_name(loc)}"))

  console.print(table)
  return 0


def handle_resolve(locale: str, locales_dir: Optional[Path]) -> int:
  """
  Prints the locale id a requested locale resolves to.

  Args:
      locale: The requested locale id.
      locales_dir: Override for the locale-data directory.

  Returns:
      int: Exit code (1 if the locale cannot be resolved).
  """
  config = _load_config(locales_dir)
  if config is None:
    return 1

  try:
    resolved = resolve_locale(locale, config.locale_source().list_locales(), config.locales_package)
  except UnknownLocaleError as e:
    log_error(escape(str(e)))
    return 1

  console.print(f"[locale]{escape(resolved)}[/locale]")
  return 0

"""
Locale Enumeration and Resolution.

Locale data lives in a Python package holding one module per locale. Module
names cannot contain hyphens, so the module for `en-US` is `en_US.py`; the
locale id of a module is its stem with underscores turned into hyphens.

Resolution tries, in order:

1.  **Exact**: the requested id is available verbatim.
2.  **Normalized**: the lower-cased, hyphen-separated form of the request
    matches an available id case-insensitively. The available spelling wins.
3.  **Parent**: the language subtag (text before the first hyphen) is
    available.

Anything else raises :class:`UnknownLocaleError`. No other locale is ever
substituted.
"""

import logging
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional, Protocol, Sequence

if TYPE_CHECKING:
  from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)


class UnknownLocaleError(ValueError):
  """
  Raised when a locale id cannot be matched to any available locale data.

  Attributes:
      locale (str): The locale id as requested by the caller.
      hint (str): Remediation text naming the expected data module.
  """

  def __init__(self, locale: str, hint: str) -> None:
    self.locale = locale
    self.hint = hint
    super().__init__(f'Unable to load the locale data for "{locale}". {hint}')


class LocaleSource(Protocol):
  """
  Provides the set of locale ids for which data is available.
  """

  def list_locales(self) -> List[str]:
    """Enumerates the available locale ids, in a stable order."""
    ...


class StaticLocaleSource:
  """
  A fixed, caller-supplied locale set.
  """

  def __init__(self, locales: Iterable[str]) -> None:
    self._locales = list(locales)

  def list_locales(self) -> List[str]:
    return list(self._locales)


class DirectoryLocaleSource:
  """
  Lists the locale-data modules of a directory.

  The directory is read on every call; nothing is cached.
  """

  def __init__(self, directory: Path) -> None:
    self.directory = Path(directory)

  def list_locales(self) -> List[str]:
    """
    Enumerates `*.py` modules of the directory as locale ids.

    Private modules (leading underscore, including `__init__.py`) are skipped.

    Returns:
        List[str]: Locale ids sorted by module name. Empty if the directory
        does not exist.
    """
    if not self.directory.is_dir():
      logger.debug("Locale directory %s not found", self.directory)
      return []

    return _locale_ids(p.name for p in self.directory.glob("*.py") if p.is_file())


class PackageLocaleSource:
  """
  Lists the locale-data modules of an importable package.

  The package is read through `importlib.resources`, so namespace packages
  (no `__init__.py`) and packages spread over several directories work too.
  """

  def __init__(self, package: str) -> None:
    self.package = package

  def resolve_root(self) -> Optional["Traversable"]:
    """
    Locates the package contents.

    Returns:
        Optional[Traversable]: The package root, or None if the package
        cannot be imported.
    """
    try:
      return files(self.package)
    except (ModuleNotFoundError, TypeError, ValueError):
      logger.debug("Locale package %s is not importable", self.package)
      return None

  def list_locales(self) -> List[str]:
    root = self.resolve_root()
    if root is None:
      return []
    return _locale_ids(entry.name for entry in root.iterdir() if entry.is_file())


def _locale_ids(file_names: Iterable[str]) -> List[str]:
  # Public `*.py` modules only; `__init__.py` and `_private.py` are skipped.
  stems = sorted(name[:-3] for name in file_names if name.endswith(".py") and not name.startswith("_"))
  return [locale_id_for_module(stem) for stem in stems]


def locale_module_name(locale: str) -> str:
  """
  Converts a locale id to the name of its data module (`en-US` -> `en_US`).
  """
  return locale.replace("-", "_")


def locale_id_for_module(module_name: str) -> str:
  """
  Converts a data module name to its locale id (`en_US` -> `en-US`).
  """
  return module_name.replace("_", "-")


def normalize_locale(locale: str) -> str:
  """
  Lower-cases a locale id and uses hyphens as the subtag separator.
  """
  return locale.lower().replace("_", "-")


def resolve_locale(requested: str, available: Sequence[str], locales_package: str = "i18n_common.locales") -> str:
  """
  Resolves a requested locale id against the available locale set.

  When two available ids normalize to the same string, the first one in
  `available` wins.

  Args:
      requested: The locale id supplied by the user (e.g. "EN_us").
      available: The available locale ids.
      locales_package: Dotted path of the locale-data package, used in the
          error hint.

  Returns:
      str: The effective locale id, spelled as in `available`.

  Raises:
      UnknownLocaleError: If no exact, normalized, or parent match exists.
  """
  if requested in available:
    return requested

  normalized = normalize_locale(requested)
  for candidate in available:
    if candidate.lower() == normalized:
      logger.debug("Locale %r resolved to %r", requested, candidate)
      return candidate

  parent = normalized.split("-")[0]
  if parent in available:
    logger.debug("Locale %r falling back to parent %r", requested, parent)
    return parent

  expected = f"{locales_package}.{locale_module_name(requested)}"
  raise UnknownLocaleError(
    requested,
    f'Please check that "{requested}" is a valid locale id with a data module at "{expected}".',
  )

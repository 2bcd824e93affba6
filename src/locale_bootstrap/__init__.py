"""
locale-bootstrap Package.

A build-time LibCST pass that registers locale data before an application
bootstraps its root component. For a module containing::

    platform_browser_dynamic().bootstrapModule(AppModule)

it inserts, ahead of the first statement::

    import i18n_common.locales.fr as __locale_fr__
    from i18n_common import register_locale_data
    register_locale_data(__locale_fr__)

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import locale_bootstrap as lb
    code = "platform().bootstrapModule(AppModule)"
    print(lb.inject_locale(code, "app/app_module#AppModule", "fr", locales=["fr", "en-US"]))

Advanced Usage (Pass API)
^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import libcst as cst
    from locale_bootstrap import EntryModuleRef, StaticLocaleSource, apply_edits, register_locale_data

    tree = cst.parse_module(code)
    edits = register_locale_data(tree, EntryModuleRef("app/app_module", "AppModule"), "fr", StaticLocaleSource(["fr"]))
    print(apply_edits(tree, edits).code)
"""

from typing import Iterable, Optional

from locale_bootstrap.config import RuntimeConfig
from locale_bootstrap.core.conversion_result import ConversionResult
from locale_bootstrap.core.edits import BuildSettings, InsertionEdit, apply_edits, build_edits
from locale_bootstrap.core.engine import LocaleEngine
from locale_bootstrap.core.locales import (
  DirectoryLocaleSource,
  LocaleSource,
  PackageLocaleSource,
  StaticLocaleSource,
  UnknownLocaleError,
  resolve_locale,
)
from locale_bootstrap.core.matcher import MatchSite, find_bootstrap_calls
from locale_bootstrap.core.transform import EntryModuleRef, register_locale_data

__version__ = "0.1.0"


def inject_locale(
  code: str,
  entry_module: str,
  locale: str,
  locales: Optional[Iterable[str]] = None,
  config: Optional[RuntimeConfig] = None,
) -> str:
  """
  Registers locale data in a source string that bootstraps `entry_module`.

  This is a convenience wrapper around `LocaleEngine`. Code that does not
  bootstrap the entry module is returned unchanged.

  Args:
      code (str): The source code to rewrite.
      entry_module (str): Root component as 'path#ClassName'.
      locale (str): The requested locale id.
      locales (Iterable[str], optional): Available locale ids. If None, they
          are enumerated from the configured locale-data package.
      config (RuntimeConfig, optional): Base configuration for module names.

  Returns:
      str: The rewritten source code.

  Raises:
      ValueError: If the code cannot be parsed or the locale cannot be resolved.
  """
  base = config or RuntimeConfig()
  run_config = base.model_copy(update={"locale": locale, "entry_module": str(EntryModuleRef.parse(entry_module))})
  source = StaticLocaleSource(locales) if locales is not None else None

  result = LocaleEngine(run_config, source=source).run(code)

  if not result.success:
    error_msg = "\n".join(result.errors)
    raise ValueError(f"Locale registration failed:\n{error_msg}")

  return result.code


__all__ = [
  "BuildSettings",
  "ConversionResult",
  "DirectoryLocaleSource",
  "EntryModuleRef",
  "InsertionEdit",
  "LocaleEngine",
  "LocaleSource",
  "MatchSite",
  "PackageLocaleSource",
  "RuntimeConfig",
  "StaticLocaleSource",
  "UnknownLocaleError",
  "__version__",
  "apply_edits",
  "build_edits",
  "find_bootstrap_calls",
  "inject_locale",
  "register_locale_data",
  "resolve_locale",
]

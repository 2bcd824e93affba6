"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Shared source snippets and a locale-data directory fixture.
- Console isolation so captured CLI output does not leak between tests.
"""

import sys
from pathlib import Path
from typing import List

import pytest

# Add src to path so we can import 'locale_bootstrap' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from locale_bootstrap.utils.console import reset_console  # noqa: E402

BOOTSTRAP_SOURCE = '''"""Application entry point."""
from app.platform import platform_browser_dynamic
from app.app_module import AppModule

platform_browser_dynamic().bootstrapModule(AppModule)
'''

DEFAULT_LOCALES = ["de", "en", "en-GB", "en-US", "fr", "fr-CA"]


def write_locale_dir(root: Path, locales: List[str]) -> Path:
  """
  Creates a locale-data package directory with one module per locale.

  Args:
      root: Parent directory.
      locales: Locale ids (e.g. 'en-US' -> 'en_US.py').

  Returns:
      Path: The created directory.
  """
  locales_dir = root / "locales"
  locales_dir.mkdir(parents=True, exist_ok=True)
  (locales_dir / "__init__.py").write_text("", encoding="utf-8")
  for loc in locales:
    (locales_dir / f"{loc.replace('-', '_')}.py").write_text(f"LOCALE = {loc!r}\n", encoding="utf-8")
  return locales_dir


@pytest.fixture
def bootstrap_source() -> str:
  """A module that bootstraps `AppModule`."""
  return BOOTSTRAP_SOURCE


@pytest.fixture
def make_locales_dir(tmp_path: Path):
  """Factory creating a locale-data directory for a custom locale list."""

  def _make(locales: List[str]) -> Path:
    return write_locale_dir(tmp_path, locales)

  return _make


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
  """A locale-data directory holding `DEFAULT_LOCALES`."""
  return write_locale_dir(tmp_path, DEFAULT_LOCALES)


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures console is reset to stdout after every test."""
  yield
  reset_console()

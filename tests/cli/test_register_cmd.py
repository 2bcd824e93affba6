"""
Tests for the CLI 'register' command.

Verifies that:
1.  A single file is rewritten in place, or written to `--out`.
2.  Directories are processed recursively; untouched files are copied to `--out`.
3.  `--check` reports without writing and exits 1 when changes are pending.
4.  Unknown locales and missing settings exit 1 without writing.
5.  `[tool.locale_bootstrap]` supplies defaults for the CLI flags.
"""

from pathlib import Path

import pytest
from rich.console import Console

from locale_bootstrap.cli.__main__ import main
from locale_bootstrap.utils.console import set_console

ENTRY = "app/app_module#AppModule"


@pytest.fixture
def captured() -> Console:
  capture = Console(record=True, width=200)
  set_console(capture)
  return capture


@pytest.fixture
def project(tmp_path, bootstrap_source) -> Path:
  src = tmp_path / "src"
  (src / "app").mkdir(parents=True)
  (src / "main.py").write_text(bootstrap_source, encoding="utf-8")
  (src / "app" / "util.py").write_text("def helper():\n    return 1\n", encoding="utf-8")
  return src


def _args(path: Path, locales_dir: Path, *extra: str):
  return ["register", str(path), "--locale", "en_us", "--entry-module", ENTRY, "--locales-dir", str(locales_dir), *extra]


def test_register_file_in_place(project, locales_dir, captured):
  target = project / "main.py"

  assert main(_args(target, locales_dir)) == 0

  code = target.read_text(encoding="utf-8")
  assert "import i18n_common.locales.en_US as __locale_enUS__" in code
  assert "register_locale_data(__locale_enUS__)" in code
  assert "Registered locale" in captured.export_text()


def test_register_file_to_out(project, locales_dir, bootstrap_source, tmp_path):
  target = project / "main.py"
  out = tmp_path / "build" / "main.py"

  assert main(_args(target, locales_dir, "--out", str(out))) == 0

  assert target.read_text(encoding="utf-8") == bootstrap_source
  assert "register_locale_data(__locale_enUS__)" in out.read_text(encoding="utf-8")


def test_register_directory_to_out(project, locales_dir, tmp_path):
  out = tmp_path / "dist"

  assert main(_args(project, locales_dir, "--out", str(out))) == 0

  assert "register_locale_data" in (out / "main.py").read_text(encoding="utf-8")
  assert (out / "app" / "util.py").read_text(encoding="utf-8") == "def helper():\n    return 1\n"


def test_register_directory_in_place_skips_untouched(project, locales_dir):
  util = project / "app" / "util.py"
  before = util.stat().st_mtime_ns

  assert main(_args(project, locales_dir)) == 0
  assert util.stat().st_mtime_ns == before
  assert "register_locale_data" in (project / "main.py").read_text(encoding="utf-8")


def test_check_mode_does_not_write(project, locales_dir, bootstrap_source, captured):
  target = project / "main.py"

  assert main(_args(target, locales_dir, "--check")) == 1

  assert target.read_text(encoding="utf-8") == bootstrap_source
  output = captured.export_text()
  assert "Would register locale" in output
  assert "+ register_locale_data(__locale_enUS__)" in output


def test_check_mode_clean(project, locales_dir):
  assert main(_args(project / "app" / "util.py", locales_dir, "--check")) == 0


def test_unknown_locale_fails(project, locales_dir, bootstrap_source, captured):
  target = project / "main.py"
  args = ["register", str(target), "--locale", "zz-ZZ", "--entry-module", ENTRY, "--locales-dir", str(locales_dir)]

  assert main(args) == 1

  assert target.read_text(encoding="utf-8") == bootstrap_source
  output = captured.export_text()
  assert "zz-ZZ" in output
  assert "Locale Registration Report" in output


def test_missing_input(tmp_path, locales_dir):
  assert main(_args(tmp_path / "missing.py", locales_dir)) == 1


def test_missing_entry_module(project, locales_dir, captured):
  args = ["register", str(project / "main.py"), "--locale", "fr", "--locales-dir", str(locales_dir)]
  assert main(args) == 1
  assert "No entry module configured" in captured.export_text()


def test_settings_from_pyproject(tmp_path, project, locales_dir):
  (tmp_path / "pyproject.toml").write_text(
    f'[tool.locale_bootstrap]\nlocale = "de"\nentry_module = "{ENTRY}"\nlocales_dir = "locales"\n',
    encoding="utf-8",
  )

  assert main(["register", str(project / "main.py")]) == 0
  assert "register_locale_data(__locale_de__)" in (project / "main.py").read_text(encoding="utf-8")


def test_empty_directory(tmp_path, locales_dir):
  empty = tmp_path / "empty"
  empty.mkdir()
  assert main(_args(empty, locales_dir)) == 0


def test_register_path_with_brackets(tmp_path, locales_dir, bootstrap_source):
  """
  Scenario: File name contains text that looks like Rich markup.
  Expectation: The name is printed literally and the file is rewritten.
  """
  wide = Console(record=True, width=1000)
  set_console(wide)
  target = tmp_path / "main[dev].py"
  target.write_text(bootstrap_source, encoding="utf-8")

  assert main(_args(target, locales_dir)) == 0

  assert "register_locale_data(__locale_enUS__)" in target.read_text(encoding="utf-8")
  output = wide.export_text()
  assert "main[dev].py" in output
  assert "Registered locale en_us" in output


def test_check_path_with_brackets(tmp_path, locales_dir, bootstrap_source):
  wide = Console(record=True, width=1000)
  set_console(wide)
  target = tmp_path / "[bold]main.py"
  target.write_text(bootstrap_source, encoding="utf-8")

  assert main(_args(target, locales_dir, "--check")) == 1
  assert "[bold]main.py" in wide.export_text()

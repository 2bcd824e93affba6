"""
Tests for Locale Enumeration and Resolution.

Covers:
1.  **Resolution order**: exact, normalized (available spelling wins), parent.
2.  **Failure**: `UnknownLocaleError` naming the locale and the data module.
3.  **Sources**: static lists, directories of `<locale>.py` modules, and
    importable packages; directories are re-read on every call.
"""

import sys

import pytest

from locale_bootstrap.core.locales import (
  DirectoryLocaleSource,
  PackageLocaleSource,
  StaticLocaleSource,
  UnknownLocaleError,
  locale_id_for_module,
  locale_module_name,
  normalize_locale,
  resolve_locale,
)


def test_exact_match_returned_unchanged():
  assert resolve_locale("fr", ["fr", "en-US"]) == "fr"


def test_exact_match_preferred_over_normalized():
  """
  Scenario: Both the verbatim id and a differently-cased sibling exist.
  Expectation: The verbatim id wins.
  """
  assert resolve_locale("en_us", ["en-US", "en_us"]) == "en_us"


def test_normalized_match_keeps_available_spelling():
  """
  Scenario: User types 'EN_us'.
  Expectation: 'en-US' (the available set's casing and separator).
  """
  assert resolve_locale("EN_us", ["en-US", "fr"]) == "en-US"


@pytest.mark.parametrize("requested", ["en-us", "EN-US", "en_US", "En_Us"])
def test_normalized_variants(requested):
  assert resolve_locale(requested, ["fr", "en-US"]) == "en-US"


def test_normalized_tie_takes_first_entry():
  """
  Scenario: Two available ids normalize to the same string.
  Expectation: The first one in enumeration order wins.
  """
  assert resolve_locale("en-us", ["en-US", "EN-us"]) == "en-US"


def test_parent_fallback():
  assert resolve_locale("en-XX", ["en", "fr"]) == "en"


def test_parent_fallback_from_underscore_form():
  assert resolve_locale("FR_ch", ["de", "fr"]) == "fr"


def test_parent_fallback_requires_lowercase_entry():
  """
  Scenario: The parent language is only available with odd casing.
  Expectation: No match; parent lookup is literal.
  """
  with pytest.raises(UnknownLocaleError):
    resolve_locale("en-XX", ["EN", "fr"])


def test_unknown_locale_raises():
  with pytest.raises(UnknownLocaleError) as exc_info:
    resolve_locale("zz-ZZ", ["en", "fr"])

  err = exc_info.value
  assert err.locale == "zz-ZZ"
  assert "zz-ZZ" in str(err)
  assert "i18n_common.locales.zz_ZZ" in err.hint


def test_unknown_locale_is_value_error():
  with pytest.raises(ValueError):
    resolve_locale("xx", [])


def test_error_hint_uses_package_name():
  with pytest.raises(UnknownLocaleError) as exc_info:
    resolve_locale("xx", ["en"], locales_package="myapp.locale_data")
  assert "myapp.locale_data.xx" in str(exc_info.value)


def test_module_name_mapping():
  assert locale_module_name("en-US") == "en_US"
  assert locale_module_name("zh-Hant-HK") == "zh_Hant_HK"
  assert locale_id_for_module("en_US") == "en-US"
  assert normalize_locale("zh_Hant_HK") == "zh-hant-hk"


def test_static_source_returns_copy():
  source = StaticLocaleSource(["fr", "de"])
  listed = source.list_locales()
  listed.append("xx")
  assert source.list_locales() == ["fr", "de"]


def test_directory_source_lists_modules(make_locales_dir):
  """
  Scenario: Directory with data modules, a package marker and noise files.
  Expectation: Sorted locale ids; private modules and non-Python files skipped.
  """
  directory = make_locales_dir(["fr", "en-US", "de"])
  (directory / "_helpers.py").write_text("", encoding="utf-8")
  (directory / "README.txt").write_text("", encoding="utf-8")

  assert DirectoryLocaleSource(directory).list_locales() == ["de", "en-US", "fr"]


def test_directory_source_rereads_on_each_call(make_locales_dir):
  directory = make_locales_dir(["fr"])
  source = DirectoryLocaleSource(directory)
  assert source.list_locales() == ["fr"]

  (directory / "it.py").write_text("", encoding="utf-8")
  assert source.list_locales() == ["fr", "it"]


def test_directory_source_missing_dir(tmp_path):
  assert DirectoryLocaleSource(tmp_path / "nope").list_locales() == []


def test_package_source_importable(tmp_path, monkeypatch):
  """
  Scenario: Locale data shipped as an importable package.
  Expectation: Modules of the package are listed.
  """
  pkg = tmp_path / "fake_i18n" / "locales"
  pkg.mkdir(parents=True)
  (tmp_path / "fake_i18n" / "__init__.py").write_text("", encoding="utf-8")
  (pkg / "__init__.py").write_text("", encoding="utf-8")
  (pkg / "pt_BR.py").write_text("", encoding="utf-8")
  (pkg / "pt.py").write_text("", encoding="utf-8")

  monkeypatch.syspath_prepend(str(tmp_path))
  try:
    source = PackageLocaleSource("fake_i18n.locales")
    assert source.list_locales() == ["pt", "pt-BR"]
  finally:
    for name in ["fake_i18n.locales", "fake_i18n"]:
      sys.modules.pop(name, None)


def test_package_source_namespace_package(tmp_path, monkeypatch):
  """
  Scenario: Locale data package without `__init__.py` files.
  Expectation: Modules are listed through the resource API, not an on-disk path.
  """
  pkg = tmp_path / "ns_i18n" / "locales"
  pkg.mkdir(parents=True)
  (pkg / "fr.py").write_text("", encoding="utf-8")
  (pkg / "fr_CA.py").write_text("", encoding="utf-8")
  (pkg / "_helpers.py").write_text("", encoding="utf-8")
  (pkg / "README.txt").write_text("", encoding="utf-8")

  monkeypatch.syspath_prepend(str(tmp_path))
  try:
    source = PackageLocaleSource("ns_i18n.locales")
    assert source.list_locales() == ["fr", "fr-CA"]
    assert resolve_locale("FR_ca", source.list_locales()) == "fr-CA"
  finally:
    for name in ["ns_i18n.locales", "ns_i18n"]:
      sys.modules.pop(name, None)


def test_package_source_not_importable():
  source = PackageLocaleSource("definitely_missing_locale_pkg.locales")
  assert source.resolve_root() is None
  assert source.list_locales() == []

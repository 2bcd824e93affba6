"""
Runtime Configuration Store.

Settings are read from the `[tool.locale_bootstrap]` table of the nearest
`pyproject.toml` and overridden by explicit (CLI) arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from locale_bootstrap.core.edits import BuildSettings
from locale_bootstrap.core.locales import DirectoryLocaleSource, LocaleSource, PackageLocaleSource
from locale_bootstrap.core.transform import EntryModuleRef

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "locale_bootstrap"


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the locale pass.
  """

  locale: Optional[str] = Field(None, description="Locale id to register (e.g. 'fr' or 'en-US').")
  entry_module: Optional[str] = Field(None, description="Root component as 'path#ClassName'.")
  locales_dir: Optional[Path] = Field(None, description="Directory of locale-data modules. Overrides package lookup.")
  locales_package: str = Field("i18n_common.locales", description="Dotted path of the locale-data package.")
  registry_module: str = Field("i18n_common", description="Module exporting the registration function.")
  register_function: str = Field("register_locale_data", description="Name of the registration function.")

  @field_validator("entry_module")
  @classmethod
  def validate_entry_module(cls, v: Optional[str]) -> Optional[str]:
    """
    Ensures the entry module uses the `path#ClassName` notation.

    Args:
        v (Optional[str]): The raw value.

    Returns:
        Optional[str]: The stripped value.

    Raises:
        ValueError: If the notation is invalid.
    """
    if v is None:
      return None
    return str(EntryModuleRef.parse(v))

  @field_validator("locales_package", "registry_module")
  @classmethod
  def validate_dotted(cls, v: str) -> str:
    """
    Ensures module paths are dotted Python identifiers.
    """
    v_clean = v.strip()
    if not v_clean or not all(part.isidentifier() for part in v_clean.split(".")):
      raise ValueError(f"Invalid module path: '{v}'.")
    return v_clean

  @field_validator("register_function")
  @classmethod
  def validate_identifier(cls, v: str) -> str:
    """
    Ensures the registration function name is a Python identifier.
    """
    v_clean = v.strip()
    if not v_clean.isidentifier():
      raise ValueError(f"Invalid function name: '{v}'.")
    return v_clean

  @property
  def entry(self) -> Optional[EntryModuleRef]:
    """
    The parsed entry module reference, if configured.

    Returns:
        Optional[EntryModuleRef]: The root component.
    """
    return EntryModuleRef.parse(self.entry_module) if self.entry_module else None

  @property
  def build_settings(self) -> BuildSettings:
    """
    External module names for the edit builder.

    Returns:
        BuildSettings: Settings derived from this config.
    """
    return BuildSettings(
      locales_package=self.locales_package,
      registry_module=self.registry_module,
      register_function=self.register_function,
    )

  def locale_source(self) -> LocaleSource:
    """
    Builds the locale provider for this configuration.

    An explicit `locales_dir` wins over the installed `locales_package`.

    Returns:
        LocaleSource: The provider.
    """
    if self.locales_dir:
      return DirectoryLocaleSource(self.locales_dir)
    return PackageLocaleSource(self.locales_package)

  @classmethod
  def load(
    cls,
    locale: Optional[str] = None,
    entry_module: Optional[str] = None,
    locales_dir: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        locale (Optional[str]): Override for the locale id.
        entry_module (Optional[str]): Override for the entry module.
        locales_dir (Optional[Path]): Override for the locale-data directory.
        overrides (Optional[Dict]): Other field overrides.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the merged settings fail validation.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = {**toml_config, **(overrides or {})}

    if locale:
      merged["locale"] = locale
    if entry_module:
      merged["entry_module"] = entry_module

    # TOML paths are relative to the file declaring them
    if locales_dir:
      merged["locales_dir"] = locales_dir.resolve()
    elif "locales_dir" in merged:
      raw_dir = Path(merged["locales_dir"])
      merged["locales_dir"] = (toml_dir / raw_dir).resolve() if toml_dir else raw_dir.resolve()

    try:
      return cls.model_validate(merged)
    except ValidationError as e:
      raise ValueError(f"Configuration validation failed: {e}")


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      return data.get("tool", {}).get(TOOL_SECTION, {}), parent

  return {}, None

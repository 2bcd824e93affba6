"""
Locale Registration Pass.

Ties bootstrap detection, locale resolution and edit construction together.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import libcst as cst

from locale_bootstrap.core.ast_helpers import find_nodes, get_first_node
from locale_bootstrap.core.edits import BuildSettings, InsertionEdit, build_edits
from locale_bootstrap.core.locales import LocaleSource, resolve_locale
from locale_bootstrap.core.matcher import MatchSite, find_bootstrap_calls

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryModuleRef:
  """
  The application's root component: its declaring module and class name.
  """

  module_path: str
  class_name: str

  @classmethod
  def parse(cls, value: str) -> "EntryModuleRef":
    """
    Parses the `path#ClassName` notation (e.g. "app/app_module#AppModule").

    Args:
        value: The reference string.

    Returns:
        EntryModuleRef: The parsed reference.

    Raises:
        ValueError: If the `#ClassName` part is missing or empty.
    """
    path, sep, class_name = value.rpartition("#")
    if not sep or not class_name.strip():
      raise ValueError(f"Invalid entry module '{value}'. Expected 'path#ClassName'.")
    return cls(module_path=path.strip(), class_name=class_name.strip())

  def __str__(self) -> str:
    return f"{self.module_path}#{self.class_name}"


def register_locale_data(
  tree: cst.Module,
  entry_module: EntryModuleRef,
  locale: str,
  source: LocaleSource,
  settings: Optional[BuildSettings] = None,
) -> List[InsertionEdit]:
  """
  Describes the code registering `locale` before the entry module bootstraps.

  Modules that do not call `<platform>().bootstrapModule(<EntryClass>)` yield
  no edits, and the locale set is not even enumerated for them. Otherwise the
  locale is resolved once; three edits per bootstrap call are anchored at the
  module's first statement.

  Args:
      tree: The parsed module.
      entry_module: The root component reference.
      locale: The requested locale id.
      source: Provider of the available locale ids.
      settings: External module names used by the synthesized code.

  Returns:
      List[InsertionEdit]: The edits to apply, possibly empty.

  Raises:
      UnknownLocaleError: If the module bootstraps the entry component and
          `locale` cannot be resolved. No edits are produced in that case.
      ValueError: If a bootstrap call shares a line with `__future__` imports,
          so no statement precedes it where code may be inserted. Apply
          `split_future_imports` to the tree first.
  """
  sites = find_bootstrap_calls(tree, entry_module.class_name)
  if not sites:
    logger.debug("No bootstrap call for %s", entry_module)
    return []

  settings = settings or BuildSettings()
  resolved = resolve_locale(locale, source.list_locales(), settings.locales_package)
  anchor = get_first_node(tree)
  _ensure_anchor_precedes(tree, anchor, sites)

  edits: List[InsertionEdit] = []
  for site in sites:
    edits.extend(build_edits(site, resolved, anchor, settings, start_order=len(edits)))

  logger.debug("Registering locale %r for %d bootstrap call(s)", resolved, len(sites))
  return edits


def _ensure_anchor_precedes(tree: cst.Module, anchor: Optional[cst.BaseStatement], sites: List[MatchSite]) -> None:
  # Statements before the anchor are never preceded by inserted code.
  for stmt in tree.body:
    if stmt is anchor:
      return
    calls = find_nodes(stmt, cst.Call)
    if any(call is site.call for site in sites for call in calls):
      raise ValueError(
        "The bootstrap call shares a line with a `from __future__` import; "
        "split the line (see split_future_imports) before registering locale data."
      )

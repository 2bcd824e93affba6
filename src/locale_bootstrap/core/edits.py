"""
Insertion Edits.

The locale pass never rewrites a tree in place. It describes the statements
to add as :class:`InsertionEdit` records, and :func:`apply_edits` produces a
new module from them. This keeps the pass free of side effects and lets tests
inspect edits before any code is rendered.

For a resolved locale `de` the builder describes::

    import i18n_common.locales.de as __locale_de__
    from i18n_common import register_locale_data
    register_locale_data(__locale_de__)
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import libcst as cst

from locale_bootstrap.core.ast_helpers import create_dotted_name
from locale_bootstrap.core.locales import locale_module_name
from locale_bootstrap.core.matcher import MatchSite

_NON_IDENTIFIER = re.compile(r"\W")


@dataclass(frozen=True)
class BuildSettings:
  """
  Names of the external locale-data modules referenced by synthesized code.
  """

  locales_package: str = "i18n_common.locales"
  """Package holding one data module per locale."""

  registry_module: str = "i18n_common"
  """Module exporting the registration function."""

  register_function: str = "register_locale_data"
  """Name of the registration function."""


@dataclass(frozen=True)
class InsertionEdit:
  """
  A statement to insert immediately before an anchor statement.

  Attributes:
      anchor: Top-level statement of the original module, or None to append
          at the end of the module body.
      node: The statement to insert.
      order: Insertion sequence among edits sharing the same anchor.
  """

  anchor: Optional[cst.CSTNode]
  node: cst.SimpleStatementLine
  order: int


def locale_symbol(locale: str) -> str:
  """
  Derives the identifier bound to a locale's data module.

  Non-identifier characters are stripped, so the same locale always yields
  the same name (`en-US` -> `__locale_enUS__`).
  """
  return f"__locale_{_NON_IDENTIFIER.sub('', locale)}__"


def build_edits(
  site: MatchSite,
  resolved_locale: str,
  anchor: Optional[cst.CSTNode],
  settings: Optional[BuildSettings] = None,
  start_order: int = 0,
) -> List[InsertionEdit]:
  """
  Builds the three edits registering `resolved_locale` before bootstrap.

  The locale is trusted to be available; no validation happens here.

  Args:
      site: The bootstrap call the registration is generated for.
      resolved_locale: An available locale id (e.g. "en-US").
      anchor: The statement all three edits are inserted before.
      settings: External module names. Defaults to :class:`BuildSettings`.
      start_order: Order value of the first edit.

  Returns:
      List[InsertionEdit]: Locale import, registry import, registration call.
  """
  settings = settings or BuildSettings()
  symbol = locale_symbol(resolved_locale)

  locale_import = cst.SimpleStatementLine(
    body=[
      cst.Import(
        names=[
          cst.ImportAlias(
            name=create_dotted_name(f"{settings.locales_package}.{locale_module_name(resolved_locale)}"),
            asname=cst.AsName(name=cst.Name(symbol)),
          )
        ]
      )
    ]
  )

  register_import = cst.SimpleStatementLine(
    body=[
      cst.ImportFrom(
        module=create_dotted_name(settings.registry_module),
        names=[cst.ImportAlias(name=cst.Name(settings.register_function))],
      )
    ]
  )

  register_call = cst.SimpleStatementLine(
    body=[cst.Expr(value=cst.Call(func=cst.Name(settings.register_function), args=[cst.Arg(value=cst.Name(symbol))]))]
  )

  nodes = [locale_import, register_import, register_call]
  return [InsertionEdit(anchor=anchor, node=node, order=start_order + i) for i, node in enumerate(nodes)]


def apply_edits(module: cst.Module, edits: Sequence[InsertionEdit]) -> cst.Module:
  """
  Produces a new module with all edits applied.

  Edits sharing an anchor are inserted in ascending `order`. Anchors are
  matched by identity against the module's top-level statements.

  Args:
      module: The original module the edits were built against.
      edits: The edits to apply.

  Returns:
      cst.Module: The rewritten module (the input itself when `edits` is empty).

  Raises:
      ValueError: If an anchor is not a top-level statement of `module`.
  """
  if not edits:
    return module

  pending: Dict[int, List[InsertionEdit]] = {}
  trailing: List[InsertionEdit] = []
  for edit in edits:
    if edit.anchor is None:
      trailing.append(edit)
    else:
      pending.setdefault(id(edit.anchor), []).append(edit)

  body: List[cst.BaseStatement] = []
  for stmt in module.body:
    for edit in sorted(pending.pop(id(stmt), []), key=lambda e: e.order):
      body.append(edit.node)
    body.append(stmt)

  if pending:
    raise ValueError(f"{sum(len(v) for v in pending.values())} edit(s) reference an anchor outside the module body.")

  body.extend(edit.node for edit in sorted(trailing, key=lambda e: e.order))
  return module.with_changes(body=body)

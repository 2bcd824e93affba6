"""
Bootstrap Call Detection.

Locates the application bootstrap call for a given root component class, i.e.
call sites of the shape::

    platform_browser_dynamic().bootstrapModule(AppModule)

The platform-obtaining call on the left may be any call expression. Matching
is purely structural: every `Name` equal to the class name is a candidate, and
its ancestry (via LibCST's `ParentNodeProvider`) is checked step by step.
Candidates failing any step are dropped silently.
"""

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional

import libcst as cst
from libcst.metadata import MetadataWrapper, ParentNodeProvider

from locale_bootstrap.core.ast_helpers import find_nodes

logger = logging.getLogger(__name__)

BOOTSTRAP_METHOD = "bootstrapModule"


@dataclass(frozen=True)
class MatchSite:
  """
  A located bootstrap call.
  """

  call: cst.Call
  """The `...bootstrapModule(...)` call expression."""

  identifier: cst.Name
  """The class-name reference that triggered the match."""


def _match_site(identifier: cst.Name, parents: Mapping[cst.CSTNode, cst.CSTNode]) -> Optional[MatchSite]:
  arg = parents.get(identifier)
  if not isinstance(arg, cst.Arg) or arg.value is not identifier or arg.star:
    return None

  call = parents.get(arg)
  if not isinstance(call, cst.Call):
    return None

  func = call.func
  if not isinstance(func, cst.Attribute):
    return None
  if func.attr.value != BOOTSTRAP_METHOD:
    return None
  if not isinstance(func.value, cst.Call):
    return None

  return MatchSite(call=call, identifier=identifier)


def find_bootstrap_calls(tree: cst.Module, class_name: str) -> List[MatchSite]:
  """
  Finds every `<call>().bootstrapModule(<class_name>)` site in a module.

  The tree is never mutated and mismatches never raise; a module that does
  not bootstrap the class directly simply yields an empty list.

  Args:
      tree: The parsed module.
      class_name: The root component class name (e.g. "AppModule").

  Returns:
      List[MatchSite]: Matches in source order.
  """
  candidates = [n for n in find_nodes(tree, cst.Name) if n.value == class_name]
  if not candidates:
    return []

  # Skip the copy so metadata keys are the caller's own nodes.
  wrapper = MetadataWrapper(tree, unsafe_skip_copy=True)
  parents = wrapper.resolve(ParentNodeProvider)

  sites = []
  for identifier in candidates:
    site = _match_site(identifier, parents)
    if site is not None:
      sites.append(site)

  logger.debug("%d reference(s) to %s, %d bootstrap call(s)", len(candidates), class_name, len(sites))
  return sites

"""
Orchestration Engine for the Locale Pass.

This module provides the `LocaleEngine`, which runs the locale registration
pass over a source string:

1.  **Parsing**: Python source -> LibCST module.
2.  **Pass**: `register_locale_data` describes the edits (possibly none).
3.  **Application**: `apply_edits` builds the rewritten module.
4.  **Rendering**: The module is printed back to source.

Failures (invalid syntax, unresolvable locale) are reported on the returned
`ConversionResult`; the original code is returned untouched in that case.
"""

import logging
from typing import Optional

import libcst as cst

from locale_bootstrap.config import RuntimeConfig
from locale_bootstrap.core.ast_helpers import split_future_imports
from locale_bootstrap.core.conversion_result import ConversionResult
from locale_bootstrap.core.edits import apply_edits
from locale_bootstrap.core.locales import LocaleSource, UnknownLocaleError
from locale_bootstrap.core.transform import register_locale_data
from locale_bootstrap.utils.node_diff import capture_node_source

logger = logging.getLogger(__name__)


class LocaleEngine:
  """
  Runs the locale registration pass for one configuration.

  The locale source is consulted on every run; it is not cached.
  """

  def __init__(self, config: RuntimeConfig, source: Optional[LocaleSource] = None):
    """
    Initializes the Engine.

    Args:
        config (RuntimeConfig): Must define `locale` and `entry_module`.
        source (LocaleSource, optional): Locale provider. Defaults to the one
            derived from `config`.

    Raises:
        ValueError: If the locale or entry module is not configured.
    """
    if not config.locale:
      raise ValueError("No locale configured. Pass --locale or set 'locale' in [tool.locale_bootstrap].")
    if config.entry is None:
      raise ValueError("No entry module configured. Pass --entry-module or set 'entry_module'.")

    self.config = config
    self.entry = config.entry
    self.source = source or config.locale_source()

  def parse(self, code: str) -> cst.Module:
    """
    Parses source string into a LibCST Module.

    Raises:
        libcst.ParserSyntaxError: If the input code is invalid Python.
    """
    return cst.parse_module(code)

  def to_source(self, tree: cst.Module) -> str:
    """
    Converts CST back to source string.
    """
    return tree.code

  def run(self, code: str) -> ConversionResult:
    """
    Executes the pass on a source string.

    Args:
        code (str): Python source code.

    Returns:
        ConversionResult: The rewritten code, or the original code with errors.
    """
    try:
      tree = self.parse(code)
    except cst.ParserSyntaxError as e:
      return ConversionResult(code=code, errors=[f"Parse Error: {e}"], success=False)

    tree = split_future_imports(tree)

    try:
      edits = register_locale_data(tree, self.entry, self.config.locale, self.source, self.config.build_settings)
    except UnknownLocaleError as e:
      return ConversionResult(code=code, errors=[str(e)], success=False)

    if not edits:
      return ConversionResult(code=code)

    new_tree = apply_edits(tree, edits)
    logger.debug("Inserted %d statement(s)", len(edits))
    return ConversionResult(
      code=self.to_source(new_tree),
      changed=True,
      inserted=[capture_node_source(edit.node).strip() for edit in edits],
    )

"""
Generic LibCST Helpers.

Static functions used by the locale pass to walk a module, locate the
insertion point for synthesized code, and construct dotted names.
"""

from typing import List, Optional, Type, TypeVar, Union

import libcst as cst

N = TypeVar("N", bound=cst.CSTNode)


class _NodeCollector(cst.CSTVisitor):
  """
  Collects every node of a given type in pre-order (source order).
  """

  def __init__(self, node_type: Type[cst.CSTNode]) -> None:
    self.node_type = node_type
    self.found: List[cst.CSTNode] = []

  def on_visit(self, node: cst.CSTNode) -> bool:
    if isinstance(node, self.node_type):
      self.found.append(node)
    return True


def find_nodes(tree: cst.CSTNode, node_type: Type[N]) -> List[N]:
  """
  Returns all nodes of `node_type` found under `tree`, including `tree` itself.

  The walk is depth-first pre-order, so results follow their order of
  appearance in the source.

  Args:
      tree: Root node to search (usually a `cst.Module`).
      node_type: The LibCST class to collect (e.g. `cst.Name`).

  Returns:
      List[N]: Matching nodes, in source order.
  """
  collector = _NodeCollector(node_type)
  tree.visit(collector)
  return collector.found  # type: ignore[return-value]


def is_docstring(node: cst.CSTNode, idx: int) -> bool:
  """
  Determines if a statement node represents a module docstring.

  Args:
      node: The statement node from the module body.
      idx: The index of this statement in the body list.

  Returns:
      bool: True if it is a docstring (string expression at index 0).
  """
  if idx != 0:
    return False
  if isinstance(node, cst.SimpleStatementLine):
    if len(node.body) == 1 and isinstance(node.body[0], cst.Expr):
      expr = node.body[0].value
      if isinstance(expr, (cst.SimpleString, cst.ConcatenatedString)):
        return True
  return False


def _is_future_small(small_stmt: cst.BaseSmallStatement) -> bool:
  return (
    isinstance(small_stmt, cst.ImportFrom)
    and isinstance(small_stmt.module, cst.Name)
    and small_stmt.module.value == "__future__"
  )


def is_future_import(node: cst.CSTNode) -> bool:
  """
  Determines if a statement is a `from __future__ import ...` directive.

  A line mixing future imports with other statements counts as one too; see
  :func:`split_future_imports`.

  Args:
      node: The statement node.

  Returns:
      bool: True if it is a future import.
  """
  if isinstance(node, cst.SimpleStatementLine):
    return any(_is_future_small(small_stmt) for small_stmt in node.body)
  return False


def split_future_imports(module: cst.Module) -> cst.Module:
  """
  Moves statements sharing a line with `__future__` imports onto their own line.

  `from __future__ import annotations; main()` becomes two lines, so code can
  be inserted between the future import and `main()`.

  Args:
      module: The parsed module.

  Returns:
      cst.Module: A new module, or `module` itself if no line needed splitting.
  """
  body: List[cst.BaseStatement] = []
  changed = False
  for stmt in module.body:
    if not isinstance(stmt, cst.SimpleStatementLine) or not is_future_import(stmt):
      body.append(stmt)
      continue

    split_at = 0
    while split_at < len(stmt.body) and _is_future_small(stmt.body[split_at]):
      split_at += 1
    if split_at in (0, len(stmt.body)):
      body.append(stmt)
      continue

    # Semicolons are dropped; codegen re-adds them between statements.
    futures = [s.with_changes(semicolon=cst.MaybeSentinel.DEFAULT) for s in stmt.body[:split_at]]
    rest = [s.with_changes(semicolon=cst.MaybeSentinel.DEFAULT) for s in stmt.body[split_at:]]
    body.append(stmt.with_changes(body=futures, trailing_whitespace=cst.TrailingWhitespace()))
    body.append(cst.SimpleStatementLine(body=rest, trailing_whitespace=stmt.trailing_whitespace))
    changed = True

  if not changed:
    return module
  return module.with_changes(body=body)


def get_first_node(module: cst.Module) -> Optional[cst.BaseStatement]:
  """
  Locates the first top-level statement that new code may precede.

  The module docstring and `__future__` imports must remain at the top of a
  Python module, so they are skipped. Lines mixing future imports with other
  statements are skipped whole; run :func:`split_future_imports` first.

  Args:
      module: The parsed module.

  Returns:
      Optional[cst.BaseStatement]: The anchor statement, or None if the module
      holds nothing but a docstring and future imports (or is empty).
  """
  for idx, stmt in enumerate(module.body):
    if is_docstring(stmt, idx) or is_future_import(stmt):
      continue
    return stmt
  return None


def create_dotted_name(name_str: str) -> Union[cst.Name, cst.Attribute]:
  """
  Creates a CST node structure for a dotted path string.

  Args:
      name_str (str): Dot-separated path (e.g. "i18n_common.locales.fr").

  Returns:
      Union[cst.Name, cst.Attribute]: The constructed AST node.
  """
  parts = name_str.split(".")
  node: Union[cst.Name, cst.Attribute] = cst.Name(parts[0])
  for part in parts[1:]:
    node = cst.Attribute(value=node, attr=cst.Name(part))
  return node

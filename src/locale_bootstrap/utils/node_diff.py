"""
Detached Node Rendering.

Converts LibCST nodes to source text "in vacuum", i.e. without the module they
belong to. Synthesized statements are never attached to a module until the
edits are applied, so this is how they are shown to users beforehand.
"""

import libcst as cst

# A dummy module used as a context to render detached nodes.
_RENDER_CTX = cst.parse_module("")


def capture_node_source(node: cst.CSTNode) -> str:
  """
  Renders a LibCST node into its Python source code string representation.

  Args:
      node: The CST node to serialise.

  Returns:
      str: The Python code string.
  """
  return _RENDER_CTX.code_for_node(node)

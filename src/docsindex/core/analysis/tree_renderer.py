from __future__ import annotations

"""
Tree Renderer.

Converts a TreeNode hierarchy into ASCII lines for console previews.
"""

from typing import List

from docsindex.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(nodes: List[TreeNode], prefix: str = "") -> List[str]:
    """
    Render the tree with standard connectors (├──, └──).

    Entries keep the tree's own order. Files are shown with their original
    name (title plus extension).

    Args:
        nodes: Nodes of the current level.
        prefix: Indentation prefix for the current level.

    Returns:
        List[str]: Rendered lines.
    """
    lines: List[str] = []
    _render_level(nodes, lines, prefix)
    return lines


def _render_level(nodes: List[TreeNode], lines: List[str], prefix: str) -> None:
    total = len(nodes)
    for i, node in enumerate(nodes):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{node.name}")

        if node.is_dir:
            new_prefix = prefix + ("    " if is_last else "│   ")
            _render_level(node.items or [], lines, new_prefix)

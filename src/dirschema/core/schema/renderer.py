from __future__ import annotations

"""
Schema Tree Renderer.

Formats an in-memory node tree back into canonical schema lines. Used for
tree previews and dry runs; the on-disk counterpart lives in the serializer.
"""

from typing import List, Optional

from dirschema.domain.constants import DIRECTORY_MARKER, SCHEMA_INDENT_WIDTH
from dirschema.domain.tree_models import DirectoryNode, Node


def format_entry(name: str, is_dir: bool, depth: int, indent_width: int = SCHEMA_INDENT_WIDTH) -> str:
    """Render one schema line: indentation, name and directory marker."""
    suffix = DIRECTORY_MARKER if is_dir else ""
    return f"{' ' * (indent_width * depth)}{name}{suffix}"


def render_tree_lines(
        node: Node,
        depth: int = 0,
        lines: Optional[List[str]] = None,
        indent_width: int = SCHEMA_INDENT_WIDTH,
) -> List[str]:
    """
    Render a node and its descendants pre-order, in stored child order.

    Args:
        node: Subtree root to render (included in the output).
        depth: Depth assigned to ``node``.
        lines: Optional accumulator to append to.
        indent_width: Spaces per depth level.

    Returns:
        List[str]: The accumulated schema lines.
    """
    if lines is None:
        lines = []
    lines.append(format_entry(node.name, node.is_dir, depth, indent_width))
    if isinstance(node, DirectoryNode):
        for child in node.children:
            render_tree_lines(child, depth + 1, lines, indent_width)
    return lines

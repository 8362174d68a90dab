from __future__ import annotations

"""
Unit tests for the Schema Tree Renderer.
"""

from dirschema.core.schema.renderer import format_entry, render_tree_lines
from dirschema.domain.tree_models import DirectoryNode, FileNode


def test_format_entry_indents_four_spaces_per_level() -> None:
    """TC-01: Canonical indentation is four spaces per depth."""
    assert format_entry("a", True, 0) == "a/"
    assert format_entry("b.txt", False, 2) == "        b.txt"


def test_render_custom_indent_width() -> None:
    """TC-02: The indent width is configurable for previews."""
    tree = DirectoryNode("r", [DirectoryNode("a", [FileNode("x")])])

    assert render_tree_lines(tree, indent_width=2) == ["r/", "  a/", "    x"]

from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node types produced by the schema parser and consumed
by the materializer, plus the transient line record emitted by the scanner.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        name: Entry name relative to its parent directory.
    """
    name: str

    @property
    def is_dir(self) -> bool:
        return False


@dataclass(frozen=True)
class DirectoryNode:
    """
    Represents a directory entry owning an ordered list of children.

    Attributes:
        name: Entry name relative to its parent directory.
        children: Child nodes in encounter (or alphabetical) order.
    """
    name: str
    children: List["Node"] = field(default_factory=list)

    @property
    def is_dir(self) -> bool:
        return True


Node = Union[DirectoryNode, FileNode]

# -----------------------------------------------------------------------------
# PARSER RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RawLine:
    """
    A single meaningful line of a schema document.

    Attributes:
        indent: Leading whitespace width (raw) or canonical depth (normalized).
        name: Trimmed entry text, trailing '/' retained as directory marker.
        source_line: 1-based line number in the source document.
    """
    indent: int
    name: str
    source_line: int


class DepthJumpPolicy(str, Enum):
    """Resolution applied when a line is nested deeper than any open parent."""
    REJECT = "reject"
    CLAMP = "clamp"


def count_nodes(node: Node) -> int:
    """Count every node in a subtree, the node itself included."""
    if isinstance(node, FileNode):
        return 1
    return 1 + sum(count_nodes(child) for child in node.children)

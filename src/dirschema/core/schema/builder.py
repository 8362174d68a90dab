from __future__ import annotations

"""
Schema Tree Builder.

Assembles normalized lines into a DirectoryNode tree. Construction runs over
an arena of mutable slots addressed by integer index; the depth stack holds
arena indices, so "parent at depth d" is a lookup rather than a live
reference into the tree. The immutable node tree is frozen out of the arena
once the pass completes.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from dirschema.core.schema.normalizer import normalize_indentation
from dirschema.core.schema.scanner import scan_lines
from dirschema.domain.constants import DIRECTORY_MARKER
from dirschema.domain.errors import StructureError
from dirschema.domain.tree_models import (
    DepthJumpPolicy,
    DirectoryNode,
    FileNode,
    Node,
    RawLine,
)

logger = logging.getLogger(__name__)

ROOT_INDEX = 0
_SEPARATORS = tuple(sep for sep in (DIRECTORY_MARKER, os.sep, os.altsep) if sep)
_RESERVED_NAMES = (".", "..")


@dataclass
class _Slot:
    name: str
    is_dir: bool
    source_line: int = 0
    children: List[int] = field(default_factory=list)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        lines: Sequence[RawLine],
        root_name: str,
        policy: Union[DepthJumpPolicy, str] = DepthJumpPolicy.REJECT,
) -> DirectoryNode:
    """
    Build the directory tree described by normalized schema lines.

    For each line the depth stack is truncated to ``level + 1`` entries,
    the new node is attached to ``stack[level]`` and then pushed. Every node,
    files included, occupies a stack slot, so a file followed by a deeper
    line is always reported as a file with children.

    Args:
        lines: Lines whose ``indent`` is already a canonical depth.
        root_name: Name of the synthetic root directory.
        policy: Handling of lines nested more than one level below the
                previous line ('reject' raises, 'clamp' attaches the line
                to the deepest open node).

    Returns:
        DirectoryNode: Root directory owning the complete tree.

    Raises:
        StructureError: A file is given a child, an entry name is empty or
                        would leave its parent directory, or a depth
                        jump is rejected.
    """
    policy = DepthJumpPolicy(policy)
    arena: List[_Slot] = [_Slot(name=root_name, is_dir=True)]
    stack: List[int] = [ROOT_INDEX]

    for line in lines:
        level = line.indent
        if level >= len(stack):
            if policy is DepthJumpPolicy.REJECT:
                raise StructureError(
                    line.source_line,
                    f"'{line.name}' is nested deeper than any open directory",
                )
            logger.debug(f"Line {line.source_line}: clamping depth {level} to {len(stack) - 1}")
            level = len(stack) - 1

        del stack[level + 1:]

        parent = arena[stack[level]]
        if not parent.is_dir:
            raise StructureError(
                line.source_line,
                f"Unexpected child '{line.name}' under file '{parent.name}'. Files cannot have children",
            )

        is_dir = line.name.endswith(DIRECTORY_MARKER)
        name = line.name.rstrip(DIRECTORY_MARKER).strip() if is_dir else line.name
        if not name:
            raise StructureError(line.source_line, "Entry has an empty name")
        if name in _RESERVED_NAMES or any(sep in name for sep in _SEPARATORS) or os.path.splitdrive(name)[0]:
            raise StructureError(
                line.source_line,
                f"'{line.name}' is not a single path component. Entries must stay under the root",
            )

        arena.append(_Slot(name=name, is_dir=is_dir, source_line=line.source_line))
        index = len(arena) - 1
        parent.children.append(index)
        stack.append(index)

    root = _freeze(arena, ROOT_INDEX)
    logger.debug(f"Built tree '{root_name}' with {len(arena) - 1} entries")
    return root


def build_tree_from_text(
        text: str,
        root_name: str,
        policy: Union[DepthJumpPolicy, str] = DepthJumpPolicy.REJECT,
) -> DirectoryNode:
    """Scan, normalize and build a tree from schema text in one call."""
    return build_tree(normalize_indentation(scan_lines(text)), root_name, policy)


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _freeze(arena: List[_Slot], index: int) -> Node:
    """Convert an arena slot and its descendants into immutable nodes."""
    slot = arena[index]
    if not slot.is_dir:
        return FileNode(name=slot.name)
    return DirectoryNode(
        name=slot.name,
        children=[_freeze(arena, child) for child in slot.children],
    )

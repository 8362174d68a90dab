from __future__ import annotations

"""
Tree Materializer.

Creates the directories and empty files described by a node tree. Only new
structure is created: any collision with an existing path aborts the walk.
There is no rollback, entries created before a failure stay on disk.
"""

import logging
import os

from dirschema.domain.errors import AlreadyExistsError, SchemaIOError
from dirschema.domain.tree_models import DirectoryNode, Node

logger = logging.getLogger(__name__)


def materialize(node: Node, parent_path: str) -> int:
    """
    Create ``node`` (and its subtree) under ``parent_path``.

    Args:
        node: Directory or file node to create.
        parent_path: Existing (or creatable) directory that receives the node.

    Returns:
        int: Number of filesystem entries created.

    Raises:
        AlreadyExistsError: A target path already exists.
        SchemaIOError: Any other creation failure.
    """
    target = os.path.join(parent_path, node.name)

    if not isinstance(node, DirectoryNode):
        _create_empty_file(target)
        return 1

    if os.path.lexists(target):
        raise AlreadyExistsError(target)

    try:
        os.makedirs(target)
    except FileExistsError as e:
        raise AlreadyExistsError(target) from e
    except OSError as e:
        raise SchemaIOError(target, e) from e
    logger.debug(f"Created directory {target}")

    created = 1
    for child in node.children:
        created += materialize(child, target)
    return created


def _create_empty_file(path: str) -> None:
    """Create an empty file, refusing to truncate an existing one."""
    try:
        with open(path, "x", encoding="utf-8"):
            pass
    except FileExistsError as e:
        raise AlreadyExistsError(path) from e
    except OSError as e:
        raise SchemaIOError(path, e) from e
    logger.debug(f"Created file {path}")

from __future__ import annotations

"""
Unit tests for domain models and the error taxonomy.
"""

import errno

from dirschema.domain.errors import (
    AlreadyExistsError,
    SchemaError,
    SchemaIOError,
    StructureError,
)
from dirschema.domain.run_models import create_error_result, create_success_result
from dirschema.domain.tree_models import DirectoryNode, FileNode, count_nodes


def test_node_kinds() -> None:
    """TC-01: Directories and files report their kind."""
    assert DirectoryNode("d").is_dir is True
    assert FileNode("f").is_dir is False


def test_count_nodes_includes_root() -> None:
    """TC-02: Counting walks the whole subtree."""
    tree = DirectoryNode("r", [DirectoryNode("a", [FileNode("x"), FileNode("y")]), FileNode("z")])

    assert count_nodes(tree) == 5


def test_error_taxonomy_descriptions() -> None:
    """TC-03: Every error names its kind and the offending path or line."""
    io_err = SchemaIOError("/tmp/x.dir", FileNotFoundError(errno.ENOENT, "No such file or directory"))
    exists = AlreadyExistsError("/tmp/project")
    structure = StructureError(12, "Files cannot have children")

    assert all(isinstance(e, SchemaError) for e in (io_err, exists, structure))
    assert io_err.describe() == "IoError: No such file or directory '/tmp/x.dir'"
    assert exists.describe() == "AlreadyExists: Path '/tmp/project' already exists"
    assert structure.describe() == "StructureError: Line 12: Files cannot have children"
    assert structure.source_line == 12


def test_result_factories() -> None:
    """TC-04: Factories build ok and failed results."""
    ok = create_success_result("/a.dir", "materialize", "/a", nodes_created=3)
    failed = create_error_result("/b", "schema", "AlreadyExists: ...", "AlreadyExists")

    assert ok.ok and ok.nodes_created == 3 and ok.tree_preview == []
    assert not failed.ok and failed.error_kind == "AlreadyExists"

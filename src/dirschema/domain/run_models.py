from __future__ import annotations

"""
Path Processing Result Models.

Defines the immutable outcome of processing a single input path and the
factory functions used by the engine to build success and error results
for the interface layers (CLI/GUI).
"""

from dataclasses import dataclass, field
from typing import List

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PathResult:
    """
    Outcome of one input path, forward or reverse.

    Attributes:
        ok: Flag indicating success or failure.
        input_path: Canonical absolute path that was processed.
        mode: 'materialize' (schema -> disk) or 'schema' (disk -> schema).
        target_path: Root directory created or schema document written.
        error: Descriptive message in case of failure.
        error_kind: Taxonomy identifier (IoError, AlreadyExists, StructureError).
        lines_written: Number of schema lines emitted (reverse mode).
        nodes_created: Number of filesystem entries created (forward mode).
        dry_run: Whether the run was a simulation without side effects.
        tree_preview: Schema lines of the parsed tree, when requested.
    """
    ok: bool
    input_path: str
    mode: str
    target_path: str = ""

    error: str = ""
    error_kind: str = ""

    lines_written: int = 0
    nodes_created: int = 0
    dry_run: bool = False
    tree_preview: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        input_path: str,
        mode: str,
        error: str,
        error_kind: str,
        target_path: str = "",
) -> PathResult:
    """Create a failed path result instance."""
    return PathResult(
        ok=False,
        input_path=input_path,
        mode=mode,
        target_path=target_path,
        error=error,
        error_kind=error_kind,
    )


def create_success_result(
        input_path: str,
        mode: str,
        target_path: str,
        lines_written: int = 0,
        nodes_created: int = 0,
        dry_run: bool = False,
        tree_preview: List[str] | None = None,
) -> PathResult:
    """Create a successful path result instance."""
    return PathResult(
        ok=True,
        input_path=input_path,
        mode=mode,
        target_path=target_path,
        lines_written=lines_written,
        nodes_created=nodes_created,
        dry_run=dry_run,
        tree_preview=list(tree_preview or []),
    )

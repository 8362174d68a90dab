from __future__ import annotations

"""
Schema Error Taxonomy.

Every failure raised by the parsing core and the filesystem mapping derives
from SchemaError, so the per-path boundary can convert any of them into a
reportable result with a stable kind identifier.
"""

from typing import Optional


class SchemaError(Exception):
    """Base class for all dirschema failures."""

    kind: str = "SchemaError"

    def describe(self) -> str:
        """Render the user-visible error description (kind + detail)."""
        return f"{self.kind}: {self}"


class SchemaIOError(SchemaError):
    """
    Underlying read, create or list failure.

    Attributes:
        path: Filesystem path the operation targeted.
        cause: Original OSError, if any.
    """

    kind = "IoError"

    def __init__(self, path: str, cause: Optional[OSError] = None, message: str = ""):
        self.path = path
        self.cause = cause
        detail = message or (cause.strerror if cause is not None and cause.strerror else str(cause))
        super().__init__(f"{detail} '{path}'" if detail else f"I/O failure at '{path}'")


class AlreadyExistsError(SchemaError):
    """Target path collides with an existing filesystem entry."""

    kind = "AlreadyExists"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path '{path}' already exists")


class StructureError(SchemaError):
    """
    The schema text describes an impossible tree.

    Attributes:
        source_line: 1-based line number of the offending entry.
    """

    kind = "StructureError"

    def __init__(self, source_line: int, reason: str):
        self.source_line = source_line
        self.reason = reason
        super().__init__(f"Line {source_line}: {reason}")

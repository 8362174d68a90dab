from __future__ import annotations

"""
Schema Serializer.

Reverse direction of the tool: walks an existing directory and emits its
canonical schema. Entries are sorted by name in codepoint order, directories
and files interleaved, and visited pre-order. Symbolic links are listed but
never followed.
"""

import logging
import os
from typing import Iterator, List, Tuple

from dirschema.core.schema.renderer import format_entry
from dirschema.domain.constants import SCHEMA_EXTENSION, SCHEMA_INDENT_WIDTH
from dirschema.domain.errors import AlreadyExistsError, SchemaIOError
from dirschema.infra.fs import schema_path_for_directory

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def iter_schema_lines(
        dir_path: str,
        depth: int = 0,
        indent_width: int = SCHEMA_INDENT_WIDTH,
) -> Iterator[str]:
    """
    Yield the schema lines describing the contents of ``dir_path``.

    Args:
        dir_path: Directory to scan.
        depth: Canonical depth of the directory's immediate entries.
        indent_width: Spaces per depth level.

    Raises:
        SchemaIOError: A directory cannot be listed.
    """
    try:
        with os.scandir(dir_path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise SchemaIOError(dir_path, e) from e

    for entry in entries:
        is_dir = entry.is_dir(follow_symlinks=False)
        yield format_entry(entry.name, is_dir, depth, indent_width)
        if is_dir:
            yield from iter_schema_lines(entry.path, depth + 1, indent_width)


def serialize_directory(dir_path: str, indent_width: int = SCHEMA_INDENT_WIDTH) -> List[str]:
    """Collect the full schema of ``dir_path`` as a list of lines."""
    return list(iter_schema_lines(dir_path, 0, indent_width))


def create_schema(
        dir_path: str,
        extension: str = SCHEMA_EXTENSION,
        indent_width: int = SCHEMA_INDENT_WIDTH,
) -> Tuple[str, int]:
    """
    Write the schema of ``dir_path`` next to it, as ``<dir_path><extension>``.

    The whole directory is scanned before the document is created, so a
    listing failure leaves no partial schema behind.

    Returns:
        Tuple[str, int]: (schema document path, number of lines written).

    Raises:
        AlreadyExistsError: The schema document already exists.
        SchemaIOError: Listing or writing failed.
    """
    schema_path = schema_path_for_directory(dir_path, extension)
    if os.path.lexists(schema_path):
        raise AlreadyExistsError(schema_path)

    lines = serialize_directory(dir_path, indent_width)
    data = _encode_lines(lines, schema_path)

    try:
        with open(schema_path, "xb") as f:
            f.write(data)
    except FileExistsError as e:
        raise AlreadyExistsError(schema_path) from e
    except OSError as e:
        raise SchemaIOError(schema_path, e) from e

    logger.info(f"{len(lines)} lines written to {schema_path}")
    return schema_path, len(lines)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _encode_lines(lines: List[str], schema_path: str) -> bytes:
    """
    Encode the schema document before its file is created.

    Names that are not valid UTF-8 on disk come back from ``os.scandir`` with
    surrogate escapes; ``surrogateescape`` writes their original bytes back,
    so the document expands into the same names again.
    """
    text = "".join(line + "\n" for line in lines)
    try:
        return text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError as e:
        raise SchemaIOError(schema_path, message=f"Entry name cannot be encoded ({e.reason}):") from e

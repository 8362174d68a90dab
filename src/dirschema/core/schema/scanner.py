from __future__ import annotations

"""
Schema Line Scanner.

Splits a schema document into meaningful lines, discarding blank and comment
lines while measuring the raw leading-whitespace width of each entry.
"""

import logging
from typing import List

from dirschema.domain.constants import COMMENT_MARKER
from dirschema.domain.errors import SchemaIOError
from dirschema.domain.tree_models import RawLine

logger = logging.getLogger(__name__)


def scan_lines(text: str) -> List[RawLine]:
    """
    Convert raw schema text into an ordered list of RawLine records.

    Tabs and spaces count as one indentation unit each. No structural
    validation happens here.

    Args:
        text: Full content of a schema document.

    Returns:
        List[RawLine]: Entries in document order with 1-based line numbers.
    """
    lines: List[RawLine] = []
    for number, line in enumerate(text.split("\n"), start=1):
        name = line.strip()
        if not name or name.startswith(COMMENT_MARKER):
            continue
        indent = len(line) - len(line.lstrip())
        lines.append(RawLine(indent=indent, name=name, source_line=number))
    return lines


def read_schema(path: str) -> List[RawLine]:
    """
    Read and scan a schema document from disk.

    The document is decoded as UTF-8 with an optional byte order mark. Bytes
    that are not valid UTF-8 are carried through as surrogate escapes, the
    same form ``os.scandir`` uses for such names.

    Raises:
        SchemaIOError: If the document cannot be read.
    """
    try:
        with open(path, "r", encoding="utf-8-sig", errors="surrogateescape") as f:
            text = f.read()
    except OSError as e:
        raise SchemaIOError(path, e) from e

    lines = scan_lines(text)
    logger.debug(f"Scanned {len(lines)} entries from {path}")
    return lines

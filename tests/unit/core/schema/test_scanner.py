from __future__ import annotations

"""
Unit tests for the Schema Line Scanner.

Verifies blank/comment filtering, whitespace measurement and the
preservation of source line numbers for diagnostics.
"""

from pathlib import Path

import pytest

from dirschema.core.schema.scanner import read_schema, scan_lines
from dirschema.domain.errors import SchemaIOError
from dirschema.domain.tree_models import RawLine


def test_scan_measures_indent_and_trims_name() -> None:
    """TC-01: Leading whitespace width is measured; names are trimmed."""
    lines = scan_lines("root/\n    child.txt   \n")

    assert lines == [
        RawLine(indent=0, name="root/", source_line=1),
        RawLine(indent=4, name="child.txt", source_line=2),
    ]


def test_scan_skips_blank_and_comment_lines() -> None:
    """TC-02: Empty, whitespace-only and '#' lines are dropped."""
    text = "# header\n\na/\n   \n    # indented comment\n    b\n"
    lines = scan_lines(text)

    assert [ln.name for ln in lines] == ["a/", "b"]
    assert [ln.source_line for ln in lines] == [3, 6]


def test_scan_counts_tabs_as_single_units() -> None:
    """TC-03: A tab and a space each count as one indentation unit."""
    lines = scan_lines("a/\n\tb/\n\t c\n")

    assert [ln.indent for ln in lines] == [0, 1, 2]


def test_scan_handles_crlf_line_endings() -> None:
    """TC-04: Windows line endings do not leak into names."""
    lines = scan_lines("a/\r\n  b\r\n")

    assert [ln.name for ln in lines] == ["a/", "b"]
    assert [ln.indent for ln in lines] == [0, 2]


def test_hash_inside_name_is_kept() -> None:
    """TC-05: Only a leading '#' marks a comment."""
    lines = scan_lines("notes#1.txt\n")

    assert lines[0].name == "notes#1.txt"


def test_read_schema_from_disk(tmp_path: Path) -> None:
    """TC-06: Documents are read as UTF-8 from disk."""
    doc = tmp_path / "tree.dir"
    doc.write_text("données/\n    café.txt\n", encoding="utf-8")

    lines = read_schema(str(doc))

    assert [ln.name for ln in lines] == ["données/", "café.txt"]


def test_read_schema_missing_file_raises_io_error(tmp_path: Path) -> None:
    """TC-07: A missing document surfaces as an IoError naming the path."""
    missing = tmp_path / "missing.dir"

    with pytest.raises(SchemaIOError) as exc_info:
        read_schema(str(missing))

    assert exc_info.value.kind == "IoError"
    assert str(missing) in str(exc_info.value)


def test_read_schema_ignores_byte_order_mark(tmp_path: Path) -> None:
    """TC-08: A UTF-8 BOM written by some editors is not part of the first name."""
    doc = tmp_path / "bom.dir"
    doc.write_bytes(b"\xef\xbb\xbfproject/\n    README\n")

    lines = read_schema(str(doc))

    assert lines[0] == RawLine(indent=0, name="project/", source_line=1)
    assert lines[1].name == "README"


def test_read_schema_keeps_undecodable_bytes(tmp_path: Path) -> None:
    """TC-09: Non UTF-8 bytes survive as the same escapes os.scandir produces."""
    doc = tmp_path / "raw.dir"
    doc.write_bytes(b"\xff.txt\n")

    lines = read_schema(str(doc))

    assert lines[0].name == b"\xff.txt".decode("utf-8", errors="surrogateescape")

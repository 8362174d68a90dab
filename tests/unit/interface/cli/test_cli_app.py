from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Verifies invocation modes (file picker fallback vs argument-only), error
reporting routes, exit codes and result rendering. Dialog collaborators are
always mocked.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from dirschema.interface.cli.app import main

pytestmark = pytest.mark.usefixtures("reset_logging")


def test_args_mode_without_paths_is_noop(capsys: pytest.CaptureFixture[str]) -> None:
    """TC-01: Argument-only mode with no paths exits 0 and opens nothing."""
    with patch("dirschema.interface.gui.dialogs.pick_schema_paths") as picker:
        code = main(["--use-defaults", "--no-dialog"])

    assert code == 0
    picker.assert_not_called()
    assert capsys.readouterr().out == ""


def test_dialog_mode_uses_file_picker(tmp_path: Path) -> None:
    """TC-02: With no paths, dialog mode asks the picker for documents."""
    doc = tmp_path / "picked.dir"
    doc.write_text("x.txt\n", encoding="utf-8")

    with patch("dirschema.interface.gui.dialogs.pick_schema_paths", return_value=[str(doc)]) as picker:
        code = main(["--use-defaults", "--dialog"])

    assert code == 0
    picker.assert_called_once()
    assert (tmp_path / "picked" / "x.txt").is_file()


def test_dialog_mode_empty_selection_is_silent() -> None:
    """TC-03: Cancelling the picker is a silent no-op."""
    with patch("dirschema.interface.gui.dialogs.pick_schema_paths", return_value=[]):
        assert main(["--use-defaults"]) == 0


def test_dialog_mode_reports_errors_in_dialogs(tmp_path: Path) -> None:
    """TC-04: Failures in dialog mode go to the error alert, one per path."""
    (tmp_path / "bad.dir").write_text("f\n    g\n", encoding="utf-8")

    with patch("dirschema.interface.gui.dialogs.show_error") as alert:
        code = main(["--use-defaults", "--dialog", str(tmp_path / "bad.dir")])

    assert code == 1
    title, message = alert.call_args[0]
    assert title == "Error While Processing File"
    assert "StructureError" in message


def test_console_reporting_and_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """TC-05: Argument-only mode prints errors to stderr and continues."""
    (tmp_path / "src_dir").mkdir()
    (tmp_path / "src_dir" / "file.txt").write_text("", encoding="utf-8")

    code = main([
        "--use-defaults", "--no-dialog",
        str(tmp_path / "missing.dir"),
        str(tmp_path / "src_dir"),
    ])

    captured = capsys.readouterr()
    assert code == 1
    assert "ERROR: IoError" in captured.err
    assert "1 lines written to" in captured.out
    assert (tmp_path / "src_dir.dir").exists()


def test_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """TC-06: --json renders one object per processed path."""
    (tmp_path / "plan.dir").write_text("a/\n    b\n", encoding="utf-8")

    code = main(["--use-defaults", "--no-dialog", "--json", "--dry-run", str(tmp_path / "plan.dir")])

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data[0]["ok"] is True
    assert data[0]["dry_run"] is True
    assert data[0]["nodes_created"] == 3
    assert not (tmp_path / "plan").exists()


def test_dump_config_applies_overrides(capsys: pytest.CaptureFixture[str]) -> None:
    """TC-07: --dump-config prints the merged, validated configuration."""
    code = main(["--use-defaults", "--depth-jump", "clamp", "--dump-config"])

    conf = json.loads(capsys.readouterr().out)
    assert code == 0
    assert conf["depth_jump_policy"] == "clamp"
    assert conf["invocation_mode"] == "dialog"


def test_interrupt_returns_130(tmp_path: Path) -> None:
    """TC-08: Ctrl+C during processing exits with 130."""
    with patch("dirschema.interface.cli.app.process_paths", side_effect=KeyboardInterrupt):
        assert main(["--use-defaults", "--no-dialog", str(tmp_path)]) == 130

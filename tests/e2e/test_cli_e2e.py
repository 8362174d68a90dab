from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: exit codes, stream output and filesystem side effects
for both directions of the transform.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "dirschema" / "main.py"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects 'src' into PYTHONPATH and points HOME at a scratch directory so
    the user's real configuration is never read.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)

    cmd = [sys.executable, str(ENTRY_POINT), "--use-defaults", "--no-dialog"] + args

    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_expands_schema_document(tmp_path: Path, isolated_home: Path) -> None:
    """TC-01: A schema document is materialized next to itself (exit 0)."""
    doc = tmp_path / "site.dir"
    doc.write_text("public/\n  index.html\nconfig.yml\n", encoding="utf-8")

    result = run_cli([str(doc)], isolated_home)

    assert result.returncode == 0, result.stderr
    assert (tmp_path / "site" / "public" / "index.html").is_file()
    assert (tmp_path / "site" / "config.yml").is_file()
    assert "entries created" in result.stdout


def test_cli_snapshots_directory(tmp_path: Path, isolated_home: Path) -> None:
    """TC-02: A directory argument produces '<dir>.dir'."""
    target = tmp_path / "snap"
    (target / "a").mkdir(parents=True)
    (target / "b.txt").write_text("", encoding="utf-8")

    result = run_cli([str(target)], isolated_home)

    assert result.returncode == 0, result.stderr
    assert (tmp_path / "snap.dir").read_text(encoding="utf-8") == "a/\nb.txt\n"
    assert "2 lines written" in result.stdout


def test_cli_continues_after_failure(tmp_path: Path, isolated_home: Path) -> None:
    """TC-03: One failing path yields exit 1 but later paths still run."""
    (tmp_path / "bad.dir").write_text("file\n    child\n", encoding="utf-8")
    (tmp_path / "good.dir").write_text("ok/\n", encoding="utf-8")

    result = run_cli([str(tmp_path / "bad.dir"), str(tmp_path / "good.dir")], isolated_home)

    assert result.returncode == 1
    assert "StructureError" in result.stderr
    assert (tmp_path / "good" / "ok").is_dir()


def test_cli_json_dry_run(tmp_path: Path, isolated_home: Path) -> None:
    """TC-04: JSON output of a dry run, with no filesystem side effects."""
    (tmp_path / "plan.dir").write_text("a/\n    b\n", encoding="utf-8")

    result = run_cli(["--json", "--dry-run", str(tmp_path / "plan.dir")], isolated_home)

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data[0]["ok"] is True
    assert data[0]["mode"] == "materialize"
    assert not (tmp_path / "plan").exists()


def test_cli_help_message(isolated_home: Path) -> None:
    """TC-05: Help message smoke test."""
    result = run_cli(["--help"], isolated_home)

    assert result.returncode == 0
    assert "usage: dirschema" in result.stdout
    assert "--depth-jump" in result.stdout

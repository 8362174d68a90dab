from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory (config and logs) per test.
3. Shared schema documents and directory fixtures.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirschema.domain.config import get_default_config  # noqa: E402
from dirschema.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect ~ so config.json and log files never touch the real user folder."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    return home


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Tear down dirschema handlers before and after a test."""
    shutdown_logging()
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def cli_config() -> Dict[str, Any]:
    """Default configuration in argument-only mode (no dialogs, no log file)."""
    cfg = get_default_config()
    cfg["invocation_mode"] = "args"
    cfg["log_to_file"] = False
    return cfg


@pytest.fixture
def example_schema_text() -> str:
    """Schema document with 4-space indentation (raw widths 0, 4, 8)."""
    return (
        "project/\n"
        "    src/\n"
        "        main.txt\n"
        "    README\n"
    )

from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution for input arguments, schema document
naming rules, and the application data directory. Acts as an abstraction over
the 'os' module so the core never manipulates raw argument strings.
"""

import os
import sys
from typing import Optional

from dirschema.domain.constants import FALLBACK_ROOT_NAME, SCHEMA_EXTENSION

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "dirschema"
UNIX_APP_DIR_NAME = ".dirschema"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/dirschema
    - Linux/Mac: ~/.dirschema

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def resolve_input_path(raw_path: str) -> str:
    """
    Resolve a raw path argument into its canonical absolute form.

    Expands the user home shortcut (~/) and resolves symbolic links. The
    rest of the path is taken literally, so names with surrounding spaces or
    a literal "$" survive. Paths that do not exist yet are still returned in
    absolute form.

    Args:
        raw_path: Path as received from the command line or a dialog.

    Returns:
        str: Canonical absolute path.
    """
    return os.path.realpath(os.path.abspath(os.path.expanduser(raw_path)))


def resolve_schema_path(path: str, extension: str = SCHEMA_EXTENSION) -> str:
    """
    Map a forward-mode input path onto its schema document.

    The path is kept as-is when it already carries the schema extension,
    otherwise the extension is appended.
    """
    if path.endswith(extension):
        return path
    return path + extension


def schema_path_for_directory(dir_path: str, extension: str = SCHEMA_EXTENSION) -> str:
    """Destination of the schema generated from an existing directory."""
    return dir_path.rstrip("/\\") + extension


def root_name_for_schema(
        schema_path: str,
        fallback: Optional[str] = None,
        extension: str = SCHEMA_EXTENSION,
) -> str:
    """
    Derive the synthetic root directory name from a schema document path.

    Uses the base name without its extension, e.g. 'project.dir' -> 'project'.
    """
    base = os.path.basename(schema_path)
    if base.endswith(extension):
        stem = base[: -len(extension)]
    else:
        stem, _ = os.path.splitext(base)
    return stem or fallback or FALLBACK_ROOT_NAME


def get_default_browse_dir() -> str:
    """Initial directory offered by the interactive file picker."""
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.getcwd()

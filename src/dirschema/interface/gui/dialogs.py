from __future__ import annotations

"""
Native Dialog Collaborators.

The file picker that supplies input paths when none are given on the command
line, and the error alert used to report a failed path. Both create a hidden
CustomTkinter root for the lifetime of the dialog only.
"""

import logging
import sys
import tkinter
import tkinter.messagebox as mb
from typing import List, Optional

import customtkinter as ctk

from dirschema.domain.constants import MODE_SCHEMA, SCHEMA_EXTENSION
from dirschema.domain.run_models import PathResult
from dirschema.infra.fs import get_default_browse_dir
from dirschema.utils.i18n import i18n

logger = logging.getLogger(__name__)


def pick_schema_paths(initial_dir: Optional[str] = None, extension: str = SCHEMA_EXTENSION) -> List[str]:
    """
    Ask the user for one or more schema documents.

    Args:
        initial_dir: Directory the dialog opens in (executable dir or cwd).
        extension: Schema extension offered as the primary file type filter.

    Returns:
        List[str]: Selected paths; empty when the dialog is cancelled.
    """
    root = ctk.CTk()
    root.withdraw()
    try:
        selected = ctk.filedialog.askopenfilenames(
            parent=root,
            title=i18n.t("gui.picker_title"),
            initialdir=initial_dir or get_default_browse_dir(),
            filetypes=[(i18n.t("gui.picker_filetype"), f"*{extension}"), ("All files", "*")],
        )
    finally:
        root.destroy()

    paths = [str(p) for p in (selected or ())]
    logger.debug(f"UI: File picker returned {len(paths)} path(s)")
    return paths


def show_error(title: str, message: str) -> None:
    """Display a modal error alert on a temporary hidden root."""
    root = ctk.CTk()
    root.withdraw()
    try:
        mb.showerror(title, message, parent=root)
    finally:
        root.destroy()


def report_error_dialog(result: PathResult) -> None:
    """
    Error reporter for dialog mode: one alert per failed path.

    Falls back to stderr when no display is available.
    """
    if result.mode == MODE_SCHEMA:
        title = i18n.t("gui.errors.schema_title")
    else:
        title = i18n.t("gui.errors.materialize_title")
    try:
        show_error(title, result.error)
    except tkinter.TclError as e:
        logger.warning(f"UI: Error dialog unavailable ({e})")
        print(f"ERROR: {result.error}", file=sys.stderr)

from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Installs the global exception hook and delegates to the CLI controller,
which also drives the file-picker fallback when no paths are given.
"""

import logging
import os
import sys
import traceback
from typing import Any

# Allow running this file directly from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, "frozen", False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Trap exceptions that escaped every per-path boundary.

    Logs the full stack trace as critical and reports it on stderr. When the
    process was started without arguments (dialog launch) a native alert is
    shown as well, since there may be no visible console.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("dirschema.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (DIRSCHEMA)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)

    if len(sys.argv) <= 1:
        try:
            from dirschema.interface.gui.dialogs import show_error
            show_error("dirschema - Fatal Error", f"A critical error occurred:\n\n{error_msg}")
        except Exception as e:
            logger.error(f"Fatal error alert failed: {e}")


sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Run the application.

    Returns:
        int: Process exit code.
    """
    try:
        from dirschema.interface.cli.app import main as cli_main
        return cli_main()
    except Exception as e:
        global_exception_handler(type(e), e, sys.exc_info()[2])
        return 1


if __name__ == "__main__":
    sys.exit(main())

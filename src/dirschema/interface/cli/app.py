from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates one invocation: argument parsing, configuration merge and
validation, logging bootstrap, path collection (arguments or file picker),
sequential engine execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from dirschema.core.pipeline.engine import ErrorReporter, process_paths
from dirschema.core.pipeline.validator import validate_config
from dirschema.domain.config import get_default_config, load_config
from dirschema.domain.constants import INVOCATION_DIALOG, MODE_SCHEMA
from dirschema.domain.run_models import PathResult
from dirschema.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from dirschema.interface.cli import args as cli_args
from dirschema.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 when every path succeeded, 1 if any failed, 130 on interrupt.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    log_file = get_default_log_path() if conf["log_to_file"] else None
    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=log_file,
    ))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    dialog_mode = conf["invocation_mode"] == INVOCATION_DIALOG
    paths = _collect_paths(args.paths, dialog_mode, conf["schema_extension"])
    if not paths:
        logger.debug(i18n.t("cli.status.nothing_selected"))
        return 0

    reporter = _dialog_reporter() if dialog_mode else _report_error_console
    try:
        results = process_paths(paths, conf, on_error=reporter)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

    if args.json_output:
        print(json.dumps([asdict(r) for r in results], ensure_ascii=False, indent=2))
    else:
        _print_human_summary(results)

    return 0 if all(r.ok for r in results) else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides for known keys into the base config."""
    out = dict(base)
    for k in get_default_config():
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# PATH COLLECTION AND ERROR REPORTING
# -----------------------------------------------------------------------------

def _collect_paths(paths: List[str], dialog_mode: bool, extension: str) -> List[str]:
    """Use the given paths, or fall back to the file picker in dialog mode."""
    if paths:
        return list(paths)
    if not dialog_mode:
        return []

    from dirschema.interface.gui.dialogs import pick_schema_paths

    return pick_schema_paths(extension=extension)


def _dialog_reporter() -> ErrorReporter:
    from dirschema.interface.gui.dialogs import report_error_dialog

    return report_error_dialog


def _report_error_console(result: PathResult) -> None:
    print(f"ERROR: {result.error}", file=sys.stderr)

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(results: List[PathResult]) -> None:
    """Print one status line per successful path, plus any tree preview."""
    for result in results:
        if not result.ok:
            continue

        if result.mode == MODE_SCHEMA:
            key = "cli.status.schema_dry_run" if result.dry_run else "cli.status.schema_written"
            print(i18n.t(key, count=result.lines_written, path=result.target_path))
        else:
            key = "cli.status.tree_dry_run" if result.dry_run else "cli.status.tree_created"
            print(i18n.t(key, count=result.nodes_created, path=result.target_path))

        if result.dry_run and result.tree_preview:
            print("\n".join(result.tree_preview))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())

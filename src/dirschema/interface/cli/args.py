from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed argparse
namespace into configuration overrides understood by the domain layer.
"""

import argparse
from typing import Any, Dict

from dirschema.domain.constants import INVOCATION_ARGS, INVOCATION_DIALOG
from dirschema.domain.tree_models import DepthJumpPolicy
from dirschema.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirschema CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirschema",
        description=i18n.t("app.description"),
    )

    p.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help=i18n.t("cli.args.paths"),
    )

    # --- Invocation Mode ---
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--dialog",
        dest="invocation_mode",
        action="store_const",
        const=INVOCATION_DIALOG,
        help=i18n.t("cli.args.dialog"),
    )
    mode.add_argument(
        "--no-dialog",
        dest="invocation_mode",
        action="store_const",
        const=INVOCATION_ARGS,
        help=i18n.t("cli.args.no_dialog"),
    )

    # --- Parsing Policy ---
    p.add_argument(
        "--depth-jump",
        dest="depth_jump_policy",
        choices=[policy.value for policy in DepthJumpPolicy],
        default=None,
        help=i18n.t("cli.args.depth_jump"),
    )

    # --- Runtime Safety ---
    p.add_argument("--dry-run", action="store_true", help=i18n.t("cli.args.dry_run"))
    p.add_argument("--print-tree", action="store_true", help=i18n.t("cli.args.print_tree"))

    # --- Configuration and Diagnostics ---
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration override dictionary.

    Flags that were not given map to None so the merge keeps stored values.
    """
    overrides: Dict[str, Any] = {
        "invocation_mode": args.invocation_mode,
        "depth_jump_policy": args.depth_jump_policy,
    }
    if args.dry_run:
        overrides["dry_run"] = True
    if args.print_tree:
        overrides["print_tree"] = True
    return overrides

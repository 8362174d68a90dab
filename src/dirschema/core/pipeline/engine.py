from __future__ import annotations

"""
Path Processing Engine.

Routes every input path to the reverse (directory -> schema) or forward
(schema -> directory) transform and acts as the error boundary for that
path: failures are logged and converted into a PathResult, never propagated
to the next path. Paths are processed strictly one after another.
"""

import logging
import os
from typing import Any, Callable, Dict, Iterable, List, Optional

from dirschema.core.schema.builder import build_tree
from dirschema.core.schema.normalizer import normalize_indentation
from dirschema.core.schema.renderer import render_tree_lines
from dirschema.core.schema.scanner import read_schema
from dirschema.core.services.materializer import materialize
from dirschema.core.services.serializer import create_schema, serialize_directory
from dirschema.domain.config import get_default_config
from dirschema.domain.constants import MODE_MATERIALIZE, MODE_SCHEMA
from dirschema.domain.errors import AlreadyExistsError, SchemaError, SchemaIOError
from dirschema.domain.run_models import (
    PathResult,
    create_error_result,
    create_success_result,
)
from dirschema.domain.tree_models import count_nodes
from dirschema.infra.fs import (
    resolve_input_path,
    resolve_schema_path,
    root_name_for_schema,
    schema_path_for_directory,
)

logger = logging.getLogger(__name__)

ErrorReporter = Callable[[PathResult], None]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def process_paths(
        raw_paths: Iterable[str],
        config: Optional[Dict[str, Any]] = None,
        on_error: Optional[ErrorReporter] = None,
) -> List[PathResult]:
    """
    Process each input path to completion before starting the next one.

    Args:
        raw_paths: Paths as supplied by the CLI or the file picker.
        config: Validated runtime configuration (defaults when omitted).
        on_error: Callback invoked with each failed result, in order. A
                  failing callback is logged and the run continues.

    Returns:
        List[PathResult]: One result per input path.
    """
    cfg = _effective_config(config)
    results: List[PathResult] = []

    for raw_path in raw_paths:
        result = process_path(raw_path, cfg)
        results.append(result)
        if not result.ok and on_error is not None:
            _notify(on_error, result)

    ok_count = sum(1 for r in results if r.ok)
    logger.debug(f"Processed {len(results)} path(s): {ok_count} ok, {len(results) - ok_count} failed")
    return results


def process_path(raw_path: str, config: Optional[Dict[str, Any]] = None) -> PathResult:
    """
    Process a single input path inside its own error boundary.

    An existing directory produces ``<dir><extension>``; anything else is
    treated as a schema document and materialized next to it.
    """
    cfg = _effective_config(config)
    path = raw_path
    mode = MODE_MATERIALIZE

    try:
        path = resolve_input_path(raw_path)
        if os.path.isdir(path):
            mode = MODE_SCHEMA
            return _run_schema(path, cfg)
        return _run_materialize(path, cfg)
    except SchemaError as e:
        logger.error(f"{e.describe()} ({path})")
        return create_error_result(path, mode, e.describe(), e.kind, getattr(e, "path", ""))
    except OSError as e:
        err = SchemaIOError(getattr(e, "filename", None) or path, e)
        logger.error(f"{err.describe()} ({path})")
        return create_error_result(path, mode, err.describe(), err.kind)
    except ValueError as e:
        # Includes UnicodeError from names the filesystem cannot represent
        err = SchemaIOError(path, message=f"{type(e).__name__}: {e}:")
        logger.error(f"{err.describe()} ({path})")
        return create_error_result(path, mode, err.describe(), err.kind)

# -----------------------------------------------------------------------------
# MODE HANDLERS
# -----------------------------------------------------------------------------

def _run_schema(dir_path: str, cfg: Dict[str, Any]) -> PathResult:
    """Reverse direction: scan an existing directory into a schema document."""
    extension = cfg["schema_extension"]
    logger.info(f"Generating schema for directory: {dir_path}")

    if cfg.get("dry_run"):
        target = schema_path_for_directory(dir_path, extension)
        if os.path.lexists(target):
            raise AlreadyExistsError(target)
        lines = serialize_directory(dir_path, cfg["indent_width"])
        return create_success_result(
            dir_path, MODE_SCHEMA, target, lines_written=len(lines), dry_run=True,
            tree_preview=lines if cfg.get("print_tree") else None,
        )

    target, count = create_schema(dir_path, extension, cfg["indent_width"])
    return create_success_result(dir_path, MODE_SCHEMA, target, lines_written=count)


def _run_materialize(path: str, cfg: Dict[str, Any]) -> PathResult:
    """Forward direction: read, build and materialize a schema document."""
    extension = cfg["schema_extension"]
    schema_path = resolve_schema_path(path, extension)
    logger.info(f"Expanding schema document: {schema_path}")

    lines = normalize_indentation(read_schema(schema_path))
    root = build_tree(lines, root_name_for_schema(schema_path, extension=extension), cfg["depth_jump_policy"])

    parent_dir = os.path.dirname(schema_path)
    target = os.path.join(parent_dir, root.name)
    preview = render_tree_lines(root, indent_width=cfg["indent_width"]) if cfg.get("print_tree") else None
    if preview:
        logger.info("Tree Preview:\n" + "\n".join(preview))

    if cfg.get("dry_run"):
        if os.path.lexists(target):
            raise AlreadyExistsError(target)
        return create_success_result(
            schema_path, MODE_MATERIALIZE, target,
            nodes_created=count_nodes(root), dry_run=True, tree_preview=preview,
        )

    created = materialize(root, parent_dir)
    logger.info(f"{created} entries created under {target}")
    return create_success_result(
        schema_path, MODE_MATERIALIZE, target, nodes_created=created, tree_preview=preview,
    )


def _notify(on_error: ErrorReporter, result: PathResult) -> None:
    """Hand a failed result to the reporter without letting it stop the run."""
    try:
        on_error(result)
    except Exception as e:
        logger.error(f"Error reporter failed for {result.input_path}: {type(e).__name__}: {e}")


def _effective_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Overlay a (possibly partial) configuration on the domain defaults."""
    cfg = get_default_config()
    cfg.update(config or {})
    return cfg

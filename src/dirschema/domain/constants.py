from __future__ import annotations

"""
Domain Constants.

Centralizes the schema document format markers, invocation modes and
application versioning shared by the parsing core and the interfaces.
"""

from typing import Tuple

APP_NAME = "dirschema"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# SCHEMA DOCUMENT FORMAT
# -----------------------------------------------------------------------------

SCHEMA_EXTENSION = ".dir"
DIRECTORY_MARKER = "/"
COMMENT_MARKER = "#"
SCHEMA_INDENT_WIDTH = 4

# Synthetic root name used when a schema document has no usable stem
FALLBACK_ROOT_NAME = "output"

# -----------------------------------------------------------------------------
# RUNTIME MODES
# -----------------------------------------------------------------------------

INVOCATION_DIALOG = "dialog"
INVOCATION_ARGS = "args"
INVOCATION_MODES: Tuple[str, ...] = (INVOCATION_DIALOG, INVOCATION_ARGS)

MODE_MATERIALIZE = "materialize"
MODE_SCHEMA = "schema"

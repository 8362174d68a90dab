from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (stored JSON, CLI) and the
engine. Coerces types, rejects unknown enumerations and fills missing keys
with domain defaults.
"""

import logging
from typing import Any, Dict, List, Sequence, Tuple

from dirschema.domain.config import get_default_config
from dirschema.domain.constants import INVOCATION_MODES
from dirschema.domain.tree_models import DepthJumpPolicy

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in ("dry_run", "print_tree", "log_to_file"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["invocation_mode"] = _as_choice(
        merged.get("invocation_mode"), INVOCATION_MODES,
        defaults["invocation_mode"], "invocation_mode", warnings, strict,
    )
    merged["depth_jump_policy"] = _as_choice(
        merged.get("depth_jump_policy"), [p.value for p in DepthJumpPolicy],
        defaults["depth_jump_policy"], "depth_jump_policy", warnings, strict,
    )
    merged["indent_width"] = _as_positive_int(
        merged.get("indent_width"), defaults["indent_width"], "indent_width", warnings, strict
    )
    merged["schema_extension"] = _normalize_extension(
        merged.get("schema_extension"), defaults["schema_extension"], warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: Any,
        choices: Sequence[str],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Accept a case-insensitive member of a fixed set of string values."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()

    msg = f"Invalid field '{field}': {value!r} is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Validate strictly positive integers (bools rejected)."""
    if value is None:
        return fallback
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    if not strict and isinstance(value, str) and value.strip().isdigit() and int(value) > 0:
        warnings.append(f"Field '{field}' converted from '{value}' to int.")
        return int(value)

    msg = f"Invalid field '{field}': expected positive int, received {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_extension(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Ensure the schema extension is a non-empty dotted suffix."""
    if value is None:
        return fallback
    if not isinstance(value, str) or not value.strip().lstrip("."):
        msg = f"Invalid field 'schema_extension': {value!r}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    e = value.strip()
    if not e.startswith("."):
        if strict:
            raise ValueError(f"Invalid extension '{value}': must start with '.'.")
        warnings.append(f"Extension '{value}' corrected to '.{e}'.")
        e = "." + e
    return e

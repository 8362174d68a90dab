from __future__ import annotations

"""
Indentation Normalizer.

Maps the distinct raw indentation widths of a whole document onto dense
canonical depths (0, 1, 2, ...). The mapping is global: a given raw width
always yields the same depth, independently of the line's actual parent.
Two branches that use different widths for the same logical level therefore
end up at different depths.
"""

from dataclasses import replace
from typing import Dict, List, Sequence

from dirschema.domain.tree_models import RawLine


def indent_levels(lines: Sequence[RawLine]) -> Dict[int, int]:
    """
    Build the raw-width -> canonical-depth rank table for a document.

    Example:
        widths {0, 4, 8} -> {0: 0, 4: 1, 8: 2}
    """
    return {width: rank for rank, width in enumerate(sorted({ln.indent for ln in lines}))}


def normalize_indentation(lines: Sequence[RawLine]) -> List[RawLine]:
    """
    Rewrite every line's indent to its canonical depth.

    Idempotent on sequences that already use contiguous depths starting at 0.

    Args:
        lines: Scanner output with raw indentation widths.

    Returns:
        List[RawLine]: New records whose ``indent`` is the canonical depth.
    """
    ranks = indent_levels(lines)
    return [replace(ln, indent=ranks[ln.indent]) for ln in lines]

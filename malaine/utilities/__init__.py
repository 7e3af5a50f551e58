"""
Shared utilities for the pattern definition core.

Deterministic repeat arithmetic used by the stitch repeat fitter and by
callers that want to preview how a stitch pattern sits in a piece.
"""

from .repeats import (
    available_for_repeats,
    count_full_repeats,
    find_full_repeat_counts,
    minimum_stitches_for_one_repeat,
    select_full_repeat_count,
)

__all__ = [
    "available_for_repeats",
    "count_full_repeats",
    "minimum_stitches_for_one_repeat",
    "find_full_repeat_counts",
    "select_full_repeat_count",
]

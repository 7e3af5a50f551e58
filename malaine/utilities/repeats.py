"""
Pattern repeat arithmetic: how many horizontal repeats fit in a stitch width.

All functions take whole stitch counts.  The pattern area of a piece is its
total width minus the edge stitches worked on each side; repeats are only
ever placed inside the pattern area.
"""

from __future__ import annotations

import math


def available_for_repeats(total_stitches: int, edge_stitches_per_side: int) -> int:
    """Stitches left for the pattern area once both edges are set aside."""
    return total_stitches - 2 * edge_stitches_per_side


def count_full_repeats(available_stitches: int, repeat_width: int) -> int:
    """
    Number of whole repeats that fit in *available_stitches*.

    Raises:
        ValueError: If repeat_width < 1.
    """
    if repeat_width < 1:
        raise ValueError(f"repeat_width must be >= 1, got {repeat_width}")
    if available_stitches <= 0:
        return 0
    return available_stitches // repeat_width


def minimum_stitches_for_one_repeat(repeat_width: int, edge_stitches_per_side: int) -> int:
    """Smallest total width holding one repeat plus the requested edges."""
    return repeat_width + 2 * edge_stitches_per_side


def find_full_repeat_counts(
    target_stitches: int,
    repeat_width: int,
    edge_stitches_per_side: int,
    search_radius: int,
) -> list[int]:
    """
    Find every total stitch count within ``target ± search_radius`` whose
    pattern area is an exact, non-zero multiple of the repeat width.

    Args:
        target_stitches: Desired total width in stitches.
        repeat_width: Stitches per horizontal repeat.
        edge_stitches_per_side: Edge stitches kept outside the pattern area.
        search_radius: Half-width of the search band in stitches.

    Returns:
        Sorted list of matching totals.  Empty if none found.
    """
    if repeat_width < 1:
        raise ValueError(f"repeat_width must be >= 1, got {repeat_width}")
    if search_radius < 0:
        raise ValueError(f"search_radius must be >= 0, got {search_radius}")
    if edge_stitches_per_side < 0:
        raise ValueError(
            f"edge_stitches_per_side must be >= 0, got {edge_stitches_per_side}"
        )

    edges = 2 * edge_stitches_per_side
    low = target_stitches - search_radius
    high = target_stitches + search_radius

    # Totals of the form edges + k * repeat_width with k >= 1
    first_k = max(1, math.ceil((low - edges) / repeat_width))

    result: list[int] = []
    count = edges + first_k * repeat_width
    while count <= high:
        result.append(count)
        count += repeat_width

    return result


def select_full_repeat_count(
    target_stitches: int,
    repeat_width: int,
    edge_stitches_per_side: int,
) -> int:
    """
    Select the total stitch count closest to *target_stitches* at which the
    repeats fill the pattern area exactly.

    On a tie prefers the larger count, favouring slightly more width over
    slightly less.  Never returns less than one full repeat plus edges.
    """
    valid = find_full_repeat_counts(
        target_stitches, repeat_width, edge_stitches_per_side, search_radius=repeat_width
    )
    if not valid:
        return minimum_stitches_for_one_repeat(repeat_width, edge_stitches_per_side)

    return min(valid, key=lambda c: (abs(c - target_stitches), -c))

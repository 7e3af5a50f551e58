"""
Stitch pattern integration schemas: request, candidate options, analysis.

Key types:
  StitchPatternRef    — catalog reference to a stitch pattern (repeat width)
  IntegrationRequest  — target width, repeat width, requested edge stitches
  IntegrationOption   — one read-only suggestion for partitioning the width
  IntegrationAnalysis — full result of fitting repeats into a target width
  IntegrationChoice   — the option a user committed for a stitch pattern

Every option keeps the garment's total stitch count unchanged; only the
internal partition between edges, plain panel, and repeats differs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IntegrationKind(str, Enum):
    """How an option absorbs the stitches left over after full repeats."""

    ABSORB_INTO_EDGES = "absorb_into_edges"
    PLAIN_PANEL = "plain_panel"
    DROP_REPEAT = "drop_repeat"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class StitchPatternRef:
    """
    Reference to a stitch pattern from the catalog.

    Attributes:
        id: Catalog identifier.
        repeat_width: Stitches in one horizontal repeat.  Must be >= 1.
        name: Display name used in option descriptions.
        row_repeat_height: Rows in one vertical repeat, if known.
    """

    id: str
    repeat_width: int
    name: str = ""
    row_repeat_height: int | None = None

    def __post_init__(self) -> None:
        if self.repeat_width < 1:
            raise ValueError(f"repeat_width must be >= 1, got {self.repeat_width}")
        if self.row_repeat_height is not None and self.row_repeat_height < 1:
            raise ValueError(f"row_repeat_height must be >= 1, got {self.row_repeat_height}")


@dataclass(frozen=True)
class IntegrationRequest:
    """
    Input to the repeat fitter.

    Deliberately unvalidated at construction: the fitter rejects nonsensical
    values with InvalidRequest so callers get a single error path.
    """

    target_stitch_count: int
    repeat_width: int
    desired_edge_stitches_per_side: int


@dataclass(frozen=True)
class IntegrationOption:
    """
    One candidate partition of the target width.

    Attributes:
        kind: Which strategy produced this option.
        description: Short human-readable sentence naming the counts.
        total_stitches: Always the request's target stitch count.
        edge_stitches_each_side: Edge stitches on the narrower side.
        repeats: Full pattern repeats worked across the row.
        panel_stitches: Width of the plain (non-repeating) centre panel.
        extra_stitch_side: Side that carries one extra edge stitch, if any.
    """

    kind: IntegrationKind
    description: str
    total_stitches: int
    edge_stitches_each_side: int
    repeats: int
    panel_stitches: int = 0
    extra_stitch_side: Side | None = None

    @property
    def edge_stitches_total(self) -> int:
        return 2 * self.edge_stitches_each_side + (1 if self.extra_stitch_side else 0)


@dataclass(frozen=True)
class IntegrationAnalysis:
    """
    Result of fitting full repeats into a target stitch count.

    Invariant: stitches_used_by_repeats + remaining_stitches + 2 * edge_stitches
    equals the requested target stitch count.

    Attributes:
        available_for_repeats: Target minus the requested edges on both sides.
        full_repeats: Whole repeats that fit in the available width.
        stitches_used_by_repeats: full_repeats × repeat width.
        remaining_stitches: Leftover stitches, always < repeat width.
        edge_stitches: Requested edge stitches per side.
        options: Suggestions in fixed order (edges, panel, dropped repeat).
            Empty when no repeat fits.
        suggested_adjusted_stitch_count: Nearest total at which the repeats
            fill the pattern area exactly.  Informational only.
        notice: Message shown instead of options when no repeat fits.
    """

    available_for_repeats: int
    full_repeats: int
    stitches_used_by_repeats: int
    remaining_stitches: int
    edge_stitches: int
    options: tuple[IntegrationOption, ...]
    suggested_adjusted_stitch_count: int
    notice: str | None = None

    @property
    def fits(self) -> bool:
        """True when at least one full repeat fits."""
        return self.full_repeats > 0

    @property
    def fits_exactly(self) -> bool:
        return self.fits and self.remaining_stitches == 0


@dataclass(frozen=True)
class IntegrationChoice:
    """An option the user applied to a stitch pattern."""

    option: IntegrationOption
    stitch_pattern_id: str
    stitch_pattern_name: str
    full_repeats: int

    @property
    def final_stitch_count(self) -> int:
        return self.option.total_stitches

"""
Stitch repeat fitter: fits whole repeats of a stitch pattern into a piece.

analyze_integration() takes a target stitch count, the pattern's repeat width
and the edge stitches wanted on each side, works out how many full repeats
fit, and proposes ways to absorb the leftover stitches.

Options are always produced in the same order:

  A. absorb the remainder into the edges (odd stitch goes to the right)
  B. keep the edges and work the remainder as one centred plain panel
  C. drop one repeat and widen the edges, only when more than one repeat
     fits and this gives wider edges than A.  With a single repeat, dropping
     it would leave no pattern at all, so C needs at least two.

The total width never changes: every option's total_stitches equals the
requested target.  When not even one repeat fits, no options are produced and
the analysis carries a notice instead.

The fitter is pure: no I/O, no logging, no state.
"""

from __future__ import annotations

from malaine.schemas.integration import (
    IntegrationAnalysis,
    IntegrationKind,
    IntegrationOption,
    IntegrationRequest,
    Side,
)
from malaine.utilities.repeats import (
    available_for_repeats,
    count_full_repeats,
    minimum_stitches_for_one_repeat,
    select_full_repeat_count,
)

# The odd leftover stitch, when edges cannot be split evenly, sits here.
EXTRA_STITCH_SIDE: Side = Side.RIGHT


class InvalidRequest(ValueError):
    """Raised when an integration request is malformed or leaves no room for repeats."""


def _label(pattern_name: str) -> str:
    return f'"{pattern_name}"' if pattern_name else "the pattern"


def _plural(count: int, singular: str, plural: str | None = None) -> str:
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural or singular + 's'}"


def _split_edges(base: int, spare: int) -> tuple[int, Side | None]:
    """Spread *spare* stitches over two edges of *base* stitches each."""
    return base + spare // 2, (EXTRA_STITCH_SIDE if spare % 2 else None)


def _edge_phrase(each_side: int, extra_side: Side | None) -> str:
    if extra_side is None:
        return f"{_plural(each_side, 'edge stitch', 'edge stitches')} each side"
    per_side = {Side.LEFT: each_side, Side.RIGHT: each_side}
    per_side[extra_side] += 1
    return (
        f"{per_side[Side.LEFT]} edge stitches on the left "
        f"and {per_side[Side.RIGHT]} on the right"
    )


def _validate(request: IntegrationRequest) -> int:
    if request.repeat_width <= 0:
        raise InvalidRequest(f"repeat_width must be positive, got {request.repeat_width}")
    if request.target_stitch_count <= 0:
        raise InvalidRequest(
            f"target_stitch_count must be positive, got {request.target_stitch_count}"
        )
    if request.desired_edge_stitches_per_side < 0:
        raise InvalidRequest(
            "desired_edge_stitches_per_side must be >= 0, "
            f"got {request.desired_edge_stitches_per_side}"
        )
    available = available_for_repeats(
        request.target_stitch_count, request.desired_edge_stitches_per_side
    )
    if available <= 0:
        raise InvalidRequest(
            f"{request.desired_edge_stitches_per_side} edge stitches per side leave no room "
            f"for a repeat in {request.target_stitch_count} stitches"
        )
    return available


def _absorb_into_edges(
    request: IntegrationRequest, full_repeats: int, remaining: int, name: str
) -> IntegrationOption:
    edges = request.desired_edge_stitches_per_side
    each_side, extra_side = _split_edges(edges, remaining)
    if remaining == 0:
        description = (
            f"Pattern fits exactly: {_plural(full_repeats, 'repeat')} of {_label(name)} "
            f"with {_edge_phrase(edges, None)}, no adjustment needed"
        )
    else:
        description = (
            f"Add the {_plural(remaining, 'leftover stitch', 'leftover stitches')} "
            f"to the edges: {_plural(full_repeats, 'repeat')} of {_label(name)} with "
            f"{_edge_phrase(each_side, extra_side)}"
        )
    return IntegrationOption(
        kind=IntegrationKind.ABSORB_INTO_EDGES,
        description=description,
        total_stitches=request.target_stitch_count,
        edge_stitches_each_side=each_side,
        repeats=full_repeats,
        panel_stitches=0,
        extra_stitch_side=extra_side,
    )


def _plain_panel(
    request: IntegrationRequest, full_repeats: int, remaining: int, name: str
) -> IntegrationOption:
    edges = request.desired_edge_stitches_per_side
    if remaining == 0:
        description = (
            f"Pattern fits exactly: no plain panel needed between the "
            f"{_plural(full_repeats, 'repeat')} of {_label(name)}"
        )
    else:
        description = (
            f"Work {_plural(full_repeats, 'repeat')} of {_label(name)} around a centred "
            f"{remaining}-stitch stockinette panel, keeping {_edge_phrase(edges, None)}"
        )
    return IntegrationOption(
        kind=IntegrationKind.PLAIN_PANEL,
        description=description,
        total_stitches=request.target_stitch_count,
        edge_stitches_each_side=edges,
        repeats=full_repeats,
        panel_stitches=remaining,
        extra_stitch_side=None,
    )


def _drop_repeat(
    request: IntegrationRequest,
    full_repeats: int,
    remaining: int,
    name: str,
    absorb: IntegrationOption,
) -> IntegrationOption | None:
    if full_repeats < 2:
        return None
    freed = remaining + request.repeat_width
    each_side, extra_side = _split_edges(request.desired_edge_stitches_per_side, freed)
    if each_side <= absorb.edge_stitches_each_side:
        return None
    repeats = full_repeats - 1
    return IntegrationOption(
        kind=IntegrationKind.DROP_REPEAT,
        description=(
            f"Drop to {_plural(repeats, 'repeat')} of {_label(name)} and widen the edges "
            f"to {_edge_phrase(each_side, extra_side)}"
        ),
        total_stitches=request.target_stitch_count,
        edge_stitches_each_side=each_side,
        repeats=repeats,
        panel_stitches=0,
        extra_stitch_side=extra_side,
    )


def _does_not_fit_notice(request: IntegrationRequest, name: str) -> str:
    minimum = minimum_stitches_for_one_repeat(
        request.repeat_width, request.desired_edge_stitches_per_side
    )
    return (
        f"Pattern does not fit: one repeat of {_label(name)} with "
        f"{_edge_phrase(request.desired_edge_stitches_per_side, None)} needs at least "
        f"{minimum} stitches, but only {request.target_stitch_count} are available. "
        "Consider a smaller repeat or more stitches."
    )


def analyze_integration(request: IntegrationRequest, pattern_name: str = "") -> IntegrationAnalysis:
    """
    Fit whole repeats into the request's target width and propose options.

    Parameters
    ----------
    request:
        Target stitch count, repeat width, and edge stitches per side.
    pattern_name:
        Optional display name used in option descriptions.

    Returns
    -------
    IntegrationAnalysis
        Repeat arithmetic plus options in the fixed order A, B, (C).  When no
        full repeat fits, ``options`` is empty and ``notice`` is set.

    Raises
    ------
    InvalidRequest
        If the repeat width or target is not positive, the edge count is
        negative, or the requested edges leave no room for any repeat.
    """
    available = _validate(request)
    full_repeats = count_full_repeats(available, request.repeat_width)
    used = full_repeats * request.repeat_width
    remaining = available - used
    suggested = select_full_repeat_count(
        request.target_stitch_count,
        request.repeat_width,
        request.desired_edge_stitches_per_side,
    )

    if full_repeats == 0:
        return IntegrationAnalysis(
            available_for_repeats=available,
            full_repeats=0,
            stitches_used_by_repeats=0,
            remaining_stitches=remaining,
            edge_stitches=request.desired_edge_stitches_per_side,
            options=(),
            suggested_adjusted_stitch_count=suggested,
            notice=_does_not_fit_notice(request, pattern_name),
        )

    absorb = _absorb_into_edges(request, full_repeats, remaining, pattern_name)
    options = [absorb, _plain_panel(request, full_repeats, remaining, pattern_name)]
    dropped = _drop_repeat(request, full_repeats, remaining, pattern_name, absorb)
    if dropped is not None:
        options.append(dropped)

    return IntegrationAnalysis(
        available_for_repeats=available,
        full_repeats=full_repeats,
        stitches_used_by_repeats=used,
        remaining_stitches=remaining,
        edge_stitches=request.desired_edge_stitches_per_side,
        options=tuple(options),
        suggested_adjusted_stitch_count=suggested,
        notice=None,
    )

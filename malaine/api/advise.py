"""
Public stitch pattern integration advisor.

advise_integration() looks a stitch pattern up in a StitchPatternCatalog and
fits it into a target stitch count.  It returns an AdvisorReport whether or
not the lookup and the fit succeed, so callers can show the message instead
of handling exceptions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from malaine.integration.fitter import InvalidRequest, analyze_integration
from malaine.schemas.integration import (
    IntegrationAnalysis,
    IntegrationRequest,
    StitchPatternRef,
)
from malaine.workspace.collaborators import StitchPatternCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdvisorReport:
    """Outcome of an integration analysis request.

    Attributes:
        analysis: The IntegrationAnalysis, or None if the request failed.
        stitch_pattern: The pattern that was looked up, or None if not found.
        error: Message describing why the request failed, else None.
    """

    analysis: IntegrationAnalysis | None
    stitch_pattern: StitchPatternRef | None
    error: str | None

    @property
    def ok(self) -> bool:
        return self.error is None


def advise_integration(
    patterns: StitchPatternCatalog,
    stitch_pattern_id: str,
    target_stitch_count: int,
    desired_edge_stitches_per_side: int,
) -> AdvisorReport:
    """
    Look up a stitch pattern and analyse how it fits a piece.

    Parameters
    ----------
    patterns:
        Catalog the stitch pattern is fetched from.
    stitch_pattern_id:
        Catalog id of the stitch pattern.
    target_stitch_count:
        Total stitches across the piece.
    desired_edge_stitches_per_side:
        Edge stitches to keep outside the pattern on each side.

    Returns
    -------
    AdvisorReport
        Always returned.  A missing pattern or an invalid request is reported
        through ``error``; a pattern that does not fit is a successful
        analysis whose ``notice`` is set.
    """
    try:
        pattern = patterns.get(stitch_pattern_id)
    except KeyError:
        logger.warning("stitch pattern %r not found", stitch_pattern_id)
        return AdvisorReport(
            analysis=None,
            stitch_pattern=None,
            error=f"Stitch pattern not found: {stitch_pattern_id!r}",
        )

    request = IntegrationRequest(
        target_stitch_count=target_stitch_count,
        repeat_width=pattern.repeat_width,
        desired_edge_stitches_per_side=desired_edge_stitches_per_side,
    )
    try:
        analysis = analyze_integration(request, pattern_name=pattern.name)
    except InvalidRequest as exc:
        logger.warning("rejected integration request for %r: %s", stitch_pattern_id, exc)
        return AdvisorReport(analysis=None, stitch_pattern=pattern, error=str(exc))

    return AdvisorReport(analysis=analysis, stitch_pattern=pattern, error=None)

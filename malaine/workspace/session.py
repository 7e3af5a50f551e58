"""
DefinitionSession — the editing state of one pattern being defined.

A session owns the current SessionSnapshot, the steps available for the
selected garment type, and the step the user is on.  It is created for a new
pattern and replaced (or reset) when the user starts over; callers hold it
explicitly and pass it to whatever needs it.

Every mutation replaces the snapshot with a new immutable one and recomputes
the CompletionSummary, so the summary can never go stale.  The pure core
(fitter, evaluator, default applier) is called from here; this is the layer
that logs.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any

from malaine.catalog.registry import GarmentCatalog, get_catalog
from malaine.defaults.applier import apply_default_parameters
from malaine.integration.fitter import analyze_integration
from malaine.readiness.evaluator import evaluate_section_readiness
from malaine.readiness.summaries import describe_step
from malaine.schemas.completion import CompletionSummary
from malaine.schemas.integration import (
    IntegrationAnalysis,
    IntegrationChoice,
    IntegrationOption,
    IntegrationRequest,
    StitchPatternRef,
)
from malaine.schemas.section import PatternSectionKey
from malaine.schemas.snapshot import (
    GarmentTypeSelection,
    SectionRecord,
    SessionSnapshot,
    StitchPatternSection,
)
from malaine.workspace.collaborators import PatternCalculator

logger = logging.getLogger(__name__)


class NotReadyForCalculation(Exception):
    """Raised when a definition is submitted before it meets the readiness threshold.

    Attributes:
        summary: The CompletionSummary at the time of submission.
    """

    def __init__(self, summary: CompletionSummary) -> None:
        super().__init__(
            f"definition is {summary.completion_percentage}% complete; "
            "not ready for calculation"
        )
        self.summary = summary


@dataclass(frozen=True)
class StepStatus:
    """One row of the step overview."""

    step: PatternSectionKey
    completed: bool
    summary_text: str | None


class DefinitionSession:
    """
    Mutable owner of one pattern definition.

    Parameters
    ----------
    catalog:
        Garment catalog supplying the available steps.  Defaults to the
        module singleton.
    snapshot:
        Starting snapshot, e.g. when resuming a saved definition.
    """

    def __init__(
        self,
        catalog: GarmentCatalog | None = None,
        snapshot: SessionSnapshot | None = None,
    ) -> None:
        self._catalog = catalog or get_catalog()
        self.session_id = uuid.uuid4().hex
        self._snapshot = snapshot or SessionSnapshot()
        self._available_steps = self._catalog.available_steps(self._snapshot.garment_type_key)
        self._current_step = self._available_steps[0]
        self._summary = evaluate_section_readiness(self._snapshot, self._available_steps)
        logger.info(
            "started definition session %s (garment type: %s, %d%% complete)",
            self.session_id,
            self._snapshot.garment_type_key,
            self._summary.completion_percentage,
        )

    # ── State ──────────────────────────────────────────────────────────────────

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def available_steps(self) -> tuple[PatternSectionKey, ...]:
        return self._available_steps

    @property
    def current_step(self) -> PatternSectionKey:
        return self._current_step

    @property
    def summary(self) -> CompletionSummary:
        return self._summary

    @property
    def can_proceed(self) -> bool:
        """True when the current step's section counts as complete."""
        return self._summary.is_completed(self._current_step)

    def _replace_snapshot(self, snapshot: SessionSnapshot) -> None:
        garment_type_changed = snapshot.garment_type_key != self._snapshot.garment_type_key
        self._snapshot = snapshot
        if garment_type_changed:
            self._available_steps = self._catalog.available_steps(snapshot.garment_type_key)
            if self._current_step not in self._available_steps:
                self._current_step = self._available_steps[0]
        self._summary = evaluate_section_readiness(snapshot, self._available_steps)
        logger.debug(
            "session %s: %d/%d steps complete (%d%%)",
            self.session_id,
            len(self._summary.completed_steps),
            len(self._available_steps),
            self._summary.completion_percentage,
        )

    # ── Editing ────────────────────────────────────────────────────────────────

    def select_garment_type(self, selection: GarmentTypeSelection) -> None:
        """
        Set the garment type and switch to its definition steps.

        Raises
        ------
        UnknownGarmentType
            If the selection's type key is not in the catalog.
        """
        self._catalog.get(selection.type_key)
        logger.info("session %s: garment type set to %s", self.session_id, selection.type_key)
        self._replace_snapshot(self._snapshot.with_sections(garment_type=selection))

    def update_sections(self, **sections: SectionRecord | None) -> None:
        """
        Replace one or more sections, e.g. ``update_sections(gauge=GaugeSection(...))``.

        A garment type change is validated against the catalog.
        """
        selection = sections.get("garment_type")
        if isinstance(selection, GarmentTypeSelection):
            self._catalog.get(selection.type_key)
        logger.debug("session %s: updating %s", self.session_id, ", ".join(sorted(sections)))
        self._replace_snapshot(self._snapshot.with_sections(**sections))

    def reset(self) -> None:
        """Discard everything and start a new, empty definition."""
        previous = self.session_id
        self.session_id = uuid.uuid4().hex
        self._snapshot = SessionSnapshot()
        self._available_steps = self._catalog.available_steps(None)
        self._current_step = self._available_steps[0]
        self._summary = evaluate_section_readiness(self._snapshot, self._available_steps)
        logger.info("session %s reset as %s", previous, self.session_id)

    # ── Navigation ─────────────────────────────────────────────────────────────

    def navigate_to(self, step: PatternSectionKey) -> None:
        """
        Raises
        ------
        ValueError
            If *step* is not available for the current garment type.
        """
        step = PatternSectionKey(step)
        if step not in self._available_steps:
            raise ValueError(
                f"step {step.value!r} is not available for garment type "
                f"{self._snapshot.garment_type_key!r}"
            )
        logger.debug("session %s: %s -> %s", self.session_id, self._current_step.value, step.value)
        self._current_step = step

    def next_step(self) -> PatternSectionKey:
        """Move forward one step (stays on the last step) and return the current step."""
        index = self._available_steps.index(self._current_step)
        if index + 1 < len(self._available_steps):
            self.navigate_to(self._available_steps[index + 1])
        return self._current_step

    def previous_step(self) -> PatternSectionKey:
        """Move back one step (stays on the first step) and return the current step."""
        index = self._available_steps.index(self._current_step)
        if index > 0:
            self.navigate_to(self._available_steps[index - 1])
        return self._current_step

    def step_overview(self) -> list[StepStatus]:
        return [
            StepStatus(
                step=step,
                completed=self._summary.is_completed(step),
                summary_text=describe_step(self._snapshot, step),
            )
            for step in self._available_steps
        ]

    # ── Stitch pattern integration ─────────────────────────────────────────────

    def analyze_stitch_integration(
        self,
        pattern: StitchPatternRef,
        target_stitch_count: int,
        edge_stitches_per_side: int,
    ) -> IntegrationAnalysis:
        """
        Fit *pattern* into a piece of *target_stitch_count* stitches.

        Raises
        ------
        InvalidRequest
            Propagated from the fitter.
        """
        request = IntegrationRequest(
            target_stitch_count=target_stitch_count,
            repeat_width=pattern.repeat_width,
            desired_edge_stitches_per_side=edge_stitches_per_side,
        )
        analysis = analyze_integration(request, pattern_name=pattern.name)
        logger.debug(
            "session %s: %s fits %d repeats in %d stitches (%d left over)",
            self.session_id,
            pattern.id,
            analysis.full_repeats,
            target_stitch_count,
            analysis.remaining_stitches,
        )
        return analysis

    def apply_integration(
        self,
        pattern: StitchPatternRef,
        analysis: IntegrationAnalysis,
        option: IntegrationOption,
    ) -> IntegrationChoice:
        """
        Commit *option* for *pattern* to the stitch-pattern section.

        Raises
        ------
        ValueError
            If *option* is not one of *analysis*'s options.
        """
        if option not in analysis.options:
            raise ValueError("option is not one of the analysed integration options")
        choice = IntegrationChoice(
            option=option,
            stitch_pattern_id=pattern.id,
            stitch_pattern_name=pattern.name,
            full_repeats=analysis.full_repeats,
        )
        logger.info(
            "session %s: applied %s integration of %s",
            self.session_id,
            option.kind.value,
            pattern.id,
        )
        self._replace_snapshot(
            self._snapshot.with_sections(
                stitch_pattern=StitchPatternSection(
                    stitch_pattern_id=pattern.id, integration=choice
                )
            )
        )
        return choice

    # ── Calculation ────────────────────────────────────────────────────────────

    def calculation_snapshot(self) -> SessionSnapshot:
        """The current snapshot with default sections filled in."""
        return apply_default_parameters(self._snapshot)

    def submit(self, calculator: PatternCalculator) -> Any:
        """
        Hand the resolved definition to the calculation engine.

        Raises
        ------
        NotReadyForCalculation
            If the definition is below the readiness threshold.
        """
        if not self._summary.ready_for_calculation:
            logger.warning(
                "session %s: refused submission at %d%% complete",
                self.session_id,
                self._summary.completion_percentage,
            )
            raise NotReadyForCalculation(self._summary)
        resolved = self.calculation_snapshot()
        logger.info("session %s: submitting definition for calculation", self.session_id)
        return calculator.calculate(resolved)

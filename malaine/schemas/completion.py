"""
CompletionSummary schema — derived readiness of a pattern definition.

Recomputed from the current SessionSnapshot on every change and never stored
on its own, so it cannot go stale.
"""

from __future__ import annotations

from dataclasses import dataclass

from malaine.schemas.section import PatternSectionKey


@dataclass(frozen=True)
class CompletionSummary:
    """
    Attributes:
        completed_steps: Available steps whose section counts as complete.
        completion_percentage: Completed share of available steps, 0–100.
        ready_for_calculation: True when the percentage meets the threshold.
    """

    completed_steps: frozenset[PatternSectionKey]
    completion_percentage: int
    ready_for_calculation: bool

    def __post_init__(self) -> None:
        if not (0 <= self.completion_percentage <= 100):
            raise ValueError(
                f"completion_percentage must be in [0, 100], got {self.completion_percentage}"
            )

    def is_completed(self, step: PatternSectionKey) -> bool:
        return step in self.completed_steps

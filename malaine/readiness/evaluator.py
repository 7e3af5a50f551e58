"""
Section readiness evaluator: which definition sections count as complete.

evaluate_section_readiness() inspects a SessionSnapshot section by section and
summarises how far the definition has progressed against the steps available
for the current garment type.

Default substitution
--------------------
Sweaters and cardigans have sensible defaults for garment structure, neckline,
and sleeves, so those sections count as complete even when left empty.  This
only affects completion checking: the evaluator never writes the defaults
into the snapshot.  Filling them in for a calculation is the job of
``malaine.defaults.apply_default_parameters``.

Accessory definition only applies to accessory garment types, and only the
attribute block matching the garment type counts (a scarf block does not
complete a beanie).  For any other garment it is complete by construction.

Policy values (threshold, garment type sets) are product choices, kept as
named constants here rather than derived from anything.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from malaine.schemas.completion import CompletionSummary
from malaine.schemas.section import PatternSectionKey
from malaine.schemas.snapshot import (
    BeanieAttributes,
    CowlAttributes,
    ScarfAttributes,
    SessionSnapshot,
)

# Minimum completion percentage before a definition may go to calculation.
READY_FOR_CALCULATION_THRESHOLD: int = 80

# Garment types whose structure, neckline, and sleeves have defaults.
DEFAULTED_GARMENT_TYPES: frozenset[str] = frozenset({"sweater", "cardigan"})

# Accessory garment types and the attribute block each one needs.
ACCESSORY_ATTRIBUTE_TYPES: dict[str, type] = {
    "beanie": BeanieAttributes,
    "scarf": ScarfAttributes,
    "cowl": CowlAttributes,
}

ACCESSORY_GARMENT_TYPES: frozenset[str] = frozenset(ACCESSORY_ATTRIBUTE_TYPES)


class IncompleteSnapshot(ValueError):
    """Raised when readiness is evaluated without the available-steps context."""


def has_section_defaults(garment_type_key: str | None) -> bool:
    return garment_type_key in DEFAULTED_GARMENT_TYPES


def requires_accessory_definition(garment_type_key: str | None) -> bool:
    return garment_type_key in ACCESSORY_GARMENT_TYPES


# ── Per-section predicates ─────────────────────────────────────────────────────


def _garment_type_complete(s: SessionSnapshot) -> bool:
    return s.garment_type is not None


def _gauge_complete(s: SessionSnapshot) -> bool:
    g = s.gauge
    if g is None:
        return False
    if g.profile_id:
        return True
    return bool(g.stitch_count and g.row_count and g.unit)


def _measurements_complete(s: SessionSnapshot) -> bool:
    return bool(s.measurements and s.measurements.measurement_set_id)


def _ease_complete(s: SessionSnapshot) -> bool:
    return bool(s.ease and s.ease.ease_type)


def _yarn_complete(s: SessionSnapshot) -> bool:
    return bool(s.yarn and s.yarn.yarn_profile_id)


def _stitch_pattern_complete(s: SessionSnapshot) -> bool:
    return bool(s.stitch_pattern and s.stitch_pattern.stitch_pattern_id)


def _garment_structure_complete(s: SessionSnapshot) -> bool:
    if s.garment_structure and s.garment_structure.construction_method:
        return True
    return has_section_defaults(s.garment_type_key)


def _neckline_complete(s: SessionSnapshot) -> bool:
    if s.neckline and s.neckline.style:
        return True
    return has_section_defaults(s.garment_type_key)


def _sleeves_complete(s: SessionSnapshot) -> bool:
    sl = s.sleeves
    if sl and (sl.style or sl.length_key or sl.cuff_style):
        return True
    return has_section_defaults(s.garment_type_key)


def _accessory_complete(s: SessionSnapshot) -> bool:
    if not requires_accessory_definition(s.garment_type_key):
        return True
    # A block left over from another accessory type does not count.
    return isinstance(s.accessory, ACCESSORY_ATTRIBUTE_TYPES[s.garment_type_key])


def _summary_complete(s: SessionSnapshot) -> bool:
    # Review step; nothing to fill in.
    return False


_SECTION_RULES: dict[PatternSectionKey, Callable[[SessionSnapshot], bool]] = {
    PatternSectionKey.GARMENT_TYPE: _garment_type_complete,
    PatternSectionKey.GAUGE: _gauge_complete,
    PatternSectionKey.MEASUREMENTS: _measurements_complete,
    PatternSectionKey.EASE: _ease_complete,
    PatternSectionKey.YARN: _yarn_complete,
    PatternSectionKey.STITCH_PATTERN: _stitch_pattern_complete,
    PatternSectionKey.GARMENT_STRUCTURE: _garment_structure_complete,
    PatternSectionKey.NECKLINE: _neckline_complete,
    PatternSectionKey.SLEEVES: _sleeves_complete,
    PatternSectionKey.ACCESSORY_DEFINITION: _accessory_complete,
    PatternSectionKey.SUMMARY: _summary_complete,
}

_missing_rules = set(PatternSectionKey) - set(_SECTION_RULES)
if _missing_rules:
    raise RuntimeError(f"No completion rule for section(s): {sorted(_missing_rules)}")


# ── Public API ─────────────────────────────────────────────────────────────────


def is_section_complete(snapshot: SessionSnapshot, key: PatternSectionKey) -> bool:
    """Return True if *key* counts as complete for *snapshot*."""
    return _SECTION_RULES[PatternSectionKey(key)](snapshot)


def completion_percentage(completed: int, available: int) -> int:
    """
    Integer percentage of *completed* out of *available*, rounding halves up.

    Raises:
        ValueError: If available < 1 or completed is outside [0, available].
    """
    if available < 1:
        raise ValueError(f"available must be >= 1, got {available}")
    if not (0 <= completed <= available):
        raise ValueError(f"completed must be in [0, {available}], got {completed}")
    return (200 * completed + available) // (2 * available)


def evaluate_section_readiness(
    snapshot: SessionSnapshot,
    available_steps: Sequence[PatternSectionKey] | None,
) -> CompletionSummary:
    """
    Summarise which available steps are complete and whether the definition
    is ready for calculation.

    Parameters
    ----------
    snapshot:
        Current (possibly sparse) pattern definition.  Not modified.
    available_steps:
        Ordered steps relevant to the current garment type, supplied by the
        caller (usually from the garment catalog).

    Returns
    -------
    CompletionSummary
        Completed steps (restricted to *available_steps*), the completion
        percentage, and the ready-for-calculation gate.

    Raises
    ------
    IncompleteSnapshot
        If *available_steps* is missing or empty.
    """
    if not available_steps:
        raise IncompleteSnapshot(
            "available_steps is required to evaluate readiness; got "
            f"{available_steps!r}"
        )

    steps = tuple(dict.fromkeys(PatternSectionKey(s) for s in available_steps))
    completed = frozenset(step for step in steps if _SECTION_RULES[step](snapshot))
    percentage = completion_percentage(len(completed), len(steps))

    return CompletionSummary(
        completed_steps=completed,
        completion_percentage=percentage,
        ready_for_calculation=percentage >= READY_FOR_CALCULATION_THRESHOLD,
    )

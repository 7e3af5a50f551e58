"""
Default parameter applier: fills in the sections the readiness evaluator
excused through default substitution.

Before a sweater or cardigan definition goes to the calculation engine, any
missing garment-structure, neckline, or sleeves section is replaced with a
fixed default so the engine never receives structurally absent data.

Rules:
  - only garment types with section defaults qualify (sweater, cardigan)
  - only a missing section is filled: None, or a record with every field
    unset.  A partially specified section is left exactly as entered
  - the input snapshot is never modified; a new snapshot is returned
  - applying twice gives the same result as applying once

The default values are product policy, not derived from measurements.
"""

from __future__ import annotations

from dataclasses import fields

from malaine.readiness.evaluator import has_section_defaults
from malaine.schemas.section import PatternSectionKey
from malaine.schemas.snapshot import (
    BodyShape,
    ConstructionMethod,
    CuffStyle,
    GarmentStructureSection,
    NecklineSection,
    NecklineStyle,
    SectionRecord,
    SessionSnapshot,
    SleeveLength,
    SleevesSection,
    SleeveStyle,
)

DEFAULT_GARMENT_STRUCTURE = GarmentStructureSection(
    construction_method=ConstructionMethod.DROP_SHOULDER,
    body_shape=BodyShape.STRAIGHT,
)

DEFAULT_NECKLINE = NecklineSection(
    style=NecklineStyle.ROUND,
    depth_cm=8.0,
    width_cm=20.0,
)

DEFAULT_SLEEVES = SleevesSection(
    style=SleeveStyle.STRAIGHT,
    length_key=SleeveLength.LONG,
    cuff_style=CuffStyle.RIBBED_1X1,
    cuff_length_cm=5.0,
)

# Section → (snapshot field, default record), in definition order.
_SECTION_DEFAULTS: dict[PatternSectionKey, tuple[str, SectionRecord]] = {
    PatternSectionKey.GARMENT_STRUCTURE: ("garment_structure", DEFAULT_GARMENT_STRUCTURE),
    PatternSectionKey.NECKLINE: ("neckline", DEFAULT_NECKLINE),
    PatternSectionKey.SLEEVES: ("sleeves", DEFAULT_SLEEVES),
}


def _is_unset(record: SectionRecord | None) -> bool:
    if record is None:
        return True
    return all(getattr(record, f.name) is None for f in fields(record))


def defaulted_sections(snapshot: SessionSnapshot) -> tuple[PatternSectionKey, ...]:
    """Return the sections apply_default_parameters() would fill for *snapshot*."""
    if not has_section_defaults(snapshot.garment_type_key):
        return ()
    return tuple(
        key
        for key, (field_name, _) in _SECTION_DEFAULTS.items()
        if _is_unset(getattr(snapshot, field_name))
    )


def apply_default_parameters(snapshot: SessionSnapshot) -> SessionSnapshot:
    """
    Return a copy of *snapshot* with default sections filled in.

    Parameters
    ----------
    snapshot:
        Definition about to be submitted for calculation.  Not modified.

    Returns
    -------
    SessionSnapshot
        The same snapshot object when nothing needs defaulting, otherwise a
        new snapshot with each missing default-able section set.
    """
    missing = defaulted_sections(snapshot)
    if not missing:
        return snapshot
    changes = {
        _SECTION_DEFAULTS[key][0]: _SECTION_DEFAULTS[key][1] for key in missing
    }
    return snapshot.with_sections(**changes)

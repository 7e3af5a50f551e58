"""
Short human-readable summaries of what each definition section holds.

Used by the definition session's step overview.  Pure; returns None for a
section with nothing to show.
"""

from __future__ import annotations

from malaine.readiness.evaluator import requires_accessory_definition
from malaine.schemas.section import PatternSectionKey
from malaine.schemas.snapshot import (
    BeanieAttributes,
    CowlAttributes,
    EaseType,
    MeasurementUnit,
    ScarfAttributes,
    SessionSnapshot,
)


def _num(value: float) -> str:
    """Format 8.0 as '8' and 8.5 as '8.5'."""
    return f"{value:g}"


def _humanize(value: str) -> str:
    return value.replace("_", " ")


def _garment_type(s: SessionSnapshot) -> str | None:
    if s.garment_type is None:
        return None
    label = s.garment_type.display_name or s.garment_type.type_key
    return f"Garment type: {label}"


def _gauge(s: SessionSnapshot) -> str | None:
    g = s.gauge
    if g is None:
        return None
    if g.stitch_count and g.row_count and g.unit:
        per = "10 cm" if g.unit is MeasurementUnit.CM else "4 inches"
        counts = f"{_num(g.stitch_count)} sts, {_num(g.row_count)} rows per {per}"
        return f"Gauge profile ({counts})" if g.profile_id else f"Gauge: {counts}"
    if g.profile_id:
        return "Gauge profile selected"
    return None


def _measurements(s: SessionSnapshot) -> str | None:
    if s.measurements and s.measurements.measurement_set_id:
        return "Measurement set selected"
    return None


def _ease(s: SessionSnapshot) -> str | None:
    e = s.ease
    if e is None or e.ease_type is None:
        return None
    text = f"{e.ease_type.value} ease"
    if e.value_bust is not None:
        if e.ease_type is EaseType.PERCENTAGE:
            suffix = "%"
        else:
            suffix = f" {(e.unit or MeasurementUnit.CM).value}"
        text += f" ({_num(e.value_bust)}{suffix})"
    return text


def _yarn(s: SessionSnapshot) -> str | None:
    if s.yarn and s.yarn.yarn_profile_id:
        return "Yarn profile selected"
    return None


def _stitch_pattern(s: SessionSnapshot) -> str | None:
    sp = s.stitch_pattern
    if sp is None or not sp.stitch_pattern_id:
        return None
    if sp.integration is None:
        return "Stitch pattern selected"
    choice = sp.integration
    return (
        f"Stitch pattern: {choice.stitch_pattern_name or choice.stitch_pattern_id}, "
        f"{choice.option.repeats} repeats over {choice.final_stitch_count} stitches"
    )


def _garment_structure(s: SessionSnapshot) -> str | None:
    gs = s.garment_structure
    if gs is None or gs.construction_method is None:
        return None
    text = f"Structure: {_humanize(gs.construction_method.value)}"
    if gs.body_shape is not None:
        text += f", {_humanize(gs.body_shape.value)}"
    return text


def _neckline(s: SessionSnapshot) -> str | None:
    n = s.neckline
    if n is None or n.style is None:
        return None
    text = f"Neckline: {_humanize(n.style.value)}"
    if n.depth_cm is not None:
        text += f" ({_num(n.depth_cm)} cm depth)"
    return text


def _sleeves(s: SessionSnapshot) -> str | None:
    sl = s.sleeves
    if sl is None:
        return None
    parts = []
    if sl.style is not None:
        parts.append(_humanize(sl.style.value))
    if sl.length_key is not None:
        parts.append(_humanize(sl.length_key.value))
    if sl.cuff_style is not None:
        parts.append(f"{_humanize(sl.cuff_style.value)} cuff")
    if not parts:
        return None
    return "Sleeves: " + ", ".join(parts)


def _accessory(s: SessionSnapshot) -> str | None:
    a = s.accessory
    if isinstance(a, BeanieAttributes):
        return (
            f"Beanie: {_num(a.target_circumference_cm)} cm circumference, "
            f"{_humanize(a.crown_style.value)} crown"
        )
    if isinstance(a, ScarfAttributes):
        return f"Scarf: {_num(a.width_cm)} x {_num(a.length_cm)} cm"
    if isinstance(a, CowlAttributes):
        return f"Cowl: {_num(a.circumference_cm)} cm circumference"
    if not requires_accessory_definition(s.garment_type_key):
        return "No accessory definition required for this garment type"
    return None


def _summary(s: SessionSnapshot) -> str | None:
    return "Pattern definition summary"


_DESCRIBERS = {
    PatternSectionKey.GARMENT_TYPE: _garment_type,
    PatternSectionKey.GAUGE: _gauge,
    PatternSectionKey.MEASUREMENTS: _measurements,
    PatternSectionKey.EASE: _ease,
    PatternSectionKey.YARN: _yarn,
    PatternSectionKey.STITCH_PATTERN: _stitch_pattern,
    PatternSectionKey.GARMENT_STRUCTURE: _garment_structure,
    PatternSectionKey.NECKLINE: _neckline,
    PatternSectionKey.SLEEVES: _sleeves,
    PatternSectionKey.ACCESSORY_DEFINITION: _accessory,
    PatternSectionKey.SUMMARY: _summary,
}


def describe_step(snapshot: SessionSnapshot, key: PatternSectionKey) -> str | None:
    """Return a one-line summary of section *key*, or None if it holds nothing."""
    return _DESCRIBERS[PatternSectionKey(key)](snapshot)

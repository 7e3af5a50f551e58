"""
SessionSnapshot schema — the sparse record of a pattern being defined.

Each definition section has its own frozen record carrying only the fields
relevant to that section.  A SessionSnapshot holds at most one record per
section; an absent record (None) means the user has not filled that section
in yet.

Snapshots are immutable.  Editing produces a new snapshot through
``with_sections()``; the enclosing DefinitionSession owns the current one.

Key types:
  GarmentTypeSelection    — chosen garment type (the snapshot discriminator)
  GaugeSection            — saved gauge profile or manual stitch/row counts
  MeasurementsSection     — measurement set reference
  EaseSection             — ease type and optional bust ease value
  YarnSection             — yarn profile reference
  StitchPatternSection    — stitch pattern reference and applied integration
  GarmentStructureSection — construction method and body shape
  NecklineSection         — neckline style and dimensions
  SleevesSection          — sleeve style, length, and cuff
  BeanieAttributes / ScarfAttributes / CowlAttributes — accessory blocks
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Union

from malaine.schemas.integration import IntegrationChoice
from malaine.schemas.section import PatternSectionKey

# ── Vocabulary ─────────────────────────────────────────────────────────────────


class MeasurementUnit(str, Enum):
    CM = "cm"
    INCH = "inch"


class EaseType(str, Enum):
    """Ease expressed as an absolute length or as a percentage of the measurement."""

    ABSOLUTE = "absolute"
    PERCENTAGE = "percentage"


class ConstructionMethod(str, Enum):
    DROP_SHOULDER = "drop_shoulder"
    SET_IN_SLEEVE = "set_in_sleeve"
    RAGLAN = "raglan"
    RAGLAN_TOP_DOWN = "raglan_top_down"
    DOLMAN = "dolman"


class BodyShape(str, Enum):
    STRAIGHT = "straight"
    A_LINE = "a_line"
    FITTED_SHAPED_WAIST = "fitted_shaped_waist"
    OVERSIZED_BOXY = "oversized_boxy"


class NecklineStyle(str, Enum):
    ROUND = "round"
    V_NECK = "v_neck"
    BOAT_NECK = "boat_neck"
    SQUARE_NECK = "square_neck"
    TURTLENECK = "turtleneck"
    SCOOP = "scoop"
    COWL = "cowl"


class SleeveStyle(str, Enum):
    STRAIGHT = "straight"
    TAPERED = "tapered"
    PUFF_CAP = "puff_cap"
    FITTED = "fitted"
    BELL = "bell"


class SleeveLength(str, Enum):
    CAP = "cap"
    SHORT = "short"
    ELBOW = "elbow"
    THREE_QUARTER = "three_quarter"
    LONG = "long"
    CUSTOM = "custom"


class CuffStyle(str, Enum):
    NONE = "none"
    RIBBED_1X1 = "ribbed_1x1"
    RIBBED_2X2 = "ribbed_2x2"
    FOLDED = "folded"
    BELL_FLARE = "bell_flare"
    FITTED_BAND = "fitted_band"


class CrownStyle(str, Enum):
    CLASSIC_TAPERED = "classic_tapered"
    SLOUCHY = "slouchy"
    FLAT_TOP = "flat_top"


class BrimStyle(str, Enum):
    NO_BRIM = "no_brim"
    FOLDED_RIBBED_1X1 = "folded_ribbed_1x1"
    ROLLED_EDGE = "rolled_edge"


class WorkStyle(str, Enum):
    FLAT = "flat"
    IN_THE_ROUND = "in_the_round"


def _require_positive(name: str, value: float | None) -> None:
    if value is not None and value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


# ── Section records ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GarmentTypeSelection:
    """Selected garment type.  ``type_key`` drives default substitution."""

    type_key: str
    garment_type_id: str | None = None
    display_name: str | None = None

    def __post_init__(self) -> None:
        if not self.type_key:
            raise ValueError("type_key must be a non-empty string")


@dataclass(frozen=True)
class GaugeSection:
    """
    Gauge, either by reference to a saved profile or entered manually.

    Manual counts are stitches and rows per 10 cm (or per 4 inches).
    """

    profile_id: str | None = None
    stitch_count: float | None = None
    row_count: float | None = None
    unit: MeasurementUnit | None = None

    def __post_init__(self) -> None:
        _require_positive("stitch_count", self.stitch_count)
        _require_positive("row_count", self.row_count)


@dataclass(frozen=True)
class MeasurementsSection:
    measurement_set_id: str | None = None


@dataclass(frozen=True)
class EaseSection:
    ease_type: EaseType | None = None
    value_bust: float | None = None
    unit: MeasurementUnit | None = None


@dataclass(frozen=True)
class YarnSection:
    yarn_profile_id: str | None = None


@dataclass(frozen=True)
class StitchPatternSection:
    stitch_pattern_id: str | None = None
    integration: IntegrationChoice | None = None


@dataclass(frozen=True)
class GarmentStructureSection:
    construction_method: ConstructionMethod | None = None
    body_shape: BodyShape | None = None


@dataclass(frozen=True)
class NecklineSection:
    style: NecklineStyle | None = None
    depth_cm: float | None = None
    width_cm: float | None = None

    def __post_init__(self) -> None:
        _require_positive("depth_cm", self.depth_cm)
        _require_positive("width_cm", self.width_cm)


@dataclass(frozen=True)
class SleevesSection:
    style: SleeveStyle | None = None
    length_key: SleeveLength | None = None
    cuff_style: CuffStyle | None = None
    cuff_length_cm: float | None = None

    def __post_init__(self) -> None:
        _require_positive("cuff_length_cm", self.cuff_length_cm)


@dataclass(frozen=True)
class BeanieAttributes:
    target_circumference_cm: float
    body_height_cm: float
    crown_style: CrownStyle
    brim_style: BrimStyle
    brim_depth_cm: float | None = None

    def __post_init__(self) -> None:
        _require_positive("target_circumference_cm", self.target_circumference_cm)
        _require_positive("body_height_cm", self.body_height_cm)
        _require_positive("brim_depth_cm", self.brim_depth_cm)


@dataclass(frozen=True)
class ScarfAttributes:
    width_cm: float
    length_cm: float
    work_style: WorkStyle = WorkStyle.FLAT

    def __post_init__(self) -> None:
        _require_positive("width_cm", self.width_cm)
        _require_positive("length_cm", self.length_cm)


@dataclass(frozen=True)
class CowlAttributes:
    circumference_cm: float
    height_cm: float
    work_style: WorkStyle = WorkStyle.IN_THE_ROUND

    def __post_init__(self) -> None:
        _require_positive("circumference_cm", self.circumference_cm)
        _require_positive("height_cm", self.height_cm)


AccessoryAttributes = Union[BeanieAttributes, ScarfAttributes, CowlAttributes]

SectionRecord = Union[
    GarmentTypeSelection,
    GaugeSection,
    MeasurementsSection,
    EaseSection,
    YarnSection,
    StitchPatternSection,
    GarmentStructureSection,
    NecklineSection,
    SleevesSection,
    BeanieAttributes,
    ScarfAttributes,
    CowlAttributes,
]

# Section key → SessionSnapshot field.  SUMMARY is a review step with no data.
SECTION_FIELDS: dict[PatternSectionKey, str] = {
    PatternSectionKey.GARMENT_TYPE: "garment_type",
    PatternSectionKey.GAUGE: "gauge",
    PatternSectionKey.MEASUREMENTS: "measurements",
    PatternSectionKey.EASE: "ease",
    PatternSectionKey.YARN: "yarn",
    PatternSectionKey.STITCH_PATTERN: "stitch_pattern",
    PatternSectionKey.GARMENT_STRUCTURE: "garment_structure",
    PatternSectionKey.NECKLINE: "neckline",
    PatternSectionKey.SLEEVES: "sleeves",
    PatternSectionKey.ACCESSORY_DEFINITION: "accessory",
}


# ── Snapshot ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Everything filled in so far for one pattern definition.

    All sections are optional.  The garment type discriminator is read from
    the garment-type section; a snapshot without one has no garment type.
    """

    garment_type: GarmentTypeSelection | None = None
    gauge: GaugeSection | None = None
    measurements: MeasurementsSection | None = None
    ease: EaseSection | None = None
    yarn: YarnSection | None = None
    stitch_pattern: StitchPatternSection | None = None
    garment_structure: GarmentStructureSection | None = None
    neckline: NecklineSection | None = None
    sleeves: SleevesSection | None = None
    accessory: AccessoryAttributes | None = None

    @property
    def garment_type_key(self) -> str | None:
        return self.garment_type.type_key if self.garment_type else None

    def section(self, key: PatternSectionKey) -> SectionRecord | None:
        """Return the record stored for *key*, or None (always None for SUMMARY)."""
        field_name = SECTION_FIELDS.get(key)
        return getattr(self, field_name) if field_name else None

    def with_sections(self, **changes: SectionRecord | None) -> SessionSnapshot:
        """
        Return a copy with the given section fields replaced.

        Raises
        ------
        ValueError
            If a keyword does not name a snapshot section.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ValueError(f"Unknown snapshot section(s): {', '.join(unknown)}")
        return replace(self, **changes)

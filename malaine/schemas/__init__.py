"""
Data schemas for the pattern definition core.

Frozen dataclasses and enums shared by the repeat fitter, the readiness
evaluator, the default applier, and the definition session.
"""

from .completion import CompletionSummary
from .integration import (
    IntegrationAnalysis,
    IntegrationChoice,
    IntegrationKind,
    IntegrationOption,
    IntegrationRequest,
    Side,
    StitchPatternRef,
)
from .section import DEFINITION_STEPS, PatternSectionKey
from .snapshot import (
    SECTION_FIELDS,
    AccessoryAttributes,
    BeanieAttributes,
    BodyShape,
    BrimStyle,
    ConstructionMethod,
    CowlAttributes,
    CrownStyle,
    CuffStyle,
    EaseSection,
    EaseType,
    GarmentStructureSection,
    GarmentTypeSelection,
    GaugeSection,
    MeasurementsSection,
    MeasurementUnit,
    NecklineSection,
    NecklineStyle,
    ScarfAttributes,
    SectionRecord,
    SessionSnapshot,
    SleeveLength,
    SleevesSection,
    SleeveStyle,
    StitchPatternSection,
    WorkStyle,
    YarnSection,
)

__all__ = [
    # sections
    "PatternSectionKey",
    "DEFINITION_STEPS",
    "SECTION_FIELDS",
    # vocabulary
    "MeasurementUnit",
    "EaseType",
    "ConstructionMethod",
    "BodyShape",
    "NecklineStyle",
    "SleeveStyle",
    "SleeveLength",
    "CuffStyle",
    "CrownStyle",
    "BrimStyle",
    "WorkStyle",
    # section records
    "GarmentTypeSelection",
    "GaugeSection",
    "MeasurementsSection",
    "EaseSection",
    "YarnSection",
    "StitchPatternSection",
    "GarmentStructureSection",
    "NecklineSection",
    "SleevesSection",
    "BeanieAttributes",
    "ScarfAttributes",
    "CowlAttributes",
    "AccessoryAttributes",
    "SectionRecord",
    # snapshot and derived summary
    "SessionSnapshot",
    "CompletionSummary",
    # stitch pattern integration
    "StitchPatternRef",
    "IntegrationRequest",
    "IntegrationKind",
    "IntegrationOption",
    "IntegrationAnalysis",
    "IntegrationChoice",
    "Side",
]

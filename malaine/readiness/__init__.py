"""readiness — section completion and readiness public API."""

from malaine.readiness.evaluator import (
    ACCESSORY_ATTRIBUTE_TYPES,
    ACCESSORY_GARMENT_TYPES,
    DEFAULTED_GARMENT_TYPES,
    READY_FOR_CALCULATION_THRESHOLD,
    IncompleteSnapshot,
    completion_percentage,
    evaluate_section_readiness,
    has_section_defaults,
    is_section_complete,
    requires_accessory_definition,
)
from malaine.readiness.summaries import describe_step

__all__ = [
    "ACCESSORY_ATTRIBUTE_TYPES",
    "ACCESSORY_GARMENT_TYPES",
    "DEFAULTED_GARMENT_TYPES",
    "READY_FOR_CALCULATION_THRESHOLD",
    "IncompleteSnapshot",
    "completion_percentage",
    "describe_step",
    "evaluate_section_readiness",
    "has_section_defaults",
    "is_section_complete",
    "requires_accessory_definition",
]

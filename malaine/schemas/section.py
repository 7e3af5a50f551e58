"""
Pattern definition sections: the closed vocabulary of definition steps.

Every piece of data a user fills in while defining a pattern belongs to
exactly one section.  The canonical order below is the order the steps are
presented in when a garment type has not narrowed them down yet.
"""

from __future__ import annotations

from enum import Enum


class PatternSectionKey(str, Enum):
    """Logical definition section (one step of the definition workflow)."""

    GARMENT_TYPE = "garment-type"
    GAUGE = "gauge"
    MEASUREMENTS = "measurements"
    EASE = "ease"
    YARN = "yarn"
    STITCH_PATTERN = "stitch-pattern"
    GARMENT_STRUCTURE = "garment-structure"
    NECKLINE = "neckline"
    SLEEVES = "sleeves"
    ACCESSORY_DEFINITION = "accessory-definition"
    SUMMARY = "summary"


DEFINITION_STEPS: tuple[PatternSectionKey, ...] = (
    PatternSectionKey.GARMENT_TYPE,
    PatternSectionKey.GAUGE,
    PatternSectionKey.MEASUREMENTS,
    PatternSectionKey.EASE,
    PatternSectionKey.YARN,
    PatternSectionKey.STITCH_PATTERN,
    PatternSectionKey.GARMENT_STRUCTURE,
    PatternSectionKey.NECKLINE,
    PatternSectionKey.SLEEVES,
    PatternSectionKey.ACCESSORY_DEFINITION,
    PatternSectionKey.SUMMARY,
)

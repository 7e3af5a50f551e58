"""
Garment catalog entry types.

Loaded from the YAML lookup table at startup and frozen afterwards; nothing
writes to them at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from malaine.schemas.section import PatternSectionKey


class GarmentCategory(str, Enum):
    GARMENT = "garment"
    ACCESSORY = "accessory"


class UnknownGarmentType(KeyError):
    """Raised when a garment type key is not in the catalog."""


@dataclass(frozen=True)
class GarmentTypeEntry:
    key: str
    display_name: str
    category: GarmentCategory
    steps: tuple[PatternSectionKey, ...]
    description: str = ""

from .registry import GarmentCatalog, get_catalog
from .types import GarmentCategory, GarmentTypeEntry, UnknownGarmentType

__all__ = [
    "GarmentCatalog",
    "GarmentCategory",
    "GarmentTypeEntry",
    "UnknownGarmentType",
    "get_catalog",
]

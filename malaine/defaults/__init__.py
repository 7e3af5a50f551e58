"""defaults — default parameter applier public API."""

from malaine.defaults.applier import (
    DEFAULT_GARMENT_STRUCTURE,
    DEFAULT_NECKLINE,
    DEFAULT_SLEEVES,
    apply_default_parameters,
    defaulted_sections,
)

__all__ = [
    "DEFAULT_GARMENT_STRUCTURE",
    "DEFAULT_NECKLINE",
    "DEFAULT_SLEEVES",
    "apply_default_parameters",
    "defaulted_sections",
]

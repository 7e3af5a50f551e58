"""api — public entry points."""

from malaine.api.advise import AdvisorReport, advise_integration

__all__ = ["AdvisorReport", "advise_integration"]

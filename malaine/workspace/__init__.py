"""workspace — definition session public API."""

from malaine.workspace.collaborators import PatternCalculator, StitchPatternCatalog
from malaine.workspace.session import DefinitionSession, NotReadyForCalculation, StepStatus

__all__ = [
    "DefinitionSession",
    "NotReadyForCalculation",
    "PatternCalculator",
    "StepStatus",
    "StitchPatternCatalog",
]

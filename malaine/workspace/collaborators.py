"""
External collaborators the definition workspace talks to.

Only the interfaces live here.  Implementations (a REST-backed catalog, the
pattern calculation engine) belong to the calling application; tests inject
in-memory fakes.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from malaine.schemas.integration import StitchPatternRef
from malaine.schemas.snapshot import SessionSnapshot


@runtime_checkable
class StitchPatternCatalog(Protocol):
    """Looks up stitch patterns by id."""

    def get(self, stitch_pattern_id: str) -> StitchPatternRef:
        """Return the pattern, raising KeyError if it does not exist."""
        ...


@runtime_checkable
class PatternCalculator(Protocol):
    """Downstream calculation engine for a fully resolved definition."""

    def calculate(self, snapshot: SessionSnapshot) -> Any:
        """Compute knitting instructions for *snapshot*."""
        ...

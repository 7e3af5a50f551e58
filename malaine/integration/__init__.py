"""integration — stitch pattern integration public API."""

from malaine.integration.fitter import EXTRA_STITCH_SIDE, InvalidRequest, analyze_integration

__all__ = ["EXTRA_STITCH_SIDE", "InvalidRequest", "analyze_integration"]

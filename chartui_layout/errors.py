from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when chart input data cannot be turned into a series."""


class ChartConfigError(ValueError):
    """Raised when layout configuration or style values are out of range."""

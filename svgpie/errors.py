"""Exceptions raised by svgpie.

All library errors derive from :class:`PieChartError`. The concrete classes
also subclass :class:`ValueError` so callers that only care about "bad input"
can catch that instead.
"""

from __future__ import annotations


class PieChartError(Exception):
    """Base class for every error raised by svgpie."""


class InvalidDataItem(PieChartError, ValueError):
    """A data item is missing ``color``/``value`` or carries invalid types."""


class ChartConfigError(PieChartError, ValueError):
    """A chart configuration value is out of range."""


class MarginOverflow(ChartConfigError):
    """The per-slice margins leave no angular space for the slices."""


class DegenerateInput(PieChartError, ValueError):
    """Angle allocation was asked to split a total that is not positive."""

"""svgpie package exports.

Preferred high-level API:
    from svgpie import PieChart, render_pie, ChartConfig
"""

__version__ = "0.1.0"

# High-level API wrappers
from .api import Chart, PieChart, render_pie
from .compute import AngularSpan, DataItem, PatternSpec, allocate_angles
from .config import ChartConfig
from .errors import (
    ChartConfigError,
    DegenerateInput,
    InvalidDataItem,
    MarginOverflow,
    PieChartError,
)

"""Rendering components for pie charts."""

from .pie_chart import ChartComposer, ChartDescription, PieChartRenderer, SliceDescriptor
from .sector_geometry import SectorGeometry, SectorShape
from .textures import TextureAssigner, decode_pattern_href, encode_pattern_href

__all__ = [
    "ChartComposer",
    "ChartDescription",
    "PieChartRenderer",
    "SectorGeometry",
    "SectorShape",
    "SliceDescriptor",
    "TextureAssigner",
    "decode_pattern_href",
    "encode_pattern_href",
]

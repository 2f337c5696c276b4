"""Texture fills for pie slices.

With patterns enabled each slice is filled with ``url(#<id>)`` pointing at a
``<pattern>`` whose image is a 10x10 SVG tile: a rect of the slice color with
the caller's pattern fragment drawn on top. The tile is inlined as a base64
data URI so the chart stays a single self-contained document.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Optional, Tuple

from ..compute.core.types import DataItem

DATA_URI_PREFIX = "data:image/svg+xml;base64,"
TILE_SIZE = 10


@dataclass(frozen=True)
class Texture:
    """Fill assigned to one slice."""

    fill: str
    pattern_id: Optional[str] = None
    pattern_href: Optional[str] = None


def tile_svg(color: str, pattern_body: str = "") -> str:
    return (
        f"<svg xmlns='http://www.w3.org/2000/svg' width='{TILE_SIZE}' height='{TILE_SIZE}'>"
        f"<rect width='{TILE_SIZE}' height='{TILE_SIZE}' fill='{color}'/>"
        f"{pattern_body}"
        "</svg>"
    )


def encode_pattern_href(color: str, pattern_body: str = "") -> str:
    """Encode the tile for ``color``/``pattern_body`` as a data URI."""
    raw = tile_svg(color, pattern_body).encode("utf-8")
    return DATA_URI_PREFIX + base64.b64encode(raw).decode("ascii")


def decode_pattern_href(href: str) -> str:
    """Return the SVG tile text embedded in a pattern data URI."""
    if not href.startswith(DATA_URI_PREFIX):
        raise ValueError("not an svgpie pattern data URI")
    return base64.b64decode(href[len(DATA_URI_PREFIX):]).decode("utf-8")


def parse_tile(svg: str) -> Tuple[str, str]:
    """Split a decoded tile back into ``(color, pattern_body)``."""
    head = f"<rect width='{TILE_SIZE}' height='{TILE_SIZE}' fill='"
    start = svg.index(head) + len(head)
    end = svg.index("'/>", start)
    body_end = svg.rindex("</svg>")
    return svg[start:end], svg[end + 3 : body_end]


class TextureAssigner:
    """Maps slices to flat colors or generated pattern fills."""

    def __init__(self, use_patterns: bool = False):
        self.use_patterns = use_patterns

    def pattern_id(self, index: int, item: DataItem) -> str:
        if item.pattern is not None and item.pattern.id is not None:
            return item.pattern.id
        return str(index)

    def assign(self, index: int, item: DataItem) -> Texture:
        if not self.use_patterns:
            return Texture(fill=item.color)
        pid = self.pattern_id(index, item)
        body = item.pattern.body if item.pattern is not None else ""
        return Texture(
            fill=f"url(#{pid})",
            pattern_id=pid,
            pattern_href=encode_pattern_href(item.color, body),
        )

"""SVG pie chart composition and rendering.

``ChartComposer`` turns data items plus configuration into a
``ChartDescription`` (canvas, slice shapes, pattern definitions).
``PieChartRenderer`` serializes that description to SVG text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..compute.angles import AngleAllocator
from ..compute.core.types import AngularSpan, DataItem
from ..compute.expansion import ExpansionStateMachine
from ..config import ChartConfig
from .sector_geometry import SectorGeometry, SectorShape
from .svg_utils import SVG_NS, XLINK_NS, esc, fmt_num
from .textures import TextureAssigner

PATTERN_TILE_SIZE = 5


@dataclass(frozen=True)
class SliceDescriptor:
    """Everything the renderer needs to draw one slice."""

    index: int
    item: DataItem
    shape: SectorShape
    fill: str
    radius: float
    center: float
    expanded: bool = False
    pattern_id: Optional[str] = None
    pattern_href: Optional[str] = None

    @property
    def title(self) -> Optional[str]:
        return self.item.title

    @property
    def href(self) -> Optional[str]:
        return self.item.href


@dataclass(frozen=True)
class PatternDefinition:
    id: str
    href: str
    size: int = PATTERN_TILE_SIZE


@dataclass
class ChartDescription:
    """Composed chart, ready to serialize.

    Attributes:
        size: Side of the square canvas (view box plus twice the offset).
        offset: Translation applied to the slice group so expanded slices fit.
        center: Center of the chart inside the translated group.
        slices: Slice descriptors in visible order.
        patterns: Pattern definitions, one per distinct id.
    """

    size: float
    offset: float
    center: float
    slices: List[SliceDescriptor] = field(default_factory=list)
    patterns: List[PatternDefinition] = field(default_factory=list)

    @property
    def view_box(self) -> str:
        return f"0 0 {fmt_num(self.size)} {fmt_num(self.size)}"

    @property
    def single(self) -> bool:
        return len(self.slices) == 1


def visible_items(items: Iterable[DataItem]) -> List[DataItem]:
    """Drop items with a non-positive value, keeping the caller's order."""
    return [item for item in items if item.visible]


class ChartComposer:
    """Lays out slices for a config and an expansion state."""

    def __init__(self, config: Optional[ChartConfig] = None, logger: Optional[logging.Logger] = None):
        self.config = config or ChartConfig()
        self.logger = logger or self.config.logger or logging.getLogger(__name__)

    def canvas_offset(self, items: List[DataItem]) -> float:
        """Extra margin around the base circle that keeps expanded slices unclipped."""
        cfg = self.config
        if cfg.expand_on_hover or any(i.expanded for i in items):
            return cfg.expand_size
        return 0

    def compose(
        self,
        items: Iterable[DataItem],
        state: Optional[ExpansionStateMachine] = None,
    ) -> Optional[ChartDescription]:
        """Compose the chart, or return ``None`` when no item has a positive value."""
        cfg = self.config
        if state is None:
            state = ExpansionStateMachine(cfg.expanded_index, cfg.expand_on_hover)
        shown = visible_items(items)
        if not shown:
            self.logger.debug("no positive values; nothing to render")
            return None

        center = cfg.center
        offset = self.canvas_offset(shown)
        if len(shown) == 1:
            spans = [AngularSpan(cfg.start_angle, cfg.start_angle + 360)]
        else:
            allocator = AngleAllocator(cfg.start_angle, cfg.angle_margin, self.logger)
            spans = allocator.allocate([i.value for i in shown])

        textures = TextureAssigner(cfg.use_patterns)
        slices: List[SliceDescriptor] = []
        patterns: List[PatternDefinition] = []
        seen_ids = set()
        for idx, (item, span) in enumerate(zip(shown, spans)):
            expanded = state.is_expanded(idx, item)
            radius = center + (cfg.expand_size if expanded else 0)
            texture = textures.assign(idx, item)
            if texture.pattern_id is not None and texture.pattern_id not in seen_ids:
                seen_ids.add(texture.pattern_id)
                patterns.append(PatternDefinition(texture.pattern_id, texture.pattern_href))
            slices.append(
                SliceDescriptor(
                    index=idx,
                    item=item,
                    shape=SectorGeometry(center, radius).shape(span),
                    fill=texture.fill,
                    radius=radius,
                    center=center,
                    expanded=expanded,
                    pattern_id=texture.pattern_id,
                    pattern_href=texture.pattern_href,
                )
            )

        self.logger.debug(
            "composed %d slice(s), offset=%s, patterns=%d", len(slices), offset, len(patterns)
        )
        return ChartDescription(
            size=cfg.view_box_size + 2 * offset,
            offset=offset,
            center=center,
            slices=slices,
            patterns=patterns,
        )


class PieChartRenderer:
    """Renders a ``ChartDescription`` as a standalone SVG document."""

    def __init__(self, config: Optional[ChartConfig] = None):
        self.config = config or ChartConfig()

    def render(self, chart: Optional[ChartDescription]) -> str:
        """Generate SVG markup for ``chart``.

        Returns:
            SVG string, or an empty string when ``chart`` is ``None``.
        """
        if chart is None:
            return ""

        defs = self._render_defs(chart.patterns) if self.config.use_patterns else ""
        slices = "".join(self._render_slice(s) for s in chart.slices)
        offset = fmt_num(chart.offset)
        return (
            f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}" viewBox="{chart.view_box}">'
            f"{defs}"
            f'<g transform="translate({offset}, {offset})">'
            f"{slices}"
            "</g>"
            "</svg>"
        )

    def _render_defs(self, patterns: List[PatternDefinition]) -> str:
        body = "".join(
            f'<pattern id="{esc(p.id)}" patternUnits="userSpaceOnUse" width="{p.size}" height="{p.size}">'
            f'<image href="{p.href}" xlink:href="{p.href}" x="0" y="0" width="{p.size}" height="{p.size}"/>'
            "</pattern>"
            for p in patterns
        )
        return f"<defs>{body}</defs>"

    def _style_attrs(self) -> str:
        cfg = self.config
        return (
            f'stroke="{esc(cfg.stroke_color)}" '
            f'stroke-width="{fmt_num(cfg.stroke_width)}" '
            f'stroke-linejoin="{esc(cfg.stroke_linejoin)}" '
            f'style="transition: all {esc(cfg.transition_duration)} '
            f'{esc(cfg.transition_timing_function)}"'
        )

    def _render_slice(self, s: SliceDescriptor) -> str:
        shape = s.shape
        if shape.kind == "circle":
            geometry = f'<circle cx="{fmt_num(shape.cx)}" cy="{fmt_num(shape.cy)}" r="{fmt_num(shape.r)}"'
            tag = "circle"
        else:
            rule = f' fill-rule="{shape.fill_rule}"' if shape.fill_rule else ""
            geometry = f'<path d="{shape.d}"{rule}'
            tag = "path"

        expanded = ' data-expanded="true"' if s.expanded else ""
        title = f"<title>{esc(s.title)}</title>" if s.title else ""
        element = (
            f'{geometry} fill="{esc(s.fill)}" {self._style_attrs()} '
            f'class="pie-sector" data-index="{s.index}"{expanded}>'
            f"{title}</{tag}>"
        )
        if s.href:
            return f'<a href="{esc(s.href)}" xlink:href="{esc(s.href)}">{element}</a>'
        return element

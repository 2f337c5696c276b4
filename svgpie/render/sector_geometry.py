"""Vector geometry for pie sectors.

A span sweeping less than 360 degrees becomes a closed path: center, line to
the arc start, arc to the arc end, close. A span of 360 degrees or more
cannot be drawn as a single arc command (start and end coincide), so it is
emitted as a circle primitive instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..compute.core.types import AngularSpan
from .svg_utils import fmt_num, polar_point


@dataclass(frozen=True)
class SectorShape:
    """Drawable primitive for one slice.

    ``kind`` is ``"circle"`` (``cx``/``cy``/``r`` set) or ``"path"`` (``d``
    set). Ring paths for full donuts need ``fill_rule="evenodd"``.
    """

    kind: str
    d: Optional[str] = None
    cx: Optional[float] = None
    cy: Optional[float] = None
    r: Optional[float] = None
    fill_rule: Optional[str] = None


class SectorGeometry:
    """Builds sector shapes around a fixed center.

    Args:
        center: Center coordinate; the chart is square so x == y.
        radius: Outer radius, already including any expansion.
        inner_radius: Radius of the hole for donut rendering; 0 draws a solid pie.
    """

    def __init__(self, center: float, radius: float, inner_radius: float = 0):
        if radius <= 0:
            raise ValueError("radius must be positive")
        if inner_radius < 0 or inner_radius >= radius:
            raise ValueError("inner_radius must be in [0, radius)")
        self.center = center
        self.radius = radius
        self.inner_radius = inner_radius

    def shape(self, span: AngularSpan) -> SectorShape:
        if span.is_full_circle:
            return self._full_circle()
        return SectorShape(kind="path", d=self._sector_path(span.start_angle, span.end_angle))

    def _full_circle(self) -> SectorShape:
        if not self.inner_radius:
            return SectorShape(kind="circle", cx=self.center, cy=self.center, r=self.radius)
        d = f"{self._circle_path(self.radius)} {self._circle_path(self.inner_radius)}"
        return SectorShape(kind="path", d=d, fill_rule="evenodd")

    def _circle_path(self, r: float) -> str:
        c = self.center
        left, right = fmt_num(c - r), fmt_num(c + r)
        mid, rr = fmt_num(c), fmt_num(r)
        return (
            f"M {left},{mid} "
            f"A {rr},{rr} 0 1,1 {right},{mid} "
            f"A {rr},{rr} 0 1,1 {left},{mid} Z"
        )

    def _sector_path(self, start_angle: float, end_angle: float) -> str:
        c = self.center
        r = self.radius
        sweep = end_angle - start_angle
        # 180 exactly draws with flag 0; both arcs coincide in length
        large_arc_flag = 1 if sweep > 180 else 0

        x1, y1 = polar_point(c, c, r, start_angle)
        x2, y2 = polar_point(c, c, r, end_angle)
        rr = fmt_num(r)
        outer = (
            f"L {fmt_num(x1)},{fmt_num(y1)} "
            f"A {rr},{rr} 0 {large_arc_flag},1 {fmt_num(x2)},{fmt_num(y2)}"
        )
        if not self.inner_radius:
            return f"M {fmt_num(c)},{fmt_num(c)} {outer} Z"

        ir = self.inner_radius
        ix1, iy1 = polar_point(c, c, ir, end_angle)
        ix2, iy2 = polar_point(c, c, ir, start_angle)
        irr = fmt_num(ir)
        # start on the inner arc so the outline closes back onto it
        return (
            f"M {fmt_num(ix2)},{fmt_num(iy2)} {outer} "
            f"L {fmt_num(ix1)},{fmt_num(iy1)} "
            f"A {irr},{irr} 0 {large_arc_flag},0 {fmt_num(ix2)},{fmt_num(iy2)} Z"
        )

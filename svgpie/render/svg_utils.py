from __future__ import annotations

import html as _html
import math

import numpy as np

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


def fmt_num(v: float, digits: int = 4) -> str:
    """Format a coordinate compactly and reproducibly.

    Rounds to ``digits`` decimals, strips trailing zeros and prints negative
    zero as ``0`` so identical geometry always yields identical text.
    """
    if not np.isfinite(v):
        raise ValueError(f"cannot format non-finite coordinate {v!r}")
    r = round(float(v), digits)
    if r == 0:
        return "0"
    if r == int(r):
        return str(int(r))
    return f"{r:.{digits}f}".rstrip("0").rstrip(".")


def polar_point(cx: float, cy: float, radius: float, angle_deg: float) -> tuple[float, float]:
    """Point at ``angle_deg`` (clockwise from +x, SVG y-down) on a circle."""
    rad = math.radians(angle_deg % 360)
    return cx + radius * math.cos(rad), cy + radius * math.sin(rad)


def esc(text: object) -> str:
    return _html.escape(str(text), quote=True)

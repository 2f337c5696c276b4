"""Angle allocation for pie slices.

Turns an ordered sequence of positive values into consecutive angular spans.
Every slice is charged one trailing margin, so with N slices the drawable
sweep is ``360 - N * margin``; a single slice always gets the full circle.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..errors import DegenerateInput, MarginOverflow
from .core.types import AngularSpan

FULL_CIRCLE = 360.0


def allocate_angles(
    values: Sequence[float],
    start_angle: float = 0,
    angle_margin: float = 0,
) -> List[AngularSpan]:
    """Allocate one angular span per value, in input order.

    Args:
        values: Positive slice weights. Zero/negative entries must be filtered
            out by the caller.
        start_angle: Angle where the first span starts, in degrees.
        angle_margin: Gap inserted after every span when there are two or
            more values.

    Returns:
        List of ``AngularSpan``. Angles are not normalized; they may exceed 360.

    Raises:
        DegenerateInput: If ``values`` is empty or sums to a non-positive total.
        MarginOverflow: If the margins consume the whole circle.
    """
    weights = np.asarray(values, dtype=float)
    n = int(weights.size)
    total = float(weights.sum()) if n else 0.0
    if n == 0 or total <= 0:
        raise DegenerateInput("cannot allocate angles for a non-positive total")

    if n == 1:
        return [AngularSpan(float(start_angle), float(start_angle) + FULL_CIRCLE)]

    available = FULL_CIRCLE - n * angle_margin
    if available <= 0:
        raise MarginOverflow(
            f"{n} slices with a {angle_margin} degree margin leave no room for the slices"
        )

    sweeps = weights / total * available
    # start_i = S + sum(sweeps[:i]) + i * margin
    starts = start_angle + np.concatenate(([0.0], np.cumsum(sweeps)[:-1])) + np.arange(n) * angle_margin
    ends = starts + sweeps
    return [AngularSpan(float(s), float(e)) for s, e in zip(starts, ends)]


class AngleAllocator:
    """Stateless wrapper around :func:`allocate_angles` bound to a config."""

    def __init__(
        self,
        start_angle: float = 0,
        angle_margin: float = 0,
        logger: Optional[logging.Logger] = None,
    ):
        self.start_angle = start_angle
        self.angle_margin = angle_margin
        self.logger = logger or logging.getLogger(__name__)

    def allocate(self, values: Sequence[float]) -> List[AngularSpan]:
        spans = allocate_angles(values, self.start_angle, self.angle_margin)
        self.logger.debug(
            "allocated %d span(s) from %s with margin %s",
            len(spans),
            self.start_angle,
            self.angle_margin,
        )
        return spans

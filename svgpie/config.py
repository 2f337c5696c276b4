from __future__ import annotations

"""Chart configuration.

Kept separate from `svgpie.api` so the compute and render layers can import
it without pulling in the component wrapper.
"""

import logging
import math
import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from .errors import ChartConfigError

# Extra radius granted to an expanded slice when nothing else is configured.
DEFAULT_EXPAND_SIZE = 3

# camelCase prop names accepted by ``ChartConfig.from_mapping``
_PROP_ALIASES = {
    "startAngle": "start_angle",
    "angleMargin": "angle_margin",
    "viewBoxSize": "view_box_size",
    "expandSize": "expand_size",
    "expandOnHover": "expand_on_hover",
    "expandedIndex": "expanded_index",
    "usePatterns": "use_patterns",
    "strokeColor": "stroke_color",
    "strokeWidth": "stroke_width",
    "strokeLinejoin": "stroke_linejoin",
    "transitionDuration": "transition_duration",
    "transitionTimingFunction": "transition_timing_function",
}


@dataclass
class ChartConfig:
    """Configuration understood by the composer and renderer.

    Attributes:
        start_angle: Angle in degrees where the first slice starts. 0 points
            right and angles grow clockwise.
        angle_margin: Gap in degrees inserted after every slice.
        view_box_size: Side of the unexpanded square canvas.
        expand_size: Extra radius given to an expanded slice.
        expand_on_hover: Expand the hovered slice (uncontrolled mode).
        expanded_index: Index of the slice to expand (controlled mode); any
            negative value means "not controlled".
        use_patterns: Fill slices with generated texture patterns.
        stroke_color, stroke_width, stroke_linejoin: Slice outline styling.
        transition_duration, transition_timing_function: Passed to the
            renderer as a CSS transition; svgpie does not animate anything.
        logger: Logger to use; defaults to the module logger.
    """

    start_angle: float = 0
    angle_margin: float = 0
    view_box_size: float = 100
    expand_size: float = DEFAULT_EXPAND_SIZE
    expand_on_hover: bool = False
    expanded_index: int = -1
    use_patterns: bool = False
    # Renderer passthroughs
    stroke_color: str = "#fff"
    stroke_width: float = 1
    stroke_linejoin: str = "round"
    transition_duration: str = "0s"
    transition_timing_function: str = "ease-out"
    # Logging
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        for name in (
            "start_angle",
            "angle_margin",
            "view_box_size",
            "expand_size",
            "stroke_width",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ChartConfigError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ChartConfigError(f"{name} must be finite, got {value!r}")
        if self.view_box_size <= 0:
            raise ChartConfigError("view_box_size must be positive")
        if self.expand_size < 0:
            raise ChartConfigError("expand_size must not be negative")
        if self.angle_margin < 0:
            raise ChartConfigError("angle_margin must not be negative")
        if self.stroke_width < 0:
            raise ChartConfigError("stroke_width must not be negative")
        if self.expanded_index is None:
            self.expanded_index = -1
        if isinstance(self.expanded_index, bool) or not isinstance(
            self.expanded_index, numbers.Integral
        ):
            raise ChartConfigError(
                f"expanded_index must be an integer, got {self.expanded_index!r}"
            )
        self.expanded_index = int(self.expanded_index)

    @property
    def center(self) -> float:
        """Center coordinate (and base radius) of the unexpanded chart."""
        return self.view_box_size / 2

    def with_overrides(self, **overrides: Any) -> "ChartConfig":
        """Return a validated copy with ``overrides`` applied."""
        return replace(self, **overrides)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ChartConfig":
        """Build a config from a mapping of props.

        Both snake_case field names and the camelCase prop names of the
        original chart component are accepted. Unknown keys raise
        ``ChartConfigError``.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = _PROP_ALIASES.get(key, key)
            if name not in known:
                raise ChartConfigError(f"Unknown chart option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

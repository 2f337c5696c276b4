"""Type definitions for the compute module.

This module defines the immutable value types that flow from the caller's
data through angle allocation and into the renderer.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ...errors import InvalidDataItem


@dataclass(frozen=True)
class PatternSpec:
    """Texture overlay for one slice.

    Attributes:
        id: Identifier of the generated ``<pattern>``. When ``None`` the
            slice index is used instead.
        body: SVG fragment drawn on top of the slice color, inserted verbatim.
    """

    id: Optional[str] = None
    body: str = ""

    @classmethod
    def coerce(cls, value: Union["PatternSpec", Mapping[str, Any], str, None]) -> Optional["PatternSpec"]:
        """Build a ``PatternSpec`` from the loose forms callers pass around.

        Accepts an existing spec, a mapping with ``id`` and ``pattern`` (or
        ``body``) keys, or a bare string taken as the body.
        """
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(body=value)
        if isinstance(value, Mapping):
            pid = value.get("id")
            body = value.get("pattern", value.get("body", "")) or ""
            return cls(id=None if pid is None else str(pid), body=str(body))
        raise InvalidDataItem(f"Unsupported pattern specification: {value!r}")


@dataclass(frozen=True)
class DataItem:
    """One weighted entry of the chart.

    Attributes:
        color: Fill color of the slice (any SVG paint value).
        value: Weight of the slice. Values ``<= 0`` are excluded from the chart.
        title: Optional tooltip text.
        pattern: Optional texture overlay used when patterns are enabled.
        expanded: Statically expand this slice.
        href: Optional link target for the slice.
    """

    color: str
    value: float
    title: Optional[str] = None
    pattern: Optional[PatternSpec] = None
    expanded: bool = False
    href: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.color, str) or not self.color:
            raise InvalidDataItem(f"color must be a non-empty string, got {self.color!r}")
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise InvalidDataItem(f"value must be a number, got {self.value!r}")
        if not math.isfinite(float(self.value)):
            raise InvalidDataItem(f"value must be finite, got {self.value!r}")
        object.__setattr__(self, "pattern", PatternSpec.coerce(self.pattern))

    @property
    def visible(self) -> bool:
        """Whether the item occupies angular space."""
        return self.value > 0

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "DataItem":
        """Build an item from a plain mapping.

        Raises:
            InvalidDataItem: If ``color`` or ``value`` is missing or invalid.
        """
        if not isinstance(mapping, Mapping):
            raise InvalidDataItem(f"data item must be a mapping, got {type(mapping).__name__}")
        missing = [k for k in ("color", "value") if mapping.get(k) is None]
        if missing:
            raise InvalidDataItem(f"data item is missing required field(s): {', '.join(missing)}")
        return cls(
            color=mapping["color"],
            value=mapping["value"],
            title=mapping.get("title"),
            pattern=mapping.get("pattern"),
            expanded=bool(mapping.get("expanded", False)),
            href=mapping.get("href"),
        )


@dataclass(frozen=True)
class AngularSpan:
    """Angular extent of one slice, in degrees, clockwise from the +x axis."""

    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def is_full_circle(self) -> bool:
        return self.sweep >= 360

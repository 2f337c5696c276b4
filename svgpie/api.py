"""High-level public API for svgpie.

This module exposes the entry points that are safe to use from applications
and notebooks:

- `PieChart`: a stateful chart component. It keeps the expanded-slice state
  between renders and receives hover/touch events from the host UI.
- `render_pie`: one-shot helper that renders data straight to a `Chart`.

Both accept a pandas DataFrame, an iterable of mappings or an iterable of
`DataItem` objects; see :func:`svgpie.io.iter_items`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Union

from .compute.core.types import DataItem
from .compute.expansion import ExpansionStateMachine
from .config import ChartConfig
from .io import iter_items
from .render.pie_chart import ChartComposer, ChartDescription, PieChartRenderer, visible_items

# on_sector_hover(item, index, event); item and index are None on leave
HoverCallback = Callable[[Optional[DataItem], Optional[int], Any], None]


@dataclass
class Chart:
    svg: str
    description: ChartDescription

    """Container for a rendered chart.

    Attributes:
        svg: Standalone SVG document.
        description: The composed geometry the SVG was produced from.
    """

    def save_svg(self, path: str) -> None:
        """Write the SVG document to disk.

        Args:
            path: Destination file path. Parent directories must exist.
        """
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.svg)

    def save_html(self, path: str) -> None:
        """Write a minimal HTML page embedding the SVG inline."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(
                "<!DOCTYPE html>\n<html><head><meta charset=\"utf-8\"></head>"
                f"<body>{self.svg}</body></html>\n"
            )

    def save(self, path: str) -> None:
        """Save the chart based on the file extension.

        Raises:
            ValueError: If the extension is not one of ``.svg`` or ``.html``.
        """
        ext = os.path.splitext(path)[1].lower()
        if ext == ".svg":
            self.save_svg(path)
        elif ext in (".html", ".htm"):
            self.save_html(path)
        else:
            raise ValueError(f"Unknown extension for Chart.save(): {ext}")

    # Jupyter-friendly inline display
    def _repr_svg_(self) -> str:  # pragma: no cover - visual
        return self.svg


def _coerce_config(config: Union[ChartConfig, Mapping[str, Any], None]) -> ChartConfig:
    if config is None:
        return ChartConfig()
    if isinstance(config, ChartConfig):
        return config
    return ChartConfig.from_mapping(config)


class PieChart:
    """Stateful pie chart.

    Holds the current data and configuration plus one
    ``ExpansionStateMachine``. Hover/touch indices refer to the visible
    (positive-value) slices, in order.

    Args:
        data: Chart data; see :func:`svgpie.io.iter_items`.
        config: ``ChartConfig`` or a mapping of options.
        on_sector_hover: Called as ``(item, index, event)`` on every enter
            and as ``(None, None, event)`` on every leave.
    """

    def __init__(
        self,
        data: Any = (),
        config: Union[ChartConfig, Mapping[str, Any], None] = None,
        on_sector_hover: Optional[HoverCallback] = None,
    ):
        self.config = _coerce_config(config)
        self.logger = self.config.logger or logging.getLogger(__name__)
        self.items: List[DataItem] = list(iter_items(data))
        self.on_sector_hover = on_sector_hover
        self.expansion = ExpansionStateMachine(
            self.config.expanded_index, self.config.expand_on_hover
        )

    @property
    def visible(self) -> List[DataItem]:
        return visible_items(self.items)

    @property
    def expanded_index(self) -> Optional[int]:
        return self.expansion.expanded_index

    def update(
        self,
        data: Any = None,
        config: Union[ChartConfig, Mapping[str, Any], None] = None,
    ) -> None:
        """Apply new data and/or configuration.

        The configured expanded index is re-applied on every call, so a
        controlling index always overrides hover state.
        """
        if data is not None:
            self.items = list(iter_items(data))
        if config is not None:
            self.config = _coerce_config(config)
            self.logger = self.config.logger or self.logger
        self.expansion.configure(self.config.expanded_index, self.config.expand_on_hover)

    def sector_enter(self, index: int, event: Any = None) -> None:
        """Hover/touch start on visible slice ``index``."""
        shown = self.visible
        if not 0 <= index < len(shown):
            self.logger.debug("ignoring hover on index %s; %d slice(s) visible", index, len(shown))
            return
        if self.expansion.enter(index):
            self.logger.debug("expanded slice %d", index)
        if self.on_sector_hover is not None:
            self.on_sector_hover(shown[index], index, event)

    def sector_leave(self, event: Any = None) -> None:
        """Hover/touch end."""
        if self.expansion.leave():
            self.logger.debug("collapsed expanded slice")
        if self.on_sector_hover is not None:
            self.on_sector_hover(None, None, event)

    touch_start = sector_enter
    touch_end = sector_leave

    def compose(self) -> Optional[ChartDescription]:
        return ChartComposer(self.config, self.logger).compose(self.items, self.expansion)

    def render(self) -> Optional[Chart]:
        """Render the current state, or return ``None`` when there is nothing to draw."""
        description = self.compose()
        if description is None:
            return None
        svg = PieChartRenderer(self.config).render(description)
        return Chart(svg=svg, description=description)


def render_pie(
    data: Any,
    config: Union[ChartConfig, Mapping[str, Any], None] = None,
) -> Optional[Chart]:
    """Render ``data`` as a pie chart in one call.

    Args:
        data: Chart data; see :func:`svgpie.io.iter_items`.
        config: Optional configuration overriding the defaults.

    Returns:
        A :class:`Chart`, or ``None`` if no item has a positive value.

    Raises:
        InvalidDataItem: If an item lacks ``color`` or ``value``.
        MarginOverflow: If the margins leave no room for the slices.
    """
    return PieChart(data, config).render()

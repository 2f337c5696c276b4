"""Expanded-slice tracking.

The chart expands at most one slice at a time through this machine. The
index comes either from configuration (controlled mode) or from hover/touch
events (uncontrolled mode). A non-negative configured index always wins and
is re-applied on every configuration update.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.types import DataItem

UNCONTROLLED = "uncontrolled"
CONTROLLED = "controlled"


@dataclass(frozen=True)
class ExpansionState:
    mode: str = UNCONTROLLED
    index: Optional[int] = None


class ExpansionStateMachine:
    """Tracks which slice, if any, is expanded.

    Example:
        >>> machine = ExpansionStateMachine(expand_on_hover=True)
        >>> machine.enter(1)
        True
        >>> machine.is_expanded(1)
        True
        >>> machine.leave()
        True
        >>> machine.expanded_index is None
        True
    """

    def __init__(self, expanded_index: int = -1, expand_on_hover: bool = False):
        self._state = ExpansionState()
        self.expand_on_hover = expand_on_hover
        self.configure(expanded_index, expand_on_hover)

    @property
    def state(self) -> ExpansionState:
        return self._state

    @property
    def controlled(self) -> bool:
        return self._state.mode == CONTROLLED

    @property
    def expanded_index(self) -> Optional[int]:
        return self._state.index

    def configure(self, expanded_index: Optional[int], expand_on_hover: bool) -> None:
        """Apply a configuration update."""
        self.expand_on_hover = bool(expand_on_hover)
        if expanded_index is not None and expanded_index >= 0:
            self._state = ExpansionState(CONTROLLED, int(expanded_index))
        elif self.controlled:
            self._state = ExpansionState(UNCONTROLLED, None)

    def enter(self, index: int) -> bool:
        """Handle a hover/touch start on ``index``; returns True if state changed."""
        return self._set_hover(index)

    def leave(self) -> bool:
        """Handle a hover/touch end; returns True if state changed."""
        return self._set_hover(None)

    def _set_hover(self, index: Optional[int]) -> bool:
        if self.controlled or not self.expand_on_hover:
            return False
        if self._state.index == index:
            return False
        self._state = ExpansionState(UNCONTROLLED, index)
        return True

    def is_expanded(self, index: int, item: Optional[DataItem] = None) -> bool:
        """Whether slice ``index`` is drawn with the expanded radius.

        A statically expanded ``item`` is always expanded, independent of
        the tracked index.
        """
        if item is not None and item.expanded:
            return True
        if self._state.index is None:
            return False
        tracking = self.controlled or self.expand_on_hover
        return tracking and self._state.index == index

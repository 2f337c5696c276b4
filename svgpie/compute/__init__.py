"""Angle allocation and interaction state for pie charts."""

from .angles import AngleAllocator, allocate_angles
from .core.types import AngularSpan, DataItem, PatternSpec
from .expansion import ExpansionState, ExpansionStateMachine

__all__ = [
    "AngleAllocator",
    "AngularSpan",
    "DataItem",
    "ExpansionState",
    "ExpansionStateMachine",
    "PatternSpec",
    "allocate_angles",
]

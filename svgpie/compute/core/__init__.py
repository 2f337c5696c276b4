"""Core value types."""

from .types import AngularSpan, DataItem, PatternSpec

__all__ = ["AngularSpan", "DataItem", "PatternSpec"]

from .base import iter_items

__all__ = ["iter_items"]

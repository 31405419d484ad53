"""Lazy views that yield elements up to the first occurrence of a delimiter."""

__version__ = "0.0.1"
__all__ = ["view", "demo"]
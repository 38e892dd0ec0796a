"""Helpers for aggregating, searching, mapping and merging lists."""

__version__ = "0.1.0"

__all__ = ["aggregate", "contains", "mapping", "union"]
"""Maximum, minimum and sum over a collection of values."""

from __future__ import annotations

from typing import Iterable, TypeVar

__all__ = ["max_value", "min_value", "sum_values"]

T = TypeVar("T")


def max_value(values: Iterable[T]) -> T:
    """Return the largest value; raise ``ValueError`` when there is none.

    Works for numbers and strings. Mind float precision.
    """
    items = list(values)
    if not items:
        raise ValueError("Max: empty slice")
    return max(items)


def min_value(values: Iterable[T]) -> T:
    """Return the smallest value; raise ``ValueError`` when there is none.

    Works for numbers and strings. Mind float precision.
    """
    items = list(values)
    if not items:
        raise ValueError("Min: empty slice")
    return min(items)


def sum_values(values: Iterable[T]) -> T:
    """Return the sum of numeric values, or ``0`` when there are none."""
    return sum(values, 0)
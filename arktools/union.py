"""Set union of two sequences."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, TypeVar

from arktools.contains import contains_func

__all__ = ["union_set", "union_set_func"]

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def _deduplicate_func(data: list[T], equal: Callable[[T, T], bool]) -> list[T]:
    """Keep each element only if no later element is equal to it."""
    return [
        value
        for pos, value in enumerate(data)
        if not contains_func(data[pos + 1 :], lambda other, v=value: equal(other, v))
    ]


def union_set(src: Iterable[H] | None, dst: Iterable[H] | None) -> list[H]:
    """Return the distinct elements found in either input, in no fixed order."""
    return list(set(dst or ()) | set(src or ()))


def union_set_func(
    src: Iterable[T] | None,
    dst: Iterable[T] | None,
    equal: Callable[[T, T], bool],
) -> list[T]:
    """Return the union of ``src`` and ``dst`` deduplicated with ``equal``.

    Elements of ``dst`` come first, then those of ``src``; among equal
    elements the last one is kept. Prefer :func:`union_set` for hashable
    values.
    """
    combined = [*(dst or ()), *(src or ())]
    return _deduplicate_func(combined, equal)
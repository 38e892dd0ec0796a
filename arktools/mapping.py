"""Transforming sequences into lists and dictionaries."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, TypeVar

__all__ = ["map_items", "filter_map", "to_map", "to_map_v"]

S = TypeVar("S")
D = TypeVar("D")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def map_items(src: Iterable[S] | None, fn: Callable[[int, S], D]) -> list[D]:
    """Return ``[fn(index, value), ...]`` for every element of ``src``."""
    return [fn(idx, value) for idx, value in enumerate(src or ())]


def filter_map(
    src: Iterable[S] | None, fn: Callable[[int, S], tuple[D, bool]]
) -> list[D]:
    """Map and filter in one pass.

    ``fn(index, value)`` returns ``(result, keep)``; results whose ``keep``
    flag is false are dropped. Every element is visited regardless.
    """
    kept: list[D] = []
    for idx, value in enumerate(src or ()):
        result, keep = fn(idx, value)
        if keep:
            kept.append(result)
    return kept


def to_map(elements: Iterable[V] | None, fn: Callable[[V], K]) -> dict[K, V]:
    """Index ``elements`` by the key ``fn`` extracts; later duplicates win."""
    return to_map_v(elements, lambda element: (fn(element), element))


def to_map_v(
    elements: Iterable[S] | None, fn: Callable[[S], tuple[K, V]]
) -> dict[K, V]:
    """Build a dict from the ``(key, value)`` pairs ``fn`` returns.

    When two elements yield the same key, the later one wins. An empty or
    ``None`` input gives an empty dict.
    """
    return dict(fn(element) for element in elements or ())
"""Membership tests over sequences."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, TypeVar

__all__ = [
    "contains",
    "contains_func",
    "contains_any",
    "contains_any_func",
    "contains_all",
    "contains_all_func",
]

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

EqualFunc = Callable[[T, T], bool]
MatchFunc = Callable[[T], bool]


def contains(src: Iterable[T] | None, dst: T) -> bool:
    """Return whether ``dst`` occurs in ``src``."""
    return contains_func(src, lambda value: value == dst)


def contains_func(src: Iterable[T] | None, match: MatchFunc[T]) -> bool:
    """Return whether any element of ``src`` satisfies ``match``.

    Prefer :func:`contains` where plain equality is enough.
    """
    return any(match(value) for value in src or ())


def contains_any(src: Iterable[H] | None, dst: Iterable[H] | None) -> bool:
    """Return whether ``src`` holds at least one element of ``dst``."""
    present = set(src or ())
    return any(value in present for value in dst or ())


def contains_any_func(
    src: Iterable[T] | None,
    dst: Iterable[T] | None,
    equal: EqualFunc[T],
) -> bool:
    """Return whether ``src`` holds an element equal to any element of ``dst``.

    ``equal(src_item, dst_item)`` decides equality. Prefer
    :func:`contains_any` for hashable values.
    """
    candidates = list(src or ())
    return any(
        equal(candidate, wanted)
        for wanted in dst or ()
        for candidate in candidates
    )


def contains_all(src: Iterable[H] | None, dst: Iterable[H] | None) -> bool:
    """Return whether every element of ``dst`` occurs in ``src``."""
    present = set(src or ())
    return all(value in present for value in dst or ())


def contains_all_func(
    src: Iterable[T] | None,
    dst: Iterable[T] | None,
    equal: EqualFunc[T],
) -> bool:
    """Return whether every element of ``dst`` has an equal element in ``src``.

    ``equal(src_item, dst_item)`` decides equality. Prefer
    :func:`contains_all` for hashable values.
    """
    candidates = list(src or ())
    return all(
        contains_func(candidates, lambda candidate, w=wanted: equal(candidate, w))
        for wanted in dst or ()
    )
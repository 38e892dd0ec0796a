from dataclasses import dataclass

import pytest

from arktools.union import union_set, union_set_func


@dataclass(frozen=True)
class Item:
    key: int
    tag: str


CASES = [
    ([1, 2, 3], [4, 5, 6, 1], [1, 2, 3, 4, 5, 6]),
    ([], [1, 3], [1, 3]),
    ([1, 3], [], [1, 3]),
    ([], [], []),
]


@pytest.mark.parametrize("src,dst,want", CASES)
def test_union_set(src, dst, want):
    assert sorted(union_set(src, dst)) == want


@pytest.mark.parametrize("src,dst,want", CASES)
def test_union_set_func(src, dst, want):
    assert sorted(union_set_func(src, dst, lambda a, b: a == b)) == want


def test_union_set_example():
    assert sorted(union_set([1, 3, 4, 5], [1, 4, 7])) == [1, 3, 4, 5, 7]


def test_union_set_func_example():
    res = union_set_func([1, 3, 4, 5], [1, 4, 7], lambda a, b: a == b)
    assert sorted(res) == [1, 3, 4, 5, 7]


def test_union_set_handles_none():
    assert sorted(union_set(None, [2, 1])) == [1, 2]
    assert union_set_func(None, None, lambda a, b: a == b) == []


def test_union_set_removes_duplicates_within_one_input():
    assert sorted(union_set([1, 1, 2], [2, 2])) == [1, 2]


def test_union_set_func_keeps_last_of_equal_elements():
    src = [Item(1, "src")]
    dst = [Item(1, "dst"), Item(2, "dst")]
    res = union_set_func(src, dst, lambda a, b: a.key == b.key)
    assert res == [Item(2, "dst"), Item(1, "src")]


def test_union_set_func_works_with_unhashable_values():
    res = union_set_func([[1], [2]], [[2], [3]], lambda a, b: a == b)
    assert sorted(res) == [[1], [2], [3]]
# arktools

Small, dependency-free helpers for everyday list work: min/max/sum, membership
checks, mapping a list into another list or a dict, and set-style unions.

## Installation

```
pip install arktools
```

To run the test suite, install the test extra and run pytest:

```
pip install "arktools[test]"
pytest
```

## Aggregates

```python
from arktools.aggregate import max_value, min_value, sum_values

max_value([2, 3, 1])        # 3
min_value(["a", "c", "b"])  # "a"
sum_values([1, 2, 3])       # 6
sum_values([])              # 0
```

`max_value` and `min_value` accept any iterable of comparable values (numbers
or strings) and raise `ValueError` when it is empty. `sum_values` adds numbers
starting from `0`.

## Membership

```python
from arktools.contains import (
    contains, contains_func, contains_any, contains_any_func,
    contains_all, contains_all_func,
)

contains([1, 2, 3], 3)                                        # True
contains_func([1, 2, 3], lambda v: v > 2)                     # True
contains_any([1, 2, 3], [4, 5, 9])                            # False
contains_any_func([1, 2, 3], [3, 6], lambda a, b: a == b)     # True
contains_all([1, 2, 3], [3, 1])                               # True
contains_all_func([1, 2, 3], [3, 1, 4], lambda a, b: a == b)  # False
```

`None` is treated as an empty input everywhere. `contains_any` and
`contains_all` need hashable elements; the `_func` variants take an
`equal(src_item, dst_item)` callable and work with any values. An empty `dst`
makes `contains_all` return `True` and `contains_any` return `False`.

## Mapping

```python
from arktools.mapping import map_items, filter_map, to_map, to_map_v

map_items([1, 2, 3], lambda idx, v: str(v))               # ["1", "2", "3"]
filter_map([1, -2, 3], lambda idx, v: (str(v), v >= 0))  # ["1", "3"]
to_map(["1", "2"], int)                                  # {1: "1", 2: "2"}
to_map_v(["1", "2"], lambda s: (int(s), int(s)))         # {1: 1, 2: 2}
```

`map_items` and `filter_map` pass each element's index along with its value.
`filter_map` keeps a result only when the callable's second return value is
true. For `to_map` and `to_map_v`, when two elements produce the same key the
later one wins; `None` or an empty input gives an empty dict.

## Unions

```python
from arktools.union import union_set, union_set_func

sorted(union_set([1, 3, 4, 5], [1, 4, 7]))                            # [1, 3, 4, 5, 7]
sorted(union_set_func([1, 3, 4, 5], [1, 4, 7], lambda a, b: a == b))  # [1, 3, 4, 5, 7]
```

Both return each element once. `union_set` needs hashable elements and its
result has no fixed order. `union_set_func` deduplicates with the given
`equal` callable, keeping the last of any equal elements from `dst` followed
by `src`.

## What this package does not do

There are no helpers for inserting or removing list elements by position, and
no filtering of a list in place; use Python's own `list.insert`, `del`,
`list.pop` and comprehensions for those.
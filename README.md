# ingotkit

A collection of small, dependency-free building blocks for Python 3.10 and later.

## Installation

```
pip install ingotkit
```

## What is inside

- `ingotkit.delayed.Delayed`: holds a value (read through `.value`); a new value given to
  `set_value` only takes effect once `step(dt)` has advanced time to the timeout
  (default 1.0). `set_now` applies a value at once. A timeout that is not greater than 0,
  or a negative `dt`, raises `ValueError`.
- `ingotkit.dynamic.Dynamic`: calls a function once on construction and again every time
  `step(dt)` reaches the interval (default 1.0); the latest result is in `.value`.
- `ingotkit.id_manager.IDManager`: an endless iterator of integer ids starting at 0 that
  hands freed ids out again, most recently freed first. `free` raises `OutOfRangeError`
  for an id never handed out and `ValueError` for an id already freed.
- `ingotkit.late.Late`: a slot that is filled once with `set`; `is_set` tells whether it
  has been. Reading `.value` before it is set, or calling `set` twice, raises
  `LateInitError`.
- `ingotkit.prime_iter.PrimeIter` and `is_prime`: `PrimeIter(start)` yields, forever and in
  ascending order, the primes greater than `start` (from 2 when `start` is below 2).
- `ingotkit.reactive.Reactive`: a value whose `watch(on_change)` returns a derived
  `Reactive` kept up to date whenever the value changes; `unwatch` detaches it. Setting a
  value of the same type that compares equal to the current one notifies nobody.
- `ingotkit.reactivity_manager.ReactivityManager`: derives values from one, two or three
  reactives (`watch`, `watch2`, `watch3`) and detaches every watcher it registered on
  `close` or when leaving a `with` block.
- `ingotkit.tree_map.TreeMap` and `ingotkit.tree_set.TreeSet`: ordered containers built on
  a self-balancing AVL tree, iterated in ascending order, with `put`, `bulk_put`, `has`,
  `remove`, `min`, `max` and `clear`. `TreeMap` also supports `map[key]` (raising
  `KeyError` for a missing key), `get(key, default)` and `items()`; `TreeSet` has
  `to_list()`. Keys only need `<` and `>`.
- `ingotkit.protocols`: the `Hashable` (`hash_parts`) and `ToWords` (`to_words`)
  protocols, and the `RADIX` constant (10).

## Examples

```python
from ingotkit.id_manager import IDManager

ids = IDManager()
first, second = next(ids), next(ids)   # 0, 1
ids.free(first)
assert next(ids) == 0
```

```python
from ingotkit.delayed import Delayed

value = Delayed(0, 1.0)
value.set_value(1)
assert value.value == 0
value.step(1.0)
assert value.value == 1
```

```python
from ingotkit.reactive import Reactive
from ingotkit.reactivity_manager import ReactivityManager

width, height = Reactive(2), Reactive(3)
with ReactivityManager() as manager:
    area = manager.watch2(width, height, lambda w, h: w * h)
    width.set_value(4)
    assert area.value == 12
```

```python
from ingotkit.tree_map import TreeMap

scores = TreeMap([(3, "c"), (1, "a"), (2, "b")])
assert list(scores) == [1, 2, 3]
assert scores.min() == (1, "a")
```

## What it does not do

ingotkit is a library only: it has no command-line tool, and its containers and values
live in memory with no persistence. Reactive values are not thread-safe.

## Running the tests

```
pip install -e ".[test]"
pytest
```
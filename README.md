# linkedtable

`linkedtable` provides an insertion-ordered hash map and hash set. Both look
keys up through a `dict` and keep their order in a doubly-linked chain, so
lookup, insertion and removal at **either** end take constant time, much like
`collections.deque`.

- `linkedtable.linkedmap.LinkedHashMap` is a mutable mapping that remembers
  the order of its entries.
- `linkedtable.linkedset.LinkedHashSet` is a mutable set that remembers the
  order of its elements.
- `linkedtable.serialization` writes and reads both as JSON, keeping the order.

The package has no dependencies beyond the standard library.

## Installation

```
pip install linkedtable
```

## The map

```python
from linkedtable.linkedmap import LinkedHashMap

m = LinkedHashMap()
m.insert_back("b", 2)
m.insert_front("a", 1)
m.insert_back("c", 3)
list(m.keys())          # ['a', 'b', 'c']

m.front()               # ('a', 1)
m.back()                # ('c', 3)
m.pop_front()           # ('a', 1)
m.pop_back()            # ('c', 3)
```

`front`, `back`, `pop_front` and `pop_back` return `None` when the map is
empty. The constructor takes an optional mapping or iterable of
`(key, value)` pairs, and an optional `capacity` that `capacity()` reports
back (it is never less than the number of entries).

### Ordering contract

If a key is already present, `insert_back` and `insert_front` replace only its
value and return the old value; for a new key they return `None`. The entry
keeps its position. `insert` and `m[key] = value` behave like `insert_back`.
To reorder an entry, call `move_to_back` or `move_to_front`, which return
whether the key was found:

```python
m = LinkedHashMap([("a", 1), ("b", 2), ("c", 3)])
m.insert_back("a", 99)  # returns 1; the order is still a, b, c
m.move_to_back("a")     # returns True; the order is now b, c, a
```

### Dictionary-style access

The map supports `m[key]` (raising `KeyError` for a missing key),
`m[key] = value`, `del m[key]`, `key in m`, `contains_key(key)`, `len(m)`,
`m.get(key, default)` and `get_key_value(key)`. Iterating over the map yields
its keys in order, and `reversed(m)` yields them back to front.

`remove(key)` returns the removed value and `remove_entry(key)` the removed
`(key, value)` pair; both return `None` if the key is absent.

`items()`, `keys()` and `values()` return iterators that can also be walked
from the back with `next_back()`, and that know how many items remain
(`len(it)` and `it.size_hint()`):

```python
it = LinkedHashMap([(1, 10), (2, 20), (3, 30)]).items()
next(it)         # (1, 10)
it.next_back()   # (3, 30)
len(it)          # 1
```

Two maps compare equal only when they hold the same pairs **in the same
order**. `repr(m)` looks like `{'a': 1, 'b': 2}`.

### Entries

`entry(key)` returns an `OccupiedEntry` or a `VacantEntry` (both from
`linkedtable.entry`) for reading or updating one slot in place:

```python
counts = LinkedHashMap()
for word in ["x", "y", "x"]:
    counts.entry(word).and_modify(lambda v: v + 1).or_insert(1)
counts["x"]  # 2
```

- `or_insert(default)`, `or_insert_with(factory)` and `or_default(factory)`
  insert at the back when the entry is vacant and return the stored value.
- `and_modify(func)` replaces an occupied entry's value with `func(value)`.
- An occupied entry has `get()`, `insert(value)` (returns the old value),
  `remove()` and `remove_entry()`.
- A vacant entry has `insert(value)` and `into_key()`.

### Other operations

- `retain(predicate)` keeps only the entries for which `predicate(key, value)`
  is true, visiting them from front to back.
- `drain()` empties the map at once and returns an iterator over the former
  `(key, value)` pairs in order. It can be used as a context manager; closing
  it discards whatever was not consumed.
- `clear()`, `extend(items)` and `copy()` work as their names say.

## The set

```python
from linkedtable.linkedset import LinkedHashSet

s = LinkedHashSet(["a", "b", "c"])
s.insert_back("a")      # False: already present, position unchanged
s.move_to_front("c")    # True
list(s)                 # ['c', 'a', 'b']
s.pop_front()           # 'c'
s.is_subset(LinkedHashSet(["a", "b", "z"]))  # True
```

The set also has `insert_front`, `insert`, `add`, `contains`, `get`, `front`,
`back`, `pop_back`, `take`, `remove`, `discard`, `retain(predicate)`,
`drain`, `clear`, `extend`, `copy`, `is_superset`, `is_disjoint`, and
`iter()`, which returns a double-ended iterator. Note that `remove(value)`
returns whether the element was present instead of raising `KeyError`.
Like the map, two sets are equal only when their elements are in the same
order.

## JSON

`linkedtable.serialization` keeps the order of the entries when writing and
when reading:

```python
from linkedtable.linkedmap import LinkedHashMap
from linkedtable.linkedset import LinkedHashSet
from linkedtable.serialization import map_to_json, map_from_json, set_to_json, set_from_json

map_to_json(LinkedHashMap([("c", 3), ("a", 1)]))  # '{"c":3,"a":1}'
set_to_json(LinkedHashSet(["c", "a", "b"]))       # '["c","a","b"]'
list(map_from_json('{"x":10,"y":20}').keys())     # ['x', 'y']
list(set_from_json('[10, 30, 20]'))               # [10, 30, 20]
```

The output is compact JSON produced by the standard `json` module, so
non-string map keys are written the way `json.dumps` writes them.
`map_from_json` raises `ValueError` unless the document is an object, and
`set_from_json` unless it is an array.

## Building blocks

`linkedtable.chain` holds `Node` and `Chain`, the sentinel-anchored
doubly-linked list behind both containers, and `linkedtable.iterators` holds
`NodeIter` and `Drain`, the iterators they return.
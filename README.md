# wcstl

A small toolkit of containers, iterators and algorithms modelled on the
standard template library.

## Modules

- `wcstl.vector`: `Vector` is a growable sequence. It tracks its capacity
  separately from its size. The capacity starts at 16. When an append or
  insert finds the vector full, the capacity grows by half again.
  `reserve` only ever grows the capacity. `shrink_to_fit` cuts it down to
  the size. `VectorIterator` is a random-access position inside a `Vector`.
  You can read and write the element it points at through its `value`
  property.
- `wcstl.iterator`: `Iterator` is the abstract base for iterators.
  `IterCategory` and `IterOp` are flag enums. An iterator asked for an
  operation missing from its `ops` flags raises `IteratorOperationError`.
  `pre_inc` and `pre_dec` move the iterator and return its state from
  before the step. `post_inc` and `post_dec` return its state after the
  step.
- `wcstl.algo`: algorithms over iterables and mutable sequences.
  - Non-modifying: `none_of`, `all_of`, `any_of`, `for_each`,
    `for_each_n`, `count`, `count_if`, `find`, `find_if`, `find_if_not`.
    The `find` family returns an index, or `None` when nothing matches.
  - Modifying: `copy`, `copy_if`, `copy_n`, `copy_backward`, `fill`,
    `fill_n`, `transform`, `transform2`. These take output positions as
    plain indices into a mutable sequence.
- `wcstl.numbers`: mathematical constants `E`, `LOG2E`, `LOG10E`, `PI`,
  `INV_PI`, `INV_SQRTPI`, `LN2`, `LN10`, `SQRT2`, `SQRT3`, `INV_SQRT3`,
  `EGAMMA` and `PHI`.
- `wcstl.source_location`: `SourceLocation.current()` records its caller's
  line, file and function. The column is always 0.

## Installation

```
pip install .
```

## Usage

```python
from wcstl.vector import Vector

vec = Vector()
vec.push_back(10.0)
vec.push_back(123.32)
vec.push_back(3.32)
vec.insert(1, 3.15)
vec.erase(2)

print(vec.size(), vec.capacity())   # 3 16
print(vec.front(), vec.back())      # 10.0 3.32

it = vec.begin()
print(it.distance(vec.end()))       # 3
```

Range checks differ between the two ways of reading:

- `at` and indexing (`vec[i]`) check the position against the size, and
  raise `IndexError` when it is out of range.
- `get` checks only against the capacity. It can therefore return slots
  beyond the size, which keep whatever they last held.

```python
from wcstl import algo

values = [3, 1, 4, 1, 5]
print(algo.count(values, 1))                    # 2
print(algo.find_if(values, lambda x: x > 3))    # 2

out = [0] * 5
end = algo.transform(values, out, 0, lambda x: x * 2)
print(out, end)                                 # [6, 2, 8, 2, 10] 5
```

## Scope

`Vector` is the only container. `VectorIterator` is the only concrete
iterator.

## Demo

The package installs a small command. It builds a vector, inserts and
erases elements, and prints the vector's capacity:

```
wcstl-demo
```

## Tests

```
pip install .[test]
pytest
```
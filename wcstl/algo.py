"""Generic algorithms over iterables and mutable sequences.

Output positions are plain indices into a mutable sequence; functions that
write return the index one past the last slot written.
"""

from __future__ import annotations

import itertools
import operator
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any, Optional

Predicate = Callable[[Any], bool]
Comparison = Callable[[Any, Any], bool]


def none_of(items: Iterable[Any], pred: Predicate) -> bool:
    return not any(pred(item) for item in items)


def all_of(items: Iterable[Any], pred: Predicate) -> bool:
    return all(pred(item) for item in items)


def any_of(items: Iterable[Any], pred: Predicate) -> bool:
    return any(pred(item) for item in items)


def for_each(items: Iterable[Any], func: Callable[[Any], Any]) -> None:
    for item in items:
        func(item)


def for_each_n(items: Iterable[Any], n: int, func: Callable[[Any], Any]) -> None:
    """Apply ``func`` to the first ``n`` items."""
    if n < 0:
        raise ValueError("n must not be negative")
    for_each(itertools.islice(items, n), func)


def count(items: Iterable[Any], value: Any, comp: Comparison = operator.eq) -> int:
    """Count items for which ``comp(item, value)`` holds."""
    return sum(1 for item in items if comp(item, value))


def count_if(items: Iterable[Any], pred: Predicate) -> int:
    return sum(1 for item in items if pred(item))


def find(items: Iterable[Any], value: Any, comp: Comparison = operator.eq) -> Optional[int]:
    """Return the index of the first item matching ``value``, or None."""
    return find_if(items, lambda item: comp(item, value))


def find_if(items: Iterable[Any], pred: Predicate) -> Optional[int]:
    return next((i for i, item in enumerate(items) if pred(item)), None)


def find_if_not(items: Iterable[Any], pred: Predicate) -> Optional[int]:
    return find_if(items, lambda item: not pred(item))


def _write(out: MutableSequence[Any], start: int, values: Iterable[Any]) -> int:
    pos = start
    for value in values:
        if not 0 <= pos < len(out):
            raise IndexError(f"output position {pos} out of range")
        out[pos] = value
        pos += 1
    return pos


def copy(items: Iterable[Any], out: MutableSequence[Any], start: int) -> int:
    return _write(out, start, items)


def copy_if(items: Iterable[Any], out: MutableSequence[Any], start: int, pred: Predicate) -> int:
    return _write(out, start, (item for item in items if pred(item)))


def copy_n(items: Iterable[Any], n: int, out: MutableSequence[Any], start: int) -> int:
    if n < 0:
        raise ValueError("n must not be negative")
    return _write(out, start, itertools.islice(items, n))


def copy_backward(items: Iterable[Any], out: MutableSequence[Any], end: int) -> int:
    """Copy so the last item lands just before ``end``; return the first index written."""
    values = list(items)
    first = end - len(values)
    if first < 0 or end > len(out):
        raise IndexError("output range out of bounds")
    out[first:end] = values
    return first


def fill(seq: MutableSequence[Any], start: int, stop: int, value: Any) -> None:
    if not 0 <= start <= stop <= len(seq):
        raise IndexError("fill range out of bounds")
    seq[start:stop] = [value] * (stop - start)


def fill_n(seq: MutableSequence[Any], start: int, n: int, value: Any) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    fill(seq, start, start + n, value)


def transform(
    items: Iterable[Any], out: MutableSequence[Any], start: int, op: Callable[[Any], Any]
) -> int:
    return _write(out, start, map(op, items))


def transform2(
    items1: Iterable[Any],
    items2: Iterable[Any],
    out: MutableSequence[Any],
    start: int,
    op: Callable[[Any, Any], Any],
) -> int:
    """Write ``op(a, b)`` for paired items; ``items2`` must be at least as long."""
    others = iter(items2)

    def results():
        for first in items1:
            try:
                second = next(others)
            except StopIteration:
                raise ValueError("second range is shorter than the first") from None
            yield op(first, second)

    return _write(out, start, results())
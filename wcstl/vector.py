"""A growable array with explicit capacity management."""

from __future__ import annotations

from collections.abc import Iterable, Iterator as _PyIterator
from typing import Any

from wcstl.iterator import Iterator, IterOp

_BASE_CAPACITY = 16


class Vector:
    """A dynamic array that tracks capacity separately from size.

    Slots beyond the size but within the capacity keep whatever they last
    held, so shrinking with ``resize`` or ``clear`` and growing again within
    the capacity brings old values back.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._buf: list[Any] = [None] * _BASE_CAPACITY
        self._size = 0
        for item in items:
            self.push_back(item)

    # Element access

    def get(self, pos: int) -> Any:
        """Return the slot at ``pos``, checked only against the capacity."""
        if not 0 <= pos < len(self._buf):
            raise IndexError(f"position {pos} outside capacity {len(self._buf)}")
        return self._buf[pos]

    def _put(self, pos: int, value: Any) -> None:
        if not 0 <= pos < len(self._buf):
            raise IndexError(f"position {pos} outside capacity {len(self._buf)}")
        self._buf[pos] = value

    def at(self, pos: int) -> Any:
        """Return the element at ``pos``, checked against the size."""
        if not 0 <= pos < self._size:
            raise IndexError(f"position {pos} out of range for size {self._size}")
        return self._buf[pos]

    def front(self) -> Any:
        """Return the first element."""
        if not self._size:
            raise IndexError("front of empty vector")
        return self._buf[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._size:
            raise IndexError("back of empty vector")
        return self._buf[self._size - 1]

    def data(self) -> list[Any]:
        """Return the elements as a new list."""
        return self._buf[: self._size]

    # Capacity

    def empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def reserve(self, cap: int) -> None:
        """Grow the capacity to at least ``cap``; never shrinks."""
        if cap > len(self._buf):
            self._buf.extend([None] * (cap - len(self._buf)))

    def capacity(self) -> int:
        return len(self._buf)

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current size."""
        del self._buf[self._size :]

    # Modifiers

    def clear(self) -> None:
        self._size = 0

    def _grow_for_one(self) -> None:
        if self._size + 1 > len(self._buf):
            self.reserve(max(self._size * 3 // 2, self._size + 1))

    def insert(self, pos: int, value: Any) -> None:
        """Insert ``value`` before position ``pos``."""
        if not 0 <= pos <= self._size:
            raise IndexError(f"insert position {pos} out of range for size {self._size}")
        self._grow_for_one()
        self._buf[pos + 1 : self._size + 1] = self._buf[pos : self._size]
        self._buf[pos] = value
        self._size += 1

    def erase(self, pos: int) -> None:
        """Remove the element at ``pos``."""
        if not 0 <= pos < self._size:
            raise IndexError(f"erase position {pos} out of range for size {self._size}")
        self._buf[pos : self._size - 1] = self._buf[pos + 1 : self._size]
        self._size -= 1

    def push_back(self, value: Any) -> None:
        self._grow_for_one()
        self._buf[self._size] = value
        self._size += 1

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._size:
            raise IndexError("pop from empty vector")
        self._size -= 1
        return self._buf[self._size]

    def resize(self, size: int) -> None:
        """Set the size, growing the capacity if needed."""
        if size < 0:
            raise ValueError("size must not be negative")
        self.reserve(size)
        self._size = size

    # Iterators

    def begin(self) -> VectorIterator:
        return VectorIterator(self, 0)

    def end(self) -> VectorIterator:
        return VectorIterator(self, self._size)

    # Python protocols

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> _PyIterator[Any]:
        return iter(self._buf[: self._size])

    def __getitem__(self, pos: int) -> Any:
        return self.at(pos)

    def __setitem__(self, pos: int, value: Any) -> None:
        if not 0 <= pos < self._size:
            raise IndexError(f"position {pos} out of range for size {self._size}")
        self._buf[pos] = value

    def __repr__(self) -> str:
        return f"Vector({self.data()!r})"


class VectorIterator(Iterator):
    """A random-access position inside a :class:`Vector`."""

    ops = IterOp.ADVANCE | IterOp.NEXT | IterOp.PREV | IterOp.INC | IterOp.DEC

    def __init__(self, vector: Vector, index: int) -> None:
        self._vector = vector
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> Any:
        """The element the iterator points at."""
        return self._vector.get(self._index)

    @value.setter
    def value(self, new: Any) -> None:
        self._vector._put(self._index, new)

    def _move(self, n: int) -> None:
        self._index += n

    def _position(self) -> Any:
        return (id(self._vector), self._index)

    def advance(self, n: int) -> None:
        self._index += n

    def next(self, n: int = 1) -> VectorIterator:
        return VectorIterator(self._vector, self._index + n)

    def prev(self, n: int = 1) -> VectorIterator:
        return VectorIterator(self._vector, self._index - n)

    def distance(self, other: Iterator) -> int:
        if not isinstance(other, VectorIterator) or other._vector is not self._vector:
            raise ValueError("iterators belong to different vectors")
        return abs(self._index - other._index)

    def copy(self) -> VectorIterator:
        return VectorIterator(self._vector, self._index)

    def __repr__(self) -> str:
        return f"VectorIterator(index={self._index})"
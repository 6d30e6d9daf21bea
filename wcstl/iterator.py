"""Position-based iterators whose supported operations are declared by flags."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any


class IterCategory(enum.IntFlag):
    """Iterator categories, combinable as flags."""

    INPUT = 1
    OUTPUT = 2
    FORWARD = 4
    BIDIRECTIONAL = 8
    RANDOM_ACCESS = 16
    CONTIGUOUS = 32


class IterOp(enum.IntFlag):
    """Operations an iterator may support."""

    ADVANCE = 1
    NEXT = 4
    PREV = 8
    INC = 16
    DEC = 32


class IteratorOperationError(TypeError):
    """Raised when an iterator is asked for an operation it does not support."""


class Iterator(ABC):
    """A movable position over some container.

    Subclasses declare the operations they allow in ``ops`` and implement
    ``_move``, ``_position``, ``copy`` and ``distance``.

    ``pre_inc``/``pre_dec`` move the iterator and return its previous state;
    ``post_inc``/``post_dec`` move it and return its new state.
    """

    ops: IterOp = IterOp(0)

    @abstractmethod
    def _move(self, n: int) -> None:
        """Shift this iterator by ``n`` positions (negative moves back)."""

    @abstractmethod
    def _position(self) -> Any:
        """Return a value identifying where this iterator points."""

    @abstractmethod
    def copy(self) -> Iterator:
        """Return an independent iterator at the same position."""

    @abstractmethod
    def distance(self, other: Iterator) -> int:
        """Return the number of positions between this iterator and ``other``."""

    def _require(self, op: IterOp) -> None:
        if not self.ops & op:
            raise IteratorOperationError(
                f"{type(self).__name__} does not support {op.name.lower()}"
            )

    def advance(self, n: int) -> None:
        """Move this iterator by ``n`` positions in place."""
        self._require(IterOp.ADVANCE)
        self._move(n)

    def next(self, n: int = 1) -> Iterator:
        """Return a new iterator ``n`` positions forward."""
        self._require(IterOp.NEXT)
        moved = self.copy()
        moved._move(n)
        return moved

    def prev(self, n: int = 1) -> Iterator:
        """Return a new iterator ``n`` positions back."""
        self._require(IterOp.PREV)
        moved = self.copy()
        moved._move(-n)
        return moved

    def pre_inc(self) -> Iterator:
        """Step forward; return the state from before the step."""
        self._require(IterOp.INC)
        before = self.copy()
        self._move(1)
        return before

    def pre_dec(self) -> Iterator:
        """Step back; return the state from before the step."""
        self._require(IterOp.DEC)
        before = self.copy()
        self._move(-1)
        return before

    def post_inc(self) -> Iterator:
        """Step forward; return the state after the step."""
        self._require(IterOp.INC)
        self._move(1)
        return self.copy()

    def post_dec(self) -> Iterator:
        """Step back; return the state after the step."""
        self._require(IterOp.DEC)
        self._move(-1)
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Iterator):
            return NotImplemented
        return self._position() == other._position()

    __hash__ = None  # type: ignore[assignment]
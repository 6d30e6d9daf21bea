"""Small demonstration of the vector container."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from wcstl.vector import Vector


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fill a vector, insert and erase, then print its capacity."""
    vec = Vector()
    vec.push_back(10.0)
    vec.push_back(123.32)
    vec.push_back(3.32)
    vec.insert(1, 3.15)
    vec.erase(2)
    print(vec.capacity())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
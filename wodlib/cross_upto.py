"""Iterate over all pairs drawn from two ranges."""

from __future__ import annotations

from collections.abc import Iterator


class CrossUpto:
    """Iterator over ``(x, y)`` with ``x`` in ``range(a)`` and ``y`` in ``range(b)``.

    Pairs are yielded in row-major order, and ``len()`` reports how many
    pairs remain.
    """

    def __init__(self, max_a: int, max_b: int) -> None:
        self._max_a = max_a
        self._max_b = max_b
        self._a = 0
        self._b = 0

    def _exhausted(self) -> bool:
        return self._a >= self._max_a or self._b >= self._max_b

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return self

    def __next__(self) -> tuple[int, int]:
        if self._exhausted():
            raise StopIteration
        pair = (self._a, self._b)
        self._b += 1
        if self._b == self._max_b:
            self._b = 0
            self._a += 1
        return pair

    def __len__(self) -> int:
        if self._exhausted():
            return 0
        return self._max_b * (self._max_a - self._a) - self._b

    def __repr__(self) -> str:
        return (
            f"CrossUpto(max_a={self._max_a}, max_b={self._max_b}, "
            f"a={self._a}, b={self._b})"
        )


def cross_upto(a: int, b: int) -> CrossUpto:
    """Return an iterator over all pairs ``(x, y)`` with ``0 <= x < a`` and ``0 <= y < b``."""
    return CrossUpto(a, b)
"""An endless iterator over prime numbers."""

from __future__ import annotations

from math import isqrt
from typing import Iterator


def is_prime(n: int) -> bool:
    """Return whether ``n`` is a prime number."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    return all(n % d for d in range(3, isqrt(n) + 1, 2))


class PrimeIter:
    """Yields the primes greater than ``start`` in ascending order, forever."""

    def __init__(self, start: int = 0) -> None:
        self._current = start

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._current < 2:
            self._current = 2
            return 2
        candidate = self._current + (2 if self._current % 2 else 1)
        while not is_prime(candidate):
            candidate += 2
        self._current = candidate
        return candidate

    def __repr__(self) -> str:
        return f"PrimeIter({self._current})"
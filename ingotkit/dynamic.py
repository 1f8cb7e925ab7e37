"""A value holder that refreshes its value at a fixed interval."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Dynamic(Generic[T]):
    """Holds the result of ``next_value``, refreshed every ``interval``.

    ``next_value`` is called once on construction. Call :meth:`step`
    regularly to advance time.
    """

    def __init__(self, next_value: Callable[[], T], interval: float = 1.0) -> None:
        if not interval > 0.0:
            raise ValueError("interval must be a number that is greater than 0.0!")
        self._t = 0.0
        self._interval = interval
        self._next_value = next_value
        self._value = next_value()

    @property
    def value(self) -> T:
        """The most recent result of ``next_value``."""
        return self._value

    @property
    def interval(self) -> float:
        return self._interval

    def step(self, dt: float) -> None:
        """Advance the tracked time by ``dt``."""
        if not dt >= 0.0:
            raise ValueError("dt must be a positive number!")
        self._t += dt
        if self._t < self._interval:
            return
        self._t %= self._interval
        self._value = self._next_value()

    def __repr__(self) -> str:
        return f"Dynamic(value={self._value!r}, interval={self._interval!r})"
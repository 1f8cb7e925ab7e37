"""A value holder whose new values take effect after a timeout."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Delayed(Generic[T]):
    """Holds a value; a newly assigned value takes effect once ``timeout`` has passed.

    Call :meth:`step` regularly to advance time.
    """

    def __init__(self, value: T, timeout: float = 1.0) -> None:
        if not timeout > 0.0:
            raise ValueError("timeout must be a number that is greater than 0.0!")
        self._t = 0.0
        self._timeout = timeout
        self._pending_value = value
        self._value = value

    @property
    def value(self) -> T:
        """The value currently held, which may lag behind the latest one set."""
        return self._value

    @property
    def timeout(self) -> float:
        return self._timeout

    def set_value(self, value: T) -> None:
        """Assign a value that will be held after the next timeout."""
        self._pending_value = value

    def set_now(self, value: T) -> None:
        """Assign a value that is held immediately."""
        self._pending_value = value
        self._value = value

    def step(self, dt: float) -> None:
        """Advance the tracked time by ``dt``."""
        if not dt >= 0.0:
            raise ValueError("dt must be a positive number!")
        self._t += dt
        if self._t < self._timeout:
            return
        self._t %= self._timeout
        self._value = self._pending_value

    def __repr__(self) -> str:
        return f"Delayed(value={self._value!r}, pending={self._pending_value!r}, timeout={self._timeout!r})"
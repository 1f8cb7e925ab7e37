"""A holder for a value that is initialised exactly once, after construction."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class LateInitError(RuntimeError):
    """Raised on reading an unset Late value or setting it twice."""


class Late(Generic[T]):
    """A value that starts unset and may be set only once."""

    def __init__(self) -> None:
        self._value: object = _UNSET

    def set(self, value: T) -> None:
        """Initialise the value; raises LateInitError if already set."""
        if self._value is not _UNSET:
            raise LateInitError("Value has already been initialized!")
        self._value = value

    def is_set(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> T:
        """The held value; raises LateInitError if not yet set."""
        if self._value is _UNSET:
            raise LateInitError("Value has not been initialized yet!")
        return self._value  # type: ignore[return-value]

    @value.setter
    def value(self, value: T) -> None:
        if self._value is _UNSET:
            raise LateInitError("Value has not been initialized yet!")
        self._value = value

    def __repr__(self) -> str:
        if self._value is _UNSET:
            return "Late(<unset>)"
        return f"Late({self._value!r})"
"""Values that notify derived values whenever they change."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from ingotkit.id_manager import IDManager

T = TypeVar("T")
U = TypeVar("U")

_reactive_ids = IDManager()


def _same(a: object, b: object) -> bool:
    """Whether two values count as unchanged."""
    return type(a) is type(b) and a == b


@dataclass
class _Child:
    reactive: "Reactive[Any]"
    on_change: Callable[[Any], Any]


class Reactive(Generic[T]):
    """Holds a value and pushes every change to the watchers registered on it.

    Each watcher turns this value into a derived :class:`Reactive`, which is
    kept up to date whenever this one changes. Setting a value equal to the
    current one notifies nobody.
    """

    def __init__(self, value: T) -> None:
        self._watcher_ids = IDManager()
        self._id = next(_reactive_ids)
        self._watcher_id: Optional[int] = None
        self._children: list[Optional[_Child]] = []
        self._value = value

    @property
    def id(self) -> int:
        """An id unique among all reactive objects."""
        return self._id

    @property
    def watcher_id(self) -> Optional[int]:
        """The slot this object occupies in the reactive it watches, if any."""
        return self._watcher_id

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self.set_value(value)

    def set_value(self, value: T) -> None:
        """Replace the value and notify the watchers if it changed."""
        if _same(self._value, value):
            return
        self._value = value
        self._wake_children()

    def _wake_children(self) -> None:
        for child in list(self._children):
            if child is not None:
                child.reactive.set_value(child.on_change(self._value))

    def watch(self, on_change: Callable[[T], U]) -> "Reactive[U]":
        """Register ``on_change`` and return the reactive value it derives."""
        watcher_id = next(self._watcher_ids)
        derived: Reactive[U] = Reactive(on_change(self._value))
        derived._watcher_id = watcher_id
        child = _Child(derived, on_change)
        if watcher_id == len(self._children):
            self._children.append(child)
        else:
            self._children[watcher_id] = child
        return derived

    def unwatch(self, reactive: "Reactive[Any]") -> None:
        """Detach the watcher that produced ``reactive``.

        Raises ValueError if ``reactive`` is not watching this object.
        """
        watcher_id = reactive.watcher_id
        if (
            watcher_id is None
            or watcher_id >= len(self._children)
            or self._children[watcher_id] is None
            or self._children[watcher_id].reactive is not reactive  # type: ignore[union-attr]
        ):
            raise ValueError("the given reactive is not watching this reactive object")
        self._children[watcher_id] = None
        self._watcher_ids.free(watcher_id)
        reactive._watcher_id = None

    def __repr__(self) -> str:
        return f"Reactive(id={self._id}, value={self._value!r})"
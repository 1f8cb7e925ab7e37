"""Registers watchers on reactive values and detaches them all at once."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from ingotkit.reactive import Reactive

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
R = TypeVar("R")


class ReactivityManager:
    """Keeps track of the watchers it registers so :meth:`close` can remove them.

    Use it as a context manager to detach every watcher on exit.
    """

    def __init__(self) -> None:
        self._watchers: dict[int, list[Reactive[Any]]] = {}
        self._reactives: dict[int, Reactive[Any]] = {}

    def watch(self, reactive: Reactive[A], on_change: Callable[[A], R]) -> Reactive[R]:
        """Watch ``reactive`` with ``on_change`` and return the derived value."""
        self._reactives.setdefault(reactive.id, reactive)
        result = reactive.watch(on_change)
        self._watchers.setdefault(reactive.id, []).append(result)
        return result

    def watch2(
        self,
        reactive_a: Reactive[A],
        reactive_b: Reactive[B],
        on_change: Callable[[A, B], R],
    ) -> Reactive[R]:
        """Derive a value from two reactives, updated when either changes."""
        result: Reactive[R] = Reactive(on_change(reactive_a.value, reactive_b.value))
        self.watch(reactive_a, lambda a: result.set_value(on_change(a, reactive_b.value)))
        self.watch(reactive_b, lambda b: result.set_value(on_change(reactive_a.value, b)))
        return result

    def watch3(
        self,
        reactive_a: Reactive[A],
        reactive_b: Reactive[B],
        reactive_c: Reactive[C],
        on_change: Callable[[A, B, C], R],
    ) -> Reactive[R]:
        """Derive a value from three reactives, updated when any changes."""
        result: Reactive[R] = Reactive(
            on_change(reactive_a.value, reactive_b.value, reactive_c.value)
        )
        self.watch(
            reactive_a,
            lambda a: result.set_value(on_change(a, reactive_b.value, reactive_c.value)),
        )
        self.watch(
            reactive_b,
            lambda b: result.set_value(on_change(reactive_a.value, b, reactive_c.value)),
        )
        self.watch(
            reactive_c,
            lambda c: result.set_value(on_change(reactive_a.value, reactive_b.value, c)),
        )
        return result

    def close(self) -> None:
        """Detach every watcher registered through this manager."""
        watchers, reactives = self._watchers, self._reactives
        self._watchers, self._reactives = {}, {}
        for reactive_id, derived in watchers.items():
            parent = reactives[reactive_id]
            for watcher in derived:
                parent.unwatch(watcher)

    def __enter__(self) -> "ReactivityManager":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
"""An ordered set backed by :class:`TreeMap`."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

from ingotkit.tree_map import TreeMap

T = TypeVar("T")


class TreeSet(Generic[T]):
    """A set that keeps its values in ascending order."""

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._map: TreeMap[T, None] = TreeMap()
        if values is not None:
            self.bulk_put(values)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, value: object) -> bool:
        return value in self._map

    def __iter__(self) -> Iterator[T]:
        return iter(self._map)

    def __repr__(self) -> str:
        return f"TreeSet({self.to_list()!r})"

    def put(self, value: T) -> None:
        """Add ``value``; adding an existing value changes nothing."""
        self._map.put(value, None)

    def bulk_put(self, values: Iterable[T]) -> None:
        for value in values:
            self.put(value)

    def has(self, value: T) -> bool:
        return self._map.has(value)

    def remove(self, value: T) -> None:
        """Remove ``value`` if present."""
        self._map.remove(value)

    def min(self) -> Optional[T]:
        """The smallest value, or None if empty."""
        pair = self._map.min()
        return None if pair is None else pair[0]

    def max(self) -> Optional[T]:
        """The largest value, or None if empty."""
        pair = self._map.max()
        return None if pair is None else pair[0]

    def to_list(self) -> list[T]:
        """All values in ascending order."""
        return list(self._map)

    def clear(self) -> None:
        self._map.clear()
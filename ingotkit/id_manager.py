"""Allocation and recycling of integer ids."""

from __future__ import annotations

from typing import Iterator


class OutOfRangeError(ValueError):
    """Raised when freeing an id that has never been handed out."""

    def __init__(self, id: int) -> None:
        super().__init__(f"The id {id} has not been generated by IDManager.next() yet!")
        self.id = id


class IDManager:
    """Hands out integer ids starting from 0 and reuses freed ones.

    Freed ids are handed out again in the reverse order they were freed,
    before any id that has never been used. Iteration never ends.
    """

    def __init__(self) -> None:
        self._free_ids: list[int] = []
        self._next_id = 0

    def free(self, id: int) -> None:
        """Make ``id`` available to be handed out again.

        Raises OutOfRangeError if ``id`` was never generated and ValueError
        if it has already been freed.
        """
        if id in self._free_ids:
            raise ValueError(f"id {id} has already been freed and cannot be freed again!")
        if not 0 <= id < self._next_id:
            raise OutOfRangeError(id)
        self._free_ids.append(id)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._free_ids:
            return self._free_ids.pop()
        result = self._next_id
        self._next_id += 1
        return result

    def __repr__(self) -> str:
        return f"IDManager(next_id={self._next_id}, free={self._free_ids!r})"
"""Small protocols shared across the package."""

from __future__ import annotations

from typing import Hashable as _HashableKey
from typing import Protocol, Sequence, runtime_checkable

RADIX = 10
"""Default numeric base used when formatting or parsing numbers."""


@runtime_checkable
class Hashable(Protocol):
    """An object that can be split into several hash components.

    This allows a collection of such objects to be indexed in a dict by each
    of its components, so one object may appear under several keys.
    """

    def hash_parts(self) -> Sequence[_HashableKey]:
        """Return the hash components that act as keys for this object."""
        ...


@runtime_checkable
class ToWords(Protocol):
    """An object that can be broken into a sequence of words."""

    def to_words(self) -> Sequence[str]:
        """Return the words that make up this object."""
        ...
"""An ordered mapping backed by a self-balancing (AVL) binary search tree."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")
D = TypeVar("D")


class _Node(Generic[K, V]):
    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node[K, V]] = None
        self.right: Optional[_Node[K, V]] = None
        self.height = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update_height(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update_height(node)
    balance = _height(node.left) - _height(node.right)
    if balance > 1:
        left = node.left
        assert left is not None
        if _height(left.left) < _height(left.right):
            node.left = _rotate_left(left)
        return _rotate_right(node)
    if balance < -1:
        right = node.right
        assert right is not None
        if _height(right.right) < _height(right.left):
            node.right = _rotate_right(right)
        return _rotate_left(node)
    return node


def _pop_max(node: _Node) -> tuple[Optional[_Node], _Node]:
    """Detach the largest node of a subtree; return (new subtree, detached node)."""
    if node.right is None:
        return node.left, node
    node.right, largest = _pop_max(node.right)
    return _rebalance(node), largest


def _pop_min(node: _Node) -> tuple[Optional[_Node], _Node]:
    """Detach the smallest node of a subtree; return (new subtree, detached node)."""
    if node.left is None:
        return node.right, node
    node.left, smallest = _pop_min(node.left)
    return _rebalance(node), smallest


class TreeMap(Generic[K, V]):
    """A mapping that keeps its keys in ascending order.

    Keys only need ``<`` and ``>``; two keys for which neither holds are
    treated as the same key.
    """

    def __init__(self, items: Optional[Iterable[tuple[K, V]]] = None) -> None:
        self._root: Optional[_Node[K, V]] = None
        self._len = 0
        if items is not None:
            self.bulk_put(items)

    def __len__(self) -> int:
        return self._len

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> V:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __iter__(self) -> Iterator[K]:
        for node in self._nodes():
            yield node.key

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"TreeMap({{{body}}})"

    def put(self, key: K, value: V) -> None:
        """Insert ``key`` with ``value``, replacing the value of an existing key."""
        self._root = self._insert(self._root, key, value)

    def bulk_put(self, items: Iterable[tuple[K, V]]) -> None:
        """Insert every ``(key, value)`` pair in order."""
        for key, value in items:
            self.put(key, value)

    def get(self, key: K, default: Optional[D] = None) -> V | Optional[D]:
        """Return the value for ``key``, or ``default`` if it is absent."""
        node = self._find(key)
        return default if node is None else node.value

    def has(self, key: K) -> bool:
        return self._find(key) is not None

    def remove(self, key: K) -> Optional[V]:
        """Remove ``key`` and return its value, or None if it was absent."""
        node = self._find(key)
        if node is None:
            return None
        value = node.value
        self._root = self._delete(self._root, key)
        self._len -= 1
        return value

    def min(self) -> Optional[tuple[K, V]]:
        """The ``(key, value)`` pair with the smallest key, or None if empty."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.key, node.value

    def max(self) -> Optional[tuple[K, V]]:
        """The ``(key, value)`` pair with the largest key, or None if empty."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.key, node.value

    def items(self) -> list[tuple[K, V]]:
        """All ``(key, value)`` pairs in ascending key order."""
        return [(node.key, node.value) for node in self._nodes()]

    def clear(self) -> None:
        self._root = None
        self._len = 0

    def _find(self, key: K) -> Optional[_Node[K, V]]:
        node = self._root
        while node is not None:
            if key < node.key:  # type: ignore[operator]
                node = node.left
            elif key > node.key:  # type: ignore[operator]
                node = node.right
            else:
                return node
        return None

    def _nodes(self) -> Iterator[_Node[K, V]]:
        stack: list[_Node[K, V]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _insert(self, node: Optional[_Node[K, V]], key: K, value: V) -> _Node[K, V]:
        if node is None:
            self._len += 1
            return _Node(key, value)
        if key < node.key:  # type: ignore[operator]
            node.left = self._insert(node.left, key, value)
        elif key > node.key:  # type: ignore[operator]
            node.right = self._insert(node.right, key, value)
        else:
            node.value = value
            return node
        return _rebalance(node)

    def _delete(self, node: Optional[_Node[K, V]], key: K) -> Optional[_Node[K, V]]:
        assert node is not None
        if key < node.key:  # type: ignore[operator]
            node.left = self._delete(node.left, key)
            return _rebalance(node)
        if key > node.key:  # type: ignore[operator]
            node.right = self._delete(node.right, key)
            return _rebalance(node)
        if node.left is not None:
            left, replacement = _pop_max(node.left)
            replacement.left = left
            replacement.right = node.right
            return _rebalance(replacement)
        if node.right is not None:
            right, replacement = _pop_min(node.right)
            replacement.left = None
            replacement.right = right
            return _rebalance(replacement)
        return None
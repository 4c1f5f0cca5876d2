"""2-3-4 tree: a balanced search tree whose nodes hold one to three keys."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_MAX_KEYS = 3


@dataclass
class _Node(Generic[T]):
    keys: list[T] = field(default_factory=list)
    children: list["_Node[T]"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def full(self) -> bool:
        return len(self.keys) == _MAX_KEYS

    def position(self, key: T) -> tuple[int, bool]:
        """Return where ``key`` belongs among the keys and whether it is there."""
        index = bisect_left(self.keys, key)
        return index, index < len(self.keys) and self.keys[index] == key


def _split_child(parent: _Node[T], index: int) -> None:
    """Split the full child at ``index``, moving its middle key into ``parent``."""
    child = parent.children[index]
    low, middle, high = child.keys
    right = _Node([high], child.children[2:])
    child.keys = [low]
    child.children = child.children[:2]
    parent.keys.insert(index, middle)
    parent.children.insert(index + 1, right)


def _merge_children(parent: _Node[T], index: int) -> _Node[T]:
    """Merge child ``index + 1`` and the separating key into child ``index``."""
    left = parent.children[index]
    right = parent.children.pop(index + 1)
    left.keys.append(parent.keys.pop(index))
    left.keys.extend(right.keys)
    left.children.extend(right.children)
    return left


def _max_key(node: _Node[T]) -> T:
    while node.children:
        node = node.children[-1]
    return node.keys[-1]


def _min_key(node: _Node[T]) -> T:
    while node.children:
        node = node.children[0]
    return node.keys[0]


def _walk(node: Optional[_Node[T]]) -> Iterator[T]:
    if node is None:
        return
    if node.is_leaf:
        yield from node.keys
        return
    for child, key in zip(node.children, node.keys):
        yield from _walk(child)
        yield key
    yield from _walk(node.children[-1])


def _walk_back(node: Optional[_Node[T]]) -> Iterator[T]:
    if node is None:
        return
    if node.is_leaf:
        yield from reversed(node.keys)
        return
    for child, key in zip(reversed(node.children), reversed(node.keys)):
        yield from _walk_back(child)
        yield key
    yield from _walk_back(node.children[0])


class Tree234(Generic[T]):
    """A 2-3-4 tree holding unique, comparable keys in sorted order."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.insert(item)

    def insert(self, key: T) -> T:
        """Insert ``key``; a duplicate is ignored. Returns the stored key.

        Full nodes met on the way down are split before descending.
        """
        if self._root is None:
            self._root = _Node([key])
            self._size += 1
            return key

        if self._root.full and key not in self._root.keys:
            new_root: _Node[T] = _Node([], [self._root])
            _split_child(new_root, 0)
            self._root = new_root

        node = self._root
        while True:
            index, present = node.position(key)
            if present:
                return node.keys[index]
            if node.is_leaf:
                node.keys.insert(index, key)
                self._size += 1
                return key
            child = node.children[index]
            if child.full and key not in child.keys:
                _split_child(node, index)
                continue
            node = child

    def _find_node(self, key: T) -> Optional[tuple[_Node[T], int]]:
        node = self._root
        while node is not None:
            index, present = node.position(key)
            if present:
                return node, index
            if node.is_leaf:
                return None
            node = node.children[index]
        return None

    def find(self, key: T) -> T:
        """Return the stored key equal to ``key``; raise KeyError if absent."""
        found = self._find_node(key)
        if found is None:
            raise KeyError(key)
        node, index = found
        return node.keys[index]

    def erase(self, key: T) -> None:
        """Remove ``key``; raise KeyError if it is not stored."""
        if self._find_node(key) is None:
            raise KeyError(key)
        assert self._root is not None
        self._erase(self._root, key)
        self._size -= 1
        if not self._root.keys:
            self._root = self._root.children[0] if self._root.children else None

    def _erase(self, node: _Node[T], key: T) -> None:
        while True:
            index, present = node.position(key)
            if present:
                if node.is_leaf:
                    node.keys.pop(index)
                    return
                left = node.children[index]
                right = node.children[index + 1]
                if len(left.keys) > 1:
                    predecessor = _max_key(left)
                    node.keys[index] = predecessor
                    node, key = left, predecessor
                elif len(right.keys) > 1:
                    successor = _min_key(right)
                    node.keys[index] = successor
                    node, key = right, successor
                else:
                    node = _merge_children(node, index)
                continue
            if node.is_leaf:
                raise KeyError(key)
            node = self._prepare_child(node, index)

    @staticmethod
    def _prepare_child(node: _Node[T], index: int) -> _Node[T]:
        """Make sure the child at ``index`` holds at least two keys; return it."""
        child = node.children[index]
        if len(child.keys) > 1:
            return child
        if index > 0 and len(node.children[index - 1].keys) > 1:
            left = node.children[index - 1]
            child.keys.insert(0, node.keys[index - 1])
            node.keys[index - 1] = left.keys.pop()
            if left.children:
                child.children.insert(0, left.children.pop())
            return child
        if index < len(node.keys) and len(node.children[index + 1].keys) > 1:
            right = node.children[index + 1]
            child.keys.append(node.keys[index])
            node.keys[index] = right.keys.pop(0)
            if right.children:
                child.children.append(right.children.pop(0))
            return child
        if index < len(node.keys):
            return _merge_children(node, index)
        return _merge_children(node, index - 1)

    def clear(self) -> None:
        """Remove every key."""
        self._root = None
        self._size = 0

    def copy(self) -> "Tree234[T]":
        """Return a new tree built by inserting this tree's keys in order."""
        return type(self)(self)

    def __contains__(self, key: object) -> bool:
        try:
            return self._find_node(key) is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return _walk(self._root)

    def __reversed__(self) -> Iterator[T]:
        return _walk_back(self._root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
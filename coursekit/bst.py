"""Unbalanced binary search tree with ordered traversal and rank queries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class TraversalOrder(Enum):
    """Order in which :meth:`BinarySearchTree.output` visits nodes."""

    TLR = "pre-order"  # top, left, right
    LTR = "in-order"  # left, top, right
    LRT = "post-order"  # left, right, top


@dataclass
class _Node(Generic[T]):
    value: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


def _subtree_size(node: Optional[_Node[Any]]) -> int:
    if node is None:
        return 0
    return 1 + _subtree_size(node.left) + _subtree_size(node.right)


def _subtree_height(node: Optional[_Node[Any]]) -> int:
    if node is None:
        return 0
    return 1 + max(_subtree_height(node.left), _subtree_height(node.right))


def _leftmost(node: _Node[T]) -> _Node[T]:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node[T]) -> _Node[T]:
    while node.right is not None:
        node = node.right
    return node


class BinarySearchTree(Generic[T]):
    """A plain binary search tree holding unique, comparable values."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.insert(item)

    def insert(self, value: T) -> T:
        """Insert ``value``; a duplicate is ignored. Returns the stored value."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return value

        node = self._root
        while True:
            if value == node.value:
                return node.value
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    self._size += 1
                    return value
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    self._size += 1
                    return value
                node = node.right

    def _find_node(self, key: T) -> Optional[_Node[T]]:
        node = self._root
        while node is not None:
            if key == node.value:
                return node
            node = node.left if key < node.value else node.right
        return None

    def find(self, key: T) -> T:
        """Return the stored value equal to ``key``; raise KeyError if absent."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def erase(self, value: T) -> None:
        """Remove ``value`` if present; do nothing otherwise.

        A node with two children is replaced by its right subtree, and its
        left subtree is hung under the smallest node of that right subtree.
        """
        self._root, removed = self._erase(self._root, value)
        if removed:
            self._size -= 1

    def _erase(
        self, node: Optional[_Node[T]], value: T
    ) -> tuple[Optional[_Node[T]], bool]:
        if node is None:
            return None, False
        if value == node.value:
            if node.left is not None and node.right is not None:
                _leftmost(node.right).left = node.left
                return node.right, True
            return (node.left if node.left is not None else node.right), True
        if value < node.value:
            node.left, removed = self._erase(node.left, value)
        else:
            node.right, removed = self._erase(node.right, value)
        return node, removed

    def __contains__(self, key: object) -> bool:
        try:
            return self._find_node(key) is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __reversed__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node.value
            node = node.left

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        """Remove every value."""
        self._root = None
        self._size = 0

    def copy(self) -> "BinarySearchTree[T]":
        """Return a new tree built by inserting this tree's values in order."""
        return type(self)(self)

    def output(self, order: TraversalOrder = TraversalOrder.LTR) -> list[T]:
        """Return the values in the given traversal order."""
        items: list[T] = []

        def visit(node: Optional[_Node[T]]) -> None:
            if node is None:
                return
            if order is TraversalOrder.TLR:
                items.append(node.value)
            visit(node.left)
            if order is TraversalOrder.LTR:
                items.append(node.value)
            visit(node.right)
            if order is TraversalOrder.LRT:
                items.append(node.value)

        visit(self._root)
        return items

    def index_of(self, key: T) -> int:
        """Return the zero-based rank of ``key``; raise KeyError if absent."""
        index = 0
        node = self._root
        while node is not None:
            if key == node.value:
                return index + _subtree_size(node.left)
            if key < node.value:
                node = node.left
            else:
                index += 1 + _subtree_size(node.left)
                node = node.right
        raise KeyError(key)

    def count_more_than(self, value: T) -> int:
        """Return how many stored values are greater than the stored ``value``."""
        return self._size - (self.index_of(value) + 1)

    def balance_factor(self) -> int:
        """Height of the root's right subtree minus that of its left."""
        if self._root is None:
            return 0
        return _subtree_height(self._root.right) - _subtree_height(self._root.left)

    def greater_to_root(self, value: T) -> Optional[T]:
        """Make the next value after ``value`` the root.

        Returns that value, or None when ``value`` is absent or is the largest.
        """
        if self._find_node(value) is None:
            return None
        successor = None
        node = self._root
        while node is not None:
            if value < node.value:
                successor = node.value
                node = node.left
            else:
                node = node.right
        if successor is None:
            return None
        self._root = self._lift(self._root, successor)
        return successor

    def _lift(self, node: Optional[_Node[T]], key: T) -> Optional[_Node[T]]:
        if node is None or key == node.value:
            return node
        if key < node.value:
            node.left = self._lift(node.left, key)
            pivot = node.left
            assert pivot is not None
            node.left = pivot.right
            pivot.right = node
        else:
            node.right = self._lift(node.right, key)
            pivot = node.right
            assert pivot is not None
            node.right = pivot.left
            pivot.left = node
        return pivot

    def merge(self, other: Iterable[T]) -> None:
        """Insert every value of ``other``."""
        for item in other:
            self.insert(item)

    def front(self) -> T:
        """Return the smallest value; raise IndexError if empty."""
        if self._root is None:
            raise IndexError("front of an empty tree")
        return _leftmost(self._root).value

    def back(self) -> T:
        """Return the largest value; raise IndexError if empty."""
        if self._root is None:
            raise IndexError("back of an empty tree")
        return _rightmost(self._root).value
"""Randomized binary search tree built on :class:`BinarySearchTree`."""

from __future__ import annotations

import random
from typing import Iterable, Optional, TypeVar

from coursekit.bst import (
    BinarySearchTree,
    _leftmost,
    _Node,
    _rightmost,
    _subtree_size,
)

T = TypeVar("T")


class RandomizedTree(BinarySearchTree[T]):
    """Binary search tree that randomly inserts new values at subtree roots.

    While descending, a new value becomes the root of the current subtree
    with a chance of about ``1 / (weight + 1)``, where ``weight`` is the
    subtree size. Erasing a node merges its two subtrees, hanging the
    lighter one under the heavier one.
    """

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        super().__init__(items)

    def insert(self, value: T) -> T:
        """Insert ``value``; a duplicate is ignored. Returns the stored value."""
        existing = self._find_node(value)
        if existing is not None:
            return existing.value
        self._root = self._insert(self._root, value)
        self._size += 1
        return value

    def erase(self, value: T) -> None:
        """Remove ``value`` if present, merging its subtrees; otherwise do nothing."""
        self._root, removed = self._erase_merge(self._root, value)
        if removed:
            self._size -= 1

    def _is_root_insertion(self, node: _Node[T]) -> bool:
        chance = 100.0 / (_subtree_size(node) + 1)
        return self._rng.randint(0, 100) <= chance

    def _insert(self, node: Optional[_Node[T]], value: T) -> _Node[T]:
        if node is None:
            return _Node(value)
        if self._is_root_insertion(node):
            return self._root_insert(node, value)
        if value < node.value:
            node.left = self._insert(node.left, value)
        else:
            node.right = self._insert(node.right, value)
        return node

    def _root_insert(self, node: Optional[_Node[T]], value: T) -> _Node[T]:
        if node is None:
            return _Node(value)
        if value < node.value:
            new_root = self._root_insert(node.left, value)
            node.left = None
            _rightmost(new_root).right = node
        else:
            new_root = self._root_insert(node.right, value)
            node.right = None
            _leftmost(new_root).left = node
        return new_root

    def _erase_merge(
        self, node: Optional[_Node[T]], value: T
    ) -> tuple[Optional[_Node[T]], bool]:
        if node is None:
            return None, False
        if value == node.value:
            return self._merge(node.left, node.right), True
        if value < node.value:
            node.left, removed = self._erase_merge(node.left, value)
        else:
            node.right, removed = self._erase_merge(node.right, value)
        return node, removed

    @staticmethod
    def _merge(
        left: Optional[_Node[T]], right: Optional[_Node[T]]
    ) -> Optional[_Node[T]]:
        if left is None:
            return right
        if right is None:
            return left
        if _subtree_size(left) > _subtree_size(right):
            _rightmost(left).right = right
            return left
        _leftmost(right).left = left
        return right
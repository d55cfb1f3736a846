"""A self-balancing AVL tree holding distinct integer keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True, eq=False)
class _Node:
    key: int
    height: int = 1
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(x: _Node) -> _Node:
    y = x.left
    x.left = y.right
    y.right = x
    _update(x)
    _update(y)
    return y


def _rotate_left(y: _Node) -> _Node:
    x = y.right
    y.right = x.left
    x.left = y
    _update(y)
    _update(x)
    return x


def _insert(node: Optional[_Node], key: int) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    else:
        node.right = _insert(node.right, key)
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: Optional[_Node], key: int) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        # The remaining child is already a balanced subtree.
        return node.left if node.left is not None else node.right
    else:
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)
    return _rebalance(node)


class AVLTree:
    """Balanced binary search tree of distinct integers."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._count = 0

    def insert(self, key: int) -> None:
        """Add a key; a key already present is left as is."""
        if key in self:
            return
        self._root = _insert(self._root, key)
        self._count += 1

    def delete(self, key: int) -> None:
        """Remove a key, raising KeyError if it is absent."""
        if key not in self:
            raise KeyError(key)
        self._root = _delete(self._root, key)
        self._count -= 1

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def find_min(self) -> int:
        """Return the smallest key."""
        if self._root is None:
            raise ValueError("find_min of an empty tree")
        return _min_node(self._root).key

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        """Yield keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self._root)

    def build(self, keys: Iterable[int]) -> None:
        """Replace the contents with the given keys, inserted one by one."""
        self._root = None
        self._count = 0
        for key in keys:
            self.insert(key)
"""Binary search tree of comparable values, duplicates kept to the left."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from algonotes.structures import EmptyError


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Unbalanced binary search tree.

    A value equal to a node's value goes into that node's left subtree.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add value to the tree."""
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of value; return whether one was found."""
        self._root, removed = self._delete(self._root, value)
        if removed:
            self._size -= 1
        return removed

    def _delete(self, node: Optional[_Node], value: Any) -> tuple[Optional[_Node], bool]:
        if node is None:
            return None, False
        if value < node.value:
            node.left, removed = self._delete(node.left, value)
            return node, removed
        if value > node.value:
            node.right, removed = self._delete(node.right, value)
            return node, removed
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right, _ = self._delete(node.right, successor.value)
        return node, True

    def inorder(self) -> list:
        """Values in ascending order."""
        result: list = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder(self) -> list:
        """Values with each node before its subtrees."""
        result: list = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list:
        """Values with each node after its subtrees."""
        result: list = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def level_order(self) -> list:
        """Values level by level, left to right."""
        result: list = []
        pending = deque([self._root] if self._root is not None else [])
        while pending:
            node = pending.popleft()
            result.append(node.value)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return result

    def minimum(self) -> Any:
        """Smallest value in the tree."""
        if self._root is None:
            raise EmptyError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Any:
        """Largest value in the tree."""
        if self._root is None:
            raise EmptyError("tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        height = -1
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value <= node.value else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"
"""Binary search trees and their conversion to a min-heap of the same shape."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class BSTNode:
    """A binary tree node."""

    data: int
    left: BSTNode | None = None
    right: BSTNode | None = None


def insert(root: BSTNode | None, value: int) -> BSTNode:
    """Insert ``value`` (larger to the right, otherwise left) and return the root."""
    new = BSTNode(value)
    if root is None:
        return new
    node = root
    while True:
        if value > node.data:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new
                return root
            node = node.left


def build_bst(values: Iterable[int]) -> BSTNode | None:
    """Build a tree by inserting the values in order."""
    root: BSTNode | None = None
    for value in values:
        root = insert(root, value)
    return root


def inorder(root: BSTNode | None) -> list[int]:
    """Return the values of the tree in in-order."""
    result: list[int] = []
    stack: list[BSTNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def to_min_heap(root: BSTNode | None) -> BSTNode | None:
    """Rewrite the tree in place so that its pre-order is sorted; return the root.

    For a binary search tree this makes every node smaller than all the nodes
    below it, and every left subtree smaller than the right one.
    """
    values = iter(inorder(root))
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.data = next(values)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return root
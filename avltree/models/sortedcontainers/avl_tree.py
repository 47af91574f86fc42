"""
AVL Tree implementation for sorted in-memory storage.

Height-balanced binary search tree with O(log N) insert, remove and lookup
regardless of insertion order.
"""

import logging
import math
from typing import Any

from avltree.models.sortedcontainers.binary_search_tree import (
    BinarySearchTree,
    Node,
    height,
    update_height,
)

logger = logging.getLogger(__name__)


def max_height(count: int) -> float:
    """Upper bound on the height of an AVL tree holding count values."""
    return 1.4405 * math.log2(count + 2)


def balance_factor(node: Node) -> int:
    """Height of the left subtree minus height of the right subtree."""
    return height(node.left) - height(node.right)


def rotate_right(node: Node) -> Node:
    """
    Promote node's left child and return it as the new subtree root.

         node           pivot
         /  \\           /  \\
      pivot  C   ->    A   node
       / \\                 / \\
      A   B               B   C
    """
    pivot = node.left
    assert pivot is not None, "right rotation needs a left child"

    node.left = pivot.right
    pivot.right = node

    # node is now below pivot, so its height is final first
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_left(node: Node) -> Node:
    """Mirror image of rotate_right: promote node's right child."""
    pivot = node.right
    assert pivot is not None, "left rotation needs a right child"

    node.right = pivot.left
    pivot.left = node

    update_height(node)
    update_height(pivot)
    return pivot


class AVLTree(BinarySearchTree):
    """
    AVL Tree implementation of SortedContainer.

    Properties maintained (in addition to the BinarySearchTree ones):
    1. For every node, the heights of its two subtrees differ by at most 1
    2. Tree height is at most ~1.44 * log2(N + 2)

    Every insert or remove changes one subtree height by at most one level,
    so restoring balance bottom-up on the recursion path needs at most a
    single or double rotation per node. Depth is O(log N), so insert and
    remove recurse and hand the possibly rotated subtree root back up.
    """

    def insert(self, value: Any) -> None:
        """Insert or replace a value. O(log N)"""
        self._root = self._insert(self._root, value)

    def remove(self, value: Any) -> None:
        """Remove a value if present. O(log N)"""
        self._root = self._remove(self._root, value)

    def _insert(self, node: Node | None, value: Any) -> Node:
        if node is None:
            self._size += 1
            return Node(value=value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            node.value = value
            return node

        return self._restore(node)

    def _remove(self, node: Node | None, value: Any) -> Node | None:
        if node is None:
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        else:
            if node.left is None:
                self._size -= 1
                return node.right
            if node.right is None:
                self._size -= 1
                return node.left

            # The node now holds the successor's value, so the recursive
            # call removes exactly the successor node.
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._remove(node.right, node.value)

        return self._restore(node)

    def _restore(self, node: Node) -> Node:
        """Refresh node's height and rotate if it became unbalanced."""
        update_height(node)
        balance = balance_factor(node)

        if balance == 2:
            # Left-heavy; zig-zag when the left child leans right
            if balance_factor(node.left) < 0:
                self._log_rotation("left-right", node)
                node.left = rotate_left(node.left)
            else:
                self._log_rotation("right", node)
            return rotate_right(node)

        if balance == -2:
            if balance_factor(node.right) > 0:
                self._log_rotation("right-left", node)
                node.right = rotate_right(node.right)
            else:
                self._log_rotation("left", node)
            return rotate_left(node)

        if abs(balance) > 2:
            self._report("balance", node.value, f"balance factor {balance}")

        return node

    def _check_node(self, node: Node) -> None:
        balance = balance_factor(node)
        if abs(balance) > 1:
            self._report("balance", node.value, f"balance factor {balance}")

    @staticmethod
    def _log_rotation(kind: str, node: Node) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s rotation at %r (height %d)", kind, node.value, node.height)

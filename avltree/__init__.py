"""
Ordered in-memory collections backed by binary search trees.

This package provides sorted, duplicate-free containers with:
- insert(value) - O(log N), replaces an equal stored value in place
- remove(value) - O(log N), no-op when absent
- contains(value) - O(log N)
- in_order_traversal() - O(N), ascending list of stored values
"""

from avltree.models.entry import Entry
from avltree.models.exceptions import InvariantViolationError
from avltree.models.sortedcontainers import AVLTree, BinarySearchTree

__all__ = ["AVLTree", "BinarySearchTree", "Entry", "InvariantViolationError"]

"""
Sorted container implementations.
"""

from avltree.models.sortedcontainers.avl_tree import AVLTree
from avltree.models.sortedcontainers.binary_search_tree import BinarySearchTree

__all__ = ["AVLTree", "BinarySearchTree"]

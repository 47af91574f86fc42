"""
Abstract base classes for the tree containers.
"""

from avltree.interfaces.sorted_container import SortedContainer

__all__ = ["SortedContainer"]

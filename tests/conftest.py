"""
Shared pytest fixtures for tree container tests.
"""

import random

import pytest

from avltree.models.entry import Entry
from avltree.models.sortedcontainers import AVLTree, BinarySearchTree
from avltree.models.sortedcontainers.avl_tree import max_height


@pytest.fixture
def height_bound():
    """Provide the AVL height bound as a function of the value count."""
    return max_height


@pytest.fixture
def avl_tree():
    """Provide a fresh AVLTree instance."""
    return AVLTree()


@pytest.fixture
def bst():
    """Provide a fresh BinarySearchTree instance."""
    return BinarySearchTree()


@pytest.fixture(params=[AVLTree, BinarySearchTree], ids=["avl", "bst"])
def tree(request):
    """Provide a fresh instance of each tree implementation."""
    return request.param()


@pytest.fixture
def sample_entries():
    """Provide sample keyed entries for testing."""
    return [
        Entry.of("key1", "value1"),
        Entry.of("key2", "value2"),
        Entry.of("key3", "value3"),
    ]


@pytest.fixture
def shuffled_values():
    """Provide 1000 distinct integers in a reproducible random order."""
    values = list(range(1000))
    random.Random(1234).shuffle(values)
    return values

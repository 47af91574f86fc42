"""
Randomized stress tests for the tree containers.
"""

import random

import pytest

from avltree.models.sortedcontainers import AVLTree, BinarySearchTree


class TestMixedWorkload:
    """Mixed insert/remove/lookup workloads checked against a reference set."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_mixed_workload(self, tree, seed):
        """Test random operations keep the tree equal to a Python set."""
        rng = random.Random(seed)
        reference: set[int] = set()

        for _ in range(2000):
            op = rng.choice(["insert", "insert", "remove", "contains"])
            value = rng.randint(0, 499)

            if op == "insert":
                tree.insert(value)
                reference.add(value)
            elif op == "remove":
                tree.remove(value)
                reference.discard(value)
            else:
                assert tree.contains(value) == (value in reference)

        assert tree.in_order_traversal() == sorted(reference)
        assert tree.size() == len(reference)
        tree.validate()

    def test_validate_after_every_operation(self, avl_tree):
        """Test invariants hold after each individual insert and remove."""
        rng = random.Random(99)

        for _ in range(500):
            value = rng.randint(0, 99)
            if rng.random() < 0.6:
                avl_tree.insert(value)
            else:
                avl_tree.remove(value)
            avl_tree.validate()


class TestHeightBound:
    """Height of the balanced tree under adversarial and random orders."""

    @pytest.mark.parametrize("count", [1, 2, 10, 100, 1000, 10000])
    def test_ascending(self, avl_tree, height_bound, count):
        for value in range(count):
            avl_tree.insert(value)

        assert avl_tree.height() <= height_bound(count)

    def test_descending(self, avl_tree, height_bound):
        count = 4096
        for value in range(count, 0, -1):
            avl_tree.insert(value)

        assert avl_tree.height() <= height_bound(count)
        avl_tree.validate()

    def test_zigzag(self, avl_tree, height_bound):
        """Test alternating low/high inserts that trigger double rotations."""
        low, high = 0, 2000
        while low < high:
            avl_tree.insert(low)
            avl_tree.insert(high)
            low += 1
            high -= 1

        assert avl_tree.height() <= height_bound(avl_tree.size())
        avl_tree.validate()

    def test_bound_after_removals(self, avl_tree, height_bound, shuffled_values):
        for value in shuffled_values:
            avl_tree.insert(value)
        for value in shuffled_values[::2]:
            avl_tree.remove(value)

        assert avl_tree.size() == len(shuffled_values) // 2
        assert avl_tree.height() <= height_bound(avl_tree.size())
        avl_tree.validate()

    def test_baseline_degrades(self, bst):
        """Test the unbalanced baseline becomes a chain on sorted input."""
        count = 2000
        for value in range(count):
            bst.insert(value)

        assert bst.height() == count
        bst.validate()

    def test_same_contents_different_shape(self, shuffled_values):
        """Test both trees agree on contents regardless of shape."""
        avl, baseline = AVLTree(), BinarySearchTree()
        for value in shuffled_values:
            avl.insert(value)
            baseline.insert(value)

        assert avl.in_order_traversal() == baseline.in_order_traversal()
        assert avl.height() <= baseline.height()

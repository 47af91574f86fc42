"""
Binary Search Tree implementation for sorted in-memory storage.

Unbalanced baseline: O(log N) on random input, O(N) on sorted input.
"""

import logging
from dataclasses import dataclass
from typing import Any

from avltree.interfaces.sorted_container import SortedContainer
from avltree.models.exceptions import InvariantViolationError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """Node in a binary search tree."""

    value: Any
    height: int = 1
    left: "Node | None" = None
    right: "Node | None" = None


def height(node: Node | None) -> int:
    """Height of a subtree, 0 for an empty slot."""
    return node.height if node is not None else 0


def update_height(node: Node) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


class BinarySearchTree(SortedContainer):
    """
    Binary Search Tree implementation of SortedContainer.

    Properties maintained:
    1. Every value in a node's left subtree is smaller than the node's value
    2. Every value in a node's right subtree is greater than the node's value
    3. Each distinct value is stored at most once
    4. Every node's height is 1 + the height of its taller child

    Sorted input degrades the tree to a chain, so every walk here is
    iterative: insert and remove record the descent path and refresh
    heights bottom-up along it.
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size: int = 0

    def insert(self, value: Any) -> None:
        """Insert or replace a value. O(h)"""
        path: list[Node] = []
        current = self._root

        while current is not None:
            if value < current.value:
                path.append(current)
                current = current.left
            elif value > current.value:
                path.append(current)
                current = current.right
            else:
                # Equal under the ordering: keep the node, replace the payload
                current.value = value
                return

        new_node = Node(value=value)
        if not path:
            self._root = new_node
        elif value < path[-1].value:
            path[-1].left = new_node
        else:
            path[-1].right = new_node

        self._size += 1
        self._refresh_heights(path)

    def remove(self, value: Any) -> None:
        """Remove a value if present. O(h)"""
        path: list[Node] = []
        current = self._root

        while current is not None:
            if value < current.value:
                path.append(current)
                current = current.left
            elif value > current.value:
                path.append(current)
                current = current.right
            else:
                break

        if current is None:
            return

        if current.left is not None and current.right is not None:
            # Two children: copy the successor up, then splice the successor
            # out instead. It has no left child.
            path.append(current)
            successor = current.right
            while successor.left is not None:
                path.append(successor)
                successor = successor.left
            current.value = successor.value
            current = successor

        child = current.left if current.left is not None else current.right
        self._replace_child(path[-1] if path else None, current, child)

        self._size -= 1
        self._refresh_heights(path)

    def contains(self, value: Any) -> bool:
        return self._find_node(value) is not None

    def search(self, value: Any) -> Any | None:
        """Retrieve the stored value equal to value. O(h)"""
        node = self._find_node(value)
        return node.value if node else None

    def in_order_traversal(self) -> list[Any]:
        result: list[Any] = []
        stack: list[Node] = []
        self._push_left_path(self._root, stack)

        while stack:
            node = stack.pop()
            result.append(node.value)
            self._push_left_path(node.right, stack)

        return result

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return height(self._root)

    def validate(self) -> None:
        """Walk the whole tree and check every invariant. O(N)"""
        # Pre-order pass: ordering bounds. Parents come before children.
        visited: list[Node] = []
        stack: list[tuple[Node, Any, Any]] = []
        if self._root is not None:
            stack.append((self._root, None, None))

        while stack:
            node, low, high = stack.pop()
            if (low is not None and not low < node.value) or (
                high is not None and not node.value < high
            ):
                self._report("ordering", node.value, f"outside bounds ({low!r}, {high!r})")

            visited.append(node)
            if node.left is not None:
                stack.append((node.left, low, node.value))
            if node.right is not None:
                stack.append((node.right, node.value, high))

        # Children before parents, so child heights are already checked
        for node in reversed(visited):
            expected = 1 + max(height(node.left), height(node.right))
            if node.height != expected:
                self._report("height", node.value, f"stored {node.height}, expected {expected}")
            self._check_node(node)

        if len(visited) != self._size:
            self._report("size", None, f"counted {len(visited)} nodes, recorded {self._size}")

    def _find_node(self, value: Any) -> Node | None:
        """Find node by value."""
        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return current
        return None

    def _replace_child(self, parent: Node | None, node: Node, child: Node | None) -> None:
        """Replace node with child in its parent's slot."""
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    @staticmethod
    def _refresh_heights(path: list[Node]) -> None:
        """Recompute heights bottom-up, stopping once a height is unchanged."""
        for node in reversed(path):
            old_height = node.height
            update_height(node)
            if node.height == old_height:
                break

    @staticmethod
    def _push_left_path(node: Node | None, stack: list[Node]) -> None:
        while node is not None:
            stack.append(node)
            node = node.left

    def _check_node(self, node: Node) -> None:
        """Extra per-node checks for subclasses."""
        pass

    @staticmethod
    def _report(property_name: str, value: Any, detail: str) -> None:
        logger.critical(
            "Tree invariant violated (%s) at %r: %s", property_name, value, detail
        )
        raise InvariantViolationError(property_name, value, detail)

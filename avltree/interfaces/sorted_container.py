"""
SortedContainer abstract base class for ordered in-memory collections.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class SortedContainer(ABC):
    """
    Abstract base class for sorted, duplicate-free containers.

    Provides O(log N) operations for insert, remove and contains on
    balanced implementations.

    Implementations:
    - BinarySearchTree: Unbalanced baseline, degrades to O(N) on sorted input
    - AVLTree: Height-balanced, O(log N) in the worst case
    """

    @abstractmethod
    def insert(self, value: Any) -> None:
        """
        Insert a value, replacing the stored one if an equal value exists.

        Args:
            value: The value to insert. Must support < and > comparison.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, value: Any) -> None:
        """
        Remove a value. Removing an absent value is a no-op.

        Args:
            value: The value to remove.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """
        Check if a value exists.

        Args:
            value: The value to check.

        Returns:
            True if an equal value is stored, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def search(self, value: Any) -> Any | None:
        """
        Retrieve the stored value equal to the given one.

        Args:
            value: The value to look up.

        Returns:
            The stored value if found, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def in_order_traversal(self) -> list[Any]:
        """
        Return all stored values in ascending order.

        Returns:
            A new list; later mutations of the container do not affect it.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored values.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def height(self) -> int:
        """
        Return the height of the tree (0 when empty, 1 for a single node).

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def validate(self) -> None:
        """
        Check every structural invariant of the container.

        Raises:
            InvariantViolationError: If any invariant does not hold.

        Time complexity: O(N)
        """
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.in_order_traversal())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.in_order_traversal()!r})"

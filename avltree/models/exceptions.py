"""
Custom exceptions for the tree containers.
"""

from typing import Any


class InvariantViolationError(Exception):
    """
    Raised when a structural invariant of a tree does not hold.

    This signals a defect in the tree implementation itself, never a
    problem with caller input.
    """

    def __init__(self, property_name: str, value: Any, detail: str = ""):
        """
        Initialize invariant violation error.

        Args:
            property_name: The violated invariant ("ordering", "height", "balance").
            value: Value stored at the node where the violation was found.
            detail: Optional description of the observed inconsistency.
        """
        self.property_name = property_name
        self.value = value
        self.detail = detail
        message = f"{property_name} invariant violated at node {value!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

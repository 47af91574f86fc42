"""
Data models for the tree containers.
"""

from avltree.models.entry import Entry
from avltree.models.exceptions import InvariantViolationError

__all__ = [
    "Entry",
    "InvariantViolationError",
]

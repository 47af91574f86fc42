"""
Entry: a keyed element ordered by key and carrying a non-key payload.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(order=True)
class Entry:
    """
    Represents a stored element with metadata.

    Only the key takes part in comparisons, so inserting an Entry whose key
    is already present replaces the stored payload in place.

    Attributes:
        key: The ordering key.
        data: The payload carried alongside the key (None for key-only probes).
        ts: Timestamp when the entry was created.
    """

    key: Any
    data: Any = field(default=None, compare=False)
    ts: datetime = field(default_factory=datetime.now, compare=False)

    @classmethod
    def of(cls, key: Any, data: Any, ts: datetime | None = None) -> "Entry":
        return cls(key=key, data=data, ts=ts or datetime.now())

    @classmethod
    def probe(cls, key: Any) -> "Entry":
        """Build a key-only entry for contains/search/remove lookups."""
        return cls(key=key)

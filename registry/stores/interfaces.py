"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Each store holds one
ordered key-value map: users keyed by username, events keyed by event name.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

V = TypeVar("V")


class KeyValueStore(ABC, Generic[V]):
    """Interface for an ordered key-value map of domain records."""

    @abstractmethod
    def get(self, key: str) -> V | None:
        """Return the record stored under key, or None if not found."""
        ...

    @abstractmethod
    def insert(self, key: str, value: V) -> None:
        """Store value under key, replacing any existing record."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove the record under key. Removing a missing key is a no-op."""
        ...

    @abstractmethod
    def values(self) -> list[V]:
        """Return all records ordered by key ascending."""
        ...

    def contains(self, key: str) -> bool:
        """Check if a record exists under key."""
        return self.get(key) is not None

"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID

# Largest capacity the persistence layer can hold (signed 64-bit column).
MAX_CAPACITY = 2**63 - 1


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Integer between 0 and MAX_CAPACITY representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
        if self.value > MAX_CAPACITY:
            raise ValueError("Capacity is too large")

    @staticmethod
    def in_range(value: int) -> bool:
        return 0 <= value <= MAX_CAPACITY

    def admits(self, booked: int) -> bool:
        """Whether one more attendee fits alongside ``booked`` existing ones."""
        return booked < self.value

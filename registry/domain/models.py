"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in registry/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from registry.domain.value_objects import Capacity, EventId, UserId

DEFAULT_ROLE = "user"


@dataclass(frozen=True)
class User:
    """Domain representation of a registered User."""

    id: UserId
    username: str
    created_at: datetime
    events_created: tuple[str, ...] = ()
    role: str = DEFAULT_ROLE


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name_of_event: str
    owner: str
    event_poster: str
    location_of_event: str
    requirements: str
    date: str
    capacity: Capacity
    is_public: bool
    created_at: datetime
    attendance: tuple[str, ...] = ()
    version: int = 1

    @property
    def is_full(self) -> bool:
        return not self.capacity.admits(len(self.attendance))


@dataclass(frozen=True)
class EventDraft:
    """Fields supplied by a caller to create an Event."""

    event_poster: str
    name_of_event: str
    location_of_event: str
    requirements: str
    date: str
    capacity: int
    is_public: bool = True

    def missing_fields(self) -> list[str]:
        """Return the names of required text fields that are empty."""
        required = {
            "event_poster": self.event_poster,
            "name_of_event": self.name_of_event,
            "location_of_event": self.location_of_event,
            "date": self.date,
            "requirements": self.requirements,
        }
        return [name for name, value in required.items() if not value]

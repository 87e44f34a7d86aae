from registry.domain.models import DEFAULT_ROLE, Event, EventDraft, User
from registry.domain.result import Failure, Result, Success
from registry.domain.value_objects import Capacity, EventId, UserId

__all__ = [
    "DEFAULT_ROLE",
    "Event",
    "EventDraft",
    "User",
    "EventId",
    "UserId",
    "Capacity",
    "Result",
    "Success",
    "Failure",
]

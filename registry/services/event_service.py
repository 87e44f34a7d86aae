"""Event service - all event business logic lives here.

Services:
- Depend only on interfaces (stores) and the user service
- Validate domain invariants
- Perform orchestration across the event and user maps
- Return Success with a message or domain model, or Failure with a domain error

Every check runs before the first write, so a rejected call never leaves
either map partially updated.
"""

import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

import structlog

from registry.domain import Capacity, Event, EventDraft, EventId, Failure, Result, Success
from registry.domain.errors import (
    DomainError,
    EventDoesNotExistError,
    EventFullError,
    EventNameIsRequiredError,
    InvalidDetailsError,
    MustBeOwnerError,
    UserDoesNotExistError,
)
from registry.domain.value_objects import MAX_CAPACITY
from registry.services.user_service import UserService, utc_now
from registry.stores.interfaces import KeyValueStore

logger = structlog.get_logger(__name__)

CAPACITY_OUT_OF_RANGE = f"Capacity must be between 0 and {MAX_CAPACITY}"


class EventService:
    """Service for the eventName -> Event map."""

    def __init__(
        self,
        store: KeyValueStore[Event],
        users: UserService,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._users = users
        self._id_factory = id_factory
        self._clock = clock

    def create(self, draft: EventDraft, creator_username: str) -> Result[str, DomainError]:
        """Create an event owned by creator_username.

        Fails with InvalidDetails on empty fields, a capacity outside
        0..MAX_CAPACITY or a taken name, and with UserDoesNotExist if the
        creator is not registered.
        """
        if draft.missing_fields():
            return _reject(InvalidDetailsError("Enter correct credentials"))
        if not Capacity.in_range(draft.capacity):
            return _reject(InvalidDetailsError(CAPACITY_OUT_OF_RANGE))
        if not self._users.exists(creator_username):
            return _reject(UserDoesNotExistError(creator_username))
        if self._store.contains(draft.name_of_event):
            return _reject(
                InvalidDetailsError(
                    f"Event name {draft.name_of_event} is already taken. Try another one."
                )
            )

        event = Event(
            id=EventId(value=self._id_factory()),
            name_of_event=draft.name_of_event,
            owner=creator_username,
            event_poster=draft.event_poster,
            location_of_event=draft.location_of_event,
            requirements=draft.requirements,
            date=draft.date,
            capacity=Capacity(value=draft.capacity),
            is_public=draft.is_public,
            created_at=self._clock(),
        )
        self._store.insert(event.name_of_event, event)
        self._users.link_created_event(creator_username, event.name_of_event)
        logger.info(
            "event_created",
            event_name=event.name_of_event,
            owner=creator_username,
            capacity=draft.capacity,
        )
        return Success(f"{event.name_of_event} event created successfully")

    def get(self, name_of_event: str) -> Result[Event, DomainError]:
        if not name_of_event:
            return _reject(InvalidDetailsError("Event name field is empty"))
        event = self._store.get(name_of_event)
        if event is None:
            return _reject(EventDoesNotExistError(name_of_event))
        return Success(event)

    def list_all(self) -> list[Event]:
        return self._store.values()

    def list_public(self) -> list[Event]:
        return [event for event in self._store.values() if event.is_public]

    def list_attendance(self, event_name: str) -> Result[tuple[str, ...], DomainError]:
        match self.get(event_name):
            case Success(value=event):
                return Success(event.attendance)
            case failure:
                return failure

    def modify(
        self,
        name_of_event: str,
        new_location: str | None = None,
        new_date: str | None = None,
        new_capacity: int | None = None,
    ) -> Result[str, DomainError]:
        """Apply the provided fields and bump the version.

        None leaves a field unchanged. The version goes up by exactly one per
        successful call, including calls that change nothing. Ownership is not
        checked here.
        """
        if not name_of_event:
            return _reject(EventNameIsRequiredError())
        event = self._store.get(name_of_event)
        if event is None:
            return _reject(EventDoesNotExistError(name_of_event))
        if new_capacity is not None and not Capacity.in_range(new_capacity):
            return _reject(InvalidDetailsError(CAPACITY_OUT_OF_RANGE))

        changes: dict[str, object] = {}
        if new_location is not None:
            changes["location_of_event"] = new_location
        if new_date is not None:
            changes["date"] = new_date
        if new_capacity is not None:
            changes["capacity"] = Capacity(value=new_capacity)

        updated = replace(event, **changes, version=event.version + 1)
        self._store.insert(name_of_event, updated)
        logger.info(
            "event_modified",
            event_name=name_of_event,
            fields=sorted(changes),
            version=updated.version,
        )
        return Success(f"Event {name_of_event} updated successfully")

    def delete(self, name_of_event: str, requesting_owner: str) -> Result[str, DomainError]:
        if not name_of_event:
            return _reject(EventNameIsRequiredError())
        event = self._store.get(name_of_event)
        if event is None:
            return _reject(EventDoesNotExistError(name_of_event))
        if requesting_owner != event.owner:
            return _reject(MustBeOwnerError(name_of_event))

        self._store.remove(name_of_event)
        self._users.unlink_created_event(event.owner, name_of_event)
        logger.info("event_deleted", event_name=name_of_event, owner=event.owner)
        return Success(f"Successfully deleted {name_of_event} event")

    def book(self, event_name: str, username: str) -> Result[str, DomainError]:
        """Add username to the attendance list.

        The booker does not have to be a registered user.
        """
        if not event_name or not username:
            return _reject(
                InvalidDetailsError("Event name and username are both required to book")
            )
        event = self._store.get(event_name)
        if event is None:
            return _reject(EventDoesNotExistError(event_name))
        if event.is_full:
            return _reject(EventFullError(event_name))
        if username in event.attendance:
            return _reject(
                InvalidDetailsError(f"{username} has already booked {event_name}")
            )

        self._store.insert(
            event_name, replace(event, attendance=(*event.attendance, username))
        )
        logger.info(
            "event_booked",
            event_name=event_name,
            username=username,
            booked=len(event.attendance) + 1,
            capacity=event.capacity.value,
        )
        return Success(f"Successfully booked {event_name}")


def _reject(error: DomainError) -> Failure[DomainError]:
    logger.debug("event_operation_rejected", code=error.code.value, reason=error.message)
    return Failure(error)

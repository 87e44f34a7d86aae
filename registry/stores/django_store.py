"""Django ORM implementations of the KeyValueStore.

Each method queries the Django ORM and converts rows to domain models.
"""

import structlog

from registry.domain import Capacity, Event, EventId, User, UserId
from registry.models import EventRecord, UserRecord
from registry.stores.interfaces import KeyValueStore

logger = structlog.get_logger(__name__)


class DjangoUserStore(KeyValueStore[User]):
    """Database-backed user map using Django ORM."""

    def get(self, key: str) -> User | None:
        record = UserRecord.objects.filter(username=key).first()
        return _to_user(record) if record is not None else None

    def insert(self, key: str, value: User) -> None:
        UserRecord.objects.update_or_create(
            username=key,
            defaults={
                "user_id": value.id.value,
                "events_created": list(value.events_created),
                "role": value.role,
                "created_at": value.created_at,
            },
        )

    def remove(self, key: str) -> None:
        deleted, _ = UserRecord.objects.filter(username=key).delete()
        if not deleted:
            logger.debug("user_record_missing_on_remove", username=key)

    def values(self) -> list[User]:
        return [_to_user(record) for record in UserRecord.objects.order_by("username")]

    def contains(self, key: str) -> bool:
        return UserRecord.objects.filter(username=key).exists()


class DjangoEventStore(KeyValueStore[Event]):
    """Database-backed event map using Django ORM."""

    def get(self, key: str) -> Event | None:
        record = EventRecord.objects.filter(name_of_event=key).first()
        return _to_event(record) if record is not None else None

    def insert(self, key: str, value: Event) -> None:
        EventRecord.objects.update_or_create(
            name_of_event=key,
            defaults={
                "event_id": value.id.value,
                "owner": value.owner,
                "event_poster": value.event_poster,
                "location_of_event": value.location_of_event,
                "requirements": value.requirements,
                "date": value.date,
                "capacity": value.capacity.value,
                "is_public": value.is_public,
                "attendance": list(value.attendance),
                "version": value.version,
                "created_at": value.created_at,
            },
        )

    def remove(self, key: str) -> None:
        deleted, _ = EventRecord.objects.filter(name_of_event=key).delete()
        if not deleted:
            logger.debug("event_record_missing_on_remove", event_name=key)

    def values(self) -> list[Event]:
        return [
            _to_event(record)
            for record in EventRecord.objects.order_by("name_of_event")
        ]

    def contains(self, key: str) -> bool:
        return EventRecord.objects.filter(name_of_event=key).exists()


def _to_user(record: UserRecord) -> User:
    return User(
        id=UserId(value=record.user_id),
        username=record.username,
        created_at=record.created_at,
        events_created=tuple(record.events_created),
        role=record.role,
    )


def _to_event(record: EventRecord) -> Event:
    return Event(
        id=EventId(value=record.event_id),
        name_of_event=record.name_of_event,
        owner=record.owner,
        event_poster=record.event_poster,
        location_of_event=record.location_of_event,
        requirements=record.requirements,
        date=record.date,
        capacity=Capacity(value=record.capacity),
        is_public=record.is_public,
        created_at=record.created_at,
        attendance=tuple(record.attendance),
        version=record.version,
    )

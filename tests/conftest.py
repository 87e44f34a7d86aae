"""Pytest configuration and shared fixtures."""

import itertools
import uuid
from datetime import UTC, datetime, timedelta

import pytest
from rest_framework.test import APIClient

from registry.container import get_container
from registry.domain import Event, EventDraft, User
from registry.services import EventService, UserService
from registry.stores import InMemoryStore

EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


class SequentialIds:
    """Deterministic id factory: uuid(int=1), uuid(int=2), ..."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def __call__(self) -> uuid.UUID:
        return uuid.UUID(int=next(self._counter))


class TickingClock:
    """Clock advancing one second per reading."""

    def __init__(self) -> None:
        self._ticks = itertools.count()

    def __call__(self) -> datetime:
        return EPOCH + timedelta(seconds=next(self._ticks))


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_container():
    get_container.cache_clear()
    yield
    get_container.cache_clear()


@pytest.fixture
def user_store() -> InMemoryStore[User]:
    return InMemoryStore()


@pytest.fixture
def event_store() -> InMemoryStore[Event]:
    return InMemoryStore()


@pytest.fixture
def user_service(user_store: InMemoryStore[User]) -> UserService:
    return UserService(user_store, id_factory=SequentialIds(), clock=TickingClock())


@pytest.fixture
def event_service(
    event_store: InMemoryStore[Event], user_service: UserService
) -> EventService:
    return EventService(
        event_store, user_service, id_factory=SequentialIds(), clock=TickingClock()
    )


def make_draft(**overrides) -> EventDraft:
    fields = {
        "event_poster": "https://example.com/poster.png",
        "name_of_event": "Launch",
        "location_of_event": "Main Hall",
        "requirements": "Bring a laptop",
        "date": "2024-06-01",
        "capacity": 10,
        "is_public": True,
    }
    fields.update(overrides)
    return EventDraft(**fields)

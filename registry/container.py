"""Process-wide wiring of stores and services.

The container is built once on first use and reused for every request.
Handlers reach the services only through get_container().
Only the "django" backend takes part in the request transaction.
"""

from dataclasses import dataclass
from functools import lru_cache

import structlog
from django.conf import settings

from registry.domain import Event, User
from registry.services import EventService, UserService
from registry.stores import InMemoryStore, KeyValueStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Container:
    """Holds the two registries sharing one pair of stores."""

    users: UserService
    events: EventService


def build_container(
    user_store: KeyValueStore[User], event_store: KeyValueStore[Event]
) -> Container:
    users = UserService(user_store)
    return Container(users=users, events=EventService(event_store, users))


@lru_cache
def get_container() -> Container:
    backend = settings.REGISTRY_STORE_BACKEND
    if backend == "memory":
        container = build_container(InMemoryStore[User](), InMemoryStore[Event]())
    elif backend == "django":
        from registry.stores.django_store import DjangoEventStore, DjangoUserStore

        container = build_container(DjangoUserStore(), DjangoEventStore())
    else:
        raise ValueError(f"Unknown store backend: {backend}")
    logger.info("registry_container_built", store_backend=backend)
    return container

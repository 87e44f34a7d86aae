"""User service - registration, profiles and created-event tracking.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Return Success with a message or domain model, or Failure with a domain error
"""

import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime

import structlog

from registry.domain import Failure, Result, Success, User, UserId
from registry.domain.errors import DomainError, InvalidDetailsError, UserDoesNotExistError
from registry.stores.interfaces import KeyValueStore

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class UserService:
    """Service for the username -> User map."""

    def __init__(
        self,
        store: KeyValueStore[User],
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._id_factory = id_factory
        self._clock = clock

    def register(self, username: str) -> Result[str, DomainError]:
        if not username:
            return _reject(InvalidDetailsError("Enter correct username"))
        if self._store.contains(username):
            return _reject(
                InvalidDetailsError(
                    f"Username {username} is already taken. Try another one."
                )
            )

        user = User(
            id=UserId(value=self._id_factory()),
            username=username,
            created_at=self._clock(),
        )
        self._store.insert(username, user)
        logger.info("user_registered", username=username, user_id=str(user.id))
        return Success(f"{username} registered successfully")

    def get_profile(self, username: str) -> Result[User, DomainError]:
        if not username:
            return _reject(InvalidDetailsError("User field is empty"))
        user = self._store.get(username)
        if user is None:
            return _reject(UserDoesNotExistError(username))
        return Success(user)

    def update_profile(self, old_name: str, new_name: str) -> Result[str, DomainError]:
        """Rename a user, keeping id, created_at, events_created and role.

        Events whose owner is ``old_name`` are left untouched.
        """
        if not old_name or not new_name:
            return _reject(InvalidDetailsError("Provide correct credentials"))
        if self._store.contains(new_name):
            return _reject(
                InvalidDetailsError(
                    f"Username {new_name} is already taken. Try another one."
                )
            )
        user = self._store.get(old_name)
        if user is None:
            return _reject(UserDoesNotExistError(old_name))

        self._store.insert(new_name, replace(user, username=new_name))
        self._store.remove(old_name)
        logger.info("user_renamed", old_username=old_name, username=new_name)
        return Success(f"Successfully updated profile from {old_name} to {new_name}")

    def delete(self, username: str) -> Result[str, DomainError]:
        if not self._store.contains(username):
            return _reject(UserDoesNotExistError(username))
        self._store.remove(username)
        logger.info("user_deleted", username=username)
        return Success(f"User {username} has been deleted successfully")

    def exists(self, username: str) -> bool:
        return bool(username) and self._store.contains(username)

    def list_created_events(self, username: str) -> Result[tuple[str, ...], DomainError]:
        user = self._store.get(username)
        if user is None:
            return _reject(UserDoesNotExistError(username))
        return Success(user.events_created)

    def link_created_event(self, username: str, event_name: str) -> None:
        """Append event_name to the user's created events. No-op if the user is gone."""
        user = self._store.get(username)
        if user is None:
            logger.warning("link_skipped_missing_user", username=username, event_name=event_name)
            return
        self._store.insert(
            username, replace(user, events_created=(*user.events_created, event_name))
        )

    def unlink_created_event(self, username: str, event_name: str) -> None:
        """Drop the first matching entry. Safe to repeat."""
        user = self._store.get(username)
        if user is None or event_name not in user.events_created:
            return
        remaining = list(user.events_created)
        remaining.remove(event_name)
        self._store.insert(username, replace(user, events_created=tuple(remaining)))


def _reject(error: DomainError) -> Failure[DomainError]:
    logger.debug("user_operation_rejected", code=error.code.value, reason=error.message)
    return Failure(error)

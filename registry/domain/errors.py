"""Domain error codes for the registry module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_DOES_NOT_EXIST = "EVENT_DOES_NOT_EXIST"
    USER_DOES_NOT_EXIST = "USER_DOES_NOT_EXIST"
    INVALID_DETAILS = "INVALID_DETAILS"
    EVENT_NAME_IS_REQUIRED = "EVENT_NAME_IS_REQUIRED"
    MUST_BE_OWNER = "MUST_BE_OWNER"
    EVENT_FULL = "EVENT_FULL"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventDoesNotExistError(DomainError):
    """Returned when no event is stored under the requested name."""

    def __init__(self, event_name: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_DOES_NOT_EXIST,
            message=f"Event {event_name} not found",
        )
        self.event_name = event_name


class UserDoesNotExistError(DomainError):
    """Returned when no user is registered under the requested name."""

    def __init__(self, username: str) -> None:
        super().__init__(
            code=ErrorCode.USER_DOES_NOT_EXIST,
            message=f"User {username} does not exist",
        )
        self.username = username


class InvalidDetailsError(DomainError):
    """Returned for empty or malformed input and for name conflicts."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_DETAILS, message=message)


class EventNameIsRequiredError(DomainError):
    """Returned when an operation addressing an event gets an empty name."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NAME_IS_REQUIRED,
            message="Event name is required",
        )


class MustBeOwnerError(DomainError):
    """Returned when someone other than the owner tries to delete an event."""

    def __init__(self, event_name: str) -> None:
        super().__init__(
            code=ErrorCode.MUST_BE_OWNER,
            message=f"Only the owner can delete {event_name}",
        )
        self.event_name = event_name


class EventFullError(DomainError):
    """Returned when an event has no capacity left."""

    def __init__(self, event_name: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_FULL,
            message=f"Event {event_name} is fully booked",
        )
        self.event_name = event_name

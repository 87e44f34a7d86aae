"""Result types returned by the services.

Every registry operation reports failure as a value rather than raising, so
callers branch on the result type:

    result = users.register("alice")
    match result:
        case Success(value=message):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Represents a successful operation result."""

    value: T


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Represents a failed operation result."""

    error: E


type Result[T, E] = Success[T] | Failure[E]

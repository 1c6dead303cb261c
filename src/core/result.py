"""Result types for railway-oriented programming.

Adapters and handlers return a Result instead of raising, so every failure
path (invalid token, policy denial, store rejection) is explicit and testable.
Exceptions are only raised at the HTTP boundary.

Usage:
    async def verify(token: str) -> Result[Identity, AuthenticationError]:
        if not token.strip():
            return Failure(error=AuthenticationError(...))
        return Success(value=Identity(user_id=...))

    match await verifier.verify(token):
        case Success(value=identity):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]

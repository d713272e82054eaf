"""Success / Failure result values.

Every application service returns ``Result[T, DomainError]``. Callers
pattern-match instead of catching:

    match await authorization.has_permission(subject, "write-user", user_id, "user"):
        case Success(value=allowed):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Operation completed; ``value`` holds its output."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Operation did not complete; ``error`` says why."""

    error: E


Result = Success[T] | Failure[E]

"""DomainEvent base class.

Events are past-tense facts (UserCreated, PermissionGranted) published on
the broadcast bus only after the transaction that produced them commits.
Subclasses are frozen, keyword-only dataclasses:

    @dataclass(frozen=True, kw_only=True)
    class UserDeleted(DomainEvent):
        user_id: Identifier
        deleted_by: Identifier
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Common envelope fields of every event.

    Attributes:
        event_id: Unique id of this occurrence.
        occurred_at: When it happened (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Event class name, used as the structured log key."""
        return type(self).__name__

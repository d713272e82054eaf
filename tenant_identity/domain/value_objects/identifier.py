"""Identifier value object.

A validated 128-bit identifier kept in its canonical textual form
(lower-case, hyphenated). Equality and ordering follow the textual value.
"""

from dataclasses import dataclass
from uuid import UUID

from uuid_extensions import uuid7

from tenant_identity.domain.errors import InvalidIdentifierError


@dataclass(frozen=True, order=True)
class Identifier:
    """Immutable entity identifier.

    Attributes:
        value: Canonical textual form of the identifier.

    Raises:
        InvalidIdentifierError: If value is not a valid UUID.

    Example:
        >>> Identifier("550E8400-E29B-41D4-A716-446655440000")
        Identifier('550e8400-e29b-41d4-a716-446655440000')
    """

    value: str

    def __post_init__(self) -> None:
        """Parse and canonicalize the identifier.

        Raises:
            InvalidIdentifierError: If value is not a valid UUID.
        """
        raw = self.value
        if isinstance(raw, UUID):
            canonical = str(raw)
        else:
            try:
                canonical = str(UUID(raw))
            except (TypeError, ValueError, AttributeError) as e:
                raise InvalidIdentifierError(
                    f"Invalid identifier: {raw!r}"
                ) from e
        object.__setattr__(self, "value", canonical)

    @classmethod
    def new(cls) -> "Identifier":
        """Generate a fresh time-ordered identifier (UUIDv7)."""
        return cls(str(uuid7()))

    @classmethod
    def parse(cls, raw: str, *, field: str = "id") -> "Identifier":
        """Parse raw input, attributing failures to ``field``.

        Args:
            raw: Textual identifier from untrusted input.
            field: Input field name reported on failure.

        Returns:
            Identifier: Parsed identifier.

        Raises:
            InvalidIdentifierError: If raw is not a valid UUID.
        """
        try:
            return cls(raw)
        except InvalidIdentifierError as e:
            raise e.with_field(field) from e

    @property
    def uuid(self) -> UUID:
        """Return the identifier as a UUID instance."""
        return UUID(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Identifier('{self.value}')"

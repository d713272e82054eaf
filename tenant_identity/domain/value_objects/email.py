"""Email value object.

Profiles are looked up by email, so the stored form must be canonical:
syntax is checked with email-validator (no DNS) and the whole address is
lower-cased. ``Email("Bob@Example.COM") == Email("bob@example.com")``.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Canonical, syntactically valid email address.

    Attributes:
        value: Normalized, lower-cased address.

    Raises:
        ValueError: If the address does not parse.
    """

    value: str

    def __post_init__(self) -> None:
        try:
            result = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "value", result.normalized.lower())

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email({self.value!r})"

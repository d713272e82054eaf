"""Target value object: the category an action applies to."""

from dataclasses import dataclass

from tenant_identity.domain.errors import InvalidTargetError


@dataclass(frozen=True)
class Target:
    """Namespaced category name such as ``user`` or ``tenant``.

    Only ASCII letters, digits and '-' are allowed.

    Raises:
        InvalidTargetError: If the name is empty or has other characters.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidTargetError("Target must be a non-empty string")
        if not all(c.isascii() and (c.isalnum() or c == "-") for c in self.value):
            raise InvalidTargetError(
                f"Target may only contain alphanumerics and '-': {self.value!r}"
            )

    def __str__(self) -> str:
        return self.value

"""Parse errors for identifiers and the permission language.

Every parse error is a ValueError that names the input field it
originated from, so a failure deep inside ``Permission.parse`` still
reports which of the four segments was wrong.
"""


class ParseError(ValueError):
    """Base class for value object parse failures.

    Attributes:
        field: Name of the input field that failed to parse.
    """

    default_field = "value"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field or self.default_field

    def with_field(self, field: str) -> "ParseError":
        """Return a copy of this error attributed to another field."""
        return type(self)(str(self), field=field)


class InvalidIdentifierError(ParseError):
    """Value is not a 128-bit identifier in textual form."""

    default_field = "id"


class InvalidTargetError(ParseError):
    """Target name is empty or contains characters other than alphanumerics and '-'."""

    default_field = "target"


class MissingDelimiterError(ParseError):
    """Action string has no '-' between verb and target."""

    default_field = "action"


class UnknownVerbError(ParseError):
    """Action verb is not one of read, write, execute."""

    default_field = "action"


class InvalidResourceKindError(ParseError):
    """Resource kind is not a registered kind."""

    default_field = "resource_kind"


class InvalidResourceIdError(ParseError):
    """Resource id is empty or contains the ':' segment delimiter."""

    default_field = "resource_id"


class MalformedPermissionStringError(ParseError):
    """Permission string does not have exactly four ':'-delimited segments."""

    default_field = "permission"

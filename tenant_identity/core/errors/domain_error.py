"""DomainError: the failure half of every service Result.

Services never raise for expected failures (bad input, missing user,
denied permission, storage trouble); they return ``Failure(error=...)``
carrying one of the DomainError subclasses in ``common_errors``. HTTP
status mapping happens once, in the presentation layer, by error class.

Subclasses are plain frozen dataclasses and add their own fields:

    @dataclass(frozen=True, slots=True, kw_only=True)
    class NotFoundError(DomainError):
        resource_type: str
        resource_id: str
"""

from dataclasses import dataclass

from tenant_identity.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Failure value returned inside Result (never raised).

    Attributes:
        code: ErrorCode clients branch on.
        message: Explanation for humans; becomes the problem ``detail``.
        details: Extra key/value context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

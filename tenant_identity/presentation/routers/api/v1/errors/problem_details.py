"""RFC 7807 Problem Details models.

Every error response of the API is a ProblemDetails body with media type
``application/problem+json``. ``code`` carries the domain ErrorCode value
so clients can branch on e.g. ``access_check_failed`` vs ``unauthorized``
without parsing ``detail``.

RFC 7807: https://tools.ietf.org/html/rfc7807
"""

from pydantic import BaseModel, Field

PROBLEM_MEDIA_TYPE = "application/problem+json"


class ErrorDetail(BaseModel):
    """One offending input field.

    Examples:
        >>> ErrorDetail(
        ...     field="resource_kind",
        ...     code="invalid_input",
        ...     message="Unknown resource kind: 'group'",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 problem document.

    Attributes:
        type: URI identifying the problem type (``{api_base_url}/errors/<slug>``).
        title: Short summary of the problem type.
        status: HTTP status code.
        detail: Explanation specific to this occurrence.
        instance: Request path that produced the problem.
        code: Domain error code, when the problem came from a service.
        errors: Field-level errors for validation failures.
        trace_id: Request trace ID (also in the X-Trace-Id header).
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/permission-denied"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[403])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/users/0190f2a4-6b1e-7c3d-8e4f-5a6b7c8d9e0f"],
    )
    code: str | None = Field(
        None,
        description="Domain error code",
        examples=["permission_denied"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(None, description="Request trace ID for debugging")

"""Error response builder for RFC 7807 Problem Details.

Converts DomainError values returned by application services into
Problem Details JSON responses. The HTTP status is chosen by error class,
the ``type`` slug and ``code`` by the error's ErrorCode.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from tenant_identity.core.config import settings
from tenant_identity.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from tenant_identity.presentation.routers.api.v1.errors.problem_details import (
    PROBLEM_MEDIA_TYPE,
    ErrorDetail,
    ProblemDetails,
)

# Error class -> (HTTP status, title)
_DOMAIN_ERROR_INFO: dict[type[DomainError], tuple[int, str]] = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ConflictError: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    AuthorizationError: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    StorageError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Storage Failure"),
}
_DEFAULT_INFO = (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> match await service.delete_user(acting, user_id):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(
        ...             error=error, request=request, trace_id=get_trace_id() or ""
        ...         )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Error returned by an application service.
            request: FastAPI Request object (for instance path).
            trace_id: Request trace ID for debugging.

        Returns:
            JSONResponse with ProblemDetails content (400/403/404/409/500).
        """
        status_code, title = ErrorResponseBuilder.status_and_title(error)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value.replace('_', '-')}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            code=error.code.value,
            trace_id=trace_id or None,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            media_type=PROBLEM_MEDIA_TYPE,
        )

    @staticmethod
    def status_and_title(error: DomainError) -> tuple[int, str]:
        """Map a domain error to its HTTP status code and title.

        Example:
            >>> ErrorResponseBuilder.status_and_title(
            ...     NotFoundError(
            ...         code=ErrorCode.USER_NOT_FOUND,
            ...         message="User not found",
            ...         resource_type="User",
            ...         resource_id="...",
            ...     )
            ... )
            (404, 'Resource Not Found')
        """
        for error_type in type(error).__mro__:
            if error_type in _DOMAIN_ERROR_INFO:
                return _DOMAIN_ERROR_INFO[error_type]
        return _DEFAULT_INFO

"""Problem Details rendering for the v1 API.

Service failures go through ErrorResponseBuilder; exceptions that escape a
route (missing header, invalid body) through the registered handlers.
"""

from tenant_identity.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from tenant_identity.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from tenant_identity.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]

"""Helpers shared by application services.

Error translation at the layer boundary and best-effort post-commit
event publication.
"""

from tenant_identity.core.enums import ErrorCode
from tenant_identity.core.errors import StorageError, ValidationError
from tenant_identity.domain.errors import ParseError, RepositoryError
from tenant_identity.domain.events.base_event import DomainEvent
from tenant_identity.domain.protocols.event_bus_protocol import EventBusProtocol
from tenant_identity.domain.protocols.logger_protocol import LoggerProtocol


def invalid_input(
    error: ValueError, *, field: str | None = None, code: ErrorCode = ErrorCode.INVALID_INPUT
) -> ValidationError:
    """Convert a value object parse error to a ValidationError.

    Args:
        error: ParseError (carries its own field) or plain ValueError.
        field: Field name when the error does not carry one.
        code: Error code to report.

    Returns:
        ValidationError naming the offending field.
    """
    if isinstance(error, ParseError):
        field = field or error.field
    return ValidationError(code=code, message=str(error), field=field)


def storage_failure(
    error: RepositoryError,
    *,
    code: ErrorCode = ErrorCode.STORAGE_FAILED,
    message: str = "Storage operation failed",
) -> StorageError:
    """Convert a repository exception to a StorageError."""
    return StorageError(
        code=code,
        message=message,
        operation=error.operation,
        details={"reason": str(error)},
    )


async def publish_after_commit(
    event_bus: EventBusProtocol,
    logger: LoggerProtocol,
    event: DomainEvent,
) -> None:
    """Publish an event for state that is already committed.

    Publication is best-effort: a closed bus is logged, never reported
    as a failure of the operation that produced the event.
    """
    if not await event_bus.publish(event):
        logger.warning(
            "event_publish_failed",
            event_type=event.event_type,
            event_id=str(event.event_id),
        )

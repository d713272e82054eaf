"""Structured logging port.

Services and event handlers log through this protocol only; the adapter
is chosen in the container (see ``get_logger``).

Event names are snake_case facts, context goes in keyword arguments:

    logger.info("permission_granted", permission=str(p), granted_by=str(actor))
    logger.error("user_create_failed", error=e, operation=e.operation)

Levels used in this service:
    DEBUG    events delivered to handlers, idempotent no-ops
    INFO     state changes (user created, permission revoked)
    WARNING  denied access, subscriber lag, handler failures
    ERROR    storage failures, unhandled exceptions
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Backend-agnostic structured logger."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a failure; ``error`` is flattened into error_type / error_message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every line."""
        ...

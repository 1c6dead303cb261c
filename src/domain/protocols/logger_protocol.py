"""LoggerProtocol definition for structured logging.

Backend-agnostic contract for structured (key-value) logging. Implementations
must never emit bearer tokens, API keys or request bodies.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("Transaction created", tenant_id=str(tenant_id))

    request_logger = logger.bind(trace_id=trace_id, user_id=str(user_id))
    request_logger.info("Request started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports DEBUG, INFO, WARNING, ERROR and CRITICAL levels plus context
    binding for request-scoped loggers.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for service-wide failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...

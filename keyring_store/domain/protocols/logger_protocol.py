"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Implementations MUST keep logs
structured (message + key-value context) and safe: key material and
secret values are never logged, only secret names.

Log Levels:
    - DEBUG: Detailed diagnostic info (per-page, per-secret progress)
    - INFO: Normal operational events (key saved, keys loaded)
    - WARNING: Degraded behavior
    - ERROR: Operation failed or a stored key was skipped
    - CRITICAL: System-wide failure

Usage:
    from keyring_store.core.container import get_logger

    logger = get_logger()
    repo_logger = logger.bind(secret_name_prefix="myapp-")
    repo_logger.info("Saved key", secret_name="myapp-abc")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Implementations:
        - ConsoleAdapter: structlog to stdout
        - NullAdapter: discards everything
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Constant message text (put variable data in context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Constant message text (put variable data in context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Constant message text (put variable data in context).
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Constant message text (put variable data in context).
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message.

        Args:
            message: Constant message text (put variable data in context).
            error: Optional exception instance.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.

        Args:
            **context: Context included in all subsequent logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...

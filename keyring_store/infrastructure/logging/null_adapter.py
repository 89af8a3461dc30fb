"""No-op logging adapter - discards everything.

Default sink for the key repository when the caller supplies no logger,
so call sites never need to check for a missing logger.
"""

from __future__ import annotations

from typing import Any


class NullAdapter:
    """Logger that does nothing.

    Use Cases:
        - Library use without logging configured
        - Tests that don't care about log output
    """

    def debug(self, message: str, /, **context: Any) -> None:
        pass

    def info(self, message: str, /, **context: Any) -> None:
        pass

    def warning(self, message: str, /, **context: Any) -> None:
        pass

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        pass

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        pass

    def bind(self, **context: Any) -> NullAdapter:
        """Return self; there is no context to keep."""
        return self

    def with_context(self, **context: Any) -> NullAdapter:
        """Return self; there is no context to keep."""
        return self

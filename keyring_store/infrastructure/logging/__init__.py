"""Logging adapters implementing LoggerProtocol.

- ConsoleAdapter: structlog to stdout (JSON or colored console)
- NullAdapter: discards all output (repository default)
"""

from keyring_store.infrastructure.logging.console_adapter import ConsoleAdapter
from keyring_store.infrastructure.logging.null_adapter import NullAdapter

__all__ = ["ConsoleAdapter", "NullAdapter"]

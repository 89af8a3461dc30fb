"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from keyring_store.domain.protocols import LoggerProtocol, XmlRepositoryProtocol
"""

from keyring_store.domain.protocols.logger_protocol import LoggerProtocol
from keyring_store.domain.protocols.xml_repository_protocol import (
    KeyDocument,
    XmlRepositoryProtocol,
)

__all__ = [
    "KeyDocument",
    "LoggerProtocol",
    "XmlRepositoryProtocol",
]

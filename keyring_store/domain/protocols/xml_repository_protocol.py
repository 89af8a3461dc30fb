"""XML key repository protocol (port).

The key-ring manager stores each key as an XML document and needs exactly
two operations from its storage backend: load everything, and save one.
Both are blocking calls.

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (SecretsManagerXmlRepository)
"""

from typing import Protocol, TypeAlias
from xml.etree.ElementTree import Element

# Opaque XML key document. The repository only ever reads its "id" attribute.
KeyDocument: TypeAlias = Element


class XmlRepositoryProtocol(Protocol):
    """Storage backend for XML key documents."""

    def list_all_documents(self) -> set[KeyDocument]:
        """Load every stored key document.

        Stored values that are not valid documents are skipped. Order of
        the result is not significant.

        Returns:
            All successfully parsed documents.

        Raises:
            Exception: Backend transport error; no partial result is returned.
        """
        ...

    def store_document(
        self, document: KeyDocument, friendly_name: str | None = None
    ) -> None:
        """Persist one key document as a new record.

        Args:
            document: Key document to store (not modified).
            friendly_name: Preferred record name suffix.

        Raises:
            Exception: Backend transport error.
        """
        ...

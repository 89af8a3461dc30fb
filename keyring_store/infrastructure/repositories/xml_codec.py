"""Conversions between key documents and secret records.

Parsing returns a Result: a stored value that is not a key document is an
expected, per-record condition, not an exception.
"""

from uuid import uuid4
from xml.etree import ElementTree

from keyring_store.core.enums import ErrorCode
from keyring_store.core.errors import KeyRepositoryError
from keyring_store.core.result import Failure, Result, Success
from keyring_store.domain.protocols import KeyDocument


def parse_key_document(
    secret_name: str, text: str | None
) -> Result[KeyDocument, KeyRepositoryError]:
    """Parse a stored secret value into a key document.

    Args:
        secret_name: Name of the secret the value came from (for errors).
        text: SecretString of the secret; None for binary secrets.

    Returns:
        Success(document) if the value is well-formed XML.
        Failure(KeyRepositoryError) if the value is missing or malformed.

    Example:
        >>> result = parse_key_document("myapp-abc", "<key id='abc'/>")
        >>> result.value.get("id")
        'abc'
    """
    if text is None:
        return Failure(
            error=KeyRepositoryError(
                code=ErrorCode.KEY_DOCUMENT_MISSING_VALUE,
                message=f"Secret has no string value: {secret_name}",
                secret_name=secret_name,
            )
        )

    try:
        return Success(value=ElementTree.fromstring(text))
    except (ElementTree.ParseError, UnicodeError) as e:
        return Failure(
            error=KeyRepositoryError(
                code=ErrorCode.KEY_DOCUMENT_INVALID_XML,
                message=f"Secret is not a valid XML key document: {secret_name}",
                secret_name=secret_name,
                details={"error": str(e)},
            )
        )


def serialize_key_document(document: KeyDocument) -> str:
    """Serialize a key document to its text form."""
    return ElementTree.tostring(document, encoding="unicode")


def resolve_secret_name(
    prefix: str, document: KeyDocument, friendly_name: str | None = None
) -> str:
    """Build the secret name for a document.

    Priority: friendly name, then the document's "id" attribute, then a
    fresh random token. Collisions are not checked here.

    Args:
        prefix: Secret name prefix.
        document: Document being stored.
        friendly_name: Caller-supplied name, if any.

    Returns:
        prefix + chosen suffix.
    """
    if friendly_name is not None:
        suffix = friendly_name
    elif (document_id := document.get("id")) is not None:
        suffix = document_id
    else:
        suffix = str(uuid4())
    return prefix + suffix

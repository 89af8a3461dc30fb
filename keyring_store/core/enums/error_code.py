"""Machine-readable error codes.

Codes follow the ENTITY_REASON naming convention and are used with
Result types.
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes for key repository failures."""

    # Stored value could not be parsed as an XML key document
    KEY_DOCUMENT_INVALID_XML = "key_document_invalid_xml"
    # Secret has no SecretString (binary secret or empty version)
    KEY_DOCUMENT_MISSING_VALUE = "key_document_missing_value"

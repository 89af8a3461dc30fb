"""Error types carried as data through Result values.

Error Hierarchy:
    DomainError (base - does NOT inherit from Exception)
    └── KeyRepositoryError (stored key document cannot be used)

Transport failures (AWS API errors) are NOT modelled here. They are raised
by botocore and propagate to the caller unchanged.
"""

from dataclasses import dataclass

from keyring_store.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyRepositoryError(DomainError):
    """A stored secret could not be turned into a key document.

    Attributes:
        code: KEY_DOCUMENT_INVALID_XML or KEY_DOCUMENT_MISSING_VALUE.
        message: Human-readable message.
        secret_name: Name of the offending secret.
        details: Additional context (parser message).
    """

    secret_name: str

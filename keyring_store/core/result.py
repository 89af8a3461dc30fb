"""Result types for railway-oriented programming.

Used where a failure is expected and handled as data instead of an
exception, e.g. a secret whose value is not a valid key document.

Usage:
    result = parse_key_document("myapp-key-1", "<key id='1'/>")
    match result:
        case Success(value=document):
            documents.add(document)
        case Failure(error=error):
            logger.error("Skipping key", code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Operation succeeded.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Operation failed.

    Attributes:
        error: What went wrong.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]

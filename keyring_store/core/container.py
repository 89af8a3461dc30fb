"""Dependency factories (composition root).

Application-scoped singletons:
- Logging (structlog console)
- Key repository (AWS Secrets Manager)

Settings are read here and nowhere else; adapters receive plain
constructor arguments.

Usage:
    from keyring_store.core.container import get_xml_repository

    repository = get_xml_repository()
    repository.store_document(document, friendly_name="key-2026-10")
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from keyring_store.core.config import get_settings

if TYPE_CHECKING:
    from keyring_store.domain.protocols.logger_protocol import LoggerProtocol
    from keyring_store.infrastructure.repositories import SecretsManagerXmlRepository


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from keyring_store.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_xml_repository() -> "SecretsManagerXmlRepository":
    """Return the application-scoped key repository singleton.

    Creates a boto3 secretsmanager client in settings.aws_region and hands
    its ownership to the repository.

    The container owns this instance's lifetime: callers must not close
    it or use it in a ``with`` block. Closing it leaves every later caller
    with a closed repository. Construct SecretsManagerXmlRepository
    directly when a scoped, closable instance is needed.

    Returns:
        SecretsManagerXmlRepository configured from settings.

    Raises:
        pydantic.ValidationError: If KEY_SECRET_NAME_PREFIX is missing or empty.
    """
    import boto3

    from keyring_store.infrastructure.repositories import SecretsManagerXmlRepository

    settings = get_settings()
    client = boto3.client("secretsmanager", region_name=settings.aws_region)
    return SecretsManagerXmlRepository(
        client,
        settings.key_secret_name_prefix,
        options=settings.persist_options,
        logger=get_logger(),
    )

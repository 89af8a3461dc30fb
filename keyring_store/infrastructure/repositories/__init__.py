"""Key document repositories.

Architecture:
- SecretsManagerXmlRepository: AWS Secrets Manager backed implementation of
  XmlRepositoryProtocol
- xml_codec: parsing, serialization and secret naming helpers
"""

from keyring_store.infrastructure.repositories.secrets_manager_xml_repository import (
    TAG_DATA_PROTECTION_KEY,
    SecretsManagerXmlRepository,
)

__all__ = [
    "TAG_DATA_PROTECTION_KEY",
    "SecretsManagerXmlRepository",
]

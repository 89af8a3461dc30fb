"""AWS Secrets Manager repository for XML key documents.

Implements XmlRepositoryProtocol on top of a boto3 secretsmanager client.

Storage layout:
    - One secret per key document, created once and never updated
    - Secret name: {prefix}{friendly name | document id | random uuid}
    - Every secret carries the "DataProtectionKey" tag; listing filters on
      that tag only (not on the prefix)
    - Encryption at rest is Secrets Manager's (optionally a customer KMS key)

Error Handling:
    - AWS errors (list, get value, create) are logged and re-raised
    - Values that are not XML key documents are logged and skipped
"""

from __future__ import annotations

from types import TracebackType
from typing import TYPE_CHECKING, Any

from keyring_store.core.result import Failure, Success
from keyring_store.domain.protocols import KeyDocument, LoggerProtocol
from keyring_store.domain.value_objects import PersistOptions
from keyring_store.infrastructure.logging.null_adapter import NullAdapter
from keyring_store.infrastructure.repositories.xml_codec import (
    parse_key_document,
    resolve_secret_name,
    serialize_key_document,
)

if TYPE_CHECKING:
    from mypy_boto3_secretsmanager.client import SecretsManagerClient

TAG_DATA_PROTECTION_KEY = "DataProtectionKey"


class SecretsManagerXmlRepository:
    """Key document storage in AWS Secrets Manager.

    Owns the boto3 client it is given: close() (or leaving a ``with``
    block) closes the client exactly once, and the repository refuses
    further calls afterwards.

    Example:
        >>> import boto3
        >>> client = boto3.client("secretsmanager", region_name="us-east-1")
        >>> with SecretsManagerXmlRepository(client, "myapp-") as repo:
        ...     repo.store_document(document)
        ...     documents = repo.list_all_documents()
    """

    def __init__(
        self,
        client: SecretsManagerClient,
        secret_name_prefix: str,
        options: PersistOptions | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            client: boto3 secretsmanager client (ownership is transferred).
            secret_name_prefix: Prefix for every created secret. Must be non-empty.
            options: Optional KMS key and replica region settings.
            logger: Log sink. Defaults to NullAdapter (discards everything).

        Raises:
            ValueError: If client is None or secret_name_prefix is empty.
        """
        if client is None:
            raise ValueError("client is required")
        if not secret_name_prefix:
            raise ValueError("secret_name_prefix must be a non-empty string")

        self._client = client
        self._secret_name_prefix = secret_name_prefix
        self._options = options or PersistOptions()
        self._logger = (logger or NullAdapter()).bind(
            secret_name_prefix=secret_name_prefix
        )
        self._closed = False

        self._logger.info("Using AWS Secrets Manager to persist keys")

    @property
    def secret_name_prefix(self) -> str:
        return self._secret_name_prefix

    @property
    def options(self) -> PersistOptions:
        return self._options

    @property
    def closed(self) -> bool:
        return self._closed

    def list_all_documents(self) -> set[KeyDocument]:
        """Load all key documents tagged for discovery.

        Walks every list_secrets page, fetching each secret's value one at
        a time. Values that are not valid XML are skipped.

        Returns:
            Set of parsed key documents.

        Raises:
            RuntimeError: If the repository is closed.
            botocore.exceptions.ClientError: If an AWS call fails. No
                partial result is returned.
        """
        self._ensure_open()

        documents: set[KeyDocument] = set()
        request: dict[str, Any] = {
            "Filters": [{"Key": "tag-key", "Values": [TAG_DATA_PROTECTION_KEY]}],
        }

        while True:
            try:
                response = self._client.list_secrets(**request)
            except Exception as e:
                self._logger.error("Failed to list key secrets", error=e)
                raise

            for secret in response.get("SecretList", []):
                document = self._load_document(secret["Name"])
                if document is not None:
                    documents.add(document)

            next_token = response.get("NextToken")
            if not next_token:
                break
            request["NextToken"] = next_token

        self._logger.info("Loaded keys", key_count=len(documents))
        return documents

    def store_document(
        self, document: KeyDocument, friendly_name: str | None = None
    ) -> None:
        """Create a new secret holding the key document.

        Args:
            document: Key document to store.
            friendly_name: Preferred name suffix; falls back to the
                document's "id" attribute, then a random uuid.

        Raises:
            RuntimeError: If the repository is closed.
            botocore.exceptions.ClientError: If create_secret fails
                (including ResourceExistsException on a name collision).
        """
        self._ensure_open()

        secret_name = resolve_secret_name(
            self._secret_name_prefix, document, friendly_name
        )
        request: dict[str, Any] = {
            "Name": secret_name,
            "SecretString": serialize_key_document(document),
            "Tags": [{"Key": TAG_DATA_PROTECTION_KEY}],
        }
        if self._options.has_kms_key:
            request["KmsKeyId"] = self._options.kms_key_id
        if self._options.has_replication_region:
            request["AddReplicaRegions"] = [
                {"Region": self._options.replication_region}
            ]

        try:
            self._client.create_secret(**request)
        except Exception as e:
            self._logger.error(
                "Failed to save key", error=e, secret_name=secret_name
            )
            raise

        self._logger.info("Saved key", secret_name=secret_name)

    def close(self) -> None:
        """Close the underlying client. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._client.close()

    def __enter__(self) -> SecretsManagerXmlRepository:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _load_document(self, secret_name: str) -> KeyDocument | None:
        """Fetch and parse one secret; None if the value is unusable.

        Raises:
            botocore.exceptions.ClientError: If get_secret_value fails.
        """
        try:
            response = self._client.get_secret_value(SecretId=secret_name)
        except Exception as e:
            self._logger.error(
                "Failed to read key secret", error=e, secret_name=secret_name
            )
            raise

        match parse_key_document(secret_name, response.get("SecretString")):
            case Success(value=document):
                return document
            case Failure(error=error):
                self._logger.error(
                    "Skipping unreadable key",
                    secret_name=secret_name,
                    error_code=error.code.value,
                    error_message=error.message,
                )
                return None

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("SecretsManagerXmlRepository is closed")

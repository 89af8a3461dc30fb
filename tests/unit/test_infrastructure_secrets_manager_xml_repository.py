"""Unit tests for SecretsManagerXmlRepository with a mocked boto3 client.

Tests cover:
- Constructor validation (client, prefix)
- Pagination through list_secrets
- Skipping malformed values (fail soft) vs. re-raising AWS errors (fail loud)
- create_secret request shape (name, tags, KMS key, replica region)
- Client ownership (close once, refuse use after close)

Architecture:
- MagicMock stands in for the secretsmanager client and the logger
- NO real AWS dependencies
"""

from unittest.mock import MagicMock
from xml.etree import ElementTree

import pytest
from botocore.exceptions import ClientError

from keyring_store.domain.value_objects import PersistOptions
from keyring_store.infrastructure.logging import NullAdapter
from keyring_store.infrastructure.repositories import (
    TAG_DATA_PROTECTION_KEY,
    SecretsManagerXmlRepository,
)

TAG_FILTER = [{"Key": "tag-key", "Values": [TAG_DATA_PROTECTION_KEY]}]


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


def _page(*names: str, next_token: str | None = None) -> dict:
    page: dict = {"SecretList": [{"Name": name} for name in names]}
    if next_token is not None:
        page["NextToken"] = next_token
    return page


def _values(mapping: dict[str, str | None]):
    def get_secret_value(SecretId: str) -> dict:
        value = mapping[SecretId]
        if value is None:
            return {"Name": SecretId, "SecretBinary": b"\x00\x01"}
        return {"Name": SecretId, "SecretString": value}

    return get_secret_value


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def logger():
    mock_logger = MagicMock()
    mock_logger.bind.return_value = mock_logger
    return mock_logger


@pytest.fixture
def repository(client, logger):
    return SecretsManagerXmlRepository(client, "myapp-", logger=logger)


@pytest.mark.unit
class TestRepositoryInitialization:
    """Test constructor validation and defaults."""

    def test_missing_client_raises_value_error(self):
        """Test None client is rejected."""
        with pytest.raises(ValueError, match="client"):
            SecretsManagerXmlRepository(None, "myapp-")  # type: ignore[arg-type]

    @pytest.mark.parametrize("prefix", ["", None])
    def test_empty_prefix_raises_value_error(self, client, prefix):
        """Test empty or missing prefix is rejected before any AWS call."""
        with pytest.raises(ValueError, match="secret_name_prefix"):
            SecretsManagerXmlRepository(client, prefix)  # type: ignore[arg-type]

        assert client.mock_calls == []

    def test_defaults_to_null_logger_and_empty_options(self, client):
        """Test optional arguments fall back to no-op logger and no options."""
        repo = SecretsManagerXmlRepository(client, "myapp-")

        assert isinstance(repo._logger, NullAdapter)
        assert repo.options == PersistOptions()
        assert repo.secret_name_prefix == "myapp-"
        assert repo.closed is False

    def test_logger_bound_with_prefix(self, client, logger):
        """Test the prefix is bound into the logger context."""
        SecretsManagerXmlRepository(client, "myapp-", logger=logger)

        logger.bind.assert_called_once_with(secret_name_prefix="myapp-")
        logger.info.assert_called_once()


@pytest.mark.unit
class TestListAllDocuments:
    """Test list_all_documents()."""

    def test_follows_pagination_until_token_exhausted(self, repository, client):
        """Test every page is requested and every value fetched exactly once."""
        client.list_secrets.side_effect = [
            _page("myapp-a", "myapp-b", next_token="next1"),
            _page("myapp-c", next_token=""),
        ]
        client.get_secret_value.side_effect = _values(
            {
                "myapp-a": '<key id="a"/>',
                "myapp-b": '<key id="b"/>',
                "myapp-c": '<key id="c"/>',
            }
        )

        documents = repository.list_all_documents()

        assert sorted(doc.get("id") for doc in documents) == ["a", "b", "c"]
        assert client.list_secrets.call_count == 2
        first_call, second_call = client.list_secrets.call_args_list
        assert first_call.kwargs == {"Filters": TAG_FILTER}
        assert second_call.kwargs == {"Filters": TAG_FILTER, "NextToken": "next1"}
        fetched = [c.kwargs["SecretId"] for c in client.get_secret_value.call_args_list]
        assert fetched == ["myapp-a", "myapp-b", "myapp-c"]

    def test_missing_next_token_stops_after_single_page(self, repository, client):
        """Test a response without NextToken ends the listing."""
        client.list_secrets.return_value = _page("myapp-a")
        client.get_secret_value.side_effect = _values({"myapp-a": "<key/>"})

        documents = repository.list_all_documents()

        assert len(documents) == 1
        client.list_secrets.assert_called_once()

    def test_empty_store_returns_empty_set(self, repository, client):
        """Test listing with no tagged secrets."""
        client.list_secrets.return_value = {"SecretList": []}

        assert repository.list_all_documents() == set()
        client.get_secret_value.assert_not_called()

    @pytest.mark.parametrize("bad_value", ["not <xml", "<key>\ud800</key>"])
    def test_malformed_value_skipped_with_single_error_log(
        self, repository, client, logger, bad_value
    ):
        """Test invalid or unencodable XML is excluded and logged exactly once."""
        client.list_secrets.return_value = _page("myapp-good", "myapp-bad")
        client.get_secret_value.side_effect = _values(
            {"myapp-good": '<key id="good"/>', "myapp-bad": bad_value}
        )

        documents = repository.list_all_documents()

        assert [doc.get("id") for doc in documents] == ["good"]
        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["secret_name"] == "myapp-bad"
        assert logger.error.call_args.kwargs["error_code"] == "key_document_invalid_xml"

    def test_binary_secret_skipped(self, repository, client, logger):
        """Test a secret without SecretString is skipped, not fatal."""
        client.list_secrets.return_value = _page("myapp-binary")
        client.get_secret_value.side_effect = _values({"myapp-binary": None})

        assert repository.list_all_documents() == set()
        assert logger.error.call_args.kwargs["error_code"] == "key_document_missing_value"

    def test_list_failure_is_logged_and_reraised(self, repository, client, logger):
        """Test list_secrets errors abort the call."""
        client.list_secrets.side_effect = _client_error(
            "AccessDeniedException", "ListSecrets"
        )

        with pytest.raises(ClientError):
            repository.list_all_documents()

        logger.error.assert_called_once()
        assert isinstance(logger.error.call_args.kwargs["error"], ClientError)

    def test_failure_on_second_page_returns_nothing(self, repository, client):
        """Test a transport error mid-pagination aborts without partial result."""
        client.list_secrets.side_effect = [
            _page("myapp-a", next_token="next1"),
            _client_error("ThrottlingException", "ListSecrets"),
        ]
        client.get_secret_value.side_effect = _values({"myapp-a": "<key/>"})

        with pytest.raises(ClientError) as exc_info:
            repository.list_all_documents()

        assert exc_info.value.response["Error"]["Code"] == "ThrottlingException"

    def test_value_fetch_failure_is_reraised(self, repository, client, logger):
        """Test get_secret_value errors are fatal, unlike parse errors."""
        client.list_secrets.return_value = _page("myapp-a", "myapp-b")
        client.get_secret_value.side_effect = [
            {"SecretString": "<key/>"},
            _client_error("ResourceNotFoundException", "GetSecretValue"),
        ]

        with pytest.raises(ClientError):
            repository.list_all_documents()

        assert logger.error.call_args.kwargs["secret_name"] == "myapp-b"


@pytest.mark.unit
class TestStoreDocument:
    """Test store_document()."""

    def test_name_from_document_id(self, repository, client):
        """Test id attribute is used when no friendly name is given."""
        document = ElementTree.fromstring('<key id="abc"><value>x</value></key>')

        repository.store_document(document)

        client.create_secret.assert_called_once_with(
            Name="myapp-abc",
            SecretString='<key id="abc"><value>x</value></key>',
            Tags=[{"Key": TAG_DATA_PROTECTION_KEY}],
        )

    def test_friendly_name_takes_priority(self, repository, client):
        """Test friendly name wins over the id attribute."""
        repository.store_document(
            ElementTree.fromstring('<key id="abc"/>'), friendly_name="key-2026"
        )

        assert client.create_secret.call_args.kwargs["Name"] == "myapp-key-2026"

    def test_generated_names_are_unique(self, repository, client):
        """Test documents without id get distinct random names."""
        document = ElementTree.fromstring("<key/>")

        repository.store_document(document)
        repository.store_document(document)

        first, second = (
            c.kwargs["Name"] for c in client.create_secret.call_args_list
        )
        assert first.startswith("myapp-")
        assert second.startswith("myapp-")
        assert first != second

    def test_kms_key_and_replica_region_attached(self, client):
        """Test configured options are added to the create request."""
        repo = SecretsManagerXmlRepository(
            client,
            "myapp-",
            options=PersistOptions(
                kms_key_id="alias/dataprotection", replication_region="us-west-2"
            ),
        )

        repo.store_document(ElementTree.fromstring('<key id="abc"/>'))

        kwargs = client.create_secret.call_args.kwargs
        assert kwargs["KmsKeyId"] == "alias/dataprotection"
        assert kwargs["AddReplicaRegions"] == [{"Region": "us-west-2"}]

    def test_empty_options_are_not_sent(self, client):
        """Test empty-string options count as not configured."""
        repo = SecretsManagerXmlRepository(
            client,
            "myapp-",
            options=PersistOptions(kms_key_id="", replication_region=""),
        )

        repo.store_document(ElementTree.fromstring('<key id="abc"/>'))

        kwargs = client.create_secret.call_args.kwargs
        assert "KmsKeyId" not in kwargs
        assert "AddReplicaRegions" not in kwargs

    def test_create_failure_is_logged_and_reraised(self, repository, client, logger):
        """Test create_secret errors propagate without retry."""
        client.create_secret.side_effect = _client_error(
            "ResourceExistsException", "CreateSecret"
        )

        with pytest.raises(ClientError):
            repository.store_document(ElementTree.fromstring('<key id="abc"/>'))

        client.create_secret.assert_called_once()
        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["secret_name"] == "myapp-abc"

    def test_document_not_modified(self, repository):
        """Test storing leaves the document untouched."""
        document = ElementTree.fromstring('<key id="abc"><value>x</value></key>')
        before = ElementTree.tostring(document)

        repository.store_document(document)

        assert ElementTree.tostring(document) == before


@pytest.mark.unit
class TestRepositoryLifecycle:
    """Test close() and context manager behavior."""

    def test_close_closes_client_once(self, repository, client):
        """Test repeated close() calls release the client only once."""
        repository.close()
        repository.close()

        client.close.assert_called_once()
        assert repository.closed is True

    def test_context_manager_closes_client(self, client):
        """Test leaving the with block closes the client."""
        with SecretsManagerXmlRepository(client, "myapp-") as repo:
            assert repo.closed is False

        client.close.assert_called_once()

    def test_operations_after_close_raise(self, repository, client):
        """Test closed repository refuses calls without touching the client."""
        repository.close()

        with pytest.raises(RuntimeError):
            repository.list_all_documents()
        with pytest.raises(RuntimeError):
            repository.store_document(ElementTree.fromstring("<key/>"))

        client.list_secrets.assert_not_called()
        client.create_secret.assert_not_called()

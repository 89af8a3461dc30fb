"""Pytest configuration.

Ensures:
1. boto3 never sees real AWS credentials
2. Cached settings/container singletons are reset between tests
"""

import pytest

from keyring_store.core.config import get_settings
from keyring_store.core.container import get_logger, get_xml_repository


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake AWS credentials so no test can reach a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture(autouse=True)
def clear_singletons():
    """Reset lru_cache singletons before and after each test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_xml_repository.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_xml_repository.cache_clear()

"""
Configuration management using Pydantic Settings.

Type-safe configuration loaded from environment variables. Only the
composition root (keyring_store.core.container) reads settings; the
repository itself is configured through constructor arguments.

Usage:
    from keyring_store.core.config import get_settings

    settings = get_settings()
    prefix = settings.key_secret_name_prefix
    options = settings.persist_options
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from keyring_store.core.enums import Environment
from keyring_store.domain.value_objects import PersistOptions

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region of the Secrets Manager endpoint",
    )

    # Key storage
    key_secret_name_prefix: str = Field(
        min_length=1,
        description="Prefix for every secret created for a key document (e.g., myapp-dataprotection-)",
    )
    key_kms_key_id: str | None = Field(
        default=None,
        description="Customer-managed KMS key id, ARN or alias used to encrypt stored keys",
    )
    key_replication_region: str | None = Field(
        default=None,
        description="Secondary region Secrets Manager replicates stored keys into",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not one of the standard five.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
        return level

    @field_validator("key_kms_key_id", "key_replication_region")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """
        Treat blank optional values as unset.

        Args:
            v: Raw value.

        Returns:
            str | None: Stripped value, or None when blank.
        """
        if v is None:
            return None
        return v.strip() or None

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def persist_options(self) -> PersistOptions:
        """Store-time options for the key repository."""
        return PersistOptions(
            kms_key_id=self.key_kms_key_id,
            replication_region=self.key_replication_region,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env

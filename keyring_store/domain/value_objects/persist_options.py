"""Store-time options for persisted key documents.

Usage:
    from keyring_store.domain.value_objects import PersistOptions

    options = PersistOptions(
        kms_key_id="alias/dataprotection",
        replication_region="us-west-2",
    )
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class PersistOptions:
    """Optional settings applied when a key document is stored.

    Empty strings count as "not configured", same as None.

    Attributes:
        kms_key_id: Customer-managed KMS key (id, ARN or alias) used by
            Secrets Manager instead of its default key.
        replication_region: Secondary region the secret is replicated into.
    """

    kms_key_id: str | None = None
    replication_region: str | None = None

    @property
    def has_kms_key(self) -> bool:
        """True when a customer-managed key is configured."""
        return bool(self.kms_key_id)

    @property
    def has_replication_region(self) -> bool:
        """True when a replica region is configured."""
        return bool(self.replication_region)

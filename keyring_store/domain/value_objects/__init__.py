"""Domain value objects.

Usage:
    from keyring_store.domain.value_objects import PersistOptions
"""

from keyring_store.domain.value_objects.persist_options import PersistOptions

__all__ = ["PersistOptions"]

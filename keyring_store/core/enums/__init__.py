"""Core enums package.

Usage:
    from keyring_store.core.enums import ErrorCode, Environment
"""

from keyring_store.core.enums.environment import Environment
from keyring_store.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]

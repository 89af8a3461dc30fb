"""Runtime environment types.

Used by Settings and the container to pick the log renderer.

Environments:
- DEVELOPMENT: human-readable colored logs
- TESTING: JSON logs, test runs
- CI: JSON logs, continuous integration
- PRODUCTION: JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

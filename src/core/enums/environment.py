"""Application environment types.

Defines the different runtime environments for the Bookkeeper API.
Used by Settings to determine environment-specific behavior.

Environments:
- DEVELOPMENT: Local development with human-readable logs
- TESTING: Automated test execution
- CI: Continuous integration environment
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

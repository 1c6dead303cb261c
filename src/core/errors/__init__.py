"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from src.core.errors import DomainError, StoreError
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    StoreError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "StoreError",
]

"""Core shared kernel.

Building blocks shared by every layer:
- Success/Failure result types
- DomainError and its categories
- Settings and constants

Nothing here imports from domain, application or infrastructure.
"""

from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DomainError,
    StoreError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "StoreError",
    "Success",
]

"""Domain protocols (ports).

Infrastructure adapters implement these; application handlers depend only on
them.
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.tenant_store_protocol import (
    StoreFailure,
    TenantStoreFactoryProtocol,
    TenantStoreProtocol,
)
from src.domain.protocols.token_verifier_protocol import TokenVerifierProtocol

__all__ = [
    "LoggerProtocol",
    "StoreFailure",
    "TenantStoreFactoryProtocol",
    "TenantStoreProtocol",
    "TokenVerifierProtocol",
]

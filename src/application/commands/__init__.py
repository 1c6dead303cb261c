"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateTransaction, CreateTenant).
"""

from src.application.commands.document_commands import CreateDocument
from src.application.commands.tenant_commands import CreateTenant
from src.application.commands.transaction_commands import CreateTransaction

__all__ = [
    "CreateDocument",
    "CreateTenant",
    "CreateTransaction",
]

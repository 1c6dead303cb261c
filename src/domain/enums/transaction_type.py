"""Transaction type enum.

The sign of a transaction is carried by its type, never by a negative amount.
"""

from enum import Enum


class TransactionType(str, Enum):
    """Kinds of bookkeeping transactions.

    String Enum:
        Values match the store's `transactions.type` column.
    """

    INCOME = "income"
    EXPENSE = "expense"

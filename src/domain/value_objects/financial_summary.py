"""Financial summary value object.

Aggregates the transactions of one tenant into income, expense and balance
totals. Aggregation is a pure reduction over (type, amount) rows; reading the
rows from the store is the caller's concern.

Rows are classified by exclusion: a row whose type is exactly "income" counts
as income, every other row counts as expense.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from src.domain.entities.transaction import TransactionAmount
from src.domain.enums.transaction_type import TransactionType

ZERO = Decimal("0")


@dataclass(frozen=True, kw_only=True)
class FinancialSummary:
    """Totals for one tenant.

    Invariants:
        - balance == total_income - total_expense
        - an empty tenant yields all zeros

    Attributes:
        total_income: Sum of income amounts.
        total_expense: Sum of non-income amounts.
    """

    total_income: Decimal = ZERO
    total_expense: Decimal = ZERO

    @property
    def balance(self) -> Decimal:
        """Income minus expense."""
        return self.total_income - self.total_expense

    @classmethod
    def from_amounts(cls, rows: Iterable[TransactionAmount]) -> "FinancialSummary":
        """Reduce transaction rows into a summary.

        Args:
            rows: Transaction amount projections of a single tenant.

        Returns:
            FinancialSummary with exact decimal totals.

        Example:
            >>> FinancialSummary.from_amounts([
            ...     TransactionAmount(transaction_type="income", amount=Decimal("1000")),
            ...     TransactionAmount(transaction_type="expense", amount=Decimal("200")),
            ... ]).balance
            Decimal('800')
        """
        income = ZERO
        expense = ZERO
        for row in rows:
            if row.transaction_type == TransactionType.INCOME.value:
                income += row.amount
            else:
                expense += row.amount
        return cls(total_income=income, total_expense=expense)

"""Financial summary response schema."""

from pydantic import Field

from src.domain.value_objects.financial_summary import FinancialSummary
from src.schemas.common_schemas import CamelModel, JsonAmount


class FinancialSummaryResponse(CamelModel):
    """Income, expense and balance totals of a tenant.

    Example:
        {"totalIncome": 1500.0, "totalExpense": 500.0, "balance": 1000.0}
    """

    total_income: JsonAmount = Field(..., description="Sum of income amounts")
    total_expense: JsonAmount = Field(..., description="Sum of non-income amounts")
    balance: JsonAmount = Field(..., description="Income minus expense")

    @classmethod
    def from_summary(cls, summary: FinancialSummary) -> "FinancialSummaryResponse":
        return cls(
            total_income=summary.total_income,
            total_expense=summary.total_expense,
            balance=summary.balance,
        )

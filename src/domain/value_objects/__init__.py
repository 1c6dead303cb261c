"""Domain value objects.

Immutable values with no identity of their own.
"""

from src.domain.value_objects.access_decision import (
    AccessDecision,
    Allow,
    Deny,
    decide_access,
    is_policy_violation,
)
from src.domain.value_objects.financial_summary import FinancialSummary
from src.domain.value_objects.identity import Identity

__all__ = [
    "AccessDecision",
    "Allow",
    "Deny",
    "FinancialSummary",
    "Identity",
    "decide_access",
    "is_policy_violation",
]

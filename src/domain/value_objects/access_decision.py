"""Access decision for store failures.

Tenant isolation and role enforcement live in the row-level-security store.
When the store rejects a request, this module decides whether the rejection
is a policy denial (surfaced as 403) or an ordinary store failure (400).

Classification rule:
    - store error code equals the policy-violation code (42501), or
    - the lowercased error message mentions a policy marker
      ("permission", "row-level security", "policy")

Usage:
    from src.domain.value_objects.access_decision import Deny, decide_access

    decision = decide_access(code=body.get("code"), message=body.get("message"))
    if isinstance(decision, Deny):
        ...
"""

from dataclasses import dataclass
from typing import TypeAlias

from src.core.constants import POLICY_VIOLATION_CODE, POLICY_VIOLATION_MARKERS


@dataclass(frozen=True, slots=True)
class Allow:
    """Store failure is not a policy denial."""


@dataclass(frozen=True, slots=True, kw_only=True)
class Deny:
    """Store failure is a row-level-security denial.

    Attributes:
        reason: Store-reported message.
        store_code: Store-reported error code, if any.
    """

    reason: str
    store_code: str | None = None


AccessDecision: TypeAlias = Allow | Deny


def is_policy_violation(code: str | None, message: str | None) -> bool:
    """Check whether a store error describes a policy denial.

    Args:
        code: Store error code (e.g. PostgreSQL SQLSTATE).
        message: Store error message.

    Returns:
        True if the error code or message identifies a permission failure.
    """
    if code == POLICY_VIOLATION_CODE:
        return True
    lowered = (message or "").lower()
    return any(marker in lowered for marker in POLICY_VIOLATION_MARKERS)


def decide_access(*, code: str | None, message: str | None) -> AccessDecision:
    """Classify a store error into Allow (ordinary failure) or Deny.

    Args:
        code: Store error code.
        message: Store error message.

    Returns:
        Deny when the error is a policy violation, Allow otherwise.

    Example:
        >>> decide_access(code="42501", message="new row violates policy")
        Deny(reason='new row violates policy', store_code='42501')
        >>> decide_access(code="23505", message="duplicate key")
        Allow()
    """
    if is_policy_violation(code, message):
        return Deny(reason=message or "Permission denied", store_code=code)
    return Allow()

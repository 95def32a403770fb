from __future__ import annotations

"""
Check Result Data Models.

Defines the value returned by a requirement check and the factory
functions used by the evaluator to create it.
"""

from dataclasses import dataclass
from typing import Optional

from filereq.domain.errors import RequirementCheckError

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of checking a requirement tree.

    Attributes:
        ok: True when the whole tree is satisfied.
        error: The aggregated failure report when ok is False.
    """
    ok: bool
    error: Optional[RequirementCheckError] = None

    def __bool__(self) -> bool:
        return self.ok

    @property
    def message(self) -> str:
        """Display text of the failure, or an empty string on success."""
        return str(self.error) if self.error is not None else ""

    def raise_for_error(self) -> None:
        """Raise the carried RequirementCheckError, if any."""
        if self.error is not None:
            raise self.error

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result() -> CheckResult:
    """Create a satisfied check result."""
    return CheckResult(ok=True)


def create_error_result(error: RequirementCheckError) -> CheckResult:
    """
    Create an unsatisfied check result.

    Args:
        error: The aggregated failure report.

    Returns:
        CheckResult: An immutable failed result.
    """
    return CheckResult(ok=False, error=error)

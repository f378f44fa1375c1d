"""Availability and concern evaluation for single decisions."""

from dataclasses import dataclass
from typing import Any, Optional

from .models import Concern, Decision


@dataclass
class Row:
    """Everything the presentation layer needs to show one decision."""

    decision: Decision
    value: Any
    unavailable: Optional[str] = None
    concern: Optional[Concern] = None

    @property
    def editable(self) -> bool:
        return not self.decision.is_fact and not self.unavailable


def unavailable_reason(decision: Decision, acc) -> Optional[str]:
    """Return why a decision does not apply right now, or None if it does."""
    if decision.is_available is None:
        return None
    reason = decision.is_available(acc)
    return reason if isinstance(reason, str) and reason else None


def evaluate_concern(decision: Decision, acc) -> Optional[Concern]:
    """Run a decision's concern function against its own value as seen by ``acc``."""
    if decision.concern is None:
        return None
    return decision.concern(acc.get(decision), acc)


def evaluate_row(decision: Decision, acc) -> Row:
    """Evaluate one decision; unavailable decisions skip their concern."""
    reason = unavailable_reason(decision, acc)
    concern = None if reason else evaluate_concern(decision, acc)
    return Row(decision=decision, value=acc.get(decision), unavailable=reason, concern=concern)

"""Installment schedule generation for debts"""

from dataclasses import replace
from datetime import date
from decimal import Decimal, ROUND_DOWN
from typing import Any, Dict, List, Tuple

from finance_api.domain.models import DebtState, Installment
from finance_api.utils.date_utils import add_months

CENT = Decimal("0.01")

# Changing any of these rebuilds the whole schedule
SCHEDULE_FIELDS = frozenset({"total_amount", "total_installments"})


def generate_installments(
    total_amount: Decimal,
    total_installments: int,
    start_date: date,
) -> List[Installment]:
    """
    Split a debt into monthly installments.

    Requirements:
    - Exactly `total_installments` entries (caller guarantees >= 1)
    - Flat split truncated to cents; last installment absorbs the remainder
    - Installment i is due i months after `start_date`, same day of month
      (clamped to the last day of shorter months)

    Example:
        100.00 / 3 -> [33.33, 33.33, 33.34]
    """
    total = Decimal(str(total_amount))
    base_amount = (total / total_installments).quantize(CENT, rounding=ROUND_DOWN)
    remainder = total - base_amount * total_installments

    installments = []
    for i in range(total_installments):
        amount = base_amount + (remainder if i == total_installments - 1 else 0)
        installments.append(Installment(amount=amount, due_date=add_months(start_date, i)))

    return installments


def apply_debt_update(state: DebtState, patch: Dict[str, Any]) -> Tuple[DebtState, bool]:
    """
    Merge a partial update into a debt.

    Entries that do not change the current value are ignored. Returns the
    new state and whether the installment schedule must be regenerated,
    which is the case only when the total amount or the installment count
    actually changes.
    """
    changes = {
        key: value
        for key, value in patch.items()
        if getattr(state, key) != value
    }
    regenerate = bool(SCHEDULE_FIELDS & changes.keys())
    return replace(state, **changes), regenerate

"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional


@dataclass
class Installment:
    """Single scheduled payment of a debt"""

    amount: Decimal
    due_date: date
    is_paid: bool = False
    payment_date: Optional[date] = None


@dataclass
class DebtState:
    """Mutable fields of a debt, as seen by update logic"""

    description: str
    total_amount: Decimal
    category: str
    total_installments: int
    current_installment: int = 1


@dataclass
class CategoryTotal:
    """Summed expenses of one category"""

    category: str
    total: Decimal


@dataclass
class MonthlySummary:
    """Revenues, expenses and balance for a single month bucket"""

    year_month: str
    revenues: Decimal
    expenses: Decimal
    balance: Decimal
    expenses_by_category: List[CategoryTotal] = field(default_factory=list)


@dataclass
class AnnualSummary:
    """Revenues, expenses and balance across every month of a year"""

    year: str
    revenues: Decimal
    expenses: Decimal
    balance: Decimal

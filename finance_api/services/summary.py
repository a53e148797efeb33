"""Monthly and annual dashboard summaries"""

import re
import uuid
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from finance_api.domain.buckets import bucket_key, month_bucket, year_prefix
from finance_api.domain.exceptions import BadRequestError
from finance_api.domain.models import AnnualSummary, CategoryTotal, MonthlySummary
from finance_api.infrastructure.database.models import Expense, Revenue
from finance_api.infrastructure.database.repositories import SummaryRepository

YEAR_PATTERN = re.compile(r"\d{4}")


class SummaryAggregator:
    """Aggregates an owner's revenues and expenses over month buckets"""

    def __init__(self, db: Session):
        self.repo = SummaryRepository(db)

    def monthly_summary(
        self,
        owner_id: uuid.UUID,
        month: Optional[int] = None,
        year: Optional[int] = None,
        today: Optional[date] = None,
    ) -> MonthlySummary:
        """
        Totals for one month.

        Uses the given month/year when both are present, otherwise the
        current calendar month.
        """
        if month and year:
            year_month = month_bucket(month, year)
        else:
            year_month = bucket_key(today or date.today())

        revenues = self.repo.total_in_month(Revenue, owner_id, year_month)
        expenses = self.repo.total_in_month(Expense, owner_id, year_month)
        by_category = [
            CategoryTotal(category=category, total=total)
            for category, total in self.repo.expenses_by_category(owner_id, year_month)
        ]

        return MonthlySummary(
            year_month=year_month,
            revenues=revenues,
            expenses=expenses,
            balance=revenues - expenses,
            expenses_by_category=by_category,
        )

    def annual_summary(self, owner_id: uuid.UUID, year: Optional[str]) -> AnnualSummary:
        """
        Totals across every month of `year`.

        Raises:
            BadRequestError: When `year` is missing or not a four digit year
        """
        if not year:
            raise BadRequestError('O parâmetro "year" é obrigatório.')
        if not YEAR_PATTERN.fullmatch(str(year)):
            raise BadRequestError('O parâmetro "year" deve ter 4 dígitos.')

        year_str = str(year)
        prefix = year_prefix(year_str)
        revenues = self.repo.total_with_prefix(Revenue, owner_id, prefix)
        expenses = self.repo.total_with_prefix(Expense, owner_id, prefix)

        return AnnualSummary(
            year=year_str,
            revenues=revenues,
            expenses=expenses,
            balance=revenues - expenses,
        )

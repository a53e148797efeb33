"""GET /api/dashboard/summary/* - monthly and annual totals"""

import time
import uuid
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from finance_api.api.v1.schemas import AnnualSummaryResponse, CategoryTotalSchema, MonthlySummaryResponse
from finance_api.api.dependencies import get_current_user_id, get_request_id
from finance_api.api.errors import unit_of_work
from finance_api.infrastructure.database.session import get_db
from finance_api.infrastructure.observability.logging import log_summary
from finance_api.infrastructure.observability.metrics import summary_counter
from finance_api.services.summary import SummaryAggregator

router = APIRouter()


@router.get("/summary/monthly", response_model=MonthlySummaryResponse)
def get_monthly_summary(
    request: Request,
    month: Optional[int] = Query(None, ge=1, le=12, description="Month number (1-12)"),
    year: Optional[int] = Query(None, ge=1, le=9999),
    owner_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Revenues, expenses, balance and expenses per category for one month.

    Defaults to the current month unless both month and year are given.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    with unit_of_work(db, request_id, "Erro ao gerar o resumo mensal."):
        summary = SummaryAggregator(db).monthly_summary(owner_id, month=month, year=year)

    summary_counter.labels(kind="monthly").inc()
    log_summary(request_id, str(owner_id), "monthly", summary.year_month, (time.time() - start_time) * 1000)

    return MonthlySummaryResponse(
        revenues=summary.revenues,
        expenses=summary.expenses,
        balance=summary.balance,
        expenses_by_category=[
            CategoryTotalSchema(category=c.category, total=c.total)
            for c in summary.expenses_by_category
        ],
    )


@router.get("/summary/annual", response_model=AnnualSummaryResponse)
def get_annual_summary(
    request: Request,
    year: Optional[str] = Query(None),
    owner_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Revenues, expenses and balance across all months of `year` (required)"""
    start_time = time.time()
    request_id = get_request_id(request)

    with unit_of_work(db, request_id, "Erro ao gerar o resumo anual."):
        summary = SummaryAggregator(db).annual_summary(owner_id, year)

    summary_counter.labels(kind="annual").inc()
    log_summary(request_id, str(owner_id), "annual", summary.year, (time.time() - start_time) * 1000)

    return AnnualSummaryResponse(
        year=summary.year,
        revenues=summary.revenues,
        expenses=summary.expenses,
        balance=summary.balance,
    )

"""Pydantic schemas for API request/response validation"""

import datetime as dt
import uuid
from decimal import Decimal
from typing import Annotated, Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

Money = Annotated[Decimal, Field(max_digits=14, decimal_places=2)]

# 50 years of monthly payments
MAX_INSTALLMENTS = 600

EMAIL_PATTERN = r".+@.+\..+"


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class PartialModel(CamelModel):
    """Partial update body: every field optional, but never explicitly null"""

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = sorted(key for key, value in data.items() if value is None)
            if nulls:
                raise ValueError(f"Campos não podem ser nulos: {', '.join(nulls)}")
        return data


# Auth

class RegisterRequest(CamelModel):
    """Request body for POST /api/register"""

    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6)


class LoginRequest(CamelModel):
    """Request body for POST /api/login"""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthResponse(CamelModel):
    id: uuid.UUID
    name: str
    email: str
    token: str


# Expenses and revenues

class RecordFields(CamelModel):
    description: str = Field(..., min_length=1)
    amount: Money
    category: str = Field(..., min_length=1)
    date: dt.date


class RevenueCreate(RecordFields):
    """Request body for POST/PUT /api/revenues"""


class ExpenseCreate(RecordFields):
    """Request body for POST/PUT /api/expenses"""

    type: Literal["fixed", "variable"]


class RevenuePatch(PartialModel):
    """Request body for PATCH /api/revenues/{id}"""

    description: Optional[str] = Field(None, min_length=1)
    amount: Optional[Money] = None
    category: Optional[str] = Field(None, min_length=1)
    date: Optional[dt.date] = None


class ExpensePatch(RevenuePatch):
    """Request body for PATCH /api/expenses/{id}"""

    type: Optional[Literal["fixed", "variable"]] = None


class RevenueResponse(CamelModel):
    id: uuid.UUID
    owner_id: uuid.UUID
    description: str
    amount: float
    category: str
    date: dt.date
    year_month: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class ExpenseResponse(RevenueResponse):
    type: str


class MessageResponse(BaseModel):
    message: str


# Debts

class DebtCreate(CamelModel):
    """Request body for POST /api/debts"""

    description: str = Field(..., min_length=1)
    total_amount: Money
    category: str = Field(..., min_length=1)
    total_installments: int = Field(..., gt=0, le=MAX_INSTALLMENTS)
    current_installment: int = Field(1, ge=1)


class DebtUpdate(PartialModel):
    """Request body for PUT /api/debts/{id} (partial merge)"""

    description: Optional[str] = Field(None, min_length=1)
    total_amount: Optional[Money] = None
    category: Optional[str] = Field(None, min_length=1)
    total_installments: Optional[int] = Field(None, gt=0, le=MAX_INSTALLMENTS)
    current_installment: Optional[int] = Field(None, ge=1)


class InstallmentSchema(CamelModel):
    """Single installment of a debt"""

    amount: float
    due_date: dt.date
    is_paid: bool = False
    payment_date: Optional[dt.date] = None


class DebtResponse(CamelModel):
    id: uuid.UUID
    owner_id: uuid.UUID
    description: str
    total_amount: float
    category: str
    total_installments: int
    current_installment: int
    installments: List[InstallmentSchema]
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


# Dashboard

class CategoryTotalSchema(CamelModel):
    category: str
    total: float


class MonthlySummaryResponse(CamelModel):
    """Response for GET /api/dashboard/summary/monthly"""

    revenues: float
    expenses: float
    balance: float
    expenses_by_category: List[CategoryTotalSchema]


class AnnualSummaryResponse(CamelModel):
    """Response for GET /api/dashboard/summary/annual"""

    year: str
    revenues: float
    expenses: float
    balance: float

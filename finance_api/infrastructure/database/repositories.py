"""Data access layer for users, records and debts

Every read, update and delete of a financial record filters on the owner, so
"belongs to someone else" and "does not exist" look the same to callers.
"""

import uuid
from decimal import Decimal
from typing import List, Optional, Tuple, Type, Union
from sqlalchemy import func
from sqlalchemy.orm import Session
from finance_api.infrastructure.database.models import User, Expense, Revenue, Debt

Record = Union[Expense, Revenue]


class UserRepository:
    """Repository for user accounts"""

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, name: str, email: str, password_hash: str) -> User:
        """Persist a new user"""
        db_user = User(name=name, email=email, password_hash=password_hash)
        self.db.add(db_user)
        self.db.flush()  # Get ID without committing
        return db_user

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()


class RecordRepository:
    """Owner-scoped repository for expenses or revenues"""

    def __init__(self, db: Session, model: Type[Record]):
        self.db = db
        self.model = model

    def add(self, record: Record) -> Record:
        self.db.add(record)
        self.db.flush()
        return record

    def list_for_owner(self, owner_id: uuid.UUID) -> List[Record]:
        """All records of an owner, most recent date first"""
        return (
            self.db.query(self.model)
            .filter(self.model.owner_id == owner_id)
            .order_by(self.model.date.desc(), self.model.created_at.desc())
            .all()
        )

    def get_for_owner(self, record_id: uuid.UUID, owner_id: uuid.UUID) -> Optional[Record]:
        return (
            self.db.query(self.model)
            .filter(self.model.id == record_id, self.model.owner_id == owner_id)
            .first()
        )

    def delete(self, record: Record) -> None:
        self.db.delete(record)
        self.db.flush()


class DebtRepository:
    """Owner-scoped repository for debts and their installments"""

    def __init__(self, db: Session):
        self.db = db

    def add(self, debt: Debt) -> Debt:
        self.db.add(debt)
        self.db.flush()
        return debt

    def list_for_owner(self, owner_id: uuid.UUID) -> List[Debt]:
        return (
            self.db.query(Debt)
            .filter(Debt.owner_id == owner_id)
            .order_by(Debt.created_at.desc())
            .all()
        )

    def get_for_owner(self, debt_id: uuid.UUID, owner_id: uuid.UUID) -> Optional[Debt]:
        return (
            self.db.query(Debt)
            .filter(Debt.id == debt_id, Debt.owner_id == owner_id)
            .first()
        )

    def delete(self, debt: Debt) -> None:
        self.db.delete(debt)
        self.db.flush()


class SummaryRepository:
    """Aggregate queries over month buckets"""

    def __init__(self, db: Session):
        self.db = db

    def total_in_month(self, model: Type[Record], owner_id: uuid.UUID, year_month: str) -> Decimal:
        """Sum of amounts in one exact bucket (0 when empty)"""
        total = (
            self.db.query(func.coalesce(func.sum(model.amount), 0))
            .filter(model.owner_id == owner_id, model.year_month == year_month)
            .scalar()
        )
        return Decimal(str(total))

    def total_with_prefix(self, model: Type[Record], owner_id: uuid.UUID, prefix: str) -> Decimal:
        """Sum of amounts over every bucket starting with `prefix` (0 when empty)"""
        total = (
            self.db.query(func.coalesce(func.sum(model.amount), 0))
            .filter(
                model.owner_id == owner_id,
                model.year_month.startswith(prefix, autoescape=True),
            )
            .scalar()
        )
        return Decimal(str(total))

    def expenses_by_category(self, owner_id: uuid.UUID, year_month: str) -> List[Tuple[str, Decimal]]:
        """Expense totals grouped by category for one bucket"""
        rows = (
            self.db.query(Expense.category, func.sum(Expense.amount))
            .filter(Expense.owner_id == owner_id, Expense.year_month == year_month)
            .group_by(Expense.category)
            .all()
        )
        return [(category, Decimal(str(total))) for category, total in rows]

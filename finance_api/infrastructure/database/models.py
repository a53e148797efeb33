"""SQLAlchemy ORM models for users and their financial records"""

import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Date, Integer, Numeric, ForeignKey, Text, Uuid
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()

MONEY = Numeric(14, 2)


class User(Base):
    """Account owning every other record"""

    __tablename__ = "app_user"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class Expense(Base):
    """Money spent, tagged with the month bucket of its date"""

    __tablename__ = "expense"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id = Column(Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(Text, nullable=False)
    amount = Column(MONEY, nullable=False)
    category = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    year_month = Column(String(7), nullable=False, index=True)
    type = Column(String(16), nullable=False)  # fixed | variable
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class Revenue(Base):
    """Money received, tagged with the month bucket of its date"""

    __tablename__ = "revenue"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id = Column(Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(Text, nullable=False)
    amount = Column(MONEY, nullable=False)
    category = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    year_month = Column(String(7), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class Debt(Base):
    """Debt split into monthly installments"""

    __tablename__ = "debt"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id = Column(Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(Text, nullable=False)
    total_amount = Column(MONEY, nullable=False)
    category = Column(Text, nullable=False)
    total_installments = Column(Integer, nullable=False)
    current_installment = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    installments = relationship(
        "DebtInstallment",
        back_populates="debt",
        cascade="all, delete-orphan",
        order_by="DebtInstallment.position",
    )


class DebtInstallment(Base):
    """Installment owned by a debt; replaced wholesale on regeneration"""

    __tablename__ = "debt_installment"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    debt_id = Column(Uuid, ForeignKey("debt.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    amount = Column(MONEY, nullable=False)
    due_date = Column(Date, nullable=False)
    is_paid = Column(Boolean, nullable=False, default=False)
    payment_date = Column(Date, nullable=True)

    debt = relationship("Debt", back_populates="installments")

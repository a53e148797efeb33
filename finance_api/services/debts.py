"""Debt creation and updates with explicit installment regeneration"""

import uuid
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from finance_api.domain.exceptions import NotFoundError
from finance_api.domain.installments import apply_debt_update, generate_installments
from finance_api.domain.models import DebtState
from finance_api.infrastructure.database.models import Debt, DebtInstallment
from finance_api.infrastructure.database.repositories import DebtRepository


def _state_of(debt: Debt) -> DebtState:
    return DebtState(
        description=debt.description,
        total_amount=debt.total_amount,
        category=debt.category,
        total_installments=debt.total_installments,
        current_installment=debt.current_installment,
    )


def _apply_state(debt: Debt, state: DebtState) -> None:
    debt.description = state.description
    debt.total_amount = state.total_amount
    debt.category = state.category
    debt.total_installments = state.total_installments
    debt.current_installment = state.current_installment


def _build_schedule(state: DebtState, start_date: date) -> List[DebtInstallment]:
    return [
        DebtInstallment(
            position=position,
            amount=inst.amount,
            due_date=inst.due_date,
            is_paid=inst.is_paid,
            payment_date=inst.payment_date,
        )
        for position, inst in enumerate(
            generate_installments(state.total_amount, state.total_installments, start_date)
        )
    ]


class DebtService:
    """Owner-scoped debt operations"""

    def __init__(self, db: Session):
        self.repo = DebtRepository(db)

    def create(self, owner_id: uuid.UUID, fields: Dict[str, Any], today: Optional[date] = None) -> Debt:
        """Persist a new debt with a schedule starting today"""
        state = DebtState(**fields)
        debt = Debt(owner_id=owner_id)
        _apply_state(debt, state)
        debt.installments = _build_schedule(state, today or date.today())
        return self.repo.add(debt)

    def list(self, owner_id: uuid.UUID) -> List[Debt]:
        return self.repo.list_for_owner(owner_id)

    def get(self, debt_id: uuid.UUID, owner_id: uuid.UUID, message: str = "Dívida não encontrada.") -> Debt:
        debt = self.repo.get_for_owner(debt_id, owner_id)
        if debt is None:
            raise NotFoundError(message)
        return debt

    def update(
        self,
        debt_id: uuid.UUID,
        owner_id: uuid.UUID,
        patch: Dict[str, Any],
        today: Optional[date] = None,
    ) -> tuple[Debt, bool]:
        """
        Merge a partial update into a debt.

        The schedule is rebuilt from `today` only when the total amount or the
        installment count changes; any other update leaves it untouched.

        Returns:
            The updated debt and whether its schedule was regenerated
        """
        debt = self.get(debt_id, owner_id, "Dívida não encontrada para atualização.")
        state, regenerate = apply_debt_update(_state_of(debt), patch)
        _apply_state(debt, state)
        if regenerate:
            debt.installments = _build_schedule(state, today or date.today())
        self.repo.db.flush()
        return debt, regenerate

    def delete(self, debt_id: uuid.UUID, owner_id: uuid.UUID) -> None:
        debt = self.get(debt_id, owner_id, "Dívida não encontrada para exclusão.")
        self.repo.delete(debt)

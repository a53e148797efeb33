"""Debt endpoints - CRUD with installment schedule regeneration"""

import uuid
from typing import List
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from finance_api.api.v1.schemas import DebtCreate, DebtResponse, DebtUpdate, MessageResponse
from finance_api.api.dependencies import get_current_user_id, get_request_id, parse_id
from finance_api.api.errors import unit_of_work
from finance_api.infrastructure.database.session import get_db
from finance_api.infrastructure.observability.logging import log_schedule_generated
from finance_api.infrastructure.observability.metrics import record_schedule, record_write
from finance_api.services.debts import DebtService

router = APIRouter()

NOT_FOUND = "Dívida não encontrada."


@router.post("/debts", response_model=DebtResponse, status_code=201)
def create_debt(
    body: DebtCreate,
    request: Request,
    owner_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Create a debt and its installment schedule.

    Installments are due monthly starting today, each carrying an equal
    share of the total (the last one absorbs cent rounding).
    """
    request_id = get_request_id(request)
    with unit_of_work(db, request_id, "Erro ao criar a dívida."):
        debt = DebtService(db).create(owner_id, body.model_dump())

    record_write("debt", "create")
    record_schedule("created", debt.total_installments)
    log_schedule_generated(request_id, str(owner_id), str(debt.id), "created", debt.total_installments)
    return DebtResponse.model_validate(debt)


@router.get("/debts", response_model=List[DebtResponse])
def list_debts(
    request: Request,
    owner_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with unit_of_work(db, get_request_id(request), "Erro ao buscar as dívidas."):
        return [DebtResponse.model_validate(d) for d in DebtService(db).list(owner_id)]


@router.get("/debts/{debt_id}", response_model=DebtResponse)
def get_debt(
    debt_id: str,
    request: Request,
    owner_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with unit_of_work(db, get_request_id(request), "Erro ao buscar a dívida."):
        debt = DebtService(db).get(parse_id(debt_id, NOT_FOUND), owner_id)
        return DebtResponse.model_validate(debt)


@router.put("/debts/{debt_id}", response_model=DebtResponse)
def update_debt(
    debt_id: str,
    body: DebtUpdate,
    request: Request,
    owner_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Merge the supplied fields into a debt.

    Changing totalAmount or totalInstallments rebuilds the whole schedule
    from today; other fields leave the installments as they are.
    """
    request_id = get_request_id(request)
    with unit_of_work(db, request_id, "Erro ao atualizar a dívida."):
        debt, regenerated = DebtService(db).update(
            parse_id(debt_id, NOT_FOUND), owner_id, body.model_dump(exclude_unset=True)
        )

    record_write("debt", "update")
    if regenerated:
        record_schedule("regenerated", debt.total_installments)
        log_schedule_generated(request_id, str(owner_id), str(debt.id), "regenerated", debt.total_installments)
    return DebtResponse.model_validate(debt)


@router.delete("/debts/{debt_id}", response_model=MessageResponse)
def delete_debt(
    debt_id: str,
    request: Request,
    owner_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    with unit_of_work(db, get_request_id(request), "Erro ao deletar a dívida."):
        DebtService(db).delete(parse_id(debt_id, NOT_FOUND), owner_id)
    record_write("debt", "delete")
    return MessageResponse(message="Dívida excluída com sucesso.")

"""CRUD endpoints for expenses and revenues

Both resources share one router factory; they differ only in their ORM model,
schemas and user-facing wording.
"""

import uuid
from dataclasses import dataclass
from typing import List, Type

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from finance_api.api.v1.schemas import (
    ExpenseCreate,
    ExpensePatch,
    ExpenseResponse,
    MessageResponse,
    RevenueCreate,
    RevenuePatch,
    RevenueResponse,
)
from finance_api.api.dependencies import get_current_user_id, get_request_id, parse_id
from finance_api.api.errors import unit_of_work
from finance_api.infrastructure.database.models import Expense, Revenue
from finance_api.infrastructure.database.repositories import Record
from finance_api.infrastructure.database.session import get_db
from finance_api.infrastructure.observability.logging import log_record_write
from finance_api.infrastructure.observability.metrics import record_write
from finance_api.services.records import RecordService


@dataclass(frozen=True)
class RecordResource:
    """Everything that distinguishes expenses from revenues at the HTTP layer"""

    path: str
    entity: str  # metric/log label
    model: Type[Record]
    create_schema: Type[BaseModel]
    patch_schema: Type[BaseModel]
    response_schema: Type[BaseModel]
    label: str  # "Despesa"
    singular: str  # "a despesa"
    plural: str  # "as despesas"
    deleted_message: str


def build_record_router(resource: RecordResource) -> APIRouter:
    router = APIRouter()
    CreateSchema = resource.create_schema
    PatchSchema = resource.patch_schema
    ResponseSchema = resource.response_schema
    not_found = f"{resource.label} não encontrada."

    def _written(request_id: str, owner_id: uuid.UUID, record: Record, operation: str):
        record_write(resource.entity, operation)
        log_record_write(request_id, str(owner_id), resource.entity, operation, record.year_month)
        return ResponseSchema.model_validate(record)

    @router.post(resource.path, response_model=ResponseSchema, status_code=201)
    def create_record(
        body: CreateSchema,
        request: Request,
        owner_id: uuid.UUID = Depends(get_current_user_id),
        db: Session = Depends(get_db),
    ):
        """Create a record; its month bucket is derived from `date`"""
        request_id = get_request_id(request)
        with unit_of_work(db, request_id, f"Erro ao criar {resource.singular}."):
            record = RecordService(db, resource.model).create(owner_id, body.model_dump())
        return _written(request_id, owner_id, record, "create")

    @router.get(resource.path, response_model=List[ResponseSchema])
    def list_records(
        request: Request,
        owner_id: uuid.UUID = Depends(get_current_user_id),
        db: Session = Depends(get_db),
    ):
        with unit_of_work(db, get_request_id(request), f"Erro ao buscar {resource.plural}."):
            records = RecordService(db, resource.model).list(owner_id)
            return [ResponseSchema.model_validate(r) for r in records]

    @router.get(resource.path + "/{record_id}", response_model=ResponseSchema)
    def get_record(
        record_id: str,
        request: Request,
        owner_id: uuid.UUID = Depends(get_current_user_id),
        db: Session = Depends(get_db),
    ):
        with unit_of_work(db, get_request_id(request), f"Erro ao buscar {resource.singular}."):
            record = RecordService(db, resource.model).get(parse_id(record_id, not_found), owner_id)
            return ResponseSchema.model_validate(record)

    @router.put(resource.path + "/{record_id}", response_model=ResponseSchema)
    def replace_record(
        record_id: str,
        body: CreateSchema,
        request: Request,
        owner_id: uuid.UUID = Depends(get_current_user_id),
        db: Session = Depends(get_db),
    ):
        """Replace every field of a record"""
        request_id = get_request_id(request)
        with unit_of_work(db, request_id, f"Erro ao atualizar {resource.singular}."):
            record = RecordService(db, resource.model).update(
                parse_id(record_id, not_found), owner_id, body.model_dump()
            )
        return _written(request_id, owner_id, record, "replace")

    @router.patch(resource.path + "/{record_id}", response_model=ResponseSchema)
    def patch_record(
        record_id: str,
        body: PatchSchema,
        request: Request,
        owner_id: uuid.UUID = Depends(get_current_user_id),
        db: Session = Depends(get_db),
    ):
        """Update only the supplied fields; a new `date` moves the record to its new bucket"""
        request_id = get_request_id(request)
        with unit_of_work(db, request_id, f"Erro ao atualizar {resource.singular}."):
            record = RecordService(db, resource.model).update(
                parse_id(record_id, not_found), owner_id, body.model_dump(exclude_unset=True)
            )
        return _written(request_id, owner_id, record, "patch")

    @router.delete(resource.path + "/{record_id}", response_model=MessageResponse)
    def delete_record(
        record_id: str,
        request: Request,
        owner_id: uuid.UUID = Depends(get_current_user_id),
        db: Session = Depends(get_db),
    ):
        request_id = get_request_id(request)
        with unit_of_work(db, request_id, f"Erro ao deletar {resource.singular}."):
            RecordService(db, resource.model).delete(parse_id(record_id, not_found), owner_id)
        record_write(resource.entity, "delete")
        return MessageResponse(message=resource.deleted_message)

    return router


expenses_router = build_record_router(
    RecordResource(
        path="/expenses",
        entity="expense",
        model=Expense,
        create_schema=ExpenseCreate,
        patch_schema=ExpensePatch,
        response_schema=ExpenseResponse,
        label="Despesa",
        singular="a despesa",
        plural="as despesas",
        deleted_message="Despesa excluída com sucesso.",
    )
)

revenues_router = build_record_router(
    RecordResource(
        path="/revenues",
        entity="revenue",
        model=Revenue,
        create_schema=RevenueCreate,
        patch_schema=RevenuePatch,
        response_schema=RevenueResponse,
        label="Receita",
        singular="a receita",
        plural="as receitas",
        deleted_message="Receita excluída com sucesso.",
    )
)

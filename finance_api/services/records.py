"""Expense and revenue write path

Every create, replace and partial update goes through `write_record_fields`,
which is the only place record fields are assigned and therefore the only
place the month bucket is derived.
"""

import uuid
from typing import Any, Dict, List, Type

from sqlalchemy.orm import Session

from finance_api.domain.buckets import bucket_key
from finance_api.domain.exceptions import NotFoundError
from finance_api.infrastructure.database.models import Expense, Revenue
from finance_api.infrastructure.database.repositories import Record, RecordRepository

ENTITY_LABELS = {
    Expense: "Despesa",
    Revenue: "Receita",
}


def write_record_fields(record: Record, fields: Dict[str, Any]) -> Record:
    """Assign `fields` to `record` and recompute its month bucket from the resulting date"""
    for key, value in fields.items():
        setattr(record, key, value)
    record.year_month = bucket_key(record.date)
    return record


class RecordService:
    """Owner-scoped CRUD for one record model (Expense or Revenue)"""

    def __init__(self, db: Session, model: Type[Record]):
        self.model = model
        self.label = ENTITY_LABELS[model]
        self.repo = RecordRepository(db, model)

    def create(self, owner_id: uuid.UUID, fields: Dict[str, Any]) -> Record:
        record = write_record_fields(self.model(owner_id=owner_id), fields)
        return self.repo.add(record)

    def list(self, owner_id: uuid.UUID) -> List[Record]:
        return self.repo.list_for_owner(owner_id)

    def get(self, record_id: uuid.UUID, owner_id: uuid.UUID) -> Record:
        """Fetch one record of the owner or raise NotFoundError"""
        record = self.repo.get_for_owner(record_id, owner_id)
        if record is None:
            raise NotFoundError(f"{self.label} não encontrada.")
        return record

    def update(self, record_id: uuid.UUID, owner_id: uuid.UUID, fields: Dict[str, Any]) -> Record:
        """
        Merge `fields` into an existing record.

        A full replace passes every writable attribute, a partial update only
        the supplied ones; both recompute the bucket.
        """
        record = self.get(record_id, owner_id)
        write_record_fields(record, fields)
        self.repo.db.flush()
        return record

    def delete(self, record_id: uuid.UUID, owner_id: uuid.UUID) -> None:
        record = self.repo.get_for_owner(record_id, owner_id)
        if record is None:
            raise NotFoundError(f"{self.label} não encontrada para exclusão.")
        self.repo.delete(record)

"""Mapping of domain failures to JSON error responses"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from finance_api.domain.exceptions import DomainException, InternalError, ValidationError


@contextmanager
def unit_of_work(db: Session, request_id: str, failure_message: str) -> Iterator[None]:
    """
    Commit on success, roll back on failure.

    Domain exceptions propagate unchanged; anything else is logged and
    re-raised as InternalError carrying `failure_message`.
    """
    try:
        yield
        db.commit()
    except DomainException:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logging.error(f"{failure_message} {e}", extra={"request_id": request_id})
        raise InternalError(failure_message, details=str(e)) from e


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        error = ValidationError("Erro de validação.", details=jsonable_encoder(exc.errors()))
        return JSONResponse(status_code=error.status_code, content=error.to_body())

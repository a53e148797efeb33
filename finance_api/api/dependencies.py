"""Dependency injection for FastAPI endpoints"""

import uuid
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from finance_api.domain.exceptions import AuthenticationError, NotFoundError
from finance_api.infrastructure.database.repositories import UserRepository
from finance_api.infrastructure.database.session import get_db
from finance_api.infrastructure.security import verify_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> uuid.UUID:
    """Resolve the authenticated owner from the bearer token"""
    if credentials is None:
        raise AuthenticationError("Não autorizado, token faltando ou inválido.")

    user_id = verify_token(credentials.credentials)
    if UserRepository(db).get_by_id(user_id) is None:
        raise AuthenticationError("Não autorizado, token faltando ou inválido.")
    return user_id


def parse_id(raw_id: str, message: str) -> uuid.UUID:
    """Path ids that are not UUIDs cannot match anything, so they are not found"""
    try:
        return uuid.UUID(raw_id)
    except ValueError:
        raise NotFoundError(message)

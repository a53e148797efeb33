"""POST /api/register and /api/login - account creation and token issuing"""

import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from finance_api.api.v1.schemas import AuthResponse, LoginRequest, RegisterRequest
from finance_api.api.dependencies import get_request_id
from finance_api.api.errors import unit_of_work
from finance_api.infrastructure.database.session import get_db
from finance_api.services.auth import AuthResult, AuthService

router = APIRouter()


def _to_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        id=result.user.id,
        name=result.user.name,
        email=result.user.email,
        token=result.token,
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(body: RegisterRequest, request: Request, db: Session = Depends(get_db)):
    """Create an account and return a bearer token for it"""
    request_id = get_request_id(request)
    with unit_of_work(db, request_id, "Erro ao registrar o usuário."):
        result = AuthService(db).register(body.name, body.email, body.password)

    logging.info("User registered", extra={"request_id": request_id, "owner_id": str(result.user.id)})
    return _to_response(result)


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """Exchange e-mail and password for a bearer token"""
    with unit_of_work(db, get_request_id(request), "Erro ao autenticar o usuário."):
        result = AuthService(db).login(body.email, body.password)
    return _to_response(result)

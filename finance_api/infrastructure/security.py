"""Password hashing and bearer token issuing/verification"""

import uuid
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from finance_api.config import settings
from finance_api.domain.exceptions import AuthenticationError


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


def issue_token(user_id: uuid.UUID) -> str:
    """Sign a token identifying `user_id`, valid for `jwt_expires_days`"""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expires_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> uuid.UUID:
    """
    Decode a bearer token and return the user id it carries.

    Raises:
        AuthenticationError: On bad signature, expiry or malformed subject
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return uuid.UUID(payload["sub"])
    except (jwt.PyJWTError, KeyError, ValueError, TypeError) as e:
        raise AuthenticationError("Não autorizado, token faltando ou inválido.") from e

"""User registration and login"""

from dataclasses import dataclass

from sqlalchemy.orm import Session

from finance_api.domain.exceptions import AuthenticationError, ConflictError
from finance_api.infrastructure.database.models import User
from finance_api.infrastructure.database.repositories import UserRepository
from finance_api.infrastructure.security import hash_password, issue_token, verify_password


@dataclass
class AuthResult:
    """Authenticated user plus the bearer token issued for it"""

    user: User
    token: str


class AuthService:
    def __init__(self, db: Session):
        self.users = UserRepository(db)

    def register(self, name: str, email: str, password: str) -> AuthResult:
        email = email.strip().lower()
        if self.users.get_by_email(email) is not None:
            raise ConflictError("Usuário já existe.")
        user = self.users.create_user(name=name, email=email, password_hash=hash_password(password))
        return AuthResult(user=user, token=issue_token(user.id))

    def login(self, email: str, password: str) -> AuthResult:
        """Check credentials; unknown e-mail and wrong password fail the same way"""
        user = self.users.get_by_email(email.strip().lower())
        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("Email ou senha inválidos.")
        return AuthResult(user=user, token=issue_token(user.id))

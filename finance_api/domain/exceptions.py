"""Domain-specific exceptions"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for domain layer, carrying the HTTP status it maps to"""

    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(DomainException):
    """Missing or malformed field in a request"""

    status_code = 400


class BadRequestError(DomainException):
    """Missing required query parameter"""

    status_code = 400


class ConflictError(DomainException):
    """Resource already exists (e.g. duplicate e-mail on registration)"""

    status_code = 400


class AuthenticationError(DomainException):
    """Missing, invalid or expired credentials"""

    status_code = 401


class NotFoundError(DomainException):
    """Owner-scoped lookup found nothing"""

    status_code = 404


class InternalError(DomainException):
    """Unexpected storage or runtime failure"""

    status_code = 500

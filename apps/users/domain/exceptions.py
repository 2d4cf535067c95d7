"""
User domain exceptions.
"""
from typing import Any

from shared.domain.exceptions import AlreadyExistsError, EntityNotFoundError, ValidationError


class InvalidEmailError(ValidationError):
    """Raised when an email is invalid."""

    def __init__(self, email: str):
        super().__init__(message=f"Invalid email format: '{email}'", field="email")
        self.email = email


class UserAlreadyExistsError(AlreadyExistsError):
    """Raised when attempting to create a user that already exists."""

    def __init__(self, field: str, value: str):
        super().__init__("User", field, value, code="USER_ALREADY_EXISTS")


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user is not found."""

    def __init__(self, identifier: Any, field: str = "id"):
        super().__init__("User", identifier, field=field, code="USER_NOT_FOUND")
        self.identifier = identifier

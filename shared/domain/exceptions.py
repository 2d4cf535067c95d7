"""
Domain exceptions.

Every error carries a machine readable ``code`` plus the structured fields the
boundary layer needs to build a precise client message.
"""
from typing import Any, Optional


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: Any, field: str = "id", code: str = None):
        super().__init__(
            message=f"{entity_name} with {field} '{entity_id}' not found",
            code=code or "ENTITY_NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.field = field


class AlreadyExistsError(DomainException):
    """Raised when a unique constraint would be violated."""

    def __init__(self, entity_name: str, field: str, value: Any, code: str = None):
        super().__init__(
            message=f"{entity_name} with {field} '{value}' already exists",
            code=code or "ALREADY_EXISTS"
        )
        self.entity_name = entity_name
        self.field = field
        self.value = value


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None, code: str = None):
        super().__init__(message=message, code=code or "VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolationError(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str, rule: str = None, code: str = None):
        super().__init__(message=message, code=code or "BUSINESS_RULE_VIOLATION")
        self.rule = rule


class InsufficientStockError(DomainException):
    """Raised when stock is insufficient."""

    def __init__(self, product_id: Any, requested: int, available: int):
        super().__init__(
            message=f"Insufficient stock for product '{product_id}': requested {requested}, available {available}",
            code="INSUFFICIENT_STOCK"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None, code: str = None):
        super().__init__(message=message, code=code or "INVALID_OPERATION")
        self.operation = operation
        self.state = state


class AccessDeniedError(DomainException):
    """Raised when a user touches a resource owned by someone else."""

    def __init__(self, resource: str, resource_id: Any, user_id: Any, code: str = None):
        super().__init__(
            message=f"User '{user_id}' cannot access {resource} '{resource_id}'",
            code=code or "ACCESS_DENIED"
        )
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id


class ProcessingError(DomainException):
    """Raised when a multi-step operation fails unexpectedly."""

    def __init__(self, message: str, operation: Optional[str] = None, code: str = None):
        super().__init__(message=message, code=code or "PROCESSING_FAILED")
        self.operation = operation

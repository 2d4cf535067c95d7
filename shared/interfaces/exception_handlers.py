"""
Custom exception handlers for DRF.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from shared.domain.exceptions import (
    AccessDeniedError,
    AlreadyExistsError,
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    InvalidOperationError,
    ProcessingError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# First match wins, so subclasses must precede their bases
STATUS_BY_EXCEPTION = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InsufficientStockError, status.HTTP_400_BAD_REQUEST),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (BusinessRuleViolationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (InvalidOperationError, status.HTTP_409_CONFLICT),
    (ProcessingError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def error_body(exc: DomainException) -> dict:
    """Error message, code and every structured field the exception carries."""
    body = {
        'error': exc.message,
        'code': exc.code,
    }
    for key, value in vars(exc).items():
        if key in ('message', 'code') or key.startswith('_'):
            continue
        body[key] = value
    return body


def status_for(exc: DomainException) -> int:
    for exception_class, http_status in STATUS_BY_EXCEPTION:
        if isinstance(exc, exception_class):
            return http_status
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, DomainException):
        http_status = status_for(exc)
        if http_status >= 500:
            logger.error("Domain processing failure: %s", exc, exc_info=exc)
            set_rollback()
        return Response(error_body(exc), status=http_status)

    return response

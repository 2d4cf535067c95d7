"""
Base use case result wrapper.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

from shared.domain.exceptions import DomainException

OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Result wrapper for a single step of a best-effort operation."""
    success: bool
    data: Optional[OutputDTO] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    error_details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, data: OutputDTO = None) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, error_code: str = None, **details: Any) -> 'UseCaseResult[OutputDTO]':
        """Create a failed result."""
        return cls(success=False, error=error, error_code=error_code, error_details=details)

    @classmethod
    def from_exception(cls, exc: Exception) -> 'UseCaseResult[OutputDTO]':
        """Create a failed result from a caught exception."""
        if isinstance(exc, DomainException):
            details = {
                key: value for key, value in vars(exc).items()
                if key not in ('message', 'code')
            }
            return cls.fail(exc.message, exc.code, **details)
        return cls.fail(str(exc), 'UNEXPECTED_ERROR')

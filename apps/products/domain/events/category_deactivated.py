"""
Category deactivated domain event.
"""
from dataclasses import dataclass

from shared.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class CategoryDeactivated(DomainEvent):
    """Event raised when a category is switched off."""
    category_id: int

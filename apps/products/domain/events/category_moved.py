"""
Category moved domain event.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class CategoryMoved(DomainEvent):
    """Event raised when a category is re-parented."""
    category_id: int
    old_parent_id: Optional[int]
    new_parent_id: Optional[int]

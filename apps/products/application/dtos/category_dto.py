"""
Category DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ...domain.entities.category import Category


@dataclass
class CategoryCreateDTO:
    """DTO for creating a category."""
    name: str
    slug: str
    description: str = ""
    parent_id: Optional[int] = None
    sort_order: Optional[int] = None
    image_url: str = ""
    is_active: bool = True


@dataclass
class CategoryUpdateDTO:
    """
    DTO for updating a category.

    ``None`` means "leave unchanged". A ``parent_id`` re-parents the category
    with the same checks as a move; moving back to the root goes through
    ``CategoryService.move_category(category_id, None)``.
    """
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    sort_order: Optional[int] = None
    parent_id: Optional[int] = None


@dataclass
class CategoryDTO:
    """DTO for category output."""
    id: int
    name: str
    slug: str
    description: str
    image_url: str
    parent_id: Optional[int]
    sort_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> 'CategoryDTO':
        """Create DTO from entity."""
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            image_url=category.image_url,
            parent_id=category.parent_id,
            sort_order=category.sort_order,
            is_active=category.is_active,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


@dataclass
class CategoryTreeNodeDTO:
    """Nested tree node; built per query, never stored."""
    id: int
    name: str
    slug: str
    sort_order: int
    is_active: bool
    depth: int
    children: List['CategoryTreeNodeDTO'] = field(default_factory=list)

    @classmethod
    def from_entity(cls, category: Category, depth: int) -> 'CategoryTreeNodeDTO':
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            sort_order=category.sort_order,
            is_active=category.is_active,
            depth=depth,
        )

    @property
    def has_children(self) -> bool:
        return bool(self.children)

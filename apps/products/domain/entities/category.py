"""
Category entity.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import AggregateRoot
from ..events.category_deactivated import CategoryDeactivated
from ..events.category_moved import CategoryMoved
from ..exceptions import InvalidCategoryDataError
from ..value_objects.slug import Slug

MAX_NAME_LENGTH = 100

# Root categories sit at depth 0, so the deepest allowed node has depth MAX_CATEGORY_DEPTH - 1
MAX_CATEGORY_DEPTH = 5


@dataclass(eq=False)
class Category(AggregateRoot):
    """
    Category node of the product hierarchy.

    The tree is stored as rows with a nullable ``parent_id``. A category never
    holds references to its parent or children objects.
    """
    name: str
    slug: str
    description: str = ""
    image_url: str = ""
    parent_id: Optional[int] = None
    sort_order: int = 0
    is_active: bool = True

    @classmethod
    def create(
        cls,
        name: str,
        slug: str,
        description: str = "",
        parent_id: Optional[int] = None,
        sort_order: int = 0,
        image_url: str = "",
    ) -> 'Category':
        """Factory method to create a new category."""
        return cls(
            name=cls.validate_name(name),
            slug=Slug(value=slug).value,
            description=description or "",
            image_url=image_url or "",
            parent_id=parent_id,
            sort_order=sort_order,
        )

    @staticmethod
    def validate_name(name: Optional[str]) -> str:
        """Return the trimmed name or raise when it is blank or too long."""
        cleaned = (name or "").strip()
        if not cleaned:
            raise InvalidCategoryDataError("Category name is required.", field="name")
        if len(cleaned) > MAX_NAME_LENGTH:
            raise InvalidCategoryDataError(
                f"Category name cannot exceed {MAX_NAME_LENGTH} characters.",
                field="name",
                value=name,
            )
        return cleaned

    def update(
        self,
        name: Optional[str] = None,
        slug: Optional[str] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        sort_order: Optional[int] = None,
    ) -> None:
        """Update category information. ``None`` leaves a field untouched."""
        if name is not None:
            self.name = self.validate_name(name)
        if slug is not None:
            self.slug = Slug(value=slug).value
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url
        if sort_order is not None:
            self.sort_order = sort_order
        self.touch()

    def move_to(self, parent_id: Optional[int], sort_order: int) -> None:
        """Attach the category under another parent (``None`` for root)."""
        old_parent_id = self.parent_id
        self.parent_id = parent_id
        self.sort_order = sort_order
        self.touch()
        if old_parent_id != parent_id:
            self.add_domain_event(
                CategoryMoved(
                    category_id=self.id,
                    old_parent_id=old_parent_id,
                    new_parent_id=parent_id,
                )
            )

    def change_sort_order(self, sort_order: int) -> None:
        self.sort_order = sort_order
        self.touch()

    def deactivate(self) -> bool:
        """Deactivate the category. Returns False when it was already inactive."""
        if not self.is_active:
            return False
        self.is_active = False
        self.touch()
        self.add_domain_event(CategoryDeactivated(category_id=self.id))
        return True

    def activate(self) -> None:
        """Activate the category."""
        self.is_active = True
        self.touch()

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

"""
Product and category domain exceptions.
"""
from typing import Any, Optional

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    AlreadyExistsError,
    ValidationError,
    BusinessRuleViolationError,
    InsufficientStockError,
)


class InvalidProductError(ValidationError):
    """Raised when product data is invalid."""

    def __init__(self, message: str, field: str = "product"):
        super().__init__(message=message, field=field)


class InvalidSKUError(ValidationError):
    """Raised when SKU format is invalid."""

    def __init__(self, sku: str):
        super().__init__(message=f"Invalid SKU format: '{sku}'", field="sku")
        self.sku = sku


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, identifier: Any, field: str = "id"):
        super().__init__("Product", identifier, field=field, code="PRODUCT_NOT_FOUND")
        self.identifier = identifier


class DuplicateSKUError(AlreadyExistsError):
    """Raised when a SKU already exists."""

    def __init__(self, sku: str):
        super().__init__("Product", "sku", sku, code="DUPLICATE_SKU")
        self.sku = sku


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category is not found."""

    def __init__(self, identifier: Any, field: str = "id"):
        super().__init__("Category", identifier, field=field, code="CATEGORY_NOT_FOUND")
        self.identifier = identifier


class CategoryAlreadyExistsError(AlreadyExistsError):
    """Raised when a category slug or name is already taken."""

    def __init__(self, field: str, value: str, parent_id: Optional[int] = None):
        super().__init__("Category", field, value, code="CATEGORY_ALREADY_EXISTS")
        self.parent_id = parent_id


class InvalidCategoryDataError(ValidationError):
    """Raised when category data is malformed or violates a structural limit."""

    def __init__(self, message: str, field: str = "category", value: Any = None):
        super().__init__(message=message, field=field, code="INVALID_CATEGORY_DATA")
        self.value = value


class CircularReferenceError(BusinessRuleViolationError):
    """Raised when re-parenting would make a category its own ancestor."""

    def __init__(
        self,
        category_id: int,
        parent_id: int,
        category_name: Optional[str] = None,
        parent_name: Optional[str] = None,
    ):
        if category_name and parent_name:
            message = (
                f"Circular reference detected: category '{category_name}' (id {category_id}) "
                f"cannot be a child of category '{parent_name}' (id {parent_id})"
            )
        else:
            message = (
                f"Circular reference detected: category {category_id} "
                f"cannot be a child of category {parent_id}"
            )
        super().__init__(message=message, rule="acyclic_category_tree", code="CIRCULAR_REFERENCE")
        self.category_id = category_id
        self.parent_id = parent_id
        self.category_name = category_name
        self.parent_name = parent_name


class CategoryDeleteError(BusinessRuleViolationError):
    """Raised when a category still has children or linked products."""

    def __init__(self, category_id: int, category_name: str, product_count: int, children_count: int):
        super().__init__(
            message=(
                f"Cannot delete category '{category_name}' (id {category_id}): "
                f"it has {product_count} product(s) and {children_count} child "
                f"categor{'y' if children_count == 1 else 'ies'}"
            ),
            rule="category_delete_requires_empty",
            code="CATEGORY_DELETE_FORBIDDEN",
        )
        self.category_id = category_id
        self.category_name = category_name
        self.product_count = product_count
        self.children_count = children_count


# Re-export for convenience
__all__ = [
    'DomainException',
    'InvalidProductError',
    'InvalidSKUError',
    'ProductNotFoundError',
    'DuplicateSKUError',
    'CategoryNotFoundError',
    'CategoryAlreadyExistsError',
    'InvalidCategoryDataError',
    'CircularReferenceError',
    'CategoryDeleteError',
    'InsufficientStockError',
]

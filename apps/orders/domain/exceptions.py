"""
Cart and order domain exceptions.
"""
from typing import Any, Optional

from shared.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    InvalidOperationError,
    ProcessingError,
    ValidationError,
)


class CartItemNotFoundError(EntityNotFoundError):
    """Raised when a cart line is missing."""

    def __init__(self, identifier: Any, field: str = "id", user_id: Optional[int] = None, code: str = None):
        super().__init__("CartItem", identifier, field=field, code=code or "CART_ITEM_NOT_FOUND")
        self.user_id = user_id


class ProductNotInCartError(CartItemNotFoundError):
    """Raised when a user's cart holds no line for a product."""

    def __init__(self, product_id: int, user_id: int):
        super().__init__(product_id, field="product_id", user_id=user_id, code="PRODUCT_NOT_IN_CART")
        self.product_id = product_id


class CartItemAccessDeniedError(AccessDeniedError):
    """Raised when a cart line belongs to another user."""

    def __init__(self, cart_item_id: int, user_id: int):
        super().__init__("cart item", cart_item_id, user_id, code="CART_ITEM_ACCESS_DENIED")


class InvalidQuantityError(ValidationError):
    """Raised when a quantity is out of range."""

    def __init__(self, quantity: Any, limit: Optional[int] = None, reason: Optional[str] = None, code: str = None):
        if reason is None:
            reason = (
                f"Quantity must be between 1 and {limit}, got {quantity}"
                if limit is not None else f"Invalid quantity: {quantity}"
            )
        super().__init__(message=reason, field="quantity", code=code or "INVALID_QUANTITY")
        self.quantity = quantity
        self.limit = limit


class CartItemLimitExceededError(InvalidQuantityError):
    """Raised when adding a new line to a cart that is already full."""

    def __init__(self, user_id: int, current_count: int, limit: int):
        super().__init__(
            quantity=current_count,
            limit=limit,
            reason=f"Cart of user '{user_id}' already holds {current_count} items (limit {limit})",
            code="CART_ITEM_LIMIT_EXCEEDED",
        )
        self.user_id = user_id


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, identifier: Any, field: str = "id"):
        super().__init__("Order", identifier, field=field, code="ORDER_NOT_FOUND")
        self.identifier = identifier


class OrderAccessDeniedError(AccessDeniedError):
    """Raised when an order belongs to another user."""

    def __init__(self, order_id: int, user_id: int):
        super().__init__("order", order_id, user_id, code="ORDER_ACCESS_DENIED")


class EmptyCartError(InvalidOperationError):
    """Raised when trying to checkout an empty cart."""

    def __init__(self, user_id: Optional[int] = None):
        super().__init__(
            message="Cannot checkout an empty cart",
            operation="checkout",
            state="empty",
            code="EMPTY_CART",
        )
        self.user_id = user_id


class InvalidOrderStateError(InvalidOperationError):
    """Raised when an order operation is invalid for the current state."""

    def __init__(self, operation: str, current_state: str):
        super().__init__(
            message=f"Cannot {operation} order in '{current_state}' state",
            operation=operation,
            state=current_state,
            code="INVALID_ORDER_STATE",
        )


class OrderProcessingError(ProcessingError):
    """Raised when order placement fails after validation."""

    def __init__(self, message: str, user_id: Optional[int] = None):
        super().__init__(message=message, operation="place_order", code="ORDER_PROCESSING_FAILED")
        self.user_id = user_id

"""
Cart DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional

from shared.application import UseCaseResult
from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem


class CartOperation(str, Enum):
    """Directive of a batch cart update, evaluated clear > sync > items."""
    BULK_UPDATE = 'bulk_update'
    CLEAR = 'clear'
    SYNC = 'sync'


@dataclass
class CartItemRequestDTO:
    """One requested line: the product and the quantity it should end up with."""
    product_id: int
    quantity: int = 1


@dataclass
class CartUpdateDTO:
    """DTO for a batch cart update."""
    items: List[CartItemRequestDTO] = field(default_factory=list)
    operation: Optional[str] = None

    @property
    def is_clear(self) -> bool:
        return (self.operation or '').lower() == CartOperation.CLEAR.value

    @property
    def is_sync(self) -> bool:
        return (self.operation or '').lower() == CartOperation.SYNC.value

    @property
    def has_items(self) -> bool:
        return bool(self.items)


@dataclass
class CartItemDTO:
    """DTO for cart item output."""
    id: int
    product_id: int
    product_name: str
    unit_price: Decimal
    quantity: int
    subtotal: Decimal
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, item: CartItem) -> 'CartItemDTO':
        """Create DTO from entity."""
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            unit_price=item.unit_price,
            quantity=item.quantity,
            subtotal=item.subtotal,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


@dataclass
class CartDTO:
    """DTO for cart output."""
    user_id: int
    items: List[CartItemDTO]
    item_count: int
    total_quantity: int
    subtotal: Decimal

    @classmethod
    def from_cart(cls, cart: Cart) -> 'CartDTO':
        return cls(
            user_id=cart.user_id,
            items=[CartItemDTO.from_entity(item) for item in cart.items],
            item_count=cart.item_count,
            total_quantity=cart.total_quantity,
            subtotal=cart.subtotal,
        )


@dataclass
class CartItemOutcome:
    """What happened to one requested line of a batch update."""
    product_id: int
    quantity: int
    result: UseCaseResult[CartItemDTO]

    @property
    def success(self) -> bool:
        return self.result.success


@dataclass
class CartSyncResultDTO:
    """
    Report of a sync pass.

    A line can appear in more than one list, e.g. repriced and then removed
    because its product ran out of stock. Failed lines are always removed.
    """
    user_id: int
    removed_item_ids: List[int] = field(default_factory=list)
    repriced_item_ids: List[int] = field(default_factory=list)
    adjusted_item_ids: List[int] = field(default_factory=list)
    failed_item_ids: List[int] = field(default_factory=list)
    errors: Dict[int, str] = field(default_factory=dict)
    cart: Optional[CartDTO] = None

    @property
    def changed(self) -> bool:
        return bool(
            self.removed_item_ids
            or self.repriced_item_ids
            or self.adjusted_item_ids
            or self.failed_item_ids
        )


@dataclass
class CartUpdateResultDTO:
    """Result of a batch cart update: the resulting cart plus per-line outcomes."""
    operation: CartOperation
    cart: CartDTO
    outcomes: List[CartItemOutcome] = field(default_factory=list)
    sync_report: Optional[CartSyncResultDTO] = None

    @property
    def succeeded(self) -> List[CartItemOutcome]:
        return [outcome for outcome in self.outcomes if outcome.success]

    @property
    def failed(self) -> List[CartItemOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.success]

    @property
    def has_failures(self) -> bool:
        return any(not outcome.success for outcome in self.outcomes)

"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from shared.domain import AggregateRoot, ValidationError, utc_now
from ..value_objects.order_status import OrderStatus
from ..value_objects.payment import PaymentMethod, PaymentStatus
from ..value_objects.shipping_info import ShippingInfo
from ..value_objects.order_number import OrderNumber
from ..events.order_placed import OrderPlaced
from ..events.order_status_changed import OrderStatusChanged
from ..exceptions import InvalidOrderStateError
from .order_item import OrderItem

CENT = Decimal('0.01')


def quantize_money(amount: Decimal) -> Decimal:
    """Order amounts are stored with two decimals, rounded half up."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(eq=False)
class Order(AggregateRoot):
    """Order entity representing a customer order."""
    order_number: OrderNumber
    user_id: int
    shipping_info: ShippingInfo
    items: List[OrderItem] = field(default_factory=list)
    payment_method: PaymentMethod = PaymentMethod.CREDIT_CARD
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    subtotal: Decimal = Decimal('0.00')
    tax_amount: Decimal = Decimal('0.00')
    shipping_amount: Decimal = Decimal('0.00')
    discount_amount: Decimal = Decimal('0.00')
    total_amount: Decimal = Decimal('0.00')
    tracking_number: str = ""
    notes: str = ""
    cancel_reason: str = ""
    shipped_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        user_id: int,
        items: List[OrderItem],
        shipping_info: ShippingInfo,
        tax_rate: Decimal,
        shipping_rate: Decimal,
        free_shipping_threshold: Decimal,
        payment_method: PaymentMethod = PaymentMethod.CREDIT_CARD,
        discount_amount: Decimal = Decimal('0'),
        notes: str = "",
    ) -> 'Order':
        """
        Factory method to create a new order and price it.

        total = subtotal + tax + shipping - discount. Shipping is free once
        the subtotal reaches ``free_shipping_threshold``.
        """
        if not items:
            raise ValidationError("Order must contain at least one item", field="items")

        subtotal = quantize_money(sum((item.subtotal for item in items), Decimal('0')))
        tax_amount = quantize_money(subtotal * tax_rate)
        shipping_amount = (
            Decimal('0.00') if subtotal >= free_shipping_threshold else quantize_money(shipping_rate)
        )
        discount = quantize_money(discount_amount)
        if discount < 0:
            raise ValidationError("Discount cannot be negative", field="discount_amount")
        gross = subtotal + tax_amount + shipping_amount
        if discount > gross:
            raise ValidationError("Discount cannot exceed the order amount", field="discount_amount")

        order = cls(
            order_number=OrderNumber.generate(),
            user_id=user_id,
            items=list(items),
            shipping_info=shipping_info,
            payment_method=payment_method,
            subtotal=subtotal,
            tax_amount=tax_amount,
            shipping_amount=shipping_amount,
            discount_amount=discount,
            total_amount=gross - discount,
            notes=notes or "",
        )
        order.add_domain_event(
            OrderPlaced(
                order_number=order.order_number.value,
                user_id=user_id,
                total_amount=order.total_amount,
            )
        )
        return order

    def confirm(self) -> None:
        """Confirm the order."""
        self._transition(OrderStatus.CONFIRMED, "confirm")

    def process(self) -> None:
        """Start processing the order."""
        self._transition(OrderStatus.PROCESSING, "process")

    def ship(self, tracking_number: str = "") -> None:
        """Ship the order."""
        self._transition(OrderStatus.SHIPPED, "ship")
        if tracking_number:
            self.tracking_number = tracking_number

    def deliver(self) -> None:
        """Mark the order as delivered."""
        self._transition(OrderStatus.DELIVERED, "deliver")

    def cancel(self, reason: str = "", by_user: bool = False) -> None:
        """Cancel the order. Customers can only cancel pending or confirmed orders."""
        if by_user and not self.status.can_be_cancelled_by_user:
            raise InvalidOrderStateError("cancel", self.status.value)
        self._transition(OrderStatus.CANCELLED, "cancel")
        self.cancel_reason = reason or ""

    def change_status(self, new_status: OrderStatus) -> bool:
        """Move to ``new_status``. Returns False when the order already has it."""
        if new_status == self.status:
            return False
        self._transition(new_status, f"move to {new_status.value}")
        return True

    def update_notes(self, notes: str) -> None:
        self.notes = notes or ""
        self.touch()

    def _transition(self, new_status: OrderStatus, operation: str) -> None:
        if not self.status.can_transition_to(new_status):
            raise InvalidOrderStateError(operation, self.status.value)

        old_status = self.status
        self.status = new_status
        now = utc_now()
        if new_status == OrderStatus.SHIPPED:
            self.shipped_at = now
        elif new_status == OrderStatus.DELIVERED:
            self.delivered_at = now
        elif new_status == OrderStatus.CANCELLED:
            self.cancelled_at = now
        self.touch()
        self.add_domain_event(
            OrderStatusChanged(
                order_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
            )
        )

    @property
    def is_cancellable(self) -> bool:
        """Check if the customer can still cancel the order."""
        return self.status.can_be_cancelled_by_user

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(item.quantity for item in self.items)

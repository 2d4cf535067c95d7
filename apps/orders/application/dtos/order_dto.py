"""
Order DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.value_objects.payment import PaymentMethod


@dataclass
class ShippingInfoDTO:
    recipient_name: str
    phone_number: str
    address: str
    city: str = ""
    postal_code: str = ""
    country: str = ""
    email: str = ""


@dataclass
class OrderCreateDTO:
    """DTO for placing an order from the current cart."""
    shipping_info: ShippingInfoDTO
    payment_method: str = PaymentMethod.CREDIT_CARD.value
    discount_amount: Decimal = Decimal('0')
    notes: str = ""


@dataclass
class OrderItemDTO:
    """DTO for order item output."""
    id: Optional[int]
    product_id: int
    product_name: str
    product_sku: str
    quantity: int
    unit_price: Decimal
    discount_amount: Decimal
    subtotal: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> 'OrderItemDTO':
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            product_sku=item.product_sku,
            quantity=item.quantity,
            unit_price=item.unit_price,
            discount_amount=item.discount_amount,
            subtotal=item.subtotal,
        )


@dataclass
class OrderDTO:
    """DTO for order output."""
    id: int
    order_number: str
    user_id: int
    status: str
    payment_method: str
    payment_status: str
    subtotal: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    discount_amount: Decimal
    total_amount: Decimal
    tracking_number: str
    notes: str
    cancel_reason: str
    shipping_info: ShippingInfoDTO
    created_at: datetime
    updated_at: datetime
    shipped_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    items: List[OrderItemDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        info = order.shipping_info
        return cls(
            id=order.id,
            order_number=order.order_number.value,
            user_id=order.user_id,
            status=order.status.value,
            payment_method=order.payment_method.value,
            payment_status=order.payment_status.value,
            subtotal=order.subtotal,
            tax_amount=order.tax_amount,
            shipping_amount=order.shipping_amount,
            discount_amount=order.discount_amount,
            total_amount=order.total_amount,
            tracking_number=order.tracking_number,
            notes=order.notes,
            cancel_reason=order.cancel_reason,
            shipping_info=ShippingInfoDTO(
                recipient_name=info.recipient_name,
                phone_number=info.phone_number,
                address=info.address,
                city=info.city,
                postal_code=info.postal_code,
                country=info.country,
                email=info.email,
            ),
            created_at=order.created_at,
            updated_at=order.updated_at,
            shipped_at=order.shipped_at,
            delivered_at=order.delivered_at,
            cancelled_at=order.cancelled_at,
            items=[OrderItemDTO.from_entity(item) for item in order.items],
        )

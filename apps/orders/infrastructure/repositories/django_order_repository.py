"""
Django ORM implementation of OrderRepository.
"""
from decimal import Decimal
from typing import List, Optional

from django.db import transaction

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.order_number import OrderNumber
from ...domain.value_objects.order_status import OrderStatus
from ...domain.value_objects.payment import PaymentMethod, PaymentStatus
from ...domain.value_objects.shipping_info import ShippingInfo
from ..models.order_model import OrderItemModel, OrderModel


class DjangoOrderRepository(OrderRepository):
    """Django ORM based order repository implementation."""

    def save(self, order: Order) -> Order:
        """Save an order. Line items are only written on insert."""
        info = order.shipping_info
        with transaction.atomic():
            model, created = OrderModel.objects.update_or_create(
                id=order.id,
                defaults={
                    'order_number': order.order_number.value,
                    'user_id': order.user_id,
                    'status': order.status.value,
                    'payment_method': order.payment_method.value,
                    'payment_status': order.payment_status.value,
                    'subtotal': order.subtotal,
                    'tax_amount': order.tax_amount,
                    'shipping_amount': order.shipping_amount,
                    'discount_amount': order.discount_amount,
                    'total_amount': order.total_amount,
                    'tracking_number': order.tracking_number,
                    'notes': order.notes,
                    'cancel_reason': order.cancel_reason,
                    'recipient_name': info.recipient_name,
                    'phone_number': info.phone_number,
                    'address': info.address,
                    'city': info.city,
                    'postal_code': info.postal_code,
                    'country': info.country,
                    'email': info.email,
                    'shipped_at': order.shipped_at,
                    'delivered_at': order.delivered_at,
                    'cancelled_at': order.cancelled_at,
                }
            )
            if created:
                OrderItemModel.objects.bulk_create([
                    OrderItemModel(
                        order=model,
                        product_id=item.product_id,
                        product_name=item.product_name,
                        product_sku=item.product_sku,
                        quantity=item.quantity,
                        unit_price=item.unit_price,
                        discount_amount=item.discount_amount,
                    )
                    for item in order.items
                ])
            return self._to_entity(model)

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """Find an order by ID."""
        try:
            model = OrderModel.objects.prefetch_related('items').get(id=order_id)
            return self._to_entity(model)
        except OrderModel.DoesNotExist:
            return None

    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        """Find an order by order number."""
        try:
            model = OrderModel.objects.prefetch_related('items').get(order_number=order_number)
            return self._to_entity(model)
        except OrderModel.DoesNotExist:
            return None

    def find_by_user_id(
        self,
        user_id: int,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Order]:
        """Find orders by user ID."""
        queryset = OrderModel.objects.filter(user_id=user_id).prefetch_related('items')
        if status is not None:
            queryset = queryset.filter(status=status.value)
        models = queryset.order_by('-created_at', '-id')[offset:offset + limit]
        return [self._to_entity(model) for model in models]

    def delete(self, order_id: int) -> bool:
        deleted, _ = OrderModel.objects.filter(id=order_id).delete()
        return deleted > 0

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        items = [
            OrderItem(
                id=item.id,
                order_id=model.id,
                product_id=item.product_id,
                product_name=item.product_name,
                product_sku=item.product_sku,
                quantity=item.quantity,
                unit_price=Decimal(str(item.unit_price)),
                discount_amount=Decimal(str(item.discount_amount)),
                created_at=item.created_at,
                updated_at=item.created_at,
            )
            for item in model.items.all()
        ]
        return Order(
            id=model.id,
            order_number=OrderNumber(value=model.order_number),
            user_id=model.user_id,
            items=items,
            shipping_info=ShippingInfo(
                recipient_name=model.recipient_name,
                phone_number=model.phone_number,
                address=model.address,
                city=model.city,
                postal_code=model.postal_code,
                country=model.country,
                email=model.email,
            ),
            payment_method=PaymentMethod(model.payment_method),
            status=OrderStatus(model.status),
            payment_status=PaymentStatus(model.payment_status),
            subtotal=Decimal(str(model.subtotal)),
            tax_amount=Decimal(str(model.tax_amount)),
            shipping_amount=Decimal(str(model.shipping_amount)),
            discount_amount=Decimal(str(model.discount_amount)),
            total_amount=Decimal(str(model.total_amount)),
            tracking_number=model.tracking_number,
            notes=model.notes,
            cancel_reason=model.cancel_reason,
            shipped_at=model.shipped_at,
            delivered_at=model.delivered_at,
            cancelled_at=model.cancelled_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

# Serializers
from .cart_serializer import (
    CartSerializer,
    CartItemSerializer,
    CartItemRequestSerializer,
    CartItemQuantitySerializer,
    CartUpdateSerializer,
    CartUpdateResultSerializer,
    CartSyncResultSerializer,
)
from .order_serializer import (
    OrderSerializer,
    OrderItemSerializer,
    OrderCreateSerializer,
    OrderStatusUpdateSerializer,
    OrderCancelSerializer,
)

__all__ = [
    'CartSerializer',
    'CartItemSerializer',
    'CartItemRequestSerializer',
    'CartItemQuantitySerializer',
    'CartUpdateSerializer',
    'CartUpdateResultSerializer',
    'CartSyncResultSerializer',
    'OrderSerializer',
    'OrderItemSerializer',
    'OrderCreateSerializer',
    'OrderStatusUpdateSerializer',
    'OrderCancelSerializer',
]

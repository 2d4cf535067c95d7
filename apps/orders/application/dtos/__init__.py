# Application DTOs
from .cart_dto import (
    CartOperation,
    CartItemRequestDTO,
    CartUpdateDTO,
    CartItemDTO,
    CartDTO,
    CartItemOutcome,
    CartSyncResultDTO,
    CartUpdateResultDTO,
)
from .order_dto import ShippingInfoDTO, OrderCreateDTO, OrderItemDTO, OrderDTO

__all__ = [
    'CartOperation',
    'CartItemRequestDTO',
    'CartUpdateDTO',
    'CartItemDTO',
    'CartDTO',
    'CartItemOutcome',
    'CartSyncResultDTO',
    'CartUpdateResultDTO',
    'ShippingInfoDTO',
    'OrderCreateDTO',
    'OrderItemDTO',
    'OrderDTO',
]

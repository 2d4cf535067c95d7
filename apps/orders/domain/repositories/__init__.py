# Repository interfaces
from .order_repository import OrderRepository
from .cart_item_repository import CartItemRepository

__all__ = ['OrderRepository', 'CartItemRepository']

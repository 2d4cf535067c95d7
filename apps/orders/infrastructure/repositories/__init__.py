# Repository implementations
from .django_order_repository import DjangoOrderRepository
from .django_cart_item_repository import DjangoCartItemRepository

__all__ = ['DjangoOrderRepository', 'DjangoCartItemRepository']

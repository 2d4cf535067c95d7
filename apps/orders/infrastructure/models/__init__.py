# Django models
from .order_model import OrderModel, OrderItemModel
from .cart_item_model import CartItemModel

__all__ = ['OrderModel', 'OrderItemModel', 'CartItemModel']

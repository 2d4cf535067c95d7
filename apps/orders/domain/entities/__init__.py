# Domain entities
from .order import Order
from .order_item import OrderItem
from .cart import Cart, MAX_CART_ITEMS
from .cart_item import CartItem, MAX_QUANTITY_PER_ITEM

__all__ = ['Order', 'OrderItem', 'Cart', 'CartItem', 'MAX_CART_ITEMS', 'MAX_QUANTITY_PER_ITEM']

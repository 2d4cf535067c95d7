# Domain entities
from .category import Category, MAX_CATEGORY_DEPTH
from .product import Product

__all__ = ['Category', 'Product', 'MAX_CATEGORY_DEPTH']

# Repository interfaces
from .category_repository import CategoryRepository
from .product_repository import ProductRepository

__all__ = ['CategoryRepository', 'ProductRepository']

# Repository implementations
from .django_product_repository import DjangoProductRepository
from .django_category_repository import DjangoCategoryRepository

__all__ = ['DjangoProductRepository', 'DjangoCategoryRepository']

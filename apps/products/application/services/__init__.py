# Application services
from .category_service import CategoryService
from .catalog_service import ProductCatalogService

__all__ = ['CategoryService', 'ProductCatalogService']

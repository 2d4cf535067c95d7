# Application DTOs
from .category_dto import CategoryCreateDTO, CategoryUpdateDTO, CategoryDTO, CategoryTreeNodeDTO
from .product_dto import ProductCreateDTO, ProductDTO

__all__ = [
    'CategoryCreateDTO',
    'CategoryUpdateDTO',
    'CategoryDTO',
    'CategoryTreeNodeDTO',
    'ProductCreateDTO',
    'ProductDTO',
]

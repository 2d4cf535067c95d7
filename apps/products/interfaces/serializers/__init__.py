# Serializers
from .product_serializer import ProductSerializer, ProductCreateSerializer
from .category_serializer import (
    CategorySerializer,
    CategoryTreeSerializer,
    CategoryCreateSerializer,
    CategoryUpdateSerializer,
    CategoryMoveSerializer,
    CategoryReorderSerializer,
)

__all__ = [
    'ProductSerializer',
    'ProductCreateSerializer',
    'CategorySerializer',
    'CategoryTreeSerializer',
    'CategoryCreateSerializer',
    'CategoryUpdateSerializer',
    'CategoryMoveSerializer',
    'CategoryReorderSerializer',
]

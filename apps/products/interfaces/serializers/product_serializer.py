"""
Product serializers.
"""
from rest_framework import serializers

from ...application.dtos.product_dto import ProductCreateDTO
from ...domain.value_objects.money import DEFAULT_CURRENCY


class ProductSerializer(serializers.Serializer):
    """Serializer for product output."""
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    sku = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    currency = serializers.CharField(read_only=True)
    stock_quantity = serializers.IntegerField(read_only=True)
    category_id = serializers.IntegerField(read_only=True, allow_null=True)
    is_active = serializers.BooleanField(read_only=True)
    is_in_stock = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class ProductCreateSerializer(serializers.Serializer):
    """Serializer for product creation."""
    name = serializers.CharField(min_length=2, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    sku = serializers.CharField(min_length=3, max_length=100)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    currency = serializers.CharField(max_length=3, default=DEFAULT_CURRENCY)
    stock_quantity = serializers.IntegerField(min_value=0, default=0)
    category_id = serializers.IntegerField(required=False, allow_null=True, default=None)

    def to_dto(self) -> ProductCreateDTO:
        return ProductCreateDTO(**self.validated_data)

"""
Cart serializers.
"""
from rest_framework import serializers

from ...application.dtos.cart_dto import CartItemRequestDTO, CartOperation, CartUpdateDTO
from ...domain.entities.cart_item import MAX_QUANTITY_PER_ITEM


class CartItemSerializer(serializers.Serializer):
    """Serializer for cart item output."""
    id = serializers.IntegerField(read_only=True)
    product_id = serializers.IntegerField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    user_id = serializers.IntegerField(read_only=True)
    items = CartItemSerializer(many=True, read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    total_quantity = serializers.IntegerField(read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class CartItemRequestSerializer(serializers.Serializer):
    """Serializer for adding or replacing a cart line."""
    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY_PER_ITEM, default=1)

    def to_dto(self) -> CartItemRequestDTO:
        return CartItemRequestDTO(**self.validated_data)


class CartItemQuantitySerializer(serializers.Serializer):
    """Serializer for updating a cart line quantity."""
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY_PER_ITEM)


class CartUpdateSerializer(serializers.Serializer):
    """Serializer for a batch cart update."""
    items = CartItemRequestSerializer(many=True, required=False, default=list)
    operation = serializers.ChoiceField(
        choices=[operation.value for operation in CartOperation],
        required=False,
        allow_null=True,
        default=None,
    )

    def validate(self, attrs):
        if attrs.get('operation') in (None, CartOperation.BULK_UPDATE.value) and not attrs.get('items'):
            raise serializers.ValidationError({'items': "Items list cannot be empty."})
        return attrs

    def to_dto(self) -> CartUpdateDTO:
        return CartUpdateDTO(
            items=[CartItemRequestDTO(**item) for item in self.validated_data['items']],
            operation=self.validated_data.get('operation'),
        )


class CartItemOutcomeSerializer(serializers.Serializer):
    """Serializer for the outcome of one requested line."""
    product_id = serializers.IntegerField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    success = serializers.BooleanField(read_only=True)
    error = serializers.CharField(source='result.error', read_only=True, allow_null=True)
    error_code = serializers.CharField(source='result.error_code', read_only=True, allow_null=True)


class CartSyncResultSerializer(serializers.Serializer):
    """Serializer for a sync report."""
    removed_item_ids = serializers.ListField(child=serializers.IntegerField(), read_only=True)
    repriced_item_ids = serializers.ListField(child=serializers.IntegerField(), read_only=True)
    adjusted_item_ids = serializers.ListField(child=serializers.IntegerField(), read_only=True)
    failed_item_ids = serializers.ListField(child=serializers.IntegerField(), read_only=True)
    cart = CartSerializer(read_only=True)


class CartUpdateResultSerializer(serializers.Serializer):
    """Serializer for a batch update result."""
    operation = serializers.CharField(source='operation.value', read_only=True)
    cart = CartSerializer(read_only=True)
    outcomes = CartItemOutcomeSerializer(many=True, read_only=True)
    has_failures = serializers.BooleanField(read_only=True)

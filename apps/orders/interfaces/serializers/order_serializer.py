"""
Order serializers.
"""
from rest_framework import serializers

from ...application.dtos.order_dto import OrderCreateDTO, ShippingInfoDTO
from ...domain.value_objects.order_status import OrderStatus
from ...domain.value_objects.payment import PaymentMethod


class OrderItemSerializer(serializers.Serializer):
    """Serializer for order item output."""
    id = serializers.IntegerField(read_only=True)
    product_id = serializers.IntegerField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    product_sku = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    discount_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class ShippingInfoSerializer(serializers.Serializer):
    """Serializer for shipping information."""
    recipient_name = serializers.CharField(max_length=100)
    phone_number = serializers.CharField(max_length=20)
    address = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    postal_code = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    country = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    email = serializers.EmailField(required=False, allow_blank=True, default='')


class OrderSerializer(serializers.Serializer):
    """Serializer for order output."""
    id = serializers.IntegerField(read_only=True)
    order_number = serializers.CharField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    status = serializers.CharField(read_only=True)
    payment_method = serializers.CharField(read_only=True)
    payment_status = serializers.CharField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    tax_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    shipping_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    discount_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    tracking_number = serializers.CharField(read_only=True)
    notes = serializers.CharField(read_only=True)
    cancel_reason = serializers.CharField(read_only=True)
    shipping_info = ShippingInfoSerializer(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
    shipped_at = serializers.DateTimeField(read_only=True, allow_null=True)
    delivered_at = serializers.DateTimeField(read_only=True, allow_null=True)
    cancelled_at = serializers.DateTimeField(read_only=True, allow_null=True)


class OrderCreateSerializer(serializers.Serializer):
    """Serializer for placing an order from the cart."""
    shipping_info = ShippingInfoSerializer()
    payment_method = serializers.ChoiceField(
        choices=[method.value for method in PaymentMethod],
        default=PaymentMethod.CREDIT_CARD.value,
    )
    discount_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    def to_dto(self) -> OrderCreateDTO:
        data = self.validated_data
        dto = OrderCreateDTO(
            shipping_info=ShippingInfoDTO(**data['shipping_info']),
            payment_method=data['payment_method'],
            notes=data['notes'],
        )
        if data.get('discount_amount') is not None:
            dto.discount_amount = data['discount_amount']
        return dto


class OrderStatusUpdateSerializer(serializers.Serializer):
    """Serializer for changing an order status."""
    status = serializers.ChoiceField(choices=[status.value for status in OrderStatus])


class OrderCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, default='', max_length=500)

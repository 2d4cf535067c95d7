"""
Order Django ORM models.
"""
from django.db import models

from ...domain.value_objects.order_status import OrderStatus
from ...domain.value_objects.payment import PaymentMethod, PaymentStatus


class OrderModel(models.Model):
    """Order model."""

    STATUS_CHOICES = [(status.value, status.name.title()) for status in OrderStatus]
    PAYMENT_METHOD_CHOICES = [(method.value, method.name.replace('_', ' ').title()) for method in PaymentMethod]
    PAYMENT_STATUS_CHOICES = [(status.value, status.name.title()) for status in PaymentStatus]

    order_number = models.CharField(max_length=50, unique=True, db_index=True)
    user_id = models.BigIntegerField(db_index=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending', db_index=True)
    payment_method = models.CharField(max_length=20, choices=PAYMENT_METHOD_CHOICES, default='credit_card')
    payment_status = models.CharField(max_length=20, choices=PAYMENT_STATUS_CHOICES, default='pending')

    subtotal = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    tax_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    shipping_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    discount_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    tracking_number = models.CharField(max_length=100, blank=True, default='')
    notes = models.TextField(blank=True, default='')
    cancel_reason = models.TextField(blank=True, default='')

    # Shipping information
    recipient_name = models.CharField(max_length=100)
    phone_number = models.CharField(max_length=20)
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100, blank=True, default='')
    postal_code = models.CharField(max_length=20, blank=True, default='')
    country = models.CharField(max_length=100, blank=True, default='')
    email = models.CharField(max_length=255, blank=True, default='')

    shipped_at = models.DateTimeField(null=True, blank=True)
    delivered_at = models.DateTimeField(null=True, blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']

    def __str__(self):
        return self.order_number


class OrderItemModel(models.Model):
    """Order item model."""

    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, related_name='items')
    product_id = models.BigIntegerField()
    product_name = models.CharField(max_length=255)
    product_sku = models.CharField(max_length=100)
    quantity = models.PositiveIntegerField(default=1)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    discount_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'order_items'
        ordering = ['id']

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"

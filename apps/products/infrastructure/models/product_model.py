"""
Product Django ORM model.
"""
from django.db import models

from ...domain.value_objects.money import DEFAULT_CURRENCY


class ProductModel(models.Model):
    """Product model."""

    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default='')
    sku = models.CharField(max_length=100, unique=True, db_index=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    currency = models.CharField(max_length=3, default=DEFAULT_CURRENCY)
    stock_quantity = models.PositiveIntegerField(default=0)
    category_id = models.BigIntegerField(null=True, blank=True, db_index=True)
    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['category_id', 'is_active']),
        ]

    def __str__(self):
        return f"{self.name} ({self.sku})"

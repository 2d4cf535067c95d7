"""
Cart item Django ORM model.
"""
from django.db import models


class CartItemModel(models.Model):
    """One product line of a user's cart."""

    user_id = models.BigIntegerField(db_index=True)
    product_id = models.BigIntegerField()
    product_name = models.CharField(max_length=255)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    quantity = models.PositiveIntegerField(default=1)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cart_items'
        ordering = ['created_at', 'id']
        constraints = [
            models.UniqueConstraint(fields=['user_id', 'product_id'], name='unique_cart_line_per_product'),
        ]

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"

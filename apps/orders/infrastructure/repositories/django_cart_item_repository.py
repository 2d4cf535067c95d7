"""
Django ORM implementation of CartItemRepository.
"""
from decimal import Decimal
from typing import List, Optional

from django.db import transaction

from ...domain.entities.cart_item import CartItem
from ...domain.repositories.cart_item_repository import CartItemRepository
from ..models.cart_item_model import CartItemModel


class DjangoCartItemRepository(CartItemRepository):
    """Django ORM based cart item repository implementation."""

    def save(self, cart_item: CartItem) -> CartItem:
        """Save a cart item entity."""
        with transaction.atomic():
            model, created = CartItemModel.objects.update_or_create(
                id=cart_item.id,
                defaults={
                    'user_id': cart_item.user_id,
                    'product_id': cart_item.product_id,
                    'product_name': cart_item.product_name,
                    'unit_price': cart_item.unit_price,
                    'quantity': cart_item.quantity,
                }
            )
            return self._to_entity(model)

    def find_by_id(self, cart_item_id: int) -> Optional[CartItem]:
        try:
            model = CartItemModel.objects.get(id=cart_item_id)
            return self._to_entity(model)
        except CartItemModel.DoesNotExist:
            return None

    def find_by_user_id(self, user_id: int) -> List[CartItem]:
        models = CartItemModel.objects.filter(user_id=user_id).order_by('created_at', 'id')
        return [self._to_entity(model) for model in models]

    def find_by_user_and_product(self, user_id: int, product_id: int) -> Optional[CartItem]:
        try:
            model = CartItemModel.objects.get(user_id=user_id, product_id=product_id)
            return self._to_entity(model)
        except CartItemModel.DoesNotExist:
            return None

    def count_by_user(self, user_id: int) -> int:
        return CartItemModel.objects.filter(user_id=user_id).count()

    def delete(self, cart_item_id: int) -> bool:
        deleted, _ = CartItemModel.objects.filter(id=cart_item_id).delete()
        return deleted > 0

    def delete_by_user_id(self, user_id: int) -> int:
        deleted, _ = CartItemModel.objects.filter(user_id=user_id).delete()
        return deleted

    def _to_entity(self, model: CartItemModel) -> CartItem:
        """Convert Django model to domain entity."""
        return CartItem(
            id=model.id,
            user_id=model.user_id,
            product_id=model.product_id,
            product_name=model.product_name,
            unit_price=Decimal(str(model.unit_price)),
            quantity=model.quantity,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

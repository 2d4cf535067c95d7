"""
Service wiring.

Builds application services on top of the Django ORM repositories. Commerce
policy values come from ``settings.COMMERCE``.
"""
from decimal import Decimal

from django.conf import settings

from apps.orders.application.services.cart_service import CartService, DEFAULT_TAX_RATE
from apps.orders.application.services.order_service import (
    DEFAULT_SHIPPING_RATE,
    FREE_SHIPPING_THRESHOLD,
    OrderService,
)
from apps.orders.infrastructure.repositories import DjangoCartItemRepository, DjangoOrderRepository
from apps.products.application.services.catalog_service import ProductCatalogService
from apps.products.application.services.category_service import CategoryService
from apps.products.infrastructure.repositories import DjangoCategoryRepository, DjangoProductRepository
from apps.users.application.services.user_service import UserService
from apps.users.infrastructure.repositories import DjangoUserRepository


def commerce_setting(name: str, default: Decimal) -> Decimal:
    value = getattr(settings, 'COMMERCE', {}).get(name, default)
    return Decimal(str(value))


def get_category_service() -> CategoryService:
    return CategoryService(
        category_repository=DjangoCategoryRepository(),
        product_repository=DjangoProductRepository(),
    )


def get_catalog_service() -> ProductCatalogService:
    return ProductCatalogService(
        product_repository=DjangoProductRepository(),
        category_repository=DjangoCategoryRepository(),
    )


def get_user_service() -> UserService:
    return UserService(user_repository=DjangoUserRepository())


def get_cart_service() -> CartService:
    return CartService(
        cart_item_repository=DjangoCartItemRepository(),
        user_service=get_user_service(),
        catalog_service=get_catalog_service(),
        default_tax_rate=commerce_setting('DEFAULT_TAX_RATE', DEFAULT_TAX_RATE),
    )


def get_order_service() -> OrderService:
    return OrderService(
        order_repository=DjangoOrderRepository(),
        cart_service=get_cart_service(),
        catalog_service=get_catalog_service(),
        user_service=get_user_service(),
        tax_rate=commerce_setting('DEFAULT_TAX_RATE', DEFAULT_TAX_RATE),
        shipping_rate=commerce_setting('SHIPPING_FLAT_RATE', DEFAULT_SHIPPING_RATE),
        free_shipping_threshold=commerce_setting('FREE_SHIPPING_THRESHOLD', FREE_SHIPPING_THRESHOLD),
    )

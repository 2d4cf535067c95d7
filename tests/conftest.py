"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest

from apps.orders.application.services.cart_service import CartService
from apps.orders.application.services.order_service import OrderService
from apps.products.application.services.catalog_service import ProductCatalogService
from apps.products.application.services.category_service import CategoryService
from apps.products.domain.entities.category import Category
from apps.products.domain.entities.product import Product
from apps.users.application.services.user_service import UserService
from apps.users.domain.entities.user import User
from tests.fakes import (
    InMemoryCartItemRepository,
    InMemoryCategoryRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def category_repository():
    return InMemoryCategoryRepository()


@pytest.fixture
def product_repository():
    return InMemoryProductRepository()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def cart_item_repository():
    return InMemoryCartItemRepository()


@pytest.fixture
def order_repository():
    return InMemoryOrderRepository()


@pytest.fixture
def category_service(category_repository, product_repository):
    return CategoryService(
        category_repository=category_repository,
        product_repository=product_repository,
    )


@pytest.fixture
def catalog_service(product_repository, category_repository):
    return ProductCatalogService(
        product_repository=product_repository,
        category_repository=category_repository,
    )


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository=user_repository)


@pytest.fixture
def cart_service(cart_item_repository, user_service, catalog_service):
    return CartService(
        cart_item_repository=cart_item_repository,
        user_service=user_service,
        catalog_service=catalog_service,
    )


@pytest.fixture
def order_service(order_repository, cart_service, catalog_service, user_service):
    return OrderService(
        order_repository=order_repository,
        cart_service=cart_service,
        catalog_service=catalog_service,
        user_service=user_service,
    )


@pytest.fixture
def make_category(category_repository):
    """Store a category directly, bypassing service checks."""
    def _make(name, parent_id=None, sort_order=0, is_active=True, category_id=None):
        category = Category(
            id=category_id,
            name=name,
            slug=name.lower().replace(' ', '-'),
            parent_id=parent_id,
            sort_order=sort_order,
            is_active=is_active,
        )
        return category_repository.save(category)
    return _make


@pytest.fixture
def make_product(product_repository):
    """Store a product directly with an optional fixed id."""
    def _make(name="Widget", price="20.00", stock=10, product_id=None, category_id=None, is_active=True, sku=None):
        product = Product.create(
            name=name,
            sku=sku or f"SKU-{name.upper().replace(' ', '-')}-{product_id or 0}",
            price=Decimal(price),
            stock_quantity=stock,
            category_id=category_id,
        )
        product.id = product_id
        product.is_active = is_active
        return product_repository.save(product)
    return _make


@pytest.fixture
def make_user(user_repository):
    def _make(user_id=None, email=None, username=None):
        suffix = user_id or len(user_repository.store.rows) + 1
        user = User.create(
            email=email or f"user{suffix}@example.com",
            username=username or f"user{suffix}",
        )
        user.id = user_id
        return user_repository.save(user)
    return _make

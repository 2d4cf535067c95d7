"""
In-memory repositories for service tests.

Entities are copied on the way in and out so that a service only changes
stored state through ``save`` and ``delete``, like with the ORM.
"""
import copy
from typing import Dict, List, Optional

from apps.orders.domain.entities.cart_item import CartItem
from apps.orders.domain.entities.order import Order
from apps.orders.domain.repositories.cart_item_repository import CartItemRepository
from apps.orders.domain.repositories.order_repository import OrderRepository
from apps.orders.domain.value_objects.order_status import OrderStatus
from apps.products.domain.entities.category import Category
from apps.products.domain.entities.product import Product
from apps.products.domain.repositories.category_repository import CategoryRepository
from apps.products.domain.repositories.product_repository import ProductRepository
from apps.users.domain.entities.user import User
from apps.users.domain.repositories.user_repository import UserRepository


class InMemoryStore:
    def __init__(self):
        self.rows: Dict[int, object] = {}
        self._next_id = 1

    def put(self, entity):
        if entity.id is None:
            entity.id = self._next_id
        self._next_id = max(self._next_id, entity.id + 1)
        self.rows[entity.id] = copy.deepcopy(entity)
        return copy.deepcopy(self.rows[entity.id])

    def get(self, entity_id):
        row = self.rows.get(entity_id)
        return copy.deepcopy(row) if row is not None else None

    def all(self) -> List:
        return [copy.deepcopy(row) for _, row in sorted(self.rows.items())]

    def remove(self, entity_id) -> bool:
        return self.rows.pop(entity_id, None) is not None


class InMemoryCategoryRepository(CategoryRepository):
    def __init__(self):
        self.store = InMemoryStore()

    def save(self, category: Category) -> Category:
        return self.store.put(category)

    def find_by_id(self, category_id: int) -> Optional[Category]:
        return self.store.get(category_id)

    def find_by_slug(self, slug: str) -> Optional[Category]:
        return next((c for c in self.store.all() if c.slug == slug), None)

    def find_by_name(self, name: str) -> Optional[Category]:
        return next((c for c in self.store.all() if c.name == name), None)

    def exists_by_id(self, category_id: int) -> bool:
        return category_id in self.store.rows

    def exists_by_slug(self, slug: str) -> bool:
        return self.find_by_slug(slug) is not None

    def exists_by_name(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def find_children(self, parent_id: Optional[int], active_only: bool = False) -> List[Category]:
        children = [
            c for c in self.store.all()
            if c.parent_id == parent_id and (c.is_active or not active_only)
        ]
        return sorted(children, key=lambda c: (c.sort_order, c.id))

    def find_all(self, is_active: Optional[bool] = None) -> List[Category]:
        rows = [c for c in self.store.all() if is_active is None or c.is_active == is_active]
        return sorted(rows, key=lambda c: (c.sort_order, c.id))

    def search(self, keyword: str, offset: int = 0, limit: int = 20) -> List[Category]:
        keyword = keyword.lower()
        rows = [
            c for c in self.find_all(is_active=True)
            if keyword in c.name.lower() or keyword in c.description.lower()
        ]
        return rows[offset:offset + limit]

    def count(self, is_active: Optional[bool] = None) -> int:
        return len(self.find_all(is_active=is_active))

    def delete(self, category_id: int) -> bool:
        return self.store.remove(category_id)


class InMemoryProductRepository(ProductRepository):
    def __init__(self):
        self.store = InMemoryStore()

    def save(self, product: Product) -> Product:
        return self.store.put(product)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self.store.get(product_id)

    def find_by_sku(self, sku: str) -> Optional[Product]:
        return next((p for p in self.store.all() if p.sku.value == sku.upper()), None)

    def find_all(self, category_id=None, is_active=True, offset=0, limit=20) -> List[Product]:
        rows = [
            p for p in self.store.all()
            if (category_id is None or p.category_id == category_id)
            and (is_active is None or p.is_active == is_active)
        ]
        return rows[offset:offset + limit]

    def count_by_category(self, category_id: int) -> int:
        return sum(1 for p in self.store.all() if p.category_id == category_id)

    def delete(self, product_id: int) -> bool:
        return self.store.remove(product_id)


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.store = InMemoryStore()

    def save(self, user: User) -> User:
        return self.store.put(user)

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.store.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.store.all() if u.email.value == email), None)

    def exists_by_id(self, user_id: int) -> bool:
        return user_id in self.store.rows

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def exists_by_username(self, username: str) -> bool:
        return any(u.username == username for u in self.store.all())

    def find_all(self, is_active=None, offset=0, limit=20) -> List[User]:
        rows = [u for u in self.store.all() if is_active is None or u.is_active == is_active]
        return rows[offset:offset + limit]


class InMemoryCartItemRepository(CartItemRepository):
    def __init__(self):
        self.store = InMemoryStore()
        self.fail_on_save_for: set = set()

    def save(self, cart_item: CartItem) -> CartItem:
        if cart_item.product_id in self.fail_on_save_for:
            raise RuntimeError(f"database unavailable for product {cart_item.product_id}")
        return self.store.put(cart_item)

    def find_by_id(self, cart_item_id: int) -> Optional[CartItem]:
        return self.store.get(cart_item_id)

    def find_by_user_id(self, user_id: int) -> List[CartItem]:
        return [i for i in self.store.all() if i.user_id == user_id]

    def find_by_user_and_product(self, user_id: int, product_id: int) -> Optional[CartItem]:
        return next(
            (i for i in self.store.all() if i.user_id == user_id and i.product_id == product_id),
            None,
        )

    def count_by_user(self, user_id: int) -> int:
        return len(self.find_by_user_id(user_id))

    def delete(self, cart_item_id: int) -> bool:
        return self.store.remove(cart_item_id)

    def delete_by_user_id(self, user_id: int) -> int:
        ids = [i.id for i in self.find_by_user_id(user_id)]
        for item_id in ids:
            self.store.remove(item_id)
        return len(ids)


class InMemoryOrderRepository(OrderRepository):
    def __init__(self):
        self.store = InMemoryStore()
        self._next_item_id = 1

    def save(self, order: Order) -> Order:
        order = copy.deepcopy(order)
        for item in order.items:
            if item.id is None:
                item.id = self._next_item_id
                self._next_item_id += 1
        saved = self.store.put(order)
        for item in saved.items:
            item.order_id = saved.id
        self.store.rows[saved.id].items = copy.deepcopy(saved.items)
        return saved

    def find_by_id(self, order_id: int) -> Optional[Order]:
        return self.store.get(order_id)

    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        return next((o for o in self.store.all() if o.order_number.value == order_number), None)

    def find_by_user_id(self, user_id, status: Optional[OrderStatus] = None, offset=0, limit=20) -> List[Order]:
        rows = [
            o for o in reversed(self.store.all())
            if o.user_id == user_id and (status is None or o.status == status)
        ]
        return rows[offset:offset + limit]

    def delete(self, order_id: int) -> bool:
        return self.store.remove(order_id)

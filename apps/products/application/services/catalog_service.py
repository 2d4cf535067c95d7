"""
Product catalog service.

Read access used by the cart and order services plus the stock movements
performed when orders are placed or cancelled.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from ...domain.entities.product import Product
from ...domain.exceptions import CategoryNotFoundError, DuplicateSKUError, ProductNotFoundError
from ...domain.repositories.category_repository import CategoryRepository
from ...domain.repositories.product_repository import ProductRepository
from ..dtos.product_dto import ProductCreateDTO

logger = logging.getLogger(__name__)


@dataclass
class ProductCatalogService:
    """Service for product lookups and stock changes."""

    product_repository: ProductRepository
    category_repository: Optional[CategoryRepository] = None

    def register_product(self, dto: ProductCreateDTO) -> Product:
        """Add a product to the catalog. SKUs are unique."""
        logger.info("Register product: sku=%s", dto.sku)
        product = Product.create(
            name=dto.name,
            sku=dto.sku,
            price=dto.price,
            stock_quantity=dto.stock_quantity,
            category_id=dto.category_id,
            description=dto.description,
            currency=dto.currency,
        )
        if self.product_repository.find_by_sku(product.sku.value) is not None:
            raise DuplicateSKUError(product.sku.value)
        if (
            dto.category_id is not None
            and self.category_repository is not None
            and not self.category_repository.exists_by_id(dto.category_id)
        ):
            raise CategoryNotFoundError(dto.category_id)

        saved = self.product_repository.save(product)
        logger.info("Product registered: id=%s, sku=%s", saved.id, saved.sku)
        return saved

    def find_by_id(self, product_id: int) -> Product:
        product = self.product_repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def find_by_id_optional(self, product_id: int) -> Optional[Product]:
        return self.product_repository.find_by_id(product_id)

    def find_by_category(self, category_id: int, offset: int = 0, limit: int = 20) -> List[Product]:
        return self.product_repository.find_all(category_id=category_id, offset=offset, limit=limit)

    def has_enough_stock(self, product_id: int, quantity: int) -> bool:
        return self.find_by_id(product_id).has_enough_stock(quantity)

    def get_stock_quantity(self, product_id: int) -> int:
        return self.find_by_id(product_id).stock.quantity

    def decrease_stock(self, product_id: int, quantity: int) -> Product:
        """Take ``quantity`` units out of stock or raise ``InsufficientStockError``."""
        product = self.find_by_id(product_id)
        product.decrease_stock(quantity)
        saved = self.product_repository.save(product)
        logger.info("Stock decreased: product_id=%s, quantity=%s, left=%s", product_id, quantity, saved.stock.quantity)
        return saved

    def increase_stock(self, product_id: int, quantity: int) -> Product:
        product = self.find_by_id(product_id)
        product.increase_stock(quantity)
        saved = self.product_repository.save(product)
        logger.info("Stock increased: product_id=%s, quantity=%s, now=%s", product_id, quantity, saved.stock.quantity)
        return saved

    def deactivate_product(self, product_id: int) -> Product:
        logger.info("Deactivate product: id=%s", product_id)
        product = self.find_by_id(product_id)
        product.deactivate()
        return self.product_repository.save(product)

    def change_price(self, product_id: int, amount) -> Product:
        logger.info("Change product price: id=%s, amount=%s", product_id, amount)
        product = self.find_by_id(product_id)
        product.change_price(amount)
        return self.product_repository.save(product)

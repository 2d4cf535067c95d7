"""
Cart service.

Keeps each user's cart lines consistent with the live catalog. Mutations
re-check quantity limits and stock at the moment they run; ``sync_cart``
repairs whatever drifted in between.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from apps.products.application.services.catalog_service import ProductCatalogService
from apps.products.domain.entities.product import Product
from apps.users.application.services.user_service import UserService
from shared.application import UseCaseResult
from shared.domain.exceptions import InsufficientStockError
from ...domain.entities.cart import Cart, MAX_CART_ITEMS
from ...domain.entities.cart_item import CartItem, MAX_QUANTITY_PER_ITEM
from ...domain.exceptions import (
    CartItemAccessDeniedError,
    CartItemLimitExceededError,
    CartItemNotFoundError,
    InvalidQuantityError,
    ProductNotInCartError,
)
from ...domain.repositories.cart_item_repository import CartItemRepository
from ..dtos.cart_dto import (
    CartDTO,
    CartItemDTO,
    CartItemOutcome,
    CartOperation,
    CartSyncResultDTO,
    CartUpdateDTO,
    CartUpdateResultDTO,
)

logger = logging.getLogger(__name__)

DEFAULT_TAX_RATE = Decimal('0.10')


@dataclass
class CartService:
    """Service for cart operations."""

    cart_item_repository: CartItemRepository
    user_service: UserService
    catalog_service: ProductCatalogService
    default_tax_rate: Decimal = DEFAULT_TAX_RATE

    # ------------------------------------------------------------------
    # Cart queries
    # ------------------------------------------------------------------

    def get_cart(self, user_id: int) -> Cart:
        """Get the cart of an existing user."""
        logger.debug("Get cart: user_id=%s", user_id)
        self.user_service.get_user(user_id)
        return self._load_cart(user_id)

    def get_cart_items(self, user_id: int) -> List[CartItem]:
        return self.cart_item_repository.find_by_user_id(user_id)

    def get_cart_item(self, user_id: int, cart_item_id: int) -> CartItem:
        return self._get_owned_item(user_id, cart_item_id)

    def is_cart_empty(self, user_id: int) -> bool:
        return self.cart_item_repository.count_by_user(user_id) == 0

    def get_cart_item_count(self, user_id: int) -> int:
        return self.cart_item_repository.count_by_user(user_id)

    def get_total_quantity(self, user_id: int) -> int:
        return self._load_cart(user_id).total_quantity

    def has_product(self, user_id: int, product_id: int) -> bool:
        return self.cart_item_repository.find_by_user_and_product(user_id, product_id) is not None

    def get_product_quantity_in_cart(self, user_id: int, product_id: int) -> int:
        item = self.cart_item_repository.find_by_user_and_product(user_id, product_id)
        return item.quantity if item else 0

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_item_to_cart(self, user_id: int, product_id: int, quantity: int) -> CartItem:
        """
        Add a product to the cart, merging into the existing line if there is one.

        Raises:
            InvalidQuantityError: quantity outside 1..99, also after merging.
            UserNotFoundError / ProductNotFoundError: unknown user or product.
            InsufficientStockError: not enough stock for the (combined) quantity.
            CartItemLimitExceededError: a new line would exceed 50 lines.
        """
        logger.info("Add item to cart: user_id=%s, product_id=%s, quantity=%s", user_id, product_id, quantity)

        CartItem.validate_quantity(quantity)
        self.user_service.get_user(user_id)
        product = self.catalog_service.find_by_id(product_id)
        self._ensure_stock(product, quantity)

        existing = self.cart_item_repository.find_by_user_and_product(user_id, product_id)
        if existing is not None:
            new_quantity = existing.quantity + quantity
            if new_quantity > MAX_QUANTITY_PER_ITEM:
                raise InvalidQuantityError(
                    new_quantity,
                    limit=MAX_QUANTITY_PER_ITEM,
                    reason=f"Maximum quantity per item exceeded: {new_quantity} > {MAX_QUANTITY_PER_ITEM}",
                )
            self._ensure_stock(product, new_quantity)

            existing.change_quantity(new_quantity)
            existing.refresh_price(product.unit_price)
            saved = self.cart_item_repository.save(existing)
            logger.info("Updated existing cart item: id=%s, quantity=%s", saved.id, saved.quantity)
            return saved

        current_count = self.cart_item_repository.count_by_user(user_id)
        if current_count >= MAX_CART_ITEMS:
            raise CartItemLimitExceededError(user_id, current_count, MAX_CART_ITEMS)

        item = CartItem.create(
            user_id=user_id,
            product_id=product.id,
            product_name=product.name,
            unit_price=product.unit_price,
            quantity=quantity,
        )
        saved = self.cart_item_repository.save(item)
        logger.info("Cart item added: id=%s, product_id=%s", saved.id, product_id)
        return saved

    def update_cart_item_quantity(self, user_id: int, cart_item_id: int, quantity: int) -> CartItem:
        """Replace the quantity of one of the user's lines."""
        logger.info(
            "Update cart item quantity: user_id=%s, cart_item_id=%s, quantity=%s", user_id, cart_item_id, quantity
        )
        CartItem.validate_quantity(quantity)
        item = self._get_owned_item(user_id, cart_item_id)

        product = self.catalog_service.find_by_id(item.product_id)
        self._ensure_stock(product, quantity)

        item.change_quantity(quantity)
        item.refresh_price(product.unit_price)
        saved = self.cart_item_repository.save(item)
        logger.info("Cart item quantity updated: id=%s, quantity=%s", saved.id, saved.quantity)
        return saved

    def remove_item_from_cart(self, user_id: int, cart_item_id: int) -> None:
        logger.info("Remove item from cart: user_id=%s, cart_item_id=%s", user_id, cart_item_id)
        item = self._get_owned_item(user_id, cart_item_id)
        self.cart_item_repository.delete(item.id)

    def remove_product_from_cart(self, user_id: int, product_id: int) -> None:
        logger.info("Remove product from cart: user_id=%s, product_id=%s", user_id, product_id)
        self.user_service.get_user(user_id)
        item = self.cart_item_repository.find_by_user_and_product(user_id, product_id)
        if item is None:
            raise ProductNotInCartError(product_id, user_id)
        self.cart_item_repository.delete(item.id)

    def clear_cart(self, user_id: int) -> int:
        """Remove every line of the user's cart. Returns the number removed."""
        removed = self.cart_item_repository.delete_by_user_id(user_id)
        logger.info("Cart cleared: user_id=%s, removed=%s", user_id, removed)
        return removed

    def update_cart(self, user_id: int, dto: CartUpdateDTO) -> CartUpdateResultDTO:
        """
        Batch update.

        ``clear`` wins over ``sync``, which wins over the item list. Items are
        applied one by one as upserts with replacement quantities; a failing
        item is logged and reported in the result while the rest still run.
        """
        logger.info(
            "Update cart: user_id=%s, operation=%s, item_count=%s", user_id, dto.operation, len(dto.items)
        )
        self.user_service.get_user(user_id)

        if dto.is_clear:
            self.clear_cart(user_id)
            return CartUpdateResultDTO(
                operation=CartOperation.CLEAR,
                cart=CartDTO.from_cart(self._load_cart(user_id)),
            )

        if dto.is_sync:
            report = self.sync_cart(user_id)
            return CartUpdateResultDTO(operation=CartOperation.SYNC, cart=report.cart, sync_report=report)

        outcomes = []
        for request in dto.items:
            try:
                existing = self.cart_item_repository.find_by_user_and_product(user_id, request.product_id)
                if existing is not None:
                    item = self.update_cart_item_quantity(user_id, existing.id, request.quantity)
                else:
                    item = self.add_item_to_cart(user_id, request.product_id, request.quantity)
                result = UseCaseResult.ok(CartItemDTO.from_entity(item))
            except Exception as exc:
                logger.warning(
                    "Failed to update cart item: product_id=%s, error=%s", request.product_id, exc
                )
                result = UseCaseResult.from_exception(exc)
            outcomes.append(CartItemOutcome(product_id=request.product_id, quantity=request.quantity, result=result))

        failed = sum(1 for outcome in outcomes if not outcome.success)
        if failed:
            logger.warning("Cart update finished with failures: user_id=%s, failed=%s/%s", user_id, failed, len(outcomes))

        return CartUpdateResultDTO(
            operation=CartOperation.BULK_UPDATE,
            cart=CartDTO.from_cart(self._load_cart(user_id)),
            outcomes=outcomes,
        )

    def sync_cart(self, user_id: int) -> CartSyncResultDTO:
        """
        Reconcile every line with the catalog.

        Per line, in order: lines of inactive or vanished products are
        removed; a drifted price is refreshed; a quantity above the available
        stock is clamped to ``min(stock, 99)``, or the line is removed when
        the product is out of stock. A line that fails with an unexpected
        error is removed too.
        """
        logger.info("Sync cart: user_id=%s", user_id)
        self.user_service.get_user(user_id)

        report = CartSyncResultDTO(user_id=user_id)
        for item in self.cart_item_repository.find_by_user_id(user_id):
            try:
                self._sync_item(item, report)
            except Exception as exc:
                logger.error("Error syncing cart item: id=%s, error=%s", item.id, exc)
                try:
                    self.cart_item_repository.delete(item.id)
                except Exception as cleanup_exc:
                    logger.error("Failed to remove cart item: id=%s, error=%s", item.id, cleanup_exc)
                report.failed_item_ids.append(item.id)
                report.errors[item.id] = str(exc)

        report.cart = CartDTO.from_cart(self._load_cart(user_id))
        logger.info(
            "Cart synced: user_id=%s, removed=%s, repriced=%s, adjusted=%s, failed=%s",
            user_id,
            len(report.removed_item_ids),
            len(report.repriced_item_ids),
            len(report.adjusted_item_ids),
            len(report.failed_item_ids),
        )
        return report

    # ------------------------------------------------------------------
    # Price calculations
    # ------------------------------------------------------------------

    def calculate_cart_subtotal(self, user_id: int) -> Decimal:
        return self._load_cart(user_id).subtotal

    def calculate_cart_tax(self, user_id: int, tax_rate: Optional[Decimal] = None) -> Decimal:
        return self.calculate_cart_subtotal(user_id) * self._tax_rate(tax_rate)

    def calculate_cart_total(self, user_id: int, tax_rate: Optional[Decimal] = None) -> Decimal:
        """Subtotal plus tax, without rounding."""
        subtotal = self.calculate_cart_subtotal(user_id)
        return subtotal + subtotal * self._tax_rate(tax_rate)

    def calculate_item_subtotal(self, cart_item_id: int) -> Decimal:
        item = self.cart_item_repository.find_by_id(cart_item_id)
        if item is None:
            raise CartItemNotFoundError(cart_item_id)
        return item.subtotal

    def _tax_rate(self, tax_rate) -> Decimal:
        rate = tax_rate if tax_rate is not None else self.default_tax_rate
        # str() keeps floats such as 0.2 exact
        return rate if isinstance(rate, Decimal) else Decimal(str(rate))

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_cart_items(self, user_id: int) -> List[CartItem]:
        """Lines that sync would touch. Nothing is modified."""
        logger.debug("Validate cart items: user_id=%s", user_id)
        invalid = []
        for item in self.cart_item_repository.find_by_user_id(user_id):
            product = self.catalog_service.find_by_id_optional(item.product_id)
            if (
                product is None
                or not product.is_active
                or not product.has_enough_stock(item.quantity)
                or product.unit_price != item.unit_price
            ):
                invalid.append(item)
        return invalid

    def check_product_availability(self, product_id: int, quantity: int) -> bool:
        product = self.catalog_service.find_by_id_optional(product_id)
        if product is None:
            logger.warning("Product not found during availability check: %s", product_id)
            return False
        return product.has_enough_stock(quantity)

    def validate_user_ownership(self, user_id: int, cart_item_id: int) -> bool:
        item = self.cart_item_repository.find_by_id(cart_item_id)
        return item is not None and item.belongs_to(user_id)

    @staticmethod
    def validate_quantity(quantity) -> bool:
        try:
            CartItem.validate_quantity(quantity)
        except InvalidQuantityError:
            return False
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load_cart(self, user_id: int) -> Cart:
        return Cart(user_id=user_id, items=self.cart_item_repository.find_by_user_id(user_id))

    def _get_owned_item(self, user_id: int, cart_item_id: int) -> CartItem:
        item = self.cart_item_repository.find_by_id(cart_item_id)
        if item is None:
            raise CartItemNotFoundError(cart_item_id, user_id=user_id)
        if not item.belongs_to(user_id):
            logger.warning("Cart item access denied: user_id=%s, cart_item_id=%s", user_id, cart_item_id)
            raise CartItemAccessDeniedError(cart_item_id, user_id)
        return item

    @staticmethod
    def _ensure_stock(product: Product, quantity: int) -> None:
        if not product.has_enough_stock(quantity):
            raise InsufficientStockError(
                product_id=product.id,
                requested=quantity,
                available=product.stock.quantity,
            )

    def _sync_item(self, item: CartItem, report: CartSyncResultDTO) -> None:
        product = self.catalog_service.find_by_id_optional(item.product_id)
        if product is None or not product.is_active:
            self.cart_item_repository.delete(item.id)
            report.removed_item_ids.append(item.id)
            logger.info("Removed unavailable product from cart: product_id=%s", item.product_id)
            return

        if item.refresh_price(product.unit_price):
            item = self.cart_item_repository.save(item)
            report.repriced_item_ids.append(item.id)
            logger.info("Updated price for cart item: id=%s, price=%s", item.id, item.unit_price)

        if not product.has_enough_stock(item.quantity):
            available = product.stock.quantity
            if available > 0:
                item.change_quantity(min(available, MAX_QUANTITY_PER_ITEM))
                item = self.cart_item_repository.save(item)
                report.adjusted_item_ids.append(item.id)
                logger.info("Adjusted quantity for cart item: id=%s, quantity=%s", item.id, item.quantity)
            else:
                self.cart_item_repository.delete(item.id)
                report.removed_item_ids.append(item.id)
                logger.info("Removed out of stock product from cart: product_id=%s", product.id)

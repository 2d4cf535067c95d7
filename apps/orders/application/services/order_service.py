"""
Order service.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple, Union

from apps.products.application.services.catalog_service import ProductCatalogService
from apps.users.application.services.user_service import UserService
from shared.domain.exceptions import ValidationError
from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.exceptions import (
    EmptyCartError,
    OrderAccessDeniedError,
    OrderNotFoundError,
    OrderProcessingError,
)
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.order_status import OrderStatus
from ...domain.value_objects.payment import PaymentMethod
from ...domain.value_objects.shipping_info import ShippingInfo
from ..dtos.order_dto import OrderCreateDTO
from .cart_service import CartService, DEFAULT_TAX_RATE

logger = logging.getLogger(__name__)

DEFAULT_SHIPPING_RATE = Decimal('15.00')
FREE_SHIPPING_THRESHOLD = Decimal('100.00')


@dataclass
class OrderService:
    """Turns a synced cart into an order and manages its status afterwards."""

    order_repository: OrderRepository
    cart_service: CartService
    catalog_service: ProductCatalogService
    user_service: UserService
    tax_rate: Decimal = DEFAULT_TAX_RATE
    shipping_rate: Decimal = DEFAULT_SHIPPING_RATE
    free_shipping_threshold: Decimal = FREE_SHIPPING_THRESHOLD

    def place_order_from_cart(self, user_id: int, dto: OrderCreateDTO) -> Order:
        """
        Place an order with everything in the user's cart.

        The cart is synced first so the order never contains inactive
        products, stale prices or quantities above stock. Stock is taken for
        every line and the cart is cleared once the order is stored.

        Raises:
            UserNotFoundError: unknown user.
            ValidationError: bad shipping info or payment method.
            EmptyCartError: nothing left in the cart after the sync.
            OrderProcessingError: anything failing after validation; stock
                already taken is put back and a stored order is deleted.
        """
        logger.info("Place order from cart: user_id=%s", user_id)
        self.user_service.get_user(user_id)

        shipping_info = ShippingInfo(
            recipient_name=dto.shipping_info.recipient_name,
            phone_number=dto.shipping_info.phone_number,
            address=dto.shipping_info.address,
            city=dto.shipping_info.city,
            postal_code=dto.shipping_info.postal_code,
            country=dto.shipping_info.country,
            email=dto.shipping_info.email,
        )
        payment_method = self._parse_payment_method(dto.payment_method)

        self.cart_service.sync_cart(user_id)
        cart_items = self.cart_service.get_cart_items(user_id)
        if not cart_items:
            raise EmptyCartError(user_id)

        taken: List[Tuple[int, int]] = []
        saved = None
        try:
            order_items = []
            for line in cart_items:
                product = self.catalog_service.find_by_id(line.product_id)
                order_items.append(
                    OrderItem(
                        product_id=product.id,
                        product_name=product.name,
                        product_sku=product.sku.value,
                        quantity=line.quantity,
                        unit_price=product.unit_price,
                    )
                )

            order = Order.create(
                user_id=user_id,
                items=order_items,
                shipping_info=shipping_info,
                tax_rate=self.tax_rate,
                shipping_rate=self.shipping_rate,
                free_shipping_threshold=self.free_shipping_threshold,
                payment_method=payment_method,
                discount_amount=dto.discount_amount or Decimal('0'),
                notes=dto.notes,
            )

            for item in order_items:
                self.catalog_service.decrease_stock(item.product_id, item.quantity)
                taken.append((item.product_id, item.quantity))

            saved = self.order_repository.save(order)
            self.cart_service.clear_cart(user_id)
        except Exception as exc:
            logger.error("Failed to place order: user_id=%s, error=%s", user_id, exc)
            if saved is not None:
                self.order_repository.delete(saved.id)
            for product_id, quantity in taken:
                self.catalog_service.increase_stock(product_id, quantity)
            raise OrderProcessingError(f"Failed to place order: {exc}", user_id=user_id) from exc

        logger.info(
            "Order placed: id=%s, number=%s, total=%s", saved.id, saved.order_number, saved.total_amount
        )
        return saved

    def get_order(self, order_id: int) -> Order:
        order = self.order_repository.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def get_order_for_user(self, user_id: int, order_id: int) -> Order:
        """Get an order, checking it belongs to the user."""
        order = self.get_order(order_id)
        if order.user_id != user_id:
            raise OrderAccessDeniedError(order_id, user_id)
        return order

    def get_order_by_number(self, order_number: str) -> Order:
        order = self.order_repository.find_by_order_number(order_number)
        if order is None:
            raise OrderNotFoundError(order_number, field="order_number")
        return order

    def get_user_orders(
        self,
        user_id: int,
        status: Optional[Union[OrderStatus, str]] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Order]:
        parsed = self._parse_status(status) if status is not None else None
        return self.order_repository.find_by_user_id(user_id, status=parsed, offset=offset, limit=limit)

    def update_order_status(self, order_id: int, status: Union[OrderStatus, str]) -> Order:
        """Move an order along its lifecycle. Setting the current status again is a no-op."""
        new_status = self._parse_status(status)
        logger.info("Update order status: id=%s, status=%s", order_id, new_status.value)

        order = self.get_order(order_id)
        if not order.change_status(new_status):
            return order

        saved = self.order_repository.save(order)
        if new_status == OrderStatus.CANCELLED:
            self._release_stock(saved)
        return saved

    def ship_order(self, order_id: int, tracking_number: str) -> Order:
        logger.info("Ship order: id=%s, tracking_number=%s", order_id, tracking_number)
        order = self.get_order(order_id)
        order.ship(tracking_number)
        return self.order_repository.save(order)

    def update_order_notes(self, order_id: int, notes: str) -> Order:
        order = self.get_order(order_id)
        order.update_notes(notes)
        return self.order_repository.save(order)

    def cancel_order_by_user(self, user_id: int, order_id: int, reason: str = "") -> Order:
        """Cancel a pending or confirmed order of the user and put its stock back."""
        logger.info("Cancel order by user: user_id=%s, order_id=%s", user_id, order_id)
        order = self.get_order_for_user(user_id, order_id)
        order.cancel(reason=reason, by_user=True)
        saved = self.order_repository.save(order)
        self._release_stock(saved)
        logger.info("Order cancelled: id=%s", saved.id)
        return saved

    def _release_stock(self, order: Order) -> None:
        for item in order.items:
            self.catalog_service.increase_stock(item.product_id, item.quantity)

    @staticmethod
    def _parse_status(status: Union[OrderStatus, str]) -> OrderStatus:
        try:
            return OrderStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown order status: '{status}'", field="status")

    @staticmethod
    def _parse_payment_method(method: Union[PaymentMethod, str]) -> PaymentMethod:
        try:
            return PaymentMethod(method)
        except ValueError:
            raise ValidationError(f"Unknown payment method: '{method}'", field="payment_method")

"""
Tests for placing orders from the cart and managing their status.
"""
from decimal import Decimal

import pytest

from apps.orders.application.dtos.order_dto import OrderCreateDTO, ShippingInfoDTO
from apps.orders.domain.exceptions import (
    EmptyCartError,
    InvalidOrderStateError,
    OrderAccessDeniedError,
    OrderNotFoundError,
    OrderProcessingError,
)
from apps.orders.domain.value_objects.order_status import OrderStatus
from apps.orders.domain.value_objects.payment import PaymentMethod
from apps.users.domain.exceptions import UserNotFoundError
from shared.domain.exceptions import ValidationError

USER_ID = 7


def order_request(**overrides):
    shipping = ShippingInfoDTO(
        recipient_name="Jamie Doe",
        phone_number="+1 555 0100",
        address="1 Main Street",
        city="Springfield",
        postal_code="12345",
        country="US",
    )
    values = {"shipping_info": shipping}
    values.update(overrides)
    return OrderCreateDTO(**values)


@pytest.fixture
def shopper(make_user):
    return make_user(user_id=USER_ID)


@pytest.fixture
def phone(make_product):
    return make_product("Phone", price="20.00", stock=10, product_id=42)


@pytest.fixture
def placed_order(order_service, cart_service, shopper, phone):
    cart_service.add_item_to_cart(USER_ID, 42, 2)
    return order_service.place_order_from_cart(USER_ID, order_request())


class TestPlaceOrder:
    def test_order_totals_include_tax_and_shipping(self, placed_order):
        assert placed_order.subtotal == Decimal("40.00")
        assert placed_order.tax_amount == Decimal("4.00")
        assert placed_order.shipping_amount == Decimal("15.00")
        assert placed_order.total_amount == Decimal("59.00")
        assert placed_order.status == OrderStatus.PENDING

    def test_free_shipping_from_threshold(self, order_service, cart_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, 42, 5)

        order = order_service.place_order_from_cart(USER_ID, order_request())

        assert order.subtotal == Decimal("100.00")
        assert order.shipping_amount == Decimal("0.00")
        assert order.total_amount == Decimal("110.00")

    def test_amounts_are_rounded_half_up(self, order_service, cart_service, make_product, shopper):
        make_product("Headphones", price="19.99", stock=10, product_id=1)
        cart_service.add_item_to_cart(USER_ID, 1, 3)

        order = order_service.place_order_from_cart(USER_ID, order_request())

        assert order.subtotal == Decimal("59.97")
        assert order.tax_amount == Decimal("6.00")
        assert order.total_amount == Decimal("80.97")

    def test_discount_is_subtracted(self, order_service, cart_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, 42, 2)

        order = order_service.place_order_from_cart(USER_ID, order_request(discount_amount=Decimal("9")))

        assert order.discount_amount == Decimal("9.00")
        assert order.total_amount == Decimal("50.00")

    def test_items_snapshot_catalog_data(self, placed_order):
        item = placed_order.items[0]
        assert item.product_id == 42
        assert item.product_name == "Phone"
        assert item.product_sku == "SKU-PHONE-42"
        assert item.quantity == 2
        assert item.unit_price == Decimal("20.00")
        assert item.order_id == placed_order.id

    def test_stock_is_taken_and_cart_cleared(self, catalog_service, cart_service, placed_order):
        assert catalog_service.get_stock_quantity(42) == 8
        assert cart_service.is_cart_empty(USER_ID)

    def test_order_number_format(self, placed_order):
        number = placed_order.order_number.value
        assert number.startswith("ORD-")
        assert len(number) == len("ORD-20240101-ABC123")

    def test_order_placed_event(self, placed_order):
        events = placed_order.domain_events
        assert events[0].event_type == "OrderPlaced"
        assert events[0].total_amount == Decimal("59.00")

    def test_cart_is_synced_before_pricing(self, order_service, cart_service, catalog_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, 42, 6)
        catalog_service.change_price(42, Decimal("25.00"))
        catalog_service.decrease_stock(42, 6)

        order = order_service.place_order_from_cart(USER_ID, order_request())

        assert order.items[0].quantity == 4
        assert order.items[0].unit_price == Decimal("25.00")
        assert catalog_service.get_stock_quantity(42) == 0

    def test_empty_cart(self, order_service, shopper):
        with pytest.raises(EmptyCartError) as exc_info:
            order_service.place_order_from_cart(USER_ID, order_request())
        assert exc_info.value.user_id == USER_ID

    def test_cart_emptied_by_sync(self, order_service, cart_service, catalog_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, 42, 1)
        catalog_service.deactivate_product(42)

        with pytest.raises(EmptyCartError):
            order_service.place_order_from_cart(USER_ID, order_request())

    def test_unknown_user(self, order_service):
        with pytest.raises(UserNotFoundError):
            order_service.place_order_from_cart(404, order_request())

    def test_unknown_payment_method(self, order_service, cart_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, 42, 1)

        with pytest.raises(ValidationError) as exc_info:
            order_service.place_order_from_cart(USER_ID, order_request(payment_method="barter"))

        assert exc_info.value.field == "payment_method"
        assert not cart_service.is_cart_empty(USER_ID)

    def test_shipping_address_is_required(self, order_service, cart_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, 42, 1)
        request = order_request()
        request.shipping_info.address = "  "

        with pytest.raises(ValidationError) as exc_info:
            order_service.place_order_from_cart(USER_ID, request)
        assert exc_info.value.field == "address"

    def test_failure_after_validation_restores_stock(
        self, order_service, order_repository, cart_service, catalog_service, monkeypatch, shopper, phone
    ):
        cart_service.add_item_to_cart(USER_ID, 42, 3)

        def broken_save(order):
            raise RuntimeError("connection lost")

        monkeypatch.setattr(order_repository, "save", broken_save)

        with pytest.raises(OrderProcessingError) as exc_info:
            order_service.place_order_from_cart(USER_ID, order_request())

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert catalog_service.get_stock_quantity(42) == 10
        assert cart_service.get_product_quantity_in_cart(USER_ID, 42) == 3

    def test_stored_order_is_removed_when_cart_clear_fails(
        self, order_service, cart_item_repository, cart_service, catalog_service, monkeypatch, shopper, phone
    ):
        cart_service.add_item_to_cart(USER_ID, 42, 3)

        def broken_clear(user_id):
            raise RuntimeError("connection lost")

        monkeypatch.setattr(cart_item_repository, "delete_by_user_id", broken_clear)

        with pytest.raises(OrderProcessingError):
            order_service.place_order_from_cart(USER_ID, order_request())

        assert order_service.get_user_orders(USER_ID) == []
        assert catalog_service.get_stock_quantity(42) == 10
        assert cart_service.get_product_quantity_in_cart(USER_ID, 42) == 3

    def test_payment_method_is_stored(self, order_service, cart_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, 42, 1)

        order = order_service.place_order_from_cart(USER_ID, order_request(payment_method="paypal"))

        assert order.payment_method == PaymentMethod.PAYPAL


class TestOrderQueries:
    def test_get_order_by_number(self, order_service, placed_order):
        found = order_service.get_order_by_number(placed_order.order_number.value)
        assert found.id == placed_order.id

    def test_unknown_order(self, order_service):
        with pytest.raises(OrderNotFoundError):
            order_service.get_order(1)
        with pytest.raises(OrderNotFoundError) as exc_info:
            order_service.get_order_by_number("ORD-20240101-AAAAAA")
        assert exc_info.value.field == "order_number"

    def test_order_of_other_user_is_denied(self, order_service, placed_order):
        with pytest.raises(OrderAccessDeniedError):
            order_service.get_order_for_user(8, placed_order.id)

    def test_user_orders_newest_first_with_status_filter(self, order_service, cart_service, placed_order):
        cart_service.add_item_to_cart(USER_ID, 42, 1)
        second = order_service.place_order_from_cart(USER_ID, order_request())
        order_service.update_order_status(second.id, "confirmed")

        assert [o.id for o in order_service.get_user_orders(USER_ID)] == [second.id, placed_order.id]
        assert [o.id for o in order_service.get_user_orders(USER_ID, status="pending")] == [placed_order.id]

    def test_unknown_status_filter(self, order_service):
        with pytest.raises(ValidationError):
            order_service.get_user_orders(USER_ID, status="lost")


class TestOrderStatus:
    def test_full_lifecycle(self, order_service, placed_order):
        order_service.update_order_status(placed_order.id, OrderStatus.CONFIRMED)
        order_service.update_order_status(placed_order.id, "processing")
        shipped = order_service.ship_order(placed_order.id, "TRACK-001")
        delivered = order_service.update_order_status(placed_order.id, "delivered")

        assert shipped.tracking_number == "TRACK-001"
        assert shipped.shipped_at is not None
        assert delivered.status == OrderStatus.DELIVERED
        assert delivered.delivered_at is not None

    def test_skipping_states_is_rejected(self, order_service, placed_order):
        with pytest.raises(InvalidOrderStateError) as exc_info:
            order_service.update_order_status(placed_order.id, "shipped")
        assert exc_info.value.state == "pending"

    def test_same_status_is_a_no_op(self, order_service, placed_order):
        order = order_service.update_order_status(placed_order.id, "pending")
        assert order.status == OrderStatus.PENDING

    def test_unknown_status(self, order_service, placed_order):
        with pytest.raises(ValidationError):
            order_service.update_order_status(placed_order.id, "teleported")

    def test_admin_cancel_releases_stock(self, order_service, catalog_service, placed_order):
        order_service.update_order_status(placed_order.id, "confirmed")
        order_service.update_order_status(placed_order.id, "processing")

        cancelled = order_service.update_order_status(placed_order.id, "cancelled")

        assert cancelled.status == OrderStatus.CANCELLED
        assert cancelled.cancelled_at is not None
        assert catalog_service.get_stock_quantity(42) == 10

    def test_delivered_order_cannot_be_cancelled(self, order_service, placed_order):
        for status in ("confirmed", "processing", "shipped", "delivered"):
            order_service.update_order_status(placed_order.id, status)

        with pytest.raises(InvalidOrderStateError):
            order_service.update_order_status(placed_order.id, "cancelled")

    def test_update_notes(self, order_service, placed_order):
        order = order_service.update_order_notes(placed_order.id, "Leave at the door")
        assert order.notes == "Leave at the door"


class TestCancelOrderByUser:
    def test_cancel_pending_order(self, order_service, catalog_service, placed_order):
        cancelled = order_service.cancel_order_by_user(USER_ID, placed_order.id, reason="Changed my mind")

        assert cancelled.status == OrderStatus.CANCELLED
        assert cancelled.cancel_reason == "Changed my mind"
        assert catalog_service.get_stock_quantity(42) == 10

    def test_cancel_confirmed_order(self, order_service, placed_order):
        order_service.update_order_status(placed_order.id, "confirmed")
        assert order_service.cancel_order_by_user(USER_ID, placed_order.id).status == OrderStatus.CANCELLED

    def test_processing_order_cannot_be_cancelled_by_user(self, order_service, catalog_service, placed_order):
        order_service.update_order_status(placed_order.id, "confirmed")
        order_service.update_order_status(placed_order.id, "processing")

        with pytest.raises(InvalidOrderStateError):
            order_service.cancel_order_by_user(USER_ID, placed_order.id)
        assert catalog_service.get_stock_quantity(42) == 8

    def test_other_user_cannot_cancel(self, order_service, placed_order):
        with pytest.raises(OrderAccessDeniedError):
            order_service.cancel_order_by_user(8, placed_order.id)

"""
Tests for the cart service.
"""
from decimal import Decimal

import pytest

from apps.orders.application.dtos.cart_dto import CartItemRequestDTO, CartOperation, CartUpdateDTO
from apps.orders.domain.entities.cart import MAX_CART_ITEMS
from apps.orders.domain.exceptions import (
    CartItemAccessDeniedError,
    CartItemLimitExceededError,
    CartItemNotFoundError,
    InvalidQuantityError,
    ProductNotInCartError,
)
from apps.products.domain.exceptions import ProductNotFoundError
from apps.users.domain.exceptions import UserNotFoundError
from shared.domain.exceptions import InsufficientStockError

USER_ID = 7
PRODUCT_ID = 42


@pytest.fixture
def shopper(make_user):
    return make_user(user_id=USER_ID)


@pytest.fixture
def phone(make_product):
    return make_product("Phone", price="20.00", stock=10, product_id=PRODUCT_ID)


class TestAddItemToCart:
    def test_add_new_line(self, cart_service, shopper, phone):
        item = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 5)

        assert item.id is not None
        assert item.quantity == 5
        assert item.unit_price == Decimal("20.00")
        assert item.product_name == "Phone"
        assert cart_service.get_cart_item_count(USER_ID) == 1

    def test_adding_same_product_merges_quantities(self, cart_service, shopper, phone):
        first = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 5)
        merged = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 3)

        assert merged.id == first.id
        assert merged.quantity == 8
        assert cart_service.get_cart_item_count(USER_ID) == 1
        assert cart_service.get_product_quantity_in_cart(USER_ID, PRODUCT_ID) == 8

    def test_merge_refreshes_price(self, cart_service, catalog_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 1)
        catalog_service.change_price(PRODUCT_ID, Decimal("18.50"))

        merged = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 1)

        assert merged.unit_price == Decimal("18.50")

    def test_merge_checks_combined_stock(self, cart_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 6)

        with pytest.raises(InsufficientStockError) as exc_info:
            cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 5)

        assert exc_info.value.requested == 11
        assert exc_info.value.available == 10
        assert cart_service.get_product_quantity_in_cart(USER_ID, PRODUCT_ID) == 6

    def test_merge_cannot_exceed_per_item_maximum(self, cart_service, make_product, shopper):
        make_product("Cable", price="2.00", stock=500, product_id=5)
        cart_service.add_item_to_cart(USER_ID, 5, 60)

        with pytest.raises(InvalidQuantityError) as exc_info:
            cart_service.add_item_to_cart(USER_ID, 5, 40)

        assert exc_info.value.quantity == 100
        assert exc_info.value.limit == 99

    @pytest.mark.parametrize("quantity", [0, -1, 100, True, 2.5, "3"])
    def test_invalid_quantity(self, cart_service, shopper, phone, quantity):
        with pytest.raises(InvalidQuantityError):
            cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, quantity)

    def test_insufficient_stock(self, cart_service, shopper, phone):
        with pytest.raises(InsufficientStockError):
            cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 11)
        assert cart_service.is_cart_empty(USER_ID)

    def test_unknown_user(self, cart_service, phone):
        with pytest.raises(UserNotFoundError):
            cart_service.add_item_to_cart(404, PRODUCT_ID, 1)

    def test_unknown_product(self, cart_service, shopper):
        with pytest.raises(ProductNotFoundError):
            cart_service.add_item_to_cart(USER_ID, 404, 1)

    def test_line_limit_applies_to_new_lines_only(self, cart_service, make_product, shopper):
        for index in range(MAX_CART_ITEMS):
            make_product(f"Item {index}", price="1.00", stock=5, product_id=100 + index)
            cart_service.add_item_to_cart(USER_ID, 100 + index, 1)
        make_product("One Too Many", price="1.00", stock=5, product_id=999)

        with pytest.raises(CartItemLimitExceededError) as exc_info:
            cart_service.add_item_to_cart(USER_ID, 999, 1)
        assert exc_info.value.limit == MAX_CART_ITEMS

        merged = cart_service.add_item_to_cart(USER_ID, 100, 2)
        assert merged.quantity == 3
        assert cart_service.get_cart_item_count(USER_ID) == MAX_CART_ITEMS


class TestCartItemOwnership:
    @pytest.fixture
    def item(self, cart_service, shopper, phone):
        return cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 2)

    def test_update_quantity_replaces_it(self, cart_service, item):
        updated = cart_service.update_cart_item_quantity(USER_ID, item.id, 4)
        assert updated.quantity == 4

    def test_update_quantity_checks_stock(self, cart_service, item):
        with pytest.raises(InsufficientStockError):
            cart_service.update_cart_item_quantity(USER_ID, item.id, 11)

    def test_other_user_is_denied(self, cart_service, make_user, item):
        make_user(user_id=8)

        with pytest.raises(CartItemAccessDeniedError) as exc_info:
            cart_service.update_cart_item_quantity(8, item.id, 1)
        assert exc_info.value.user_id == 8

        with pytest.raises(CartItemAccessDeniedError):
            cart_service.remove_item_from_cart(8, item.id)
        assert cart_service.get_cart_item_count(USER_ID) == 1

    def test_missing_line_is_not_found(self, cart_service, item):
        with pytest.raises(CartItemNotFoundError) as exc_info:
            cart_service.get_cart_item(USER_ID, 12345)
        assert exc_info.value.code == "CART_ITEM_NOT_FOUND"

    def test_validate_user_ownership(self, cart_service, item):
        assert cart_service.validate_user_ownership(USER_ID, item.id)
        assert not cart_service.validate_user_ownership(8, item.id)
        assert not cart_service.validate_user_ownership(USER_ID, 12345)

    def test_remove_item(self, cart_service, item):
        cart_service.remove_item_from_cart(USER_ID, item.id)
        assert cart_service.is_cart_empty(USER_ID)

    def test_remove_product(self, cart_service, item):
        cart_service.remove_product_from_cart(USER_ID, PRODUCT_ID)
        assert not cart_service.has_product(USER_ID, PRODUCT_ID)

    def test_remove_product_not_in_cart(self, cart_service, make_product, item):
        make_product("Tablet", product_id=43)

        with pytest.raises(ProductNotInCartError) as exc_info:
            cart_service.remove_product_from_cart(USER_ID, 43)

        assert exc_info.value.code == "PRODUCT_NOT_IN_CART"
        assert exc_info.value.product_id == 43
        assert isinstance(exc_info.value, CartItemNotFoundError)

    def test_clear_cart_returns_removed_count(self, cart_service, make_product, item):
        make_product("Tablet", product_id=43)
        cart_service.add_item_to_cart(USER_ID, 43, 1)

        assert cart_service.clear_cart(USER_ID) == 2
        assert cart_service.clear_cart(USER_ID) == 0


class TestSyncCart:
    def test_quantity_is_clamped_to_remaining_stock(self, cart_service, catalog_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 5)
        item = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 3)
        catalog_service.decrease_stock(PRODUCT_ID, 7)

        report = cart_service.sync_cart(USER_ID)

        assert report.adjusted_item_ids == [item.id]
        assert report.removed_item_ids == []
        assert cart_service.get_product_quantity_in_cart(USER_ID, PRODUCT_ID) == 3
        assert report.cart.total_quantity == 3

    def test_inactive_product_is_removed(self, cart_service, catalog_service, make_product, shopper, phone):
        make_product("Old Phone", price="5.00", stock=10, product_id=99)
        kept = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 1)
        stale = cart_service.add_item_to_cart(USER_ID, 99, 2)
        catalog_service.deactivate_product(99)

        report = cart_service.sync_cart(USER_ID)

        assert report.removed_item_ids == [stale.id]
        assert [line.id for line in report.cart.items] == [kept.id]
        assert report.changed

    def test_vanished_product_is_removed(self, cart_service, product_repository, shopper, phone):
        item = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 1)
        product_repository.delete(PRODUCT_ID)

        report = cart_service.sync_cart(USER_ID)

        assert report.removed_item_ids == [item.id]
        assert cart_service.is_cart_empty(USER_ID)

    def test_out_of_stock_product_is_removed(self, cart_service, catalog_service, shopper, phone):
        item = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 2)
        catalog_service.decrease_stock(PRODUCT_ID, 10)

        report = cart_service.sync_cart(USER_ID)

        assert report.removed_item_ids == [item.id]
        assert report.adjusted_item_ids == []

    def test_drifted_price_is_refreshed(self, cart_service, catalog_service, shopper, phone):
        item = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 2)
        catalog_service.change_price(PRODUCT_ID, Decimal("17.25"))

        report = cart_service.sync_cart(USER_ID)

        assert report.repriced_item_ids == [item.id]
        assert cart_service.get_cart_item(USER_ID, item.id).unit_price == Decimal("17.25")
        assert report.cart.subtotal == Decimal("34.50")

    def test_consistent_cart_is_untouched(self, cart_service, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 2)

        report = cart_service.sync_cart(USER_ID)

        assert not report.changed
        assert report.cart.item_count == 1

    def test_failing_line_is_removed_and_reported(
        self, cart_service, catalog_service, cart_item_repository, make_product, shopper, phone
    ):
        make_product("Tablet", price="30.00", stock=5, product_id=43)
        broken = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 1)
        healthy = cart_service.add_item_to_cart(USER_ID, 43, 1)
        catalog_service.change_price(PRODUCT_ID, Decimal("21.00"))
        cart_item_repository.fail_on_save_for.add(PRODUCT_ID)

        report = cart_service.sync_cart(USER_ID)

        assert report.failed_item_ids == [broken.id]
        assert "database unavailable" in report.errors[broken.id]
        assert [line.id for line in report.cart.items] == [healthy.id]

    def test_failed_cleanup_does_not_abort_sync(
        self, cart_service, catalog_service, cart_item_repository, make_product, monkeypatch, shopper, phone
    ):
        make_product("Tablet", price="30.00", stock=5, product_id=43)
        broken = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 1)
        healthy = cart_service.add_item_to_cart(USER_ID, 43, 1)
        catalog_service.change_price(PRODUCT_ID, Decimal("21.00"))
        catalog_service.change_price(43, Decimal("31.00"))
        cart_item_repository.fail_on_save_for.add(PRODUCT_ID)

        def broken_delete(cart_item_id):
            raise RuntimeError("connection lost")

        monkeypatch.setattr(cart_item_repository, "delete", broken_delete)

        report = cart_service.sync_cart(USER_ID)

        assert report.failed_item_ids == [broken.id]
        assert report.repriced_item_ids == [healthy.id]

    def test_validate_cart_items_does_not_modify(self, cart_service, catalog_service, shopper, phone):
        item = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 2)
        catalog_service.change_price(PRODUCT_ID, Decimal("25.00"))

        invalid = cart_service.validate_cart_items(USER_ID)

        assert [line.id for line in invalid] == [item.id]
        assert cart_service.get_cart_item(USER_ID, item.id).unit_price == Decimal("20.00")

    def test_unknown_user(self, cart_service):
        with pytest.raises(UserNotFoundError):
            cart_service.sync_cart(404)


class TestUpdateCart:
    def test_items_are_applied_with_partial_failures(self, cart_service, make_product, shopper, phone):
        make_product("Tablet", price="30.00", stock=5, product_id=43)
        cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 5)

        result = cart_service.update_cart(
            USER_ID,
            CartUpdateDTO(items=[
                CartItemRequestDTO(product_id=PRODUCT_ID, quantity=2),
                CartItemRequestDTO(product_id=43, quantity=9),
                CartItemRequestDTO(product_id=404, quantity=1),
                CartItemRequestDTO(product_id=43, quantity=1),
            ]),
        )

        assert result.operation == CartOperation.BULK_UPDATE
        assert result.has_failures
        assert [outcome.product_id for outcome in result.succeeded] == [PRODUCT_ID, 43]
        assert [outcome.result.error_code for outcome in result.failed] == [
            "INSUFFICIENT_STOCK",
            "PRODUCT_NOT_FOUND",
        ]
        quantities = {line.product_id: line.quantity for line in result.cart.items}
        assert quantities == {PRODUCT_ID: 2, 43: 1}

    def test_failed_outcome_carries_exception_fields(self, cart_service, shopper, phone):
        result = cart_service.update_cart(
            USER_ID, CartUpdateDTO(items=[CartItemRequestDTO(product_id=PRODUCT_ID, quantity=0)])
        )

        failure = result.failed[0].result
        assert failure.error_code == "INVALID_QUANTITY"
        assert failure.error_details["field"] == "quantity"
        assert failure.error_details["quantity"] == 0

    def test_unexpected_errors_are_reported(self, cart_service, cart_item_repository, shopper, phone):
        cart_item_repository.fail_on_save_for.add(PRODUCT_ID)

        result = cart_service.update_cart(
            USER_ID, CartUpdateDTO(items=[CartItemRequestDTO(product_id=PRODUCT_ID, quantity=1)])
        )

        assert result.failed[0].result.error_code == "UNEXPECTED_ERROR"

    def test_clear_wins_over_items(self, cart_service, make_product, shopper, phone):
        cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 1)

        result = cart_service.update_cart(
            USER_ID,
            CartUpdateDTO(operation="CLEAR", items=[CartItemRequestDTO(product_id=PRODUCT_ID, quantity=3)]),
        )

        assert result.operation == CartOperation.CLEAR
        assert result.cart.items == []
        assert result.outcomes == []

    def test_sync_directive(self, cart_service, catalog_service, shopper, phone):
        item = cart_service.add_item_to_cart(USER_ID, PRODUCT_ID, 4)
        catalog_service.decrease_stock(PRODUCT_ID, 8)

        result = cart_service.update_cart(
            USER_ID,
            CartUpdateDTO(operation="sync", items=[CartItemRequestDTO(product_id=PRODUCT_ID, quantity=1)]),
        )

        assert result.operation == CartOperation.SYNC
        assert result.sync_report.adjusted_item_ids == [item.id]
        assert result.cart.items[0].quantity == 2

    def test_unknown_user(self, cart_service):
        with pytest.raises(UserNotFoundError):
            cart_service.update_cart(404, CartUpdateDTO(operation="clear"))


class TestCartTotals:
    @pytest.fixture
    def filled_cart(self, cart_service, make_product, shopper):
        make_product("Headphones", price="19.99", stock=10, product_id=1)
        make_product("Case", price="5.50", stock=10, product_id=2)
        cart_service.add_item_to_cart(USER_ID, 1, 3)
        return cart_service.add_item_to_cart(USER_ID, 2, 2)

    def test_subtotal_tax_and_total_are_exact(self, cart_service, filled_cart):
        assert cart_service.calculate_cart_subtotal(USER_ID) == Decimal("70.97")
        assert cart_service.calculate_cart_tax(USER_ID) == Decimal("7.097")
        assert cart_service.calculate_cart_total(USER_ID) == Decimal("78.067")

    def test_custom_tax_rate(self, cart_service, filled_cart):
        assert cart_service.calculate_cart_total(USER_ID, Decimal("0")) == Decimal("70.97")

    def test_float_tax_rate_is_exact(self, cart_service, filled_cart):
        assert cart_service.calculate_cart_tax(USER_ID, 0.2) == Decimal("14.194")
        assert cart_service.calculate_cart_total(USER_ID, 0.2) == Decimal("85.164")

    def test_item_subtotal(self, cart_service, filled_cart):
        assert cart_service.calculate_item_subtotal(filled_cart.id) == Decimal("11.00")

    def test_item_subtotal_of_missing_line(self, cart_service):
        with pytest.raises(CartItemNotFoundError):
            cart_service.calculate_item_subtotal(1)

    def test_counts(self, cart_service, filled_cart):
        assert cart_service.get_total_quantity(USER_ID) == 5
        assert cart_service.get_cart_item_count(USER_ID) == 2
        cart = cart_service.get_cart(USER_ID)
        assert not cart.is_empty
        assert cart.find_item(2).quantity == 2

    def test_empty_cart(self, cart_service, shopper):
        assert cart_service.calculate_cart_total(USER_ID) == Decimal("0")
        assert cart_service.is_cart_empty(USER_ID)


class TestAvailability:
    def test_check_product_availability(self, cart_service, phone):
        assert cart_service.check_product_availability(PRODUCT_ID, 10)
        assert not cart_service.check_product_availability(PRODUCT_ID, 11)
        assert not cart_service.check_product_availability(404, 1)

    @pytest.mark.parametrize("quantity,expected", [(1, True), (99, True), (0, False), (100, False), (None, False)])
    def test_validate_quantity(self, cart_service, quantity, expected):
        assert cart_service.validate_quantity(quantity) is expected

"""Unit tests for the item pricing domain service."""

import pytest

from ordering.domain.exceptions import ValidationError
from ordering.domain.model.product import Product
from ordering.domain.model.value_objects import Money, Quantity
from ordering.domain.service.item_pricing_service import ItemPricingService


def _product(price: str = "99.99", discount_ids: list[str] | None = None) -> Product:
    return Product(id="prod-1", name="Keyboard", price=Money.of(price), discount_ids=discount_ids or [])


class TestLineDiscount:

    def test_no_discount_without_attached_discounts(self):
        svc = ItemPricingService()
        assert svc.line_discount(_product(), 3) == Money.zero()

    def test_ten_percent_of_line_when_discounted(self):
        svc = ItemPricingService()
        # 99.99 * 2 * 0.10 = 19.998
        assert svc.line_discount(_product(discount_ids=["summer"]), 2) == Money.of("20.00")

    def test_rate_does_not_stack_per_discount(self):
        svc = ItemPricingService()
        product = _product(price="10.00", discount_ids=["a", "b", "c"])
        assert svc.line_discount(product, 1) == Money.of("1.00")


class TestBuildItem:

    def test_snapshots_price(self):
        svc = ItemPricingService()
        product = _product()
        item = svc.build_item("item-1", product, 2, "wh-1")

        product.update_price(Money.of("1.00"))

        assert item.order_item_id == "item-1"
        assert item.product_id == "prod-1"
        assert item.quantity == Quantity(2)
        assert item.price_at_purchase == Money.of("99.99")
        assert item.warehouse_id == "wh-1"
        assert item.discount_amount == Money.zero()

    def test_blank_warehouse_rejected(self):
        with pytest.raises(ValidationError, match="Warehouse ID is required"):
            ItemPricingService().build_item("item-1", _product(), 1, " ")

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            ItemPricingService().build_item("item-1", _product(), 0, "wh-1")


class TestUniqueProducts:

    def test_unique_ids_pass(self):
        ItemPricingService.assert_unique_products(["a", "b", "c"])

    def test_duplicate_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate product ID: b"):
            ItemPricingService.assert_unique_products(["a", "b", "b"])

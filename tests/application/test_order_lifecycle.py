"""Integration tests for the use cases that change an existing order."""

import logging

import pytest

from ordering.application.add_order_item import AddOrderItemHandler
from ordering.application.create_order import CreateOrderHandler
from ordering.application.dto import OrderItemSpec
from ordering.application.list_orders import ListOrdersHandler
from ordering.application.remove_order_item import RemoveOrderItemHandler
from ordering.application.show_order import ShowOrderHandler
from ordering.application.update_item_quantity import UpdateItemQuantityHandler
from ordering.application.update_order_discount import UpdateOrderDiscountHandler
from ordering.application.update_order_status import UpdateOrderStatusHandler
from ordering.domain.exceptions import EntityNotFoundError, ValidationError
from ordering.domain.model.order import OrderStatus
from ordering.domain.model.product import Product
from ordering.domain.model.user import User
from ordering.domain.model.value_objects import Money
from tests.fakes import (
    FakeOrderRepository,
    FakeProductRepository,
    FakeUserRepository,
    sequential_ids,
)


@pytest.fixture
def repos():
    products = FakeProductRepository([
        Product(id="p1", name="Keyboard", price=Money.of("99.99")),
        Product(id="p2", name="Mouse", price=Money.of("49.99")),
        Product(id="p3", name="Cable", price=Money.of("5.00"), discount_ids=["bundle"]),
    ])
    users = FakeUserRepository([
        User.create("u1", "alice", "alice@example.com"),
        User.create("u2", "bobby", "bob@example.com"),
    ])
    return FakeOrderRepository(), products, users


@pytest.fixture
def order_id(repos):
    orders, products, users = repos
    create = CreateOrderHandler(orders, users, products, sequential_ids("o"))
    return create.handle("u1", [OrderItemSpec("p1", 2, "wh-1")], discount_amount="5").order_id


class TestShowAndList:

    def test_show(self, repos, order_id):
        dto = ShowOrderHandler(repos[0]).handle(order_id)
        assert dto.order_id == order_id
        assert dto.final_amount == "$194.98"

    def test_show_missing(self, repos):
        with pytest.raises(EntityNotFoundError, match="Order 'nope' not found"):
            ShowOrderHandler(repos[0]).handle("nope")

    def test_list_filters(self, repos, order_id):
        orders, products, users = repos
        create = CreateOrderHandler(orders, users, products, sequential_ids("x"))
        other = create.handle("u2", [OrderItemSpec("p2", 1, "wh-1")]).order_id
        UpdateOrderStatusHandler(orders).handle(other, OrderStatus.CONFIRMED)

        handler = ListOrdersHandler(orders)
        assert {d.order_id for d in handler.handle()} == {order_id, other}
        assert [d.order_id for d in handler.handle(user_id="u2")] == [other]
        assert [d.order_id for d in handler.handle(status=OrderStatus.PENDING)] == [order_id]
        assert handler.handle(user_id="u1", status=OrderStatus.CONFIRMED) == []


class TestUpdateStatus:

    def test_walks_to_delivered(self, repos, order_id):
        handler = UpdateOrderStatusHandler(repos[0])
        for status in (
            OrderStatus.CONFIRMED,
            OrderStatus.PROCESSING,
            OrderStatus.SHIPPED,
            OrderStatus.DELIVERED,
        ):
            dto = handler.handle(order_id, status)
        assert dto.status == "Delivered"
        assert repos[0].get_by_id(order_id).status == OrderStatus.DELIVERED

    def test_invalid_transition_not_saved(self, repos, order_id):
        handler = UpdateOrderStatusHandler(repos[0])
        with pytest.raises(ValidationError, match="from Pending to Shipped"):
            handler.handle(order_id, OrderStatus.SHIPPED)
        assert repos[0].get_by_id(order_id).status == OrderStatus.PENDING

    def test_missing_order(self, repos):
        with pytest.raises(EntityNotFoundError):
            UpdateOrderStatusHandler(repos[0]).handle("nope", OrderStatus.CONFIRMED)

    def test_status_given_as_text(self, repos, order_id, caplog):
        handler = UpdateOrderStatusHandler(repos[0])
        with caplog.at_level(logging.INFO, logger="ordering"):
            dto = handler.handle(order_id, "Confirmed")
        assert dto.status == "Confirmed"
        assert "from Pending to Confirmed" in caplog.text

        with pytest.raises(ValidationError, match="Unknown order status"):
            handler.handle(order_id, "Lost")
        assert repos[0].get_by_id(order_id).status == OrderStatus.CONFIRMED


class TestAddItem:

    def test_adds_priced_item(self, repos, order_id):
        orders, products, _ = repos
        handler = AddOrderItemHandler(orders, products, sequential_ids("i"))
        dto = handler.handle(order_id, "p3", 4, "wh-2")

        added = dto.items[-1]
        assert added.order_item_id == "i-1"
        assert added.unit_price == "$5.00"
        assert added.discount == "$2.00"
        # 199.98 + 20.00 - 2.00
        assert dto.total_amount == "$217.98"
        assert len(orders.get_by_id(order_id).items) == 2

    def test_product_already_on_order_rejected(self, repos, order_id):
        orders, products, _ = repos
        with pytest.raises(ValidationError, match="Duplicate product ID: p1"):
            AddOrderItemHandler(orders, products).handle(order_id, "p1", 1, "wh-1")

    def test_unknown_product_rejected(self, repos, order_id):
        orders, products, _ = repos
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            AddOrderItemHandler(orders, products).handle(order_id, "zzz", 1, "wh-1")

    def test_confirmed_order_rejected_before_product_lookup(self, repos, order_id):
        orders, products, _ = repos
        UpdateOrderStatusHandler(orders).handle(order_id, OrderStatus.CONFIRMED)
        with pytest.raises(ValidationError, match="Cannot modify items"):
            AddOrderItemHandler(orders, products).handle(order_id, "zzz", 1, "wh-1")


class TestRemoveAndQuantity:

    def _add_mouse(self, repos, order_id) -> str:
        orders, products, _ = repos
        dto = AddOrderItemHandler(orders, products, sequential_ids("i")).handle(
            order_id, "p2", 1, "wh-1"
        )
        return dto.items[-1].order_item_id

    def test_remove_item(self, repos, order_id):
        item_id = self._add_mouse(repos, order_id)
        dto = RemoveOrderItemHandler(repos[0]).handle(order_id, item_id)
        assert [i.product_id for i in dto.items] == ["p1"]

    def test_remove_last_item_rejected(self, repos, order_id):
        only = repos[0].get_by_id(order_id).items[0].order_item_id
        with pytest.raises(ValidationError, match="Cannot remove last item"):
            RemoveOrderItemHandler(repos[0]).handle(order_id, only)

    def test_update_quantity(self, repos, order_id):
        item_id = repos[0].get_by_id(order_id).items[0].order_item_id
        dto = UpdateItemQuantityHandler(repos[0]).handle(order_id, item_id, 3)
        assert dto.subtotal == "$299.97"
        assert repos[0].get_by_id(order_id).items[0].quantity.value == 3

    def test_failed_update_not_saved(self, repos, order_id):
        item_id = repos[0].get_by_id(order_id).items[0].order_item_id
        with pytest.raises(ValidationError):
            UpdateItemQuantityHandler(repos[0]).handle(order_id, item_id, 0)
        assert repos[0].get_by_id(order_id).items[0].quantity.value == 2


class TestUpdateDiscount:

    def test_update_discount(self, repos, order_id):
        dto = UpdateOrderDiscountHandler(repos[0]).handle(order_id, "20")
        assert dto.discount_amount == "$20.00"
        assert dto.final_amount == "$179.98"

    def test_update_discount_after_shipping(self, repos, order_id):
        status = UpdateOrderStatusHandler(repos[0])
        for s in (OrderStatus.CONFIRMED, OrderStatus.PROCESSING, OrderStatus.SHIPPED):
            status.handle(order_id, s)
        dto = UpdateOrderDiscountHandler(repos[0]).handle(order_id, "0")
        assert dto.final_amount == "$199.98"

    def test_too_large_discount_not_saved(self, repos, order_id):
        with pytest.raises(ValidationError, match="cannot be greater than total amount"):
            UpdateOrderDiscountHandler(repos[0]).handle(order_id, "500")
        assert repos[0].get_by_id(order_id).discount_amount == Money.of("5")

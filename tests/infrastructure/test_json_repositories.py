"""Tests for the JSON-file repositories, using pytest's tmp_path."""

import json
from decimal import Decimal

from ordering.domain.model.order import Order, OrderItem, OrderStatus
from ordering.domain.model.product import Product
from ordering.domain.model.user import User
from ordering.domain.model.value_objects import Money, Quantity
from ordering.infrastructure.persistence.json_order_repository import JsonOrderRepository
from ordering.infrastructure.persistence.json_product_repository import JsonProductRepository
from ordering.infrastructure.persistence.json_user_repository import JsonUserRepository


def _order(order_id: str = "o-1") -> Order:
    item = OrderItem("i-1", "p1", Quantity(2), Money.of("99.99"), "wh-1", Money.of("10"))
    return Order.create(order_id, "u1", [item], "5")


class TestJsonOrderRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "orders.json"
        JsonOrderRepository(path)
        assert json.loads(path.read_text()) == []

    def test_round_trip_keeps_every_field(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = _order()
        order.update_status(OrderStatus.CONFIRMED)
        repo.save(order)

        loaded = repo.get_by_id("o-1")
        assert loaded == order
        assert loaded.user_id == "u1"
        assert loaded.status == OrderStatus.CONFIRMED
        assert loaded.order_date == order.order_date
        assert loaded.items == order.items
        assert loaded.discount_amount == Money.of("5")
        assert loaded.final_amount == Money.of("184.98")

    def test_amounts_stored_as_strings(self, tmp_path):
        path = tmp_path / "orders.json"
        JsonOrderRepository(path).save(_order())
        raw = json.loads(path.read_text())[0]
        assert raw["discount_amount"] == "5.00"
        assert raw["items"][0]["price_at_purchase"] == "99.99"
        assert Decimal(raw["items"][0]["discount_amount"]) == Decimal("10")

    def test_save_is_upsert(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = _order()
        repo.save(order)
        order.update_item_quantity("i-1", 3)
        repo.save(order)

        assert len(repo.list_all()) == 1
        assert repo.get_by_id("o-1").subtotal == Money.of("299.97")

    def test_missing_order(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").get_by_id("nope") is None

    def test_delete(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.save(_order("o-1"))
        repo.save(_order("o-2"))
        assert repo.delete("o-1") is True
        assert repo.delete("o-1") is False
        assert [o.order_id for o in repo.list_all()] == ["o-2"]


class TestJsonProductRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product("p1", "Keyboard", Money.of("99.99"), ["d1"]))
        loaded = repo.get_by_id("p1")
        assert loaded == Product("p1", "Keyboard", Money.of("99.99"), ["d1"])
        assert repo.get_by_id("p2") is None

    def test_update_keeps_position(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product("p1", "Keyboard", Money.of("99.99")))
        repo.save(Product("p2", "Mouse", Money.of("25.00")))
        repo.save(Product("p1", "Keyboard", Money.of("89.99"), ["d1"]))
        assert [p.id for p in repo.list_all()] == ["p1", "p2"]
        assert repo.get_by_id("p1").price == Money.of("89.99")

    def test_list_with_discounts(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product("p1", "Keyboard", Money.of("99.99")))
        repo.save(Product("p2", "Mouse", Money.of("25.00"), ["spring"]))
        assert [p.id for p in repo.list_with_discounts()] == ["p2"]

    def test_missing_discount_ids_default_to_empty(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([{"id": "p1", "name": "Keyboard", "price": "1.00"}]))
        assert JsonProductRepository(path).get_by_id("p1").discount_ids == []


class TestJsonUserRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        user = User.create("u1", "alice", "alice@example.com")
        repo.save(user)
        assert repo.get_by_id("u1") == user
        assert repo.list_all() == [user]

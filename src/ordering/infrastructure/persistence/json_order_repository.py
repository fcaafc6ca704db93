"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from ordering.domain.model.order import Order, OrderItem, OrderStatus
from ordering.domain.model.value_objects import Money, Quantity
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["order_id"] == order_id:
                return self._to_domain(raw)
        logger.debug("Order %s not found in %s", order_id, self._file_path)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, order: Order) -> Order:
        orders = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["order_id"] == order.order_id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)
        logger.debug(
            "%s order %s", "Updated" if replaced else "Inserted", order.order_id
        )
        return order

    def delete(self, order_id: str) -> bool:
        orders = self._load_raw()
        remaining = [raw for raw in orders if raw["order_id"] != order_id]
        if len(remaining) == len(orders):
            return False
        self._persist_raw(remaining)
        logger.debug("Deleted order %s", order_id)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "order_id": order.order_id,
            "user_id": order.user_id,
            "status": order.status.value,
            "order_date": order.order_date.isoformat(),
            "discount_amount": str(order.discount_amount.amount),
            "currency": order.discount_amount.currency,
            "items": [
                {
                    "order_item_id": item.order_item_id,
                    "product_id": item.product_id,
                    "warehouse_id": item.warehouse_id,
                    "quantity": item.quantity.value,
                    "price_at_purchase": str(item.price_at_purchase.amount),
                    "discount_amount": str(item.discount_amount.amount),
                    "currency": item.price_at_purchase.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                order_item_id=i["order_item_id"],
                product_id=i["product_id"],
                warehouse_id=i["warehouse_id"],
                quantity=Quantity(i["quantity"]),
                price_at_purchase=Money(
                    Decimal(i["price_at_purchase"]), i.get("currency", "USD")
                ),
                discount_amount=Money(
                    Decimal(i["discount_amount"]), i.get("currency", "USD")
                ),
            )
            for i in raw["items"]
        ]
        return Order(
            order_id=raw["order_id"],
            user_id=raw["user_id"],
            items=items,
            status=OrderStatus(raw["status"]),
            order_date=datetime.fromisoformat(raw["order_date"]),
            discount_amount=Money(
                Decimal(raw["discount_amount"]), raw.get("currency", "USD")
            ),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

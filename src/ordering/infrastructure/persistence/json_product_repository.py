"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from ordering.domain.model.product import Product
from ordering.domain.model.value_objects import Money
from ordering.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        logger.debug("Product %s not found in %s", product_id, self._file_path)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def list_with_discounts(self) -> list[Product]:
        return [
            self._to_domain(raw) for raw in self._load_raw() if raw.get("discount_ids")
        ]

    def save(self, product: Product) -> None:
        products = self._load_raw()
        ids = [raw["id"] for raw in products]
        if product.id in ids:
            products[ids.index(product.id)] = self._to_raw(product)
        else:
            products.append(self._to_raw(product))
        self._persist_raw(products)
        logger.debug("Saved product %s", product.id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "discount_ids": list(product.discount_ids),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        # Older files have no discount list.
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            discount_ids=list(raw.get("discount_ids", [])),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, products: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(products, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

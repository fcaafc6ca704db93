"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from ordering.domain.exceptions import ValidationError
from ordering.domain.model.product import Product
from ordering.domain.model.value_objects import Money
from ordering.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        price: str,
        discount_ids: list[str] | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        product = Product.create(
            product_id=product_id,
            name=name,
            price=Money.of(price),
            discount_ids=discount_ids,
        )
        if self._product_repo.get_by_id(product.id) is not None:
            raise ValidationError(f"Product '{product.id}' already exists")

        self._product_repo.save(product)
        logger.info("Added product %s (%s) at %s", product.id, product.name, product.price)
        return product

"""Application service: attach and detach product discounts.

A product with any discount attached earns a line discount when it is
put on an order.  Existing order lines keep the discount they were
priced with.
"""

from __future__ import annotations

import logging

from ordering.domain.exceptions import EntityNotFoundError
from ordering.domain.model.product import Product
from ordering.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class _ProductDiscountHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def _load(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product


class AttachDiscountHandler(_ProductDiscountHandler):

    def handle(self, product_id: str, discount_id: str) -> Product:
        product = self._load(product_id)
        product.add_discount(discount_id.strip())
        self._product_repo.save(product)
        logger.info("Discount %s attached to product %s", discount_id, product_id)
        return product


class DetachDiscountHandler(_ProductDiscountHandler):

    def handle(self, product_id: str, discount_id: str) -> Product:
        """Detaching a discount the product does not carry is a no-op."""
        product = self._load(product_id)
        product.remove_discount(discount_id.strip())
        self._product_repo.save(product)
        logger.info("Discount %s detached from product %s", discount_id, product_id)
        return product

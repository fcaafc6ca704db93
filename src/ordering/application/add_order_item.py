"""Application service: Add Order Item use case.

Resolves the product the same way order creation does, so the new
line gets the current price and the catalog line discount.
"""

from __future__ import annotations

import logging

from ordering.application.create_order import IdGenerator, new_id
from ordering.application.dto import OrderDTO, to_order_dto
from ordering.domain.exceptions import EntityNotFoundError, ValidationError
from ordering.domain.repository.order_repository import OrderRepository
from ordering.domain.repository.product_repository import ProductRepository
from ordering.domain.service.item_pricing_service import ItemPricingService

logger = logging.getLogger(__name__)


class AddOrderItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        id_generator: IdGenerator = new_id,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._id_generator = id_generator
        self._pricing = ItemPricingService()

    def handle(
        self,
        order_id: str,
        product_id: str,
        quantity: int,
        warehouse_id: str,
    ) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        order.ensure_items_modifiable()
        self._pricing.assert_unique_products(
            [*(item.product_id for item in order.items), product_id]
        )
        if quantity <= 0:
            raise ValidationError("Item quantity must be greater than zero")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: {product_id}")

        item = self._pricing.build_item(
            order_item_id=self._id_generator(),
            product=product,
            quantity=quantity,
            warehouse_id=warehouse_id,
        )
        order.add_item(item)
        self._order_repo.save(order)

        logger.info(
            "Added item %s (product %s x%d) to order %s",
            item.order_item_id, product_id, quantity, order_id,
        )
        return to_order_dto(order)

"""Application service: Update Item Quantity use case."""

from __future__ import annotations

import logging

from ordering.application.dto import OrderDTO, to_order_dto
from ordering.domain.exceptions import EntityNotFoundError
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateItemQuantityHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, order_item_id: str, quantity: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        order.update_item_quantity(order_item_id, quantity)
        self._order_repo.save(order)

        logger.info(
            "Set quantity of item %s on order %s to %d",
            order_item_id, order_id, quantity,
        )
        return to_order_dto(order)

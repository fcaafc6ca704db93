"""Application service: Remove Order Item use case."""

from __future__ import annotations

import logging

from ordering.application.dto import OrderDTO, to_order_dto
from ordering.domain.exceptions import EntityNotFoundError
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RemoveOrderItemHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, order_item_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        order.remove_item(order_item_id)
        self._order_repo.save(order)

        logger.info("Removed item %s from order %s", order_item_id, order_id)
        return to_order_dto(order)

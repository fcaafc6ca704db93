"""Application service: Update Order Status use case.

Moves an order one step along the status machine.  Payment and
shipment collaborators react to the saved status; nothing here talks
to them directly.
"""

from __future__ import annotations

import logging

from ordering.application.dto import OrderDTO, to_order_dto
from ordering.domain.exceptions import EntityNotFoundError
from ordering.domain.model.order import OrderStatus
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, new_status: OrderStatus | str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        previous = order.status
        order.update_status(new_status)
        self._order_repo.save(order)

        logger.info(
            "Order %s moved from %s to %s",
            order_id, previous.value, order.status.value,
        )
        return to_order_dto(order)

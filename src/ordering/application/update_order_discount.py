"""Application service: Update Order Discount use case.

The order-level discount can be changed in any status; the aggregate
only checks that it stays within ``[0, total_amount]``.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ordering.application.dto import OrderDTO, to_order_dto
from ordering.domain.exceptions import EntityNotFoundError
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderDiscountHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, amount: Decimal | str | int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        order.update_discount_amount(amount)
        self._order_repo.save(order)

        logger.info(
            "Order %s discount set to %s", order_id, order.discount_amount
        )
        return to_order_dto(order)

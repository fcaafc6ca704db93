"""Application service: List Orders use case (query).

Filtering happens in memory over ``list_all()``; there is no paging.
"""

from __future__ import annotations

from ordering.application.dto import OrderDTO, to_order_dto
from ordering.domain.model.order import OrderStatus
from ordering.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        user_id: str | None = None,
        status: OrderStatus | None = None,
    ) -> list[OrderDTO]:
        orders = self._order_repo.list_all()
        if user_id is not None:
            orders = [o for o in orders if o.user_id == user_id]
        if status is not None:
            orders = [o for o in orders if o.status == status]
        orders.sort(key=lambda o: o.order_date)
        return [to_order_dto(o) for o in orders]

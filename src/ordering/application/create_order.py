"""Application service: Create Order use case (the order composer).

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (User and
Product lookup + Order creation).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal
from uuid import uuid4

from ordering.application.dto import OrderDTO, OrderItemSpec, to_order_dto
from ordering.domain.exceptions import EntityNotFoundError, ValidationError
from ordering.domain.model.order import Order, OrderItem
from ordering.domain.repository.order_repository import OrderRepository
from ordering.domain.repository.product_repository import ProductRepository
from ordering.domain.repository.user_repository import UserRepository
from ordering.domain.service.item_pricing_service import ItemPricingService

logger = logging.getLogger(__name__)

IdGenerator = Callable[[], str]


def new_id() -> str:
    return uuid4().hex


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
        id_generator: IdGenerator = new_id,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._product_repo = product_repo
        self._id_generator = id_generator
        self._pricing = ItemPricingService()

    def handle(
        self,
        user_id: str,
        item_specs: list[OrderItemSpec],
        discount_amount: Decimal | str | int = 0,
    ) -> OrderDTO:
        """Create a new purchase order.

        Steps:
        1. Make sure the user exists.
        2. Resolve each product and build OrderItems with *current* prices
           and the line discount.
        3. Let the Order aggregate validate all business rules.
        4. Persist and return a DTO.
        """
        if self._user_repo.get_by_id(user_id) is None:
            raise EntityNotFoundError(f"User not found: {user_id}")

        items = self._prepare_items(item_specs)

        order = Order.create(
            order_id=self._id_generator(),
            user_id=user_id,
            items=items,
            discount_amount=discount_amount,
        )
        self._order_repo.save(order)

        logger.info(
            "Created order %s for user %s (%d items, final %s)",
            order.order_id, order.user_id, len(items), order.final_amount,
        )
        return to_order_dto(order)

    def _prepare_items(self, item_specs: list[OrderItemSpec]) -> list[OrderItem]:
        if not item_specs:
            raise ValidationError("Order must contain at least one item")

        self._pricing.assert_unique_products(spec.product_id for spec in item_specs)

        items: list[OrderItem] = []
        for spec in item_specs:
            if spec.quantity <= 0:
                raise ValidationError("Item quantity must be greater than zero")

            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise EntityNotFoundError(f"Product not found: {spec.product_id}")

            items.append(
                self._pricing.build_item(
                    order_item_id=self._id_generator(),
                    product=product,
                    quantity=spec.quantity,
                    warehouse_id=spec.warehouse_id,
                )
            )
        return items

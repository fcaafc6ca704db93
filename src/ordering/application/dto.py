"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ordering.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for."""

    product_id: str
    quantity: int
    warehouse_id: str


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    order_item_id: str
    product_id: str
    warehouse_id: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_subtotal: str
    discount: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    order_id: str
    user_id: str
    status: str
    items: list[OrderItemDTO]
    subtotal: str
    item_discounts: str
    total_amount: str
    discount_amount: str
    final_amount: str
    order_date: str


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        order_id=order.order_id,
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderItemDTO(
                order_item_id=item.order_item_id,
                product_id=item.product_id,
                warehouse_id=item.warehouse_id,
                quantity=item.quantity.value,
                unit_price=str(item.price_at_purchase),
                line_subtotal=str(item.line_subtotal),
                discount=str(item.discount_amount),
            )
            for item in order.items
        ],
        subtotal=str(order.subtotal),
        item_discounts=str(order.item_discounts),
        total_amount=str(order.total_amount),
        discount_amount=str(order.discount_amount),
        final_amount=str(order.final_amount),
        order_date=order.order_date.strftime("%Y-%m-%d %H:%M UTC"),
    )

"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here:

- an order always holds at least one item
- every computed amount is a non-negative, cent-rounded ``Money``
- the order-level discount never exceeds the total after item discounts
- status only moves along ``ALLOWED_TRANSITIONS``
- items can only change while the order is PENDING

Every mutation validates against a lookahead copy of the item list
before touching stored state, so a rejected call leaves the order as
it was.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from ordering.domain.exceptions import InvalidStatusTransitionError, ValidationError
from ordering.domain.model.value_objects import Money, Quantity, round_money


class OrderStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self]

    def can_transition_to(self, new_status: OrderStatus) -> bool:
        return new_status in ALLOWED_TRANSITIONS[self]


# ---------------------------------------------------------------------------
# Business rules
# ---------------------------------------------------------------------------
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

MODIFIABLE_STATUSES = frozenset({OrderStatus.PENDING})


@dataclass(frozen=True)
class OrderItem:
    """A line entry snapshotting one product at order time.

    ``price_at_purchase`` is locked when the item is built.
    ``discount_amount`` is a fixed amount taken off the whole line once,
    regardless of quantity.
    """

    order_item_id: str
    product_id: str
    quantity: Quantity
    price_at_purchase: Money
    warehouse_id: str
    discount_amount: Money = field(default_factory=Money.zero)

    @property
    def line_subtotal(self) -> Money:
        return self.price_at_purchase * self.quantity.value

    def with_quantity(self, quantity: int) -> OrderItem:
        return replace(self, quantity=Quantity(quantity))


# ---------------------------------------------------------------------------
# Monetary computation over an item set
# ---------------------------------------------------------------------------


def _currency(items: Sequence[OrderItem]) -> str:
    return items[0].price_at_purchase.currency if items else "USD"


def _sum_rounded(amounts: list[Money], currency: str) -> Money:
    # Exact sum, rounded once at the end.
    total = Decimal("0")
    for amount in amounts:
        if amount.currency != currency:
            raise ValidationError(f"Cannot combine {currency} with {amount.currency}")
        total += amount.amount
    return Money(round_money(total), currency)


def raw_subtotal(items: Sequence[OrderItem]) -> Money:
    """Sum of price x quantity over all lines."""
    lines = []
    for item in items:
        price = item.price_at_purchase
        lines.append(replace(price, amount=price.amount * item.quantity.value))
    return _sum_rounded(lines, _currency(items))


def item_discounts_total(items: Sequence[OrderItem]) -> Money:
    return _sum_rounded([item.discount_amount for item in items], _currency(items))


def total_after_item_discounts(items: Sequence[OrderItem]) -> Money:
    """The ceiling the order-level discount is validated against."""
    subtotal = raw_subtotal(items)
    discounts = item_discounts_total(items)
    if discounts > subtotal:
        raise ValidationError("Item discounts cannot be greater than subtotal")
    return subtotal - discounts


def _discount_from(value: Money | Decimal | str | float | int, currency: str) -> Money:
    raw = value.amount if isinstance(value, Money) else value
    amount = round_money(raw)
    if amount < Decimal("0"):
        raise ValidationError("Discount amount cannot be negative")
    return Money(abs(amount), currency)  # -0.00 -> 0.00


def _assert_discount_covered(discount: Money, items: Sequence[OrderItem]) -> None:
    if discount > total_after_item_discounts(items):
        raise ValidationError("Discount amount cannot be greater than total amount")


class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.

    Equality is identity-based: two orders with the same ``order_id``
    compare equal whatever their items, status or discount.
    """

    def __init__(
        self,
        order_id: str,
        user_id: str,
        items: list[OrderItem],
        status: OrderStatus = OrderStatus.PENDING,
        order_date: datetime | None = None,
        discount_amount: Money | None = None,
    ) -> None:
        self._order_id = order_id
        self._user_id = user_id
        self._items = list(items)
        self._status = status
        self._order_date = order_date or datetime.now(timezone.utc)
        self._discount_amount = discount_amount or Money.zero(_currency(items))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        user_id: str,
        items: Sequence[OrderItem],
        discount_amount: Money | Decimal | str | float | int = 0,
    ) -> Order:
        """Create a new PENDING order, enforcing all invariants."""
        if not order_id or not order_id.strip():
            raise ValidationError("Order ID is required")
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")
        if not items:
            raise ValidationError("Order must contain at least one item")

        items = list(items)
        discount = _discount_from(discount_amount, _currency(items))
        _assert_discount_covered(discount, items)

        return Order(
            order_id=order_id,
            user_id=user_id,
            items=items,
            status=OrderStatus.PENDING,
            discount_amount=discount,
        )

    # --- Accessors ------------------------------------------------------------

    @property
    def order_id(self) -> str:
        return self._order_id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def order_date(self) -> datetime:
        return self._order_date

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def items(self) -> list[OrderItem]:
        """A fresh list on every call; items themselves are frozen."""
        return list(self._items)

    @property
    def discount_amount(self) -> Money:
        return self._discount_amount

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        return raw_subtotal(self._items)

    @property
    def item_discounts(self) -> Money:
        return item_discounts_total(self._items)

    @property
    def total_amount(self) -> Money:
        return total_after_item_discounts(self._items)

    @property
    def final_amount(self) -> Money:
        return self.total_amount - self._discount_amount

    @property
    def can_modify_items(self) -> bool:
        return self._status in MODIFIABLE_STATUSES

    # --- State transitions ----------------------------------------------------

    def update_status(self, new_status: OrderStatus | str) -> None:
        """Move to ``new_status``; accepts the enum or its display value."""
        try:
            requested = OrderStatus(new_status)
        except ValueError as exc:
            raise ValidationError(f"Unknown order status: {new_status!r}") from exc
        if not self._status.can_transition_to(requested):
            raise InvalidStatusTransitionError(self._status, requested)
        self._status = requested

    # --- Item management ------------------------------------------------------

    def ensure_items_modifiable(self) -> None:
        if not self.can_modify_items:
            raise ValidationError("Cannot modify items in current order status")

    def add_item(self, item: OrderItem) -> None:
        self.ensure_items_modifiable()
        if any(i.order_item_id == item.order_item_id for i in self._items):
            raise ValidationError(
                f"Order item ID '{item.order_item_id}' already exists in this order"
            )
        candidate = [*self._items, item]
        _assert_discount_covered(self._discount_amount, candidate)
        self._items = candidate

    def remove_item(self, order_item_id: str) -> None:
        self.ensure_items_modifiable()
        self._index_of(order_item_id)
        if len(self._items) == 1:
            raise ValidationError("Cannot remove last item from order")

        candidate = [i for i in self._items if i.order_item_id != order_item_id]
        _assert_discount_covered(self._discount_amount, candidate)
        self._items = candidate

    def update_item_quantity(self, order_item_id: str, new_quantity: int) -> None:
        self.ensure_items_modifiable()
        if new_quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")
        index = self._index_of(order_item_id)

        candidate = list(self._items)
        candidate[index] = candidate[index].with_quantity(new_quantity)
        _assert_discount_covered(self._discount_amount, candidate)
        self._items = candidate

    # --- Discount management --------------------------------------------------

    def update_discount_amount(self, amount: Money | Decimal | str | float | int) -> None:
        """Replace the order-level discount.

        Allowed in any status; only the amount range is checked.
        """
        discount = _discount_from(amount, self._discount_amount.currency)
        _assert_discount_covered(discount, self._items)
        self._discount_amount = discount

    # --- Comparison and duplication -------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._order_id == other.order_id

    def __hash__(self) -> int:
        return hash(self._order_id)

    def __repr__(self) -> str:
        return (
            f"Order(order_id={self._order_id!r}, user_id={self._user_id!r}, "
            f"status={self._status.value}, items={len(self._items)})"
        )

    def clone(self) -> Order:
        return Order(
            order_id=self._order_id,
            user_id=self._user_id,
            items=list(self._items),
            status=self._status,
            order_date=self._order_date,
            discount_amount=self._discount_amount,
        )

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, order_item_id: str) -> int:
        for index, item in enumerate(self._items):
            if item.order_item_id == order_item_id:
                return index
        raise ValidationError("Item not found in order")

"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ordering.application.add_order_item import AddOrderItemHandler
from ordering.application.create_order import CreateOrderHandler
from ordering.application.dto import OrderDTO, OrderItemSpec
from ordering.application.list_orders import ListOrdersHandler
from ordering.application.remove_order_item import RemoveOrderItemHandler
from ordering.application.show_order import ShowOrderHandler
from ordering.application.update_item_quantity import UpdateItemQuantityHandler
from ordering.application.update_order_discount import UpdateOrderDiscountHandler
from ordering.application.update_order_status import UpdateOrderStatusHandler
from ordering.domain.exceptions import DomainException
from ordering.domain.model.order import OrderStatus
from ordering.infrastructure.bootstrap import Container

STATUS_CHOICES = [s.value for s in OrderStatus]


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'p1:3@wh1,p2:5@wh2' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        if ":" not in entry or "@" not in entry:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ProductId:Quantity@WarehouseId'."
            )
        product_id, rest = entry.split(":", 1)
        qty_str, warehouse_id = rest.rsplit("@", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(
            OrderItemSpec(
                product_id=product_id.strip(),
                quantity=qty,
                warehouse_id=warehouse_id.strip(),
            )
        )
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_id}  (status={dto.status})")
    click.echo(f"User:    {dto.user_id}")
    click.echo(f"Created: {dto.order_date}")
    click.echo()
    click.echo(
        f"  {'Item':<34} {'Product':<12} {'Qty':>5} {'Price':>10} {'Subtotal':>11} {'Discount':>10}"
    )
    click.echo(f"  {'-'*87}")
    for item in dto.items:
        click.echo(
            f"  {item.order_item_id:<34} {item.product_id:<12} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_subtotal:>11} {item.discount:>10}"
        )
    click.echo(f"  {'-'*87}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>20}")
    click.echo(f"  {'Item discounts':<27} {dto.item_discounts:>20}")
    click.echo(f"  {'Total':<27} {dto.total_amount:>20}")
    click.echo(f"  {'Order discount':<27} {dto.discount_amount:>20}")
    click.echo(f"  {'Amount due':<27} {dto.final_amount:>20}")


@click.command("create")
@click.option("--user", "user_id", required=True, help="User ID placing the order.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty@WarehouseId,...'.")
@click.option("--discount", default="0", show_default=True, help="Order-level discount.")
@click.pass_obj
def order_create(container: Container, user_id: str, items: str, discount: str) -> None:
    """Create a new purchase order."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=container.order_repository(),
        user_repo=container.user_repository(),
        product_repo=container.product_repository(),
    )

    try:
        dto = handler.handle(user_id=user_id, item_specs=specs, discount_amount=discount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_id} created  (status={dto.status})")
    click.echo()
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=container.order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only orders of this user.")
@click.option("--status", type=click.Choice(STATUS_CHOICES), default=None, help="Only orders in this status.")
@click.pass_obj
def order_list(container: Container, user_id: str | None, status: str | None) -> None:
    """List orders."""
    handler = ListOrdersHandler(order_repo=container.order_repository())
    dtos = handler.handle(
        user_id=user_id,
        status=OrderStatus(status) if status else None,
    )

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<34} {'User':<12} {'Status':<11} {'Items':>5} {'Amount due':>12}")
    click.echo("-" * 78)
    for dto in dtos:
        click.echo(
            f"{dto.order_id:<34} {dto.user_id:<12} {dto.status:<11} "
            f"{len(dto.items):>5} {dto.final_amount:>12}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--to", "new_status", required=True, type=click.Choice(STATUS_CHOICES), help="Target status.")
@click.pass_obj
def order_status(container: Container, order_id: str, new_status: str) -> None:
    """Move an order to its next status."""
    handler = UpdateOrderStatusHandler(order_repo=container.order_repository())

    try:
        dto = handler.handle(order_id, OrderStatus(new_status))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_id} is now {dto.status}.")


@click.command("add-item")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="Quantity.")
@click.option("--warehouse", "warehouse_id", required=True, help="Fulfilling warehouse ID.")
@click.pass_obj
def order_add_item(
    container: Container,
    order_id: str,
    product_id: str,
    quantity: int,
    warehouse_id: str,
) -> None:
    """Add a line to a pending order."""
    handler = AddOrderItemHandler(
        order_repo=container.order_repository(),
        product_repo=container.product_repository(),
    )

    try:
        dto = handler.handle(order_id, product_id, quantity, warehouse_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item added. Order {dto.order_id} total is now {dto.total_amount}.")


@click.command("remove-item")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--item", "order_item_id", required=True, help="Order item ID.")
@click.pass_obj
def order_remove_item(container: Container, order_id: str, order_item_id: str) -> None:
    """Remove a line from a pending order."""
    handler = RemoveOrderItemHandler(order_repo=container.order_repository())

    try:
        dto = handler.handle(order_id, order_item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item removed. Order {dto.order_id} total is now {dto.total_amount}.")


@click.command("set-quantity")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--item", "order_item_id", required=True, help="Order item ID.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity.")
@click.pass_obj
def order_set_quantity(
    container: Container, order_id: str, order_item_id: str, quantity: int
) -> None:
    """Change the quantity of a line on a pending order."""
    handler = UpdateItemQuantityHandler(order_repo=container.order_repository())

    try:
        dto = handler.handle(order_id, order_item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Quantity updated. Order {dto.order_id} total is now {dto.total_amount}.")


@click.command("discount")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--amount", required=True, help="New order-level discount (e.g. 5.00).")
@click.pass_obj
def order_discount(container: Container, order_id: str, amount: str) -> None:
    """Set the order-level discount."""
    handler = UpdateOrderDiscountHandler(order_repo=container.order_repository())

    try:
        dto = handler.handle(order_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Order {dto.order_id} discount set to {dto.discount_amount} "
        f"(amount due {dto.final_amount})."
    )

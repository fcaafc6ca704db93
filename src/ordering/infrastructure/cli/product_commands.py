"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ordering.application.add_product import AddProductHandler
from ordering.application.product_discounts import AttachDiscountHandler, DetachDiscountHandler
from ordering.application.update_product import UpdateProductHandler
from ordering.domain.exceptions import DomainException
from ordering.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--discount-id", "discount_ids", multiple=True, help="Attached discount ID (repeatable).")
@click.pass_obj
def product_add(
    container: Container,
    product_id: str,
    name: str,
    price: str,
    discount_ids: tuple[str, ...],
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=container.product_repository())

    try:
        product = handler.handle(
            product_id=product_id, name=name, price=price, discount_ids=list(discount_ids)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--discounted", is_flag=True, help="Only products carrying a discount.")
@click.pass_obj
def product_list(container: Container, discounted: bool) -> None:
    """List products in the catalog."""
    repo = container.product_repository()
    products = repo.list_with_discounts() if discounted else repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<12} {'Name':<20} {'Price':>10}  Discounts")
    click.echo("-" * 56)
    for p in products:
        click.echo(f"{p.id:<12} {p.name:<20} {str(p.price):>10}  {', '.join(p.discount_ids)}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(container: Container, product_id: str, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=container.product_repository())

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} price updated to {product.price}")


@click.group("discount")
def product_discount() -> None:
    """Attach or detach product discounts."""


@product_discount.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--discount-id", required=True, help="Discount ID to attach.")
@click.pass_obj
def product_discount_add(container: Container, product_id: str, discount_id: str) -> None:
    """Attach a discount to a product."""
    handler = AttachDiscountHandler(product_repo=container.product_repository())

    try:
        product = handler.handle(product_id=product_id, discount_id=discount_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} discounts: {', '.join(product.discount_ids)}")


@product_discount.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--discount-id", required=True, help="Discount ID to detach.")
@click.pass_obj
def product_discount_remove(container: Container, product_id: str, discount_id: str) -> None:
    """Detach a discount from a product."""
    handler = DetachDiscountHandler(product_repo=container.product_repository())

    try:
        product = handler.handle(product_id=product_id, discount_id=discount_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} discounts: {', '.join(product.discount_ids) or 'none'}")

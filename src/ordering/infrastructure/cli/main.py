from __future__ import annotations

from pathlib import Path

import click

from ordering.infrastructure.bootstrap import DATA_DIR_ENV, Container, default_data_dir
from ordering.infrastructure.cli.order_commands import (
    order_add_item,
    order_create,
    order_discount,
    order_list,
    order_remove_item,
    order_set_quantity,
    order_show,
    order_status,
)
from ordering.infrastructure.cli.product_commands import (
    product_add,
    product_discount,
    product_list,
    product_update,
)
from ordering.infrastructure.cli.user_commands import user_add, user_list
from ordering.infrastructure.log_config import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding the JSON data files.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar="ORDERING_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str) -> None:
    """Ordering — purchase order lifecycle"""
    configure_logging(log_level)
    ctx.obj = Container(data_dir or default_data_dir())


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def user() -> None:
    """Manage users."""


# Register subcommands
order.add_command(order_add_item)
order.add_command(order_create)
order.add_command(order_discount)
order.add_command(order_list)
order.add_command(order_remove_item)
order.add_command(order_set_quantity)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_discount)
product.add_command(product_list)
product.add_command(product_update)
user.add_command(user_add)
user.add_command(user_list)

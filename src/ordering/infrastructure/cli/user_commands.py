"""CLI commands for users."""

from __future__ import annotations

import click

from ordering.application.add_user import AddUserHandler
from ordering.domain.exceptions import DomainException
from ordering.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--username", required=True, help="Username.")
@click.option("--email", required=True, help="Email address.")
@click.pass_obj
def user_add(container: Container, user_id: str, username: str, email: str) -> None:
    """Register a user who can place orders."""
    handler = AddUserHandler(user_repo=container.user_repository())

    try:
        user = handler.handle(user_id=user_id, username=username, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user.id} '{user.username}' added")


@click.command("list")
@click.pass_obj
def user_list(container: Container) -> None:
    """List all users."""
    users = container.user_repository().list_all()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<12} {'Username':<20} Email")
    click.echo("-" * 56)
    for u in users:
        click.echo(f"{u.id:<12} {u.username:<20} {u.email}")

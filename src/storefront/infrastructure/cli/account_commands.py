"""CLI commands for accounts."""

from __future__ import annotations

import click

from storefront.domain.model.user import Role
from storefront.infrastructure.cli.session import api_from, ensure_ok, logged_in


@click.command("register")
@click.option("--username", required=True, help="New account name.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Password.")
@click.option(
    "--confirm-password",
    required=True,
    prompt="Confirm password",
    hide_input=True,
    help="Password again.",
)
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role]),
    default=Role.CUSTOMER.value,
    show_default=True,
    help="Account role.",
)
@click.pass_context
def register(
    ctx: click.Context, username: str, password: str, confirm_password: str, role: str
) -> None:
    """Register a new account."""
    response = ensure_ok(
        api_from(ctx).register(
            {
                "username": username,
                "password": password,
                "confirmPassword": confirm_password,
                "role": role,
            }
        )
    )
    click.echo(response.message)


@click.command("login")
@click.option("--username", required=True, help="Account name.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Password.")
@click.pass_context
def login(ctx: click.Context, username: str, password: str) -> None:
    """Check that the credentials are valid."""
    with logged_in(api_from(ctx), username, password):
        click.echo(f"Login successful! Logged in as {username}.")

"""CLI command for checking out."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.session import (
    api_from,
    ensure_ok,
    logged_in,
    with_credentials,
)


@click.command("checkout")
@click.option(
    "--product",
    "product_ids",
    multiple=True,
    required=True,
    help="Product ID to buy; repeat for several.",
)
@with_credentials
@click.pass_context
def checkout(
    ctx: click.Context, product_ids: tuple[str, ...], username: str, password: str
) -> None:
    """Place an order for the given products."""
    api = api_from(ctx)
    with logged_in(api, username, password) as session_id:
        response = ensure_ok(api.checkout(session_id, {"products": list(product_ids)}))

    click.echo(response.message)

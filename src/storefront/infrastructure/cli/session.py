"""Helpers shared by the CLI commands: building the API and logging in."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from storefront.infrastructure.api.storefront_api import ApiResponse, StorefrontApi
from storefront.infrastructure.bootstrap import storefront_api

credential_options = [
    click.option(
        "--username", envvar="STOREFRONT_USERNAME", required=True, help="Account to act as."
    ),
    click.option(
        "--password",
        envvar="STOREFRONT_PASSWORD",
        required=True,
        hide_input=True,
        prompt=True,
        help="Password for --username.",
    ),
]


def with_credentials(func):
    """Add the --username/--password options to a command."""
    for option in reversed(credential_options):
        func = option(func)
    return func


def api_from(ctx: click.Context) -> StorefrontApi:
    data_dir: Path | None = (ctx.obj or {}).get("data_dir")
    return storefront_api(data_dir)


def ensure_ok(response: ApiResponse) -> ApiResponse:
    """Turn a failed response into a ClickException."""
    if response.redirect_to is not None:
        raise click.ClickException(f"Login required (redirected to {response.redirect_to})")
    if not response.ok:
        raise click.ClickException(response.message or f"Request failed ({response.status})")
    return response


@contextmanager
def logged_in(api: StorefrontApi, username: str, password: str) -> Iterator[str]:
    """Hold an authenticated session for the duration of one command."""
    response = api.login({"username": username, "password": password})
    if not response.ok:
        raise click.ClickException(response.message or "Login failed")
    try:
        yield response.session_id  # type: ignore[misc]
    finally:
        api.logout(response.session_id)

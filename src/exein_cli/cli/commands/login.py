"""Authenticate with the Exein API.

The `exein login` command reuses a stored session, refreshes it, or prompts
for email and password, in that order.

Usage:
    exein login
"""

import click

from ..utils import run_operation


@click.command()
@click.pass_obj
def login(settings: dict) -> None:
    """Authenticate with the Exein API.

    Credentials are stored in ~/.exein/credentials.json.
    """
    run_operation(settings, lambda api: api.authenticate())
    click.echo("Authenticated successfully.")

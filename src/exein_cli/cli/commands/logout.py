"""Log out from the Exein API.

Usage:
    exein logout    # Clear stored credentials
"""

import click

from ..utils import run_operation


@click.command()
@click.pass_obj
def logout(settings: dict) -> None:
    """Log out from the Exein API."""
    run_operation(settings, lambda api: api.logout())
    click.echo("Logged out successfully.")

"""Check whether a newer CLI release is available."""

import click

from ...config import CLI_VERSION
from ..utils import run_operation


@click.command("check-updates")
@click.pass_obj
def check_updates(settings: dict) -> None:
    """Check for a newer release of the Exein CLI."""
    latest = run_operation(settings, lambda api: api.updates_check())
    if latest.latest_version != CLI_VERSION:
        click.echo(
            f"A new version is available: {latest.latest_version} "
            f"(installed: {CLI_VERSION})"
        )
    else:
        click.echo(f"Exein CLI {CLI_VERSION} is up to date.")

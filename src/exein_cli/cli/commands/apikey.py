"""CLI commands for managing the account API key."""

import click

from ..utils import echo_json, run_operation


@click.group()
def apikey():
    """Manage the account API key."""
    pass


@apikey.command("create")
@click.pass_obj
def create_apikey(settings: dict):
    """Create a new API key."""
    key = run_operation(settings, lambda api: api.apikey_create())
    echo_json(key.model_dump(mode="json"))


@apikey.command("list")
@click.pass_obj
def list_apikey(settings: dict):
    """Show the current API key."""
    key = run_operation(settings, lambda api: api.apikey_list())
    echo_json(key.model_dump(mode="json"))


@apikey.command("delete")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation prompt")
@click.pass_obj
def delete_apikey(settings: dict, force: bool):
    """Delete the current API key."""
    if not force:
        click.confirm("Are you sure you want to delete your API key?", abort=True)
    run_operation(settings, lambda api: api.apikey_delete())
    click.echo("API key deleted.")

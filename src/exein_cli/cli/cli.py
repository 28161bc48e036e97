#!/usr/bin/env python3
"""Exein CLI - firmware security analysis from the command line

Usage:
    exein login
    exein logout
    exein check-updates
    exein projects create|list|overview|analysis|delete
    exein apikey create|list|delete
"""

import logging

import click

from ..config import API_HOST, API_PORT, API_TLS, CLI_VERSION
from .commands import login, logout
from .commands.apikey import apikey
from .commands.projects import projects
from .commands.updates import check_updates
from .utils import make_api_server


@click.group()
@click.version_option(version=CLI_VERSION)
@click.option("--host", default=API_HOST, show_default=True, help="API host")
@click.option("--port", default=API_PORT, show_default=True, help="API port")
@click.option("--tls/--no-tls", default=API_TLS, show_default=True, help="Use https")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, host: str, port: str, tls: bool, verbose: bool):
    """Exein CLI - firmware security analysis from the command line"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.ensure_object(dict)
    ctx.obj.update(host=host, port=port, tls=tls)
    ctx.obj.setdefault("api_factory", make_api_server)


# Authentication
cli.add_command(login.login)
cli.add_command(logout.logout)

cli.add_command(check_updates)
cli.add_command(projects)
cli.add_command(apikey)


def main():
    """Main entry point for the CLI."""
    cli()

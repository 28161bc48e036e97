"""Shared helpers for CLI commands."""

from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import click

from ..auth import TokenAuthSystem
from ..client import ApiServer, HttpApiServer
from ..exceptions import ApiServerError, AuthError

_T = TypeVar("_T")


def make_api_server(settings: dict[str, Any]) -> ApiServer:
    """Build the production gateway from CLI settings."""
    return HttpApiServer(
        settings["host"],
        settings["port"],
        settings["tls"],
        TokenAuthSystem(),
    )


def run_operation(
    settings: dict[str, Any], operation: Callable[[ApiServer], Awaitable[_T]]
) -> _T:
    """Run one gateway operation, exiting with status 1 on failure.

    Args:
        settings: CLI context object holding host, port, tls and api_factory.
        operation: Coroutine function receiving the gateway.

    Returns:
        The operation's result.
    """

    async def _run() -> _T:
        api = settings["api_factory"](settings)
        try:
            return await operation(api)
        finally:
            await api.close()

    try:
        return asyncio.run(_run())
    except AuthError as e:
        click.echo(f"Error: {e.message}", err=True)
        click.echo("Hint: Run 'exein login' to authenticate.", err=True)
        sys.exit(1)
    except ApiServerError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


def echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, default=str))

"""Session resolution on top of an auth system."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from .auth import AuthSystem, read_credentials_from_stdin
from .exceptions import ExeinError
from .types import AuthData

logger = logging.getLogger(__name__)


class AuthResolver:
    """Produce a valid session: stored session, then refresh, then login.

    Each step runs at most once per call. A failing stored-session check or
    refresh falls through to the next step; only the interactive login's
    error reaches the caller.
    """

    def __init__(
        self,
        auth_system: AuthSystem,
        prompt: Callable[[], tuple[str, str]] = read_credentials_from_stdin,
    ) -> None:
        """Initialize the resolver.

        Args:
            auth_system: Auth system that owns the session.
            prompt: Blocking callable returning (username, password).
        """
        self.auth_system = auth_system
        self._prompt = prompt

    async def authenticate(self) -> AuthData:
        """Return a valid session, prompting for credentials as a last resort.

        Raises:
            AuthError: If the interactive login is rejected.
            RequestError: If the auth server cannot be reached during login.
        """
        try:
            return await self.auth_system.logged_in()
        except ExeinError as e:
            logger.debug("No usable stored session: %s", e.message)

        try:
            return await self.auth_system.refresh()
        except ExeinError as e:
            logger.debug("Session refresh failed: %s", e.message)

        username, password = await asyncio.to_thread(self._prompt)
        return await self.auth_system.login(username, password)

    async def logout(self) -> None:
        await self.auth_system.logout()

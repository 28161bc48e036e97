"""Authentication capability and credential storage for the Exein API."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Protocol

import click
import httpx
from pydantic import ValidationError

from .config import (
    AUTH_CLIENT_ID,
    AUTH_TOKEN_URL,
    CREDENTIALS_FILE,
    DEFAULT_TIMEOUT,
    TOKEN_EXPIRY_MARGIN,
    USER_AGENT,
)
from .exceptions import AuthError, RequestError
from .types import AuthData, Credentials, TokenResponse

logger = logging.getLogger(__name__)


class AuthSystem(Protocol):
    """Source of bearer sessions for the API gateway.

    Every method raises AuthError when it cannot produce what was asked for,
    and RequestError when the auth server cannot be reached.
    """

    async def logged_in(self) -> AuthData:
        """Return the stored session if it is still valid."""
        ...

    async def refresh(self) -> AuthData:
        """Exchange the stored refresh token for a new session."""
        ...

    async def login(self, username: str, password: str) -> AuthData:
        """Perform a full login with user credentials."""
        ...

    async def logout(self) -> None:
        """Forget the stored session."""
        ...


def save_credentials(creds: Credentials, path: Path = CREDENTIALS_FILE) -> None:
    """Save credentials to config file.

    Args:
        creds: Credentials to save.
        path: Credentials file location.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(creds.model_dump_json())
    # Restrict permissions to owner only
    path.chmod(0o600)


def get_credentials(path: Path = CREDENTIALS_FILE) -> Credentials | None:
    """Load credentials from config file.

    Returns:
        Credentials if found and valid, None otherwise.
    """
    if not path.exists():
        return None
    try:
        return Credentials.model_validate_json(path.read_text())
    except (ValidationError, ValueError):
        return None


def clear_credentials(path: Path = CREDENTIALS_FILE) -> bool:
    """Remove stored credentials.

    Returns:
        True if credentials were removed, False if there were none.
    """
    if path.exists():
        path.unlink()
        return True
    return False


def read_credentials_from_stdin() -> tuple[str, str]:
    """Prompt the user for email and password."""
    username = click.prompt("Email", err=True)
    password = click.prompt("Password", hide_input=True, err=True)
    return username, password


class TokenAuthSystem:
    """Auth system backed by an OAuth2 token endpoint and a credentials file."""

    def __init__(
        self,
        token_url: str = AUTH_TOKEN_URL,
        client_id: str = AUTH_CLIENT_ID,
        credentials_file: Path = CREDENTIALS_FILE,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.token_url = token_url
        self.client_id = client_id
        self.credentials_file = credentials_file
        self.timeout = timeout

    async def logged_in(self) -> AuthData:
        creds = get_credentials(self.credentials_file)
        if creds is None:
            raise AuthError("Not logged in")
        if creds.expires_at is not None:
            expires_at = creds.expires_at
            if expires_at.tzinfo is None:
                # Stored without an offset: read as UTC
                expires_at = expires_at.replace(tzinfo=timezone.utc)
            margin = timedelta(seconds=TOKEN_EXPIRY_MARGIN)
            if expires_at - margin <= datetime.now(timezone.utc):
                raise AuthError("Session expired")
        return creds.to_auth_data()

    async def refresh(self) -> AuthData:
        creds = get_credentials(self.credentials_file)
        if creds is None or not creds.refresh_token:
            raise AuthError("No refresh token available")
        # Servers that do not rotate refresh tokens omit it from the response
        return await self._token_request(
            {"grant_type": "refresh_token", "refresh_token": creds.refresh_token},
            keep_refresh_token=creds.refresh_token,
        )

    async def login(self, username: str, password: str) -> AuthData:
        return await self._token_request(
            {"grant_type": "password", "username": username, "password": password}
        )

    async def logout(self) -> None:
        if not clear_credentials(self.credentials_file):
            raise AuthError("Not logged in")

    async def _token_request(
        self, form: dict[str, str], keep_refresh_token: str | None = None
    ) -> AuthData:
        """POST a grant to the token endpoint and store the resulting session.

        Args:
            form: Grant parameters.
            keep_refresh_token: Refresh token to store when the response has none.
        """
        form = {**form, "client_id": self.client_id}
        logger.debug("Requesting token with grant %s", form["grant_type"])
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.token_url,
                    data=form,
                    headers={"User-Agent": USER_AGENT},
                )
        except httpx.HTTPError as e:
            raise RequestError(f"Cannot connect to auth server: {e}", e) from e

        if response.status_code != 200:
            raise AuthError(_error_message(response))

        try:
            token = TokenResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise RequestError("Unexpected response from auth server", e) from e

        expires_at = None
        if token.expires_in is not None:
            expires_at = datetime.now(timezone.utc) + timedelta(seconds=token.expires_in)
        creds = Credentials(
            token=token.access_token,
            token_type=token.token_type,
            expires_at=expires_at,
            refresh_token=token.refresh_token or keep_refresh_token,
        )
        save_credentials(creds, self.credentials_file)
        return creds.to_auth_data()


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or f"Authentication failed ({response.status_code})"
    if isinstance(data, dict):
        detail = data.get("error_description") or data.get("error")
        if detail:
            return str(detail)
    return response.text

"""HTTP gateway for the Exein project API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol, TypeVar
from uuid import UUID

import httpx
from pydantic import TypeAdapter, ValidationError

from .auth import AuthSystem
from .config import DEFAULT_TIMEOUT, USER_AGENT
from .exceptions import ApiError, RequestError
from .resolver import AuthResolver
from .types import (
    ApiKeyData,
    AuthData,
    LatestCliVersion,
    Project,
    ProjectAnalysis,
    ProjectIdDTO,
)

logger = logging.getLogger(__name__)

PROJECT_ROUTE_V1 = "/api/v1/projects"
APIKEY_ROUTE_V1 = "/api/v1/api_key"
UPDATES_ROUTE = "/api/updates_check"

APIKEY_ALREADY_PRESENT = "API key already present!"
APIKEY_NOT_FOUND = "No API key found!"

_T = TypeVar("_T")


class ApiServer(Protocol):
    """Operations offered by the Exein API, independent of transport."""

    async def updates_check(self) -> LatestCliVersion: ...

    async def create(
        self,
        fw_filepath: str | Path,
        fw_type: str,
        fw_subtype: str,
        name: str,
        description: str | None = None,
    ) -> UUID: ...

    async def overview(self, project_id: UUID) -> dict[str, Any]: ...

    async def analysis(self, project_id: UUID, analysis: str) -> ProjectAnalysis: ...

    async def delete(self, project_id: UUID) -> None: ...

    async def list_projects(self) -> list[Project]: ...

    async def authenticate(self) -> AuthData: ...

    async def logout(self) -> None: ...

    async def apikey_create(self) -> ApiKeyData: ...

    async def apikey_list(self) -> ApiKeyData: ...

    async def apikey_delete(self) -> None: ...

    async def close(self) -> None: ...


def get_protocol(tls: bool) -> str:
    return "https" if tls else "http"


class HttpApiServer:
    """Exein API gateway over HTTP.

    Every operation except the updates check is authenticated through an
    AuthResolver. A response is successful only when its status is 200; any
    other status becomes an ApiError carrying the response body, unless the
    operation documents a fixed message for it.

    Example:
        ```python
        async with HttpApiServer("cloud.exein.io", "443", True, auth) as api:
            project_id = await api.create("fw.bin", "linux", "generic", "router")
            print(await api.overview(project_id))
        ```
    """

    def __init__(
        self,
        host: str,
        port: str,
        tls: bool,
        auth_service: AuthSystem,
        timeout: float = DEFAULT_TIMEOUT,
        resolver: AuthResolver | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            host: API host name.
            port: API port.
            tls: Use https when True, http otherwise.
            auth_service: Auth system providing bearer sessions.
            timeout: Transport timeout in seconds.
            resolver: Resolver to use instead of one built on auth_service.
        """
        self.host = host
        self.port = port
        self.tls = tls
        self.timeout = timeout
        self.resolver = resolver or AuthResolver(auth_service)
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> HttpApiServer:
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure the HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ==================== AUTH ====================

    async def authenticate(self) -> AuthData:
        return await self.resolver.authenticate()

    async def logout(self) -> None:
        await self.resolver.logout()

    # ==================== REQUESTS ====================

    def url_for(self, path: str) -> str:
        return f"{get_protocol(self.tls)}://{self.host}:{self.port}{path}"

    def build_request(self, path: str, method: str, **body: Any) -> httpx.Request:
        """Build an unauthenticated request.

        Args:
            path: Absolute API path.
            method: HTTP method.
            **body: Body arguments accepted by httpx.Request (files, data, ...).

        Raises:
            RequestError: If host or port do not form a valid URL.
        """
        url = self.url_for(path)
        try:
            return httpx.Request(method, url, headers={"User-Agent": USER_AGENT}, **body)
        except httpx.InvalidURL as e:
            raise RequestError(f"Invalid API URL {url}: {e}", e) from e

    async def build_authenticated_request(
        self, path: str, method: str, **body: Any
    ) -> httpx.Request:
        """Build a request carrying a bearer token from the resolver.

        Raises:
            AuthError: If no session can be obtained.
            RequestError: If the URL is invalid or the auth server cannot be reached.
        """
        request = self.build_request(path, method, **body)
        auth_data = await self.authenticate()
        request.headers["Authorization"] = f"Bearer {auth_data.token}"
        return request

    async def _send(self, request: httpx.Request) -> httpx.Response:
        client = await self._ensure_client()
        logger.debug("%s %s", request.method, request.url)
        try:
            response = await client.send(request)
        except httpx.HTTPError as e:
            raise RequestError(f"Request to {request.url} failed: {e}", e) from e
        logger.debug("%s %s -> %d", request.method, request.url, response.status_code)
        return response

    @staticmethod
    def _check_status(
        response: httpx.Response, known: dict[int, str] | None = None
    ) -> None:
        """Raise ApiError unless the response status is 200.

        Args:
            response: Response to check.
            known: Fixed messages for statuses the operation documents.
        """
        status = response.status_code
        if status == httpx.codes.OK:
            return
        if known and status in known:
            raise ApiError(known[status], status)
        raise ApiError(response.text, status)

    @staticmethod
    def _parse(response: httpx.Response, result_type: type[_T]) -> _T:
        """Deserialize a response body, raising RequestError on mismatch."""
        try:
            return TypeAdapter(result_type).validate_json(response.content)
        except ValidationError as e:
            raise RequestError(
                f"Unexpected response from {response.request.url}: {e}", e
            ) from e

    # ==================== UPDATES ====================

    async def updates_check(self) -> LatestCliVersion:
        """Fetch the latest released CLI version."""
        response = await self._send(self.build_request(UPDATES_ROUTE, "GET"))
        self._check_status(response)
        return self._parse(response, LatestCliVersion)

    # ==================== PROJECTS ====================

    async def create(
        self,
        fw_filepath: str | Path,
        fw_type: str,
        fw_subtype: str,
        name: str,
        description: str | None = None,
    ) -> UUID:
        """Upload a firmware image as a new project.

        Args:
            fw_filepath: Path to the firmware image.
            fw_type: Firmware type.
            fw_subtype: Firmware subtype.
            name: Project name.
            description: Optional project description.

        Returns:
            ID of the created project.

        Raises:
            RequestError: If the image is missing, is a directory, or unreadable.
        """
        path = Path(fw_filepath)
        if not path.exists() or path.is_dir():
            raise RequestError(f"File {path} not found")
        if not path.name:
            raise RequestError(f"Problem with image filename: {path}")
        try:
            content = path.read_bytes()
        except OSError as e:
            raise RequestError(f"Cannot read {path}: {e}", e) from e

        form = {"name": name, "type": fw_type, "subtype": fw_subtype}
        if description is not None:
            form["description"] = description

        request = await self.build_authenticated_request(
            PROJECT_ROUTE_V1,
            "POST",
            data=form,
            files={"file": (path.name, content)},
        )
        response = await self._send(request)
        self._check_status(response)
        return self._parse(response, ProjectIdDTO).id

    async def overview(self, project_id: UUID) -> dict[str, Any]:
        """Fetch the overview document of a project."""
        path = f"{PROJECT_ROUTE_V1}/{project_id}/overview"
        response = await self._send(await self.build_authenticated_request(path, "GET"))
        self._check_status(response)
        return self._parse(response, dict[str, Any])

    async def analysis(self, project_id: UUID, analysis: str) -> ProjectAnalysis:
        """Fetch one kind of analysis result for a project."""
        path = f"{PROJECT_ROUTE_V1}/{project_id}/analysis/{analysis}"
        response = await self._send(await self.build_authenticated_request(path, "GET"))
        self._check_status(response)
        return self._parse(response, ProjectAnalysis)

    async def delete(self, project_id: UUID) -> None:
        path = f"{PROJECT_ROUTE_V1}/{project_id}"
        response = await self._send(
            await self.build_authenticated_request(path, "DELETE")
        )
        self._check_status(response)

    async def list_projects(self) -> list[Project]:
        response = await self._send(
            await self.build_authenticated_request(PROJECT_ROUTE_V1, "GET")
        )
        self._check_status(response)
        return self._parse(response, list[Project])

    # ==================== API KEY ====================

    async def apikey_create(self) -> ApiKeyData:
        response = await self._send(
            await self.build_authenticated_request(APIKEY_ROUTE_V1, "POST")
        )
        self._check_status(
            response, {httpx.codes.BAD_REQUEST: APIKEY_ALREADY_PRESENT}
        )
        return self._parse(response, ApiKeyData)

    async def apikey_list(self) -> ApiKeyData:
        response = await self._send(
            await self.build_authenticated_request(APIKEY_ROUTE_V1, "GET")
        )
        self._check_status(response, {httpx.codes.NO_CONTENT: APIKEY_NOT_FOUND})
        return self._parse(response, ApiKeyData)

    async def apikey_delete(self) -> None:
        response = await self._send(
            await self.build_authenticated_request(APIKEY_ROUTE_V1, "DELETE")
        )
        self._check_status(response)

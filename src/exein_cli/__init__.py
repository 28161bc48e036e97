"""Exein CLI: client gateway for the Exein firmware analysis API.

Basic Usage:
    ```python
    from exein_cli import HttpApiServer, TokenAuthSystem

    async with HttpApiServer("cloud.exein.io", "443", True, TokenAuthSystem()) as api:
        for project in await api.list_projects():
            print(project.id, project.name)
    ```
"""

from .auth import (
    AuthSystem,
    TokenAuthSystem,
    clear_credentials,
    get_credentials,
    read_credentials_from_stdin,
    save_credentials,
)
from .client import ApiServer, HttpApiServer
from .config import CLI_VERSION, USER_AGENT
from .exceptions import ApiError, ApiServerError, AuthError, ExeinError, RequestError
from .resolver import AuthResolver
from .types import (
    ApiKeyData,
    AuthData,
    Credentials,
    LatestCliVersion,
    Project,
    ProjectAnalysis,
)

__version__ = CLI_VERSION

__all__ = [
    # Version
    "__version__",
    "USER_AGENT",
    # Gateway
    "ApiServer",
    "HttpApiServer",
    # Auth
    "AuthSystem",
    "AuthResolver",
    "TokenAuthSystem",
    "save_credentials",
    "get_credentials",
    "clear_credentials",
    "read_credentials_from_stdin",
    # Types
    "AuthData",
    "Credentials",
    "Project",
    "ProjectAnalysis",
    "ApiKeyData",
    "LatestCliVersion",
    # Exceptions
    "ExeinError",
    "ApiServerError",
    "ApiError",
    "AuthError",
    "RequestError",
]

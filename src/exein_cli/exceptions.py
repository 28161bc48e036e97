"""Exception classes for the Exein API gateway."""

from __future__ import annotations


class ExeinError(Exception):
    """Base exception for all Exein CLI errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ApiServerError(ExeinError):
    """Any error raised at the API gateway boundary."""


class RequestError(ApiServerError):
    """The request could not be performed or its response could not be read.

    This error is raised when:
    - The API host is unreachable or the connection drops
    - A local input is malformed (e.g. a missing upload file)
    - A successful response body does not match the expected shape
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class ApiError(ApiServerError):
    """Error reported by the Exein API.

    The message is either the response body, verbatim, or a fixed message for
    statuses an operation documents.

    Attributes:
        message: Error message.
        status_code: HTTP status code of the response, when known.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class AuthError(ApiServerError):
    """Authentication failed.

    This error is raised when:
    - There is no stored session and no refresh token
    - The token endpoint rejects the credentials
    - Logging out without being logged in
    """

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)

"""Data types for Exein API contracts."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AuthData(BaseModel):
    """A bearer session handed out by an auth system."""

    token: str
    refresh_token: str | None = None
    expires_at: datetime | None = None


class Credentials(BaseModel):
    """Stored authentication credentials."""

    token: str
    token_type: str = "Bearer"
    expires_at: datetime | None = None
    refresh_token: str | None = None

    def to_auth_data(self) -> AuthData:
        return AuthData(
            token=self.token,
            refresh_token=self.refresh_token,
            expires_at=self.expires_at,
        )


class TokenResponse(BaseModel):
    """OAuth2 token endpoint response."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None
    refresh_token: str | None = None


class ProjectIdDTO(BaseModel):
    """Response from project creation."""

    id: UUID


class Project(BaseModel):
    """A firmware analysis project."""

    model_config = ConfigDict(extra="allow")

    id: UUID
    name: str
    description: str | None = None
    creation_date: str | None = None
    default: bool = False
    info: dict[str, Any] = Field(default_factory=dict)


class ProjectAnalysis(BaseModel):
    """Result page of a single analysis kind for a project."""

    model_config = ConfigDict(extra="allow")

    count: int | None = None
    result: list[dict[str, Any]] = Field(default_factory=list)


class ApiKeyData(BaseModel):
    """API key payload."""

    model_config = ConfigDict(extra="allow")

    api_key: str
    expiration: str | None = None


class LatestCliVersion(BaseModel):
    """Latest released CLI version."""

    model_config = ConfigDict(extra="allow")

    latest_version: str

"""Authentication strategies for outgoing HTTP requests.

Each auth variant knows which headers it contributes. Applying auth never
fails: a variant with missing credentials simply contributes nothing.
"""

import base64
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class BearerAuth(BaseModel):
    """Authorization: Bearer <token>."""

    type: Literal["bearer"] = "bearer"
    token: str | None = None

    def auth_headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}


class ApiKeyAuth(BaseModel):
    """API key sent in a caller-chosen header, e.g. X-API-Key."""

    type: Literal["api-key"] = "api-key"
    token: str | None = None
    header_name: str | None = None

    def auth_headers(self) -> dict[str, str]:
        if not self.token or not self.header_name:
            return {}
        return {self.header_name: self.token}


class BasicAuth(BaseModel):
    """Authorization: Basic base64(username:password)."""

    type: Literal["basic"] = "basic"
    username: str | None = None
    password: str | None = None

    def auth_headers(self) -> dict[str, str]:
        if not self.username or not self.password:
            return {}
        credentials = f"{self.username}:{self.password}".encode("utf-8")
        return {"Authorization": f"Basic {base64.b64encode(credentials).decode('ascii')}"}


AuthConfig = Annotated[BearerAuth | ApiKeyAuth | BasicAuth, Field(discriminator="type")]


def apply_auth(headers: dict[str, str], auth: AuthConfig | None) -> dict[str, str]:
    """Return a copy of headers with the auth headers for `auth` merged in."""
    result = dict(headers)
    if auth is not None:
        result.update(auth.auth_headers())
    return result


def build_auth(
    auth_type: str | None,
    token: str | None = None,
    username: str | None = None,
    password: str | None = None,
    api_key_header: str | None = None,
) -> AuthConfig | None:
    """Build an auth variant from the flat fields used by tool arguments."""
    if auth_type == "bearer":
        return BearerAuth(token=token)
    if auth_type == "api-key":
        return ApiKeyAuth(token=token, header_name=api_key_header)
    if auth_type == "basic":
        return BasicAuth(username=username, password=password)
    return None

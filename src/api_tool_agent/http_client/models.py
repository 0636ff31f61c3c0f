"""Request and response models shared by the ad-hoc and collection tools."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .auth import AuthConfig

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

DEFAULT_TIMEOUT_MS = 30000


class RequestSpec(BaseModel):
    """A validated description of one HTTP call."""

    url: str = Field(min_length=1)
    method: HttpMethod
    headers: dict[str, str] = {}
    body: Any = None
    params: dict[str, str] = {}
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    auth: AuthConfig | None = None


class ResponseEnvelope(BaseModel):
    """Outcome of a single request, successful or not.

    Serialized with camelCase keys; fields that were never set are omitted.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    status: int | None = None
    status_text: str | None = Field(default=None, alias="statusText")
    headers: dict[str, str] | None = None
    data: Any = None
    url: str | None = None
    method: str | None = None
    error: str | None = None

    @classmethod
    def failure(cls, error: str, **kwargs) -> "ResponseEnvelope":
        return cls(success=False, error=error, **kwargs)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)

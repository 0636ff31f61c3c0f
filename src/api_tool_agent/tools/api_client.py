"""The make-api-request tool: ad-hoc HTTP requests with optional auth."""

from typing import Any, Literal

from pydantic import Field

from api_tool_agent.http_client.auth import build_auth
from api_tool_agent.http_client.executor import RequestExecutor
from api_tool_agent.http_client.models import DEFAULT_TIMEOUT_MS, HttpMethod, RequestSpec

from .base import ToolArgs, ToolHandler, ToolResult, ToolSpec


class ApiRequestArgs(ToolArgs):
    url: str = Field(min_length=1, description="The API endpoint URL")
    method: HttpMethod = Field(description="HTTP method")
    headers: dict[str, str] | None = Field(default=None, description="Request headers as key-value pairs")
    body: Any = Field(default=None, description="Request body for POST/PUT/PATCH requests")
    params: dict[str, str] | None = Field(default=None, description="Query parameters as key-value pairs")
    timeout: int | None = Field(default=None, gt=0, description="Request timeout in milliseconds (default 30000)")
    auth_type: Literal["bearer", "api-key", "basic"] | None = Field(
        default=None, alias="authType", description="Authentication type"
    )
    token: str | None = Field(default=None, description="Bearer token or API key")
    username: str | None = Field(default=None, description="Username for basic auth")
    password: str | None = Field(default=None, description="Password for basic auth")
    api_key_header: str | None = Field(
        default=None, alias="apiKeyHeader", description="Header name for API key (e.g., 'X-API-Key')"
    )

    def to_spec(self, default_timeout_ms: int = DEFAULT_TIMEOUT_MS) -> RequestSpec:
        return RequestSpec(
            url=self.url,
            method=self.method,
            headers=self.headers or {},
            body=self.body,
            params=self.params or {},
            timeout_ms=self.timeout or default_timeout_ms,
            auth=build_auth(
                self.auth_type,
                token=self.token,
                username=self.username,
                password=self.password,
                api_key_header=self.api_key_header,
            ),
        )


class ApiClientTools(ToolHandler):
    def __init__(self, executor: RequestExecutor | None = None, default_timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.executor = executor or RequestExecutor()
        self.default_timeout_ms = default_timeout_ms

    def tool_specs(self) -> list[ToolSpec]:
        return [
            ToolSpec(
                name="make-api-request",
                description="Make HTTP requests to any API endpoint with support for various authentication methods",
                args_model=ApiRequestArgs,
                fn=self.make_request,
            ),
        ]

    def make_request(self, args: ApiRequestArgs) -> ToolResult:
        envelope = self.executor.execute(args.to_spec(self.default_timeout_ms))
        return ToolResult.from_payload(envelope.to_dict(), is_error=not envelope.success)

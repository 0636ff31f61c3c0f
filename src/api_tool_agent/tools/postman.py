"""Postman collection tools: import, list and execute by name."""

from pydantic import Field

from api_tool_agent.collection.service import CollectionService

from .base import ToolArgs, ToolHandler, ToolResult, ToolSpec


class ImportCollectionArgs(ToolArgs):
    file_path: str = Field(alias="filePath", min_length=1, description="Path to the Postman collection JSON file")


class ListRequestsArgs(ToolArgs):
    collection_name: str | None = Field(
        default=None, alias="collectionName", description="Name of the collection to list requests from"
    )


class ExecuteRequestArgs(ToolArgs):
    request_name: str = Field(alias="requestName", min_length=1, description="Name of the request to execute")
    variables: dict[str, str] = Field(
        default={}, description="Variables to replace in the request (e.g., {{baseUrl}}, {{token}})"
    )


class PostmanCollectionTools(ToolHandler):
    """Collection tools sharing one CollectionService (and its registry)."""

    def __init__(self, service: CollectionService | None = None):
        self.service = service or CollectionService()

    def tool_specs(self) -> list[ToolSpec]:
        return [
            ToolSpec(
                name="import-postman-collection",
                description="Import and parse a Postman collection file to extract API endpoints",
                args_model=ImportCollectionArgs,
                fn=self.import_collection,
            ),
            ToolSpec(
                name="list-postman-requests",
                description="List all API requests from previously imported Postman collections",
                args_model=ListRequestsArgs,
                fn=self.list_requests,
            ),
            ToolSpec(
                name="execute-postman-request",
                description="Execute a specific request from an imported Postman collection by name",
                args_model=ExecuteRequestArgs,
                fn=self.execute_request,
            ),
        ]

    def import_collection(self, args: ImportCollectionArgs) -> ToolResult:
        result = self.service.import_collection(args.file_path)
        return ToolResult.from_payload(result.to_dict(), is_error=not result.success)

    def list_requests(self, args: ListRequestsArgs) -> ToolResult:
        requests = self.service.list_requests(args.collection_name)
        return ToolResult.from_payload(
            {
                "success": True,
                "totalRequests": len(requests),
                "requests": [r.model_dump() for r in requests],
            }
        )

    def execute_request(self, args: ExecuteRequestArgs) -> ToolResult:
        envelope = self.service.execute(args.request_name, args.variables)
        return ToolResult.from_payload(envelope.to_dict(), is_error=not envelope.success)

"""Collection import, listing and replay.

Ties together the Postman parser, the request registry, variable
substitution and the HTTP executor. Every operation reports failures in its
result instead of raising.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from api_tool_agent.errors import describe_validation_error
from api_tool_agent.http_client.executor import RequestExecutor
from api_tool_agent.http_client.models import DEFAULT_TIMEOUT_MS, RequestSpec, ResponseEnvelope

from .base import UNNAMED_COLLECTION, Collection, ImportResult, RequestSummary
from .postman import load_collection, parse_collection
from .registry import RequestRegistry
from .variables import resolve

logger = logging.getLogger(__name__)


class CollectionService:
    """Owns a RequestRegistry for the lifetime of the instance."""

    def __init__(
        self,
        executor: RequestExecutor | None = None,
        registry: RequestRegistry | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ):
        self.executor = executor or RequestExecutor()
        self.timeout_ms = timeout_ms
        self.registry = registry if registry is not None else RequestRegistry()

    def import_collection(self, file_path: str | Path) -> ImportResult:
        """Import a collection file and register all of its requests."""
        try:
            collection = load_collection(Path(file_path))
        except (OSError, ValueError) as e:
            logger.warning("Failed to import collection %s: %s", file_path, e)
            return ImportResult(success=False, error=f"Failed to import collection: {e}")

        info = collection.get("info")
        name = (info.get("name") if isinstance(info, dict) else None) or UNNAMED_COLLECTION
        requests = parse_collection(collection)
        for record in requests:
            self.registry.store(record)
        self.registry.add_collection(
            Collection(name=str(name), request_names=[r.name for r in requests])
        )
        logger.info("Imported %d requests from collection %r", len(requests), name)

        return ImportResult(
            success=True,
            message=f"Successfully imported collection: {name}",
            collection_name=str(name),
            imported_count=len(requests),
            requests=[r.summary() for r in requests],
        )

    def list_requests(self, collection_name: str | None = None) -> list[RequestSummary]:
        """List every registered request across all imports.

        `collection_name` is accepted for the tool contract but listing is
        always global.
        """
        return [record.summary() for record in self.registry.all()]

    def execute(self, name: str, variables: dict[str, str] | None = None) -> ResponseEnvelope:
        """Resolve and execute a registered request by hierarchical name."""
        record = self.registry.get(name)
        if record is None:
            return ResponseEnvelope.failure(f"Request '{name}' not found")

        resolved = resolve(record, variables or {})
        try:
            spec = RequestSpec(
                url=resolved.url,
                method=resolved.method,
                headers=resolved.headers,
                params=resolved.params,
                body=resolved.body,
                timeout_ms=self.timeout_ms,
            )
        except ValidationError as e:
            return ResponseEnvelope.failure(
                f"Invalid request '{name}': {describe_validation_error(e)}",
                url=resolved.url,
                method=resolved.method,
            )
        return self.executor.execute(spec)


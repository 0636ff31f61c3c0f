"""Data models for imported request collections.

The Postman parser converts collection files into these models; the
registry stores them and the service hands out copies for execution.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

UNNAMED_COLLECTION = "Unnamed Collection"
NAME_SEPARATOR = " > "


class RequestNode(BaseModel):
    """Leaf of a collection tree: one executable request."""

    name: str
    request: Any
    item: dict = {}  # untouched source item


class FolderNode(BaseModel):
    """Folder of a collection tree, holding child nodes in source order."""

    name: str
    children: list["RequestNode | FolderNode"] = []


FolderNode.model_rebuild()

CollectionNode = RequestNode | FolderNode


class NormalizedRequest(BaseModel):
    """A collection request flattened into executable form."""

    name: str  # hierarchical, e.g. "Users > Create user"
    method: str
    url: str
    headers: dict[str, str] = {}
    params: dict[str, str] = {}
    body: Any = None  # parsed JSON, raw string, urlencoded mapping or None
    original_item: dict = {}

    def summary(self) -> "RequestSummary":
        return RequestSummary(name=self.name, method=self.method, url=self.url)


class RequestSummary(BaseModel):
    name: str
    method: str
    url: str


class Collection(BaseModel):
    """An imported collection and the names of the requests it contributed."""

    name: str = UNNAMED_COLLECTION
    request_names: list[str] = []


class ImportResult(BaseModel):
    """Outcome of importing one collection file."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str | None = None
    collection_name: str | None = Field(default=None, alias="collectionName")
    imported_count: int | None = Field(default=None, alias="importedCount")
    requests: list[RequestSummary] | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

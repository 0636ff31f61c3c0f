"""In-memory store of imported requests, keyed by hierarchical name."""

from .base import Collection, NormalizedRequest


class RequestRegistry:
    """Process-local request store.

    Storing a record under an existing name replaces it (last write wins).
    Not thread-safe: callers are expected to run one operation at a time.
    """

    def __init__(self):
        self._requests: dict[str, NormalizedRequest] = {}
        self._collections: dict[str, Collection] = {}

    def store(self, record: NormalizedRequest) -> None:
        self._requests[record.name] = record

    def get(self, name: str) -> NormalizedRequest | None:
        return self._requests.get(name)

    def all(self) -> list[NormalizedRequest]:
        return list(self._requests.values())

    def add_collection(self, collection: Collection) -> None:
        """Register a collection; an earlier one with the same name is replaced."""
        self._collections[collection.name] = collection

    def collections(self) -> list[Collection]:
        return list(self._collections.values())

    def clear(self) -> None:
        self._requests.clear()
        self._collections.clear()

    def __len__(self) -> int:
        return len(self._requests)

    def __contains__(self, name: object) -> bool:
        return name in self._requests

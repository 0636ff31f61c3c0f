from api_tool_agent.collection.base import Collection, NormalizedRequest
from api_tool_agent.collection.registry import RequestRegistry


def _make_request(name: str, url: str = "https://x") -> NormalizedRequest:
    return NormalizedRequest(name=name, method="GET", url=url)


class TestRequestRegistry:
    def test_store_and_get(self):
        registry = RequestRegistry()
        registry.store(_make_request("A"))
        assert registry.get("A").url == "https://x"
        assert "A" in registry
        assert len(registry) == 1

    def test_get_missing_returns_none(self):
        assert RequestRegistry().get("missing") is None

    def test_all_keeps_insertion_order(self):
        registry = RequestRegistry()
        for name in ("b", "a", "c"):
            registry.store(_make_request(name))
        assert [r.name for r in registry.all()] == ["b", "a", "c"]

    def test_last_write_wins(self):
        registry = RequestRegistry()
        registry.store(_make_request("A", "https://old"))
        registry.store(_make_request("B"))
        registry.store(_make_request("A", "https://new"))
        assert registry.get("A").url == "https://new"
        assert [r.name for r in registry.all()] == ["A", "B"]

    def test_collections_replaced_by_name(self):
        registry = RequestRegistry()
        registry.add_collection(Collection(name="Demo", request_names=["A"]))
        registry.add_collection(Collection(name="Demo", request_names=["B"]))
        assert [c.request_names for c in registry.collections()] == [["B"]]

    def test_clear(self):
        registry = RequestRegistry()
        registry.store(_make_request("A"))
        registry.add_collection(Collection(name="Demo"))
        registry.clear()
        assert len(registry) == 0
        assert registry.collections() == []

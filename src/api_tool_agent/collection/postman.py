"""Postman Collection v2.x parser.

Converts exported collection JSON into a folder/request tree and then into
a flat, ordered list of NormalizedRequest with hierarchical names.
"""

import json
import logging
from pathlib import Path
from typing import Any

from .base import (
    NAME_SEPARATOR,
    CollectionNode,
    FolderNode,
    NormalizedRequest,
    RequestNode,
)

logger = logging.getLogger(__name__)

UNNAMED_ITEM = "Unnamed"


def load_collection(file_path: Path) -> dict:
    """Read and JSON-decode a collection file.

    Raises OSError, UnicodeDecodeError or ValueError (including
    json.JSONDecodeError) when the file cannot be used.
    """
    text = Path(file_path).read_text(encoding="utf-8")
    collection = json.loads(text)
    if not isinstance(collection, dict):
        raise ValueError("collection root must be a JSON object")
    return collection


def parse_collection(collection: dict) -> list[NormalizedRequest]:
    """Parse every request of an already decoded collection."""
    items = collection.get("item", [])
    if not isinstance(items, list):
        logger.warning("Collection 'item' is not a list; nothing to import")
        return []
    return parse_items(items)


def parse_items(items: list) -> list[NormalizedRequest]:
    """Flatten a raw item list (folders and requests) in source order."""
    return flatten(build_tree(items))


def build_tree(items: list) -> list[CollectionNode]:
    """Convert raw collection items into RequestNode / FolderNode trees."""
    nodes: list[CollectionNode] = []
    for item in items:
        if not isinstance(item, dict):
            logger.debug("Skipping collection item that is not an object: %r", item)
            continue
        name = str(item.get("name") or UNNAMED_ITEM)
        if item.get("request"):
            nodes.append(RequestNode(name=name, request=item["request"], item=item))
        elif isinstance(item.get("item"), list):
            nodes.append(FolderNode(name=name, children=build_tree(item["item"])))
        else:
            logger.debug("Skipping collection item %r: neither request nor folder", name)
    return nodes


def flatten(nodes: list[CollectionNode], prefix: str = "") -> list[NormalizedRequest]:
    """Depth-first walk producing NormalizedRequests.

    A request that fails to normalize is logged and dropped so that one bad
    entry does not abort the import of the rest.
    """
    requests: list[NormalizedRequest] = []
    for node in nodes:
        name = f"{prefix}{NAME_SEPARATOR}{node.name}" if prefix else node.name
        if isinstance(node, FolderNode):
            requests.extend(flatten(node.children, name))
            continue
        try:
            requests.append(normalize_request(node, name))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Failed to parse request %r, skipping: %s", name, e)
    return requests


def normalize_request(node: RequestNode, name: str) -> NormalizedRequest:
    req = node.request
    if isinstance(req, str):
        # v2.1 allows a bare URL string as shorthand for a GET request
        req = {"method": "GET", "url": req}
    if not isinstance(req, dict):
        raise TypeError(f"request must be an object or a URL string, got {type(req).__name__}")

    url = req.get("url", "")
    query = url.get("query") if isinstance(url, dict) else None

    return NormalizedRequest(
        name=name,
        method=str(req.get("method") or "GET").upper(),
        url=_parse_url(url),
        headers=_pairs_to_dict(req.get("header")),
        params=_pairs_to_dict(query),
        body=_parse_body(req.get("body")),
        original_item=node.item,
    )


def _parse_url(url: Any) -> str:
    if isinstance(url, str):
        return url
    if not url:
        return ""
    if not isinstance(url, dict):
        raise TypeError(f"unsupported url value of type {type(url).__name__}")
    if url.get("raw"):
        return str(url["raw"])
    host, path = url.get("host"), url.get("path")
    if host and path:
        return f"{_join(host, '.')}/{_join(path, '/')}"
    return ""


def _join(parts: Any, sep: str) -> str:
    if isinstance(parts, str):
        return parts
    return sep.join(str(p) for p in parts)


def _pairs_to_dict(pairs: list[dict] | None) -> dict[str, str]:
    """Flatten [{key, value}] pairs; incomplete or disabled entries are skipped."""
    result: dict[str, str] = {}
    for pair in pairs or []:
        if pair.get("disabled"):
            continue
        key, value = pair.get("key"), pair.get("value")
        if key and value:
            result[str(key)] = str(value)
    return result


def _parse_body(body: dict | None) -> Any:
    if not body:
        return None
    if not isinstance(body, dict):
        raise TypeError(f"unsupported body value of type {type(body).__name__}")
    raw = body.get("raw")
    if raw:
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            return raw
    urlencoded = body.get("urlencoded")
    if urlencoded:
        return {
            str(pair["key"]): pair.get("value")
            for pair in urlencoded
            if isinstance(pair, dict) and pair.get("key") and not pair.get("disabled")
        }
    return None

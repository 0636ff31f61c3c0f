import json

import pytest
import requests


def build_response(status: int = 200, json_body=None, text: str | None = None, reason: str = "OK", headers=None):
    """Build a real requests.Response without touching the network."""
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp.encoding = "utf-8"
    if json_body is not None:
        resp._content = json.dumps(json_body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = (text or "").encode("utf-8")
    resp.headers.update(headers or {})
    return resp


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def demo_collection(tmp_path):
    path = tmp_path / "demo.postman.json"
    path.write_text(
        json.dumps(
            {
                "info": {"name": "Demo"},
                "item": [{"name": "Get", "request": {"method": "GET", "url": "https://x/a"}}],
            }
        ),
        encoding="utf-8",
    )
    return path

"""Generic HTTP request executor.

Turns a validated RequestSpec into exactly one outbound call via `requests`
and reports the outcome as a ResponseEnvelope. Failures are classified and
returned, never raised.
"""

import json
import logging
from typing import Any

import requests

from .auth import apply_auth
from .models import RequestSpec, ResponseEnvelope

logger = logging.getLogger(__name__)


class RequestExecutor:
    """Executes RequestSpecs. Stateless; one network call per `execute`."""

    def execute(self, spec: RequestSpec) -> ResponseEnvelope:
        method = spec.method.upper()
        request_kwargs = self._build_request_kwargs(spec)

        logger.info("Executing %s request to %s", method, spec.url)
        try:
            response = requests.request(method, spec.url, **request_kwargs)
        except (
            requests.ConnectionError,
            requests.Timeout,
            requests.exceptions.ChunkedEncodingError,
            requests.exceptions.ContentDecodingError,
            requests.TooManyRedirects,
        ) as e:
            logger.warning("No response from %s %s: %s", method, spec.url, e)
            return ResponseEnvelope.failure(
                f"Network error: No response received. {e}",
                url=spec.url,
                method=method,
            )
        except (requests.RequestException, ValueError, TypeError) as e:
            logger.warning("Could not send %s %s: %s", method, spec.url, e)
            return ResponseEnvelope.failure(
                f"Request error: {e}",
                url=spec.url,
                method=method,
            )

        data = _response_data(response)
        if not 200 <= response.status_code < 300:
            logger.warning("%s %s returned HTTP %s", method, spec.url, response.status_code)
            return ResponseEnvelope.failure(
                _format_response_error(response.status_code, response.reason, data),
                status=response.status_code,
                status_text=response.reason,
                url=spec.url,
                method=method,
            )

        return ResponseEnvelope(
            success=True,
            status=response.status_code,
            status_text=response.reason,
            headers=dict(response.headers),
            data=data,
            url=spec.url,
            method=method,
        )

    def _build_request_kwargs(self, spec: RequestSpec) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "headers": apply_auth(spec.headers, spec.auth),
            "params": dict(spec.params) or None,
            "timeout": spec.timeout_ms / 1000,
        }
        if isinstance(spec.body, (str, bytes)):
            kwargs["data"] = spec.body
        elif isinstance(spec.body, dict) and _is_form_encoded(kwargs["headers"]):
            kwargs["data"] = spec.body
        elif spec.body is not None:
            kwargs["json"] = spec.body
        return kwargs


def _is_form_encoded(headers: dict[str, str]) -> bool:
    return any(
        key.lower() == "content-type" and "application/x-www-form-urlencoded" in str(value).lower()
        for key, value in headers.items()
    )


def _response_data(response: requests.Response) -> Any:
    """Decode the response payload: JSON when possible, else text."""
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


def _format_response_error(status: int, reason: str | None, data: Any) -> str:
    message = f"HTTP {status}: {reason or ''}."
    if data not in ("", None):
        message += f" {json.dumps(data)}"
    return message

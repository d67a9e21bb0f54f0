"""webfox executor - send the assembled request with requests."""

import json
import time
from typing import Any

import requests

from webfox.args import ContentFormat

HTTP_VERSIONS = {10: "HTTP/1.0", 11: "HTTP/1.1", 20: "HTTP/2"}


class RequestResult:
    """Result of an HTTP request."""

    def __init__(self):
        self.status_code: int = 0
        self.reason: str = ""
        self.http_version: str = "HTTP/1.1"
        self.headers: dict[str, str] = {}
        self.content_type: str = ""
        self.body: Any = None  # parsed JSON or raw text
        self.elapsed_ms: float = 0
        self.error: str | None = None
        self.raw_text: str = ""


def execute_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    query: list[tuple[str, str]] | None = None,
    body: dict[str, Any] | None = None,
    content_format: ContentFormat = ContentFormat.JSON,
    timeout: float = 30,
    verify: bool = True,
) -> RequestResult:
    """Execute an HTTP request and return a structured result.

    JSON bodies are sent with ``json=``, form bodies with ``data=``; a None
    body sends nothing. Never raises - transport failures are reported
    through the result's error field.
    """
    result = RequestResult()

    try:
        kwargs: dict[str, Any] = {
            "method": method.upper(),
            "url": url,
            "headers": dict(headers) if headers else {},
            "params": list(query) if query else None,
            "timeout": timeout,
            "verify": verify,
            "allow_redirects": True,
        }

        if body is not None:
            if content_format is ContentFormat.FORM:
                kwargs["data"] = body
            else:
                kwargs["json"] = body

        start = time.monotonic()
        resp = requests.request(**kwargs)
        result.elapsed_ms = (time.monotonic() - start) * 1000

        result.status_code = resp.status_code
        result.reason = getattr(resp, "reason", "") or ""
        raw = getattr(resp, "raw", None)
        result.http_version = HTTP_VERSIONS.get(getattr(raw, "version", 11), "HTTP/1.1")
        result.headers = dict(resp.headers)
        result.content_type = resp.headers.get("Content-Type", "")
        result.raw_text = resp.text

        if "json" in result.content_type and resp.text:
            try:
                result.body = resp.json()
            except (json.JSONDecodeError, ValueError):
                result.body = resp.text
        else:
            result.body = resp.text

    except requests.exceptions.Timeout:
        result.error = f"Request timed out after {timeout}s"
    except requests.exceptions.ConnectionError as e:
        result.error = f"Connection error: {e}"
    except requests.exceptions.RequestException as e:
        result.error = f"Request failed: {e}"

    return result

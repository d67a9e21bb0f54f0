"""webfox output - plain-text rendering of requests and responses."""

import json
from typing import Any
from urllib.parse import urlencode

from webfox.args import ContentFormat, ParsedRequest


def format_request(parsed: ParsedRequest, body: dict[str, Any] | None) -> str:
    """Describe the outgoing request for --debug."""
    url = parsed.url
    if parsed.query:
        sep = "&" if "?" in url else "?"
        url = f"{url}{sep}{urlencode(parsed.query)}"

    lines = [f"{parsed.effective_method} {url}"]
    for key, value in parsed.headers.items():
        lines.append(f"{key}: {value}")

    if body is not None:
        if parsed.format is ContentFormat.FORM:
            lines.append("Content-Type: application/x-www-form-urlencoded")
            lines.append("")
            lines.append(urlencode(body))
        else:
            lines.append("Content-Type: application/json")
            lines.append("")
            lines.append(json.dumps(body))

    return "\n".join(lines)


def format_head(result) -> str:
    """Status line and response headers."""
    status = f"{result.http_version} {result.status_code}"
    if result.reason:
        status = f"{status} {result.reason}"
    lines = [status]
    for key, value in result.headers.items():
        lines.append(f"{key}: {value}")
    return "\n".join(lines)


def format_body(result) -> str:
    """Response body, pretty-printed when it parsed as JSON."""
    body = result.body
    if isinstance(body, dict | list):
        return json.dumps(body, indent=2)
    return str(body) if body is not None else ""

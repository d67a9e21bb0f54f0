"""webfox body - fold string and raw JSON fields into a request body."""

import json
import math
from collections.abc import Iterable
from typing import Any

from webfox.args import ContentFormat
from webfox.errors import FormFieldError, JsonFragmentError
from webfox.grammar import RequestItem, RequestItemKind


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


def parse_json_fragment(key: str, text: str) -> Any:
    """Parse the value of a ``key:=value`` item, naming the key on failure."""
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except RecursionError as e:
        raise JsonFragmentError(key, "nesting too deep") from e
    except ValueError as e:
        raise JsonFragmentError(key, str(e)) from e


def build_json(data: Iterable[RequestItem]) -> dict[str, Any]:
    """Fold items into a JSON object. Later keys overwrite earlier ones."""
    body: dict[str, Any] = {}
    for item in data:
        if item.kind is RequestItemKind.STRING_FIELD:
            body[item.key] = item.value
        elif item.kind is RequestItemKind.JSON_FIELD:
            body[item.key] = parse_json_fragment(item.key, item.value)
        else:
            raise ValueError(f"{item.kind.value} item {item.key!r} is not body data")
    return body


def build_form(data: Iterable[RequestItem], strict: bool = False) -> dict[str, str]:
    """Fold items into a flat form map.

    Raw JSON fields are sent as their literal text unless ``strict`` is set,
    in which case they are rejected.
    """
    form: dict[str, str] = {}
    for item in data:
        if item.kind is RequestItemKind.JSON_FIELD and strict:
            raise FormFieldError(item.key)
        if item.kind not in (RequestItemKind.STRING_FIELD, RequestItemKind.JSON_FIELD):
            raise ValueError(f"{item.kind.value} item {item.key!r} is not body data")
        form[item.key] = item.value
    return form


def build_body(
    data: Iterable[RequestItem],
    content_format: ContentFormat,
    strict_form: bool = False,
) -> dict[str, Any] | None:
    """Build the body for the chosen content format.

    Multipart bodies are not assembled here; the result is None.
    """
    if content_format is ContentFormat.FORM:
        return build_form(data, strict=strict_form)
    if content_format is ContentFormat.MULTIPART:
        return None
    return build_json(data)

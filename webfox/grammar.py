"""webfox grammar - token classification and URL shorthand expansion.

Request items use a two-character delimiter grammar:

    key:value    header
    key=value    string body field
    key:=value   raw JSON body field
    key==value   query string parameter

The first ``:`` or ``=`` in the token decides the kind. At that index the
two-character forms (``:=``, ``==``) are tried before the one-character ones,
so ``a:=b`` is a JSON field and never a header with value ``=b``.
"""

import enum
from typing import NamedTuple

METHODS = (
    "GET",
    "HEAD",
    "PUT",
    "POST",
    "DELETE",
    "PATCH",
    "OPTIONS",
    "TRACE",
    "CONNECT",
)


class RequestItemKind(enum.Enum):
    HEADER = "header"
    STRING_FIELD = "string"
    JSON_FIELD = "json"
    QUERY_PARAM = "query"


class RequestItem(NamedTuple):
    kind: RequestItemKind
    key: str
    value: str


class TokenKind(enum.Enum):
    FLAG = "flag"
    METHOD = "method"
    ITEM = "item"
    PLAIN = "plain"


class Token(NamedTuple):
    """A classified argument.

    ``name`` holds the flag text without its dashes for FLAG tokens, and the
    raw token otherwise. ``long`` tells ``--name`` apart from a ``-abc``
    cluster. ``item`` is set for ITEM tokens only.
    """

    kind: TokenKind
    name: str
    long: bool = False
    item: RequestItem | None = None


def parse_item(token: str) -> RequestItem | None:
    """Split a token at its first delimiter, or return None."""
    for i, c in enumerate(token):
        pair = token[i : i + 2]
        if c == ":":
            if pair == ":=":
                return RequestItem(RequestItemKind.JSON_FIELD, token[:i], token[i + 2 :])
            return RequestItem(RequestItemKind.HEADER, token[:i], token[i + 1 :])
        if c == "=":
            if pair == "==":
                return RequestItem(RequestItemKind.QUERY_PARAM, token[:i], token[i + 2 :])
            return RequestItem(RequestItemKind.STRING_FIELD, token[:i], token[i + 1 :])
    return None


def classify_token(token: str) -> Token:
    """Classify one raw argument.

    Flags are recognised by their leading dash before any delimiter scanning,
    so ``-x:=1`` is a (bad) flag cluster, not a JSON field.
    """
    if token.startswith("--"):
        return Token(TokenKind.FLAG, token[2:], long=True)
    if token.startswith("-"):
        return Token(TokenKind.FLAG, token[1:])
    if token in METHODS:
        return Token(TokenKind.METHOD, token)
    item = parse_item(token)
    if item is not None:
        return Token(TokenKind.ITEM, token, item=item)
    return Token(TokenKind.PLAIN, token)


def normalize_url(url: str) -> str:
    """Expand shorthand URLs into absolute ones.

        :/feta            -> http://localhost/feta
        :3000/feta        -> http://localhost:3000/feta
        google.com/feta   -> http://google.com/feta
        https://a.b/c     -> unchanged
    """
    if url.startswith(":/"):
        return "http://localhost" + url[1:]
    if url.startswith(":"):
        return "http://localhost" + url
    # a bare host such as httpbin.org also starts with "http"
    if not url.lower().startswith(("http://", "https://")):
        return "http://" + url
    return url

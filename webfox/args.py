"""webfox args - turn the wx argument vector into a ParsedRequest."""

import enum
import re
from collections.abc import Iterable

from requests.structures import CaseInsensitiveDict

from webfox.errors import (
    HeaderNameError,
    HeaderValueError,
    InvalidArgumentError,
    MissingUrlError,
    UnknownOptionError,
)
from webfox.grammar import (
    RequestItem,
    RequestItemKind,
    TokenKind,
    classify_token,
    normalize_url,
)

# RFC 7230 token characters
_HEADER_NAME_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
# Visible ASCII plus space and tab
_HEADER_VALUE_RE = re.compile(r"^[\t\x20-\x7e]*$")


class Command(enum.Enum):
    REQUEST = "request"
    PRINT_HELP = "help"
    PRINT_VERSION = "version"


class ContentFormat(enum.Enum):
    JSON = "json"  # application/json
    FORM = "form"  # application/x-www-form-urlencoded
    MULTIPART = "multipart"  # multipart/form-data


class Flag(enum.Enum):
    HELP = "help"
    VERSION = "version"
    FORM = "form"
    MULTI = "multi"
    DEBUG = "debug"


# (short, long, flag)
FLAGS = (
    ("h", "help", Flag.HELP),
    ("v", "version", Flag.VERSION),
    ("f", "form", Flag.FORM),
    ("m", "multi", Flag.MULTI),
    ("d", "debug", Flag.DEBUG),
)


class ParsedRequest:
    """Everything the argument vector says about the request to send."""

    def __init__(self):
        self.command: Command = Command.REQUEST
        self.method: str = "GET"
        self.method_given: bool = False
        self.url: str = ""
        self.headers: CaseInsensitiveDict = CaseInsensitiveDict()
        self.query: list[tuple[str, str]] = []
        self.data: list[RequestItem] = []
        self.format: ContentFormat = ContentFormat.JSON
        self.debug: bool = False

    @property
    def effective_method(self) -> str:
        """Method to send: explicit, else POST when there is body data, else GET."""
        if self.method_given:
            return self.method
        return "POST" if self.data else "GET"


def _find_flag(name: str, long: bool) -> Flag | None:
    for short, long_name, flag in FLAGS:
        if long and long_name == name.lower():
            return flag
        if not long and short == name:
            return flag
    return None


def _apply_flag(parsed: ParsedRequest, flag: Flag) -> None:
    if flag is Flag.HELP:
        parsed.command = Command.PRINT_HELP
    elif flag is Flag.VERSION:
        parsed.command = Command.PRINT_VERSION
    elif flag is Flag.FORM:
        parsed.format = ContentFormat.FORM
    elif flag is Flag.MULTI:
        parsed.format = ContentFormat.MULTIPART
    elif flag is Flag.DEBUG:
        parsed.debug = True


def _add_header(parsed: ParsedRequest, key: str, value: str) -> None:
    if not _HEADER_NAME_RE.match(key):
        raise HeaderNameError(key)
    value = value.strip(" \t")
    if not _HEADER_VALUE_RE.match(value):
        raise HeaderValueError(key, value)
    parsed.headers[key] = value


def parse_args(argv: Iterable[str]) -> ParsedRequest:
    """Parse ``[program, FLAGS..., METHOD?, URL, ITEM...]``.

    The first element is the program name and is skipped. Flags may appear
    anywhere. A method literal is only recognised before the URL, and the
    first non-flag, non-method token is always the URL. Every token after
    the URL must be a request item. Raises a ParseError subclass on the
    first bad token.
    """
    parsed = ParsedRequest()
    seen_url = False

    for i, arg in enumerate(argv):
        if i == 0:
            continue

        token = classify_token(arg)

        if token.kind is TokenKind.FLAG:
            if token.long:
                flag = _find_flag(token.name, long=True)
                if flag is None:
                    raise UnknownOptionError(arg, arg)
                _apply_flag(parsed, flag)
            else:
                # -fd == -f -d
                for char in token.name:
                    flag = _find_flag(char, long=False)
                    if flag is None:
                        raise UnknownOptionError(arg, f"-{char}")
                    _apply_flag(parsed, flag)
            continue

        if not parsed.method_given and not seen_url and token.kind is TokenKind.METHOD:
            parsed.method = arg
            parsed.method_given = True
            continue

        if not seen_url:
            parsed.url = normalize_url(arg)
            seen_url = True
            continue

        item = token.item
        if item is None:
            raise InvalidArgumentError(arg)
        if item.kind is RequestItemKind.HEADER:
            _add_header(parsed, item.key, item.value)
        elif item.kind is RequestItemKind.QUERY_PARAM:
            parsed.query.append((item.key, item.value))
        else:
            parsed.data.append(item)

    # Catch a missing url here; requests would only report "No scheme supplied"
    if not seen_url and parsed.command is Command.REQUEST:
        raise MissingUrlError()

    return parsed

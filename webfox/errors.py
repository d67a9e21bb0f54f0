"""webfox errors - everything the parser and body builder can reject."""


class WebfoxError(Exception):
    """Base class for all user-facing webfox errors."""


class ParseError(WebfoxError, ValueError):
    """The argument vector could not be turned into a request."""


class UnknownOptionError(ParseError):
    def __init__(self, token: str, option: str):
        self.token = token
        self.option = option
        super().__init__(f"unknown option: {option}")


class InvalidArgumentError(ParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid argument: {token}")


class MissingUrlError(ParseError):
    def __init__(self):
        super().__init__("missing url, run with -h to get help")


class HeaderNameError(ParseError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"invalid header name: {key!r}")


class HeaderValueError(ParseError):
    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"invalid value for header {key!r}: {value!r}")


class BuildError(WebfoxError, ValueError):
    """Request items could not be folded into a body."""


class JsonFragmentError(BuildError):
    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"error parsing json for {key!r}: {message}")


class FormFieldError(BuildError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"raw json field {key!r} cannot be sent form-encoded (strict_form is on)",
        )

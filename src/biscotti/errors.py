"""Biscotti exception hierarchy.

Every parse failure derives from ``CookieParseError``, which is also a
``ValueError``. Callers that only care whether a header parsed can catch
the base class; the subclasses say which part of the grammar was violated.
"""


class CookieError(Exception):
    """Base for all biscotti-specific errors."""


class CookieParseError(CookieError, ValueError):
    """Raised when cookie header text cannot be parsed.

    No partial ``Cookie`` is ever returned: one bad attribute invalidates
    the whole header.
    """

    def __init__(self, detail: str, text: str = "") -> None:
        super().__init__(detail, text)
        self.detail = detail
        self.text = text

    def __str__(self) -> str:
        if self.text:
            return f"{self.detail}: {self.text!r}"
        return self.detail


class EmptyInput(CookieParseError):  # noqa: N818
    """The header text is empty or whitespace only."""

    def __init__(self, text: str = "") -> None:
        super().__init__("Cookie header is empty", text)


class MalformedPair(CookieParseError):  # noqa: N818
    """A segment that must be ``key=value`` has no ``=``."""

    def __init__(self, segment: str) -> None:
        super().__init__("Expected a key=value pair", segment)


class InvalidEncoding(CookieParseError):  # noqa: N818
    """Percent-decoded name or value bytes are not valid UTF-8."""

    def __init__(self, text: str) -> None:
        super().__init__("Percent-decoded bytes are not valid UTF-8", text)


class InvalidNumber(CookieParseError):  # noqa: N818
    """``Max-Age`` is not a non-negative integer."""

    def __init__(self, text: str) -> None:
        super().__init__("Max-Age must be a non-negative integer", text)


class InvalidDate(CookieParseError):  # noqa: N818
    """``Expires`` matches none of the accepted date formats."""

    def __init__(self, text: str) -> None:
        super().__init__("Expires matches no accepted date format", text)

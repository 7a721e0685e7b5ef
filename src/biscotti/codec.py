"""Cookie header parsing and canonical serialization.

``parse_cookie`` turns one header value into a ``Cookie``; ``format_cookie``
renders a ``Cookie`` back in canonical form::

    name=value; HttpOnly; Secure; Path=...; Domain=...; Max-Age=...; Expires=...; k=v

Attribute order and the ``Expires`` layout are fixed on output, whatever
order or date layout the parsed input used.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from biscotti._internal.dates import format_expires, parse_expires
from biscotti._internal.encoding import percent_decode, percent_encode
from biscotti.cookie import Cookie
from biscotti.errors import (
    CookieParseError,
    EmptyInput,
    InvalidDate,
    InvalidEncoding,
    InvalidNumber,
    MalformedPair,
)

logger = logging.getLogger("biscotti.codec")

_FLAGS = frozenset({"secure", "httponly"})


@dataclass(frozen=True, slots=True)
class AttrVal:
    """An ``attr=value`` pair rendered with a percent-encoded value.

    The attribute name is encoded too when ``encode_attr`` is set, which is
    how the cookie's own name/value pair is written.
    """

    attr: str
    value: str
    encode_attr: bool = False

    def __str__(self) -> str:
        attr = percent_encode(self.attr) if self.encode_attr else self.attr
        return f"{attr}={percent_encode(self.value)}"


def format_pair(name: str, value: str) -> str:
    """Render a cookie ``name=value`` pair exactly as ``format_cookie`` does."""
    return str(AttrVal(name, value, encode_attr=True))


def _split(segment: str) -> tuple[str, str]:
    key, sep, value = segment.partition("=")
    if not sep:
        raise MalformedPair(segment)
    return key.strip(), value.strip()


def _decode(text: str) -> str:
    try:
        return percent_decode(text)
    except UnicodeError as exc:
        raise InvalidEncoding(text) from exc


def _apply_attribute(cookie: Cookie, key: str, value: str) -> None:
    match key.lower():
        case "secure" | "httponly" as flag:
            # Value ignored; the attribute's presence sets the flag.
            setattr(cookie, flag, True)
        case "max-age":
            if not (value.isascii() and value.isdigit()):
                raise InvalidNumber(value)
            try:
                cookie.max_age = int(value)
            except ValueError as exc:
                raise InvalidNumber(value) from exc
        case "domain":
            cookie.domain = value.removeprefix(".").lower()
        case "path":
            cookie.path = value
        case "expires":
            expires = parse_expires(value)
            if expires is None:
                raise InvalidDate(value)
            cookie.expires = expires
        case _:
            cookie.custom[key] = value


def parse_cookie(text: str) -> Cookie:
    """Parse one cookie header value into a ``Cookie``.

    The first ``;``-separated segment must be ``name=value``; both halves
    are percent-decoded. Later segments are attributes, matched
    case-insensitively. Unknown attributes land in ``Cookie.custom``
    verbatim, last occurrence winning.

    Raises:
        EmptyInput: *text* is blank.
        MalformedPair: a non-flag segment has no ``=``.
        InvalidEncoding: the decoded name or value is not UTF-8.
        InvalidNumber: ``Max-Age`` is not a non-negative integer.
        InvalidDate: ``Expires`` matches no accepted layout.
    """
    text = text.strip()
    if not text:
        raise EmptyInput(text)

    first, *attributes = text.split(";")
    name, value = _split(first)
    cookie = Cookie(_decode(name), _decode(value), path=None)

    for segment in attributes:
        segment = segment.strip()
        flag = segment.lower()
        if flag in _FLAGS:
            setattr(cookie, flag, True)
            continue
        _apply_attribute(cookie, *_split(segment))

    return cookie


def try_parse(text: str) -> Cookie | None:
    """Like ``parse_cookie``, but returns ``None`` instead of raising."""
    try:
        return parse_cookie(text)
    except CookieParseError:
        return None


def parse_set_cookies(values: Iterable[str]) -> list[Cookie]:
    """Parse a batch of ``Set-Cookie`` values, dropping the malformed ones.

    Order is preserved. Each dropped value is logged at DEBUG.
    """
    cookies: list[Cookie] = []
    for value in values:
        try:
            cookies.append(parse_cookie(value))
        except CookieParseError as exc:
            logger.debug("Dropping unparseable Set-Cookie: %s", exc)
    return cookies


def format_cookie(cookie: Cookie) -> str:
    """Serialize *cookie* to its canonical header value."""
    parts = [str(cookie.pair())]
    if cookie.httponly:
        parts.append("HttpOnly")
    if cookie.secure:
        parts.append("Secure")
    if cookie.path is not None:
        parts.append(f"Path={cookie.path}")
    if cookie.domain is not None:
        parts.append(f"Domain={cookie.domain}")
    if cookie.max_age is not None:
        parts.append(f"Max-Age={cookie.max_age}")
    if cookie.expires is not None:
        parts.append(f"Expires={format_expires(cookie.expires)}")
    parts.extend(str(AttrVal(k, v)) for k, v in sorted(cookie.custom.items()))
    return "; ".join(parts)

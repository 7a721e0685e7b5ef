"""The Cookie value: one cookie and its scoping/security attributes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from biscotti.codec import AttrVal


@dataclass(slots=True)
class Cookie:
    """A single HTTP cookie.

    ``Cookie(name, value)`` builds a cookie scoped to ``Path=/`` with every
    other attribute unset. Nothing is validated; characters that need
    escaping are percent-encoded when the cookie is formatted.

    A parsed cookie differs in one respect: ``path`` is ``None`` unless the
    header carried an explicit ``Path`` attribute.

    ``expires`` and ``max_age`` are kept side by side and never reconciled.
    Which one wins is up to the cookie store.

    Attributes:
        name: Cookie name, percent-decoded.
        value: Cookie value, percent-decoded. May be empty.
        expires: Absolute expiry. Parsed values are aware UTC datetimes.
        max_age: Lifetime in seconds.
        domain: Lowercased domain without a leading dot.
        path: Path scope.
        secure: ``Secure`` flag.
        httponly: ``HttpOnly`` flag.
        custom: Unrecognized attributes, key casing preserved.
    """

    name: str
    value: str
    expires: datetime | None = None
    max_age: int | None = None
    domain: str | None = None
    path: str | None = "/"
    secure: bool = False
    httponly: bool = False
    custom: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> Cookie:
        """Parse one ``Set-Cookie``/``Cookie`` header value.

        Raises ``CookieParseError`` if the text is malformed.
        """
        from biscotti.codec import parse_cookie

        return parse_cookie(text)

    def pair(self) -> AttrVal:
        """The ``name=value`` pair on its own, without attributes."""
        from biscotti.codec import AttrVal

        return AttrVal(self.name, self.value, encode_attr=True)

    def __str__(self) -> str:
        from biscotti.codec import format_cookie

        return format_cookie(self)

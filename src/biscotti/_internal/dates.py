"""``Expires`` attribute dates.

Parsing accepts the three RFC 2616 section 3.3.1 layouts plus the
dash-separated four-digit-year variant servers emit in practice.
Formatting always produces the RFC 1123 layout.
"""

from datetime import UTC, datetime
from email.utils import format_datetime

# Tried in order; the first layout that parses wins.
EXPIRES_FORMATS: tuple[str, ...] = (
    "%a, %d %b %Y %H:%M:%S %Z",  # Sun, 06 Nov 1994 08:49:37 GMT
    "%A, %d-%b-%y %H:%M:%S %Z",  # Sunday, 06-Nov-94 08:49:37 GMT
    "%a, %d-%b-%Y %H:%M:%S %Z",  # Sun, 06-Nov-1994 08:49:37 GMT
    "%a %b %d %H:%M:%S %Y",  # Sun Nov  6 08:49:37 1994
)


# strptime's %Z also accepts the host's local zone names; only these are taken.
_UTC_ZONES = frozenset({"GMT", "UTC"})


def _split_zone(value: str, fmt: str) -> tuple[str, str] | None:
    """Check the trailing zone token by hand and drop it from *value* and *fmt*."""
    if not fmt.endswith(" %Z"):
        return value, fmt
    head, _, zone = value.strip().rpartition(" ")
    if zone.upper() not in _UTC_ZONES:
        return None
    return head, fmt.removesuffix(" %Z")


def parse_expires(value: str) -> datetime | None:
    """Parse an ``Expires`` value into an aware UTC datetime.

    Zoned layouts must say ``GMT`` or ``UTC``; the result does not depend
    on the host's time zone. Returns ``None`` when no layout in
    ``EXPIRES_FORMATS`` matches.
    """
    for fmt in EXPIRES_FORMATS:
        split = _split_zone(value, fmt)
        if split is None:
            continue
        try:
            parsed = datetime.strptime(*split)
        except ValueError:
            continue
        return parsed.replace(tzinfo=UTC)
    return None


def format_expires(when: datetime) -> str:
    """Render *when* as ``Sun, 06 Nov 1994 08:49:37 GMT``.

    Naive datetimes are taken to be UTC already.
    """
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    else:
        when = when.astimezone(UTC)
    return format_datetime(when, usegmt=True)

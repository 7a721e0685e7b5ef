"""Percent-encoding for cookie names, values and custom attribute values.

ASCII letters, digits and ``-._~!$&'()*+/:@`` pass through unescaped.
Everything else, including ``;``, ``=``, ``,``, ``%``, whitespace and
non-ASCII, is written as uppercase ``%XX`` of its UTF-8 bytes.
"""

from urllib.parse import quote, unquote_to_bytes

# quote() always keeps letters, digits and "-._~"
SAFE_CHARS = "!$&'()*+/:@"


def percent_encode(text: str) -> str:
    return quote(text, safe=SAFE_CHARS)


def percent_decode(text: str) -> str:
    """Byte-wise percent-decode *text* and require valid UTF-8.

    Malformed escapes such as ``%zz`` are kept literally.
    Raises ``UnicodeDecodeError`` when the decoded bytes are not UTF-8.
    """
    return unquote_to_bytes(text).decode("utf-8")

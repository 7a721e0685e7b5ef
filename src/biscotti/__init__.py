"""Biscotti — HTTP cookie values and their header codec.

Converts between ``Set-Cookie``/``Cookie`` header text and a structured
``Cookie`` value, and back, in canonical wire form.

Basic usage::

    from biscotti import Cookie

    cookie = Cookie.parse("sid=abc%20123; Path=/; HttpOnly")
    cookie.value        # "abc 123"
    str(cookie)         # "sid=abc%20123; HttpOnly; Path=/"

Servers that receive several headers and want to skip the broken ones::

    from biscotti import parse_set_cookies
    cookies = parse_set_cookies(headers.get_list("set-cookie"))
"""

# Parsing and formatting are pure functions; no shared state (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "AttrVal",
    "Cookie",
    "CookieError",
    "CookieParseError",
    "EmptyInput",
    "InvalidDate",
    "InvalidEncoding",
    "InvalidNumber",
    "MalformedPair",
    "format_cookie",
    "format_pair",
    "parse_cookie",
    "parse_set_cookies",
    "try_parse",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Cookie": "biscotti.cookie",
    "AttrVal": "biscotti.codec",
    "format_cookie": "biscotti.codec",
    "format_pair": "biscotti.codec",
    "parse_cookie": "biscotti.codec",
    "parse_set_cookies": "biscotti.codec",
    "try_parse": "biscotti.codec",
    "CookieError": "biscotti.errors",
    "CookieParseError": "biscotti.errors",
    "EmptyInput": "biscotti.errors",
    "InvalidDate": "biscotti.errors",
    "InvalidEncoding": "biscotti.errors",
    "InvalidNumber": "biscotti.errors",
    "MalformedPair": "biscotti.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import biscotti`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)

"""URL canonicalisation and origin helpers for the crawler."""

from __future__ import annotations

from typing import Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

_DEFAULT_PORTS = {"http": 80, "https": 443}


def is_http_url(value: str) -> bool:
    """Return ``True`` if *value* is an absolute ``http``/``https`` URL."""
    try:
        parsed = urlsplit(value)
    except ValueError:
        return False
    return parsed.scheme in _DEFAULT_PORTS and bool(parsed.netloc)


def normalize_url(raw: str) -> str:
    """Canonicalise *raw* into the form used for de-duplication.

    The fragment is dropped, scheme and host are lowercased, the scheme's
    default port is removed, an empty path becomes ``/`` and a single trailing
    slash is removed from any other path.  The query string is kept.
    """
    parsed = urlsplit(raw)
    scheme = parsed.scheme.lower()
    netloc = parsed.netloc.lower()
    if scheme in _DEFAULT_PORTS:
        default_suffix = f":{_DEFAULT_PORTS[scheme]}"
        if netloc.endswith(default_suffix):
            netloc = netloc[: -len(default_suffix)]
        elif netloc.endswith(":"):
            netloc = netloc[:-1]

    path = parsed.path or "/"
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return urlunsplit((scheme, netloc, path, parsed.query, ""))


def origin_of(url: str) -> Optional[Tuple[str, str, int]]:
    """Return ``(scheme, host, port)`` for *url*, or ``None`` if it has none.

    Default ports are filled in so ``http://a.test`` and ``http://a.test:80``
    share an origin.
    """
    try:
        parsed = urlsplit(url)
        port = parsed.port
    except ValueError:
        return None
    scheme = parsed.scheme.lower()
    if scheme not in _DEFAULT_PORTS or not parsed.hostname:
        return None
    return scheme, parsed.hostname.lower(), port or _DEFAULT_PORTS[scheme]


def same_origin(a: str, b: str) -> bool:
    origin = origin_of(a)
    return origin is not None and origin == origin_of(b)


def robots_url_for(url: str) -> str:
    parsed = urlsplit(url)
    return urlunsplit((parsed.scheme, parsed.netloc, "/robots.txt", "", ""))

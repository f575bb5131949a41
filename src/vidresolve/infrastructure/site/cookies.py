"""Turn a response's Set-Cookie directives into a request Cookie header."""

from __future__ import annotations

import httpx


def _cookie_pair(directive: str) -> str:
    # "name=value; Path=/; HttpOnly" -> "name=value"
    return directive.split(";", 1)[0].strip()


def normalize_set_cookie(raw: str | list[str]) -> str:
    """Build a ``Cookie`` header value from Set-Cookie directives.

    *raw* is either a list with one directive per Set-Cookie header, or a
    single folded header string whose directives are comma-separated.  Only
    the ``name=value`` part before the first ``;`` of each directive is
    kept; the pairs are joined with ``"; "``.

    >>> normalize_set_cookie("a=1; Path=/, b=2; HttpOnly")
    'a=1; b=2'
    """
    directives = raw.split(",") if isinstance(raw, str) else raw
    pairs = [_cookie_pair(d) for d in directives]
    # fragments without "=" are the tail of a comma inside Expires=...
    return "; ".join(p for p in pairs if "=" in p)


def cookie_header_from_response(response: httpx.Response) -> str | None:
    """Cookie header for replaying *response*'s session, or ``None``.

    httpx keeps repeated Set-Cookie headers apart, so each one is read
    individually and commas inside values (``Expires=Wed, 21 Oct ...``)
    stay intact.  A header that arrives already folded into one line by an
    intermediary is split on commas as a fallback.
    """
    values = response.headers.get_list("set-cookie")
    if not values:
        return None
    if len(values) == 1:
        return normalize_set_cookie(values[0]) or None
    return normalize_set_cookie(values) or None

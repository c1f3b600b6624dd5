"""Helpers to assemble relative request URLs from endpoint, path and query parts."""

from __future__ import annotations


def build_uri(base: str | None, path: str | None = None, query: str | None = None) -> str:
    """
    Join a base endpoint, an optional path segment and an optional query string.

    Only one slash is trimmed at each seam, so ``build_uri("/t1", "/t2/", "q=1")``
    yields ``/t1/t2?q=1``. An empty result collapses to ``/``.
    """

    base = base or ""
    path = path or ""
    query = query or ""

    if base == "/":
        base = ""
    if len(base) > 1 and base.endswith("/"):
        base = base[:-1]

    if path.startswith("/"):
        path = path[1:]
    if path.endswith("/"):
        path = path[:-1]

    if query.startswith("?"):
        query = query[1:]

    uri = base
    if path:
        uri = f"{uri}/{path}"
    if query:
        uri = f"{uri}?{query}"
    return uri or "/"


def format_url(value: str) -> str:
    """Collapse each ``//`` into ``/`` in a single left-to-right pass."""

    return value.replace("//", "/")

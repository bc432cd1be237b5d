"""URL and query-string composition.

Path components are joined with ``/`` as given: empty components are kept,
so ``["api", "", "users"]`` becomes ``api//users``. Flags become a
``key=value&key=value`` query string in dictionary order.

Values are inserted verbatim, without percent-encoding. A value containing
``&``, ``=``, ``#`` or spaces therefore changes the meaning of the URL; this
is a known limitation of the tool, kept so that what the user types is what
the server receives.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence


def encode_query(flags: Optional[Mapping[str, str]]) -> str:
    """Render *flags* as ``k=v`` pairs joined with ``&`` (no leading ``?``)."""
    if not flags:
        return ""
    return "&".join(f"{key}={value}" for key, value in flags.items())


def compose_path(
    path_components: Sequence[str],
    flags: Optional[Mapping[str, str]] = None,
) -> str:
    """Join *path_components* and append the query string for *flags*.

    Example::

        compose_path(["users", "456"], {"include": "posts"})
        # 'users/456?include=posts'

    An empty or missing flag map adds no ``?`` at all.
    """
    path = "/".join(path_components)
    query = encode_query(flags)
    if not query:
        return path
    return f"{path}?{query}"


def join_url(base_url: str, path: str) -> str:
    """Append *path* to *base_url* with exactly one ``/`` between them.

    An empty *path* yields the base URL with a trailing slash.
    """
    base = base_url[:-1] if base_url.endswith("/") else base_url
    return f"{base}/{path}"

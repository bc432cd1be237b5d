"""Assemble a :class:`~ashttp.models.RequestDescriptor` from an action and its alias.

Header precedence, lowest to highest::

    Content-Type: application/json  <  alias defaultHeaders  <  --header flags

Each layer replaces same-named headers from the layers before it. Header
names compare case-insensitively, as HTTP does, so ``content-type`` in an
alias overrides the built-in ``Content-Type``.

Flags are always sent in the query string, for GET and DELETE alike. The
descriptor body is therefore ``None`` for every request built here.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping, Optional

from ashttp.client.url import compose_path, join_url
from ashttp.exceptions import RequestBuildError
from ashttp.models import AliasEntry, HTTPMethod, ParsedAction, RequestDescriptor
from ashttp.tokenizer import parse_method

BASE_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


def merge_headers(*layers: Optional[Mapping[str, str]]) -> dict[str, str]:
    """Merge header mappings left to right; later layers win.

    A header whose name matches an earlier one ignoring case replaces it,
    taking over the later spelling of the name.
    """
    merged: dict[str, str] = {}
    for layer in layers:
        for name, value in (layer or {}).items():
            for existing in [k for k in merged if k.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
    return merged


def parse_header(raw: str) -> tuple[str, str]:
    """Split a ``"Name: value"`` string as given to ``--header``.

    Raises:
        RequestBuildError: If there is no ``:`` or the name is empty.
    """
    name, sep, value = raw.partition(":")
    name = name.strip()
    if not sep or not name:
        raise RequestBuildError(f"invalid header '{raw}', expected 'Name: value'")
    return name, value.strip()


def parse_headers(raw_headers: Iterable[str]) -> dict[str, str]:
    """Parse repeated ``--header`` values into a mapping, later ones winning."""
    headers: dict[str, str] = {}
    for raw in raw_headers:
        name, value = parse_header(raw)
        headers = merge_headers(headers, {name: value})
    return headers


def encode_body(body: Any) -> Optional[bytes]:
    """Serialise *body* as UTF-8 JSON, or return ``None`` when there is no body.

    Raises:
        RequestBuildError: If *body* is not JSON-serialisable.
    """
    if body is None:
        return None
    try:
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise RequestBuildError(f"cannot encode request body as JSON: {exc}") from exc


def check_headers(headers: Mapping[str, str]) -> None:
    """Reject header names or values that cannot go on the wire as ASCII.

    Raises:
        RequestBuildError: Naming the first offending header.
    """
    for name, value in headers.items():
        try:
            name.encode("ascii")
            value.encode("ascii")
        except UnicodeEncodeError:
            raise RequestBuildError(
                f"invalid header '{name}: {value}', only ASCII characters are allowed"
            ) from None


def build_request(
    action: ParsedAction,
    entry: AliasEntry,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Build the request for *action* against the alias *entry*.

    A method that is not an :class:`HTTPMethod` (an action made with
    ``model_construct``, skipping validation) is parsed again here.

    Args:
        action: The parsed command line.
        entry: The resolved alias.
        headers: Request-level headers (from ``--header``), applied last.

    Returns:
        A descriptor with the full URL, the method, and merged headers.

    Raises:
        UnsupportedMethodError: If the action's method is not GET or DELETE.
        RequestBuildError: If a merged header is not plain ASCII.
    """
    method = action.method
    if not isinstance(method, HTTPMethod):
        method = parse_method(str(method))

    merged = merge_headers(BASE_HEADERS, entry.default_headers, headers)
    check_headers(merged)

    path = compose_path(action.path_components, action.options)
    return RequestDescriptor(
        url=join_url(entry.url, path),
        method=method,
        headers=merged,
        body=None,
    )

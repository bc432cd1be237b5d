"""Response formatting bridge -- maps raw response bytes to the output system.

:func:`format_body` is the pure part: JSON bodies are re-indented, anything
else is shown exactly as received. A non-JSON body is a normal response, not
an error. :func:`format_api_response` hands the result to the global
:class:`~ashttp.output.OutputManager`.
"""

from __future__ import annotations

import json

from ashttp.output import get_output

INDENT = 2


def _render(raw: bytes) -> tuple[str, bool]:
    """Return the display text for *raw* and whether it was JSON."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return raw.decode("utf-8", errors="replace"), False
    return json.dumps(data, indent=INDENT, ensure_ascii=False), True


def format_body(raw: bytes) -> str:
    """Return *raw* pretty-printed if it is JSON, otherwise decoded verbatim.

    Example::

        format_body(b'{"a":1}')   # '{\\n  "a": 1\\n}'
        format_body(b"not json")  # 'not json'
    """
    return _render(raw)[0]


def format_api_response(raw: bytes) -> None:
    """Render a response body to stdout via the global output manager."""
    text, is_json = _render(raw)
    get_output().print_body(text, is_json=is_json)

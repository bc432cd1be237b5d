"""HTTP client module for ashttp.

Splits the trip from parsed command line to printed response into small,
separately testable steps:

- :mod:`ashttp.client.url` -- path and query-string composition.
- :mod:`ashttp.client.builder` -- header merging and
  :class:`~ashttp.models.RequestDescriptor` assembly.
- :mod:`ashttp.client.executor` -- :class:`HttpExecutor`, a thin
  :mod:`httpx` wrapper that sends one request.
- :mod:`ashttp.client.response` -- pretty-printing of the response body.

Example::

    from ashttp.client import HttpExecutor, build_request, format_body

    descriptor = build_request(action, entry)
    with HttpExecutor() as executor:
        print(format_body(executor.execute(descriptor)))
"""

from ashttp.client.builder import build_request, merge_headers
from ashttp.client.executor import HttpExecutor, execute
from ashttp.client.response import format_api_response, format_body
from ashttp.client.url import compose_path

__all__ = [
    "HttpExecutor",
    "build_request",
    "compose_path",
    "execute",
    "format_api_response",
    "format_body",
    "merge_headers",
]

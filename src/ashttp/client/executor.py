"""Send a :class:`~ashttp.models.RequestDescriptor` and return the raw body.

:class:`HttpExecutor` wraps :class:`httpx.Client` with the transport's own
defaults: no retries, the default timeout, and httpx's redirect policy.
Exactly one request is sent per call. Every HTTP status is a valid answer;
the body is returned whatever the status, and the status line goes to the
diagnostics channel.

See Also:
    :func:`ashttp.client.response.format_body` for rendering the result.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ashttp.client.builder import check_headers, encode_body
from ashttp.exceptions import NetworkError, RequestBuildError
from ashttp.models import RequestDescriptor
from ashttp.output import get_output


class HttpExecutor:
    """Blocking HTTP executor. Must be used as a context manager.

    Args:
        transport: Optional httpx transport, e.g. :class:`httpx.MockTransport`
            in tests. ``None`` uses the default network transport.

    Example::

        with HttpExecutor() as executor:
            raw = executor.execute(descriptor)
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def __enter__(self) -> HttpExecutor:
        self._client = httpx.Client(transport=self._transport)
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    def execute(self, descriptor: RequestDescriptor) -> bytes:
        """Send *descriptor* and return the response body bytes.

        Raises:
            RequestBuildError: If the URL or a header is unusable, or the
                body cannot be encoded.
            NetworkError: On connection, timeout, or read failures.
        """
        assert self._client is not None, "Executor not initialised -- use as context manager"

        output = get_output()
        check_headers(descriptor.headers)
        content = encode_body(descriptor.body)
        method = descriptor.method.value

        output.debug(f"{method} {descriptor.url}")
        try:
            response = self._client.request(
                method,
                descriptor.url,
                headers=descriptor.headers,
                content=content,
            )
        except httpx.InvalidURL as exc:
            raise RequestBuildError(f"invalid url '{descriptor.url}': {exc}") from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"failed to execute request: {exc}") from exc

        status_line = f"HTTP {response.status_code} {response.reason_phrase or ''}".rstrip()
        if response.status_code >= 400:
            output.warning(status_line)
        else:
            output.debug(status_line)
        return response.content


def execute(
    descriptor: RequestDescriptor,
    transport: Optional[httpx.BaseTransport] = None,
) -> bytes:
    """Send *descriptor* with a short-lived :class:`HttpExecutor`."""
    with HttpExecutor(transport=transport) as executor:
        return executor.execute(descriptor)

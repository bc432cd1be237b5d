"""Canonical Pydantic models shared across all ashttp modules.

Every other module imports its data shapes from here. The models follow the
life of a single invocation:

* :class:`AliasEntry` -- one alias loaded from the JSON config file.
* :class:`ParsedAction` -- what the user asked for, built from raw tokens by
  :func:`~ashttp.tokenizer.parse_action`.
* :class:`RequestDescriptor` -- the ready-to-send request produced by
  :func:`~ashttp.client.builder.build_request`.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HTTPMethod(str, enum.Enum):
    """HTTP methods ashttp is willing to send.

    Only ``GET`` and ``DELETE`` are accepted.
    """

    GET = "GET"
    DELETE = "DELETE"


# --- Configuration ---


class AliasEntry(BaseModel):
    """A named endpoint: base URL plus headers sent with every request.

    Serialised in the config file as::

        {"httpbin": {"url": "https://httpbin.dev/anything",
                     "defaultHeaders": {"authorization": "123"}}}

    The alias name is the key of the outer object; it is copied into
    :attr:`name` when the store loads the file.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(default="", exclude=True)
    url: str = Field(description="Base URL that path components are appended to")
    default_headers: dict[str, str] = Field(
        default_factory=dict,
        alias="defaultHeaders",
        description="Headers applied before request-level headers",
    )

    @field_validator("default_headers", mode="before")
    @classmethod
    def _null_headers(cls, value: Any) -> Any:
        return {} if value is None else value


# --- Invocation ---


class ParsedAction(BaseModel):
    """Structured form of one command line, built once and never mutated."""

    model_config = ConfigDict(frozen=True)

    alias: str
    method: HTTPMethod = HTTPMethod.GET
    path_components: list[str] = Field(default_factory=list)
    options: dict[str, str] = Field(default_factory=dict)


class RequestDescriptor(BaseModel):
    """Everything needed to send a request, independent of the transport.

    ``body`` stays ``None`` for requests built from the command line: flags
    travel in the query string. When set, it is sent as JSON.
    """

    url: str
    method: HTTPMethod
    headers: dict[str, str] = Field(default_factory=dict)
    body: Optional[Any] = None

"""Turn raw command-line tokens into a :class:`~ashttp.models.ParsedAction`.

The grammar is positional::

    <alias> <method> [path-components...] [--flag value]...

Tokens are scanned left to right. Anything before the first ``--``-prefixed
token is a path component. A ``--name`` token starts *flag mode*: the flag
is recorded with an empty value, and the next non-flag token becomes its
value. Flag mode never ends; a later bare token overwrites the value of the
most recent flag rather than becoming a path component again::

    >>> parse_action(["api", "get", "users", "--page", "2", "3"]).options
    {'page': '3'}
"""

from __future__ import annotations

from typing import Sequence

from ashttp.exceptions import InvalidArgumentFormatError, UnsupportedMethodError
from ashttp.models import HTTPMethod, ParsedAction

FLAG_PREFIX = "--"

ACCEPTED_METHODS = tuple(method.value.lower() for method in HTTPMethod)


def parse_method(token: str) -> HTTPMethod:
    """Return the :class:`HTTPMethod` named by *token*, ignoring case.

    Raises:
        UnsupportedMethodError: If *token* is not an accepted method.
    """
    try:
        return HTTPMethod(token.upper())
    except ValueError:
        raise UnsupportedMethodError(
            f"unsupported http method '{token}', only {', '.join(ACCEPTED_METHODS)} are supported"
        ) from None


def parse_action(tokens: Sequence[str], with_method: bool = True) -> ParsedAction:
    """Build a :class:`ParsedAction` from the tokens following the program's own options.

    Args:
        tokens: Raw tokens, alias first.
        with_method: When ``True`` the second token is the HTTP method.
            When ``False`` the method is always ``GET`` and every token after
            the alias is a path or flag token.

    Returns:
        The parsed action.

    Raises:
        InvalidArgumentFormatError: If the alias (or method) is missing.
        UnsupportedMethodError: If the method token is not GET or DELETE.
    """
    required = 2 if with_method else 1
    if len(tokens) < required:
        raise InvalidArgumentFormatError(
            f"expected at least {required} arguments, got {len(tokens)}"
        )

    alias = tokens[0]
    method = parse_method(tokens[1]) if with_method else HTTPMethod.GET

    path_components: list[str] = []
    options: dict[str, str] = {}
    current_flag: str | None = None

    for token in tokens[required:]:
        if token.startswith(FLAG_PREFIX):
            current_flag = token[len(FLAG_PREFIX):]
            options[current_flag] = ""
        elif current_flag is not None:
            options[current_flag] = token
        else:
            path_components.append(token)

    return ParsedAction(
        alias=alias,
        method=method,
        path_components=path_components,
        options=options,
    )

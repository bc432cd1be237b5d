"""Exception hierarchy for ashttp.

All exceptions inherit from :class:`AshttpError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`ashttp.exit_codes`.
The command in :mod:`ashttp.app` catches ``AshttpError``, prints a single
``[error] <message>`` line and exits with the error's code, except for
:class:`InvalidArgumentFormatError`, which shows usage help instead.

Subclass hierarchy::

    AshttpError (exit 1)
    +-- InvalidArgumentFormatError  (usage shown, exit 0)
    +-- UnsupportedMethodError
    +-- ConfigError
    |   +-- ConfigParseError
    +-- AliasNotFoundError
    +-- RequestBuildError
    +-- NetworkError
"""

from ashttp.exit_codes import EXIT_GENERIC_FAILURE, EXIT_SUCCESS


class AshttpError(Exception):
    """Base exception for all ashttp errors.

    Args:
        message: Human-readable error description printed after ``[error]``.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidArgumentFormatError(AshttpError):
    """Raised when too few tokens are given to describe a request.

    Kept distinct from other errors so the CLI can print usage help rather
    than a generic failure.
    """

    exit_code = EXIT_SUCCESS


class UnsupportedMethodError(AshttpError):
    """Raised when the method token is outside the accepted set (GET, DELETE)."""


class ConfigError(AshttpError):
    """Raised when the config file cannot be read or written."""


class ConfigParseError(ConfigError):
    """Raised when the config file exists but its content is malformed."""


class AliasNotFoundError(AshttpError):
    """Raised when an alias has no entry in the loaded configuration."""


class RequestBuildError(AshttpError):
    """Raised when a request cannot be assembled (bad header, unserialisable body, bad URL)."""


class NetworkError(AshttpError):
    """Raised on transport-level failures while sending or reading the response."""

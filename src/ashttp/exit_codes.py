"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

ashttp keeps the surface small: a run either succeeds, fails for any
reason (bad method, unknown alias, broken config, network failure), or is
interrupted by the user. Shell wrappers only need to distinguish those
three outcomes.

Example::

    $ ashttp nope get users
    [error] no config found for nope, make sure it exists at ...
    $ echo $?
    1
"""

EXIT_SUCCESS = 0
"""The command completed successfully (also used when usage help is shown)."""

EXIT_GENERIC_FAILURE = 1
"""Any error reported as an ``[error]`` line."""

EXIT_CANCELLED = 130
"""The user interrupted the run with Ctrl-C."""

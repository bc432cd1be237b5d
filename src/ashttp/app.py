"""Typer command and console-script entry point for ashttp.

The whole CLI is a single Typer command. Program options (``--config``,
``--header``, ``--dry-run``, ...) must come before the alias; from the alias
onwards every token is passed untouched to
:func:`~ashttp.tokenizer.parse_action`, so ``--include`` after the alias is a
query flag, not a program option::

    ashttp -H "x-trace: 1" httpbin get users 456 --include posts

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers, invokes the Typer app, and
writes a crash log for any exception that is not an
:class:`~ashttp.exceptions.AshttpError`.

See Also:
    :mod:`ashttp.config`: Config path resolution and the alias store.
    :mod:`ashttp.output`: Output formatting initialised in :func:`run`.
"""

from __future__ import annotations

import platform
import signal
import sys
import traceback
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

import typer

from ashttp import __version__
from ashttp.exit_codes import EXIT_CANCELLED, EXIT_GENERIC_FAILURE, EXIT_SUCCESS

if TYPE_CHECKING:
    from ashttp.config import AliasStore
    from ashttp.models import RequestDescriptor

CLI_FORMAT = "<alias> <method> [path-components...] [--option value]"

app = typer.Typer(
    name="ashttp",
    help="Call named HTTP endpoints with short alias-based commands.",
    add_completion=False,
    rich_markup_mode="rich",
)


def version_info() -> str:
    """Return the one-line version string shown by ``--version``."""
    return f"ashttp {__version__} (python {platform.python_version()})"


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(version_info())
        raise typer.Exit()


@app.command(
    context_settings={
        "allow_interspersed_args": False,
        "ignore_unknown_options": True,
    },
)
def run(
    tokens: Optional[list[str]] = typer.Argument(
        None,
        metavar="ALIAS METHOD [PATH]... [--FLAG VALUE]...",
        help="Alias, HTTP method (get or delete), path components and query flags.",
        show_default=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Alias config file (default: ~/.config/ashttp/config.json)."
    ),
    header: Optional[list[str]] = typer.Option(
        None, "--header", "-H", help="Extra request header 'Name: value'. Repeatable."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the request instead of sending it."
    ),
    list_aliases: bool = typer.Option(
        False, "--aliases", help="List configured aliases and exit."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Enable debug output."
    ),
) -> None:
    """Send one request to an aliased endpoint and print the response body.

    Runs the pipeline tokens -> :class:`~ashttp.models.ParsedAction` ->
    alias lookup -> :class:`~ashttp.models.RequestDescriptor` -> HTTP call
    -> formatted body. Too few tokens print usage and exit 0; any other
    :class:`~ashttp.exceptions.AshttpError` prints ``[error] <message>`` and
    exits with the error's code.
    """
    from ashttp.client import build_request, execute, format_api_response
    from ashttp.client.builder import parse_headers
    from ashttp.config import AliasStore, resolve_config_path
    from ashttp.exceptions import AshttpError, InvalidArgumentFormatError
    from ashttp.output import OutputFormat, OutputManager, error, print_data, set_output
    from ashttp.tokenizer import parse_action

    output = OutputManager(
        format=OutputFormat.PLAIN if plain_output else OutputFormat.AUTO,
        no_color=no_color,
        quiet=quiet,
        verbose=verbose,
    )
    set_output(output)

    try:
        store = AliasStore(resolve_config_path(config))
        if list_aliases:
            _print_aliases(store)
            return

        action = parse_action(tokens or [])
        request_headers = parse_headers(header or [])
        entry = store.resolve(action.alias)
        descriptor = build_request(action, entry, request_headers)

        if dry_run:
            _print_dry_run(descriptor)
            return

        raw = execute(descriptor)
    except InvalidArgumentFormatError:
        print_data(f"usage: ashttp {CLI_FORMAT}")
        raise typer.Exit(code=EXIT_SUCCESS)
    except AshttpError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code)

    format_api_response(raw)


def _print_aliases(store: AliasStore) -> None:
    """Print every configured alias as a table."""
    from ashttp.output import info, print_table

    info(f"Aliases from: {store.path}")
    rows = [
        [
            entry.name,
            entry.url,
            ", ".join(f"{k}: {v}" for k, v in entry.default_headers.items()),
        ]
        for entry in store.aliases()
    ]
    print_table(["ALIAS", "URL", "HEADERS"], rows, title="Aliases")


def _print_dry_run(descriptor: RequestDescriptor) -> None:
    """Print request details to stderr without sending anything."""
    from ashttp.output import info

    info(f"[dry-run] {descriptor.method.value} {descriptor.url}")
    for key, value in descriptor.headers.items():
        info(f"  Header: {key}: {value}")


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_CANCELLED)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from ashttp.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``ashttp`` console script.

    Unhandled exceptions that escape the command produce a crash log and a
    generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_CANCELLED)
    except Exception as exc:
        from ashttp.exceptions import AshttpError
        from ashttp.output import error

        if isinstance(exc, AshttpError):
            error(str(exc))
            sys.exit(exc.exit_code)
        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)

"""ashttp -- call named HTTP endpoints with short alias-based commands.

Instead of spelling out a full ``curl`` invocation, users register an
*alias* (a base URL plus default headers) in a JSON config file and then
address it by name, appending path segments and ``--flag value`` query
arguments::

    ashttp httpbin get users 456 --include posts
    # GET https://httpbin.dev/anything/users/456?include=posts

The response body is pretty-printed when it is JSON and echoed verbatim
otherwise.

Modules:
    app: Typer command and console-script entry point.
    tokenizer: Turns raw command-line tokens into a :class:`ParsedAction`.
    config: XDG-aware config paths and the alias store.
    models: Pydantic models shared across the package.
    client: URL composition, request building, execution, and formatting.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric process exit codes.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"

"""Configuration management with XDG paths, atomic writes, and the alias store.

This module handles all persistent state for ashttp:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.ashttp/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Config path resolution** -- :func:`resolve_config_path` picks the alias
  file from the ``--config`` flag, the ``ASHTTP_CONFIG`` environment
  variable, or the default location, in that order.
* **Alias store** -- :class:`AliasStore` loads the alias file once, creates
  it with a single ``httpbin`` entry on first use, and resolves aliases to
  :class:`~ashttp.models.AliasEntry` objects.

All file writes use an atomic temp-file-then-rename strategy
(:func:`_atomic_write`) so that two first runs racing each other cannot leave
a half-written file behind.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ashttp.exceptions import AliasNotFoundError, ConfigError, ConfigParseError
from ashttp.models import AliasEntry
from ashttp.output import debug, info

_APP_NAME = "ashttp"
_CONFIG_FILENAME = "config.json"
_CONFIG_ENV_VAR = "ASHTTP_CONFIG"

DEFAULT_ALIASES: dict[str, AliasEntry] = {
    "httpbin": AliasEntry(
        name="httpbin",
        url="https://httpbin.dev/anything",
        default_headers={"authorization": "123"},
    ),
}


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory without creating it.

    ``$XDG_CONFIG_HOME/ashttp/`` (default ``~/.config/ashttp/``) on every
    platform.
    """
    return _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/ashttp/`` (default ``~/.local/share/ashttp/``).
    On macOS/Windows: ``~/.ashttp/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def default_config_path() -> Path:
    """Path of the alias file when nothing overrides it."""
    return get_config_dir() / _CONFIG_FILENAME


def resolve_config_path(cli_path: Optional[str] = None) -> Path:
    """Pick the alias file to use.

    Precedence (high to low):
        1. ``--config`` CLI flag
        2. ``ASHTTP_CONFIG`` environment variable
        3. :func:`default_config_path`
    """
    if cli_path:
        return Path(cli_path).expanduser()
    env_path = os.environ.get(_CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return default_config_path()


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is removed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


def dump_aliases(entries: dict[str, AliasEntry]) -> str:
    """Serialise alias entries to the on-disk JSON layout (2-space indent)."""
    data = {
        name: entry.model_dump(mode="json", by_alias=True)
        for name, entry in entries.items()
    }
    return json.dumps(data, indent=2)


def parse_aliases(text: str, path: Path) -> dict[str, AliasEntry]:
    """Parse the alias file content.

    Raises:
        ConfigParseError: If *text* is not a JSON object of valid entries.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(f"Invalid config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Invalid config at {path}: expected a JSON object of aliases"
        )

    entries: dict[str, AliasEntry] = {}
    for name, raw in data.items():
        if not isinstance(raw, dict):
            raise ConfigParseError(
                f"Invalid config at {path}: alias '{name}' must be an object"
            )
        try:
            entries[name] = AliasEntry.model_validate({**raw, "name": name})
        except ValidationError as exc:
            raise ConfigParseError(
                f"Invalid config at {path}: alias '{name}': {exc}"
            ) from exc
    return entries


# --- Alias store ---


class AliasStore:
    """Read-only view of the alias file, created with defaults on first use.

    The file is read at most once per instance; entries never change at
    runtime.

    Args:
        path: Location of the JSON alias file. Usually the result of
            :func:`resolve_config_path`.

    Example::

        store = AliasStore(resolve_config_path())
        entry = store.resolve("httpbin")
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._entries: Optional[dict[str, AliasEntry]] = None

    def ensure_exists(self) -> bool:
        """Write the default alias file if none exists.

        Returns:
            ``True`` if the file was created by this call.

        Raises:
            ConfigError: If the file cannot be written.
        """
        if self.path.exists():
            return False
        try:
            _atomic_write(self.path, dump_aliases(DEFAULT_ALIASES))
        except OSError as exc:
            raise ConfigError(
                f"Cannot create default config at {self.path}: {exc}"
            ) from exc
        info(f"Created default config at {self.path}")
        return True

    def load(self) -> dict[str, AliasEntry]:
        """Return all aliases, reading (and if needed creating) the file once.

        Raises:
            ConfigError: If the file cannot be created or read.
            ConfigParseError: If the file content is malformed.
        """
        if self._entries is None:
            self.ensure_exists()
            debug(f"Loading aliases from {self.path}")
            try:
                text = self.path.read_text(encoding="utf-8")
            except OSError as exc:
                raise ConfigError(f"Cannot read config at {self.path}: {exc}") from exc
            self._entries = parse_aliases(text, self.path)
        return self._entries

    def aliases(self) -> list[AliasEntry]:
        """Return every configured alias, sorted by name."""
        entries = self.load()
        return [entries[name] for name in sorted(entries)]

    def resolve(self, alias: str) -> AliasEntry:
        """Look up *alias* by exact name.

        Raises:
            AliasNotFoundError: If the alias is not configured. The message
                names the alias and the config path so the user can edit it.
        """
        entries = self.load()
        if alias not in entries:
            raise AliasNotFoundError(
                f"no config found for {alias}, make sure it exists at {self.path}"
            )
        return entries[alias]

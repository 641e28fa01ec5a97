"""System PATH probe.

Responsibilities:
- Query the PATH a real shell would see by spawning a platform command.
- Augment a successful probe with well-known per-user tool directories.

GUI-launched processes on macOS bypass shell startup files, so the macOS probe
runs bash in login mode; other UNIX hosts use a plain non-login invocation.
"""

from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath

from ..errors import PathSourceError
from ..host import HostEnvironment
from ..logger import Logger

WINDOWS_PATH_COMMAND = ("cmd", "/d", "/c", "echo %PATH%")
MACOS_PATH_COMMAND = ("/bin/bash", "-l", "-c", "echo $PATH")
UNIX_PATH_COMMAND = ("/bin/bash", "-c", "echo $PATH")

_UNEXPANDED_WINDOWS_PATH = "%PATH%"

_HOME_RELATIVE_UNIX_DIRS = (
    ".pyenv/shims",
    ".local/bin",
    "bin",
    ".pub-cache/bin",
)
_MACOS_ABSOLUTE_DIRS = ("/opt/homebrew/sbin", "/opt/homebrew/bin")
_LINUX_ABSOLUTE_DIRS = (
    "/home/linuxbrew/.linuxbrew/sbin",
    "/home/linuxbrew/.linuxbrew/bin",
)
_HOME_RELATIVE_WINDOWS_DIRS = (
    ".pyenv\\pyenv-win\\shims",
    ".local\\bin",
    "scoop\\shims",
    "AppData\\Local\\Pub\\Cache\\bin",
)


def probe_command_for(host: HostEnvironment) -> tuple[str, ...]:
    """Return the PATH-printing command for the host platform."""

    if host.is_windows:
        return WINDOWS_PATH_COMMAND
    if host.is_macos:
        return MACOS_PATH_COMMAND
    return UNIX_PATH_COMMAND


def supplementary_dirs(host: HostEnvironment, home_dir: str) -> list[str]:
    """Return well-known tool directories for the host, existing or not."""

    if host.is_windows:
        home = PureWindowsPath(home_dir)
        return [str(home / relative) for relative in _HOME_RELATIVE_WINDOWS_DIRS]

    home = PurePosixPath(home_dir)
    directories = [str(home / relative) for relative in _HOME_RELATIVE_UNIX_DIRS]
    if host.is_macos:
        directories.extend(_MACOS_ABSOLUTE_DIRS)
    else:
        directories.extend(_LINUX_ABSOLUTE_DIRS)
    return directories


class SystemPathProbe:
    """Best-effort probe of the inherited PATH through a spawned command."""

    def __init__(self, host: HostEnvironment, logger: Logger, timeout_ms: int) -> None:
        self._host = host
        self._logger = logger
        self._timeout_ms = timeout_ms

    def probe(self) -> str | None:
        """Return the probed PATH plus supplementary directories, or `None`."""

        command = probe_command_for(self._host)
        try:
            system_path = self._host.run_command(command, self._timeout_ms).strip()
        except PathSourceError as exc:
            self._logger.debug("Failed to get system PATH:", exc)
            return None

        if not system_path or system_path == _UNEXPANDED_WINDOWS_PATH:
            return None

        home_dir = self._host.home_dir()
        if home_dir:
            extras = supplementary_dirs(self._host, home_dir)
            system_path = self._host.path_separator.join([system_path, *extras])
        return system_path

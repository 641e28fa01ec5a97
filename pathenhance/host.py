"""Process and operating-system boundary used by PATH resolution.

Responsibilities:
- Identify the host platform (Windows, macOS, other UNIX).
- Read and write process environment variables.
- Run a probe command with a bounded timeout and capture its stdout.
- Answer filesystem existence checks and read shell startup files.

Resolver components only talk to the host through `HostEnvironment`, so tests
can simulate another platform or environment without touching `sys.platform`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
import subprocess
import sys
from typing import MutableMapping, Sequence

from .errors import CommandExecutionError
from .parsing import normalize_optional_string

WINDOWS_PLATFORM = "win32"
MACOS_PLATFORM = "darwin"


@dataclass(slots=True)
class HostEnvironment:
    """Host platform identity and access to environment, processes, and files.

    Attributes:
        platform: Platform identifier in `sys.platform` form.
        environ: Mutable environment mapping; defaults to `os.environ`.
    """

    platform: str = field(default_factory=lambda: sys.platform)
    environ: MutableMapping[str, str] = field(default_factory=lambda: os.environ)

    @property
    def is_windows(self) -> bool:
        """Return whether the host is Windows."""

        return self.platform == WINDOWS_PLATFORM

    @property
    def is_macos(self) -> bool:
        """Return whether the host is macOS."""

        return self.platform == MACOS_PLATFORM

    @property
    def path_separator(self) -> str:
        """Return the PATH list separator for this host."""

        return ";" if self.is_windows else ":"

    def getenv(self, name: str) -> str | None:
        """Return a non-empty environment value, or `None` when unset or empty."""

        value = self.environ.get(name)
        if not value:
            return None
        return value

    def home_dir(self) -> str | None:
        """Return the user's home directory from `HOME`, then `USERPROFILE`."""

        return normalize_optional_string(self.environ.get("HOME")) or normalize_optional_string(
            self.environ.get("USERPROFILE")
        )

    def current_path(self) -> str:
        """Return the process PATH value, or an empty string when unset."""

        return self.environ.get("PATH", "")

    def set_path(self, value: str) -> None:
        """Overwrite the process PATH value."""

        self.environ["PATH"] = value

    def run_command(self, command: Sequence[str], timeout_ms: int) -> str:
        """Run a command without an outer shell and return its stdout.

        Raises:
            CommandExecutionError: On spawn failure, timeout, or non-zero exit.
        """

        argv = tuple(command)
        try:
            result = subprocess.run(
                list(argv),
                check=False,
                capture_output=True,
                text=True,
                timeout=timeout_ms / 1000,
            )
        except subprocess.TimeoutExpired as exc:
            raise CommandExecutionError(argv, f"timed out after {timeout_ms} ms") from exc
        except (OSError, ValueError) as exc:
            raise CommandExecutionError(argv, str(exc)) from exc

        if result.returncode != 0:
            details = (result.stderr or "").strip() or f"exit code {result.returncode}"
            raise CommandExecutionError(argv, details)
        return result.stdout or ""

    def path_exists(self, path: str) -> bool:
        """Return whether a path exists; stat failures count as missing."""

        try:
            return Path(path).exists()
        except (OSError, ValueError):
            return False

    def is_file(self, path: Path) -> bool:
        """Return whether a regular file exists at `path`."""

        try:
            return path.is_file()
        except (OSError, ValueError):
            return False

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file in full."""

        return path.read_text(encoding="utf-8")

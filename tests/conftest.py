"""Shared pytest fixtures for the pathenhance test suite."""

from __future__ import annotations

from pathlib import Path
import subprocess
from typing import Callable

import pytest

from pathenhance import host as host_module
from pathenhance.host import HostEnvironment


class RecordingLogger:
    """In-memory logger capturing `(level, message, args)` entries."""

    def __init__(self) -> None:
        """Initialize an empty record list."""

        self.records: list[tuple[str, str, tuple[object, ...]]] = []

    def debug(self, message: str, *args: object) -> None:
        self.records.append(("debug", message, args))

    def info(self, message: str, *args: object) -> None:
        self.records.append(("info", message, args))

    def warning(self, message: str, *args: object) -> None:
        self.records.append(("warning", message, args))

    def error(self, message: str, *args: object) -> None:
        self.records.append(("error", message, args))

    def messages(self, level: str) -> list[str]:
        """Return recorded messages for one level."""

        return [message for recorded_level, message, _ in self.records if recorded_level == level]


class CommandRecorder:
    """Fake `subprocess.run` returning scripted output and recording calls."""

    def __init__(self) -> None:
        """Initialize with a successful empty result."""

        self.calls: list[dict[str, object]] = []
        self.stdout = ""
        self.returncode = 0
        self.error: BaseException | None = None

    def __call__(self, args: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        self.calls.append({"args": list(args), **kwargs})
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(
            args=args,
            returncode=self.returncode,
            stdout=self.stdout,
            stderr="" if self.returncode == 0 else "boom",
        )


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Provide a fresh recording logger."""

    return RecordingLogger()


@pytest.fixture
def command_recorder(monkeypatch: pytest.MonkeyPatch) -> CommandRecorder:
    """Replace `subprocess.run` as seen by the host boundary."""

    recorder = CommandRecorder()
    monkeypatch.setattr(host_module.subprocess, "run", recorder)
    return recorder


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Provide an empty fake home directory."""

    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def make_host(home_dir: Path) -> Callable[..., HostEnvironment]:
    """Build a simulated host with an isolated environment mapping."""

    def _make_host(
        platform: str = "linux",
        env: dict[str, str] | None = None,
        with_home: bool = True,
    ) -> HostEnvironment:
        environ: dict[str, str] = {"PATH": "/usr/bin:/bin"}
        if with_home:
            environ["HOME"] = str(home_dir)
        if env:
            environ.update(env)
        return HostEnvironment(platform=platform, environ=environ)

    return _make_host

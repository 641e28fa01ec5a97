"""Diagnostic logging for PATH resolution.

Responsibilities:
- Define the `Logger` capability consumed by resolver components.
- Provide a `loguru`-backed console logger that is silent until enabled.
"""

from __future__ import annotations

from itertools import count
from typing import Protocol, TextIO

from loguru import logger as _loguru_logger

_SINK_TOKENS = count(1)


class Logger(Protocol):
    """Protocol for severity-leveled diagnostics with optional auxiliary values."""

    def debug(self, message: str, *args: object) -> None:
        """Emit a debug-level diagnostic."""

    def info(self, message: str, *args: object) -> None:
        """Emit an info-level diagnostic."""

    def warning(self, message: str, *args: object) -> None:
        """Emit a warning-level diagnostic."""

    def error(self, message: str, *args: object) -> None:
        """Emit an error-level diagnostic."""


def format_log_line(level: str, message: str, args: tuple[object, ...]) -> str:
    """Render one `[LEVEL] message arg...` line."""

    parts = [f"[{level}] {message}"]
    parts.extend(str(arg) for arg in args)
    return " ".join(parts)


class ConsoleLogger:
    """Console logger backed by `loguru`, disabled by default."""

    def __init__(self, enabled: bool = False, sink: TextIO | None = None) -> None:
        """Initialize logger state and attach a dedicated sink when one is given."""

        self._enabled = enabled
        self._handler_id: int | None = None
        if sink is None:
            self._logger = _loguru_logger.bind(component="pathenhance")
            return

        token = next(_SINK_TOKENS)
        self._logger = _loguru_logger.bind(component="pathenhance", sink_token=token)
        self._handler_id = _loguru_logger.add(
            sink,
            format="{message}",
            level="DEBUG",
            colorize=False,
            filter=lambda record: record["extra"].get("sink_token") == token,
        )

    @property
    def enabled(self) -> bool:
        """Return whether diagnostics are currently emitted."""

        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable output after construction."""

        self._enabled = enabled

    def close(self) -> None:
        """Detach the dedicated sink handler, if any."""

        if self._handler_id is not None:
            _loguru_logger.remove(self._handler_id)
            self._handler_id = None

    def _emit(self, level: str, label: str, message: str, args: tuple[object, ...]) -> None:
        if not self._enabled:
            return
        self._logger.opt(depth=2).log(level, format_log_line(label, message, args))

    def debug(self, message: str, *args: object) -> None:
        self._emit("DEBUG", "DEBUG", message, args)

    def info(self, message: str, *args: object) -> None:
        self._emit("INFO", "INFO", message, args)

    def warning(self, message: str, *args: object) -> None:
        self._emit("WARNING", "WARN", message, args)

    def error(self, message: str, *args: object) -> None:
        self._emit("ERROR", "ERROR", message, args)

"""Domain exceptions for PATH acquisition and CLI diagnostics."""

from __future__ import annotations


class PathSourceError(RuntimeError):
    """Raised when one PATH source cannot produce a value."""


class CommandExecutionError(PathSourceError):
    """Raised when the PATH probe command fails, times out, or cannot start."""

    def __init__(self, command: tuple[str, ...], detail: str) -> None:
        """Initialize a command-scoped execution error."""

        super().__init__(f"`{' '.join(command)}` failed: {detail}")
        self.command = command
        self.detail = detail


class PathEnhanceError(RuntimeError):
    """Raised when a CLI-facing stage (for example `config`) fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint

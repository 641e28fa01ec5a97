"""PATH enhancement facade.

Responsibilities:
- Resolve options defaults and wire the probe, parser, and merge stage.
- Expose the public operations (`get_system_path`, `get_path_from_shell_config`,
  `get_enhanced_system_path`, `apply_enhanced_path`) on one object.
- Provide one-call convenience functions for each operation.

Key types:
- `PathEnhancer`: resolution facade for one set of options.
"""

from __future__ import annotations

from dataclasses import replace

from .config import PathEnhancerOptions
from .host import HostEnvironment
from .logger import ConsoleLogger, Logger
from .models import (
    PATH_SOURCE_ENHANCED,
    PATH_SOURCE_FALLBACK,
    EnhanceResult,
    PathInfo,
    ShellConfigInfo,
)
from .resolver import PathMerger, ShellConfigParser, SystemPathProbe


class PathEnhancer:
    """Recover the full PATH for processes started outside an interactive shell."""

    def __init__(
        self,
        options: PathEnhancerOptions | None = None,
        host: HostEnvironment | None = None,
    ) -> None:
        """Resolve option defaults and bind to the host boundary."""

        resolved = options if options is not None else PathEnhancerOptions()
        resolved.validate()
        logger = resolved.logger
        if logger is None:
            logger = ConsoleLogger(enabled=resolved.debug)
            resolved = replace(resolved, logger=logger)
        self._options = resolved
        self._logger: Logger = logger
        self._host = host if host is not None else HostEnvironment()

    @property
    def options(self) -> PathEnhancerOptions:
        """Return options with all defaults resolved."""

        return self._options

    @property
    def logger(self) -> Logger:
        """Return the logger receiving diagnostics."""

        return self._logger

    @property
    def host(self) -> HostEnvironment:
        """Return the host boundary used for environment and process access."""

        return self._host

    def _merger(self) -> PathMerger:
        return PathMerger(self._host, self.logger, self._options.validate_paths)

    def _shell_config_parser(self) -> ShellConfigParser:
        return ShellConfigParser(self._host, self.logger)

    def get_system_path(self) -> str | None:
        """Return the PATH reported by a spawned shell, or `None` on failure."""

        return SystemPathProbe(self._host, self.logger, self._options.timeout_ms).probe()

    def get_path_from_shell_config(self) -> str | None:
        """Return the PATH directories declared in shell startup files, or `None`."""

        return self._shell_config_parser().parse_configs(self._host.home_dir())

    def get_enhanced_system_path(self) -> str:
        """Merge system and shell-config PATHs; fall back to the process PATH."""

        system_path = self.get_system_path()
        shell_path = self.get_path_from_shell_config()
        return self._merger().merge(system_path, shell_path)

    def apply_enhanced_path(self) -> str:
        """Write the enhanced PATH into the process environment and return it."""

        enhanced_path = self.get_enhanced_system_path()
        self._host.set_path(enhanced_path)
        self.logger.info("Enhanced PATH applied to process environment variables")
        return enhanced_path

    def enhance(self) -> EnhanceResult:
        """Apply the enhanced PATH and report what changed.

        `success` is false when neither source produced a value and the
        process PATH was kept as-is.
        """

        original_path = self._host.current_path()
        system_path = self.get_system_path()
        shell_path = self.get_path_from_shell_config()
        enhanced_path = self._merger().merge(system_path, shell_path)
        self._host.set_path(enhanced_path)
        self.logger.info("Enhanced PATH applied to process environment variables")

        separator = self._host.path_separator
        original_segments = set(original_path.split(separator))
        added = [
            segment
            for segment in dict.fromkeys(enhanced_path.split(separator))
            if segment and segment not in original_segments
        ]
        success = bool(system_path or shell_path)
        return EnhanceResult(
            success=success,
            original_path=original_path,
            enhanced_path=enhanced_path,
            added_path_count=len(added),
            error=None if success else "No PATH source produced a value; kept the process PATH.",
        )

    def inspect_path(self) -> PathInfo:
        """Resolve the enhanced PATH and report segment validity.

        The source is `fallback` when neither source produced a value and the
        process PATH stands in for the merged one.
        """

        system_path = self.get_system_path()
        shell_path = self.get_path_from_shell_config()
        merger = self._merger()
        value = merger.merge(system_path, shell_path)
        source = PATH_SOURCE_ENHANCED if system_path or shell_path else PATH_SOURCE_FALLBACK
        return merger.inspect(value, source)

    def describe_shell_configs(self) -> list[ShellConfigInfo]:
        """Report the candidate shell startup files for the current home."""

        return self._shell_config_parser().describe(self._host.home_dir())


def get_enhanced_path(options: PathEnhancerOptions | None = None) -> str:
    """Return the enhanced PATH without modifying the process."""

    return PathEnhancer(options).get_enhanced_system_path()


def apply_enhanced_path(options: PathEnhancerOptions | None = None) -> str:
    """Apply the enhanced PATH to the current process and return it."""

    return PathEnhancer(options).apply_enhanced_path()


def get_system_path(options: PathEnhancerOptions | None = None) -> str | None:
    """Return the probed system PATH, or `None`."""

    return PathEnhancer(options).get_system_path()


def get_shell_config_path(options: PathEnhancerOptions | None = None) -> str | None:
    """Return the PATH declared in shell startup files, or `None`."""

    return PathEnhancer(options).get_path_from_shell_config()

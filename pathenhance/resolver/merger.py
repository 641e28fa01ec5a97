"""Merge stage for PATH sources.

Responsibilities:
- Concatenate probe and shell-config results in acquisition order.
- De-duplicate segments keeping the first occurrence.
- Filter blank segments, leftover variable references, and (optionally)
  directories missing on disk.
- Fall back to the current process PATH when no source produced a value.
"""

from __future__ import annotations

from ..host import HostEnvironment
from ..logger import Logger
from ..models import PathInfo


class PathMerger:
    """Combine PATH sources into one validated value."""

    def __init__(self, host: HostEnvironment, logger: Logger, validate_paths: bool) -> None:
        self._host = host
        self._logger = logger
        self._validate_paths = validate_paths

    def merge(self, system_path: str | None, shell_path: str | None) -> str:
        """Return the merged PATH, or the process PATH when both sources are empty."""

        path_parts: list[str] = []
        if system_path:
            path_parts.append(system_path)
            self._logger.info("System PATH obtained:", system_path)
        if shell_path:
            path_parts.append(shell_path)
            self._logger.info("Shell configuration PATH obtained:", shell_path)

        if not path_parts:
            fallback_path = self._host.current_path()
            self._logger.warning("Using fallback PATH from process environment:", fallback_path)
            return fallback_path

        separator = self._host.path_separator
        combined = separator.join(path_parts).split(separator)
        valid_paths = [
            segment for segment in dict.fromkeys(combined) if self._keep_segment(segment)
        ]

        final_path = separator.join(valid_paths)
        self._logger.info("Enhanced PATH created:", final_path)
        return final_path

    def _keep_segment(self, segment: str) -> bool:
        if not segment.strip():
            return False
        if "$" in segment:
            self._logger.debug(f"Discarding path with unresolved variables: {segment}")
            return False
        if self._validate_paths:
            return self._host.path_exists(segment)
        return True

    def inspect(self, value: str, source: str) -> PathInfo:
        """Split `value` into segments and report which exist on disk."""

        paths = tuple(segment for segment in value.split(self._host.path_separator) if segment.strip())
        invalid_paths = tuple(segment for segment in paths if not self._host.path_exists(segment))
        return PathInfo(
            value=value,
            source=source,
            paths=paths,
            valid_path_count=len(paths) - len(invalid_paths),
            invalid_paths=invalid_paths,
        )

"""PATH extraction from shell startup files.

Responsibilities:
- Find `export PATH=...` statements in the user's shell startup files.
- Resolve `$NAME` / `${NAME}` references from the process environment, then
  from assignments in the same file.
- Drop PATH self-references and segments whose variables cannot be resolved.

This is pattern extraction, not shell interpretation: conditionals, loops,
`source` lines, and command substitution are not evaluated.
"""

from __future__ import annotations

from pathlib import Path
import re
from typing import Iterator

from ..host import HostEnvironment
from ..logger import Logger
from ..models import ShellConfigInfo

CONFIG_FILE_NAMES = (".zshrc", ".bashrc", ".bash_profile", ".profile")
_SHELL_TYPES = {
    ".zshrc": "zsh",
    ".bashrc": "bash",
    ".bash_profile": "bash",
    ".profile": "sh",
}

SHELL_PATH_SEPARATOR = ":"
_SELF_REFERENCES = frozenset({"$PATH", "${PATH}"})
_MAX_EXPANSION_DEPTH = 5

# Shared value grammar: "double", 'single', or bare up to whitespace/quote/semicolon.
_ASSIGNMENT_VALUE = r"""(?:"([^"\n]*)"|'([^'\n]*)'|([^\s"';]+))"""
_PATH_EXPORT = re.compile(r"\bexport[ \t]+PATH=" + _ASSIGNMENT_VALUE)
_VARIABLE_REFERENCE = re.compile(
    r"\$(?:\{([A-Za-z_][A-Za-z0-9_]*)\}|([A-Za-z_][A-Za-z0-9_]*))"
)
_COMMENT_LINE = re.compile(r"^[ \t]*#.*$", re.MULTILINE)


def _strip_comment_lines(content: str) -> str:
    """Blank out full-line comments while keeping line positions."""

    return _COMMENT_LINE.sub("", content)


def _assignment_value(match: re.Match[str]) -> str:
    """Return whichever quoting alternative of an assignment matched."""

    for group in match.groups():
        if group is not None:
            return group
    return ""


def _iter_path_exports(content: str) -> Iterator[str]:
    for match in _PATH_EXPORT.finditer(content):
        yield _assignment_value(match)


def find_variable_assignment(name: str, content: str) -> str | None:
    """Return the last non-blank value assigned to `name` in `content`.

    `export NAME=value` is recognized anywhere on a line (so
    `[ -d x ] && export NAME=x` counts), plain `NAME=value` only at line
    start; values may be quoted or unquoted. Later assignments shadow earlier
    ones, as they would when the file is sourced top to bottom.
    """

    pattern = re.compile(
        rf"(?:\bexport[ \t]+|^[ \t]*){re.escape(name)}=" + _ASSIGNMENT_VALUE,
        re.MULTILINE,
    )
    for match in reversed(list(pattern.finditer(content))):
        value = _assignment_value(match).strip()
        if value:
            return value
    return None


class ShellConfigParser:
    """Extract PATH contributions from the user's shell startup files."""

    def __init__(self, host: HostEnvironment, logger: Logger) -> None:
        self._host = host
        self._logger = logger

    @staticmethod
    def candidate_files(home_dir: str) -> list[Path]:
        """Return the startup files inspected for `home_dir`, in priority order."""

        home = Path(home_dir)
        return [home / name for name in CONFIG_FILE_NAMES]

    def parse_configs(self, home_dir: str | None) -> str | None:
        """Return the PATH directories declared in startup files, or `None`.

        Segments are collected file by file, assignment by assignment, and
        de-duplicated keeping the first occurrence. Any read failure abandons
        the whole operation.
        """

        if self._host.is_windows or not home_dir:
            return None

        collected: list[str] = []
        try:
            for config_path in self.candidate_files(home_dir):
                if not self._host.is_file(config_path):
                    continue
                content = _strip_comment_lines(self._host.read_text(config_path))
                for path_value in _iter_path_exports(content):
                    collected.extend(self.extract_segments(path_value, content, home_dir))
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.debug("Failed to read shell configuration files:", exc)
            return None

        unique_paths = list(dict.fromkeys(collected))
        if not unique_paths:
            return None
        return SHELL_PATH_SEPARATOR.join(unique_paths)

    def extract_segments(self, path_value: str, content: str, home_dir: str | None) -> list[str]:
        """Split one PATH value into resolved directories.

        `$PATH` / `${PATH}` self-references are dropped; segments with
        unresolvable variables are discarded.
        """

        segments: list[str] = []
        for raw_segment in path_value.split(SHELL_PATH_SEPARATOR):
            segment = raw_segment.strip()
            if not segment or segment in _SELF_REFERENCES:
                continue
            if "$" not in segment:
                segments.append(segment)
                continue
            resolved = self.resolve_segment(segment, content, home_dir)
            if resolved is not None:
                segments.append(resolved)
        return segments

    def resolve_segment(self, segment: str, content: str, home_dir: str | None) -> str | None:
        """Substitute every variable in `segment`, or return `None` if any is unknown.

        Values taken from the file may reference further variables; those are
        expanded again up to a fixed depth.
        """

        resolved = segment
        for _ in range(_MAX_EXPANSION_DEPTH):
            if "$" not in resolved:
                return resolved

            missing: list[str] = []

            def substitute(match: re.Match[str]) -> str:
                name = match.group(1) or match.group(2)
                value = self._lookup_variable(name, content, home_dir)
                if value is None:
                    missing.append(name)
                    return match.group(0)
                return value

            resolved = _VARIABLE_REFERENCE.sub(substitute, resolved)
            if missing:
                for name in dict.fromkeys(missing):
                    self._logger.debug(
                        f"Variable {name} not found, discarding path segment: {segment}"
                    )
                return None

        if "$" in resolved:
            self._logger.debug(f"Unable to fully expand path segment, discarding: {segment}")
            return None
        return resolved

    def _lookup_variable(self, name: str, content: str, home_dir: str | None) -> str | None:
        env_value = self._host.getenv(name)
        if env_value is not None:
            return env_value
        config_value = find_variable_assignment(name, content)
        if config_value is not None:
            return config_value
        if name == "HOME" and home_dir:
            return home_dir
        return None

    def describe(self, home_dir: str | None) -> list[ShellConfigInfo]:
        """Report existence and PATH statement counts for each candidate file."""

        if self._host.is_windows or not home_dir:
            return []

        infos: list[ShellConfigInfo] = []
        for config_path in self.candidate_files(home_dir):
            exists = self._host.is_file(config_path)
            definitions = 0
            if exists:
                try:
                    content = _strip_comment_lines(self._host.read_text(config_path))
                except (OSError, UnicodeDecodeError) as exc:
                    self._logger.debug(f"Failed to read {config_path}:", exc)
                else:
                    definitions = sum(1 for _ in _iter_path_exports(content))
            infos.append(
                ShellConfigInfo(
                    file_path=config_path,
                    exists=exists,
                    shell_type=_SHELL_TYPES[config_path.name],
                    path_definitions=definitions,
                )
            )
        return infos

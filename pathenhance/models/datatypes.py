"""Result records reported by PATH resolution.

Key types:
- `PathInfo`: one PATH value split into segments with validity counts.
- `EnhanceResult`: outcome of applying the enhanced PATH to the process.
- `ShellConfigInfo`: status of one candidate shell startup file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

PATH_SOURCE_FALLBACK = "fallback"
PATH_SOURCE_ENHANCED = "enhanced"


@dataclass(frozen=True, slots=True)
class PathInfo:
    """Segment-level view of one PATH value.

    Attributes:
        value: Raw separator-joined PATH value.
        source: `enhanced` for a merged value, `fallback` when the
            process PATH was kept because no source produced one.
        paths: Non-empty segments in order.
        valid_path_count: Number of segments that exist on disk.
        invalid_paths: Segments that do not exist on disk.
    """

    value: str
    source: str
    paths: tuple[str, ...] = field(default_factory=tuple)
    valid_path_count: int = 0
    invalid_paths: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class EnhanceResult:
    """Outcome of one apply operation.

    Attributes:
        success: Whether the enhanced PATH was written to the process.
        original_path: Process PATH before applying.
        enhanced_path: Process PATH after applying.
        added_path_count: Segments present after but not before.
        error: Failure description when `success` is false.
    """

    success: bool
    original_path: str
    enhanced_path: str
    added_path_count: int = 0
    error: str | None = None


@dataclass(frozen=True, slots=True)
class ShellConfigInfo:
    """Status of one candidate shell startup file."""

    file_path: Path
    exists: bool
    shell_type: str
    path_definitions: int = 0

"""Typed result records shared by resolver, facade, and CLI modules."""

from .datatypes import (
    PATH_SOURCE_ENHANCED,
    PATH_SOURCE_FALLBACK,
    EnhanceResult,
    PathInfo,
    ShellConfigInfo,
)

__all__ = [
    "PATH_SOURCE_ENHANCED",
    "PATH_SOURCE_FALLBACK",
    "EnhanceResult",
    "PathInfo",
    "ShellConfigInfo",
]

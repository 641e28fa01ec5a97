"""PATH acquisition strategies and the merge stage."""

from .merger import PathMerger
from .probe import SystemPathProbe
from .shell_config import ShellConfigParser

__all__ = ["PathMerger", "ShellConfigParser", "SystemPathProbe"]

"""Top-level package for pathenhance.

This package recovers the full executable search path (PATH) for processes
started outside an interactive shell, such as GUI applications. The main entry
point is `PathEnhancer`.
"""

from .config import OptionsLoader, PathEnhancerOptions
from .enhancer import (
    PathEnhancer,
    apply_enhanced_path,
    get_enhanced_path,
    get_shell_config_path,
    get_system_path,
)
from .host import HostEnvironment
from .logger import ConsoleLogger, Logger

__all__ = [
    "ConsoleLogger",
    "HostEnvironment",
    "Logger",
    "OptionsLoader",
    "PathEnhancer",
    "PathEnhancerOptions",
    "__version__",
    "apply_enhanced_path",
    "get_enhanced_path",
    "get_shell_config_path",
    "get_system_path",
]

__version__ = "0.1.0"
